"""Beruang — a finance ledger for bears and people with money."""
__version__ = "0.3.0"
