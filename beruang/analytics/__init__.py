"""Aggregate reports over a ledger."""
from .summary import summarize
from .nett import nett
