#!/usr/bin/env python3
"""
Beruang CLI — combine monthly sheets, summarize, and report net flow.

USAGE:
  python -m beruang.cli combine Kewangan.xlsx                      # All month sheets → Kewangan.parquet
  python -m beruang.cli combine Kewangan.xlsx --sheets Jan Feb     # Selected sheets
  python -m beruang.cli combine Kewangan.xlsx --format csv --output ledger.csv

  python -m beruang.cli summary Kewangan.parquet                   # Lifetime per account/currency
  python -m beruang.cli net Kewangan.parquet --group weekly        # Net flow per week

  python -m beruang.cli add 1250 Makan "Kedai Ali" --details "Nasi lemak" --date 2024-01-05
"""
from __future__ import annotations

import argparse
import sys
from datetime import date
from pathlib import Path

from beruang.config import CATEGORIES, DEFAULT_ACCOUNT, DEFAULT_CURRENCY, TRANSACTIONS_FILE, TRANSFER_CATEGORY
from beruang.data.errors import IngestError
from beruang.data.schemas import TimeGroup
from beruang.data.store import Ledger
from beruang.sinks import OutputFormat, render, write_output


def _banner(title: str) -> None:
    print("\n" + "=" * 70)
    print(f"  BERUANG — {title}")
    print("=" * 70)


def cmd_combine(args):
    """Concatenate monthly sheets into one snapshot."""
    _banner("COMBINE")
    ledger = Ledger.from_workbook(args.workbook, args.sheets)
    fmt = OutputFormat(args.format)
    out = Path(args.output) if args.output else Path(args.workbook).with_suffix(f".{fmt.value}")
    write_output(ledger.frame, out, fmt, ledger.header)
    print(f"\n  Period: {ledger.date_range()}")
    print(f"  Accounts: {', '.join(ledger.accounts()) or 'none'}")
    if ledger.dropped:
        print(f"  Incomplete rows skipped: {ledger.dropped:,}")
    print(f"  Saved {len(ledger):,} rows to: {out}\n")


def cmd_summary(args):
    """Lifetime sum / mean / max / min per account and currency."""
    from beruang.analytics.summary import SUMMARY_COLUMNS, summarize

    ledger = Ledger.load(args.snapshot)
    result = summarize(ledger)
    print(render(result, set(SUMMARY_COLUMNS)))


def cmd_net(args):
    """Net flow per time window, transfers excluded."""
    from beruang.analytics.nett import nett

    ledger = Ledger.load(args.snapshot)
    result = nett(ledger, TimeGroup(args.group), args.ignore)
    print(render(result, set(ledger.header.cost_columns)))


def cmd_add(args):
    """Append a single transaction to a CSV file."""
    from beruang.transactions import Transaction, append_transaction

    txn = Transaction.from_cents(
        total=args.total,
        category=args.category,
        participant=args.participant,
        details=args.details,
        date=args.date,
        account=args.account,
        currency=args.currency,
    )
    path = append_transaction(txn, Path(args.file))
    print(f"  {txn.date}  {txn.category:<14}{txn.total:>12} {txn.currency}  → {path}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Beruang — a finance ledger for bears and people with money",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command")

    # combine subcommand
    combine_parser = subparsers.add_parser("combine", help="Combine workbook sheets into one snapshot")
    combine_parser.add_argument("workbook", help="Path to the .xlsx workbook")
    combine_parser.add_argument("--sheets", nargs="+", help="Sheet names (default: every month sheet present)")
    combine_parser.add_argument("--format", choices=[f.value for f in OutputFormat], default="parquet",
                                help="Output format (default parquet)")
    combine_parser.add_argument("--output", help="Output path (default: workbook name with new suffix)")
    combine_parser.set_defaults(func=cmd_combine)

    # summary subcommand
    summary_parser = subparsers.add_parser("summary", help="Lifetime summary per account/currency")
    summary_parser.add_argument("snapshot", help="Snapshot file (.parquet or .csv)")
    summary_parser.set_defaults(func=cmd_summary)

    # net subcommand
    net_parser = subparsers.add_parser("net", help="Net flow per time window")
    net_parser.add_argument("snapshot", help="Snapshot file (.parquet or .csv)")
    net_parser.add_argument("--group", choices=[g.value for g in TimeGroup], default="monthly",
                            help="Window size (default monthly)")
    net_parser.add_argument("--ignore", default=TRANSFER_CATEGORY,
                            help=f"Category left out (default {TRANSFER_CATEGORY})")
    net_parser.set_defaults(func=cmd_net)

    # add subcommand
    add_parser = subparsers.add_parser("add", help="Append one transaction to a CSV file")
    add_parser.add_argument("total", type=int, help="Total in cents, e.g. 1250 for 12.50")
    add_parser.add_argument("category", choices=CATEGORIES, help="Category")
    add_parser.add_argument("participant", help="Other party")
    add_parser.add_argument("-d", "--details", required=True, help="Description")
    add_parser.add_argument("--date", required=True, type=date.fromisoformat, help="YYYY-MM-DD")
    add_parser.add_argument("-a", "--account", default=DEFAULT_ACCOUNT, help=f"Account (default {DEFAULT_ACCOUNT})")
    add_parser.add_argument("--currency", default=DEFAULT_CURRENCY, help=f"Currency (default {DEFAULT_CURRENCY})")
    add_parser.add_argument("--file", default=str(TRANSACTIONS_FILE), help="CSV file to append to")
    add_parser.set_defaults(func=cmd_add)

    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 0

    try:
        args.func(args)
    except IngestError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
