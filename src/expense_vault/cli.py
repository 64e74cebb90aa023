import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from . import __version__
from .categories import CATEGORIES, PAYMENT_METHODS
from .config import load_settings
from .errors import VaultError
from .logging_setup import setup_logging
from .models import format_amount, major_to_minor


def _fmt_row(t) -> str:
    sign = "+" if t.is_credit else "-"
    return (
        f"{t.id}  {t.date.strftime('%d %b %Y')}  {t.merchant:<20} "
        f"{t.category:<9} {t.method:<12} {sign}{format_amount(t.amount)}"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="expense-vault")
    parser.add_argument("--version", action="store_true", help="Print version and exit")
    parser.add_argument(
        "command",
        nargs="?",
        default="health",
        choices=["health", "add", "delete", "list", "summary", "parse", "sync", "export"],
        help="Command to run",
    )
    parser.add_argument("target", nargs="?", default=None, help="Message text (parse) or messages file (sync)")

    parser.add_argument("--amount", type=str, default=None, help="Amount in rupees (add)")
    parser.add_argument("--merchant", type=str, default="", help="Merchant name (add) or search query (list)")
    parser.add_argument("--category", choices=list(CATEGORIES), default=CATEGORIES[0], help="Category (add)")
    parser.add_argument("--method", type=str, default=PAYMENT_METHODS[0], help="Payment method (add)")
    parser.add_argument("--id", dest="tx_id", type=str, default=None, help="Transaction id (delete)")
    parser.add_argument(
        "--direction",
        choices=["all", "credit", "debit"],
        default="all",
        help="Filter by direction (list). Default: all",
    )
    parser.add_argument("--out", type=Path, default=None, help="CSV output path (export). Default: stdout")
    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    if args.version:
        print(__version__)
        return 0

    settings = load_settings()
    setup_logging(settings.log_level)

    logger = logging.getLogger(__name__)

    if args.command == "parse":
        from .parsing import parse

        c = parse(args.target or "")
        if c is None:
            print("no transaction")
            return 0
        print("amount =", format_amount(c.amount))
        print("direction =", "credit" if c.is_credit else "debit")
        print("merchant =", c.merchant_hint)
        print("method =", c.method_hint)
        return 0

    from .vault import open_file_vault

    vault = open_file_vault(settings.data_dir, settings.ledger_key)

    try:
        return _run(args, vault, settings, logger)
    except VaultError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


def _run(args, vault, settings, logger: logging.Logger) -> int:
    if args.command == "health":
        logger.info("Ledger opened with %s transactions.", len(vault.ledger))
        print("ok")
        return 0

    if args.command == "add":
        if args.amount is None:
            print("error: --amount is required", file=sys.stderr)
            return 2
        t = vault.engine.add_entry(args.amount, args.merchant, args.category, args.method)
        print("added:", _fmt_row(t))
        return 0

    if args.command == "delete":
        if not args.tx_id:
            print("error: --id is required", file=sys.stderr)
            return 2
        removed = vault.engine.delete_transaction(args.tx_id)
        print("deleted" if removed else "not found")
        return 0

    if args.command == "list":
        from .analytics.views import filter_by_direction, filter_by_merchant

        rows = filter_by_merchant(filter_by_direction(vault.view.transactions(), args.direction), args.merchant)
        for t in rows[:50]:
            print(_fmt_row(t))
        if len(rows) > 50:
            print(f"... and {len(rows) - 50} more transactions")
        print("transactions_count =", len(rows))
        return 0

    if args.command == "summary":
        credit, debit = vault.view.direction_totals()
        print("transactions_count =", len(vault.ledger))
        for cat, amount in vault.view.category_totals().items():
            print(f"category {cat:<9} {format_amount(amount)}")
        print("income_total =", format_amount(credit))
        print("spend_total =", format_amount(debit))
        print("net_total =", format_amount(vault.view.running_total()))
        ratio = vault.view.budget_ratio(major_to_minor(settings.monthly_budget))
        print(f"budget_used = {ratio:.0%} of {settings.monthly_budget}")
        return 0

    if args.command == "sync":
        from .ingest.source import JsonFileMessageSource, sync_from_source

        if not args.target:
            print("error: messages file is required", file=sys.stderr)
            return 2
        res = sync_from_source(vault.engine, JsonFileMessageSource(Path(args.target)))
        if res is None:
            print("message source unavailable, manual entry only")
            return 0
        print("scanned =", res.scanned)
        print("admitted =", res.admitted)
        print("duplicates =", res.duplicates)
        print("unparseable =", res.unparseable)
        return 0

    if args.command == "export":
        from .analytics.export import to_csv, write_csv

        txs = vault.view.transactions()
        if args.out is None:
            sys.stdout.write(to_csv(txs))
        else:
            write_csv(txs, args.out)
            print("exported =", len(txs), "->", args.out)
        return 0

    return 1


if __name__ == "__main__":
    raise SystemExit(main())
