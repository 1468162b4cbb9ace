"""Command-line interface for the vendor ledger.

Usage
-----
    vendor-core dashboard --today 2024-01-01
    vendor-core customers list --search raj
    vendor-core customers add "Asha Rao" 9000000001 --address "Stall 4"
    vendor-core customers update CUSTOMER_ID "Asha Rao" 9000000002
    vendor-core sales add --customer 1 --date 2024-01-01 --item Tomato:2:30 --item Onion:1:20
    vendor-core sales list --sort totalAmount
    vendor-core sales show SALE_ID
    vendor-core sales update-item SALE_ID ITEM_ID Tomato:3:30
    vendor-core export --start 2024-01-01 --end 2024-01-31
    vendor-core qa

Exit codes:
    0 on success
    1 when QA finds inconsistent totals
    2 on validation/argument errors
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
from datetime import date
from typing import Sequence

from vendor_core.app import VendorApp
from vendor_core.config import DEFAULT_DATA_ROOT, DATA_ROOT_ENV, StoragePaths
from vendor_core.exceptions import VendorAPIError, ValidationError
from vendor_core.formatters.console import (
    format_customers,
    format_dashboard,
    format_qa,
    format_sale_detail,
    format_sales,
)
from vendor_core.sales.ledger import SORT_FIELDS, sort_records
from vendor_core.sales.marts import export_marts
from vendor_core.validation import ItemInput

logger = logging.getLogger(__name__)


def _parse_item(value: str) -> ItemInput:
    """Parse ``NAME:WEIGHT:PRICE`` into an item tuple."""
    parts = value.rsplit(":", 2)
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(f"Item must be NAME:WEIGHT:PRICE. Got '{value}'.")
    name, weight, price = parts
    try:
        weight_value, price_value = float(weight), float(price)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Weight and price must be numbers in '{value}'.") from e
    if not (math.isfinite(weight_value) and math.isfinite(price_value)):
        raise argparse.ArgumentTypeError(f"Weight and price must be finite in '{value}'.")
    return name, weight_value, price_value


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="vendor-core",
        description="Track customers and daily vegetable sales.",
    )
    p.add_argument(
        "--data-root",
        default=None,
        help=f"Data directory (default: ${DATA_ROOT_ENV} or '{DEFAULT_DATA_ROOT}').",
    )
    p.add_argument("--quiet", action="store_true", help="Less logging output.")
    p.add_argument("--verbose", "-v", action="store_true", help="Debug logging output.")

    sub = p.add_subparsers(dest="command", required=True)

    dash = sub.add_parser("dashboard", help="Show today's summary.")
    dash.add_argument("--today", default=None, help="Date to summarize (YYYY-MM-DD).")

    customers = sub.add_parser("customers", help="Manage customers.")
    csub = customers.add_subparsers(dest="action", required=True)
    clist = csub.add_parser("list", help="List customers.")
    clist.add_argument("--search", default="", help="Filter by name or phone.")
    cadd = csub.add_parser("add", help="Add a customer.")
    cadd.add_argument("name")
    cadd.add_argument("phone")
    cadd.add_argument("--address", default=None)
    cupd = csub.add_parser("update", help="Edit a customer.")
    cupd.add_argument("id")
    cupd.add_argument("name")
    cupd.add_argument("phone")
    cupd.add_argument("--address", default=None)
    cdel = csub.add_parser("delete", help="Delete a customer.")
    cdel.add_argument("id")

    sales = sub.add_parser("sales", help="Manage sale records.")
    ssub = sales.add_subparsers(dest="action", required=True)
    slist = ssub.add_parser("list", help="List sale records.")
    slist.add_argument("--search", default="", help="Filter by customer or vegetable name.")
    slist.add_argument("--date", default=None, help="Only this date (YYYY-MM-DD).")
    slist.add_argument("--sort", default="date", choices=SORT_FIELDS)
    slist.add_argument("--asc", action="store_true", help="Ascending order.")
    sadd = ssub.add_parser("add", help="Record a sale.")
    sadd.add_argument("--customer", required=True, help="Customer id.")
    sadd.add_argument("--date", default=None, help="Sale date (default: today).")
    sadd.add_argument(
        "--item",
        action="append",
        type=_parse_item,
        default=[],
        help="Line item as NAME:WEIGHT:PRICE (repeatable).",
    )
    sdel = ssub.add_parser("delete", help="Delete a sale record.")
    sdel.add_argument("id")
    sshow = ssub.add_parser("show", help="Show one sale with its items.")
    sshow.add_argument("id")
    sitem = ssub.add_parser("add-item", help="Append an item to a sale.")
    sitem.add_argument("id")
    sitem.add_argument("item", type=_parse_item, help="NAME:WEIGHT:PRICE")
    supd = ssub.add_parser("update-item", help="Replace an item of a sale.")
    supd.add_argument("id")
    supd.add_argument("item_id")
    supd.add_argument("item", type=_parse_item, help="NAME:WEIGHT:PRICE")
    sidel = ssub.add_parser("delete-item", help="Remove an item from a sale.")
    sidel.add_argument("id")
    sidel.add_argument("item_id")

    export = sub.add_parser("export", help="Write CSV marts.")
    export.add_argument("--start", required=True, help="Start date (YYYY-MM-DD).")
    export.add_argument("--end", required=True, help="End date (YYYY-MM-DD).")

    sub.add_parser("qa", help="Check ledger consistency.")
    return p


def _run(args: argparse.Namespace, app: VendorApp, paths: StoragePaths) -> int:
    if args.command == "dashboard":
        print(format_dashboard(app.dashboard(today=args.today), app.display))

    elif args.command == "customers":
        if args.action == "list":
            print(format_customers(app.registry.search(args.search)))
        elif args.action == "add":
            print(app.add_customer(args.name, args.phone, args.address))
        elif args.action == "update":
            if not app.update_customer(args.id, args.name, args.phone, args.address):
                print(f"No customer with id {args.id}", file=sys.stderr)
        elif not app.registry.delete(args.id):
            print(f"No customer with id {args.id}", file=sys.stderr)

    elif args.command == "sales":
        if args.action == "list":
            records = app.ledger.filter(search=args.search, date=args.date)
            records = sort_records(records, field=args.sort, descending=not args.asc)
            print(format_sales(records, app.display))
        elif args.action == "add":
            sale_date = args.date or date.today().isoformat()
            print(app.record_sale(sale_date, args.customer, args.item))
        elif args.action == "delete":
            if not app.ledger.delete_record(args.id):
                print(f"No sale with id {args.id}", file=sys.stderr)
        elif app.ledger.get_by_id(args.id) is None:
            print(f"No sale with id {args.id}", file=sys.stderr)
        elif args.action == "add-item":
            print(app.add_sale_item(args.id, args.item))
        elif args.action == "update-item":
            if not app.update_sale_item(args.id, args.item_id, args.item):
                print(f"No item {args.item_id} in sale {args.id}", file=sys.stderr)
        elif args.action == "delete-item":
            app.ledger.delete_item(args.id, args.item_id)

        if args.action in ("show", "add-item", "update-item", "delete-item"):
            record = app.ledger.get_by_id(args.id)
            if record is not None:
                print(format_sale_detail(record, app.display))

    elif args.command == "export":
        written = export_marts(paths, app.sales, args.start, args.end)
        for name, path in written.items():
            print(f"{name}: {path}")

    elif args.command == "qa":
        result = app.qa()
        print(format_qa(result))
        if result.has_errors:
            return 1

    for err in app.persist_errors:
        print(f"WARNING: changes not saved: {err}", file=sys.stderr)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    log_level = logging.DEBUG if args.verbose else (logging.WARNING if args.quiet else logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s: %(message)s",
    )

    try:
        paths = StoragePaths.from_root(args.data_root) if args.data_root else StoragePaths.from_env()
        app = VendorApp.from_paths(paths)
        return _run(args, app, paths)
    except ValidationError as e:
        for field, message in e.errors.items():
            print(f"ERROR: {field}: {message}", file=sys.stderr)
        return 2
    except VendorAPIError as e:
        logger.error(f"Error: {e}", exc_info=args.verbose)
        print(f"ERROR: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
