#!/usr/bin/env python3
"""Import an order list (file or stdin) into the order board database.

Prints the preview (new / update candidates and skipped lines); pass --commit to write it.
If you see `ModuleNotFoundError: No module named 'orderboard'`, run from the project root or set PYTHONPATH=. before running.
"""
import sys
from pathlib import Path

# Ensure project root is on sys.path when running the script directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from orderboard.db import SessionLocal, Base, engine
from orderboard import crud
from orderboard.core.commit import commit_import
from orderboard.core.errors import CommitError, EmptyImportResult, StoreUnavailable, UnknownOrderType
from orderboard.core.order_types import OrderType
from orderboard.core.reconciler import analyze_import


import argparse


def main(argv=None):
    parser = argparse.ArgumentParser(description='Preview and optionally commit an order import.')
    parser.add_argument('path', nargs='?', help='Text file to import (reads stdin when omitted)')
    parser.add_argument('--type', required=True, dest='order_type',
                        help='Order type for the whole batch: ' + ', '.join(t.value for t in OrderType))
    parser.add_argument('--commit', action='store_true', help='Write the candidates to the database')
    args = parser.parse_args(argv)

    try:
        batch_type = OrderType.parse(args.order_type)
    except UnknownOrderType as exc:
        parser.error(str(exc))

    if args.path:
        text = Path(args.path).read_text(encoding='utf-8-sig')
        source_file = Path(args.path).name
    else:
        text = sys.stdin.read()
        source_file = None

    Base.metadata.create_all(bind=engine)

    with SessionLocal() as db:
        store = crud.SqlAlchemyOrderStore(db)
        try:
            existing = store.read_all()
        except StoreUnavailable as exc:
            print("Order store unavailable:", exc)
            return 2

        report = analyze_import(text, batch_type, existing, source_file=source_file)
        for candidate in report.candidates:
            target = f" -> #{candidate.order_id}" if candidate.order_id is not None else ""
            print(f"[{candidate.status}] {candidate.order_number} {candidate.customer_name} "
                  f"{candidate.delivery_date.isoformat()}{target}")
        for skipped in report.skipped:
            print(f"[skipped:{skipped.reason}] line {skipped.line_number}: {skipped.line}")

        try:
            report.ensure_not_empty()
        except EmptyImportResult as exc:
            print("Warning:", exc)
            return 1

        if not args.commit:
            print(f"Preview only: {report.new_count} new, {report.update_count} update. Use --commit to write.")
            return 0

        result = commit_import(store, report.candidates)
        try:
            result.raise_for_status()
        except CommitError as exc:
            print("Commit incomplete:", exc)
            for failure in result.failures:
                print(f"  {failure.order_number} ({failure.status}): {failure.error}")
            return 3

        print(f"Done: {len(result.created)} created, {len(result.updated)} updated")
        return 0


if __name__ == '__main__':
    sys.exit(main())
