# ==============================================
# CLI: Command Line Entry Point
# ==============================================
#
# PURPOSE:
#   Command-line interface for the extract-then-normalize workflow.
#
# COMMANDS:
# ---------
# 1. Extract the main table of a PDF and print the ParsedTable JSON:
#    python -m pdf_tables.cli extract statement.pdf
#    python -m pdf_tables.cli extract statement.pdf --raw
#
# 2. Normalize a JSON array of records (file or "-" for stdin):
#    python -m pdf_tables.cli normalize rows.json
#    cat rows.json | pdf-tables normalize -
#
# Status lines go to stderr so stdout stays valid JSON.
#
# ==============================================

import argparse
import contextlib
import json
import sys
from typing import List, Optional

from pdf_tables.config import get_config
from pdf_tables.normalization.table_normalizer import TableNormalizer
from pdf_tables.pdf_table_parser import PdfTableParser


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pdf-tables",
        description="Extract the main table of a PDF into a typed table."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    extract = subparsers.add_parser("extract", help="Extract and normalize a PDF table")
    extract.add_argument("pdf", help="Path to the PDF file")
    extract.add_argument("--raw", action="store_true", help="Print raw extracted records instead")

    normalize = subparsers.add_parser("normalize", help="Normalize a JSON array of records")
    normalize.add_argument("source", help="Path to a JSON file, or '-' for stdin")

    for sub in (extract, normalize):
        sub.add_argument("--indent", type=int, default=2, help="JSON indent (default: 2)")

    return parser


def run_extract(args: argparse.Namespace) -> int:
    with contextlib.redirect_stdout(sys.stderr):
        with PdfTableParser(get_config()) as parser:
            if args.raw:
                payload = parser.extract_records_from_file(args.pdf)
            else:
                payload = parser.parse_file(args.pdf).to_dict()

    print(json.dumps(payload, indent=args.indent))
    return 0


def run_normalize(args: argparse.Namespace) -> int:
    try:
        if args.source == "-":
            records = json.load(sys.stdin)
        else:
            with open(args.source, "r", encoding="utf-8") as f:
                records = json.load(f)
    except (OSError, ValueError) as e:
        print(f"✗ Could not read records from {args.source}: {e}", file=sys.stderr)
        return 1

    if not isinstance(records, list):
        print(f"✗ Expected a JSON array of records in {args.source}", file=sys.stderr)
        return 1

    normalizer = TableNormalizer(sample_size=get_config().normalizer.sample_size)
    table = normalizer.normalize(records)

    print(json.dumps(table.to_dict(), indent=args.indent))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "extract":
        return run_extract(args)
    return run_normalize(args)


if __name__ == "__main__":
    sys.exit(main())
