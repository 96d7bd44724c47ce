"""
CLI interface for the GS1-128 decoder.

Usage:
    python -m gs1_decoder "<barcode text>" [options]

Options:
    --json                    Output as JSON
    --strict                  Reject trailing data, bad check digits, bad dates
    --include-raw             Include the scanned text in JSON output
    --separator-alias TEXT    Treat TEXT (e.g. "<GS>") as FNC1
    --near-expiry-months N    Window for the "Near Expiry" status
    --verbose                 Debug logging
"""

import argparse
import json
import logging
import sys
from typing import Optional

from .ai_rules import FNC1
from .core.parser import GS1Parser, ParseOptions, detect_symbology
from .expiry import expiry_status
from .formatters.json_formatter import record_to_dict
from .usecase import ProcessBarcodeUseCase, ScanResult

LOGGER = logging.getLogger(__name__)


def format_result(result: ScanResult, near_months: int, symbology: Optional[str] = None) -> str:
    """Format scan result for display."""
    lines = [
        "=" * 60,
        "GS1-128 Decode Result",
        "=" * 60,
    ]

    if not result.is_success:
        lines.append(f"Error [{result.error_code.value}]: {result.error}")
        return '\n'.join(lines)

    record = result.record
    lines.append(f"Raw Input: {record.raw_data!r}")
    if symbology:
        lines.append(f"Symbology: {symbology}")
    lines.extend([
        "",
        "Fields:",
        "-" * 40,
        f"  GTIN: {record.trade_item_number or '-'}",
        f"  Batch/Lot: {record.lot_number or '-'}",
        f"  Expiry Date: {record.expiration_date or '-'}",
    ])
    if record.expiration_date:
        status = expiry_status(record.expiration_date, near_months=near_months)
        lines.append(f"  Expiry Status: {status.value}")

    return '\n'.join(lines)


def main(argv: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='gs1_decoder',
        description='Decode GS1-128 barcode payloads'
    )

    parser.add_argument(
        'barcode',
        help='Decoded barcode text'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Output result as JSON'
    )

    parser.add_argument(
        '--strict',
        action='store_true',
        help='Enable strict validation mode'
    )

    parser.add_argument(
        '--include-raw',
        action='store_true',
        help='Include the scanned text in JSON output'
    )

    parser.add_argument(
        '--separator-alias',
        default=None,
        help='Printable stand-in for FNC1, e.g. "<GS>"'
    )

    parser.add_argument(
        '--near-expiry-months',
        type=int,
        default=6,
        help='Months before expiry that count as "Near Expiry"'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    barcode = args.barcode
    if args.separator_alias:
        barcode = barcode.replace(args.separator_alias, FNC1)
        LOGGER.debug("Replaced separator alias %r with FNC1", args.separator_alias)

    use_case = ProcessBarcodeUseCase(GS1Parser(ParseOptions(strict_mode=args.strict)))
    result = use_case.execute(barcode)

    if args.json:
        if result.is_success:
            output = record_to_dict(result.record, include_raw_data=args.include_raw)
            if result.record.expiration_date:
                output["Expiry Status"] = expiry_status(
                    result.record.expiration_date,
                    near_months=args.near_expiry_months,
                ).value
        else:
            output = {
                "error": result.error,
                "code": result.error_code.value,
                "input": barcode,
            }
        print(json.dumps(output, indent=2, ensure_ascii=False))
    else:
        print(format_result(
            result,
            near_months=args.near_expiry_months,
            symbology=detect_symbology(barcode),
        ))

    return 0 if result.is_success else 1


if __name__ == '__main__':
    sys.exit(main())
