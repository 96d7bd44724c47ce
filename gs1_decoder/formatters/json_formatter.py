"""
JSON Formatter for decoded GS1-128 records

Provides clean JSON output with:
- Human-readable field names
- Dates already formatted as dd/mm/yyyy
- Only fields present in the barcode
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

from ..ai_rules import AI_BATCH_LOT, AI_EXPIRY, AI_GTIN
from ..core.parser import GS1Record, ParseOptions, parse_gs1_data


# AI Code to Human-Readable Name Mapping
AI_FIELD_NAMES = {
    AI_GTIN: "GTIN Code",
    AI_BATCH_LOT: "Batch/Lot Number",
    AI_EXPIRY: "Expiry Date",
}

RAW_DATA_FIELD = "Raw Data"


def record_to_dict(record: GS1Record, include_raw_data: bool = False) -> Dict[str, Any]:
    """
    Convert a GS1Record to a name -> value dict.

    Fields absent from the barcode are left out rather than set to None.
    """
    values = {
        AI_GTIN: record.trade_item_number,
        AI_BATCH_LOT: record.lot_number,
        AI_EXPIRY: record.expiration_date,
    }
    output: Dict[str, Any] = {
        AI_FIELD_NAMES[ai]: value
        for ai, value in values.items()
        if value is not None
    }
    if include_raw_data:
        output[RAW_DATA_FIELD] = record.raw_data
    return output


def record_to_json(record: GS1Record, include_raw_data: bool = False) -> str:
    """Format a GS1Record as indented JSON."""
    return json.dumps(
        record_to_dict(record, include_raw_data=include_raw_data),
        ensure_ascii=False,
        indent=2,
    )


def parse_gs1_to_json(
    barcode_data: str,
    include_raw_data: bool = False,
    options: Optional[ParseOptions] = None,
) -> str:
    """
    Decode a barcode and return clean JSON output.

    Example:
        >>> print(parse_gs1_to_json("0112345678901234172312311"))
        {
          "GTIN Code": "12345678901234",
          "Expiry Date": "31/12/2023"
        }
    """
    record = parse_gs1_data(barcode_data, options=options)
    return record_to_json(record, include_raw_data=include_raw_data)


def parse_gs1_to_dict(
    barcode_data: str,
    include_raw_data: bool = False,
    options: Optional[ParseOptions] = None,
) -> Dict[str, Any]:
    """Decode a barcode and return a name -> value dict."""
    return record_to_dict(
        parse_gs1_data(barcode_data, options=options),
        include_raw_data=include_raw_data,
    )
