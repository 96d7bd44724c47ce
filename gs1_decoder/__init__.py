"""
GS1-128 Barcode Decoder

Decodes GS1-128 barcode payloads (already read from the symbol as text)
into the trade item number, batch/lot and expiration date they carry.

Based on GS1 General Specifications.
"""

from .ai_rules import FNC1, AIRule, AIRuleTable, load_rule_table
from .core.tokenizer import ApplicationIdentifier, scan_identifiers, tokenize
from .core.parser import (
    ErrorCode,
    GS1Parser,
    GS1Record,
    ParseError,
    ParseOptions,
    clean_raw_data,
    format_expiration_date,
    has_recognized_fields,
    parse_gs1_data,
)
from .formatters.json_formatter import (
    parse_gs1_to_dict,
    parse_gs1_to_json,
    record_to_dict,
    record_to_json,
)
from .usecase import ProcessBarcodeUseCase, ScanResult, ScanStatus
from .expiry import ExpiryStatus, expiry_status

__version__ = "1.0.0"
__all__ = [
    "FNC1",
    "AIRule",
    "AIRuleTable",
    "load_rule_table",
    "ApplicationIdentifier",
    "scan_identifiers",
    "tokenize",
    "ErrorCode",
    "GS1Parser",
    "GS1Record",
    "ParseError",
    "ParseOptions",
    "clean_raw_data",
    "format_expiration_date",
    "has_recognized_fields",
    "parse_gs1_data",
    "parse_gs1_to_dict",
    "parse_gs1_to_json",
    "record_to_dict",
    "record_to_json",
    "ProcessBarcodeUseCase",
    "ScanResult",
    "ScanStatus",
    "ExpiryStatus",
    "expiry_status",
]
