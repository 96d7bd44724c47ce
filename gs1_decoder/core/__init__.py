"""
Core decoding modules for the GS1-128 decoder.
"""

from .tokenizer import ApplicationIdentifier, scan_identifiers, tokenize
from .parser import (
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

__all__ = [
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
]
