"""
Output formatters for the GS1-128 decoder.
"""

from .json_formatter import (
    AI_FIELD_NAMES,
    parse_gs1_to_dict,
    parse_gs1_to_json,
    record_to_dict,
    record_to_json,
)

__all__ = [
    "AI_FIELD_NAMES",
    "parse_gs1_to_dict",
    "parse_gs1_to_json",
    "record_to_dict",
    "record_to_json",
]
