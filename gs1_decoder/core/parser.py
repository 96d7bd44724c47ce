"""
GS1-128 Record Builder

Turns a scanned GS1-128 payload into a GS1Record holding the trade item
number (AI 01), batch/lot (AI 10) and expiration date (AI 17).

Key rules:
- Symbology identifiers (]C1, ]d2, ]Q3) are stripped from the start and
  surrounding whitespace is trimmed before tokenizing
- The first occurrence of each AI wins
- Expiry YYMMDD is rendered DD/MM/20YY; values that are not exactly six
  characters are kept as scanned
- raw_data on the record is always the original, uncleaned input
- Malformed input never raises; it yields a record with empty fields

Strict mode (check_strict) reports problems the lenient parse silently
tolerates, such as trailing data or a bad GTIN check digit.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from ..ai_rules import (
    AI_BATCH_LOT,
    AI_EXPIRY,
    AI_GTIN,
    FNC1,
    AIRuleTable,
    load_rule_table,
)
from ..validators.validators import validate_check_digit, validate_date
from .tokenizer import ApplicationIdentifier, scan_identifiers

LOGGER = logging.getLogger(__name__)


class ErrorCode(str, Enum):
    """Error codes reported by strict checks and scan processing."""
    EMPTY_INPUT = "EMPTY_INPUT"
    INVALID_FORMAT = "INVALID_FORMAT"
    TRAILING_DATA = "TRAILING_DATA"
    TRUNCATED_DATA = "TRUNCATED_DATA"
    INVALID_CHECK_DIGIT = "INVALID_CHECK_DIGIT"
    INVALID_DATE = "INVALID_DATE"
    PARSE_FAILURE = "PARSE_FAILURE"


# Symbology identifier prefixes (ISO/IEC 15424)
SYMBOLOGY_PREFIXES: Dict[str, str] = {
    "]C1": "GS1-128",
    "]d2": "GS1 DataMatrix",
    "]Q3": "GS1 QR Code",
}


@dataclass
class ParseOptions:
    """
    Configuration options for decoding.

    Attributes:
        rules: AI rule table (defaults to 01, 10, 17)
        symbology_prefixes: Prefixes stripped from the start of the input
        separator: Terminator for variable-length AIs
        century_prefix: Digits prepended to YY when rendering dates
        strict_mode: Reject scans that strict checks flag
    """
    rules: AIRuleTable = field(default_factory=load_rule_table)
    symbology_prefixes: Dict[str, str] = field(
        default_factory=lambda: dict(SYMBOLOGY_PREFIXES)
    )
    separator: str = FNC1
    century_prefix: str = "20"
    strict_mode: bool = False

    def __post_init__(self):
        if not self.separator:
            raise ValueError("separator must be a non-empty string")
        if any(not prefix for prefix in self.symbology_prefixes):
            raise ValueError("symbology prefixes must be non-empty strings")
        if len(self.century_prefix) != 2 or not self.century_prefix.isdigit():
            raise ValueError(f"century_prefix must be two digits, got {self.century_prefix!r}")


@dataclass
class ParseError:
    """Represents a strict-mode finding."""
    code: str
    message: str
    at_index: Optional[int] = None
    ai: Optional[str] = None


@dataclass(frozen=True)
class GS1Record:
    """
    Decoded GS1-128 barcode.

    Attributes:
        raw_data: Input exactly as scanned
        trade_item_number: AI(01) value, None if absent
        lot_number: AI(10) value, None if absent
        expiration_date: AI(17) value as DD/MM/YYYY, None if absent
    """
    raw_data: str
    trade_item_number: Optional[str] = None
    lot_number: Optional[str] = None
    expiration_date: Optional[str] = None

    @property
    def gtin(self) -> Optional[str]:
        return self.trade_item_number

    @property
    def has_fields(self) -> bool:
        return any(
            value is not None
            for value in (self.trade_item_number, self.lot_number, self.expiration_date)
        )


def clean_raw_data(raw: str, prefixes=SYMBOLOGY_PREFIXES) -> str:
    """
    Strip leading symbology identifiers and surrounding whitespace.

    Repeats until nothing changes, so cleaning a cleaned string is a
    no-op. Interior characters are never touched.
    """
    text = raw.strip()
    while True:
        for prefix in prefixes:
            if prefix and text.startswith(prefix):
                text = text[len(prefix):].strip()
                break
        else:
            return text


def detect_symbology(raw: str, prefixes=SYMBOLOGY_PREFIXES) -> Optional[str]:
    """Return the symbology name for the leading identifier, if any."""
    text = raw.lstrip()
    for prefix, name in prefixes.items():
        if text.startswith(prefix):
            return name
    return None


def format_expiration_date(value: str, century_prefix: str = "20") -> str:
    """
    Format YYMMDD as DD/MM/YYYY.

    Purely positional: 230231 becomes 31/02/2023. Anything that is not
    exactly six characters comes back unchanged.
    """
    if len(value) != 6:
        return value
    return f"{value[4:6]}/{value[2:4]}/{century_prefix}{value[0:2]}"


def _first_value(identifiers: List[ApplicationIdentifier], ai: str) -> Optional[str]:
    for identifier in identifiers:
        if identifier.ai == ai:
            return identifier.value
    return None


class GS1Parser:
    """
    GS1-128 record builder.

    Stateless apart from its read-only options; one instance can serve
    concurrent callers.
    """

    def __init__(self, options: Optional[ParseOptions] = None):
        self.options = options or ParseOptions()

    def clean(self, raw: str) -> str:
        return clean_raw_data(raw, self.options.symbology_prefixes)

    def extract_identifiers(self, raw: str) -> List[ApplicationIdentifier]:
        """Clean ``raw`` and tokenize it."""
        identifiers, _ = scan_identifiers(
            self.clean(raw), self.options.rules, self.options.separator
        )
        return identifiers

    def build(self, raw: str) -> GS1Record:
        """
        Decode a scanned payload.

        Args:
            raw: Decoded barcode text

        Returns:
            GS1Record; fields not present in the barcode are None
        """
        identifiers = self.extract_identifiers(raw)

        expiration_date = _first_value(identifiers, AI_EXPIRY)
        if expiration_date is not None:
            expiration_date = format_expiration_date(
                expiration_date, self.options.century_prefix
            )

        record = GS1Record(
            raw_data=raw,
            trade_item_number=_first_value(identifiers, AI_GTIN),
            lot_number=_first_value(identifiers, AI_BATCH_LOT),
            expiration_date=expiration_date,
        )
        LOGGER.debug(
            "Decoded %r into %d AI(s): %s",
            raw, len(identifiers), [identifier.ai for identifier in identifiers],
        )
        return record

    def has_recognized_fields(self, raw: str) -> bool:
        """True if at least one supported AI can be read from ``raw``."""
        return bool(self.extract_identifiers(raw))

    def check_strict(self, raw: str) -> List[ParseError]:
        """
        Report problems the lenient decode tolerates.

        Returns:
            List of ParseError, empty if the payload is clean
        """
        errors: List[ParseError] = []
        rules = self.options.rules
        cleaned = self.clean(raw)

        if not cleaned:
            errors.append(ParseError(
                code=ErrorCode.EMPTY_INPUT,
                message="Empty input after cleaning",
            ))
            return errors

        identifiers, stop = scan_identifiers(cleaned, rules, self.options.separator)

        if not identifiers:
            errors.append(ParseError(
                code=ErrorCode.INVALID_FORMAT,
                message="No supported Application Identifier found",
                at_index=0,
            ))
            return errors

        if stop < len(cleaned):
            errors.append(ParseError(
                code=ErrorCode.TRAILING_DATA,
                message=f"Unrecognized data at position {stop}: {cleaned[stop:stop + 4]!r}",
                at_index=stop,
            ))

        for identifier in identifiers:
            rule = rules.get(identifier.ai)
            if rule.is_fixed and len(identifier.value) < rule.fixed_length:
                errors.append(ParseError(
                    code=ErrorCode.TRUNCATED_DATA,
                    message=(
                        f"Truncated data for AI({identifier.ai}): expected "
                        f"{rule.fixed_length} characters, got {len(identifier.value)}"
                    ),
                    ai=identifier.ai,
                ))
                continue

            if identifier.ai == AI_GTIN:
                check = validate_check_digit(identifier.value)
                if not check.valid:
                    errors.append(ParseError(
                        code=ErrorCode.INVALID_CHECK_DIGIT,
                        message=check.errors[0],
                        ai=identifier.ai,
                    ))
            elif identifier.ai == AI_EXPIRY:
                check = validate_date(identifier.value, self.options.century_prefix)
                if not check.valid:
                    errors.append(ParseError(
                        code=ErrorCode.INVALID_DATE,
                        message=check.errors[0],
                        ai=identifier.ai,
                    ))

        return errors


_DEFAULT_PARSER = GS1Parser()


def parse_gs1_data(raw: str, *, options: Optional[ParseOptions] = None) -> GS1Record:
    """
    Decode a GS1-128 payload into a GS1Record.

    Main entry point for the decoder.

    Examples:
        >>> record = parse_gs1_data("0112345678901234172312311")
        >>> print(record.trade_item_number)  # "12345678901234"
        >>> print(record.expiration_date)  # "31/12/2023"
    """
    parser = GS1Parser(options) if options else _DEFAULT_PARSER
    return parser.build(raw)


def has_recognized_fields(raw: str, *, options: Optional[ParseOptions] = None) -> bool:
    """True if ``raw`` contains at least one supported AI."""
    parser = GS1Parser(options) if options else _DEFAULT_PARSER
    return parser.has_recognized_fields(raw)
