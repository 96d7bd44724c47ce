"""
Scan processing.

Wraps the decoder for callers that show results to a user: blank scans
and payloads without any supported AI become error results with a
readable message instead of an empty record.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .core.parser import ErrorCode, GS1Parser, GS1Record

LOGGER = logging.getLogger(__name__)

EMPTY_BARCODE_MESSAGE = "Barcode data is empty"
INVALID_FORMAT_MESSAGE = "Invalid GS1-128 barcode format"


class ScanStatus(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class ScanResult:
    """Outcome of processing one scan."""
    status: ScanStatus
    record: Optional[GS1Record] = None
    error: Optional[str] = None
    error_code: Optional[ErrorCode] = None

    @property
    def is_success(self) -> bool:
        return self.status is ScanStatus.SUCCESS

    @classmethod
    def success(cls, record: GS1Record) -> "ScanResult":
        return cls(status=ScanStatus.SUCCESS, record=record)

    @classmethod
    def failure(cls, message: str, code: ErrorCode) -> "ScanResult":
        return cls(status=ScanStatus.ERROR, error=message, error_code=code)


class ProcessBarcodeUseCase:
    """
    Validate and decode raw scans.

    Strict checks run when ``strict`` is passed or the parser's options
    have ``strict_mode`` set.
    """

    def __init__(self, parser: Optional[GS1Parser] = None, strict: bool = False):
        self.parser = parser or GS1Parser()
        self.strict = strict or self.parser.options.strict_mode

    def execute(self, raw_barcode_data: str) -> ScanResult:
        """
        Process one scan.

        Returns:
            ScanResult with the decoded record, or an error message
        """
        try:
            if not raw_barcode_data or raw_barcode_data.isspace():
                return ScanResult.failure(EMPTY_BARCODE_MESSAGE, ErrorCode.EMPTY_INPUT)

            if not self.parser.has_recognized_fields(raw_barcode_data):
                LOGGER.debug("Rejected scan without supported AIs: %r", raw_barcode_data)
                return ScanResult.failure(INVALID_FORMAT_MESSAGE, ErrorCode.INVALID_FORMAT)

            if self.strict:
                findings = self.parser.check_strict(raw_barcode_data)
                if findings:
                    LOGGER.debug("Strict checks failed for %r: %s", raw_barcode_data, findings)
                    return ScanResult.failure(
                        f"{INVALID_FORMAT_MESSAGE}: {findings[0].message}",
                        ErrorCode(findings[0].code),
                    )

            return ScanResult.success(self.parser.build(raw_barcode_data))
        except Exception as exc:
            LOGGER.exception("Failed to parse barcode %r", raw_barcode_data)
            return ScanResult.failure(f"Failed to parse barcode: {exc}", ErrorCode.PARSE_FAILURE)
