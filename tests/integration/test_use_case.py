"""
Tests for scan processing.

Ensures user-facing outcomes:
- Blank scans are rejected as empty
- Payloads without supported AIs are rejected as invalid format
- Strict mode surfaces the first strict finding
- Unexpected failures become error results
"""

from gs1_decoder import (
    ErrorCode,
    GS1Parser,
    GS1Record,
    ParseOptions,
    ProcessBarcodeUseCase,
    ScanStatus,
)


class TestProcessBarcode:
    """Tests for ProcessBarcodeUseCase.execute."""

    def setup_method(self):
        self.use_case = ProcessBarcodeUseCase()

    def test_valid_barcode(self):
        data = "0112345678901234"
        result = self.use_case.execute(data)

        assert result.is_success
        assert result.status is ScanStatus.SUCCESS
        assert result.record == GS1Record(raw_data=data, trade_item_number="12345678901234")
        assert result.error is None

    def test_invalid_barcode(self):
        result = self.use_case.execute("invalid_barcode")

        assert not result.is_success
        assert result.error == "Invalid GS1-128 barcode format"
        assert result.error_code is ErrorCode.INVALID_FORMAT
        assert result.record is None

    def test_empty_barcode(self):
        result = self.use_case.execute("")

        assert not result.is_success
        assert result.error == "Barcode data is empty"
        assert result.error_code is ErrorCode.EMPTY_INPUT

    def test_blank_barcode(self):
        result = self.use_case.execute("   ")

        assert result.error == "Barcode data is empty"

    def test_prefix_only_is_invalid_format(self):
        result = self.use_case.execute("]C1")

        assert result.error_code is ErrorCode.INVALID_FORMAT

    def test_lenient_accepts_bad_check_digit(self):
        assert self.use_case.execute("0112345678901234").is_success


class TestStrictProcessing:
    """Tests for strict-mode scan processing."""

    def setup_method(self):
        self.use_case = ProcessBarcodeUseCase(GS1Parser(ParseOptions(strict_mode=True)))

    def test_clean_payload(self):
        result = self.use_case.execute("]C1" "0106285096000842" "17290131" "10GB2C")

        assert result.is_success
        assert result.record.expiration_date == "31/01/2029"

    def test_bad_check_digit(self):
        result = self.use_case.execute("0112345678901234")

        assert not result.is_success
        assert result.error_code is ErrorCode.INVALID_CHECK_DIGIT
        assert result.error.startswith("Invalid GS1-128 barcode format: ")

    def test_trailing_data(self):
        result = self.use_case.execute("0106285096000842XYZ")

        assert result.error_code is ErrorCode.TRAILING_DATA

    def test_empty_still_reported_as_empty(self):
        assert self.use_case.execute("").error_code is ErrorCode.EMPTY_INPUT

    def test_strict_flag_on_use_case(self):
        use_case = ProcessBarcodeUseCase(strict=True)
        result = use_case.execute("0112345678901234")

        assert use_case.strict
        assert not result.is_success
        assert result.error_code is ErrorCode.INVALID_CHECK_DIGIT

    def test_strict_flag_accepts_clean_payload(self):
        result = ProcessBarcodeUseCase(strict=True).execute("0106285096000842" "17290131")

        assert result.is_success
        assert result.record.expiration_date == "31/01/2029"

    def test_default_use_case_is_lenient(self):
        assert not ProcessBarcodeUseCase().strict


class TestUnexpectedFailure:

    def test_exception_becomes_error_result(self, monkeypatch):
        parser = GS1Parser()

        def explode(raw):
            raise RuntimeError("boom")

        monkeypatch.setattr(parser, "build", explode)
        result = ProcessBarcodeUseCase(parser).execute("0112345678901234")

        assert not result.is_success
        assert result.error == "Failed to parse barcode: boom"
        assert result.error_code is ErrorCode.PARSE_FAILURE
