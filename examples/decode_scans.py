"""
Demo script for the GS1-128 decoder.

Runs a few typical scans through the scan-processing use case and shows
what a UI layer would display for each.
"""

from gs1_decoder import ProcessBarcodeUseCase, expiry_status

SCANS = [
    ("GTIN only", "0106285096000842"),
    ("GTIN + expiry + lot", "]C1010628674000024917280430" "10GB2C"),
    ("Lot ended by FNC1", "010628509600084210HN8X\x1d17260331"),
    ("Empty scan", "   "),
    ("Not GS1-128", "invalid_data"),
]


def print_scan(title, raw):
    print("\n" + "=" * 60)
    print(f"  {title}")
    print("=" * 60)
    print(f"Input: {raw!r}")

    result = ProcessBarcodeUseCase().execute(raw)
    if not result.is_success:
        print(f"Error: {result.error}")
        return

    record = result.record
    print(f"GTIN:        {record.trade_item_number}")
    print(f"Batch/Lot:   {record.lot_number}")
    print(f"Expiry Date: {record.expiration_date}")
    if record.expiration_date:
        print(f"Status:      {expiry_status(record.expiration_date).value}")


def main():
    for title, raw in SCANS:
        print_scan(title, raw)


if __name__ == "__main__":
    main()
