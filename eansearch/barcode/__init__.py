"""
Barcode check digit validation.
"""

from eansearch.barcode.validator import (
    SUPPORTED_LENGTHS,
    BarcodeSymbology,
    barcode_digits,
    calculate_check_digit,
    detect_symbology,
    is_valid_barcode,
    normalize_barcode,
    verify_checksum,
)

__all__ = [
    "SUPPORTED_LENGTHS",
    "BarcodeSymbology",
    "barcode_digits",
    "calculate_check_digit",
    "detect_symbology",
    "is_valid_barcode",
    "normalize_barcode",
    "verify_checksum",
]
