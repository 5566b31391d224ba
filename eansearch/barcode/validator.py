"""
Barcode validation utilities for EAN/UPC/GTIN codes.

All supported symbologies share the GTIN check digit scheme, so a single
weighted-sum routine covers EAN-8, UPC-A, EAN-13 and GTIN-14.
"""

from enum import Enum

from eansearch.exceptions import InvalidBarcodeError, InvalidBarcodeLengthError

SUPPORTED_LENGTHS: tuple[int, ...] = (8, 12, 13, 14)


class BarcodeSymbology(str, Enum):
    """Fixed-length numeric symbologies covered by the GTIN check digit."""

    EAN_8 = "EAN-8"
    UPC_A = "UPC-A"
    EAN_13 = "EAN-13"
    GTIN_14 = "GTIN-14"
    UNKNOWN = "UNKNOWN"


_SYMBOLOGY_BY_LENGTH = {
    8: BarcodeSymbology.EAN_8,
    12: BarcodeSymbology.UPC_A,
    13: BarcodeSymbology.EAN_13,
    14: BarcodeSymbology.GTIN_14,
}


def barcode_digits(barcode: int | str, length: int | None = None) -> str:
    """
    Convert a barcode to its digit string.

    Integers lose their leading zeros, so pass ``length`` to restore the
    intended standard length (e.g. ``length=8`` for an EAN-8 starting with 0).

    Args:
        barcode: Barcode as a non-negative integer or a string of digits
        length: Target digit count; the barcode is left-padded with zeros to it

    Returns:
        Digit string whose length is one of SUPPORTED_LENGTHS

    Raises:
        InvalidBarcodeError: Input is negative or contains non-digit characters
        InvalidBarcodeLengthError: Digit count is not a supported length
    """
    if isinstance(barcode, bool):
        raise InvalidBarcodeError(f"Invalid barcode: {barcode!r}")

    if isinstance(barcode, int):
        if barcode < 0:
            raise InvalidBarcodeError(f"Barcode must not be negative: {barcode}")
        code = str(barcode)
    elif not isinstance(barcode, str):
        raise InvalidBarcodeError(f"Invalid barcode: {barcode!r}")
    else:
        code = barcode.strip()
        # str.isdigit() also accepts superscripts and other non-ASCII digits
        if not code.isascii() or not code.isdigit():
            raise InvalidBarcodeError(f"Code contains non-numeric characters: {barcode!r}")

    if length is not None:
        if length not in SUPPORTED_LENGTHS:
            raise InvalidBarcodeLengthError(length, SUPPORTED_LENGTHS)
        if len(code) > length:
            raise InvalidBarcodeLengthError(
                len(code),
                SUPPORTED_LENGTHS,
                f"Barcode has {len(code)} digits, longer than the requested length {length}",
            )
        code = code.zfill(length)

    if len(code) not in SUPPORTED_LENGTHS:
        raise InvalidBarcodeLengthError(len(code), SUPPORTED_LENGTHS)

    return code


def calculate_check_digit(payload: str) -> int:
    """
    Calculate the GTIN check digit for a payload (all digits but the last).

    Algorithm:
    1. Starting from the rightmost payload digit, multiply by 3, 1, 3, 1, ...
    2. Sum all results
    3. Check digit = (10 - (sum mod 10)) mod 10
    """
    total = 0
    for i, digit in enumerate(reversed(payload)):
        if digit not in "0123456789":
            raise InvalidBarcodeError(f"Invalid character in code: {digit}")
        weight = 3 if i % 2 == 0 else 1
        total += int(digit) * weight

    return (10 - (total % 10)) % 10


def verify_checksum(barcode: int | str, length: int | None = None) -> bool:
    """
    Verify the check digit of an EAN-8, UPC-A, EAN-13 or GTIN-14 barcode.

    Args:
        barcode: Barcode as an integer or digit string; the last digit is the check digit
        length: Intended standard length, for integers that had leading zeros

    Returns:
        True if the declared check digit matches the computed one

    Raises:
        InvalidBarcodeLengthError: Digit count is not a supported length
    """
    code = barcode_digits(barcode, length)
    return calculate_check_digit(code[:-1]) == int(code[-1])


def detect_symbology(barcode: int | str) -> BarcodeSymbology:
    """
    Detect barcode symbology from its digit count.

    Args:
        barcode: Barcode string or integer

    Returns:
        Detected symbology, UNKNOWN for malformed input
    """
    try:
        code = barcode_digits(barcode)
    except InvalidBarcodeError:
        return BarcodeSymbology.UNKNOWN
    return _SYMBOLOGY_BY_LENGTH[len(code)]


def is_valid_barcode(barcode: int | str) -> tuple[bool, BarcodeSymbology, str]:
    """
    Validate a barcode completely.

    Args:
        barcode: Barcode string or integer

    Returns:
        Tuple of (is_valid, symbology, error_message)
    """
    try:
        code = barcode_digits(barcode)
    except InvalidBarcodeError as e:
        return False, BarcodeSymbology.UNKNOWN, str(e)

    symbology = _SYMBOLOGY_BY_LENGTH[len(code)]
    if calculate_check_digit(code[:-1]) != int(code[-1]):
        return False, symbology, f"Invalid {symbology.value} checksum"

    return True, symbology, ""


def normalize_barcode(barcode: int | str, length: int = 13) -> str:
    """
    Normalize a barcode to GTIN-13 (or GTIN-14) by left-padding with zeros.

    - UPC-A: "012345678905" -> "0012345678905"
    - EAN-8: "96385074" -> "0000096385074"
    """
    if length not in (13, 14):
        raise ValueError("Normalized length must be 13 or 14")
    code = barcode_digits(barcode)
    if len(code) > length:
        supported = tuple(n for n in SUPPORTED_LENGTHS if n <= length)
        raise InvalidBarcodeLengthError(len(code), supported)
    return code.zfill(length)
