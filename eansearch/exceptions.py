"""
Exception hierarchy for the eansearch package.
"""


class EANSearchError(Exception):
    """Base class for all errors raised by eansearch."""


class InvalidBarcodeError(EANSearchError, ValueError):
    """Barcode input is not a non-negative sequence of decimal digits."""


class InvalidBarcodeLengthError(InvalidBarcodeError):
    """
    Barcode digit count does not match any supported GTIN length.

    This is a structural problem with the input, distinct from a barcode
    whose check digit simply does not match.
    """

    def __init__(self, length: int, supported: tuple[int, ...], message: str | None = None):
        self.length = length
        self.supported = supported
        if message is None:
            allowed = ", ".join(str(n) for n in supported)
            message = f"Unsupported barcode length: {length} (expected one of {allowed})"
        super().__init__(message)


class APIError(EANSearchError):
    """The EAN-Search API answered with an error payload or unreadable data."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class RequestError(EANSearchError):
    """The HTTP request failed before a usable response was received."""
