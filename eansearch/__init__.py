"""
Search the EAN barcode database at EAN-Search.org and verify GTIN check digits.
"""

from eansearch.barcode import verify_checksum
from eansearch.client import EANSearchClient, create_client
from eansearch.exceptions import (
    APIError,
    EANSearchError,
    InvalidBarcodeError,
    InvalidBarcodeLengthError,
    RequestError,
)
from eansearch.models import AccountStatus, Product, ProductPage

__version__ = "1.0.2"

__all__ = [
    "EANSearchClient",
    "create_client",
    "verify_checksum",
    # Models
    "AccountStatus",
    "Product",
    "ProductPage",
    # Errors
    "APIError",
    "EANSearchError",
    "InvalidBarcodeError",
    "InvalidBarcodeLengthError",
    "RequestError",
]
