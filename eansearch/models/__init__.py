"""
Pydantic models for EAN-Search API responses.
"""

from eansearch.models.account import AccountStatus
from eansearch.models.product import Product, ProductPage
from eansearch.models.responses import BarcodeImage, ChecksumResult, CountryResult

__all__ = [
    # Products
    "Product",
    "ProductPage",
    # Account
    "AccountStatus",
    # Single-value operations
    "BarcodeImage",
    "ChecksumResult",
    "CountryResult",
]
