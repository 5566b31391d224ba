"""
Wire models for single-value API operations.
"""

import base64
import binascii

from pydantic import Field

from eansearch.exceptions import APIError
from eansearch.models.base import APIModel


class CountryResult(APIModel):
    """Response of the issuing-country operation."""

    ean: str
    issuing_country: str = Field(..., alias="issuingCountry")


class ChecksumResult(APIModel):
    """Response of the verify-checksum operation."""

    ean: str
    valid: str

    @property
    def is_valid(self) -> bool:
        return self.valid == "1"


class BarcodeImage(APIModel):
    """Response of the barcode-image operation."""

    ean: str
    barcode: str = Field(..., description="Base64 encoded PNG, padding may be omitted")

    def png_bytes(self) -> bytes:
        """Decode the embedded PNG image."""
        data = self.barcode.strip()
        data += "=" * (-len(data) % 4)
        try:
            return base64.b64decode(data, validate=True)
        except (binascii.Error, ValueError) as e:
            raise APIError("Invalid barcode image data") from e
