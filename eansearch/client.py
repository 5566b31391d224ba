"""
Client for the EAN-Search.org barcode database API.

See https://www.ean-search.org/ean-database-api.html
"""

from typing import Any

import httpx
import structlog
from pydantic import BaseModel, ValidationError

from eansearch.config import get_settings
from eansearch.config.settings import API_URL, Settings
from eansearch.exceptions import APIError, EANSearchError, RequestError
from eansearch.models import (
    AccountStatus,
    BarcodeImage,
    ChecksumResult,
    CountryResult,
    Product,
    ProductPage,
)

logger = structlog.get_logger(__name__)

DEFAULT_TIMEOUT = 10.0
UNDEFINED_ERROR = "Undefined API error"
NOT_FOUND_ERROR = "Barcode not found"

# Language codes used by the API: 1 = English, 99 = any language
LANGUAGE_ENGLISH = 1
LANGUAGE_ANY = 99


def _error_message(data: Any) -> str | None:
    """Return the message of an ``{"error": ...}`` payload, if that is what *data* is."""
    if isinstance(data, list) and data:
        data = data[0]
    if isinstance(data, dict) and "error" in data:
        return str(data["error"])
    return None


def _first(data: Any) -> Any:
    """Single-result operations answer with a one-element list."""
    if isinstance(data, list):
        if not data:
            raise APIError(UNDEFINED_ERROR)
        return data[0]
    return data


def _parse(model: type[BaseModel], data: Any) -> Any:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise APIError(UNDEFINED_ERROR) from e


def _ean_param(ean: int | str) -> str:
    return str(ean).strip()


class EANSearchClient:
    """
    Synchronous client for the EAN-Search API.

    Each method issues one GET request and parses the JSON answer into the
    models from ``eansearch.models``. The client holds no state besides its
    HTTP connection pool and may be shared between threads.
    """

    def __init__(
        self,
        token: str,
        *,
        base_url: str = API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.Client | None = None,
    ):
        """
        Initialize the client.

        Args:
            token: EAN-Search API token
            base_url: API endpoint
            timeout: Request timeout in seconds (ignored for an injected http_client)
            http_client: Pre-configured httpx client; the caller remains responsible for closing it
        """
        if not token:
            raise EANSearchError("EAN-Search API token not configured")

        self.token = token
        self.base_url = base_url
        self._owns_http = http_client is None
        self._http = http_client or httpx.Client(timeout=timeout)

    def __enter__(self) -> "EANSearchClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_http:
            self._http.close()

    def _request(self, op: str, **params: Any) -> Any:
        """
        Perform one API operation and return the decoded JSON body.

        Raises:
            RequestError: Transport failure or HTTP error status without an API error payload
            APIError: The API reported an error or sent something other than JSON
        """
        query = {k: v for k, v in params.items() if v is not None}
        logger.debug("EAN-Search request", op=op, **query)

        try:
            response = self._http.get(
                self.base_url,
                params={"format": "json", "token": self.token, "op": op, **query},
            )
        except httpx.HTTPError as e:
            logger.warning("EAN-Search request failed", op=op, error=str(e))
            raise RequestError(f"{op} request failed: {e}") from e

        try:
            data = response.json()
        except ValueError:
            data = None

        message = _error_message(data)
        if message is not None:
            logger.warning("EAN-Search API error", op=op, error=message)
            raise APIError(message)

        if response.is_error:
            logger.warning("EAN-Search HTTP error", op=op, status_code=response.status_code)
            raise RequestError(f"{op} request failed with HTTP {response.status_code}")

        if data is None:
            raise APIError(UNDEFINED_ERROR)

        return data

    def _search(self, op: str, **params: Any) -> ProductPage:
        data = self._request(op, **params)
        if not isinstance(data, dict):
            raise APIError(UNDEFINED_ERROR)
        return _parse(ProductPage, data)

    def barcode_lookup(self, ean: int | str, language: int = LANGUAGE_ENGLISH) -> Product | None:
        """
        Search for a product by EAN barcode.

        Returns:
            The product, or None if the barcode is not in the database
        """
        try:
            data = self._request("barcode-lookup", ean=_ean_param(ean), language=language)
        except APIError as e:
            if e.message == NOT_FOUND_ERROR:
                return None
            raise

        if isinstance(data, list) and not data:
            return None
        return _parse(Product, _first(data))

    def barcode_prefix_search(
        self,
        prefix: int | str,
        language: int = LANGUAGE_ENGLISH,
        page: int = 0,
    ) -> ProductPage:
        """Search for all products with an EAN barcode starting with *prefix*."""
        return self._search(
            "barcode-prefix-search",
            prefix=_ean_param(prefix),
            language=language,
            page=page,
        )

    def product_search(self, name: str, language: int = LANGUAGE_ANY, page: int = 0) -> ProductPage:
        """Search for all products matching all keywords in *name*."""
        return self._search("product-search", name=name, language=language, page=page)

    def category_search(
        self,
        category: int,
        name: str | None = None,
        language: int = LANGUAGE_ANY,
        page: int = 0,
    ) -> ProductPage:
        """Search for products in a category, optionally restricted by keywords in *name*."""
        return self._search(
            "category-search",
            category=category,
            name=name,
            language=language,
            page=page,
        )

    def issuing_country(self, ean: int | str) -> str:
        """
        Query the country that issued an EAN barcode.

        Available even when the database has no information on the product.
        """
        data = self._request("issuing-country", ean=_ean_param(ean))
        return _parse(CountryResult, _first(data)).issuing_country

    def verify_checksum(self, ean: int | str) -> bool:
        """
        Ask the API whether *ean* has a valid check digit.

        ``eansearch.barcode.verify_checksum`` does the same check locally.
        """
        data = self._request("verify-checksum", ean=_ean_param(ean))
        return _parse(ChecksumResult, _first(data)).is_valid

    def account_status(self) -> AccountStatus:
        """Check how many requests are still available in this payment cycle."""
        data = self._request("account-status")
        return _parse(AccountStatus, _first(data))

    def barcode_image(self, ean: int | str, width: int = 102, height: int = 50) -> bytes:
        """Get a PNG image of the EAN barcode."""
        data = self._request("barcode-image", ean=_ean_param(ean), width=width, height=height)
        return _parse(BarcodeImage, _first(data)).png_bytes()


def create_client(settings: Settings | None = None) -> EANSearchClient:
    """Create a client with settings from environment."""
    settings = settings or get_settings()
    token = settings.api_token_str
    if not token:
        raise EANSearchError("EAN-Search API token not configured (set EAN_SEARCH_API_TOKEN)")
    return EANSearchClient(
        token,
        base_url=settings.ean_search_api_url,
        timeout=settings.ean_search_timeout,
    )
