"""
Product models returned by lookup and search operations.
"""

from pydantic import Field

from eansearch.models.base import APIModel


class Product(APIModel):
    """A product from the EAN database."""

    ean: str = Field(..., description="Barcode digits, leading zeros preserved")
    name: str
    category_id: int = Field(..., alias="categoryId")
    category_name: str = Field("", alias="categoryName")
    issuing_country: str = Field("", alias="issuingCountry")

    def __str__(self) -> str:
        return (
            f"EAN {self.ean}: {self.name} "
            f"(category {self.category_id}: {self.category_name}) from {self.issuing_country}"
        )


class ProductPage(APIModel):
    """
    One page of results from a search operation.

    The API pages through results; ``more_products`` tells whether asking for
    ``page + 1`` will return anything.
    """

    page: int = 0
    more_products: bool = Field(False, alias="moreproducts")
    total_products: int | None = Field(None, alias="totalproducts")
    products: list[Product] = Field(default_factory=list, alias="productlist")
