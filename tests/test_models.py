"""
Tests for API response models.
"""

import pytest
from pydantic import ValidationError

from eansearch.models import AccountStatus, Product, ProductPage


class TestProduct:
    """Tests for Product."""

    def test_from_wire_format(self):
        product = Product.model_validate(
            {
                "ean": "0012345678905",
                "name": "Test",
                "categoryId": "12",
                "categoryName": "Toys",
                "issuingCountry": "US",
            }
        )

        assert product.ean == "0012345678905"
        assert product.category_id == 12
        assert product.category_name == "Toys"

    def test_numeric_ean_becomes_string(self):
        product = Product.model_validate({"ean": 5099750442227, "name": "x", "categoryId": 45})
        assert product.ean == "5099750442227"

    def test_populate_by_field_name(self):
        product = Product(ean="96385074", name="Gum", category_id=1, category_name="Food", issuing_country="DE")
        assert product.issuing_country == "DE"

    def test_str(self):
        product = Product(
            ean="5099750442227",
            name="Michael Jackson, Thriller",
            category_id=45,
            category_name="Music",
            issuing_country="UK",
        )
        assert str(product) == "EAN 5099750442227: Michael Jackson, Thriller (category 45: Music) from UK"

    def test_invalid_category(self):
        with pytest.raises(ValidationError):
            Product.model_validate({"ean": "1", "name": "x", "categoryId": "music"})


class TestProductPage:
    """Tests for ProductPage."""

    def test_defaults(self):
        page = ProductPage.model_validate({"productlist": []})
        assert page.page == 0
        assert page.more_products is False
        assert page.total_products is None


class TestAccountStatus:
    """Tests for AccountStatus."""

    def test_remaining(self):
        status = AccountStatus.model_validate({"id": "a", "requests": 10, "requestlimit": 100})
        assert status.remaining == 90

    def test_remaining_never_negative(self):
        status = AccountStatus.model_validate({"id": "a", "requests": 120, "requestlimit": 100})
        assert status.remaining == 0
