"""
DiscountService Unit Tests

Tests catalog discount projection:
- display price / original price presence
- badge and savings consistency with original price
- invalid input
- catalog record parsing and product views
"""

import pytest

from exceptions.pricing import InvalidDiscountException
from models.product import CatalogProductDTO, PLACEHOLDER_IMAGE
from services.discount import DiscountService


class TestProject:

    def test_discount_applied(self):
        result = DiscountService.project(1000, 20)

        assert result.display_price == pytest.approx(800)
        assert result.original_price == 1000
        assert result.badge == "20% OFF"
        assert result.savings == pytest.approx(200)

    def test_no_discount_has_no_original_price(self):
        result = DiscountService.project(1000, 0)

        assert result.display_price == 1000
        assert result.original_price is None
        assert result.badge is None
        assert result.savings is None

    def test_missing_discount_means_zero(self):
        result = DiscountService.project(1000, None)

        assert result.display_price == 1000
        assert result.original_price is None

    def test_full_discount(self):
        result = DiscountService.project(1000, 100)

        assert result.display_price == 0
        assert result.original_price == 1000

    def test_no_rounding_applied(self):
        result = DiscountService.project(999, 15)

        assert result.display_price == pytest.approx(849.15)

    def test_original_price_restores_raw_price(self):
        discounted = DiscountService.project(12345.67, 33)

        assert DiscountService.project(discounted.original_price, 0).display_price == 12345.67

    @pytest.mark.parametrize("raw_price, percent", [(1000, -1), (1000, 100.5), (-1, 10)])
    def test_invalid_input_raises(self, raw_price, percent):
        with pytest.raises(InvalidDiscountException):
            DiscountService.project(raw_price, percent)

    @pytest.mark.parametrize("percent, badge", [(0, None), (None, None), (15, "15% OFF"), (12.5, "12.5% OFF")])
    def test_badge_matches_original_price_presence(self, percent, badge):
        assert DiscountService.format_badge(percent) == badge
        assert (DiscountService.project(100, percent).original_price is not None) == (badge is not None)


class TestCatalogProducts:

    def test_product_record_is_parsed(self):
        product = CatalogProductDTO.model_validate({
            "_id": "665f",
            "title": "Lace Bra",
            "price": 15000,
            "discount": 10,
            "thumbnails": ["/a.jpg", "/b.jpg"],
            "size": "S, M ,L",
            "stock": 4,
        })

        assert product.id == "665f"
        assert product.sizes == ["S", "M", "L"]

        view = DiscountService.project_product(product)

        assert view.name == "Lace Bra"
        assert view.price == pytest.approx(13500)
        assert view.original_price == 15000
        assert view.badge == "10% OFF"
        assert view.image == "/a.jpg"

    @pytest.mark.parametrize("discount", [None, "", 150, -5, "abc"])
    def test_missing_or_out_of_range_discount_is_zero(self, discount):
        product = CatalogProductDTO.model_validate({"_id": "1", "title": "T", "price": 500, "discount": discount})

        view = DiscountService.project_product(product)

        assert product.discount == 0
        assert view.price == 500
        assert view.original_price is None
        assert view.badge is None

    def test_missing_thumbnails_use_placeholder(self):
        product = CatalogProductDTO.model_validate({"id": "1", "title": "T", "price": 500, "sizes": ["M"]})

        view = DiscountService.project_product(product)

        assert view.image == PLACEHOLDER_IMAGE
        assert view.sizes == ["M"]

    def test_project_catalog(self):
        views = DiscountService.project_catalog([
            {"_id": "1", "title": "A", "price": 1000, "discount": 20},
            {"_id": "2", "title": "B", "price": 2000},
        ])

        assert [view.id for view in views] == ["1", "2"]
        assert views[0].price == pytest.approx(800)
        assert views[1].original_price is None
