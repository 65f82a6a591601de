"""Unit tests for the Product aggregate."""

import pytest

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import Product


class TestProductCreation:

    def test_happy_path(self):
        product = Product.create("tools", "hammer")
        assert product.category == "tools"
        assert product.name == "hammer"

    def test_id_is_none_for_new_products(self):
        product = Product.create("tools", "hammer")
        assert product.id is None  # assigned by repository
        assert not product.is_persisted

    def test_values_kept_exactly_as_given(self):
        product = Product.create(" tools", "hammer ")
        assert product.category == " tools"
        assert product.name == "hammer "

    @pytest.mark.parametrize("category", [None, "", "   "])
    def test_missing_category_rejected(self, category):
        with pytest.raises(ValidationError, match="category is required"):
            Product.create(category, "hammer")

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_missing_name_rejected(self, name):
        with pytest.raises(ValidationError, match="name is required"):
            Product.create("tools", name)


class TestProductReplaceDetails:

    def test_replaces_both_fields(self):
        product = Product(id=1, category="tools", name="hammer")
        product.replace_details("hardware", "wrench")
        assert product.category == "hardware"
        assert product.name == "wrench"
        assert product.id == 1

    def test_same_values_kept_when_passed_back(self):
        product = Product(id=1, category="tools", name="hammer")
        product.replace_details("tools", "wrench")
        assert product.category == "tools"
        assert product.name == "wrench"

    def test_absent_name_rejected_and_nothing_changes(self):
        product = Product(id=1, category="tools", name="hammer")
        with pytest.raises(ValidationError, match="name is required"):
            product.replace_details("food", None)
        assert product.category == "tools"
        assert product.name == "hammer"

    def test_persisted_once_id_assigned(self):
        assert Product(id=7, category="tools", name="hammer").is_persisted
