"""
🧪 test_categories.py - ієрархія категорій та фільтр товарів.
"""

import pytest

from storefront.domain.catalog import (
    Category,
    category_query_params,
    is_main_category,
    product_matches_category,
    subcategory_ids,
)
from storefront.domain.products import Product

CATEGORIES = [
    {"_id": "men", "name": "Men", "type": "main", "parent": None},
    {"_id": "men-run", "name": "Running", "type": "sub", "parent": {"_id": "men"}},
    {"_id": "women", "name": "Women", "parent": None},
    {"_id": "men-court", "name": "Court", "parent": "men"},
    {"_id": "women-trail", "name": "Trail", "type": "sub", "parent": "women"},
    {"name": "broken"},
]


def test_category_from_record():
    category = Category.from_record(CATEGORIES[1])

    assert category == Category(id="men-run", name="Running", type="sub", parent_id="men")
    assert Category.from_record({"name": "no id"}) is None


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ({"_id": "a", "type": "main", "parent": "x"}, True),
        ({"_id": "b", "type": "sub"}, False),
        ({"_id": "c"}, True),
        ({"_id": "d", "parent": "c"}, False),
        (None, False),
    ],
)
def test_is_main_category(raw, expected):
    assert is_main_category(raw) is expected


def test_subcategory_ids_expands_main_category_in_order():
    assert subcategory_ids(CATEGORIES, "men") == ["men", "men-run", "men-court"]
    assert subcategory_ids(CATEGORIES, "women") == ["women", "women-trail"]


def test_subcategory_ids_for_sub_unknown_or_missing():
    assert subcategory_ids(CATEGORIES, "men-run") == ["men-run"]
    assert subcategory_ids(CATEGORIES, "kids") == ["kids"]
    assert subcategory_ids(None, "men") == ["men"]
    assert subcategory_ids(CATEGORIES, None) == []


def test_product_matches_category_with_raw_and_entity():
    raw = {"name": "Runner", "category": {"_id": "men-run"}}
    entity = Product.from_record({"_id": "p-1", "name": "Court", "price": 1, "category": "men-court"})

    assert product_matches_category(raw, "men", CATEGORIES) is True
    assert product_matches_category(entity, "men", CATEGORIES) is True
    assert product_matches_category(raw, "women", CATEGORIES) is False
    assert product_matches_category(raw, "men-run", CATEGORIES) is True


def test_product_matches_category_edge_cases():
    assert product_matches_category({"name": "x"}, None, CATEGORIES) is True
    assert product_matches_category(None, "men", CATEGORIES) is True
    assert product_matches_category({"name": "no category"}, "men", CATEGORIES) is False


def test_category_query_params():
    assert category_query_params(None, CATEGORIES) == {}
    assert category_query_params("men", CATEGORIES) == {"category": "men", "isMainCategory": True}
    assert category_query_params("men-run", CATEGORIES) == {"category": "men-run"}
    assert category_query_params("kids", CATEGORIES) == {"category": "kids"}
