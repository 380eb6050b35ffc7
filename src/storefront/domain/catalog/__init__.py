# 🗂️ storefront/domain/catalog/__init__.py
"""
🗂️ Пакет `domain.catalog` - ієрархія категорій та фільтр товарів за категорією.
"""

from .categories import (
    Category,
    CategoryLike,
    category_query_params,
    is_main_category,
    product_matches_category,
    subcategory_ids,
)

__all__ = [
    "Category",
    "CategoryLike",
    "is_main_category",
    "subcategory_ids",
    "product_matches_category",
    "category_query_params",
]
