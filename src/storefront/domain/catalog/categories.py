# 🗂️ storefront/domain/catalog/categories.py
"""
🗂️ Ієрархія категорій каталогу: головні категорії та їхні підкатегорії.

🔹 `Category.from_record()` читає сирий запис API (`parent` може бути id або обʼєктом з `_id`).
🔹 `subcategory_ids()` розгортає головну категорію в [себе, *дочірні id].
🔹 `product_matches_category()` / `category_query_params()` - фільтр списку товарів.

❗ Як і резолвер наявності, ці функції не кидають винятків: невідомі id чи порожні дані
дають «нейтральний» результат.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                          # 🧾 Трасування фільтрів
from collections.abc import Mapping                                     # 🧭 Сирі записи
from dataclasses import dataclass                                       # 🧱 Сутність категорії
from typing import Any, Dict, Iterable, List, Optional, Union

# 🧩 Внутрішні модулі проєкту
from storefront.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.domain.catalog.categories")

MAIN = "main"
SUB = "sub"


def _ref_id(value: Any) -> Optional[str]:
    if isinstance(value, Mapping):
        value = value.get("_id") or value.get("id")
    if value is None or value == "":
        return None
    return str(value)


@dataclass(frozen=True, slots=True)
class Category:
    """Категорія каталогу."""

    id: str
    name: str = ""
    type: Optional[str] = None                                           # 🏷️ "main" / "sub" / None
    parent_id: Optional[str] = None

    @classmethod
    def from_record(cls, raw: Mapping[str, Any]) -> Optional["Category"]:
        """Сирий запис → Category; запис без id → None."""
        if not isinstance(raw, Mapping):
            return None
        category_id = _ref_id(raw.get("_id") if raw.get("_id") is not None else raw.get("id"))
        if category_id is None:
            logger.debug("🕳️ Category.from_record: запис без id %r", raw)
            return None
        return cls(
            id=category_id,
            name=str(raw.get("name") or ""),
            type=raw.get("type") or None,
            parent_id=_ref_id(raw.get("parent")),
        )


CategoryLike = Union[Category, Mapping[str, Any]]


def _as_categories(categories: Optional[Iterable[CategoryLike]]) -> List[Category]:
    result: List[Category] = []
    for item in categories or ():
        category = item if isinstance(item, Category) else Category.from_record(item)
        if category is not None:
            result.append(category)
    return result


def _find(categories: List[Category], category_id: str) -> Optional[Category]:
    for category in categories:
        if category.id == category_id:
            return category
    return None


# ================================
# 🎯 ПУБЛІЧНІ ФУНКЦІЇ
# ================================
def is_main_category(category: Optional[CategoryLike]) -> bool:
    """`type` має пріоритет; без `type` головна - та, що не має батька."""
    if category is None:
        return False
    if not isinstance(category, Category):
        category = Category.from_record(category)
        if category is None:
            return False
    if category.type == MAIN:
        return True
    if category.type == SUB:
        return False
    return category.parent_id is None


def subcategory_ids(categories: Optional[Iterable[CategoryLike]], main_category_id: Optional[str]) -> List[str]:
    """
    Розгортає категорію у список id для фільтрації.

    Returns:
        List[str]: `[main_id]` для підкатегорії чи невідомого id,
        `[main_id, *дочірні у вхідному порядку]` для головної, `[]` без id.
    """
    if not main_category_id:
        return []
    main_id = str(main_category_id)
    items = _as_categories(categories)
    main = _find(items, main_id)
    if main is None:
        logger.debug("🚨 subcategory_ids: категорію %s не знайдено", main_id)
        return [main_id]
    if main.parent_id is not None or main.type == SUB:
        return [main_id]

    children = [category.id for category in items if category.parent_id == main_id]
    logger.debug("📂 subcategory_ids | main=%s children=%d", main_id, len(children))
    return [main_id, *children]


def product_matches_category(
    product: Any,
    selected_category_id: Optional[str],
    categories: Optional[Iterable[CategoryLike]],
) -> bool:
    """Чи належить товар до обраної категорії або її підкатегорій. Без фільтра → True."""
    if product is None or not selected_category_id:
        return True
    if isinstance(product, Mapping):
        product_category = _ref_id(product.get("category"))
    else:
        product_category = _ref_id(getattr(product, "category_id", None))
    if product_category is None:
        logger.debug("❌ product_matches_category: товар без категорії")
        return False
    return product_category in subcategory_ids(categories, selected_category_id)


def category_query_params(
    selected_category_id: Optional[str],
    categories: Optional[Iterable[CategoryLike]],
) -> Dict[str, Any]:
    """Параметри запиту списку товарів для обраної категорії."""
    if not selected_category_id:
        return {}
    selected_id = str(selected_category_id)
    selected = _find(_as_categories(categories), selected_id)
    if selected is not None and is_main_category(selected):
        return {"category": selected_id, "isMainCategory": True}
    return {"category": selected_id}


__all__ = [
    "Category",
    "CategoryLike",
    "is_main_category",
    "subcategory_ids",
    "product_matches_category",
    "category_query_params",
]
