# 🛒 storefront/domain/cart/__init__.py
"""
🛒 Пакет `domain.cart` - кошик у памʼяті, підсумки та перевірка «додати в кошик».
"""

from .entities import CartLine, LineKey
from .services import (
    MSG_PRODUCT_OUT_OF_STOCK,
    MSG_QUANTITY_MIN,
    MSG_QUANTITY_RANGE,
    Cart,
    available_quantity,
    validate_add_to_cart,
)

__all__ = [
    "CartLine",
    "LineKey",
    "Cart",
    "available_quantity",
    "validate_add_to_cart",
    "MSG_QUANTITY_RANGE",
    "MSG_QUANTITY_MIN",
    "MSG_PRODUCT_OUT_OF_STOCK",
]
