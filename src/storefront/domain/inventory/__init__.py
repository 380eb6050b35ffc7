# 🧩 storefront/domain/inventory/__init__.py
"""
🧩 Пакет `domain.inventory` - резолвер наявності колір × розмір.

🔹 `interfaces.py` - DTO `SizeAvailability`/`ColorAvailability`/`Combination`/`SelectionValidation`
   і контракт `IInventoryResolver`.
🔹 `services.py` - чистий сервіс `InventoryResolver` + модульні шорткати.
"""

from .interfaces import (
    Color,
    ColorAvailability,
    Combination,
    IInventoryResolver,
    ProductLike,
    SelectionValidation,
    Size,
    SizeAvailability,
)
from .services import (
    MSG_OUT_OF_STOCK,
    MSG_SELECT_COLOR,
    MSG_SELECT_SIZE,
    MSG_VALID,
    InventoryResolver,
    all_combinations,
    colors_for_size,
    find_color,
    find_size,
    is_available,
    lookup_stock,
    sizes_for_color,
    stock_for,
    validate_selection,
)


# ================================
# 📤 ПУБЛІЧНИЙ API ПАКЕТА
# ================================
__all__ = [
    # Типи та DTO
    "Color",
    "Size",
    "ProductLike",
    "SizeAvailability",
    "ColorAvailability",
    "Combination",
    "SelectionValidation",
    "IInventoryResolver",
    # Сервіс
    "InventoryResolver",
    "MSG_SELECT_COLOR",
    "MSG_SELECT_SIZE",
    "MSG_OUT_OF_STOCK",
    "MSG_VALID",
    # Шорткати
    "sizes_for_color",
    "colors_for_size",
    "stock_for",
    "is_available",
    "lookup_stock",
    "find_color",
    "find_size",
    "all_combinations",
    "validate_selection",
]
