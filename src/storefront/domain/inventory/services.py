# 📦 storefront/domain/inventory/services.py
"""
📦 services.py - Чистий резолвер наявності колір × розмір для одного товару.

🔹 Обов'язки:
- Розміри, доступні для обраного кольору, і кольори, доступні для обраного розміру.
- Спільний залишок пари колір × розмір та перелік усіх пар у наявності.
- Перевірка вибору покупця з людським повідомленням.

🔹 Модель залишку:
Товар має лише незалежні лічильники по кольорах і по розмірах, тому спільний залишок
пари - це евристика `min(залишок кольору, залишок розміру)`, а не справжній облік SKU.
Одна й та сама одиниця може «рахуватися» в кількох парах.

❗ Примітка:
Модуль ніколи не кидає винятків. Відсутні масиви, невідомі назви та порожній вибір
дають порожній список або нульовий залишок. Вхідний товар лише читається.
"""

from __future__ import annotations

# 🔠 Стандартні імпорти
import logging                                                          # 🧾 Логування всіх кроків
from collections.abc import Mapping                                     # 🧭 Сирі записи API
from decimal import ROUND_FLOOR, Decimal, InvalidOperation              # 🔢 Числові рядки залишку
from typing import Any, List, Optional, Tuple                           # 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from storefront.shared.utils.logger import LOG_NAME                     # 🏷️ Базове імʼя логера
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


logger = logging.getLogger(f"{LOG_NAME}.domain.inventory.services")


# ================================
# 💬 ПОВІДОМЛЕННЯ ДЛЯ UI
# ================================
MSG_SELECT_COLOR = "Please select a color"
MSG_SELECT_SIZE = "Please select a size"
MSG_OUT_OF_STOCK = "Sorry, {color} in size {size} is out of stock"
MSG_VALID = "Selection is valid"


# ================================
# 🧹 ЧИТАННЯ ЗАПИСІВ
# ================================
def _read(obj: Any, name: str) -> Any:
    """Читає поле із мапи (JSON API) або атрибут сутності."""
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def _entries(product: ProductLike, name: str) -> Optional[Tuple[Any, ...]]:
    """
    Повертає масив `colors`/`sizes` як tuple або None, якщо його немає.

    Порожній список - це «масив є, але порожній», а не відсутність.
    """
    raw = _read(product, name)
    if isinstance(raw, (list, tuple)):
        return tuple(raw)
    return None


def _stock(entry: Any) -> int:
    """Залишок запису як невідʼємне ціле; все нечислове читається як 0."""
    raw = _read(entry, "stock")
    if raw is None or isinstance(raw, bool):
        return 0
    try:
        number = Decimal(str(raw).strip())
    except (InvalidOperation, ValueError):
        logger.debug("⚠️ _stock: нечисловий залишок %r → 0", raw)
        return 0
    if not number.is_finite() or number <= 0:
        return 0
    return int(number.to_integral_value(rounding=ROUND_FLOOR))


def _images(entry: Any) -> Tuple[str, ...]:
    raw = _read(entry, "images")
    if isinstance(raw, (list, tuple)):
        return tuple(raw)
    return ()


def _find(entries: Tuple[Any, ...], key: str, name: Any) -> Optional[Any]:
    """Лінійний пошук за точним збігом; перший збіг виграє."""
    for entry in entries:
        if _read(entry, key) == name:
            return entry
    return None


def _joint(color_stock: int, size_stock: int) -> int:
    if color_stock > 0 and size_stock > 0:
        return min(color_stock, size_stock)
    return 0


# ================================
# 🏛️ ДОМЕННИЙ СЕРВІС
# ================================
class InventoryResolver(IInventoryResolver):
    """💧 Stateless-резолвер наявності: кожен виклик рахує результат заново."""

    # ---------- Вибір по одному виміру ----------
    def sizes_for_color(self, product: ProductLike, color: Optional[Color]) -> List[SizeAvailability]:
        """
        Повертає всі розміри товару (у вхідному порядку) із залишком для кольору `color`.

        Returns:
            List[SizeAvailability]: Порожній список, якщо масивів немає або колір не знайдено.
        """
        colors = _entries(product, "colors")
        sizes = _entries(product, "sizes")
        if colors is None or sizes is None:
            logger.debug("🕳️ sizes_for_color: немає colors/sizes у товарі")
            return []
        if not color:
            return []

        color_entry = _find(colors, "color", color)
        if color_entry is None:
            logger.debug("🔎 sizes_for_color: колір %r не знайдено", color)
            return []

        color_stock = _stock(color_entry)
        result: List[SizeAvailability] = []
        for size_entry in sizes:
            size_stock = _stock(size_entry)
            available = _joint(color_stock, size_stock)
            result.append(
                SizeAvailability(
                    size=_read(size_entry, "size"),
                    stock=size_stock,
                    available_stock=available,
                    is_available=available > 0,
                )
            )
        logger.debug(
            "📏 sizes_for_color | color=%r sizes=%d available=%d",
            color,
            len(result),
            sum(1 for item in result if item.is_available),
        )
        return result

    def colors_for_size(self, product: ProductLike, size: Optional[Size]) -> List[ColorAvailability]:
        """Симетрично до `sizes_for_color`: всі кольори із залишком для розміру `size`."""
        colors = _entries(product, "colors")
        sizes = _entries(product, "sizes")
        if colors is None or sizes is None:
            logger.debug("🕳️ colors_for_size: немає colors/sizes у товарі")
            return []
        if not size:
            return []

        size_entry = _find(sizes, "size", size)
        if size_entry is None:
            logger.debug("🔎 colors_for_size: розмір %r не знайдено", size)
            return []

        size_stock = _stock(size_entry)
        result: List[ColorAvailability] = []
        for color_entry in colors:
            color_stock = _stock(color_entry)
            available = _joint(color_stock, size_stock)
            result.append(
                ColorAvailability(
                    color=_read(color_entry, "color"),
                    stock=color_stock,
                    available_stock=available,
                    is_available=available > 0,
                    hexcode=_read(color_entry, "hexcode") or None,
                    images=_images(color_entry),
                )
            )
        logger.debug(
            "🎨 colors_for_size | size=%r colors=%d available=%d",
            size,
            len(result),
            sum(1 for item in result if item.is_available),
        )
        return result

    # ---------- Конкретна пара ----------
    def stock_for(self, product: ProductLike, color: Optional[Color], size: Optional[Size]) -> int:
        """Спільний залишок пари; 0 при порожньому виборі, відсутніх масивах або промаху пошуку."""
        stock = self.lookup_stock(product, color, size)
        return stock if stock is not None else 0

    def is_available(self, product: ProductLike, color: Optional[Color], size: Optional[Size]) -> bool:
        return self.stock_for(product, color, size) > 0

    def lookup_stock(self, product: ProductLike, color: Optional[Color], size: Optional[Size]) -> Optional[int]:
        """
        Як `stock_for`, але розрізняє «такої пари немає» (None) і «пара є, залишок 0» (0).
        """
        if not color or not size:
            return None
        colors = _entries(product, "colors")
        sizes = _entries(product, "sizes")
        if colors is None or sizes is None:
            return None

        color_entry = _find(colors, "color", color)
        size_entry = _find(sizes, "size", size)
        if color_entry is None or size_entry is None:
            logger.debug("🔎 lookup_stock: промах | color=%r size=%r", color, size)
            return None

        stock = min(_stock(color_entry), _stock(size_entry))
        logger.debug("🧮 lookup_stock | color=%r size=%r stock=%d", color, size, stock)
        return stock

    def find_color(self, product: ProductLike, color: Optional[Color]) -> Optional[Any]:
        """Запис кольору або None (перший збіг за точною назвою)."""
        colors = _entries(product, "colors")
        if not color or colors is None:
            return None
        return _find(colors, "color", color)

    def find_size(self, product: ProductLike, size: Optional[Size]) -> Optional[Any]:
        """Запис розміру або None (перший збіг за точною міткою)."""
        sizes = _entries(product, "sizes")
        if not size or sizes is None:
            return None
        return _find(sizes, "size", size)

    # ---------- Усі пари ----------
    def all_combinations(self, product: ProductLike) -> List[Combination]:
        """
        Декартів добуток colors × sizes, лише пари з додатним залишком.

        Порядок: зовнішній цикл по кольорах, внутрішній - по розмірах (як у вхідних масивах).
        """
        colors = _entries(product, "colors")
        sizes = _entries(product, "sizes")
        if colors is None or sizes is None:
            return []

        combinations: List[Combination] = []
        for color_entry in colors:
            color_stock = _stock(color_entry)
            if color_stock <= 0:
                continue                                                # 🚫 Колір без залишку не дає пар
            for size_entry in sizes:
                stock = min(color_stock, _stock(size_entry))
                if stock <= 0:
                    continue
                combinations.append(
                    Combination(
                        color=_read(color_entry, "color"),
                        size=_read(size_entry, "size"),
                        stock=stock,
                        color_hexcode=_read(color_entry, "hexcode") or None,
                        color_images=_images(color_entry),
                    )
                )
        logger.debug("🧩 all_combinations | colors=%d sizes=%d pairs=%d", len(colors), len(sizes), len(combinations))
        return combinations

    # ---------- Валідація вибору ----------
    def validate_selection(
        self,
        product: ProductLike,
        color: Optional[Color],
        size: Optional[Size],
    ) -> SelectionValidation:
        """
        Перевіряє вибір покупця. Правила в порядку пріоритету:
          1) товар має кольори, а колір не обрано → "Please select a color"
          2) товар має розміри, а розмір не обрано → "Please select a size"
          3) обрано обидва, але спільний залишок 0 → повідомлення про відсутність
          4) інакше вибір валідний
        """
        colors = _entries(product, "colors") or ()
        sizes = _entries(product, "sizes") or ()

        if colors and not color:
            result = SelectionValidation(False, MSG_SELECT_COLOR)
        elif sizes and not size:
            result = SelectionValidation(False, MSG_SELECT_SIZE)
        elif color and size and self.stock_for(product, color, size) == 0:
            result = SelectionValidation(False, MSG_OUT_OF_STOCK.format(color=color, size=size))
        else:
            result = SelectionValidation(True, MSG_VALID)

        logger.debug(
            "✅ validate_selection | color=%r size=%r valid=%s message=%r",
            color,
            size,
            result.is_valid,
            result.message,
        )
        return result


# ================================
# 🧰 МОДУЛЬНІ ШОРТКАТИ
# ================================
_default_resolver = InventoryResolver()


def sizes_for_color(product: ProductLike, color: Optional[Color]) -> List[SizeAvailability]:
    return _default_resolver.sizes_for_color(product, color)


def colors_for_size(product: ProductLike, size: Optional[Size]) -> List[ColorAvailability]:
    return _default_resolver.colors_for_size(product, size)


def stock_for(product: ProductLike, color: Optional[Color], size: Optional[Size]) -> int:
    return _default_resolver.stock_for(product, color, size)


def is_available(product: ProductLike, color: Optional[Color], size: Optional[Size]) -> bool:
    return _default_resolver.is_available(product, color, size)


def lookup_stock(product: ProductLike, color: Optional[Color], size: Optional[Size]) -> Optional[int]:
    return _default_resolver.lookup_stock(product, color, size)


def find_color(product: ProductLike, color: Optional[Color]) -> Optional[Any]:
    return _default_resolver.find_color(product, color)


def find_size(product: ProductLike, size: Optional[Size]) -> Optional[Any]:
    return _default_resolver.find_size(product, size)


def all_combinations(product: ProductLike) -> List[Combination]:
    return _default_resolver.all_combinations(product)


def validate_selection(product: ProductLike, color: Optional[Color], size: Optional[Size]) -> SelectionValidation:
    return _default_resolver.validate_selection(product, color, size)


__all__ = [
    "InventoryResolver",
    "MSG_SELECT_COLOR",
    "MSG_SELECT_SIZE",
    "MSG_OUT_OF_STOCK",
    "MSG_VALID",
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
