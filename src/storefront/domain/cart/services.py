# 🛒 storefront/domain/cart/services.py
"""
🛒 services.py - Кошик у памʼяті та перевірка «додати в кошик».

🔹 Обов'язки:
- Злиття позицій за ключем (товар, розмір, колір), зміна кількості, видалення, очищення.
- Підсумки: загальна кількість та сума (акційна ціна має пріоритет).
- Перевірка вибору перед додаванням: колір/розмір через резолвер наявності + діапазон кількості.

❗ Примітка:
Кошик нічого не зберігає і не ходить у мережу - персистентність лишається викликачу.
"""

from __future__ import annotations

# 🔠 Стандартні імпорти
import logging                                                          # 🧾 Логування мутацій кошика
from decimal import Decimal                                             # 💰 Підсумкова сума
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

# 🧩 Внутрішні модулі проєкту
from storefront.domain.inventory import (
    MSG_VALID,
    IInventoryResolver,
    InventoryResolver,
    SelectionValidation,
)
from storefront.domain.products import Product
from storefront.shared.errors import CartError
from storefront.shared.utils.logger import LOG_NAME
from storefront.shared.utils.money import format_currency, q2
from .entities import CartLine, LineKey


logger = logging.getLogger(f"{LOG_NAME}.domain.cart.services")


# ================================
# 💬 ПОВІДОМЛЕННЯ ДЛЯ UI
# ================================
MSG_QUANTITY_RANGE = "Please enter a quantity between 1 and {stock}"
MSG_QUANTITY_MIN = "Please enter a quantity of at least 1"
MSG_PRODUCT_OUT_OF_STOCK = "Sorry, {name} is out of stock"


def _is_quantity(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# ================================
# 🧮 ДОСТУПНА КІЛЬКІСТЬ
# ================================
def available_quantity(
    product: Product,
    color: Optional[str],
    size: Optional[str],
    resolver: Optional[IInventoryResolver] = None,
) -> Optional[int]:
    """
    Скільки одиниць обраного варіанту можна покласти в кошик.

    - є і кольори, і розміри → спільний залишок пари (min-евристика резолвера);
    - є лише один вимір → власний залишок обраного запису (0, якщо не знайдено);
    - немає жодного → загальний `product.stock`, або None (без обмеження), якщо його немає.
    """
    resolver = resolver or InventoryResolver()
    if product.colors and product.sizes:
        return resolver.stock_for(product, color, size)
    if product.colors:
        entry = resolver.find_color(product, color)
        return entry.stock if entry is not None else 0
    if product.sizes:
        entry = resolver.find_size(product, size)
        return entry.stock if entry is not None else 0
    return product.stock


def validate_add_to_cart(
    product: Product,
    color: Optional[str],
    size: Optional[str],
    quantity: int,
    resolver: Optional[IInventoryResolver] = None,
) -> SelectionValidation:
    """
    Перевіряє вибір перед додаванням у кошик.

    Спершу правила `validate_selection` (колір → розмір → залишок пари), потім кількість `1..stock`.
    """
    resolver = resolver or InventoryResolver()
    selection = resolver.validate_selection(product, color, size)
    if not selection.is_valid:
        return selection

    stock = available_quantity(product, color, size, resolver)
    if stock is None:
        if not _is_quantity(quantity) or quantity < 1:
            return SelectionValidation(False, MSG_QUANTITY_MIN)
        return SelectionValidation(True, MSG_VALID)

    if stock == 0:
        return SelectionValidation(False, MSG_PRODUCT_OUT_OF_STOCK.format(name=product.name))
    if not _is_quantity(quantity) or quantity < 1 or quantity > stock:
        return SelectionValidation(False, MSG_QUANTITY_RANGE.format(stock=stock))
    return SelectionValidation(True, MSG_VALID)


# ================================
# 🏛️ КОШИК
# ================================
class Cart:
    """🛒 Кошик у памʼяті; позиції зберігають порядок першого додавання."""

    def __init__(
        self,
        lines: Iterable[CartLine] = (),
        *,
        currency: str = "USD",
        resolver: Optional[IInventoryResolver] = None,
    ) -> None:
        self._lines: Dict[LineKey, CartLine] = {}
        for line in lines:
            self._merge(line)
        self.currency = currency
        self._resolver = resolver or InventoryResolver()

    # ---------- Читання ----------
    @property
    def lines(self) -> Tuple[CartLine, ...]:
        return tuple(self._lines.values())

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[CartLine]:
        return iter(self.lines)

    def get(self, product_id: str, size: Optional[str] = None, color: Optional[str] = None) -> Optional[CartLine]:
        return self._lines.get((product_id, size or None, color or None))

    def total_quantity(self) -> int:
        return sum(line.quantity for line in self._lines.values())

    def total_amount(self) -> Decimal:
        """Сума до сплати (unit_price × кількість), округлена до центів."""
        return q2(sum((line.unit_price * line.quantity for line in self._lines.values()), Decimal("0")))

    def formatted_total(self) -> str:
        return format_currency(self.total_amount(), self.currency)

    # ---------- Мутації ----------
    def add(
        self,
        product: Product,
        quantity: int = 1,
        size: Optional[str] = None,
        color: Optional[str] = None,
    ) -> CartLine:
        """Додає товар; однаковий (товар, розмір, колір) зливається в одну позицію."""
        if not _is_quantity(quantity) or quantity < 1:
            raise CartError(MSG_QUANTITY_MIN, product_id=product.id, details=f"quantity={quantity!r}")
        line = self._merge(CartLine.for_product(product, quantity, size=size, color=color))
        logger.info(
            "➕ Cart.add | product=%s size=%s color=%s quantity=%d",
            product.id,
            line.size,
            line.color,
            line.quantity,
        )
        return line

    def add_validated(
        self,
        product: Product,
        quantity: int = 1,
        size: Optional[str] = None,
        color: Optional[str] = None,
    ) -> CartLine:
        """
        Як `add`, але спершу перевіряє вибір і кількість проти залишку.

        Raises:
            CartError: з повідомленням для покупця, якщо перевірка не пройдена.
        """
        result = validate_add_to_cart(product, color, size, quantity, self._resolver)
        if not result.is_valid:
            logger.info("🚫 Cart.add_validated відхилено | product=%s reason=%r", product.id, result.message)
            raise CartError(result.message, product_id=product.id)
        return self.add(product, quantity, size=size, color=color)

    def remove(self, product_id: str, size: Optional[str] = None, color: Optional[str] = None) -> bool:
        removed = self._lines.pop((product_id, size or None, color or None), None)
        logger.info("➖ Cart.remove | product=%s size=%s color=%s removed=%s", product_id, size, color, removed is not None)
        return removed is not None

    def update_quantity(
        self,
        product_id: str,
        size: Optional[str],
        color: Optional[str],
        quantity: int,
    ) -> Optional[CartLine]:
        """Задає нову кількість; `quantity <= 0` видаляє позицію. Невідома позиція → None."""
        if not _is_quantity(quantity):
            raise CartError(MSG_QUANTITY_MIN, product_id=product_id, details=f"quantity={quantity!r}")
        key: LineKey = (product_id, size or None, color or None)
        line = self._lines.get(key)
        if line is None:
            logger.debug("🔎 Cart.update_quantity: позицію %s не знайдено", key)
            return None
        if quantity <= 0:
            del self._lines[key]
            logger.info("🗑️ Cart.update_quantity видалив позицію %s", key)
            return None
        updated = line.with_quantity(quantity)
        self._lines[key] = updated
        logger.info("✏️ Cart.update_quantity | %s → %d", key, quantity)
        return updated

    def clear(self) -> None:
        self._lines.clear()
        logger.info("🧹 Cart.clear")

    def to_list(self) -> List[dict]:
        return [line.to_dict() for line in self._lines.values()]

    # ---------- Внутрішнє ----------
    def _merge(self, line: CartLine) -> CartLine:
        existing = self._lines.get(line.key)
        merged = existing.with_quantity(existing.quantity + line.quantity) if existing else line
        self._lines[line.key] = merged
        return merged


__all__ = [
    "Cart",
    "available_quantity",
    "validate_add_to_cart",
    "MSG_QUANTITY_RANGE",
    "MSG_QUANTITY_MIN",
    "MSG_PRODUCT_OUT_OF_STOCK",
]
