# 🛒 storefront/domain/cart/entities.py
"""
🛒 Рядок кошика - незмінний знімок товару з обраним кольором/розміром та кількістю.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from dataclasses import dataclass, replace                          # 🧱 Незмінний рядок
from decimal import Decimal                                         # 💰 Ціни
from typing import Any, Dict, Optional, Tuple

# 🧩 Внутрішні модулі проєкту
from storefront.domain.products import Product
from storefront.shared.utils.money import q2

LineKey = Tuple[str, Optional[str], Optional[str]]                  # 🔑 (product_id, size, color)


@dataclass(frozen=True, slots=True)
class CartLine:
    """Позиція кошика. Ключ злиття: товар + розмір + колір."""

    product_id: str
    name: str
    price: Decimal
    quantity: int
    size: Optional[str] = None
    color: Optional[str] = None
    sale_price: Optional[Decimal] = None
    image: Optional[str] = None

    @classmethod
    def for_product(
        cls,
        product: Product,
        quantity: int,
        size: Optional[str] = None,
        color: Optional[str] = None,
    ) -> "CartLine":
        return cls(
            product_id=product.id,
            name=product.name,
            price=product.price,
            quantity=quantity,
            size=size or None,
            color=color or None,
            sale_price=product.sale_price,
            image=product.images[0] if product.images else None,
        )

    @property
    def key(self) -> LineKey:
        return (self.product_id, self.size, self.color)

    @property
    def unit_price(self) -> Decimal:
        """Акційна ціна виграє, якщо вона задана і не нульова."""
        return self.sale_price if self.sale_price else self.price

    @property
    def subtotal(self) -> Decimal:
        return q2(self.unit_price * self.quantity)

    def with_quantity(self, quantity: int) -> "CartLine":
        return replace(self, quantity=quantity)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "productId": self.product_id,
            "name": self.name,
            "price": self.price,
            "salePrice": self.sale_price,
            "image": self.image,
            "quantity": self.quantity,
            "size": self.size,
            "color": self.color,
        }


__all__ = ["CartLine", "LineKey"]
