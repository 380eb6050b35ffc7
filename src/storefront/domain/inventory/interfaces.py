# 🧩 storefront/domain/inventory/interfaces.py
"""
🧩 Контракти та DTO резолвера наявності колір × розмір.

🔹 Типи-аліаси (Color/Size) та вихідні структури `SizeAvailability`, `ColorAvailability`,
   `Combination`, `SelectionValidation`.
🔹 Кожен DTO має `to_dict()` у camelCase-формі, яку рендерить UI.
🔹 Чистий Protocol `IInventoryResolver` без I/O, кешів та мутацій вхідних даних.
"""

from __future__ import annotations                                      # ⏳ Посилання на типи нижче

# 🔠 Системні імпорти
import logging                                                          # 🧾 Єдине джерело логування
from dataclasses import dataclass, field                                # 🧱 Створення DTO
from typing import Any, Dict, List, Mapping, Optional, Protocol, Tuple, Union, runtime_checkable

# 🧩 Внутрішні модулі
from storefront.shared.utils.logger import LOG_NAME                     # 🏷️ Глобальний префікс логера


logger = logging.getLogger(f"{LOG_NAME}.domain.inventory.interfaces")


# ================================
# 🧾 ПУБЛІЧНІ ТИПИ (АЛІАСИ)
# ================================
Color = str                                                             # 🎨 Назва кольору ("Black")
Size = str                                                              # 📏 Мітка розміру ("9", "XL")
ProductLike = Union[Mapping[str, Any], Any]                             # 📦 Сирий запис API або сутність `Product`


# ================================
# 🏛️ СТРУКТУРИ ДАНИХ (DTO)
# ================================
@dataclass(frozen=True, slots=True)
class SizeAvailability:
    """Розмір із сумісним залишком для обраного кольору."""

    size: Size
    stock: int                                                          # 📦 Власний залишок розміру
    available_stock: int                                                # 🧮 min(колір, розмір) або 0
    is_available: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "size": self.size,
            "stock": self.stock,
            "availableStock": self.available_stock,
            "isAvailable": self.is_available,
        }


@dataclass(frozen=True, slots=True)
class ColorAvailability:
    """Колір із сумісним залишком для обраного розміру."""

    color: Color
    stock: int
    available_stock: int
    is_available: bool
    hexcode: Optional[str] = None                                       # 🎨 "#000000" для чипа
    images: Tuple[str, ...] = field(default_factory=tuple)              # 🖼️ Фото колірного варіанту

    def to_dict(self) -> Dict[str, Any]:
        return {
            "color": self.color,
            "stock": self.stock,
            "hexcode": self.hexcode,
            "images": list(self.images),
            "availableStock": self.available_stock,
            "isAvailable": self.is_available,
        }


@dataclass(frozen=True, slots=True)
class Combination:
    """Пара колір × розмір із додатним спільним залишком."""

    color: Color
    size: Size
    stock: int
    color_hexcode: Optional[str] = None
    color_images: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "color": self.color,
            "size": self.size,
            "stock": self.stock,
            "colorHexcode": self.color_hexcode,
            "colorImages": list(self.color_images),
        }


@dataclass(frozen=True, slots=True)
class SelectionValidation:
    """Результат перевірки вибору покупця з текстом для UI."""

    is_valid: bool
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {"isValid": self.is_valid, "message": self.message}


# ================================
# 🏛️ ІНТЕРФЕЙС СЕРВІСУ (PROTOCOL)
# ================================
@runtime_checkable
class IInventoryResolver(Protocol):
    """
    💧 Контракт резолвера наявності.
    Чистий домен: жодного I/O чи стану між викликами, вхідний товар лише читається.
    """

    def sizes_for_color(self, product: ProductLike, color: Optional[Color]) -> List[SizeAvailability]:
        ...

    def colors_for_size(self, product: ProductLike, size: Optional[Size]) -> List[ColorAvailability]:
        ...

    def stock_for(self, product: ProductLike, color: Optional[Color], size: Optional[Size]) -> int:
        ...

    def is_available(self, product: ProductLike, color: Optional[Color], size: Optional[Size]) -> bool:
        ...

    def lookup_stock(self, product: ProductLike, color: Optional[Color], size: Optional[Size]) -> Optional[int]:
        ...

    def find_color(self, product: ProductLike, color: Optional[Color]) -> Optional[Any]:
        ...

    def find_size(self, product: ProductLike, size: Optional[Size]) -> Optional[Any]:
        ...

    def all_combinations(self, product: ProductLike) -> List[Combination]:
        ...

    def validate_selection(
        self,
        product: ProductLike,
        color: Optional[Color],
        size: Optional[Size],
    ) -> SelectionValidation:
        ...


__all__ = [
    "Color",
    "Size",
    "ProductLike",
    "SizeAvailability",
    "ColorAvailability",
    "Combination",
    "SelectionValidation",
    "IInventoryResolver",
]
