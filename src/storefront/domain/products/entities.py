# 📦 storefront/domain/products/entities.py
"""
📦 Доменно-чисті сутності товару з валідацією на межі інжесту.

🔹 `ColorEntry` / `SizeEntry` - запис кольору/розміру з власним залишком.
🔹 `Product` - незмінний товар; `Product.from_record()` будує його з сирого JSON каталогу.
🔹 Інваріант унікальності: назви кольорів і мітки розмірів в межах товару не повторюються.
🔹 Резолвер наявності читає `Product` так само, як і сирий запис (`colors`/`sizes`).
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                      # 🧾 Логування кроків валідації
from collections import Counter                                     # 🔁 Пошук дублікатів
from dataclasses import dataclass, field                            # 🧱 Опис сутностей
from decimal import Decimal, InvalidOperation                       # 💰 Ціни без float
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple    # 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from storefront.shared.errors import ProductDataError               # 🚨 Помилка інжесту
from storefront.shared.utils.immutables import FrozenMapping, freeze, thaw  # 🧊 Заморожені extra-поля
from storefront.shared.utils.logger import LOG_NAME                 # 🏷️ Префікс логера

logger = logging.getLogger(f"{LOG_NAME}.domain.products.entities")


# ================================
# 📏 КОНСТАНТИ ВАЛІДАЦІЇ
# ================================
NAME_MAX_LEN = 200                                                  # 🏷️ Назва товару
LABEL_MAX_LEN = 60                                                  # 🎨 Назва кольору / мітка розміру
IMAGES_MAX = 50                                                     # 🖼️ Максимум картинок
_KNOWN_KEYS = frozenset(
    {"_id", "id", "name", "price", "salePrice", "colors", "sizes", "stock", "category", "images"}
)


# ================================
# 🧽 НОРМАЛІЗАЦІЙНІ ХЕЛПЕРИ
# ================================
def _clean_str(value: Any, *, max_len: int) -> str:
    """Trim + обрізання до `max_len`; None → ''."""
    raw = str(value if value is not None else "").strip()
    if len(raw) > max_len:
        logger.debug("✂️ _clean_str: %r → обрізано до %s символів", raw, max_len)
        return raw[:max_len]
    return raw


def _coerce_stock(value: Any, *, where: str) -> int:
    """Залишок → int >= 0. Відсутній залишок читаємо як 0, некоректний - помилка."""
    if value is None:
        return 0
    if isinstance(value, bool):
        raise ProductDataError(f"Invalid stock for {where}: {value!r}", field="stock")
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ProductDataError(f"Invalid stock for {where}: {value!r}", field="stock") from None
    if not number.is_finite() or number != number.to_integral_value() or number < 0:
        raise ProductDataError(f"Stock for {where} must be a non-negative integer, got {value!r}", field="stock")
    return int(number)


def _coerce_price(value: Any, *, field_name: str, required: bool) -> Optional[Decimal]:
    if value is None or value == "":
        if required:
            raise ProductDataError(f"Missing {field_name}", field=field_name)
        return None
    if isinstance(value, bool):
        raise ProductDataError(f"Invalid {field_name}: {value!r}", field=field_name)
    try:
        amount = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ProductDataError(f"Invalid {field_name}: {value!r}", field=field_name) from None
    if not amount.is_finite() or amount < 0:
        raise ProductDataError(f"{field_name} must be a non-negative amount, got {value!r}", field=field_name)
    return amount


def _normalize_images(images: Any) -> Tuple[str, ...]:
    """Список зображень → tuple непорожніх рядків без повторів, з лімітом."""
    if not isinstance(images, (list, tuple)):
        return ()
    result: list[str] = []
    for item in images:
        if isinstance(item, str) and item.strip() and item.strip() not in result:
            result.append(item.strip())
    return tuple(result[:IMAGES_MAX])


def _ref_id(value: Any) -> Optional[str]:
    """Посилання на інший обʼєкт: рядок/число або мапа з `_id`."""
    if isinstance(value, Mapping):
        value = value.get("_id") or value.get("id")
    if value is None or value == "":
        return None
    return str(value)


def _duplicates(labels: Iterable[str]) -> Tuple[str, ...]:
    counts = Counter(labels)
    return tuple(label for label, count in counts.items() if count > 1)


# ================================
# 🎨 ЗАПИСИ КОЛЬОРІВ ТА РОЗМІРІВ
# ================================
@dataclass(frozen=True, slots=True)
class ColorEntry:
    """Колірний варіант товару."""

    color: str
    stock: int = 0
    hexcode: Optional[str] = None
    images: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        name = _clean_str(self.color, max_len=LABEL_MAX_LEN)
        if not name:
            raise ProductDataError("Color name must not be empty", field="colors")
        object.__setattr__(self, "color", name)
        object.__setattr__(self, "stock", _coerce_stock(self.stock, where=f"color {name!r}"))
        object.__setattr__(self, "hexcode", _clean_str(self.hexcode, max_len=16) or None)
        object.__setattr__(self, "images", _normalize_images(self.images))

    @classmethod
    def from_record(cls, raw: Mapping[str, Any]) -> "ColorEntry":
        if not isinstance(raw, Mapping):
            raise ProductDataError(f"Color entry must be an object, got {type(raw).__name__}", field="colors")
        return cls(
            color=raw.get("color"),
            stock=raw.get("stock"),
            hexcode=raw.get("hexcode"),
            images=raw.get("images") or (),
        )

    def to_record(self) -> Dict[str, Any]:
        return {"color": self.color, "stock": self.stock, "hexcode": self.hexcode, "images": list(self.images)}


@dataclass(frozen=True, slots=True)
class SizeEntry:
    """Розмір товару з власним залишком."""

    size: str
    stock: int = 0

    def __post_init__(self) -> None:
        label = _clean_str(self.size, max_len=LABEL_MAX_LEN)
        if not label:
            raise ProductDataError("Size label must not be empty", field="sizes")
        object.__setattr__(self, "size", label)
        object.__setattr__(self, "stock", _coerce_stock(self.stock, where=f"size {label!r}"))

    @classmethod
    def from_record(cls, raw: Mapping[str, Any]) -> "SizeEntry":
        if not isinstance(raw, Mapping):
            raise ProductDataError(f"Size entry must be an object, got {type(raw).__name__}", field="sizes")
        return cls(size=raw.get("size"), stock=raw.get("stock"))

    def to_record(self) -> Dict[str, Any]:
        return {"size": self.size, "stock": self.stock}


# ================================
# 🛍️ ОСНОВНА СУТНІСТЬ
# ================================
@dataclass(frozen=True, slots=True)
class Product:
    """
    Валідований незмінний товар каталогу.

    `stock` - загальний залишок товару (використовується, коли немає ні кольорів, ні розмірів).
    `extra` - решта полів API (опис, бренд, рейтинг…) у замороженому вигляді.
    """

    id: str
    name: str
    price: Decimal
    sale_price: Optional[Decimal] = None
    colors: Tuple[ColorEntry, ...] = field(default_factory=tuple)
    sizes: Tuple[SizeEntry, ...] = field(default_factory=tuple)
    stock: Optional[int] = None
    category_id: Optional[str] = None
    images: Tuple[str, ...] = field(default_factory=tuple)
    extra: Mapping[str, Any] = field(default_factory=lambda: FrozenMapping({}))

    def __post_init__(self) -> None:
        product_id = _clean_str(self.id, max_len=64)
        if not product_id:
            raise ProductDataError("Product id must not be empty", field="_id")
        object.__setattr__(self, "id", product_id)

        name = _clean_str(self.name, max_len=NAME_MAX_LEN)
        if not name:
            raise ProductDataError("Product name must not be empty", product_id=product_id, field="name")
        object.__setattr__(self, "name", name)

        object.__setattr__(self, "price", _coerce_price(self.price, field_name="price", required=True))
        object.__setattr__(self, "sale_price", _coerce_price(self.sale_price, field_name="salePrice", required=False))
        if self.stock is not None:
            object.__setattr__(self, "stock", _coerce_stock(self.stock, where=f"product {product_id!r}"))
        object.__setattr__(self, "colors", tuple(self.colors))
        object.__setattr__(self, "sizes", tuple(self.sizes))
        object.__setattr__(self, "images", _normalize_images(self.images))
        object.__setattr__(self, "extra", freeze(dict(self.extra or {})))

        # 🔁 Інваріант унікальності
        for label, entries, attr in (("color", self.colors, "color"), ("size", self.sizes, "size")):
            dupes = _duplicates(getattr(entry, attr) for entry in entries)
            if dupes:
                logger.warning("🔁 Product %s: дублікати %s %s", product_id, label, dupes)
                raise ProductDataError(
                    f"Duplicate {label} {', '.join(dupes)} in product {product_id}",
                    product_id=product_id,
                    field=f"{label}s",
                    duplicates=dupes,
                )

        logger.debug(
            "✅ Product побудовано | id=%s colors=%d sizes=%d",
            product_id,
            len(self.colors),
            len(self.sizes),
        )

    @property
    def unit_price(self) -> Decimal:
        """Ціна до сплати: акційна, якщо вона є і не нульова."""
        return self.sale_price if self.sale_price else self.price

    @classmethod
    def from_record(cls, raw: Mapping[str, Any]) -> "Product":
        """
        Будує товар із сирого запису API каталогу.

        Raises:
            ProductDataError: запис не обʼєкт, некоректні поля або дублікати кольорів/розмірів.
        """
        if not isinstance(raw, Mapping):
            raise ProductDataError(f"Product record must be an object, got {type(raw).__name__}")

        product_id = _ref_id(raw.get("_id") if raw.get("_id") is not None else raw.get("id"))
        colors_raw = raw.get("colors") or ()
        sizes_raw = raw.get("sizes") or ()
        if not isinstance(colors_raw, (list, tuple)) or not isinstance(sizes_raw, (list, tuple)):
            raise ProductDataError("colors and sizes must be arrays", product_id=product_id)

        try:
            colors = tuple(ColorEntry.from_record(item) for item in colors_raw)
            sizes = tuple(SizeEntry.from_record(item) for item in sizes_raw)
        except ProductDataError as exc:
            exc.product_id = exc.product_id or product_id
            raise

        product = cls(
            id=product_id or "",
            name=raw.get("name"),
            price=raw.get("price"),
            sale_price=raw.get("salePrice"),
            colors=colors,
            sizes=sizes,
            stock=raw.get("stock"),
            category_id=_ref_id(raw.get("category")),
            images=raw.get("images") or (),
            extra={key: value for key, value in raw.items() if key not in _KNOWN_KEYS},
        )
        logger.info("📥 Product ingested | id=%s name=%r", product.id, product.name)
        return product

    def to_record(self) -> Dict[str, Any]:
        """Повертає запис у формі API (ціни лишаються Decimal)."""
        record: Dict[str, Any] = thaw(self.extra)
        record.update(
            {
                "_id": self.id,
                "name": self.name,
                "price": self.price,
                "salePrice": self.sale_price,
                "colors": [entry.to_record() for entry in self.colors],
                "sizes": [entry.to_record() for entry in self.sizes],
                "stock": self.stock,
                "category": self.category_id,
                "images": list(self.images),
            }
        )
        return record


def parse_product(raw: Mapping[str, Any]) -> Product:
    """Шорткат для `Product.from_record`."""
    return Product.from_record(raw)


__all__ = ["ColorEntry", "SizeEntry", "Product", "parse_product"]
