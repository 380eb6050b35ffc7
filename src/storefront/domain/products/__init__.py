# 📦 storefront/domain/products/__init__.py
"""
📦 Пакет `domain.products` - сутність товару та її побудова з сирого запису каталогу.
"""

from .entities import ColorEntry, Product, SizeEntry, parse_product

__all__ = ["ColorEntry", "SizeEntry", "Product", "parse_product"]
