# 🧩 storefront/config/setup/__init__.py
"""🧩 Складання сервісів бібліотеки."""

from .container import Container

__all__ = ["Container"]
