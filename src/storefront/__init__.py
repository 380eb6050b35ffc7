# 👟 storefront/__init__.py
"""
👟 storefront - доменне ядро вітрини кросівок/одягу.

Головне: резолвер наявності колір × розмір (`storefront.domain.inventory`).
"""

__version__ = "0.1.0"
