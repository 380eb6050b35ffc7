# 📦 storefront/config/setup/container.py
"""
📦 Контейнер залежностей бібліотеки вітрини.

🔹 Читає конфігурацію та ініціалізує логування за єдиною схемою.
🔹 Створює спільний резолвер наявності та фабрику кошиків із валютою з конфігу.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
from pathlib import Path
from typing import Optional

# 🧩 Внутрішні модулі проєкту
from storefront.config.config_service import ConfigService
from storefront.domain.cart import Cart
from storefront.domain.inventory import IInventoryResolver, InventoryResolver
from storefront.shared.utils.logger import LOG_NAME, init_logging_from_config

logger = logging.getLogger(f"{LOG_NAME}.config.container")


class Container:
    """🧩 Єдина точка складання сервісів."""

    def __init__(
        self,
        config: Optional[ConfigService] = None,
        *,
        config_dir: Optional[Path] = None,
        init_logging: bool = True,
    ) -> None:
        self.config = config or ConfigService(config_dir)
        if init_logging:
            init_logging_from_config(self.config.section("logging"))
        self.resolver: IInventoryResolver = InventoryResolver()
        self.currency: str = str(self.config.get("cart.currency", "USD")).upper()
        logger.info("🧩 Container зібрано | currency=%s", self.currency)

    def new_cart(self) -> Cart:
        """Порожній кошик із валютою з конфігурації та спільним резолвером."""
        return Cart(currency=self.currency, resolver=self.resolver)


__all__ = ["Container"]
