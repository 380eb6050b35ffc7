# 🚨 storefront/shared/errors.py
"""
🚨 Ієрархія винятків бібліотеки вітрини.

🔹 `AppError` - базовий виняток із деталями та `to_log_extra()` для логера.
🔹 `UserVisibleError` - повідомлення, яке можна показати покупцю без змін.
🔹 Доменні помилки: інжест товару, кошик, конфігурація.

❗ Резолвер наявності та хелпери категорій **не** кидають винятків - лише деградують до порожніх значень.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                  # 🧾 Логування створення помилок
from typing import Dict, Iterable, Optional, Tuple              # 📐 Типізація

# 🧩 Внутрішні модулі проєкту
from storefront.shared.utils.logger import LOG_NAME             # 🏷️ Базовий префікс логера


logger = logging.getLogger(f"{LOG_NAME}.shared.errors")


# ================================
# ⚠️ КОДИ ПОМИЛОК
# ================================
class ErrorCode:
    """Категорії помилок для логів."""

    APP = "app_error"
    PRODUCT_DATA = "product_data_error"
    CART = "cart_error"
    CONFIG = "config_error"


# ================================
# 🧠 БАЗОВІ ВИНЯТКИ
# ================================
class AppError(Exception):
    """Базовий виняток застосунку."""

    code: str = ErrorCode.APP

    def __init__(self, message: str, *, details: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message                                  # 🗒️ Основний текст
        self.details = details                                  # 🔎 Технічні подробиці

    def to_log_extra(self) -> Dict[str, object]:
        """📦 Формує словник для `logger.extra`."""
        extra: Dict[str, object] = {"error_code": self.code}
        if self.details:
            extra["details"] = self.details
        return extra


class UserVisibleError(AppError):
    """Помилка, текст якої показуємо користувачу як є."""

    @property
    def user_message(self) -> str:
        return self.message


# ================================
# 🧾 ДОМЕННІ ВИНЯТКИ
# ================================
class ProductDataError(AppError):
    """Сирий запис товару не проходить валідацію на межі інжесту."""

    code = ErrorCode.PRODUCT_DATA

    def __init__(
        self,
        message: str,
        *,
        product_id: Optional[str] = None,
        field: Optional[str] = None,
        duplicates: Iterable[str] = (),
        details: Optional[str] = None,
    ) -> None:
        super().__init__(message, details=details)
        self.product_id = product_id                            # 🆔 Товар, що зламався
        self.field = field                                      # 🏷️ Поле запису
        self.duplicates: Tuple[str, ...] = tuple(duplicates)    # 🔁 Дублікати кольорів/розмірів
        logger.debug("🧾 ProductDataError created", extra=self.to_log_extra())

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        if self.product_id:
            extra["product_id"] = self.product_id
        if self.field:
            extra["field"] = self.field
        if self.duplicates:
            extra["duplicates"] = list(self.duplicates)
        return extra


class CartError(UserVisibleError):
    """Операцію з кошиком не можна виконати (невалідний вибір/кількість)."""

    code = ErrorCode.CART

    def __init__(self, message: str, *, product_id: Optional[str] = None, details: Optional[str] = None) -> None:
        super().__init__(message, details=details)
        self.product_id = product_id
        logger.debug("🛒 CartError created", extra=self.to_log_extra())

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        if self.product_id:
            extra["product_id"] = self.product_id
        return extra


class ConfigError(AppError):
    """Невалідне значення в конфігурації."""

    code = ErrorCode.CONFIG


__all__ = [
    "ErrorCode",
    "AppError",
    "UserVisibleError",
    "ProductDataError",
    "CartError",
    "ConfigError",
]
