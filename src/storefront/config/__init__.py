# ⚙️ storefront/config/__init__.py
"""
⚙️ Пакет Config - централізована конфігурація та складання сервісів.

- `ConfigService` - config.yaml / config.json / .env з крапковими ключами.
- `Container` - логування + резолвер наявності + фабрика кошиків.
"""

from .config_service import ConfigService
from .setup import Container

__all__ = ["ConfigService", "Container"]
