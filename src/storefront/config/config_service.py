# ⚙️ storefront/config/config_service.py
"""
⚙️ config_service.py - Сервіс доступу до статичної конфігурації бібліотеки.

🔹 Клас `ConfigService`:
- Завантажує конфігурацію з config.yaml, config.json та змінних середовища (.env).
- Надає єдиний метод .get() з крапковими ключами ('logging.level').
- Працює як Singleton; `reset()` скидає екземпляр (тести, перезавантаження).
"""

# 🌐 Зовнішні бібліотеки
import yaml                                  # 📦 YAML-парсинг
from dotenv import load_dotenv               # 🔐 Завантаження змінних із .env

# 🔠 Системні імпорти
import copy                                  # 🧬 Глибока копія дефолтів
import json                                  # 📄 Робота з JSON-файлами
import logging                               # 🧾 Логування
import os                                    # 📁 Змінні середовища
from pathlib import Path                     # 📁 Побудова шляху до файлів
from typing import Any, Dict, Optional       # 🧩 Типізація

# 🧩 Внутрішні модулі проєкту
from storefront.shared.errors import ConfigError
from storefront.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.config")

CONFIG_DIR = Path(__file__).parent           # 📂 config.yaml / config.json поруч із модулем

DEFAULTS: Dict[str, Any] = {
    "logging": {"level": "INFO", "console": True, "json": False, "file": None},
    "cart": {"currency": "USD"},
}

ENV_KEYS: Dict[str, str] = {                 # 🔐 Змінна середовища → крапковий ключ
    "STOREFRONT_LOG_LEVEL": "logging.level",
    "STOREFRONT_LOG_FILE": "logging.file",
    "STOREFRONT_CURRENCY": "cart.currency",
}


# ============================
# ⚙️ СЕРВІС ДОСТУПУ ДО КОНФІГІВ
# ============================
class ConfigService:
    """
    ⚙️ Надає доступ до всіх конфігураційних параметрів.
    Пріоритет (від слабшого до сильнішого): DEFAULTS → config.yaml → config.json → змінні середовища.
    """

    _instance: Optional["ConfigService"] = None
    _config: Dict[str, Any]
    config_dir: Path

    def __new__(cls, config_dir: Optional[Path] = None):
        # ✅ Singleton: один екземпляр на каталог конфігурації
        requested = Path(config_dir) if config_dir else None
        current = cls._instance
        if current is not None and requested is not None and requested != current.config_dir:
            logger.info("🔁 ConfigService: каталог змінено %s → %s, перезавантажуємо", current.config_dir, requested)
            current = None

        if current is None:
            instance = super().__new__(cls)
            instance.config_dir = requested or CONFIG_DIR
            instance._config = copy.deepcopy(DEFAULTS)
            instance._load_all_configs(instance.config_dir)
            cls._instance = instance
            logger.debug("🔄 Singleton ConfigService створено і конфігурація завантажена")
        else:
            logger.debug("📦 Використовується існуючий екземпляр ConfigService")
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Скидає Singleton - наступний виклик `ConfigService()` перечитає джерела."""
        cls._instance = None

    def _load_all_configs(self, config_dir: Path) -> None:
        """📥 Завантажує всі джерела конфігурації в один словник."""

        # --- 1. YAML-файл ---
        yaml_path = config_dir / "config.yaml"
        try:
            with open(yaml_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            if not isinstance(data, dict):
                raise ConfigError(f"{yaml_path} must contain a mapping", details=type(data).__name__)
            self._deep_update(self._config, data)
            logger.debug("📘 Завантажено %s", yaml_path)
        except FileNotFoundError:
            logger.debug("📘 %s відсутній - пропускаємо", yaml_path)
        except yaml.YAMLError as e:
            logger.warning("⚠️ Не вдалося завантажити config.yaml: %s", e)

        # --- 2. JSON-файл ---
        json_path = config_dir / "config.json"
        try:
            with open(json_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ConfigError(f"{json_path} must contain an object", details=type(data).__name__)
            self._deep_update(self._config, data)
            logger.debug("📄 Завантажено %s", json_path)
        except FileNotFoundError:
            logger.debug("📄 %s відсутній - пропускаємо", json_path)
        except json.JSONDecodeError as e:
            logger.warning("⚠️ Не вдалося завантажити config.json: %s", e)

        # --- 3. .env та змінні середовища ---
        load_dotenv()
        env_vars = {key: os.getenv(env_name) for env_name, key in ENV_KEYS.items()}
        env_vars = {key: value for key, value in env_vars.items() if value not in (None, "")}
        self._deep_update(self._config, self._unflatten_dict(env_vars))

        logger.info("✅ Конфігурацію успішно завантажено.")

    def get(self, key: str, default: Any = None) -> Any:
        """
        🔑 Отримує значення конфігурації за ключем (наприклад: 'cart.currency').

        Args:
            key (str): Ключ у форматі з крапкою.
            default (Any): Значення за замовчуванням, якщо ключ не знайдено.
        """
        value: Any = self._config
        for part in key.split("."):
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                logger.debug("❓ Ключ '%s' не знайдено, повертаємо значення за замовчуванням", key)
                return default
        return value

    def section(self, key: str) -> Dict[str, Any]:
        """Повертає копію вкладеного розділу ('logging') або порожній dict."""
        node = self.get(key, {})
        return copy.deepcopy(node) if isinstance(node, dict) else {}

    # ===============================
    # 🔧 ДОПОМІЖНІ МЕТОДИ ЗЛИТТЯ КОНФІГІВ
    # ===============================
    @staticmethod
    def _unflatten_dict(d: Dict[str, Any]) -> Dict[str, Any]:
        """'logging.level' → {'logging': {'level': ...}}"""
        result: Dict[str, Any] = {}
        for key, value in d.items():
            parts = key.split(".")
            d_ref = result
            for part in parts[:-1]:
                d_ref = d_ref.setdefault(part, {})
            d_ref[parts[-1]] = value
        return result

    @classmethod
    def _deep_update(cls, source: Dict[str, Any], overrides: Dict[str, Any]) -> None:
        """🔁 Рекурсивно обʼєднує два словники (значення з `overrides` перемагають)."""
        for key, value in overrides.items():
            if isinstance(value, dict) and isinstance(source.get(key), dict):
                cls._deep_update(source[key], value)
            else:
                source[key] = value


__all__ = ["ConfigService", "CONFIG_DIR", "DEFAULTS", "ENV_KEYS"]
