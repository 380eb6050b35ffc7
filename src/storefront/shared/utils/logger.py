# 📜 storefront/shared/utils/logger.py
"""
📜 Єдина схема логування для всієї бібліотеки вітрини.

🔹 Ініціалізує кореневий логер `storefront` із консоллю та (опційно) файловим виводом.
🔹 Підтримує JSON-формат для файлу, окремі рівні для консолі/файлу та suppress сторонніх бібліотек.
🔹 Надає хелпер `get_logger()` для дочірніх логерів через загальний префікс.
"""
from __future__ import annotations

# 🔠 Системні імпорти
import json                                                     # 📦 Серіалізація payload логів
import logging                                                  # 🪵 Робота з логерами Python
import sys                                                      # 🧵 Потік stdout
import threading                                                # 🔒 Захист ініціалізації
from dataclasses import dataclass, field                        # 🧱 DTO-конфіг логування
from logging.handlers import TimedRotatingFileHandler           # 📁 Хендлер з ротацією файлів
from pathlib import Path                                        # 📂 Операції з файловими шляхами
from typing import Any, Dict, Optional, Union                   # 🧰 Типи для конфігів

# ================================
# 🧾 КОНСТАНТИ МОДУЛЯ
# ================================
LOG_NAME: str = "storefront"                                    # 🏷️ Базовий префікс логерів
PLAIN_FORMAT: str = "%(asctime)s [%(levelname)s] - (%(name)s).%(funcName)s(%(lineno)d) - %(message)s"
CONSOLE_FORMAT: str = "[%(levelname).1s] %(message)s"           # 🖥️ Мінімалістичний консольний формат
_STD_RECORD_KEYS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
) | {"message", "asctime"}                                      # 🧾 Поля, які не вважаємо extra

_lock = threading.Lock()                                        # 🔒 Блокуємо одночасну ініціалізацію


# ================================
# 🧾 DTO КОНФІГУРАЦІЇ
# ================================
@dataclass
class LoggingConfig:
    """Контейнер налаштувань логування з дефолтними значеннями."""
    level: Union[str, int] = "INFO"                             # 🎚️ Глобальний рівень логів
    console: bool = True                                        # 🖥️ Чи вмикати консольний вивід
    json: bool = False                                          # 📦 JSON-формат для файлу
    file: Optional[str] = None                                  # 📁 Шлях до лог-файлу (None → без файлу)
    when: str = "midnight"                                      # ⏰ Періодичність ротації
    interval: int = 1                                           # ⏱️ Інтервал ротації
    backup_count: int = 7                                       # ♻️ Скільки копій зберігати
    encoding: str = "utf-8"                                     # 🔤 Кодування файлу
    suppress: Dict[str, str] = field(default_factory=dict)      # 🙊 Треті сторони та їх рівні
    console_level: str = "INFO"                                 # 🖥️ Рівень для консолі
    file_level: str = "DEBUG"                                   # 📁 Рівень для файлу
    console_format: str = CONSOLE_FORMAT                        # 🖥️ Шаблон для консолі
    file_format: str = PLAIN_FORMAT                             # 📄 Шаблон для файлу


# ================================
# 🧰 ФОРМАТТЕРИ
# ================================
class JsonFormatter(logging.Formatter):
    """Форматує записи логів у плоский JSON."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "time": self.formatTime(record, datefmt="%Y-%m-%d %H:%M:%S"),
            "level": record.levelname,
            "name": record.name,
            "module": record.module,
            "func": record.funcName,
            "line": record.lineno,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():              # 🔎 Додаємо custom extra-поля
            if key.startswith("_") or key in _STD_RECORD_KEYS or key in payload:
                continue
            try:
                json.dumps(value)                               # ✅ Перевіряємо серіалізованість
                payload[key] = value
            except (TypeError, ValueError):
                payload[key] = str(value)                       # 🔄 Повертаємось до рядка
        if record.exc_info:                                     # ⚠️ Інформація про виняток
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


# ================================
# 🛠️ ДОПОМІЖНІ ФУНКЦІЇ
# ================================
def _to_level(value: Union[str, int, None], default: int) -> int:
    """Перетворює рядок/інт у числовий рівень логування."""
    if value is None:
        return default
    if isinstance(value, int):
        return value
    name = str(value).strip()
    if name.isdigit():
        return int(name)
    return getattr(logging, name.upper(), default)


def _make_console_handler(fmt: logging.Formatter) -> logging.Handler:
    """Створює консольний хендлер із заданим форматером."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(fmt)
    return handler


def _make_file_handler(cfg: LoggingConfig, fmt: logging.Formatter) -> logging.Handler:
    """Готує файловий хендлер із ротацією за часом."""
    log_path = Path(str(cfg.file))
    log_path.parent.mkdir(parents=True, exist_ok=True)          # 🧱 Гарантуємо існування директорії
    handler = TimedRotatingFileHandler(
        filename=str(log_path),
        when=cfg.when,
        interval=cfg.interval,
        backupCount=cfg.backup_count,
        encoding=cfg.encoding,
    )
    handler.setFormatter(fmt)
    return handler


def _suppress_third_party(suppress: Dict[str, str]) -> None:
    """Знижує рівні логування для сторонніх бібліотек."""
    for name, level in (suppress or {}).items():
        logging.getLogger(name).setLevel(_to_level(level, logging.WARNING))


# ================================
# 🚀 ПУБЛІЧНИЙ API
# ================================
def init_logging(
    *,
    level: Optional[Union[str, int]] = None,
    console: Optional[bool] = None,
    json_mode: Optional[bool] = None,
    file: Optional[str] = None,
    suppress: Optional[Dict[str, str]] = None,
    console_level: Optional[Union[str, int]] = None,
    file_level: Optional[Union[str, int]] = None,
    console_format: Optional[str] = None,
    file_format: Optional[str] = None,
) -> logging.Logger:
    """Ініціалізує кореневий логер `storefront` за єдиною схемою (повторний виклик перебудовує хендлери)."""
    with _lock:
        cfg = LoggingConfig(
            level=level or "INFO",
            console=True if console is None else bool(console),
            json=False if json_mode is None else bool(json_mode),
            file=file or None,
            suppress=suppress or {},
            console_level=str(console_level or level or "INFO"),
            file_level=str(file_level or level or "DEBUG"),
            console_format=console_format or CONSOLE_FORMAT,
            file_format=file_format or PLAIN_FORMAT,
        )

        root_logger = logging.getLogger(LOG_NAME)               # 🏷️ Кореневий логер бібліотеки
        root_level = min(
            _to_level(cfg.level, logging.INFO),
            _to_level(cfg.console_level, logging.INFO),
            _to_level(cfg.file_level, logging.DEBUG) if cfg.file else logging.CRITICAL,
        )
        root_logger.setLevel(root_level)

        for handler in list(root_logger.handlers):              # 🧹 Прибираємо попередні хендлери
            if isinstance(handler, (logging.StreamHandler, TimedRotatingFileHandler)):
                root_logger.removeHandler(handler)
                handler.close()

        if cfg.console:
            console_handler = _make_console_handler(logging.Formatter(cfg.console_format))
            console_handler.setLevel(_to_level(cfg.console_level, logging.INFO))
            root_logger.addHandler(console_handler)

        if cfg.file:
            fmt_file = JsonFormatter() if cfg.json else logging.Formatter(cfg.file_format)
            file_handler = _make_file_handler(cfg, fmt_file)
            file_handler.setLevel(_to_level(cfg.file_level, logging.DEBUG))
            root_logger.addHandler(file_handler)

        _suppress_third_party(cfg.suppress)

        root_logger.info(
            "✅ Logging initialized | level=%s console=%s/%s json=%s file=%s",
            logging.getLevelName(_to_level(cfg.level, logging.INFO)),
            "ON" if cfg.console else "OFF",
            logging.getLevelName(_to_level(cfg.console_level, logging.INFO)),
            "ON" if cfg.json else "OFF",
            cfg.file or "OFF",
        )
        return root_logger


def init_logging_from_config(config: Optional[Dict[str, Any]]) -> logging.Logger:
    """
    Ініціалізує логування на базі словника з конфігураційного сервісу.

    Args:
        config: Налаштування розділу `logging` із ConfigService.

    Returns:
        logging.Logger: Кореневий логер, проініціалізований за наданими параметрами.
    """
    node = config or {}
    return init_logging(
        level=node.get("level"),
        console=node.get("console"),
        json_mode=node.get("json"),
        file=node.get("file"),
        suppress=node.get("suppress"),
        console_level=node.get("console_level"),
        file_level=node.get("file_level"),
        console_format=node.get("console_format"),
        file_format=node.get("file_format"),
    )


def get_logger(suffix: Optional[str] = None) -> logging.Logger:
    """Повертає дочірній логер із префіксом `LOG_NAME`."""
    logger_name = LOG_NAME if not suffix else f"{LOG_NAME}.{suffix}"
    return logging.getLogger(logger_name)


__all__ = [
    "LOG_NAME",
    "LoggingConfig",
    "JsonFormatter",
    "init_logging",
    "init_logging_from_config",
    "get_logger",
]
