# 🧊 storefront/shared/utils/immutables.py
"""
🧊 Утиліти «заморожування» та «розморожування» записів каталогу.

🔹 `freeze` - глибоко перетворює dict/list/set на MappingProxyType/tuple/frozenset.
🔹 `thaw` - зворотне перетворення у звичайні dict/list для серіалізації.
🔹 Сутності тримають додаткові поля API лише у замороженому вигляді.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from collections.abc import Iterable, Mapping                   # 🧰 Перевірки типів колекцій
from decimal import Decimal                                     # 💵 Грошові значення як скаляри
from enum import Enum                                           # 🏷️ Перерахування
from types import MappingProxyType                              # 🔒 Незмінна обгортка над dict
from typing import Any

FrozenMapping = MappingProxyType                                # 🔄 Псевдонім для читабельності

_SCALARS = (str, bytes, int, float, bool, Decimal, Enum)


def freeze(obj: Any) -> Any:
    """Рекурсивно перетворює колекції на незмінні аналоги."""
    if obj is None or isinstance(obj, _SCALARS):
        return obj
    if isinstance(obj, Mapping):
        return MappingProxyType({key: freeze(value) for key, value in obj.items()})
    if isinstance(obj, (set, frozenset)):
        return frozenset(freeze(value) for value in obj)
    if isinstance(obj, (list, tuple)) or _is_iterable_but_not_str(obj):
        try:
            return tuple(freeze(value) for value in obj)
        except TypeError:                                       # ⚠️ Одноразово-ітеровані обʼєкти
            return obj
    return obj


def thaw(obj: Any) -> Any:
    """Повертає «розморожену» копію: мапи → dict, tuple → list, frozenset → set."""
    if obj is None or isinstance(obj, _SCALARS):
        return obj
    if isinstance(obj, Mapping):
        return {key: thaw(value) for key, value in obj.items()}
    if isinstance(obj, (set, frozenset)):
        return {thaw(value) for value in obj}
    if isinstance(obj, (list, tuple)):
        return [thaw(value) for value in obj]
    return obj


def is_frozen_mapping(obj: Any) -> bool:
    """Перевіряє, чи є обʼєкт замороженою мапою (`freeze(dict)`)."""
    return isinstance(obj, MappingProxyType)


def _is_iterable_but_not_str(obj: Any) -> bool:
    return isinstance(obj, Iterable) and not isinstance(obj, (str, bytes))


__all__ = ["FrozenMapping", "freeze", "thaw", "is_frozen_mapping"]
