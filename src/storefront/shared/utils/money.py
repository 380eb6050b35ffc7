# 💵 storefront/shared/utils/money.py
"""
💵 Форматування грошових сум для кошика та чекауту.

🔹 Округлення HALF_UP до двох знаків (Decimal, без float).
🔹 Символ валюти для відомих кодів, інакше код після суми.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation    # 🔢 Точні суми
from typing import Dict, Union

Number = Union[Decimal, int, float, str]

_CENTS = Decimal("0.01")
_CURRENCY_SYMBOLS: Dict[str, str] = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "UAH": "₴",
    "PLN": "zł",
    "VND": "₫",
}


def to_decimal(value: Number) -> Decimal:
    """Акуратно перетворює довільне числове значення у Decimal (float - через str)."""
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise ValueError(f"Not a monetary amount: {value!r}") from exc


def q2(value: Number) -> Decimal:
    """Округлює суму до центів за правилом HALF_UP."""
    return to_decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP)


def format_currency(amount: Number, currency: str = "USD") -> str:
    """
    Форматує суму як `"$1,234.50"`; невідома валюта → `"1,234.50 XYZ"`.

    Args:
        amount: Сума (Decimal/int/float/str).
        currency: ISO-код валюти.

    Returns:
        str: Відформатований рядок.
    """
    value = q2(amount)
    code = (currency or "USD").strip().upper()
    sign = "-" if value < 0 else ""
    body = f"{abs(value):,.2f}"
    symbol = _CURRENCY_SYMBOLS.get(code)
    if symbol is None:
        return f"{sign}{body} {code}"
    return f"{sign}{symbol}{body}"


__all__ = ["Number", "to_decimal", "q2", "format_currency"]
