# tests/conftest.py
import os
import sys
from pathlib import Path

import pytest

# 1) Гасимо автопідхоплення сторонніх плагінів
os.environ.setdefault("PYTEST_DISABLE_PLUGIN_AUTOLOAD", "1")

# 2) Додаємо src у sys.path, щоб працював імпорт "storefront.…"
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def sneaker_record():
    """Сирий запис товару у формі API каталогу."""
    return {
        "_id": "p-100",
        "name": "Runner One",
        "price": 120,
        "salePrice": 99.5,
        "category": {"_id": "c-running", "name": "Running"},
        "images": ["https://cdn.example.com/runner.jpg"],
        "description": "Lightweight trainer",
        "colors": [
            {"color": "Black", "stock": 5, "hexcode": "#000000", "images": ["black-1.jpg", "black-2.jpg"]},
            {"color": "White", "stock": 0, "hexcode": "#FFFFFF", "images": []},
            {"color": "Red", "stock": 2, "images": ["red-1.jpg"]},
        ],
        "sizes": [
            {"size": "9", "stock": 3},
            {"size": "10", "stock": 0},
            {"size": "11", "stock": 7},
        ],
    }
