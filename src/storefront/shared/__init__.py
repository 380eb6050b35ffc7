# 🧰 storefront/shared/__init__.py
"""🧰 Спільні утиліти: логування, помилки, заморожені структури, гроші."""
