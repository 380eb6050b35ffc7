# 🧰 storefront/shared/utils/__init__.py
"""🧰 Утиліти без доменної логіки."""
