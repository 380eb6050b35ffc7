# 🏛️ storefront/domain/__init__.py
"""
🏛️ Доменний шар: чисті перетворення даних без I/O.

🔹 `inventory` - резолвер наявності колір × розмір.
🔹 `products` - сутність товару та інжест сирого запису.
🔹 `cart` - кошик у памʼяті та підсумки.
🔹 `catalog` - ієрархія категорій.
"""
