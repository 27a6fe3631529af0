"""Editable static menu configuration."""

from __future__ import annotations

CATEGORY_LABELS: dict[str, str] = {
    "starters": "Starters",
    "main_course": "Main Course",
    "beverages": "Beverages",
    "combos": "Combos",
}

# (name, price, available) rows per category, in display order.
MENU_ROWS_BY_CATEGORY: dict[str, list[tuple[str, str, bool]]] = {
    "starters": [
        ("Spring Roll", "120", True),
        ("Paneer Tikka", "180", True),
        ("Gobi Chilli", "290", True),
        ("Babycorn chilli", "280", True),
        ("Chilli Chicken", "280", True),
        ("Kalmi Kabab", "390", True),
        ("Carrot 65", "100", True),
        ("Gobi Tikka", "95", True),
        ("Egg Burji", "80", True),
        ("Prawns Chilli", "380", True),
        ("Omelette", "200", True),
        ("Manchurian Balls", "380", True),
        ("Chilli Paneer", "320", True),
        ("Gobi Manchurian", "280", True),
        ("Paneer 65", "300", True),
        ("Crispy Corn", "260", True),
        ("Potato Rolls", "240", True),
        ("Baby Corn Manchurian", "290", True),
        ("Mushroom Pepper Fry", "310", True),
        ("Paneer Pakoda", "220", True),
        ("Veg Cutlet", "200", True),
        ("Cheese Balls", "270", True),
    ],
    "main_course": [
        ("Veg Biryani", "220", True),
        ("Pasta", "200", False),
        ("Veg Fried Rice", "240", True),
        ("Veg Noodles", "230", True),
        ("Paneer Butter Masala", "340", True),
        ("Paneer Tikka Masala", "360", True),
        ("Kadai Paneer", "350", True),
        ("Shahi Paneer", "370", True),
        ("Dal Tadka", "220", True),
        ("Dal Fry", "210", True),
        ("Veg Kolhapuri", "300", True),
        ("Veg Handi", "320", True),
        ("Mushroom Masala", "330", False),
        ("Mushroom Biryani", "310", True),
        ("Veg Hyderabadi Biryani", "260", True),
        ("Jeera Rice", "180", True),
        ("Plain Rice", "150", True),
        ("Butter Naan", "60", True),
        ("Garlic Naan", "70", True),
        ("Tandoori Roti", "40", True),
        ("Veg Lasagna", "380", False),
        ("Veg Macaroni", "210", True),
        ("Veg Thai Curry", "420", False),
        ("Veg Korma", "330", True),
        ("Palak Paneer", "340", True),
        ("Veg Pulao", "240", True),
        ("Paneer Biryani", "320", False),
    ],
    "beverages": [
        ("Coke", "50", True),
        ("Lime Juice", "60", True),
        ("Pepsi", "50", True),
        ("Sprite", "50", True),
        ("Fanta", "50", True),
        ("Cold Coffee", "120", True),
        ("Hot Coffee", "100", True),
        ("Masala Tea", "40", True),
        ("Green Tea", "60", True),
        ("Badam Milk", "90", True),
        ("Chocolate Milkshake", "150", True),
        ("Strawberry Milkshake", "150", True),
        ("Vanilla Milkshake", "140", False),
        ("Mango Milkshake", "160", False),
        ("Fresh Orange Juice", "110", True),
        ("Pineapple Juice", "110", True),
        ("Watermelon Juice", "100", True),
        ("Lassi", "80", True),
        ("Sweet Lassi", "90", True),
        ("Salted Lassi", "90", False),
        ("Mineral Water", "30", True),
        ("Iced Tea", "120", False),
    ],
    "combos": [
        ("Starter + Main Combo (Manchurian Balls + Veg Fried Rice)", "350", True),
        ("Paneer Special Combo (Paneer 65 + Butter Naan + Dal Fry)", "420", True),
        ("Chinese Combo (Gobi Manchurian + Veg Noodles)", "330", True),
        ("South Indian Veg Combo (Veg Biryani + Raita)", "300", True),
        ("Student Budget Combo (Veg Cutlet + Lime Juice)", "180", True),
        ("Deluxe Veg Combo (Paneer Butter Masala + Garlic Naan + Jeera Rice)", "480", True),
        ("Lunch Box Combo (Veg Pulao + Dal Tadka + Plain Rice)", "340", False),
        ("Fast Food Combo (Spring Rolls + Cold Coffee)", "260", True),
        ("Evening Snacks Combo (Cheese Balls + Masala Tea)", "220", True),
        ("Family Veg Combo (Veg Kolhapuri + Butter Naan + Jeera Rice)", "520", False),
    ],
}

STATUS_READY = "READY"
STATUS_ITEMS_ADDED = "ITEMS ADDED"
STATUS_COMBO_ADDED = "COMBO ADDED"
STATUS_PROCESSING = "PROCESSING"
STATUS_COMPLETED = "COMPLETED"
