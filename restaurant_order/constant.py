"""Editable static menu, business and payment configuration."""

from __future__ import annotations

BUSINESS_NAME = "NEPALI RESTAURANT"
BUSINESS_ADDRESS = "123 Kathmandu Street, Thamel"
BUSINESS_PHONE = "9867391430"
RECEIPT_FOOTER = "Thank you for your visit. Please come again!"

CATEGORY_LABELS: dict[str, str] = {
    "breakfast": "Breakfast",
    "lunch": "Lunch",
    "dinner": "Dinner",
    "dessert": "Desserts",
    "beverage": "Beverages",
}

PAYMENT_METHOD_LABELS: dict[str, str] = {
    "card": "Credit Card",
    "wallet": "eSewa",
    "phone": "Phone Payment",
}

MENU_ROWS: list[dict[str, object]] = [
    {
        "entry_id": "1",
        "name": "Continental Breakfast",
        "description": "A selection of pastries, fresh fruit, yogurt, and coffee or tea",
        "price": 18.95,
        "category": "breakfast",
        "image": "https://images.unsplash.com/photo-1600335895229-6e75511892c8",
    },
    {
        "entry_id": "2",
        "name": "Eggs Benedict",
        "description": "Poached eggs and Canadian bacon on an English muffin with hollandaise sauce",
        "price": 16.95,
        "category": "breakfast",
        "image": "https://images.unsplash.com/photo-1608039829572-78524f79c4c7",
    },
    {
        "entry_id": "3",
        "name": "Caesar Salad",
        "description": "Crisp romaine lettuce with Caesar dressing, parmesan, and croutons",
        "price": 14.95,
        "category": "lunch",
        "image": "https://images.unsplash.com/photo-1550304943-4f24f54ddde9",
    },
    {
        "entry_id": "4",
        "name": "Club Sandwich",
        "description": "Triple-decker sandwich with turkey, bacon, lettuce, and tomato",
        "price": 17.95,
        "category": "lunch",
        "image": "https://images.unsplash.com/photo-1550317138-10000687a72b",
    },
    {
        "entry_id": "5",
        "name": "Filet Mignon",
        "description": "8oz filet with garlic mashed potatoes and seasonal vegetables",
        "price": 42.95,
        "category": "dinner",
        "image": "https://images.unsplash.com/photo-1600891964092-4316c288032e",
    },
    {
        "entry_id": "6",
        "name": "Grilled Salmon",
        "description": "Fresh salmon with lemon-dill sauce, wild rice, and asparagus",
        "price": 34.95,
        "category": "dinner",
        "image": "https://images.unsplash.com/photo-1519708227418-c8fd9a32b7a2",
    },
    {
        "entry_id": "7",
        "name": "Chocolate Lava Cake",
        "description": "Warm chocolate cake with a molten center, served with vanilla ice cream",
        "price": 11.95,
        "category": "dessert",
        "image": "https://images.unsplash.com/photo-1606313564200-e75d5e30476c",
    },
    {
        "entry_id": "8",
        "name": "New York Cheesecake",
        "description": "Classic cheesecake with berry compote",
        "price": 10.95,
        "category": "dessert",
        "image": "https://images.unsplash.com/photo-1533134242443-d4fd215305ad",
    },
    {
        "entry_id": "9",
        "name": "Classic Mojito",
        "description": "White rum, sugar, lime juice, soda water, and mint",
        "price": 12.95,
        "category": "beverage",
        "image": "https://images.unsplash.com/photo-1551538827-9c037cb4f32a",
    },
    {
        "entry_id": "10",
        "name": "Fresh Orange Juice",
        "description": "Freshly squeezed orange juice",
        "price": 6.95,
        "category": "beverage",
        "image": "https://images.unsplash.com/photo-1600271886742-f049cd451bba",
    },
]
