MEALS_DATA = [
    {"name": "Oatmeal & Berries", "calories": 320, "course": "breakfast", "flavors": ["sweet"], "allergies": ["gluten"], "best_cooked_with": "Oats, almond milk", "best_served_as": "Warm bowl", "is_favorite": True},
    {"name": "Grilled Chicken Salad", "calories": 450, "course": "lunch", "flavors": ["savory", "umami"], "allergies": [], "best_cooked_with": "Olive oil, lemon", "best_served_as": "Fresh"},
    {"name": "Salmon & Quinoa", "calories": 560, "course": "dinner", "flavors": ["umami", "savory"], "allergies": ["fish", "sesame"], "best_cooked_with": "Pan-sear", "best_served_as": "Plate"},
    {"name": "Greek Yogurt & Nuts", "calories": 280, "course": "snack", "flavors": ["sweet"], "allergies": ["dairy", "nuts"], "best_cooked_with": "Honey", "best_served_as": "Cup"},
]
