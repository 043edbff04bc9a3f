"""Built-in food list used when no backend can generate a catalog."""

from diet_planner.domain.foods import FoodItem

_BUILTIN_FOODS: tuple[FoodItem, ...] = (
    FoodItem(
        name="Roti",
        calories=297,
        protein=7.85,
        carbs=58.0,
        fats=7.45,
        meal_types=("breakfast", "lunch", "dinner"),
        category="bread",
        is_vegan=True,
        is_dairy_free=True,
        allergens=("wheat",),
        typical_serving=50,
    ),
    FoodItem(
        name="Naan",
        calories=310,
        protein=8.0,
        carbs=50.0,
        fats=9.0,
        meal_types=("lunch", "dinner"),
        category="bread",
        allergens=("wheat", "dairy"),
        typical_serving=60,
    ),
    FoodItem(
        name="Basmati Rice",
        calories=130,
        protein=2.7,
        carbs=28.0,
        fats=0.3,
        meal_types=("lunch", "dinner"),
        category="rice",
        is_vegan=True,
        is_gluten_free=True,
        is_dairy_free=True,
        typical_serving=150,
    ),
    FoodItem(
        name="Biryani",
        calories=250,
        protein=12.0,
        carbs=35.0,
        fats=7.0,
        meal_types=("lunch", "dinner"),
        category="rice",
        is_vegetarian=False,
        is_gluten_free=True,
        is_dairy_free=True,
        typical_serving=200,
    ),
    FoodItem(
        name="Chicken Karahi",
        calories=180,
        protein=20.0,
        carbs=5.0,
        fats=8.0,
        meal_types=("lunch", "dinner"),
        category="curry",
        is_vegetarian=False,
        is_gluten_free=True,
        is_dairy_free=True,
        typical_serving=150,
    ),
    FoodItem(
        name="Daal",
        calories=116,
        protein=7.0,
        carbs=20.0,
        fats=1.5,
        meal_types=("lunch", "dinner"),
        category="dal",
        is_vegan=True,
        is_gluten_free=True,
        is_dairy_free=True,
        typical_serving=150,
    ),
    FoodItem(
        name="Aloo Gobi",
        calories=85,
        protein=2.5,
        carbs=12.0,
        fats=3.0,
        meal_types=("lunch", "dinner"),
        category="vegetable",
        is_vegan=True,
        is_gluten_free=True,
        is_dairy_free=True,
        typical_serving=150,
    ),
    FoodItem(
        name="Paratha",
        calories=326,
        protein=6.0,
        carbs=45.0,
        fats=14.0,
        meal_types=("breakfast", "lunch"),
        category="bread",
        allergens=("wheat", "dairy"),
        typical_serving=80,
    ),
    FoodItem(
        name="Halwa Puri",
        calories=350,
        protein=5.0,
        carbs=45.0,
        fats=16.0,
        meal_types=("breakfast",),
        category="other",
        allergens=("wheat", "dairy"),
        typical_serving=100,
    ),
    FoodItem(
        name="Chai",
        calories=30,
        protein=1.0,
        carbs=5.0,
        fats=1.0,
        meal_types=("breakfast", "snack"),
        category="beverage",
        is_gluten_free=True,
        allergens=("dairy",),
        typical_serving=200,
        serving_unit="ml",
    ),
    FoodItem(
        name="Samosa",
        calories=262,
        protein=4.2,
        carbs=33.0,
        fats=12.0,
        meal_types=("snack",),
        category="snack",
        is_vegan=True,
        is_dairy_free=True,
        allergens=("wheat",),
        typical_serving=50,
    ),
    FoodItem(
        name="Pakora",
        calories=200,
        protein=5.0,
        carbs=20.0,
        fats=10.0,
        meal_types=("snack",),
        category="snack",
        is_vegan=True,
        is_dairy_free=True,
        allergens=("wheat",),
        typical_serving=50,
    ),
    FoodItem(
        name="Kheer",
        calories=150,
        protein=3.0,
        carbs=25.0,
        fats=4.0,
        meal_types=("snack",),
        category="dessert",
        is_gluten_free=True,
        allergens=("dairy", "nuts"),
        typical_serving=100,
    ),
    FoodItem(
        name="Chana Masala",
        calories=140,
        protein=7.0,
        carbs=22.0,
        fats=3.0,
        meal_types=("lunch", "dinner"),
        category="curry",
        is_vegan=True,
        is_gluten_free=True,
        is_dairy_free=True,
        typical_serving=150,
    ),
    FoodItem(
        name="Bhindi Masala",
        calories=90,
        protein=2.5,
        carbs=10.0,
        fats=4.0,
        meal_types=("lunch", "dinner"),
        category="vegetable",
        is_vegan=True,
        is_gluten_free=True,
        is_dairy_free=True,
        typical_serving=150,
    ),
    FoodItem(
        name="Karahi Gosht",
        calories=220,
        protein=25.0,
        carbs=3.0,
        fats=11.0,
        meal_types=("lunch", "dinner"),
        category="meat",
        is_vegetarian=False,
        is_gluten_free=True,
        is_dairy_free=True,
        typical_serving=150,
    ),
    FoodItem(
        name="Raita",
        calories=60,
        protein=2.0,
        carbs=5.0,
        fats=3.0,
        meal_types=("lunch", "dinner", "side"),
        category="side",
        is_gluten_free=True,
        allergens=("dairy",),
        typical_serving=100,
    ),
    FoodItem(
        name="Aloo Paratha",
        calories=350,
        protein=7.0,
        carbs=50.0,
        fats=14.0,
        meal_types=("breakfast", "lunch"),
        category="bread",
        allergens=("wheat", "dairy"),
        typical_serving=100,
    ),
    FoodItem(
        name="Chicken Tikka",
        calories=200,
        protein=22.0,
        carbs=2.0,
        fats=10.0,
        meal_types=("lunch", "dinner"),
        category="meat",
        is_vegetarian=False,
        is_gluten_free=True,
        is_dairy_free=True,
        typical_serving=100,
    ),
    FoodItem(
        name="Lassi",
        calories=100,
        protein=3.0,
        carbs=12.0,
        fats=4.0,
        meal_types=("breakfast", "snack"),
        category="beverage",
        is_gluten_free=True,
        allergens=("dairy",),
        typical_serving=250,
        serving_unit="ml",
    ),
    FoodItem(
        name="Gulab Jamun",
        calories=150,
        protein=2.0,
        carbs=28.0,
        fats=4.0,
        meal_types=("snack",),
        category="dessert",
        allergens=("wheat", "dairy"),
        typical_serving=40,
    ),
)


def builtin_foods() -> list[FoodItem]:
    """Return a fresh copy of the built-in catalog."""
    return list(_BUILTIN_FOODS)
