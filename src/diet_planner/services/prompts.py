"""Prompt builders for plan and catalog generation."""

from diet_planner.domain.foods import FoodItem
from diet_planner.domain.plans import NutritionTargets
from diet_planner.domain.profile import ProfileSnapshot
from diet_planner.services.metabolism import resolve_metrics


def system_prompt(cuisine: str) -> str:
    """System instruction shared by every backend call."""
    return (
        f"You are a professional nutritionist specializing in {cuisine} cuisine. "
        "Always respond with valid JSON only, no additional text."
    )


def build_plan_prompt(
    profile: ProfileSnapshot,
    targets: NutritionTargets,
    foods: list[FoodItem],
    cuisine: str,
) -> str:
    """Build the daily plan prompt for a profile and its targets."""
    food_list = ", ".join(
        f"{food.name} ({food.calories:g} cal/100g, {food.protein:g}g protein, "
        f"{food.carbs:g}g carbs, {food.fats:g}g fats)"
        for food in foods
    )
    allergies = ", ".join(allergy.name for allergy in profile.allergies) or "None"
    preferences = ", ".join(sorted(profile.dietary_preferences)) or "None"
    goals = ", ".join(profile.health_goals) or "Maintenance"
    metrics = resolve_metrics(profile)

    return f"""You are a nutritionist creating a personalized daily diet plan for a {cuisine} user.

User Profile:
- Age: {metrics.age} years
- Gender: {profile.gender or "Not specified"}
- Weight: {profile.weight:g} {profile.weight_unit}
- Height: {profile.height:g} {profile.height_unit}
- BMI: {metrics.bmi:.1f}
- Activity Level: {profile.activity_level or "moderately_active"}
- Health Goals: {goals}
- Dietary Preferences: {preferences}
- Allergies: {allergies}

Daily Nutritional Targets:
- Total Calories: {targets.daily_calories} kcal
- Protein: {targets.daily_protein}g
- Carbohydrates: {targets.daily_carbs}g
- Fats: {targets.daily_fats}g

Available {cuisine} Foods (use only these):
{food_list}

Create a complete daily diet plan with the following meals:
1. Breakfast (25% of daily calories)
2. Lunch (35% of daily calories)
3. Dinner (30% of daily calories)
4. Snack (10% of daily calories)

For each meal, provide:
- Meal type (breakfast, lunch, dinner, snack)
- List of food items with name (from the available foods), quantity in grams,
  unit, calories, protein, carbs and fats in grams
- Total calories for the meal
- Optional notes

IMPORTANT:
- Use ONLY foods from the available list
- Respect dietary preferences and allergies
- Ensure total daily calories are approximately {targets.daily_calories} kcal
- Return ONLY valid JSON in this exact format (no markdown, no code blocks):

{{
  "meals": [
    {{
      "mealType": "breakfast",
      "items": [
        {{
          "name": "Food Name",
          "quantity": 100,
          "unit": "grams",
          "calories": 250,
          "protein": 10,
          "carbs": 30,
          "fats": 8
        }}
      ],
      "totalCalories": 250,
      "notes": "Optional notes"
    }}
  ],
  "dailyCalories": {targets.daily_calories},
  "dailyProtein": {targets.daily_protein},
  "dailyCarbs": {targets.daily_carbs},
  "dailyFats": {targets.daily_fats}
}}"""


def build_food_list_prompt(cuisine: str) -> str:
    """Build the prompt asking a backend for a regional food catalog."""
    return f"""Generate a comprehensive list of 50-100 common {cuisine} foods that are easily available. For each food, provide:

1. Name (English)
2. Category: bread, rice, curry, meat, vegetable, dal, snack, dessert, beverage, fast_food, fried, seafood, salad, or other
3. Meal types: breakfast, lunch, dinner, snack, or side (can be multiple)
4. Nutritional information per 100g: calories, protein, carbs and fats in grams
5. Dietary information: isVegetarian, isVegan, isGlutenFree, isDairyFree (booleans)
6. Allergens (if any): wheat, dairy, nuts, eggs, soy, fish, shellfish, sesame
7. Typical serving size in grams
8. Serving unit (usually "grams")

Return ONLY valid JSON in this exact format (no markdown, no code blocks):

{{
  "foods": [
    {{
      "name": "Roti",
      "category": "bread",
      "mealType": ["breakfast", "lunch", "dinner"],
      "calories": 297,
      "protein": 7.85,
      "carbs": 58.0,
      "fats": 7.45,
      "isVegetarian": true,
      "isVegan": true,
      "isGlutenFree": false,
      "isDairyFree": true,
      "allergens": ["wheat"],
      "typicalServing": 50,
      "servingUnit": "grams"
    }}
  ]
}}"""
