"""
Meal Service

Builds the meal-with-foods projection: every meal of a user together with the
foods its compositions point at.
"""

from typing import Any, Dict, List
from uuid import UUID

from zakfit.extensions import db
from zakfit.models.composition import Composition
from zakfit.models.food import Food
from zakfit.models.meal import Meal


def list_meals_with_foods(user_id: UUID) -> List[Dict[str, Any]]:
    """
    Return ``[{"meal": Meal, "foods": [Food, ...]}, ...]`` for one user.

    One outer-joined query replaces a per-meal composition lookup. Meals keep
    insertion order, foods keep composition order, and a meal without
    compositions comes back with an empty list.
    """
    rows = (
        db.session.query(Meal, Food)
        .outerjoin(Composition, Composition.meal_id == Meal.id)
        .outerjoin(Food, Food.id == Composition.food_id)
        .filter(Meal.user_id == user_id)
        .order_by(Meal.created_at, Meal.id, Composition.created_at, Composition.id)
        .all()
    )

    grouped: Dict[UUID, Dict[str, Any]] = {}
    for meal, food in rows:
        entry = grouped.setdefault(meal.id, {"meal": meal, "foods": []})
        if food is not None:
            entry["foods"].append(food)
    return list(grouped.values())
