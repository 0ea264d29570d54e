from zakfit.models.meal import Meal
from zakfit.schemas.nutrition_schema import MealSchema, MealWithFoodsSchema
from zakfit.services.crud_service import CrudResource
from zakfit.services.meal_service import list_meals_with_foods
from zakfit.utils.http import json_body, no_content, ok

meals = CrudResource(Meal, MealSchema(), "Meal", owner_field="user_id")
meal_with_foods_schema = MealWithFoodsSchema()


def create_meal_handler(current_user):
    meal = meals.create(json_body(), owner_id=current_user.id)
    return ok(meals.dump(meal), 201)


def list_meals_handler(current_user):
    return ok(meals.dump_many(meals.list(owner_id=current_user.id)))


def list_meals_with_foods_handler(current_user):
    entries = list_meals_with_foods(current_user.id)
    return ok(meal_with_foods_schema.dump(entries, many=True))


def get_meal_handler(current_user, meal_id):
    return ok(meals.dump(meals.get(meal_id, owner_id=current_user.id)))


def update_meal_handler(current_user, meal_id):
    meal = meals.update(meal_id, json_body(), owner_id=current_user.id)
    return ok(meals.dump(meal))


def delete_meal_handler(current_user, meal_id):
    meals.delete(meal_id, owner_id=current_user.id)
    return no_content()
