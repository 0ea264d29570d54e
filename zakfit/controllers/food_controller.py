from zakfit.models.food import Food
from zakfit.schemas.nutrition_schema import FoodSchema
from zakfit.services.crud_service import CrudResource
from zakfit.utils.http import json_body, no_content, ok

# Foods are a shared catalogue: any authenticated user may edit them.
foods = CrudResource(Food, FoodSchema(), "Food")


def create_food_handler(current_user):
    food = foods.create(json_body())
    return ok(foods.dump(food), 201)


def list_foods_handler(current_user):
    return ok(foods.dump_many(foods.list()))


def get_food_handler(current_user, food_id):
    return ok(foods.dump(foods.get(food_id)))


def update_food_handler(current_user, food_id):
    return ok(foods.dump(foods.update(food_id, json_body())))


def delete_food_handler(current_user, food_id):
    foods.delete(food_id)
    return no_content()
