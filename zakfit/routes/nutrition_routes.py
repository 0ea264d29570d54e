from flask import Blueprint
from zakfit.utils.auth import require_auth
from zakfit.controllers.food_controller import (
    create_food_handler,
    list_foods_handler,
    get_food_handler,
    update_food_handler,
    delete_food_handler,
)
from zakfit.controllers.meal_controller import (
    create_meal_handler,
    list_meals_handler,
    list_meals_with_foods_handler,
    get_meal_handler,
    update_meal_handler,
    delete_meal_handler,
)
from zakfit.controllers.composition_controller import (
    create_composition_handler,
    list_meal_compositions_handler,
    delete_composition_handler,
)

food_bp = Blueprint("foods", __name__, url_prefix="/foods")
meal_bp = Blueprint("meals", __name__, url_prefix="/meals")
composition_bp = Blueprint("compositions", __name__, url_prefix="/compositions")


@food_bp.post("")
@require_auth
def create_food(current_user):
    return create_food_handler(current_user)

@food_bp.get("")
@require_auth
def list_foods(current_user):
    return list_foods_handler(current_user)

@food_bp.get("/<food_id>")
@require_auth
def get_food(current_user, food_id):
    return get_food_handler(current_user, food_id)

@food_bp.put("/<food_id>")
@require_auth
def update_food(current_user, food_id):
    return update_food_handler(current_user, food_id)

@food_bp.delete("/<food_id>")
@require_auth
def delete_food(current_user, food_id):
    return delete_food_handler(current_user, food_id)


@meal_bp.post("")
@require_auth
def create_meal(current_user):
    return create_meal_handler(current_user)

@meal_bp.get("")
@require_auth
def list_meals(current_user):
    return list_meals_handler(current_user)

@meal_bp.get("/all_meals")
@require_auth
def list_meals_with_foods(current_user):
    return list_meals_with_foods_handler(current_user)

@meal_bp.get("/<meal_id>")
@require_auth
def get_meal(current_user, meal_id):
    return get_meal_handler(current_user, meal_id)

@meal_bp.put("/<meal_id>")
@require_auth
def update_meal(current_user, meal_id):
    return update_meal_handler(current_user, meal_id)

@meal_bp.delete("/<meal_id>")
@require_auth
def delete_meal(current_user, meal_id):
    return delete_meal_handler(current_user, meal_id)


@composition_bp.post("")
@require_auth
def create_composition(current_user):
    return create_composition_handler(current_user)

@composition_bp.get("/<meal_id>")
@require_auth
def list_meal_compositions(current_user, meal_id):
    return list_meal_compositions_handler(current_user, meal_id)

@composition_bp.delete("/<composition_id>")
@require_auth
def delete_composition(current_user, composition_id):
    return delete_composition_handler(current_user, composition_id)
