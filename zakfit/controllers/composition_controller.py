from zakfit.models.composition import Composition
from zakfit.models.food import Food
from zakfit.models.meal import Meal
from zakfit.schemas.nutrition_schema import CompositionSchema
from zakfit.services.crud_service import CrudResource
from zakfit.utils.errors import BadRequest
from zakfit.utils.http import json_body, no_content, ok, parse_uuid

compositions = CrudResource(
    Composition,
    CompositionSchema(),
    "Composition",
    references={"food_id": Food, "meal_id": Meal},
)


def create_composition_handler(current_user):
    composition = compositions.create(json_body())
    return ok(compositions.dump(composition), 201)


def list_meal_compositions_handler(current_user, meal_id):
    meal_uuid = parse_uuid(meal_id)
    if meal_uuid is None:
        raise BadRequest("Invalid meal id")
    items = (
        Composition.query.filter(Composition.meal_id == meal_uuid)
        .order_by(Composition.created_at, Composition.id)
        .all()
    )
    return ok(compositions.dump_many(items))


def delete_composition_handler(current_user, composition_id):
    compositions.delete(composition_id)
    return no_content()
