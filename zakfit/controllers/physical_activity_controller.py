from zakfit.models.physical_activity import PhysicalActivity
from zakfit.models.type_activity import TypeActivity
from zakfit.schemas.activity_schema import PhysicalActivitySchema
from zakfit.services.crud_service import CrudResource
from zakfit.utils.http import json_body, no_content, ok

activities = CrudResource(
    PhysicalActivity,
    PhysicalActivitySchema(),
    "Physical activity",
    owner_field="user_id",
    references={"type_activity_id": TypeActivity},
)


def create_activity_handler(current_user):
    activity = activities.create(json_body(), owner_id=current_user.id)
    return ok(activities.dump(activity), 201)


def list_activities_handler(current_user):
    return ok(activities.dump_many(activities.list(owner_id=current_user.id)))


def get_activity_handler(current_user, activity_id):
    return ok(activities.dump(activities.get(activity_id, owner_id=current_user.id)))


def update_activity_handler(current_user, activity_id):
    activity = activities.update(activity_id, json_body(), owner_id=current_user.id)
    return ok(activities.dump(activity))


def delete_activity_handler(current_user, activity_id):
    activities.delete(activity_id, owner_id=current_user.id)
    return no_content()
