from flask import Blueprint
from zakfit.utils.auth import require_auth
from zakfit.controllers.type_activity_controller import list_type_activities_handler
from zakfit.controllers.physical_activity_controller import (
    create_activity_handler,
    list_activities_handler,
    get_activity_handler,
    update_activity_handler,
    delete_activity_handler,
)
from zakfit.controllers.goal_activity_controller import (
    create_goal_handler,
    list_goals_handler,
    update_goal_handler,
    delete_goal_handler,
)

type_activity_bp = Blueprint("type_activities", __name__, url_prefix="/type_activities")
physical_activity_bp = Blueprint("physical_activities", __name__, url_prefix="/physical_activities")
goal_activity_bp = Blueprint("goal_activities", __name__, url_prefix="/goal_activities")


@type_activity_bp.get("")
def list_type_activities():
    return list_type_activities_handler()


@physical_activity_bp.post("")
@require_auth
def create_activity(current_user):
    return create_activity_handler(current_user)

@physical_activity_bp.get("")
@require_auth
def list_activities(current_user):
    return list_activities_handler(current_user)

@physical_activity_bp.get("/<activity_id>")
@require_auth
def get_activity(current_user, activity_id):
    return get_activity_handler(current_user, activity_id)

@physical_activity_bp.put("/<activity_id>")
@require_auth
def update_activity(current_user, activity_id):
    return update_activity_handler(current_user, activity_id)

@physical_activity_bp.delete("/<activity_id>")
@require_auth
def delete_activity(current_user, activity_id):
    return delete_activity_handler(current_user, activity_id)


@goal_activity_bp.post("")
@require_auth
def create_goal(current_user):
    return create_goal_handler(current_user)

@goal_activity_bp.get("")
@require_auth
def list_goals(current_user):
    return list_goals_handler(current_user)

@goal_activity_bp.put("/<goal_id>")
@require_auth
def update_goal(current_user, goal_id):
    return update_goal_handler(current_user, goal_id)

@goal_activity_bp.delete("/<goal_id>")
@require_auth
def delete_goal(current_user, goal_id):
    return delete_goal_handler(current_user, goal_id)
