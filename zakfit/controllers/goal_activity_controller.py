from zakfit.models.goal_activity import GoalActivity
from zakfit.models.type_activity import TypeActivity
from zakfit.schemas.activity_schema import GoalActivitySchema
from zakfit.services.crud_service import CrudResource
from zakfit.utils.http import json_body, no_content, ok

goals = CrudResource(
    GoalActivity,
    GoalActivitySchema(),
    "Goal activity",
    owner_field="user_id",
    references={"type_activity_id": TypeActivity},
)


def create_goal_handler(current_user):
    goal = goals.create(json_body(), owner_id=current_user.id)
    return ok(goals.dump(goal), 201)


def list_goals_handler(current_user):
    return ok(goals.dump_many(goals.list(owner_id=current_user.id)))


def update_goal_handler(current_user, goal_id):
    goal = goals.update(goal_id, json_body(), owner_id=current_user.id)
    return ok(goals.dump(goal))


def delete_goal_handler(current_user, goal_id):
    goals.delete(goal_id, owner_id=current_user.id)
    return no_content()
