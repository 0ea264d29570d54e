from flask import current_app

from zakfit.models.type_activity import TypeActivity
from zakfit.schemas.activity_schema import TypeActivitySchema
from zakfit.utils.http import ok

type_activity_schema = TypeActivitySchema()


def list_type_activities_handler():
    items = TypeActivity.query.order_by(TypeActivity.created_at, TypeActivity.id).all()
    current_app.logger.debug("Retrieved %d type activities", len(items))
    return ok(type_activity_schema.dump(items, many=True))
