from flask import Blueprint
from zakfit.utils.auth import require_auth
from zakfit.controllers.user_controller import (
    register_handler,
    login_handler,
    get_user_handler,
    update_user_handler,
    update_password_handler,
    delete_user_handler,
)

user_bp = Blueprint("users", __name__, url_prefix="/users")

@user_bp.post("/register")
def register():
    return register_handler()


@user_bp.post("/login")
def login():
    return login_handler()


@user_bp.get("/<user_id>")
@require_auth
def get_user(current_user, user_id):
    return get_user_handler(current_user, user_id)


@user_bp.put("/<user_id>")
@require_auth
def update_user(current_user, user_id):
    return update_user_handler(current_user, user_id)


@user_bp.put("/<user_id>/password")
@require_auth
def update_password(current_user, user_id):
    return update_password_handler(current_user, user_id)


@user_bp.delete("/<user_id>")
@require_auth
def delete_user(current_user, user_id):
    return delete_user_handler(current_user, user_id)
