from flask import Blueprint
from flask_jwt_extended import current_user

from eventhub.auth import login_required
from eventhub.routes import get_json_body
from eventhub.services import UserService
from eventhub.utils.responses import success_response

auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/signup", methods=["POST"])
def sign_up():
    result = UserService.sign_up(get_json_body())
    return success_response(result, "Signup successful", 201)


@auth_bp.route("/login", methods=["POST"])
def login():
    result = UserService.sign_in(get_json_body())
    return success_response(result, "Login successful")


@auth_bp.route("/me", methods=["GET"])
@login_required
def me():
    return success_response(current_user.to_dict())
