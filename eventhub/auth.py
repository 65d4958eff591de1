"""
Bearer-token authorization for the API.

Tokens are Flask-JWT-Extended access tokens whose ``jti`` must have been
recorded in the issued-token table; the resolved user is available as
``flask_jwt_extended.current_user`` once a decorator below has run.
"""
from functools import wraps

from flask import current_app
from flask_jwt_extended import current_user, verify_jwt_in_request

from eventhub.exceptions import ForbiddenError
from eventhub.extensions import jwt
from eventhub.repositories import UserRepository
from eventhub.utils.responses import error_response


def login_required(fn):
    @wraps(fn)
    def wrapper(*args, **kwargs):
        verify_jwt_in_request()
        return fn(*args, **kwargs)

    return wrapper


def admin_required(fn):
    @wraps(fn)
    def wrapper(*args, **kwargs):
        verify_jwt_in_request()
        if not current_user.is_admin:
            current_app.logger.warning(
                f"User {current_user.id} denied admin action {fn.__name__}"
            )
            raise ForbiddenError(message="Admin role required for this action")
        return fn(*args, **kwargs)

    return wrapper


@jwt.user_identity_loader
def user_identity_lookup(user_id):
    return str(user_id)


@jwt.user_lookup_loader
def user_lookup_callback(_jwt_header, jwt_data):
    return UserRepository.find_by_id(jwt_data["sub"])


@jwt.token_in_blocklist_loader
def check_if_token_unknown(_jwt_header, jwt_payload):
    # Only tokens this process issued map to a user
    return UserRepository.find_token(jwt_payload["jti"]) is None


@jwt.unauthorized_loader
def missing_token_callback(reason):
    return error_response(
        "Unauthorized", 401, message="Authorization header required (Bearer <token>)"
    )


@jwt.invalid_token_loader
def invalid_token_callback(reason):
    return error_response("Invalid or expired token", 401)


@jwt.expired_token_loader
def expired_token_callback(_jwt_header, _jwt_payload):
    return error_response("Invalid or expired token", 401)


@jwt.revoked_token_loader
def unknown_token_callback(_jwt_header, _jwt_payload):
    return error_response("Invalid or expired token", 401)


@jwt.user_lookup_error_loader
def user_lookup_error_callback(_jwt_header, _jwt_payload):
    return error_response("User not found", 401)
