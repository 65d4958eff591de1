import logging

from flask_jwt_extended import create_access_token, decode_token
from werkzeug.security import check_password_hash, generate_password_hash

from eventhub.exceptions import ConflictError, UnauthorizedError
from eventhub.models import User
from eventhub.models.enums import UserRole
from eventhub.repositories import UserRepository
from eventhub.validators import (
    ensure_valid,
    normalize_email,
    validate_login,
    validate_signup,
)

logger = logging.getLogger(__name__)


class UserService:
    @staticmethod
    def issue_token(user: User) -> str:
        access_token = create_access_token(identity=user.id)
        jti = decode_token(access_token)["jti"]
        UserRepository.save_token(jti, user.id)
        return access_token

    @staticmethod
    def create_user(name, email, password, role=UserRole.PARTICIPANT) -> User:
        user = User(
            name=name.strip(),
            email=normalize_email(email),
            password=generate_password_hash(password),
            role=role.value,
        )
        return UserRepository.sign_up(user)

    @staticmethod
    def sign_up(user_data):
        ensure_valid(validate_signup(user_data))

        existing_user = UserRepository.find_by_email(user_data["email"])
        if existing_user:
            logger.warning(f"Signup attempt with existing email: {user_data['email']}")
            raise ConflictError("Email already registered")

        created_user = UserService.create_user(
            user_data["name"], user_data["email"], user_data["password"]
        )
        access_token = UserService.issue_token(created_user)

        logger.info(f"User created successfully: {created_user.email}")
        return {"token": access_token, "user": created_user.to_dict()}

    @staticmethod
    def sign_in(user_data):
        ensure_valid(validate_login(user_data), error="Email and password are required")
        email = user_data["email"]

        user = UserRepository.find_by_email(email)
        if not user:
            logger.warning(f"Login attempt with non-existent email: {email}")
            raise UnauthorizedError("Invalid credentials")

        if not check_password_hash(user.password, user_data["password"]):
            logger.warning(f"Failed login attempt for user: {email}")
            raise UnauthorizedError("Invalid credentials")

        access_token = UserService.issue_token(user)

        logger.info(f"User logged in successfully: {email}")
        return {"token": access_token, "user": user.to_dict()}
