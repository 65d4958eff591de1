from eventhub.extensions import db
from eventhub.models import User, IssuedToken


class UserRepository:
    @staticmethod
    def sign_up(user):
        db.session.add(user)
        db.session.commit()
        return user

    @staticmethod
    def find_by_email(email):
        return User.query.filter(db.func.lower(User.email) == email.strip().lower()).first()

    @staticmethod
    def find_by_id(user_id: str):
        return db.session.get(User, user_id)

    @staticmethod
    def save_token(jti: str, user_id: str):
        token = IssuedToken(jti=jti, user_id=user_id)
        db.session.add(token)
        db.session.commit()
        return token

    @staticmethod
    def find_token(jti: str):
        return db.session.get(IssuedToken, jti)
