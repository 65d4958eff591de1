from eventhub.extensions import db
from .base import utcnow


class IssuedToken(db.Model):
    __tablename__ = "issued_tokens"

    jti = db.Column(db.String(64), primary_key=True)
    user_id = db.Column(
        db.String(32), db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    issued_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)

    def __repr__(self):
        return f"<IssuedToken jti={self.jti} user_id={self.user_id}>"
