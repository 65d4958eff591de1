from eventhub.extensions import db
from .base import generate_id, utcnow, isoformat


class Registration(db.Model):
    __tablename__ = "registrations"

    id = db.Column(db.String(32), primary_key=True, default=generate_id)
    event_id = db.Column(
        db.String(32), db.ForeignKey("events.id", ondelete="CASCADE"), nullable=False
    )
    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    phone = db.Column(db.String(32), nullable=False)
    status = db.Column(db.String(20), nullable=False)
    registered_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime(timezone=True), nullable=True)

    # One registration per (event, lowercase email)
    __table_args__ = (
        db.UniqueConstraint("event_id", "email", name="uq_registration_event_email"),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "event_id": self.event_id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "status": self.status,
            "registered_at": isoformat(self.registered_at),
            "updated_at": isoformat(self.updated_at),
        }

    def __repr__(self):
        return (
            f"Registration("
            f"id={self.id}, "
            f"event_id={self.event_id}, "
            f"email='{self.email}', "
            f"status={self.status}"
            f")"
        )
