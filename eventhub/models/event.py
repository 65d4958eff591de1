from eventhub.extensions import db
from .base import generate_id, utcnow, isoformat
from .enums import RegistrationStatus


class Event(db.Model):
    __tablename__ = "events"

    id = db.Column(db.String(32), primary_key=True, default=generate_id)
    name = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False)
    date = db.Column(db.Date, nullable=False)
    capacity = db.Column(db.Integer, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime(timezone=True), nullable=True)

    registrations = db.relationship(
        "Registration",
        backref="event",
        lazy=True,
        cascade="all, delete-orphan",
        order_by="Registration.registered_at",
    )
    announcements = db.relationship(
        "Announcement",
        backref="event",
        lazy=True,
        cascade="all, delete-orphan",
        order_by="Announcement.sent_at",
    )

    @property
    def confirmed_count(self):
        return sum(
            1
            for registration in self.registrations
            if registration.status == RegistrationStatus.CONFIRMED.value
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "date": self.date.isoformat() if self.date else None,
            "capacity": self.capacity,
            "confirmed_count": self.confirmed_count,
            "registration_count": len(self.registrations),
            "created_at": isoformat(self.created_at),
            "updated_at": isoformat(self.updated_at),
        }

    def __repr__(self):
        return (
            f"Event("
            f"id={self.id}, "
            f"name='{self.name}', "
            f"date={self.date}, "
            f"capacity={self.capacity}"
            f")"
        )
