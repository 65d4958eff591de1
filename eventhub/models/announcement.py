from eventhub.extensions import db
from .base import generate_id, utcnow, isoformat


class Announcement(db.Model):
    __tablename__ = "announcements"

    id = db.Column(db.String(32), primary_key=True, default=generate_id)
    event_id = db.Column(
        db.String(32), db.ForeignKey("events.id", ondelete="CASCADE"), nullable=False
    )
    message = db.Column(db.Text, nullable=False)
    sent_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "event_id": self.event_id,
            "message": self.message,
            "sent_at": isoformat(self.sent_at),
        }

    def __repr__(self):
        return f"<Announcement id={self.id} event_id={self.event_id}>"
