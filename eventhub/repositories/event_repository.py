from eventhub.extensions import db
from eventhub.models import Event


class EventRepository:
    @staticmethod
    def get_events():
        return Event.query.order_by(Event.created_at.asc()).all()

    @staticmethod
    def get_event(event_id: str) -> Event:
        return db.session.get(Event, event_id)

    @staticmethod
    def count_events() -> int:
        return Event.query.count()

    @staticmethod
    def count_upcoming(today) -> int:
        return Event.query.filter(Event.date >= today).count()

    @staticmethod
    def create_event(attrs):
        event = Event(**attrs)
        db.session.add(event)
        db.session.commit()
        return event

    @staticmethod
    def update_event(event: Event, attrs: dict):
        for key, value in attrs.items():
            if hasattr(event, key):
                setattr(event, key, value)
        db.session.commit()
        return event

    @staticmethod
    def delete_event(event: Event):
        """Deletes the event; registrations and announcements go with it."""
        db.session.delete(event)
        db.session.commit()
