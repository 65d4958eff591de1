from datetime import date
from typing import List

from flask import current_app

from eventhub.exceptions import NotFoundError
from eventhub.models import Event
from eventhub.models.base import utcnow
from eventhub.repositories import (
    AnnouncementRepository,
    EventRepository,
    RegistrationRepository,
)
from eventhub.validators import parse_capacity, parse_event_date


class EventService:
    @staticmethod
    def get_events() -> List[Event]:
        return EventRepository.get_events()

    @staticmethod
    def get_event(event_id: str) -> Event:
        event = EventRepository.get_event(event_id)
        if not event:
            raise NotFoundError("Event not found")
        return event

    @staticmethod
    def _event_attrs(data):
        # Only called with validated payloads
        return {
            "name": data["name"].strip(),
            "description": data["description"].strip(),
            "date": parse_event_date(data["date"]),
            "capacity": parse_capacity(data["capacity"]),
        }

    @staticmethod
    def create_event(data) -> Event:
        event = EventRepository.create_event(EventService._event_attrs(data))
        current_app.logger.info(f"Created event {event.id} ({event.name}), capacity={event.capacity}")
        return event

    @staticmethod
    def update_event(event_id: str, data) -> Event:
        event = EventService.get_event(event_id)
        attrs = EventService._event_attrs(data)
        # Lowering the capacity below the confirmed count is allowed;
        # existing confirmations are kept.
        attrs["updated_at"] = utcnow()
        event = EventRepository.update_event(event, attrs)
        current_app.logger.info(f"Updated event {event.id}")
        return event

    @staticmethod
    def delete_event(event_id: str):
        event = EventService.get_event(event_id)
        registration_count = len(event.registrations)
        announcement_count = len(event.announcements)
        EventRepository.delete_event(event)
        current_app.logger.info(
            f"Deleted event {event_id} with {registration_count} registrations "
            f"and {announcement_count} announcements"
        )

    @staticmethod
    def get_stats(today=None) -> dict:
        today = today or date.today()
        return {
            "total_events": EventRepository.count_events(),
            "total_registrations": RegistrationRepository.count_registrations(),
            "total_announcements": AnnouncementRepository.count_announcements(),
            "upcoming_events": EventRepository.count_upcoming(today),
        }
