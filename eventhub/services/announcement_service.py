from typing import List

from flask import current_app

from eventhub.exceptions import NotFoundError
from eventhub.models import Announcement
from eventhub.models.enums import RegistrationStatus
from eventhub.repositories import (
    AnnouncementRepository,
    EventRepository,
    RegistrationRepository,
)
from eventhub.utils.email import send_announcement_email


class AnnouncementService:
    @staticmethod
    def list_for_event(event_id: str) -> List[Announcement]:
        event = EventRepository.get_event(event_id)
        if not event:
            raise NotFoundError("Event not found")
        return AnnouncementRepository.find_by_event_id(event_id)

    @staticmethod
    def create(event_id: str, message: str):
        """Stores the announcement and mails it to the event's active registrants.

        Returns the announcement and the number of participants registered
        for the event.
        """
        event = EventRepository.get_event(event_id)
        if not event:
            raise NotFoundError("Event not found")

        announcement = AnnouncementRepository.create_announcement(
            {"event_id": event_id, "message": message.strip()}
        )

        registrations = RegistrationRepository.find_by_event_id(event_id)
        recipients = [
            registration.email
            for registration in registrations
            if registration.status != RegistrationStatus.REJECTED.value
        ]
        if recipients:
            try:
                send_announcement_email(event, announcement, recipients)
            except Exception as e:
                # The announcement is stored; mail delivery is best effort
                current_app.logger.error(
                    f"Failed to send announcement {announcement.id} for event {event_id}: {str(e)}"
                )

        current_app.logger.info(
            f"Announcement {announcement.id} sent for event {event_id} to {len(registrations)} participant(s)"
        )
        return announcement, len(registrations)
