from typing import List, Optional
from eventhub.extensions import db
from eventhub.models import Registration
from eventhub.models.enums import RegistrationStatus


class RegistrationRepository:
    @staticmethod
    def get_registration(registration_id: str) -> Optional[Registration]:
        return db.session.get(Registration, registration_id)

    @staticmethod
    def find_by_event_id(event_id: str) -> List[Registration]:
        return (
            Registration.query.filter_by(event_id=event_id)
            .order_by(Registration.registered_at.asc())
            .all()
        )

    @staticmethod
    def find_by_event_and_email(event_id: str, email: str) -> Optional[Registration]:
        """Find a registration by event_id and (already lowercased) email"""
        return Registration.query.filter_by(event_id=event_id, email=email).first()

    @staticmethod
    def count_by_event_id_and_status(
        event_id: str, statuses: List[RegistrationStatus], exclude_id: str = None
    ) -> int:
        """Count registrations for an event with specific statuses."""
        query = Registration.query.filter(Registration.event_id == event_id).filter(
            Registration.status.in_([status.value for status in statuses])
        )
        if exclude_id is not None:
            query = query.filter(Registration.id != exclude_id)
        return query.count()

    @staticmethod
    def count_registrations() -> int:
        return Registration.query.count()

    @staticmethod
    def create_registration(attrs):
        registration = Registration(**attrs)
        db.session.add(registration)
        db.session.commit()
        return registration

    @staticmethod
    def update_registration_status(registration: Registration, new_status: RegistrationStatus, updated_at):
        """Updates the status and update timestamp of a registration."""
        registration.status = new_status.value
        registration.updated_at = updated_at
        db.session.add(registration)
        db.session.commit()
        return registration
