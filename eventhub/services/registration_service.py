import threading
from collections import Counter
from typing import List

from flask import current_app

from eventhub.exceptions import (
    CapacityExceededError,
    ConflictError,
    ForbiddenError,
    InvalidStatusError,
    NotFoundError,
    ValidationError,
)
from eventhub.models import Registration
from eventhub.models.base import utcnow
from eventhub.models.enums import RegistrationStatus
from eventhub.repositories import EventRepository, RegistrationRepository
from eventhub.validators import normalize_email

# Serializes every check-then-act on the registrations table so the
# confirmed count of an event can never pass its capacity.
registration_lock = threading.Lock()


class RegistrationService:
    @staticmethod
    def list_for_event(event_id: str) -> List[Registration]:
        event = EventRepository.get_event(event_id)
        if not event:
            raise NotFoundError("Event not found")
        return RegistrationRepository.find_by_event_id(event_id)

    @staticmethod
    def find_by_email(event_id: str, email):
        if not isinstance(email, str) or not email.strip():
            raise ValidationError(
                {"email": "Email parameter is required"},
                error="Email parameter is required",
            )
        return RegistrationRepository.find_by_event_and_email(
            event_id, normalize_email(email)
        )

    @staticmethod
    def register(event_id: str, name: str, email: str, phone: str) -> Registration:
        email = normalize_email(email)
        current_app.logger.info(f"Registration attempt: {email} for event {event_id}")

        with registration_lock:
            event = EventRepository.get_event(event_id)
            if not event:
                raise NotFoundError("Event not found")

            existing_registration = RegistrationRepository.find_by_event_and_email(
                event_id, email
            )
            if existing_registration:
                current_app.logger.warning(
                    f"{email} already registered for event {event_id}"
                )
                raise ConflictError(
                    "You are already registered for this event",
                    data=existing_registration.to_dict(),
                )

            confirmed_count = RegistrationRepository.count_by_event_id_and_status(
                event_id, [RegistrationStatus.CONFIRMED]
            )
            current_app.logger.info(
                f"Capacity check for event {event_id}: confirmed={confirmed_count}/{event.capacity}"
            )
            if confirmed_count >= event.capacity:
                raise CapacityExceededError()

            registration = RegistrationRepository.create_registration(
                {
                    "event_id": event_id,
                    "name": name.strip(),
                    "email": email,
                    "phone": phone.strip(),
                    "status": RegistrationStatus.CONFIRMED.value,
                }
            )

        current_app.logger.info(
            f"Registered {email} for event {event_id} as {registration.id}"
        )
        return registration

    @staticmethod
    def set_status(registration_id: str, new_status) -> Registration:
        """
        Moves a registration to any of the three statuses.

        The status model is permissive: every status may follow every other
        one. Only a move *into* ``confirmed`` is gated, by the event capacity.

        Raises:
            InvalidStatusError: ``new_status`` is not a known status. Checked
                before anything is looked up, so nothing is mutated.
            NotFoundError: no registration with that id.
            CapacityExceededError: confirming would overfill the event.
        """
        if new_status not in RegistrationStatus.values():
            raise InvalidStatusError()
        status = RegistrationStatus(new_status)

        with registration_lock:
            registration = RegistrationRepository.get_registration(registration_id)
            if not registration:
                raise NotFoundError("Registration not found")

            if (
                status == RegistrationStatus.CONFIRMED
                and registration.status != RegistrationStatus.CONFIRMED.value
            ):
                event = EventRepository.get_event(registration.event_id)
                confirmed_count = RegistrationRepository.count_by_event_id_and_status(
                    registration.event_id,
                    [RegistrationStatus.CONFIRMED],
                    exclude_id=registration.id,
                )
                if confirmed_count >= event.capacity:
                    current_app.logger.warning(
                        f"Cannot confirm {registration_id}: event {event.id} at capacity"
                    )
                    raise CapacityExceededError("Cannot confirm - event is at capacity")

            previous_status = registration.status
            RegistrationRepository.update_registration_status(
                registration, status, utcnow()
            )

        current_app.logger.info(
            f"Registration {registration_id} status {previous_status} -> {status.value}"
        )
        return registration

    @staticmethod
    def cancel_own(registration_id: str, user) -> Registration:
        registration = RegistrationRepository.get_registration(registration_id)
        if not registration:
            raise NotFoundError("Registration not found")

        if not user.is_admin and normalize_email(user.email) != registration.email:
            current_app.logger.warning(
                f"User {user.id} tried to cancel registration {registration_id} they do not own"
            )
            raise ForbiddenError(message="You can only cancel your own registration")

        return RegistrationService.set_status(
            registration_id, RegistrationStatus.REJECTED.value
        )

    @staticmethod
    def status_counts(registrations) -> dict:
        counts = Counter(registration.status for registration in registrations)
        return {status: counts.get(status, 0) for status in RegistrationStatus.values()}
