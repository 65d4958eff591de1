"""
Payload validation for events, registrations, announcements and accounts.

Every validator is a pure function returning a ``{field: message}`` dict;
an empty dict means the payload is valid. Routes hand the dict to
``ensure_valid`` which raises ``ValidationError`` carrying the full map.
"""
import re
from datetime import date, datetime

from eventhub.exceptions import ValidationError

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MAX_CAPACITY = 10000


def _text(data, field):
    value = data.get(field)
    return value.strip() if isinstance(value, str) else ""


def normalize_email(email):
    return email.strip().lower()


def normalize_phone(phone):
    return re.sub(r"[^0-9]", "", phone)


def is_valid_email(email):
    return isinstance(email, str) and bool(EMAIL_PATTERN.match(email.strip()))


def parse_event_date(value):
    """Parse a ``YYYY-MM-DD`` string (a longer ISO timestamp is cut to its date)."""
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return datetime.strptime(value.strip()[:10], "%Y-%m-%d").date()
    except ValueError:
        return None


def parse_capacity(value):
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and re.fullmatch(r"\s*-?[0-9]+\s*", value):
        try:
            return int(value)
        except ValueError:
            # past the interpreter's integer string conversion limit
            return None
    return None


def validate_event(data, today=None):
    today = today or date.today()
    errors = {}

    if len(_text(data, "name")) < 3:
        errors["name"] = "Event name must be at least 3 characters"

    if len(_text(data, "description")) < 10:
        errors["description"] = "Description must be at least 10 characters"

    raw_date = data.get("date")
    if raw_date in (None, ""):
        errors["date"] = "Event date is required"
    else:
        event_date = parse_event_date(raw_date)
        if event_date is None:
            errors["date"] = "Event date must be a valid date (YYYY-MM-DD)"
        elif event_date < today:
            errors["date"] = "Event date cannot be in the past"

    raw_capacity = data.get("capacity")
    capacity = parse_capacity(raw_capacity)
    if raw_capacity in (None, "") or (capacity is not None and capacity < 1):
        errors["capacity"] = "Capacity must be at least 1"
    elif capacity is None:
        errors["capacity"] = "Capacity must be a whole number"
    elif capacity > MAX_CAPACITY:
        errors["capacity"] = "Capacity cannot exceed 10,000"

    return errors


def validate_registration(data):
    errors = {}

    if len(_text(data, "name")) < 2:
        errors["name"] = "Name must be at least 2 characters"

    email = _text(data, "email")
    if not email:
        errors["email"] = "Email is required"
    elif not is_valid_email(email):
        errors["email"] = "Please enter a valid email address"

    phone = _text(data, "phone")
    if not phone:
        errors["phone"] = "Phone number is required"
    elif len(normalize_phone(phone)) != 10:
        errors["phone"] = "Please enter a valid 10-digit phone number"

    return errors


def validate_announcement(data):
    errors = {}
    if len(_text(data, "message")) < 5:
        errors["message"] = "Announcement must be at least 5 characters"
    return errors


def validate_signup(data):
    errors = {}

    if len(_text(data, "name")) < 2:
        errors["name"] = "Name must be at least 2 characters"

    if not is_valid_email(data.get("email")):
        errors["email"] = "Valid email is required"

    password = data.get("password")
    if not isinstance(password, str) or len(password) < 6:
        errors["password"] = "Password must be at least 6 characters"

    return errors


def validate_login(data):
    errors = {}
    if not _text(data, "email"):
        errors["email"] = "Email is required"
    if not isinstance(data.get("password"), str) or not data.get("password"):
        errors["password"] = "Password is required"
    return errors


def ensure_valid(errors, error=None):
    if errors:
        raise ValidationError(errors, error=error)
