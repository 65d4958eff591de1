import uuid
from datetime import datetime, timezone


def generate_id():
    return uuid.uuid4().hex


def utcnow():
    return datetime.now(timezone.utc)


def isoformat(value):
    if not value:
        return None
    # SQLite hands timestamps back without tzinfo; they are stored as UTC
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()
