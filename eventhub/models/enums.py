from enum import Enum


class RegistrationStatus(Enum):
    CONFIRMED = "confirmed"
    PENDING = "pending"
    REJECTED = "rejected"

    @classmethod
    def values(cls):
        return [status.value for status in cls]


class UserRole(Enum):
    ADMIN = "admin"
    PARTICIPANT = "participant"
