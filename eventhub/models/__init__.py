from eventhub.models.event import Event
from eventhub.models.registration import Registration
from eventhub.models.announcement import Announcement
from eventhub.models.user import User
from eventhub.models.issued_token import IssuedToken
from eventhub.models.enums import RegistrationStatus, UserRole
