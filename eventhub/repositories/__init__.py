from eventhub.repositories.event_repository import EventRepository
from eventhub.repositories.registration_repository import RegistrationRepository
from eventhub.repositories.announcement_repository import AnnouncementRepository
from eventhub.repositories.user_repository import UserRepository
