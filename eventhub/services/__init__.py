from eventhub.services.event_service import EventService
from eventhub.services.registration_service import RegistrationService
from eventhub.services.announcement_service import AnnouncementService
from eventhub.services.user_service import UserService
from eventhub.services.export_service import ExportService
