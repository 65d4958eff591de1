from flask import Blueprint

from eventhub.auth import admin_required
from eventhub.routes import get_json_body
from eventhub.services import AnnouncementService
from eventhub.utils.responses import success_response
from eventhub.validators import ensure_valid, validate_announcement

announcement_bp = Blueprint("announcement", __name__)


@announcement_bp.route("/events/<event_id>/announcements", methods=["GET"])
def get_announcements(event_id):
    announcements = AnnouncementService.list_for_event(event_id)
    return success_response([announcement.to_dict() for announcement in announcements])


@announcement_bp.route("/events/<event_id>/announcements", methods=["POST"])
@admin_required
def create_announcement(event_id):
    data = get_json_body()
    ensure_valid(validate_announcement(data))

    announcement, participant_count = AnnouncementService.create(event_id, data["message"])
    return success_response(
        announcement.to_dict(),
        f"Announcement sent to {participant_count} participant(s)",
        201,
    )
