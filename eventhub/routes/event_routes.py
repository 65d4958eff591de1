from flask import Blueprint, current_app

from eventhub.auth import admin_required
from eventhub.routes import get_json_body
from eventhub.services import EventService
from eventhub.utils.responses import success_response
from eventhub.validators import ensure_valid, validate_event

event_bp = Blueprint("event", __name__)


@event_bp.route("/events", methods=["GET"])
def get_all_events():
    events = EventService.get_events()
    return success_response([event.to_dict() for event in events])


@event_bp.route("/events/<event_id>", methods=["GET"])
def get_event(event_id):
    event = EventService.get_event(event_id)
    return success_response(event.to_dict())


@event_bp.route("/events", methods=["POST"])
@admin_required
def create_event():
    data = get_json_body()
    ensure_valid(validate_event(data))

    event = EventService.create_event(data)
    return success_response(event.to_dict(), "Event created successfully", 201)


@event_bp.route("/events/<event_id>", methods=["PUT"])
@admin_required
def update_event(event_id):
    data = get_json_body()
    ensure_valid(validate_event(data))

    event = EventService.update_event(event_id, data)
    return success_response(event.to_dict(), "Event updated successfully")


@event_bp.route("/events/<event_id>", methods=["DELETE"])
@admin_required
def delete_event(event_id):
    EventService.delete_event(event_id)
    return success_response(message="Event deleted successfully")


@event_bp.route("/stats", methods=["GET"])
def get_stats():
    return success_response(EventService.get_stats())


@event_bp.route("/health", methods=["GET"])
def health():
    current_app.logger.debug("Health check")
    return success_response({"status": "ok"})
