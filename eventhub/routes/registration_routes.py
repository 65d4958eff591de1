from flask import Blueprint, jsonify, request, send_file
from flask_jwt_extended import current_user
import io

from eventhub.auth import login_required
from eventhub.routes import get_json_body
from eventhub.services import EventService, ExportService, RegistrationService
from eventhub.services.export_service import XLSX_MIMETYPE
from eventhub.utils.responses import success_response
from eventhub.validators import ensure_valid, validate_registration

registration_bp = Blueprint("registration", __name__)


@registration_bp.route("/events/<event_id>/registrations", methods=["GET"])
def get_event_registrations(event_id):
    registrations = RegistrationService.list_for_event(event_id)
    return success_response([registration.to_dict() for registration in registrations])


@registration_bp.route("/events/<event_id>/register", methods=["POST"])
def register_for_event(event_id):
    data = get_json_body()
    ensure_valid(validate_registration(data))

    registration = RegistrationService.register(
        event_id, data["name"], data["email"], data["phone"]
    )
    return success_response(registration.to_dict(), "Registration successful", 201)


@registration_bp.route("/registrations/<registration_id>/status", methods=["PATCH"])
def update_registration_status(registration_id):
    data = get_json_body()
    registration = RegistrationService.set_status(registration_id, data.get("status"))
    return success_response(registration.to_dict(), "Registration status updated")


@registration_bp.route("/registrations/<registration_id>/cancel", methods=["POST"])
@login_required
def cancel_registration(registration_id):
    registration = RegistrationService.cancel_own(registration_id, current_user)
    return success_response(registration.to_dict(), "Registration cancelled")


@registration_bp.route("/events/<event_id>/check-registration", methods=["GET"])
def check_registration(event_id):
    registration = RegistrationService.find_by_email(event_id, request.args.get("email"))
    return jsonify(
        {
            "success": True,
            "data": registration.to_dict() if registration else None,
        }
    )


@registration_bp.route("/events/<event_id>/download-participants", methods=["GET"])
def download_participants(event_id):
    event = EventService.get_event(event_id)
    registrations = RegistrationService.list_for_event(event_id)

    content = ExportService.render(event, registrations)
    return send_file(
        io.BytesIO(content),
        mimetype=XLSX_MIMETYPE,
        as_attachment=True,
        download_name=ExportService.filename(event),
    )
