from flask import jsonify, request
from flask_jwt_extended import jwt_required

from healthapp.core import derived
from healthapp.helpers import current_health_session


def serialize_vaccination(vaccination, today=None):
    payload = vaccination.to_dict()
    payload["dateAdministeredDisplay"] = derived.format_display_date(vaccination.date_administered)
    payload["nextDueDateDisplay"] = derived.format_display_date(vaccination.next_due_date)
    payload["isOverdue"] = derived.is_overdue(vaccination.next_due_date, today)
    payload["isUpcoming"] = derived.is_upcoming(vaccination.next_due_date, today)
    return payload


@jwt_required()
def list_vaccinations():
    session, error = current_health_session()
    if error:
        return error
    return jsonify({
        "success": True,
        "vaccinations": [serialize_vaccination(v) for v in session.vaccinations.list()],
    }), 200


@jwt_required()
def create_vaccination():
    session, error = current_health_session()
    if error:
        return error

    data = request.get_json(silent=True) or {}
    vaccination = session.add_vaccination(data)

    return jsonify({
        "success": True,
        "message": "Vaccination record added successfully!",
        "vaccination": serialize_vaccination(vaccination),
    }), 201


@jwt_required()
def delete_vaccination(vaccination_id):
    session, error = current_health_session()
    if error:
        return error
    removed = session.delete_vaccination(vaccination_id)
    return jsonify({
        "success": True,
        "message": "Vaccination record deleted successfully",
        "deleted": removed,
    }), 200
