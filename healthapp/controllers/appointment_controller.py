from flask import jsonify, request
from flask_jwt_extended import jwt_required

from healthapp.core import derived
from healthapp.helpers import current_health_session


def serialize_appointment(appointment):
    payload = appointment.to_dict()
    payload["dateDisplay"] = derived.format_display_date(appointment.date, "full")
    payload["timeDisplay"] = derived.format_display_time(appointment.time)
    return payload


@jwt_required()
def list_appointments():
    session, error = current_health_session()
    if error:
        return error
    return jsonify({
        "success": True,
        "appointments": [serialize_appointment(a) for a in session.appointments.list()],
    }), 200


@jwt_required()
def create_appointment():
    session, error = current_health_session()
    if error:
        return error

    data = request.get_json(silent=True) or {}
    appointment = session.add_appointment(data)

    return jsonify({
        "success": True,
        "message": "Appointment scheduled successfully!",
        "appointment": serialize_appointment(appointment),
    }), 201


@jwt_required()
def delete_appointment(appointment_id):
    session, error = current_health_session()
    if error:
        return error
    removed = session.delete_appointment(appointment_id)
    return jsonify({"success": True, "message": "Appointment deleted successfully", "deleted": removed}), 200
