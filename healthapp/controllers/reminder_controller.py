from flask import current_app, jsonify, request
from flask_jwt_extended import jwt_required

from healthapp.core import derived
from healthapp.helpers import current_health_session


def serialize_reminder(reminder):
    payload = reminder.to_dict()
    payload["timeDisplay"] = derived.format_display_time(reminder.time)
    payload["durationText"] = derived.duration_text(
        reminder.duration_type, reminder.start_date, reminder.end_date
    )
    return payload


@jwt_required()
def list_reminders():
    session, error = current_health_session()
    if error:
        return error
    return jsonify({
        "success": True,
        "reminders": [serialize_reminder(r) for r in session.reminders.list()],
    }), 200


@jwt_required()
def create_reminder():
    session, error = current_health_session()
    if error:
        return error

    data = request.get_json(silent=True) or {}
    reminder = session.add_reminder(data)

    if reminder.duration_type == derived.EVERYDAY:
        duration = "everyday"
    elif reminder.duration_type == derived.WEEK:
        duration = "for one week"
    else:
        duration = f"from {reminder.start_date} to {reminder.end_date}"

    return jsonify({
        "success": True,
        "message": f"You'll receive an SMS at {reminder.time} {duration} for {reminder.medicine_name}",
        "reminder": serialize_reminder(reminder),
    }), 201


@jwt_required()
def delete_reminder(reminder_id):
    session, error = current_health_session()
    if error:
        return error
    removed = session.delete_reminder(reminder_id)
    current_app.logger.info(f"Reminder delete id={reminder_id} removed={removed}")
    return jsonify({"success": True, "message": "Reminder deleted", "deleted": removed}), 200


@jwt_required()
def toggle_reminder(reminder_id):
    session, error = current_health_session()
    if error:
        return error
    reminder = session.toggle_reminder(reminder_id)
    if reminder is None:
        return jsonify({"success": False, "message": "Reminder not found"}), 404
    return jsonify({"success": True, "reminder": serialize_reminder(reminder)}), 200
