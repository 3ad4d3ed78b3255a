from flask_jwt_extended import jwt_required

from healthapp.controllers.record_controller import serialize_file
from healthapp.controllers.reminder_controller import serialize_reminder
from healthapp.controllers.vaccination_controller import serialize_vaccination
from healthapp.helpers import api_response, current_health_session


@jwt_required()
def get_dashboard():
    session, error = current_health_session()
    if error:
        return error

    summary = session.dashboard()
    data = {
        "recentVaccinations": [serialize_vaccination(v) for v in summary["recentVaccinations"]],
        "recentUploads": [serialize_file(f) for f in summary["recentUploads"]],
        "upcomingVaccinations": [serialize_vaccination(v) for v in summary["upcomingVaccinations"]],
        "overdueVaccinations": [serialize_vaccination(v) for v in summary["overdueVaccinations"]],
        "activeReminders": [serialize_reminder(r) for r in summary["activeReminders"]],
        "counts": summary["counts"],
    }
    return api_response(True, "Dashboard loaded", data)
