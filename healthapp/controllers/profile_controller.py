from flask import current_app, request
from flask_jwt_extended import jwt_required

from healthapp.helpers import api_response, current_health_session


@jwt_required()
def get_profile():
    session, error = current_health_session()
    if error:
        return error
    return api_response(True, "Profile loaded", session.profile.to_dict())


@jwt_required()
def update_profile():
    """Unsent fields keep their value; an unknown blood group is a 422 on ``bloodGroup``."""
    session, error = current_health_session()
    if error:
        return error

    data = request.get_json(silent=True) or {}
    profile = session.update_profile(data)
    current_app.logger.info(f"Profile saved for session {session.id}")
    return api_response(True, "Profile updated successfully", profile.to_dict())
