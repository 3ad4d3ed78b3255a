# healthapp/helpers.py
from flask import current_app, jsonify
from flask_jwt_extended import get_jwt_identity


def api_response(success, message, data=None, status_code=200):
    return {
        "success": success,
        "message": message,
        "data": data
    }, status_code


def current_health_session():
    """
    Resolve the HealthSession named by the JWT identity.
    Returns (session, None) or (None, error_response).
    """
    session_id = get_jwt_identity()
    session = current_app.extensions["sessions"].get(session_id)
    if session is None:
        return None, (jsonify({"success": False, "message": "Session expired, please log in again"}), 401)
    return session, None
