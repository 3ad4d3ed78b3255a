from flask import current_app, jsonify, request
from flask_jwt_extended import create_access_token, get_jwt_identity, jwt_required

from healthapp.core.validator import LOGIN, SIGNUP, validate_or_raise


def _start_session(message, status_code, **details):
    """There is no account store: any well-formed form opens a fresh session."""
    session = current_app.extensions["sessions"].start()
    profile = session.set_profile(**details)
    access_token = create_access_token(identity=session.id)
    return jsonify({
        "success": True,
        "message": message,
        "user": profile.to_dict(),
        "access_token": access_token,
    }), status_code


def signup():
    data = request.get_json(silent=True) or {}
    values = validate_or_raise(SIGNUP, data)
    email = values["email"].lower()
    current_app.logger.info(f"Signup for {email}")
    return _start_session(
        "Account created successfully", 201,
        name=values["name"], email=email, phone=values["phone"],
    )


def login():
    data = request.get_json(silent=True) or {}
    values = validate_or_raise(LOGIN, data)
    email = values["email"].lower()
    current_app.logger.info(f"Login for {email}")
    return _start_session("Login successful", 200, email=email)


@jwt_required()
def logout():
    session_id = get_jwt_identity()
    current_app.extensions["sessions"].end(session_id)
    return jsonify({"success": True, "message": "Logged out"}), 200
