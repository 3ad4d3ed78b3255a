# healthapp/routes/profile_routes.py
from flask import Blueprint
from healthapp.controllers import profile_controller

profile_bp = Blueprint("profile", __name__, url_prefix="/api/v1/profile")

profile_bp.route("", methods=["GET"])(profile_controller.get_profile)
profile_bp.route("", methods=["PUT"])(profile_controller.update_profile)
