# healthapp/routes/auth_routes.py
from flask import Blueprint
from healthapp.controllers import auth_controller

auth_bp = Blueprint("auth", __name__, url_prefix="/api/v1/auth")

auth_bp.route("/signup", methods=["POST"])(auth_controller.signup)
auth_bp.route("/login", methods=["POST"])(auth_controller.login)
auth_bp.route("/logout", methods=["POST"])(auth_controller.logout)
