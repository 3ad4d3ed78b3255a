# healthapp/routes/dashboard_routes.py
from flask import Blueprint
from healthapp.controllers import dashboard_controller

dashboard_bp = Blueprint("dashboard", __name__, url_prefix="/api/v1/dashboard")

dashboard_bp.route("", methods=["GET"])(dashboard_controller.get_dashboard)
