# healthapp/routes/appointment_routes.py
from flask import Blueprint
from healthapp.controllers import appointment_controller

appointment_bp = Blueprint("appointments", __name__, url_prefix="/api/v1/appointments")

appointment_bp.route("", methods=["GET"])(appointment_controller.list_appointments)
appointment_bp.route("", methods=["POST"])(appointment_controller.create_appointment)
appointment_bp.route("/<appointment_id>", methods=["DELETE"])(appointment_controller.delete_appointment)
