# healthapp/routes/reminder_routes.py
from flask import Blueprint
from healthapp.controllers import reminder_controller

reminder_bp = Blueprint("reminders", __name__, url_prefix="/api/v1/reminders")

reminder_bp.route("", methods=["GET"])(reminder_controller.list_reminders)
reminder_bp.route("", methods=["POST"])(reminder_controller.create_reminder)
reminder_bp.route("/<reminder_id>", methods=["DELETE"])(reminder_controller.delete_reminder)
reminder_bp.route("/<reminder_id>/toggle", methods=["PATCH"])(reminder_controller.toggle_reminder)
