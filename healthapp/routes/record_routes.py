# healthapp/routes/record_routes.py
from flask import Blueprint
from healthapp.controllers import record_controller

record_bp = Blueprint("records", __name__, url_prefix="/api/v1/records")

record_bp.route("", methods=["GET"])(record_controller.list_records)
record_bp.route("", methods=["POST"])(record_controller.upload_records)
record_bp.route("/history", methods=["GET"])(record_controller.record_history)
record_bp.route("/<record_id>", methods=["DELETE"])(record_controller.delete_record)
