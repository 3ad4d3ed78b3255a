# healthapp/routes/vaccination_routes.py
from flask import Blueprint
from healthapp.controllers import vaccination_controller

vaccination_bp = Blueprint("vaccinations", __name__, url_prefix="/api/v1/vaccinations")

vaccination_bp.route("", methods=["GET"])(vaccination_controller.list_vaccinations)
vaccination_bp.route("", methods=["POST"])(vaccination_controller.create_vaccination)
vaccination_bp.route("/<vaccination_id>", methods=["DELETE"])(vaccination_controller.delete_vaccination)
