# healthapp/__init__.py
from dotenv import load_dotenv

load_dotenv()

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from .config import Config
from .errors import HealthAppError
from .extensions import cors, jwt
from .services.file_ingestor import DataUrlFileIngestor
from .services.notification_service import LoggingSmsSender
from .services.reminder_monitor import ReminderMonitor
from .utils.session_store import SessionRegistry


def create_app(config_class=Config, file_ingestor=None, notification_sender=None):
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    jwt.init_app(app)
    cors.init_app(
        app,
        origins=app.config["CORS_ORIGINS"],
        supports_credentials=True,
        methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
    )

    # One registry per app; each login gets its own HealthSession
    registry = SessionRegistry(
        ttl_secs=app.config["SESSION_TTL_SECS"],
        max_files=app.config["MAX_FREE_FILES"],
    )
    app.extensions["sessions"] = registry
    app.extensions["file_ingestor"] = file_ingestor or DataUrlFileIngestor()
    sender = notification_sender or LoggingSmsSender()
    app.extensions["notification_sender"] = sender

    monitor = ReminderMonitor(registry, sender, app.config["REMINDER_CHECK_INTERVAL_SECS"])
    app.extensions["reminder_monitor"] = monitor
    if app.config.get("ENABLE_REMINDER_MONITOR"):
        monitor.start()

    @app.errorhandler(HealthAppError)
    def handle_app_error(e):
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(Exception)
    def handle_error(e):
        if isinstance(e, HTTPException):
            return jsonify(success=False, message=e.description), e.code
        app.logger.exception("Unhandled error: %s", e)
        return jsonify(success=False, message=str(e)), 500

    @jwt.expired_token_loader
    def expired_token_callback(jwt_header, jwt_payload):
        return jsonify({"success": False, "message": "Token expired"}), 401

    @jwt.invalid_token_loader
    def invalid_token_callback(err_msg):
        return jsonify({"success": False, "message": f"Invalid token: {err_msg}"}), 422

    @jwt.unauthorized_loader
    def missing_token_callback(err_msg):
        return jsonify({"success": False, "message": f"Missing token: {err_msg}"}), 401

    @app.get("/health")
    def health():
        return {"status": "OK"}, 200

    from .routes.auth_routes import auth_bp
    from .routes.reminder_routes import reminder_bp
    from .routes.vaccination_routes import vaccination_bp
    from .routes.appointment_routes import appointment_bp
    from .routes.record_routes import record_bp
    from .routes.dashboard_routes import dashboard_bp
    from .routes.profile_routes import profile_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(reminder_bp)
    app.register_blueprint(vaccination_bp)
    app.register_blueprint(appointment_bp)
    app.register_blueprint(record_bp)
    app.register_blueprint(dashboard_bp)
    app.register_blueprint(profile_bp)

    return app
