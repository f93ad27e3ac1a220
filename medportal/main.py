import logging
import os

from dotenv import load_dotenv
from flask import Flask
from flask_login import LoginManager

from .core.api_utils import CLINIC_EXTENSION, api_response, error_response
from .core.auth_decorators import load_identity_user
from .core.config import load_settings, log_app_config
from .core.exceptions import MedPortalError
from .core.logging_config import setup_logging
from .services.clinic_service import build_clinic_service

logger = logging.getLogger(__name__)


def create_app(config=None):
    """Build the Flask adapter around a fresh, process-lifetime clinic core.

    Args:
        config: Optional mapping applied over the environment settings
            (tests pass ``{"TESTING": True, "SEED_DATA": False}`` etc.)
    """
    # Only read .env when the environment has not been prepared already
    if not os.getenv("MEDPORTAL_ENV_LOADED"):
        load_dotenv()
        os.environ["MEDPORTAL_ENV_LOADED"] = "1"

    app = Flask(__name__)
    app.config.update(load_settings())
    if config:
        app.config.update(config)

    setup_logging(
        app,
        log_level=app.config["LOG_LEVEL"],
        log_to_file=app.config["LOG_TO_FILE"],
        use_json_format=app.config["LOG_JSON"],
    )
    log_app_config(app.config)

    app.extensions[CLINIC_EXTENSION] = build_clinic_service(
        demo_doctor_name=app.config["DEMO_DOCTOR_NAME"],
        seed_data=app.config["SEED_DATA"],
        timezone=app.config["APP_TIMEZONE"],
    )

    login_manager = LoginManager()
    login_manager.init_app(app)
    login_manager.user_loader(load_identity_user)

    @login_manager.unauthorized_handler
    def unauthorized():
        return api_response(
            False, "Authentication required", {"error": "unauthenticated"}, 401
        )

    @app.errorhandler(MedPortalError)
    def handle_domain_error(error):
        return error_response(error)

    from .controllers import (
        appointment_bp,
        auth_bp,
        dashboard_bp,
        prescription_bp,
        record_bp,
    )

    app.register_blueprint(auth_bp)
    app.register_blueprint(dashboard_bp)
    app.register_blueprint(appointment_bp)
    app.register_blueprint(prescription_bp)
    app.register_blueprint(record_bp)

    @app.route("/health")
    def health():
        return api_response(True, "ok")

    logger.info("MedPortal application created")
    return app


if __name__ == "__main__":
    create_app().run(debug=os.getenv("FLASK_ENV") == "development")
