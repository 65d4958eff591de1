from flask import Flask, jsonify, request
from flask_cors import CORS
from dotenv import load_dotenv
from werkzeug.exceptions import HTTPException
import os
from eventhub.extensions import db, jwt
from eventhub.exceptions import ApiError
from eventhub.utils.email import mail
from eventhub.utils.responses import error_response
from datetime import timedelta
import logging

# Load environment variables
load_dotenv()

DEFAULT_STATIC_FOLDER = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "public"
)


def _env_flag(name, default):
    return os.getenv(name, default).lower() in ["true", "1", "t", "yes"]


def create_app(test_config=None):
    app = Flask(
        __name__,
        static_folder=os.getenv("STATIC_FOLDER", DEFAULT_STATIC_FOLDER),
        static_url_path="/static",
    )

    # Set testing mode from environment variable
    app.config["TESTING"] = os.getenv("FLASK_ENV") in ["development", "testing"]

    # Configure logging
    logging.basicConfig(level=logging.INFO)
    app.logger.setLevel(logging.INFO)

    # Configure database; the default in-memory SQLite lives as long as the process
    app.config["SQLALCHEMY_DATABASE_URI"] = os.getenv("DATABASE_URL", "sqlite://")
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False

    # Configure JWT
    expires_hours = int(os.getenv("JWT_ACCESS_TOKEN_EXPIRES_HOURS", 24))
    app.config["JWT_SECRET_KEY"] = os.getenv(
        "JWT_SECRET_KEY", "change-me-event-hub-development-secret"
    )
    app.config["JWT_ACCESS_TOKEN_EXPIRES"] = (
        timedelta(hours=expires_hours) if expires_hours > 0 else False
    )
    app.config["JWT_TOKEN_LOCATION"] = ["headers"]
    app.config["JWT_HEADER_NAME"] = "Authorization"
    app.config["JWT_HEADER_TYPE"] = "Bearer"

    # Email configuration
    app.config["MAIL_SERVER"] = os.getenv("MAIL_SERVER")
    app.config["MAIL_PORT"] = int(os.getenv("MAIL_PORT", 587))
    app.config["MAIL_USE_TLS"] = _env_flag("MAIL_USE_TLS", "true")
    app.config["MAIL_USERNAME"] = os.getenv("MAIL_USERNAME")
    app.config["MAIL_PASSWORD"] = os.getenv("MAIL_PASSWORD")
    app.config["MAIL_DEFAULT_SENDER"] = os.getenv("MAIL_DEFAULT_SENDER")

    # Startup data
    app.config["SEED_DEFAULT_ADMIN"] = _env_flag("SEED_DEFAULT_ADMIN", "true")
    app.config["SEED_DEMO_EVENTS"] = _env_flag("SEED_DEMO_EVENTS", "true")
    app.config["DEFAULT_ADMIN_EMAIL"] = os.getenv("DEFAULT_ADMIN_EMAIL", "admin@local")
    app.config["DEFAULT_ADMIN_PASSWORD"] = os.getenv("DEFAULT_ADMIN_PASSWORD", "admin123")

    if test_config:
        app.config.update(test_config)

    # Initialize Flask extensions
    db.init_app(app)
    jwt.init_app(app)
    mail.init_app(app)

    # Register blueprints
    from eventhub.routes.auth_routes import auth_bp
    from eventhub.routes.event_routes import event_bp
    from eventhub.routes.registration_routes import registration_bp
    from eventhub.routes.announcement_routes import announcement_bp

    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(event_bp, url_prefix="/api")
    app.register_blueprint(registration_bp, url_prefix="/api")
    app.register_blueprint(announcement_bp, url_prefix="/api")

    # Set up CORS
    cors_origins = os.getenv("CORS_ORIGINS", "*").split(",")
    app.logger.info(f"Initializing CORS with origins: {cors_origins}")

    CORS(
        app,
        resources={
            r"/api/*": {"origins": cors_origins},
        },
        methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept"],
        expose_headers=["Content-Type", "Content-Disposition"],
    )

    register_error_handlers(app)

    # Serve the browser client
    @app.route("/")
    def index():
        return app.send_static_file("index.html")

    with app.app_context():
        from eventhub.seed import seed_database

        db.create_all()
        seed_database()

    return app


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(e):
        db.session.rollback()
        app.logger.info(f"{request.method} {request.path} -> {e.status_code} {e.error}")
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        if e.code == 404:
            return error_response(
                "Route not found", 404, message=f"Cannot {request.method} {request.path}"
            )
        return error_response(e.name, e.code, message=e.description)

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        db.session.rollback()
        app.logger.exception(f"Unhandled error on {request.method} {request.path}: {str(e)}")
        return error_response("Internal server error", 500)
