import logging

from flask import Flask
from flask_migrate import Migrate

from fitlog.extensions import db, cors
from fitlog.routes import register_routes
from fitlog.utils.errors import ServiceError
from fitlog.utils.http import error


def create_app(config_object="config.Config"):
    app = Flask(__name__)
    app.config.from_object(config_object)
    # Keep response keys in insertion order (meal buckets are ordered)
    app.json.sort_keys = False

    app.logger.setLevel(getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO))

    # Import models so their tables are registered on db.metadata
    from fitlog import models  # noqa: F401

    # Initialize database
    db.init_app(app)

    # Initialize Flask-Migrate
    Migrate(app, db)

    # CORS Configuration
    cors.init_app(app,
                  origins=app.config.get("CORS_ORIGINS", []),
                  supports_credentials=True,
                  allow_headers=["Content-Type", "Authorization"],
                  methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
                  expose_headers=["Content-Type", "Authorization"])

    register_routes(app)

    @app.errorhandler(ServiceError)
    def handle_service_error(exc: ServiceError):
        return error(exc.code, exc.message, exc.status)

    @app.errorhandler(404)
    def handle_not_found(exc):
        return error("NOT_FOUND", "Resource not found", 404)

    @app.errorhandler(405)
    def handle_method_not_allowed(exc):
        return error("METHOD_NOT_ALLOWED", "Method not allowed", 405)

    return app
