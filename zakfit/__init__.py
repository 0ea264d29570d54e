import logging

from flask import Flask
from flask_migrate import Migrate

from zakfit.extensions import db, cors
from zakfit.routes import register_routes
from zakfit.utils.errors import register_error_handlers

migrate = Migrate()


def create_app(config_overrides=None):
    app = Flask(__name__)
    app.config.from_object("config.Config")
    if config_overrides:
        app.config.update(config_overrides)

    if not app.config.get("SECRET_KEY"):
        raise RuntimeError("SECRET_KEY is not set in environment variables")

    logging.basicConfig(level=app.config.get("LOG_LEVEL", "INFO"))
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # Initialize database
    db.init_app(app)

    # Initialize Flask-Migrate
    migrate.init_app(app, db)

    # CORS Configuration
    cors.init_app(app,
                  origins=app.config["CORS_ORIGINS"],
                  allow_headers=["Content-Type", "Authorization"],
                  methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
                  expose_headers=["Content-Type", "Authorization"])

    register_error_handlers(app)
    register_routes(app)

    return app
