# python imports
import logging
import time

# package imports
from flask import Flask
from flask_login import LoginManager
from flask_migrate import Migrate
from flask_cors import CORS
from flask_smorest import Api

# app imports
from main.config import settings
from main.logger import setup_logging
from main.errors import handle_error
from main.middleware import RequestLoggingMiddleware
from main.routes import register_blueprints, register_commands, create_root_routes

logger = logging.getLogger(__name__)

ENGINE_OPTIONS = {
    "pool_pre_ping": True,
    "pool_size": 10,
    "max_overflow": 20,
    "pool_recycle": 3600,
}


class DirectoryApi(Api):
    """flask-smorest Api whose HTTP errors use the app-wide ``{error}`` body"""

    def handle_http_exception(self, error):
        return handle_error(error)


def configure_app(app, config_overrides=None):
    """Configure Flask application"""
    app.config.from_object(settings)
    if config_overrides:
        app.config.update(config_overrides)

    setup_logging(app.config["LOG_DIR"], app.config["LOG_LEVEL"])

    # Pool sizing only applies to server databases
    if not app.config["SQLALCHEMY_DATABASE_URI"].startswith("sqlite"):
        app.config.setdefault("SQLALCHEMY_ENGINE_OPTIONS", ENGINE_OPTIONS)

    # Setup extensions
    login_manager = LoginManager(app)

    from external.database import db

    db.init_app(app)
    Migrate(app, db)
    CORS(app, supports_credentials=True, origins=app.config["CORS_ORIGINS"])

    # Initialize Flask-Smorest API
    api = DirectoryApi(app)

    # Register error handler
    app.register_error_handler(Exception, handle_error)

    return login_manager, api


def create_app(config_overrides=None):
    """Application factory"""
    app = Flask(__name__)
    app.wsgi_app = RequestLoggingMiddleware(app.wsgi_app)

    # Track application start time for health checks
    app.start_time = time.time()

    login_manager, api = configure_app(app, config_overrides)

    with app.app_context():
        from app.libs.errors import AuthError
        from app.users.services import UserService

        @login_manager.user_loader
        def load_user(user_id):
            return UserService.get_user(user_id)

        @login_manager.unauthorized_handler
        def unauthorized():
            raise AuthError()

        # Register routes
        register_blueprints(app, api)
        register_commands(app)
        create_root_routes(app)

    logger.info("Application initialized")
    return app
