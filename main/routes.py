from importlib import import_module
import logging

logger = logging.getLogger(__name__)

MODULES = ["users", "smes", "products", "categories", "search", "media", "maps", "health"]


def register_blueprints(app, api):
    """Register the blueprint of every app module with the API"""
    for module in MODULES:
        mod = import_module(f"app.{module}.routes")
        # Register with Flask-Smorest API instead of directly with app
        api.register_blueprint(mod.bp)
        logger.debug(f"Registered blueprint for {module}")


def register_commands(app):
    from app.smes.management.commands.seed_directory import seed_directory

    app.cli.add_command(seed_directory)


def create_root_routes(app):
    @app.route("/status")
    def status():
        return {"status": "running", "environment": app.config["ENV"]}
