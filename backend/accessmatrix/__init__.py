# backend/accessmatrix/__init__.py
from flask import Flask, g

from .config import Config
from .extensions import db, migrate


def create_app(test_config: dict | None = None) -> Flask:
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)

    # Import models so Alembic can discover metadata reliably
    from . import models  # noqa: F401

    # Register blueprints
    from .routes.permissions import permissions_bp

    app.register_blueprint(permissions_bp)

    @app.teardown_request
    def drop_permission_store(exc):
        # Permission stores live for one request only
        g.pop("permission_store", None)

    # Register CLI commands
    from .cli import register_commands
    register_commands(app)

    return app
