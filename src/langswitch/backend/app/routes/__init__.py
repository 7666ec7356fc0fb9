"""Blueprint registrations for application routes."""

from flask import Flask

from .bundles import blueprint as bundles_blueprint
from .contact import blueprint as contact_blueprint
from .people import blueprint as people_blueprint
from .translations import blueprint as translations_blueprint


def register_routes(app: Flask) -> None:
    """Register all Flask blueprints with the provided application."""

    app.register_blueprint(bundles_blueprint)
    app.register_blueprint(translations_blueprint)
    app.register_blueprint(people_blueprint)
    app.register_blueprint(contact_blueprint)
