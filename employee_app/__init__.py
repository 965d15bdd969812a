import logging

from flask import Flask

from employee_app.config import Config
from employee_app.extensions import db


def configure_logging(app):
    level = app.config.get("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    logging.getLogger("employee_app").setLevel(level)


def create_app(config_object=None):
    app = Flask(__name__)
    app.config.from_object(config_object or Config)

    # Keep DTO key order as built
    app.json.sort_keys = False

    configure_logging(app)
    db.init_app(app)

    # Registers the mappers on db.metadata
    from employee_app import models  # noqa

    from employee_app.utils.sql_logging import init_sql_logging
    with app.app_context():
        init_sql_logging(app, db.engine)
        app.logger.info(
            "Database: %s", db.engine.url.render_as_string(hide_password=True)
        )

    from employee_app.routes.query_routes import query_bp
    app.register_blueprint(query_bp, url_prefix="/Test")

    from employee_app.commands import register_commands
    register_commands(app)

    return app
