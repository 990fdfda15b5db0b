from cli import (
    cli_back_mark_inspect,
    cli_back_mark_settings,
    cli_seed_items,
)
from flask import Flask
from config import ProductionConfig
from models import db
from extensions import back_marks
from modules.ui import ui_bp
from modules.items import items_bp
from utils.error_handlers import register_error_handlers
from logging_setup import configure_logging


def create_app(config_class=ProductionConfig):
    app = Flask(__name__)
    app.config.from_object(config_class)

    configure_logging(app)

    db.init_app(app)
    back_marks.init_app(app)

    app.register_blueprint(ui_bp)
    app.register_blueprint(items_bp, url_prefix="/items")

    app.cli.add_command(cli_back_mark_inspect)
    app.cli.add_command(cli_back_mark_settings)
    app.cli.add_command(cli_seed_items)

    register_error_handlers(app)

    with app.app_context():
        db.create_all()

    return app
