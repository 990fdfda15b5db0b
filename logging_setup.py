import os
import logging
from logging.handlers import RotatingFileHandler


def configure_logging(app):
    """
    Dev/testing -> console
    Prod -> rotating file
    Unhandled exceptions reach these handlers through Flask's own app.log_exception.
    """

    # Prevent duplicate handlers when app is created multiple times
    app.logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )

    if app.debug or app.testing:
        handler = logging.StreamHandler()
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(formatter)

        app.logger.addHandler(handler)
        app.logger.setLevel(logging.DEBUG)

    else:
        logs_dir = os.environ.get(
            "LOG_DIR",
            os.path.join(app.root_path, "logs")
        )
        os.makedirs(logs_dir, exist_ok=True)
        log_path = os.path.join(logs_dir, "app.log")

        handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=10)
        handler.setLevel(logging.INFO)
        handler.setFormatter(formatter)

        app.logger.addHandler(handler)

        werkzeug_logger = logging.getLogger("werkzeug")
        werkzeug_logger.addHandler(handler)

        app.logger.setLevel(logging.INFO)
        werkzeug_logger.setLevel(logging.INFO)

    app.logger.info("Application startup complete.")
