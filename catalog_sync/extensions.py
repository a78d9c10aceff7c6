import logging
import sys

from flask_sqlalchemy import SQLAlchemy

# Instantiate extensions
db = SQLAlchemy()

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def init_extensions(app):
    """Initialize Flask extensions."""
    db.init_app(app)


def configure_logging(app):
    """Send application logs to stderr at the configured level."""
    level = logging.getLevelName(app.config.get("LOG_LEVEL", "INFO"))
    if not isinstance(level, int):
        level = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    if not any(getattr(h, "_catalog_sync", False) for h in root.handlers):
        handler._catalog_sync = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    root.setLevel(level)
    app.logger.setLevel(level)
