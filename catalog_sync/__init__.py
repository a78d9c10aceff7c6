"""Mirror the active Stripe product and price catalog into a local database."""

from flask import Flask

__version__ = "0.1.0"


def create_app(config_object=None, overrides=None):
    """Build the Flask application.

    Args:
        config_object: Object holding the configuration, defaults to a fresh
            ``Config`` read from the environment
        overrides: Optional mapping applied on top of ``config_object``
    """
    from .cli import register_commands
    from .config import Config
    from .extensions import configure_logging, init_extensions

    app = Flask(__name__)
    app.config.from_object(config_object if config_object is not None else Config())
    if overrides:
        app.config.update(overrides)

    configure_logging(app)
    init_extensions(app)
    register_commands(app)

    # Make sure the models are registered on the metadata
    from . import models  # noqa: F401

    return app
