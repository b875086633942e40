"""Application factory wiring the datastore, blueprints and handlers."""

from __future__ import annotations

from flask import Flask

from chirpy.core.config import BaseConfig, get_config, validate_config
from chirpy.core.logger import configure_logging, init_app as init_logging


def create_app(config: type[BaseConfig] | object | None = None) -> Flask:
    """Build and configure the Flask application.

    Parameters
    ----------
    config:
        Config class or object; defaults to the class selected by ``APP_ENV``.

    Raises
    ------
    RuntimeError
        On unsafe production settings.
    StorageError
        When the datastore file exists but cannot be loaded.
    """

    app = Flask(__name__)
    app.config.from_object(get_config() if config is None else config)
    validate_config(app.config)

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    from chirpy.core import extensions

    extensions.init_app(app)

    init_logging(app)

    from chirpy.core import cors

    cors.init_app(app)

    from chirpy.api import init_app as init_api

    init_api(app)

    from chirpy.core import errors

    errors.init_app(app)

    from chirpy import cli as app_cli

    app_cli.init_app(app)

    return app
