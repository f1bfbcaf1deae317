# -*- coding: utf-8 -*-
# ============================================================================ #
# Saweria Discord Relay (SDR)                                                  #
# Relays Saweria donation notifications from Discord to an HTTP API            #
# Copyright (c) 2025 SDR contributors                                          #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""Application factory for the keep-alive Flask app."""

from __future__ import annotations

import os
from typing import Mapping, Optional

from flask import Flask

from .config import build_config
from .logging import configure_logging
from .routes import register_routes


def create_app(test_config: Optional[Mapping[str, object]] = None) -> Flask:
    """Create and configure the Flask application instance."""
    app = Flask("app")
    config = build_config(os.environ, test_config)
    app.config.update(config)
    app.json.ensure_ascii = bool(app.config["JSON_ENSURE_ASCII"])

    configure_logging(app)
    register_routes(app)

    return app
