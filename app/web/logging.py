# -*- coding: utf-8 -*-
# ============================================================================ #
# Saweria Discord Relay (SDR)                                                  #
# Relays Saweria donation notifications from Discord to an HTTP API            #
# Copyright (c) 2025 SDR contributors                                          #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""Logging configuration utilities for the keep-alive web application."""

from __future__ import annotations

import logging


class PingLogFilter(logging.Filter):
    """Filter the access log lines of uptime monitors polling /ping."""

    def __init__(self, debug_mode: bool) -> None:
        super().__init__()
        self._debug_mode = debug_mode

    def filter(self, record: logging.LogRecord) -> bool:
        if self._debug_mode:
            return True

        if "GET /ping" in record.getMessage() and record.levelno <= logging.INFO:
            return False
        return True


def configure_logging(app) -> PingLogFilter:
    """Configure the Flask logger and install the ping noise filter."""
    log_level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    app.logger.setLevel(log_level)

    if not app.logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(log_level)
        formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s [in %(pathname)s:%(lineno)d]")
        handler.setFormatter(formatter)
        app.logger.addHandler(handler)

    filter_instance = PingLogFilter(debug_mode=log_level == logging.DEBUG)
    # Only the werkzeug dev server emits per-request lines; waitress logs none
    logging.getLogger("werkzeug").addFilter(filter_instance)

    return filter_instance
