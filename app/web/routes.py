# -*- coding: utf-8 -*-
# ============================================================================ #
# Saweria Discord Relay (SDR)                                                  #
# Relays Saweria donation notifications from Discord to an HTTP API            #
# Copyright (c) 2025 SDR contributors                                          #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""Keep-alive routes polled by hosting platforms and uptime monitors."""

from __future__ import annotations

from datetime import datetime, timezone

from flask import Flask, jsonify

from app.utils.shared_data import get_bot_tag, get_uptime_seconds


def register_routes(app: Flask) -> None:
    """Attach the status and ping routes."""

    @app.route("/")
    def status():
        return jsonify(
            {
                "status": "online",
                "bot": get_bot_tag() or "Not ready",
                "uptime": get_uptime_seconds(),
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }
        )

    @app.route("/ping")
    def ping():
        return "pong", 200, {"Content-Type": "text/plain; charset=utf-8"}
