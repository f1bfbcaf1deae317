# -*- coding: utf-8 -*-
# ============================================================================ #
# Saweria Discord Relay (SDR)                                                  #
# Relays Saweria donation notifications from Discord to an HTTP API            #
# Copyright (c) 2025 SDR contributors                                          #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""Configuration helpers for the keep-alive Flask application."""

from __future__ import annotations

from typing import Mapping, MutableMapping, Optional

DEFAULTS = {
    "LOG_LEVEL": "INFO",
    "JSON_ENSURE_ASCII": False,
}


def build_config(env: Mapping[str, str], overrides: Optional[Mapping[str, object]] = None) -> MutableMapping[str, object]:
    """Construct the Flask configuration dictionary."""
    config: MutableMapping[str, object] = dict(DEFAULTS)
    config.update(LOG_LEVEL=env.get("LOG_LEVEL", DEFAULTS["LOG_LEVEL"]))

    if overrides:
        config.update(overrides)

    return config
