# -*- coding: utf-8 -*-
# ============================================================================ #
# Saweria Discord Relay (SDR)                                                  #
# Relays Saweria donation notifications from Discord to an HTTP API            #
# Copyright (c) 2025 SDR contributors                                          #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""Bootstrap utilities for preparing the relay runtime.

Environment, configuration and logging setup live here so the entry points
stay small and the primitives can be unit-tested in isolation.
"""

from .runtime import (
    configure_environment,
    ensure_log_files,
    initialize_logging,
    load_main_configuration,
    resolve_timezone,
)

__all__ = [
    "configure_environment",
    "ensure_log_files",
    "initialize_logging",
    "load_main_configuration",
    "resolve_timezone",
]
