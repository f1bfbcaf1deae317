# -*- coding: utf-8 -*-
# ============================================================================ #
# Saweria Discord Relay (SDR)                                                  #
# Relays Saweria donation notifications from Discord to an HTTP API            #
# Copyright (c) 2025 SDR contributors                                          #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""Utilities for constructing and running the Discord bot runtime."""

from .runtime import BotRuntime, build_runtime  # noqa: F401
from .factory import create_bot  # noqa: F401
from .events import register_event_handlers  # noqa: F401
