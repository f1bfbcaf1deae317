# -*- coding: utf-8 -*-
# ============================================================================ #
# Saweria Discord Relay (SDR)                                                  #
# Relays Saweria donation notifications from Discord to an HTTP API            #
# Copyright (c) 2025 SDR contributors                                          #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""
Shared data between the Discord bot thread and the keep-alive web server.
"""

import time
from threading import Lock
from typing import Any, Optional

# Shared data with lock for thread safety
_shared_data_lock = Lock()
_bot_instance = None
_process_started_at = time.monotonic()


def set_bot_instance(bot: Any) -> None:
    """Stores the running bot so the web server can report its status."""
    global _bot_instance
    with _shared_data_lock:
        _bot_instance = bot


def get_bot_instance() -> Optional[Any]:
    """Returns the running bot instance, or None before it was registered."""
    with _shared_data_lock:
        return _bot_instance


def get_bot_tag() -> Optional[str]:
    """Returns the bot user's tag once the bot is logged in."""
    bot = get_bot_instance()
    user = getattr(bot, "user", None) if bot is not None else None
    return str(user) if user is not None else None


def get_uptime_seconds() -> float:
    """Seconds elapsed since this process imported the shared data module."""
    return time.monotonic() - _process_started_at
