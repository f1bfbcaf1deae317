# -*- coding: utf-8 -*-
# ============================================================================ #
# Saweria Discord Relay (SDR)                                                  #
# Relays Saweria donation notifications from Discord to an HTTP API            #
# Copyright (c) 2025 SDR contributors                                          #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""Decides which Discord messages are Saweria donation notifications."""

from __future__ import annotations

from typing import Any, Optional


def is_donation_candidate(message: Any, *, channel_id: int, self_user_id: Optional[int]) -> bool:
    """Return True for webhook messages posted in the watched channel.

    Messages written by this bot are always ignored.
    """

    author = getattr(message, "author", None)
    if author is not None and getattr(author, "bot", False) and author.id == self_user_id:
        return False

    channel = getattr(message, "channel", None)
    if channel is None or channel.id != channel_id:
        return False

    return getattr(message, "webhook_id", None) is not None
