# -*- coding: utf-8 -*-
# ============================================================================ #
# Saweria Discord Relay (SDR)                                                  #
# Relays Saweria donation notifications from Discord to an HTTP API            #
# Copyright (c) 2025 SDR contributors                                          #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""Event wiring for the relay bot."""

from __future__ import annotations

import traceback
from typing import Any

import discord

from app.utils.shared_data import set_bot_instance

from .runtime import BotRuntime


def register_event_handlers(bot: discord.Client, runtime: BotRuntime) -> None:
    """Attach the ready, message and error handlers to the bot instance."""

    logger = runtime.logger
    config = runtime.config
    relay_service = runtime.relay_service

    @bot.event
    async def on_ready():
        set_bot_instance(bot)
        logger.info("-" * 50)
        logger.info("✅ Discord Bot Online!")
        user = getattr(bot, "user", None)
        if user is not None:
            logger.info("🤖 Logged in as %s (ID: %s)", user, user.id)
        else:
            logger.info("🤖 Logged in (user unavailable during startup)")
        logger.info("📡 Listening to channel: %s", config.channel_id)
        logger.info("🔗 Forwarding to: %s", config.api_url)
        logger.info("discord library version: %s", discord.__version__)
        logger.info("-" * 50)

    @bot.event
    async def on_message(message: discord.Message):
        user = getattr(bot, "user", None)
        await relay_service.handle_message(message, self_user_id=getattr(user, "id", None))

    @bot.event
    async def on_error(event: str, *args: Any, **kwargs: Any) -> None:
        logger.error("❌ Error in event %s: %s", event, traceback.format_exc())
