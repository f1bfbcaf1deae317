# -*- coding: utf-8 -*-
# ============================================================================ #
# Saweria Discord Relay (SDR)                                                  #
# Relays Saweria donation notifications from Discord to an HTTP API            #
# Copyright (c) 2025 SDR contributors                                          #
# Licensed under the MIT License                                               #
# ============================================================================ #

"""Entry point for the Saweria Discord Relay bot."""

from __future__ import annotations

import logging
import sys
from typing import Optional

import discord

from app.bootstrap import configure_environment, load_main_configuration
from app.bot import build_runtime, create_bot, register_event_handlers
from services.config.config_service import RelayConfig
from services.exceptions import BotConnectionError, ConfigServiceError, get_exception_info
from utils.logging_utils import get_module_logger

logger = get_module_logger("bot")


def load_configuration_or_exit() -> RelayConfig:
    """Load the configuration; configuration faults end the process with code 1."""

    configure_environment()
    try:
        return load_main_configuration()
    except ConfigServiceError as e:
        logger.error("❌ %s", e.message)
        logger.debug("Configuration error details: %s", get_exception_info(e))
        sys.exit(1)


def run_bot(config: RelayConfig) -> None:
    """Build the runtime and block until the Discord client stops."""

    runtime = build_runtime(config)
    bot = create_bot(runtime)
    register_event_handlers(bot, runtime)

    runtime.logger.info("Starting bot with token ending in: ...%s", config.bot_token[-4:])
    try:
        bot.run(config.bot_token)
    except discord.LoginFailure as e:
        raise BotConnectionError("Invalid Discord bot token provided", details={"reason": str(e)}) from e
    except discord.PrivilegedIntentsRequired as e:
        raise BotConnectionError(
            "The Message Content intent is not enabled in the Discord Developer Portal",
            details={"reason": str(e)},
        ) from e
    runtime.logger.info("Bot has stopped gracefully.")


def main(config: Optional[RelayConfig] = None) -> None:
    """Main entry point for the Discord bot."""

    if config is None:
        config = load_configuration_or_exit()

    try:
        run_bot(config)
    except BotConnectionError as e:
        logger.error("❌ Failed to login: %s", e.message)
        logger.debug("Login error details: %s", get_exception_info(e))
        sys.exit(1)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        logging.getLogger("relay.bot").info("Received keyboard interrupt - shutting down gracefully")
