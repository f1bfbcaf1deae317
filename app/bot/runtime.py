# -*- coding: utf-8 -*-
# ============================================================================ #
# Saweria Discord Relay (SDR)                                                  #
# Relays Saweria donation notifications from Discord to an HTTP API            #
# Copyright (c) 2025 SDR contributors                                          #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""Runtime state helpers for the relay bot."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from app.bootstrap import ensure_log_files, initialize_logging, resolve_timezone
from services.config.config_service import RelayConfig
from services.donation.relay import DonationRelay
from services.donation.relay_service import DonationRelayService
from utils.logging_utils import LOGGER_PREFIX


@dataclass(frozen=True)
class BotRuntime:
    """Aggregated state required by the bot entrypoint and event handlers."""

    config: RelayConfig
    logger: logging.Logger
    logs_dir: Path
    relay_service: DonationRelayService


def build_runtime(config: RelayConfig, *, logs_dir: Path = None) -> BotRuntime:
    """Construct the runtime container for the bot."""

    level = getattr(logging, config.log_level, logging.INFO)
    logger = initialize_logging(f"{LOGGER_PREFIX}.bot", level=level)
    # Unknown zones switch the log formatter to UTC
    resolve_timezone(config, logger=logger)

    # Every relay.* logger propagates into these file handlers
    package_logger = logging.getLogger(LOGGER_PREFIX)
    package_logger.setLevel(level)
    logs_dir = logs_dir or Path(__file__).resolve().parents[2] / "logs"
    ensure_log_files(package_logger, logs_dir)

    relay = DonationRelay(config.api_url, source_header=config.source_header)
    relay_service = DonationRelayService(relay, channel_id=config.channel_id)

    logger.info("Effective configuration: %s", config.to_log_dict())

    return BotRuntime(
        config=config,
        logger=logger,
        logs_dir=logs_dir,
        relay_service=relay_service,
    )
