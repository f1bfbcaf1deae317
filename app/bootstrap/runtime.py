# -*- coding: utf-8 -*-
# ============================================================================ #
# Saweria Discord Relay (SDR)                                                  #
# Relays Saweria donation notifications from Discord to an HTTP API            #
# Copyright (c) 2025 SDR contributors                                          #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""Runtime bootstrap helpers for the relay bot."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import MutableMapping, Optional

import pytz

from services.config.config_service import RelayConfig, get_config_service
from utils.logging_utils import set_debug_mode, set_log_timezone, setup_logger

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_environment(env: Optional[MutableMapping[str, str]] = None) -> str:
    """Ensure required environment defaults are present.

    Parameters
    ----------
    env:
        Optional mapping to mutate.  Defaults to :data:`os.environ` when not
        provided which keeps the function easy to use in production while still
        being testable.

    Returns
    -------
    str
        The effective value of ``PYTHONIOENCODING`` after applying the default,
        so emoji log lines survive on consoles with a legacy code page.
    """

    target_env: MutableMapping[str, str]
    if env is None:
        target_env = os.environ
    else:
        target_env = env

    target_env.setdefault("PYTHONIOENCODING", "utf-8")
    return target_env["PYTHONIOENCODING"]


def load_main_configuration() -> RelayConfig:
    """Load the configuration and apply its logging related settings."""

    config = get_config_service().get_config(force_reload=True)
    set_debug_mode(config.debug_mode)
    set_log_timezone(config.timezone)
    return config


def initialize_logging(name: str, level: int = logging.INFO) -> logging.Logger:
    """Create the primary logger for the bot."""

    logger = setup_logger(name, level=level)
    return logger


def resolve_timezone(
    config: Optional[RelayConfig],
    *,
    default: str = "Asia/Jakarta",
    logger: Optional[logging.Logger] = None,
) -> pytz.BaseTzInfo:
    """Resolve the timezone defined in the configuration.

    Falls back to UTC when the configured timezone is unknown.
    """

    active_logger = logger or logging.getLogger("relay.bootstrap")
    timezone_str = default
    if config is not None:
        timezone_str = config.timezone or default

    try:
        tz = pytz.timezone(timezone_str)
        active_logger.info("Using timezone '%s'", timezone_str)
        return tz
    except pytz.exceptions.UnknownTimeZoneError:
        active_logger.warning(
            "Unknown timezone '%s'. Falling back to UTC for this session.", timezone_str
        )

    set_log_timezone("UTC")
    return pytz.timezone("UTC")


def _has_file_handler(logger: logging.Logger, path: Path) -> bool:
    return any(
        isinstance(handler, logging.FileHandler)
        and getattr(handler, "baseFilename", "") == str(path)
        for handler in logger.handlers
    )


def ensure_log_files(logger: logging.Logger, logs_dir: Path) -> None:
    """Attach file handlers to the provided logger if missing."""

    logs_dir.mkdir(parents=True, exist_ok=True)

    relay_log_path = logs_dir / "relay.log"
    error_log_path = logs_dir / "relay_error.log"

    if not _has_file_handler(logger, relay_log_path):
        info_handler = logging.FileHandler(relay_log_path, encoding="utf-8")
        info_handler.setLevel(logging.INFO)
        info_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(info_handler)

    if not _has_file_handler(logger, error_log_path):
        error_handler = logging.FileHandler(error_log_path, encoding="utf-8")
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(error_handler)

    logger.info("File loggers initialized: relay.log (INFO+), relay_error.log (ERROR+)")
