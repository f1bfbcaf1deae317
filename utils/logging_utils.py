# -*- coding: utf-8 -*-
# ============================================================================ #
# Saweria Discord Relay (SDR)                                                  #
# Relays Saweria donation notifications from Discord to an HTTP API            #
# Copyright (c) 2025 SDR contributors                                          #
# Licensed under the MIT License                                               #
# ============================================================================ #
import logging
import sys
from datetime import datetime
from typing import Optional

import pytz

# Constants for logging
DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DEBUG_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s [%(filename)s:%(lineno)d]'
LOGGER_PREFIX = 'relay'

# Debug status and log timezone, set once the configuration is loaded
_debug_mode_enabled = False
_log_timezone = 'UTC'


def set_debug_mode(enabled: bool) -> None:
    """Turns the DEBUG output of all relay loggers on or off."""
    global _debug_mode_enabled
    _debug_mode_enabled = bool(enabled)


def is_debug_mode_enabled() -> bool:
    """
    Checks if debug mode is enabled.

    Returns:
        bool: True if debug mode is enabled, otherwise False
    """
    return _debug_mode_enabled


def set_log_timezone(timezone_name: str) -> None:
    """Sets the timezone used by :class:`TimezoneFormatter` timestamps."""
    global _log_timezone
    _log_timezone = timezone_name


# A filter that only allows DEBUG logs when debug mode is enabled
class DebugModeFilter(logging.Filter):
    """
    Filter that only allows DEBUG messages when debug mode is enabled.
    INFO and higher levels are always allowed.
    """
    def filter(self, record):
        if record.levelno < logging.INFO:
            return is_debug_mode_enabled()
        return True


# A custom formatter class that uses the configured timezone
class TimezoneFormatter(logging.Formatter):
    """
    A custom formatter that uses the configured timezone for timestamps in logs.
    """
    def __init__(self, fmt=None, datefmt=None, tz=None):
        super().__init__(fmt, datefmt)
        self.tz = tz

    def formatTime(self, record, datefmt=None):
        """
        Overrides the formatTime method to use the configured timezone.
        """
        if datefmt is None:
            datefmt = self.datefmt or '%Y-%m-%d %H:%M:%S'

        try:
            tz = pytz.timezone(self.tz or _log_timezone)
        except pytz.exceptions.UnknownTimeZoneError:
            # Fall back to standard formatting on unknown zones
            return super().formatTime(record, datefmt)

        dt = datetime.fromtimestamp(record.created, tz)
        return dt.strftime(datefmt) + f" {dt.tzname()}"


def setup_logger(name: str, level=logging.INFO, log_to_console=True, custom_formatter=None) -> logging.Logger:
    """
    Creates a logger with the specified name and logging level.

    Args:
        name: Logger name
        level: Logging level (default: INFO)
        log_to_console: Whether to output logs to console
        custom_formatter: Optional custom formatter for the logs

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid duplicate handlers in case of re-initialization
    if logger.handlers:
        return logger

    if custom_formatter is None:
        if level <= logging.DEBUG:
            formatter = TimezoneFormatter(DEBUG_LOG_FORMAT)
        else:
            formatter = TimezoneFormatter(DEFAULT_LOG_FORMAT)
    else:
        formatter = custom_formatter

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        console_handler.addFilter(DebugModeFilter())
        logger.addHandler(console_handler)

    return logger


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Central helper for creating loggers with consistent configuration.

    DEBUG records are always handed to the handlers; :class:`DebugModeFilter`
    decides whether they are printed, so debug mode can change at runtime.

    Args:
        name: Logger name (e.g. 'relay.module_name')
        level: Optional log level override

    Returns:
        Configured logger
    """
    if level is None:
        level = logging.DEBUG

    return setup_logger(name, level=level)


def get_module_logger(module_name: str) -> logging.Logger:
    """Creates a logger for a module with the relay. prefix"""
    return get_logger(f'{LOGGER_PREFIX}.{module_name}')
