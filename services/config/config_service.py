# -*- coding: utf-8 -*-
# ============================================================================ #
# Saweria Discord Relay (SDR)                                                  #
# Relays Saweria donation notifications from Discord to an HTTP API            #
# Copyright (c) 2025 SDR contributors                                          #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""
Configuration Service - environment driven settings for the relay

All settings come from environment variables so the bot can run on simple
hosting platforms (Replit, Railway, containers) without config files.
"""

import os
import logging
from dataclasses import dataclass
from threading import Lock
from typing import Any, Dict, Mapping, Optional

from services.exceptions import InvalidConfigFormatError, MissingConfigError

logger = logging.getLogger('relay.config_service')

DEFAULT_API_URL = 'https://saweriajuned2.vercel.app/api/webhook'
DEFAULT_PORT = 3000
DEFAULT_TIMEZONE = 'Asia/Jakarta'
DEFAULT_LOG_LEVEL = 'INFO'

_TRUE_VALUES = {'1', 'true', 'yes', 'on'}


@dataclass(frozen=True)
class RelayConfig:
    """Effective runtime configuration."""
    bot_token: str
    channel_id: int
    api_url: str = DEFAULT_API_URL
    port: int = DEFAULT_PORT
    timezone: str = DEFAULT_TIMEZONE
    log_level: str = DEFAULT_LOG_LEVEL
    debug_mode: bool = False
    source_header: str = 'discord-bot'

    def to_log_dict(self) -> Dict[str, Any]:
        """Configuration view that is safe to log (token masked)."""
        return {
            'bot_token': f"...{self.bot_token[-4:]}" if self.bot_token else None,
            'channel_id': self.channel_id,
            'api_url': self.api_url,
            'port': self.port,
            'timezone': self.timezone,
            'log_level': self.log_level,
            'debug_mode': self.debug_mode,
        }


def _require(env: Mapping[str, str], key: str) -> str:
    value = (env.get(key) or '').strip()
    if not value:
        raise MissingConfigError(f"{key} is required!", details={'key': key})
    return value


def _parse_channel_id(raw: str) -> int:
    if not raw.isdigit():
        raise InvalidConfigFormatError(
            "DISCORD_CHANNEL_ID must be a numeric channel ID",
            details={'key': 'DISCORD_CHANNEL_ID', 'value': raw},
        )
    return int(raw)


def _parse_port(raw: Optional[str]) -> int:
    if raw is None or not raw.strip():
        return DEFAULT_PORT
    try:
        port = int(raw)
    except ValueError:
        raise InvalidConfigFormatError("PORT must be an integer", details={'key': 'PORT', 'value': raw})
    if not 0 < port < 65536:
        raise InvalidConfigFormatError("PORT must be between 1 and 65535", details={'key': 'PORT', 'value': raw})
    return port


def _parse_api_url(raw: Optional[str]) -> str:
    url = (raw or '').strip() or DEFAULT_API_URL
    if not url.startswith(('http://', 'https://')):
        raise InvalidConfigFormatError(
            "VERCEL_API_URL must be an http(s) URL",
            details={'key': 'VERCEL_API_URL', 'value': url},
        )
    return url


def load_config(env: Optional[Mapping[str, str]] = None) -> RelayConfig:
    """Build a :class:`RelayConfig` from environment variables.

    Raises:
        MissingConfigError: DISCORD_BOT_TOKEN or DISCORD_CHANNEL_ID is unset.
        InvalidConfigFormatError: A value is present but malformed.
    """
    source = os.environ if env is None else env

    return RelayConfig(
        bot_token=_require(source, 'DISCORD_BOT_TOKEN'),
        channel_id=_parse_channel_id(_require(source, 'DISCORD_CHANNEL_ID')),
        api_url=_parse_api_url(source.get('VERCEL_API_URL')),
        port=_parse_port(source.get('PORT')),
        timezone=(source.get('TZ') or DEFAULT_TIMEZONE).strip(),
        log_level=(source.get('LOG_LEVEL') or DEFAULT_LOG_LEVEL).strip().upper(),
        debug_mode=(source.get('RELAY_DEBUG') or '').strip().lower() in _TRUE_VALUES,
        source_header=(source.get('RELAY_SOURCE_HEADER') or 'discord-bot').strip(),
    )


class ConfigService:
    """Caches the loaded configuration for the lifetime of the process."""

    def __init__(self, env: Optional[Mapping[str, str]] = None):
        self._env = env
        self._config: Optional[RelayConfig] = None
        self._lock = Lock()

    def get_config(self, force_reload: bool = False) -> RelayConfig:
        with self._lock:
            if self._config is None or force_reload:
                self._config = load_config(self._env)
                logger.debug(f"Configuration loaded: {self._config.to_log_dict()}")
            return self._config

    def reload(self) -> RelayConfig:
        return self.get_config(force_reload=True)


_config_service_instance = None

def get_config_service() -> ConfigService:
    """Get the global configuration service instance."""
    global _config_service_instance
    if _config_service_instance is None:
        _config_service_instance = ConfigService()
    return _config_service_instance
