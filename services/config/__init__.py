# -*- coding: utf-8 -*-
# ============================================================================ #
# Saweria Discord Relay (SDR)                                                  #
# Relays Saweria donation notifications from Discord to an HTTP API            #
# Copyright (c) 2025 SDR contributors                                          #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""
Config Services Package - Environment driven configuration
"""

from .config_service import ConfigService, RelayConfig, get_config_service, load_config

__all__ = [
    'ConfigService', 'RelayConfig', 'get_config_service', 'load_config'
]
