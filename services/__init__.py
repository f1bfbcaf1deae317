# -*- coding: utf-8 -*-
"""
Services Package - Business logic of the Saweria Discord Relay

- config: Environment driven configuration service
- donation: Donation extraction, relay and Discord message handling
"""

from .config.config_service import get_config_service

__all__ = [
    'get_config_service',
]
