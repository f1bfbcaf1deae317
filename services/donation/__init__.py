# -*- coding: utf-8 -*-
# ============================================================================ #
# Saweria Discord Relay (SDR)                                                  #
# Relays Saweria donation notifications from Discord to an HTTP API            #
# Copyright (c) 2025 SDR contributors                                          #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""
Donation Services - Saweria donation extraction and relay
"""

from .extractor import extract, parse_amount
from .models import Attachment, AttachmentField, DonationRecord, InboundMessage, RelayResult
from .relay import DonationRelay, forward
from .relay_service import DonationRelayService

__all__ = [
    'Attachment',
    'AttachmentField',
    'DonationRecord',
    'DonationRelay',
    'DonationRelayService',
    'InboundMessage',
    'RelayResult',
    'extract',
    'forward',
    'parse_amount',
]
