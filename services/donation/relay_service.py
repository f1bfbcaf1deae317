# -*- coding: utf-8 -*-
# ============================================================================ #
# Saweria Discord Relay (SDR)                                                  #
# Relays Saweria donation notifications from Discord to an HTTP API            #
# Copyright (c) 2025 SDR contributors                                          #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""
Donation Relay Service - connects Discord message events to the ingestion API

For every message in the watched channel this service:
1. Skips anything that is not a webhook post from Saweria
2. Extracts donor, amount and message from the text and embeds
3. Forwards the donation once when an amount was found
4. Acknowledges a successful forward with a ✅ reaction
"""

from __future__ import annotations

from typing import Any, Optional

import discord

from services.donation.extractor import extract
from services.donation.message_adapter import from_discord_message
from services.donation.message_filter import is_donation_candidate
from services.donation.models import RelayResult
from services.donation.relay import DonationRelay
from utils.logging_utils import get_module_logger

logger = get_module_logger("donation.relay_service")

ACK_REACTION = "✅"


class DonationRelayService:
    """Runs the filter, extract, forward and acknowledge cycle for one message."""

    def __init__(self, relay: DonationRelay, channel_id: int):
        self.relay = relay
        self.channel_id = channel_id

    async def handle_message(self, message: Any, *, self_user_id: Optional[int]) -> Optional[RelayResult]:
        """Process a single ``on_message`` event.

        Returns:
            The relay outcome, or None when the message was skipped or carried
            no amount.
        """
        if not is_donation_candidate(message, channel_id=self.channel_id, self_user_id=self_user_id):
            return None

        logger.info("📨 New donation message detected (id=%s)", message.id)

        record = extract(from_discord_message(message))
        logger.info(
            "💰 Parsed donation: donor=%r amount=%s message=%r id=%s",
            record.donor,
            record.amount_minor,
            record.message,
            record.source_id,
        )

        if not record.is_forwardable:
            logger.warning("⚠️ Could not parse amount from message %s", record.source_id)
            return None

        result = await self.relay.forward(record)

        if not result.success:
            logger.error(
                "❌ Forward failed [%s] status=%s: %s | body=%s",
                result.error_code,
                result.status,
                result.error_message,
                result.body,
            )
            return result

        logger.info("✅ Forwarded to ingestion API: %s", result.body)
        logger.info("✅ Successfully processed donation from %s", record.donor)
        await self._acknowledge(message)
        return result

    async def _acknowledge(self, message: Any) -> None:
        try:
            await message.react(ACK_REACTION)
        except discord.HTTPException as exc:
            # Forbidden and NotFound derive from HTTPException
            logger.debug("Could not add acknowledgement reaction to %s: %s", message.id, exc)
