# -*- coding: utf-8 -*-
"""
Unit tests for DonationRelayService.

Tests filtering, the amount guard, forwarding and the acknowledgement reaction.
"""

import logging

import discord
import pytest
from unittest.mock import AsyncMock, Mock

from services.donation.models import DonationRecord, RelayResult
from services.donation.relay_service import ACK_REACTION, DonationRelayService

CHANNEL_ID = 987654321
BOT_USER_ID = 111222333


@pytest.fixture
def relay():
    relay = Mock()
    relay.forward = AsyncMock(return_value=RelayResult(success=True, status=200, body={"ok": True}))
    return relay


@pytest.fixture
def service(relay):
    return DonationRelayService(relay, channel_id=CHANNEL_ID)


@pytest.fixture
def donation_message(make_discord_message, make_embed):
    embed = make_embed(fields=[("Nama", "Alice"), ("Jumlah", "Rp 50.000"), ("Pesan", "Thanks!")])
    return make_discord_message(embeds=[embed], message_id=1234567890)


class TestFiltering:
    """Tests for messages that must not be processed."""

    @pytest.mark.asyncio
    async def test_message_in_other_channel_is_ignored(self, service, relay, make_discord_message):
        message = make_discord_message(content="💰 Carol donated Rp 10.500", channel_id=1)

        result = await service.handle_message(message, self_user_id=BOT_USER_ID)

        assert result is None
        relay.forward.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_user_message_is_ignored(self, service, relay, make_discord_message):
        message = make_discord_message(content="💰 Carol donated Rp 10.500", webhook_id=None, author_bot=False)

        result = await service.handle_message(message, self_user_id=BOT_USER_ID)

        assert result is None
        relay.forward.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_message_without_amount_is_not_forwarded(self, service, relay, make_discord_message, caplog):
        message = make_discord_message(content="Halo semua")

        with caplog.at_level(logging.WARNING, logger="relay.donation.relay_service"):
            result = await service.handle_message(message, self_user_id=BOT_USER_ID)

        assert result is None
        relay.forward.assert_not_awaited()
        message.react.assert_not_awaited()
        assert "Could not parse amount" in caplog.text


class TestForwarding:
    """Tests for forwarded donations."""

    @pytest.mark.asyncio
    async def test_donation_is_forwarded_once(self, service, relay, donation_message):
        result = await service.handle_message(donation_message, self_user_id=BOT_USER_ID)

        assert result.success is True
        relay.forward.assert_awaited_once()
        record = relay.forward.await_args.args[0]
        assert record == DonationRecord(
            donor="Alice",
            amount_minor=50000,
            message="Thanks!",
            timestamp="2024-05-01T12:30:00.000Z",
            source_id="1234567890",
        )

    @pytest.mark.asyncio
    async def test_success_adds_reaction(self, service, donation_message):
        await service.handle_message(donation_message, self_user_id=BOT_USER_ID)

        donation_message.react.assert_awaited_once_with(ACK_REACTION)

    @pytest.mark.asyncio
    async def test_failure_skips_reaction(self, service, relay, donation_message):
        relay.forward.return_value = RelayResult.failure("HTTP_ERROR", "HTTP 500", status=500, body="boom")

        result = await service.handle_message(donation_message, self_user_id=BOT_USER_ID)

        assert result.success is False
        assert result.body == "boom"
        donation_message.react.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_reaction_errors_are_ignored(self, service, donation_message):
        response = Mock(status=403, reason="Forbidden")
        donation_message.react.side_effect = discord.Forbidden(response, "Missing Permissions")

        result = await service.handle_message(donation_message, self_user_id=BOT_USER_ID)

        assert result.success is True
        donation_message.react.assert_awaited_once_with(ACK_REACTION)
