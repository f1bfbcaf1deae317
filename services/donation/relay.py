# -*- coding: utf-8 -*-
# ============================================================================ #
# Saweria Discord Relay (SDR)                                                  #
# Relays Saweria donation notifications from Discord to an HTTP API            #
# Copyright (c) 2025 SDR contributors                                          #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""Forwarding of donation records to the downstream ingestion API."""

from __future__ import annotations

import asyncio
import json
from typing import Any, Optional

import aiohttp

from services.donation.models import DonationRecord, RelayResult
from utils.logging_utils import get_module_logger

logger = get_module_logger("donation.relay")

DEFAULT_SOURCE_HEADER = "discord-bot"


async def _read_success_body(response: aiohttp.ClientResponse) -> Any:
    try:
        return await response.json(content_type=None)
    except (json.JSONDecodeError, aiohttp.ContentTypeError, ValueError) as exc:
        # A 2xx stays a success even with an unreadable body
        logger.debug("Downstream returned a non-JSON body: %s", exc)
        return await response.text(errors="replace")


async def _post(
    session: aiohttp.ClientSession,
    endpoint: str,
    record: DonationRecord,
    source_header: str,
) -> RelayResult:
    headers = {
        "Content-Type": "application/json",
        "X-Source": source_header,
    }
    async with session.post(endpoint, json=record.to_payload(), headers=headers) as response:
        if 200 <= response.status < 300:
            body = await _read_success_body(response)
            return RelayResult(success=True, status=response.status, body=body)

        error_body = await response.text(errors="replace")
        return RelayResult.failure(
            "HTTP_ERROR",
            f"Downstream API responded with HTTP {response.status}",
            status=response.status,
            body=error_body,
        )


async def forward(
    record: DonationRecord,
    endpoint: str,
    *,
    session: Optional[aiohttp.ClientSession] = None,
    source_header: str = DEFAULT_SOURCE_HEADER,
) -> RelayResult:
    """POST ``record`` to ``endpoint`` once and report the outcome.

    Args:
        record: The donation to forward. Records without an amount are refused.
        endpoint: URL of the ingestion API.
        session: Optional session to reuse; a short-lived one is opened otherwise.
        source_header: Value of the ``X-Source`` header.

    Returns:
        RelayResult: ``success`` is True for any 2xx response. Transport errors,
        timeouts and non-2xx responses are reported as failures, never raised.
    """

    if not record.is_forwardable:
        return RelayResult.failure("NO_AMOUNT", "Refusing to forward a donation without an amount")

    try:
        if session is not None:
            result = await _post(session, endpoint, record, source_header)
        else:
            async with aiohttp.ClientSession() as own_session:
                result = await _post(own_session, endpoint, record, source_header)
    except asyncio.TimeoutError:
        return RelayResult.failure("TIMEOUT", f"Timed out while posting to {endpoint}")
    except (aiohttp.ClientError, OSError, ValueError) as exc:
        return RelayResult.failure("TRANSPORT_ERROR", f"{type(exc).__name__}: {exc}")

    logger.debug("Forward of donation %s finished with HTTP %s", record.source_id, result.status)
    return result


class DonationRelay:
    """Relay bound to a configured downstream endpoint."""

    def __init__(
        self,
        endpoint: str,
        *,
        session: Optional[aiohttp.ClientSession] = None,
        source_header: str = DEFAULT_SOURCE_HEADER,
    ):
        self.endpoint = endpoint
        self.source_header = source_header
        self._session = session

    async def forward(self, record: DonationRecord) -> RelayResult:
        return await forward(
            record,
            self.endpoint,
            session=self._session,
            source_header=self.source_header,
        )
