# -*- coding: utf-8 -*-
# ============================================================================ #
# Saweria Discord Relay (SDR)                                                  #
# Relays Saweria donation notifications from Discord to an HTTP API            #
# Copyright (c) 2025 SDR contributors                                          #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""Data models shared by the donation extractor and relay."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Tuple, Union

ANONYMOUS_DONOR = "Anonymous"
PAYLOAD_SOURCE = "discord"


@dataclass(frozen=True)
class AttachmentField:
    """A single ``name``/``value`` pair of a structured attachment (embed field)."""

    name: str
    value: str


@dataclass(frozen=True)
class Attachment:
    """Structured attachment carried by an inbound message (a Discord embed)."""

    title: Optional[str] = None
    fields: Tuple[AttachmentField, ...] = ()


@dataclass(frozen=True)
class InboundMessage:
    """Platform independent view of a chat message that may describe a donation."""

    text_body: str
    attachments: Tuple[Attachment, ...]
    created_at: Union[datetime, str]
    id: str

    @property
    def primary_attachment(self) -> Optional[Attachment]:
        """First attachment of the message, ``None`` when the message has none."""

        if len(self.attachments) == 0:
            return None
        return self.attachments[0]


@dataclass(frozen=True)
class DonationRecord:
    """Structured donation data extracted from an :class:`InboundMessage`.

    ``amount_minor == 0`` means no amount could be found; such records are
    never forwarded.
    """

    donor: str = ANONYMOUS_DONOR
    amount_minor: int = 0
    message: str = ""
    timestamp: str = ""
    source_id: str = ""

    @property
    def is_forwardable(self) -> bool:
        return self.amount_minor > 0

    def to_payload(self) -> Dict[str, Any]:
        """Build the JSON body expected by the downstream ingestion API."""

        return {
            "donator_name": self.donor,
            "amount_raw": self.amount_minor,
            "amount": self.amount_minor,
            "message": self.message,
            "created_at": self.timestamp,
            "id": self.source_id,
            "source": PAYLOAD_SOURCE,
        }


@dataclass(frozen=True)
class RelayResult:
    """Outcome of a single forward attempt."""

    success: bool
    status: Optional[int] = None
    body: Any = None
    error_message: Optional[str] = None
    error_code: Optional[str] = None

    @classmethod
    def failure(
        cls,
        error_code: str,
        error_message: str,
        *,
        status: Optional[int] = None,
        body: Any = None,
    ) -> "RelayResult":
        return cls(
            success=False,
            status=status,
            body=body,
            error_message=error_message,
            error_code=error_code,
        )
