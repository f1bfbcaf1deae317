# -*- coding: utf-8 -*-
# ============================================================================ #
# Saweria Discord Relay (SDR)                                                  #
# Relays Saweria donation notifications from Discord to an HTTP API            #
# Copyright (c) 2025 SDR contributors                                          #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""Conversion of py-cord messages into :class:`InboundMessage` objects."""

from __future__ import annotations

from typing import Any, Optional

from services.donation.models import Attachment, AttachmentField, InboundMessage


def _optional_text(value: Any) -> Optional[str]:
    # Older discord libraries use an ``Embed.Empty`` sentinel instead of None.
    if value is None or not isinstance(value, str):
        return None
    return value


def attachment_from_embed(embed: Any) -> Attachment:
    fields = tuple(
        AttachmentField(name=str(embed_field.name or ""), value=str(embed_field.value or ""))
        for embed_field in (getattr(embed, "fields", None) or [])
    )
    return Attachment(title=_optional_text(getattr(embed, "title", None)), fields=fields)


def from_discord_message(message: Any) -> InboundMessage:
    """Map a ``discord.Message`` onto the platform independent input type."""

    embeds = getattr(message, "embeds", None) or []
    return InboundMessage(
        text_body=message.content or "",
        attachments=tuple(attachment_from_embed(embed) for embed in embeds),
        created_at=message.created_at,
        id=str(message.id),
    )
