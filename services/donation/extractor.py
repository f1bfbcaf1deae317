# -*- coding: utf-8 -*-
# ============================================================================ #
# Saweria Discord Relay (SDR)                                                  #
# Relays Saweria donation notifications from Discord to an HTTP API            #
# Copyright (c) 2025 SDR contributors                                          #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""Extraction of donation data from Saweria webhook messages.

Saweria posts notifications either as plain text
(``"💰 <donor> donated Rp <amount>"``) or as an embed whose fields carry the
donor, amount and message under free-form labels (English or Indonesian).
:func:`extract` walks every source in a fixed order and lets later matches
overwrite earlier ones:

1. fields of the first embed,
2. the first embed's title,
3. the plain text content.

Amounts are kept in the smallest currency unit by removing every ``.`` and
``,`` from the matched text. ``"$1,234.56"`` therefore becomes ``123456``; the
parser is not decimal-aware.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Callable, Dict, Optional, Tuple, Union

from services.donation.models import (
    ANONYMOUS_DONOR,
    Attachment,
    DonationRecord,
    InboundMessage,
)

_AMOUNT_RUN = re.compile(r"[0-9.,]+")
_SEPARATORS = re.compile(r"[.,]")
_LEADING_DIGITS = re.compile(r"[0-9]+")

TITLE_PATTERN = re.compile(r"(.+?)\s+donated\s+Rp\s*([0-9.,]+)", re.IGNORECASE)
TEXT_PATTERN = re.compile(r"💰\s+(.+?)\s+donated\s+Rp\s*([0-9.,]+)", re.IGNORECASE)

FieldSetter = Callable[[Dict[str, object], str], None]


def parse_amount(text: Optional[str]) -> int:
    """Strip grouping separators and parse the result as a base-10 integer.

    Returns ``0`` when nothing numeric is left or the digit run is too long
    to convert.
    """

    digits = _SEPARATORS.sub("", text or "").strip()
    match = _LEADING_DIGITS.match(digits)
    if match is None:
        return 0
    try:
        return int(match.group(0))
    except ValueError:
        # int() refuses strings past sys.get_int_max_str_digits()
        return 0


def extract_amount_from_value(value: Optional[str]) -> Optional[int]:
    """Concatenate every numeric run in ``value`` and parse the result.

    ``None`` means the value holds no numeric run at all, in which case the
    caller keeps whatever amount it already has.
    """

    runs = _AMOUNT_RUN.findall(value or "")
    if not runs:
        return None
    return parse_amount("".join(runs))


def format_timestamp(created_at: Union[datetime, str]) -> str:
    """Render a message creation time as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""

    if isinstance(created_at, str):
        return created_at
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    utc_value = created_at.astimezone(timezone.utc)
    return utc_value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _set_donor(resolved: Dict[str, object], value: str) -> None:
    resolved["donor"] = value


def _set_amount(resolved: Dict[str, object], value: str) -> None:
    amount = extract_amount_from_value(value)
    if amount is not None:
        resolved["amount_minor"] = amount


def _set_message(resolved: Dict[str, object], value: str) -> None:
    resolved["message"] = value


# Evaluated in order; a label only feeds the first category it matches.
FIELD_RULES: Tuple[Tuple[Tuple[str, ...], FieldSetter], ...] = (
    (("donor", "nama"), _set_donor),
    (("amount", "jumlah"), _set_amount),
    (("message", "pesan"), _set_message),
)


def _apply_fields(attachment: Attachment, resolved: Dict[str, object]) -> None:
    for embed_field in attachment.fields:
        name = (embed_field.name or "").lower()
        value = embed_field.value or ""
        for keywords, setter in FIELD_RULES:
            if any(keyword in name for keyword in keywords):
                setter(resolved, value)
                break


def _apply_pattern(pattern: re.Pattern, text: str, resolved: Dict[str, object]) -> bool:
    match = pattern.search(text)
    if match is None:
        return False
    resolved["donor"] = match.group(1)
    resolved["amount_minor"] = parse_amount(match.group(2))
    return True


def extract(msg: InboundMessage) -> DonationRecord:
    """Build a :class:`DonationRecord` from an inbound message.

    Never raises. When no amount is found the record carries
    ``amount_minor == 0`` and, unless a donor was found elsewhere, the
    ``"Anonymous"`` donor.
    """

    resolved: Dict[str, object] = {
        "donor": ANONYMOUS_DONOR,
        "amount_minor": 0,
        "message": "",
    }

    attachment = msg.primary_attachment
    if attachment is not None:
        _apply_fields(attachment, resolved)
        if attachment.title is not None:
            _apply_pattern(TITLE_PATTERN, attachment.title, resolved)

    if msg.text_body:
        _apply_pattern(TEXT_PATTERN, msg.text_body, resolved)

    return DonationRecord(
        donor=str(resolved["donor"]),
        amount_minor=int(resolved["amount_minor"]),
        message=str(resolved["message"]),
        timestamp=format_timestamp(msg.created_at),
        source_id=str(msg.id),
    )
