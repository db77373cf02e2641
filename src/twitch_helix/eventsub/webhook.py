# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
EventSub webhook verification and message parsing.

Twitch signs each webhook delivery with HMAC-SHA256 over the concatenation
of the message id header, the message timestamp header and the raw body,
keyed with the secret given when the subscription was created. Handlers
should verify the signature, reject stale or replayed messages, then parse:

    if not verify_payload(request.headers, body, secret):
        return 403
    message = parse_http(request.headers, body)
    if isinstance(message, VerificationRequest):
        return 200, message.challenge
    if isinstance(message, Notification):
        handle(message.event)

Header lookups are case-insensitive; any mapping of header names works.
"""

from __future__ import annotations

import hashlib
import hmac
import json
import logging
from collections.abc import Mapping
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, ClassVar

from pydantic import ValidationError

from ..exceptions import EventSubParseError, EventSubVerificationError
from ..types.model import DENY_UNKNOWN_FIELDS, HelixModel
from .events import lookup_subscription
from .subscription import Subscription

logger = logging.getLogger(__name__)

MESSAGE_ID_HEADER = "Twitch-Eventsub-Message-Id"
MESSAGE_RETRY_HEADER = "Twitch-Eventsub-Message-Retry"
MESSAGE_TYPE_HEADER = "Twitch-Eventsub-Message-Type"
MESSAGE_SIGNATURE_HEADER = "Twitch-Eventsub-Message-Signature"
MESSAGE_TIMESTAMP_HEADER = "Twitch-Eventsub-Message-Timestamp"
SUBSCRIPTION_TYPE_HEADER = "Twitch-Eventsub-Subscription-Type"
SUBSCRIPTION_VERSION_HEADER = "Twitch-Eventsub-Subscription-Version"

SIGNATURE_PREFIX = "sha256="
DEFAULT_MAX_AGE = timedelta(minutes=10)


class MessageType(str, Enum):
    NOTIFICATION = "notification"
    VERIFICATION = "webhook_callback_verification"
    REVOCATION = "revocation"


class WebhookMessage(HelixModel):
    """Fields common to every webhook delivery."""

    MESSAGE_TYPE: ClassVar[MessageType]

    subscription: Subscription
    message_id: str | None = None
    message_timestamp: datetime | None = None


class VerificationRequest(WebhookMessage):
    """Sent once after subscribing; answer 200 with ``challenge`` as plain text."""

    MESSAGE_TYPE: ClassVar[MessageType] = MessageType.VERIFICATION

    challenge: str


class Revocation(WebhookMessage):
    """Twitch revoked the subscription; ``subscription.status`` says why."""

    MESSAGE_TYPE: ClassVar[MessageType] = MessageType.REVOCATION


class Notification(WebhookMessage):
    """
    An event notification.

    ``event`` is the subscription's payload model when the (type, version)
    pair is modelled in this package, otherwise the raw JSON object.
    """

    MESSAGE_TYPE: ClassVar[MessageType] = MessageType.NOTIFICATION

    event: Any


_MESSAGE_CLASSES: dict[MessageType, type[WebhookMessage]] = {
    MessageType.NOTIFICATION: Notification,
    MessageType.VERIFICATION: VerificationRequest,
    MessageType.REVOCATION: Revocation,
}


def get_header(headers: Mapping[str, str], name: str) -> str | None:
    """Case-insensitive header lookup."""
    value = headers.get(name)
    if value is not None:
        return value
    lowered = name.lower()
    for key, value in headers.items():
        if key.lower() == lowered:
            return value
    return None


def _as_bytes(value: bytes | str) -> bytes:
    return value.encode() if isinstance(value, str) else value


def compute_signature(
    message_id: str, timestamp: str, body: bytes | str, secret: bytes | str
) -> str:
    """The ``sha256=<hex>`` signature Twitch would send for this message."""
    digest = hmac.new(
        _as_bytes(secret),
        message_id.encode() + timestamp.encode() + _as_bytes(body),
        hashlib.sha256,
    ).hexdigest()
    return SIGNATURE_PREFIX + digest


def verify_payload(
    headers: Mapping[str, str], body: bytes | str, secret: bytes | str
) -> bool:
    """
    Check the HMAC signature of a webhook delivery.

    Returns False when any of the signing headers is missing or the
    signature does not match. The comparison is constant-time.
    """
    message_id = get_header(headers, MESSAGE_ID_HEADER)
    timestamp = get_header(headers, MESSAGE_TIMESTAMP_HEADER)
    signature = get_header(headers, MESSAGE_SIGNATURE_HEADER)
    if message_id is None or timestamp is None or signature is None:
        return False
    if not signature.startswith(SIGNATURE_PREFIX):
        return False
    expected = compute_signature(message_id, timestamp, body, secret)
    return hmac.compare_digest(expected.encode(), signature.strip().lower().encode())


def parse_timestamp(value: str) -> datetime:
    """Parse an RFC 3339 timestamp with up to nanosecond precision."""
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    # datetime handles at most microseconds; Twitch sends up to nanoseconds
    if "." in text:
        head, _, rest = text.partition(".")
        digits = ""
        for ch in rest:
            if not ch.isdigit():
                break
            digits += ch
        text = f"{head}.{digits[:6].ljust(6, '0')}{rest[len(digits):]}"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def verify_request(
    headers: Mapping[str, str],
    body: bytes | str,
    secret: bytes | str,
    *,
    max_age: timedelta | None = DEFAULT_MAX_AGE,
    now: datetime | None = None,
) -> None:
    """
    Verify signature and freshness of a webhook delivery.

    Args:
        max_age: Reject messages whose timestamp is older than this. None
            disables the check.
        now: Current time, for testing.

    Raises:
        EventSubVerificationError: The message must not be processed.
    """
    if not verify_payload(headers, body, secret):
        raise EventSubVerificationError("webhook signature does not verify")
    if max_age is None:
        return
    raw = get_header(headers, MESSAGE_TIMESTAMP_HEADER) or ""
    try:
        sent_at = parse_timestamp(raw)
    except ValueError as e:
        raise EventSubVerificationError(f"invalid message timestamp {raw!r}") from e
    current = now or datetime.now(timezone.utc)
    if current - sent_at > max_age:
        raise EventSubVerificationError(
            f"message timestamp {raw} is older than {max_age}"
        )


def _load_json(body: bytes | str) -> dict[str, Any]:
    try:
        data = json.loads(body)
    except ValueError as e:
        raise EventSubParseError(f"webhook body is not valid JSON: {e}") from e
    if not isinstance(data, dict) or not isinstance(data.get("subscription"), dict):
        raise EventSubParseError("webhook body has no subscription object")
    return data


def _infer_message_type(data: Mapping[str, Any]) -> MessageType:
    if "event" in data:
        return MessageType.NOTIFICATION
    if "challenge" in data:
        return MessageType.VERIFICATION
    return MessageType.REVOCATION


def _build_message(
    message_type: MessageType,
    data: dict[str, Any],
    *,
    message_id: str | None = None,
    message_timestamp: str | None = None,
    strict: bool = False,
) -> WebhookMessage:
    subscription_info = data.get("subscription") or {}
    event_type = subscription_info.get("type")
    version = subscription_info.get("version")
    context = {DENY_UNKNOWN_FIELDS: strict}

    try:
        fields: dict[str, Any] = {
            "subscription": subscription_info,
            "message_id": message_id,
            "message_timestamp": (
                parse_timestamp(message_timestamp) if message_timestamp else None
            ),
        }
        if message_type is MessageType.VERIFICATION:
            fields["challenge"] = data.get("challenge")
        elif message_type is MessageType.NOTIFICATION:
            event = data.get("event")
            subscription_class = lookup_subscription(str(event_type), str(version))
            if subscription_class is not None:
                event = subscription_class.PAYLOAD.model_validate(event, context=context)
            elif strict:
                raise EventSubParseError(
                    f"no payload model for {event_type} version {version}",
                    event_type=event_type,
                    version=version,
                )
            else:
                logger.debug(f"No payload model for {event_type} v{version}; keeping raw event")
            fields["event"] = event
        return _MESSAGE_CLASSES[message_type].model_validate(fields, context=context)
    except (ValidationError, ValueError) as e:
        raise EventSubParseError(
            f"could not parse {message_type.value} for {event_type} v{version}: {e}",
            event_type=event_type,
            version=version,
        ) from e


def parse(body: bytes | str, *, strict: bool = False) -> WebhookMessage:
    """
    Parse a webhook body on its own, inferring the message type from its keys.

    Prefer parse_http() when the headers are available.
    """
    data = _load_json(body)
    return _build_message(_infer_message_type(data), data, strict=strict)


def parse_http(
    headers: Mapping[str, str], body: bytes | str, *, strict: bool = False
) -> WebhookMessage:
    """
    Parse a webhook delivery using its headers and raw body.

    Args:
        headers: Request headers (any mapping; lookups are case-insensitive).
        body: Raw request body.
        strict: Reject unknown fields and unmodelled subscription types.

    Raises:
        EventSubParseError: Headers are missing or the body does not match
            the announced message type.
    """
    raw_type = get_header(headers, MESSAGE_TYPE_HEADER)
    event_type = get_header(headers, SUBSCRIPTION_TYPE_HEADER)
    version = get_header(headers, SUBSCRIPTION_VERSION_HEADER)
    if raw_type is None or event_type is None or version is None:
        raise EventSubParseError(
            "missing EventSub message or subscription headers",
            event_type=event_type,
            version=version,
        )
    try:
        message_type = MessageType(raw_type)
    except ValueError as e:
        raise EventSubParseError(
            f"unknown message type {raw_type!r}", event_type=event_type, version=version
        ) from e

    data = _load_json(body)
    return _build_message(
        message_type,
        data,
        message_id=get_header(headers, MESSAGE_ID_HEADER),
        message_timestamp=get_header(headers, MESSAGE_TIMESTAMP_HEADER),
        strict=strict,
    )


__all__ = [
    "DEFAULT_MAX_AGE",
    "MESSAGE_ID_HEADER",
    "MESSAGE_RETRY_HEADER",
    "MESSAGE_SIGNATURE_HEADER",
    "MESSAGE_TIMESTAMP_HEADER",
    "MESSAGE_TYPE_HEADER",
    "SUBSCRIPTION_TYPE_HEADER",
    "SUBSCRIPTION_VERSION_HEADER",
    "MessageType",
    "Notification",
    "Revocation",
    "VerificationRequest",
    "WebhookMessage",
    "compute_signature",
    "get_header",
    "parse",
    "parse_http",
    "parse_timestamp",
    "verify_payload",
    "verify_request",
]
