"""Mailing-list subscription via the Mailchimp Marketing API."""

import logging
from enum import Enum
from typing import Any

import httpx

from app.core.config import get_settings

logger = logging.getLogger(__name__)

MAILCHIMP_API_URL = "https://{server}.api.mailchimp.com/3.0"


class SubscriptionErrorKind(str, Enum):
    ALREADY_SUBSCRIBED = "already_subscribed"
    INVALID_ADDRESS = "invalid_address"
    AUTH_FAILED = "auth_failed"
    NOT_CONFIGURED = "not_configured"
    OTHER = "other"


class SubscriptionError(Exception):
    """Add-subscriber failure, classified from the Mailchimp error body."""

    def __init__(
        self,
        kind: SubscriptionErrorKind,
        message: str,
        status: int | None = None,
        title: str | None = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.status = status
        self.title = title


def _classify(status: int, title: str | None) -> SubscriptionErrorKind:
    if status == 400 and title == "Member Exists":
        return SubscriptionErrorKind.ALREADY_SUBSCRIBED
    if status == 400 and title == "Invalid Resource":
        return SubscriptionErrorKind.INVALID_ADDRESS
    if status in (401, 403):
        return SubscriptionErrorKind.AUTH_FAILED
    return SubscriptionErrorKind.OTHER


def _error_from_response(response: httpx.Response) -> SubscriptionError:
    try:
        body = response.json()
    except ValueError:
        body = {}

    title = body.get("title")
    detail = body.get("detail") or response.text
    logger.error(
        f"Mailchimp subscription error: status={response.status_code} "
        f"title={title} detail={detail}"
    )
    kind = _classify(response.status_code, title)
    if kind == SubscriptionErrorKind.AUTH_FAILED:
        logger.error("Authentication error - check Mailchimp API credentials")
    return SubscriptionError(kind, detail or "Mailchimp request failed", response.status_code, title)


async def add_subscriber(
    email: str,
    first_name: str,
    last_name: str,
    tags: list[str] | None = None,
) -> dict[str, Any]:
    """
    Add a subscribed member to the configured audience.

    Args:
        email: Subscriber email address
        first_name: Stored as the FNAME merge field
        last_name: Stored as the LNAME merge field
        tags: Member tags; defaults to MAILCHIMP_TAG when set

    Returns:
        Dict with subscriber_id and email_address

    Raises:
        SubscriptionError: Not configured, rejected by Mailchimp, or unreachable
    """
    settings = get_settings()
    if not settings.mailchimp_configured:
        logger.error("Missing Mailchimp environment variables")
        raise SubscriptionError(SubscriptionErrorKind.NOT_CONFIGURED, "Mailchimp is not configured")

    if tags is None:
        tags = [settings.MAILCHIMP_TAG] if settings.MAILCHIMP_TAG else []

    url = (
        f"{MAILCHIMP_API_URL.format(server=settings.MAILCHIMP_SERVER_PREFIX)}"
        f"/lists/{settings.MAILCHIMP_LIST_ID}/members"
    )
    payload = {
        "email_address": email,
        "status": "subscribed",
        "merge_fields": {"FNAME": first_name, "LNAME": last_name},
        "tags": tags,
    }

    try:
        async with httpx.AsyncClient(timeout=settings.MAILCHIMP_TIMEOUT_SECONDS) as client:
            response = await client.post(
                url,
                auth=("anystring", settings.MAILCHIMP_API_KEY),
                json=payload,
            )
    except httpx.HTTPError as e:
        logger.error(f"Mailchimp request failed: {e}")
        raise SubscriptionError(SubscriptionErrorKind.OTHER, str(e)) from e

    if response.is_error:
        raise _error_from_response(response)

    data = response.json()
    logger.info(f"Mailchimp subscriber added: id={data.get('id')}")
    return {"subscriber_id": data.get("id", ""), "email_address": data.get("email_address", email)}
