"""API endpoint for the founder-lessons mailing list."""

import logging

from fastapi import APIRouter, HTTPException

from app.core.mailchimp_service import SubscriptionError, SubscriptionErrorKind, add_subscriber
from app.core.schemas_quiz import SubscribeRequest, SubscribeResponse

logger = logging.getLogger(__name__)

router = APIRouter()

MSG_MISSING_FIELDS = "Please fill in all fields to continue"

# kind -> (status, user-facing message)
_ERROR_RESPONSES: dict[SubscriptionErrorKind, tuple[int, str]] = {
    SubscriptionErrorKind.ALREADY_SUBSCRIBED: (
        400,
        "Good news! You're already subscribed to our mailing list.",
    ),
    SubscriptionErrorKind.INVALID_ADDRESS: (400, "Please enter a valid email address"),
    SubscriptionErrorKind.AUTH_FAILED: (500, "Oops! Something went wrong. Please try again later."),
    SubscriptionErrorKind.NOT_CONFIGURED: (
        500,
        "Oops! Something went wrong on our end. Please try again later.",
    ),
    SubscriptionErrorKind.OTHER: (500, "Something went wrong. Please try again in a moment."),
}


@router.post("/subscribe-email", response_model=SubscribeResponse)
async def subscribe_email(request: SubscribeRequest) -> SubscribeResponse:
    """Add the quiz taker to the mailing list."""
    if not request.email or not request.first_name or not request.last_name:
        raise HTTPException(status_code=400, detail=MSG_MISSING_FIELDS)

    try:
        subscriber = await add_subscriber(request.email, request.first_name, request.last_name)
    except SubscriptionError as e:
        status, message = _ERROR_RESPONSES[e.kind]
        raise HTTPException(status_code=status, detail=message)

    return SubscribeResponse(subscriber_id=subscriber["subscriber_id"])
