"""
/api/notifications: notification emails and login verification codes.
"""

import logging
from typing import Any, List, Tuple

from fastapi import APIRouter, Request
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from api.responses import error_response, health_payload
from models.notification import NotificationEvent
from notifications.notification_service import dispatch_notification
from notifications.verification_codes import send_verification_code, verify_code
from shared.errors import NotificationValidationError, SenderNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/notifications", tags=["notifications"])


async def _read_json(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError:
        return None


def parse_send_emails_payload(payload: Any) -> Tuple[NotificationEvent, List[str]]:
    """
    Validate a {notification, recipients} request body.

    Raises:
        NotificationValidationError: With the error message for the 400 body
    """
    if not isinstance(payload, dict):
        raise NotificationValidationError("Invalid request body")

    notification = payload.get("notification")
    recipients = payload.get("recipients")

    if not notification or recipients is None:
        raise NotificationValidationError(
            "Missing notification or recipients",
            details={
                "received": {
                    "notification": bool(notification),
                    "recipients": recipients is not None,
                }
            },
        )

    if not isinstance(notification, dict):
        raise NotificationValidationError("Invalid request body")

    if not notification.get("performedBy"):
        raise NotificationValidationError("Missing notification.performedBy")

    if not isinstance(recipients, list) or not all(isinstance(r, str) for r in recipients):
        raise NotificationValidationError(
            "Invalid request body",
            details={"details": "recipients must be a list of email addresses"},
        )

    try:
        event = NotificationEvent.model_validate(notification)
    except ValidationError as e:
        raise NotificationValidationError(
            "Invalid request body", details={"details": str(e)}
        ) from e

    return event, recipients


@router.get("/send-emails")
def send_emails_health() -> dict[str, str]:
    return health_payload("Balagh notification email API is running")


@router.post("/send-emails")
async def send_emails(request: Request):
    try:
        notification, recipients = parse_send_emails_payload(await _read_json(request))
    except NotificationValidationError as e:
        return error_response(400, str(e), **e.details)

    logger.info(
        "Notification from %s for %d candidate recipients",
        notification.performed_by,
        len(recipients),
    )

    try:
        outcome = await run_in_threadpool(dispatch_notification, notification, recipients)
    except SenderNotFoundError:
        return error_response(400, "Sender not found")
    except Exception as e:
        logger.exception("Failed to send email notifications")
        return error_response(500, "Failed to send email notifications", details=str(e))

    body: dict[str, Any] = {"success": True, "message": outcome.message}
    if outcome.recipients:
        body["recipients"] = outcome.recipients
        body["results"] = [r.model_dump(by_alias=True, exclude_none=True) for r in outcome.results]
    return body


@router.post("/send-verification-code")
async def send_verification_code_route(request: Request):
    payload = await _read_json(request)
    email = payload.get("email") if isinstance(payload, dict) else None

    if not email:
        return error_response(400, "Email is required")

    try:
        challenge = await run_in_threadpool(
            send_verification_code, email, payload.get("userName")
        )
    except Exception as e:
        logger.exception("Failed to send verification code")
        return error_response(500, "Failed to send verification code", details=str(e))

    return {
        "success": True,
        "message": "Verification code sent",
        "token": challenge.token,
        "expiresAt": challenge.expires_at,
    }


@router.post("/verify-code")
async def verify_code_route(request: Request):
    payload = await _read_json(request)
    if not isinstance(payload, dict):
        payload = {}

    email = payload.get("email")
    code = payload.get("code")
    token = payload.get("token")

    if not email or not code or not token:
        return error_response(400, "email, code and token are required")

    return {"valid": verify_code(email, str(code), token)}
