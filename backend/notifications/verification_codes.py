"""
Login verification codes sent by email.

The code is never stored or returned. Instead the caller receives a signed,
time-limited token whose salt is derived from the code, so the token only
validates when presented together with the code that was emailed.

Callers cannot compare the typed code client-side: the send response carries
only `token` and `expiresAt`, and the check must go through
`POST /api/notifications/verify-code` with `{email, code, token}`.
"""

import hashlib
import logging
import os
import secrets
from html import escape
from typing import Optional

from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer

from models.notification import VerificationChallenge
from notifications.email_sender import EmailTransport, get_email_transport
from shared.errors import ConfigurationError
from shared.utils import now_millis

logger = logging.getLogger(__name__)

VERIFICATION_SALT = "verification-code"
CODE_TTL_SECONDS = 5 * 60


def _get_serializer() -> URLSafeTimedSerializer:
    """
    Raises:
        ConfigurationError: If VERIFICATION_SECRET_KEY environment variable not set
    """
    secret_key = os.getenv("VERIFICATION_SECRET_KEY")
    if not secret_key:
        raise ConfigurationError("VERIFICATION_SECRET_KEY environment variable must be set.")

    return URLSafeTimedSerializer(
        secret_key,
        salt=VERIFICATION_SALT,
        signer_kwargs={"digest_method": hashlib.sha256},
    )


def _code_salt(code: str) -> str:
    return f"{VERIFICATION_SALT}:{code}"


def generate_verification_code() -> str:
    """Six-digit numeric code, never starting with 0."""
    return str(100000 + secrets.randbelow(900000))


def generate_verification_token(email: str, code: str) -> str:
    """Sign `email` with a salt bound to `code`."""
    return _get_serializer().dumps(email.strip().lower(), salt=_code_salt(code))


def verify_code(email: str, code: str, token: str, max_age: int = CODE_TTL_SECONDS) -> bool:
    """
    Check a code against the token issued when it was sent.

    Never raises: any invalid, expired or mismatched input returns False.
    """
    if not email or not code or not token:
        return False

    try:
        signed_email = _get_serializer().loads(
            token, max_age=max_age, salt=_code_salt(code.strip())
        )
    except (BadSignature, SignatureExpired, ConfigurationError, TypeError):
        return False

    return signed_email == email.strip().lower()


def build_verification_html(code: str, user_name: Optional[str] = None) -> str:
    greeting = escape(user_name) if user_name else "بك"
    return f"""
<!DOCTYPE html>
<html dir="rtl" lang="ar">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>رمز التحقق - بلاغ</title>
</head>
<body style="font-family: Arial, sans-serif; background-color: #f5f5f5; margin: 0; padding: 20px; direction: rtl;">
    <div style="max-width: 600px; margin: 0 auto; background-color: white; border-radius: 10px; box-shadow: 0 2px 10px rgba(0,0,0,0.1);">
        <div style="background: linear-gradient(135deg, #1e3a8a 0%, #3b82f6 100%); color: white; padding: 30px; text-align: center; border-radius: 10px 10px 0 0;">
            <h1 style="margin: 0; font-size: 24px; font-weight: bold;">🔐 رمز التحقق</h1>
            <p style="margin: 10px 0 0 0; opacity: 0.9; font-size: 16px;">نظام بلاغ الإداري</p>
        </div>
        <div style="padding: 40px 30px;">
            <div style="text-align: center; margin-bottom: 30px;">
                <p style="color: #374151; font-size: 16px; margin: 0 0 10px 0;">مرحباً {greeting},</p>
                <p style="color: #6b7280; font-size: 14px; margin: 0;">لقد تلقينا طلب تسجيل دخول إلى حسابك الإداري</p>
            </div>
            <div style="background: #f0f9ff; border: 2px solid #3b82f6; border-radius: 12px; padding: 30px; text-align: center; margin: 30px 0;">
                <p style="color: #1e40af; font-size: 14px; margin: 0 0 15px 0; font-weight: bold;">رمز التحقق الخاص بك:</p>
                <span style="font-size: 36px; font-weight: bold; color: #1e3a8a; letter-spacing: 8px; font-family: 'Courier New', monospace;">{code}</span>
                <p style="color: #6b7280; font-size: 12px; margin: 15px 0 0 0;">⏰ ينتهي هذا الرمز خلال 5 دقائق</p>
            </div>
            <div style="background-color: #fef3c7; border: 1px solid #f59e0b; border-radius: 8px; padding: 15px; margin-top: 25px;">
                <p style="margin: 0; color: #92400e; font-size: 14px; text-align: center;">⚠️ إذا لم تطلب هذا الرمز، يرجى تجاهل هذه الرسالة</p>
            </div>
        </div>
    </div>
</body>
</html>
"""


def send_verification_code(
    email: str,
    user_name: Optional[str] = None,
    transport: Optional[EmailTransport] = None,
) -> VerificationChallenge:
    """
    Email a fresh verification code and return the matching signed token.

    Raises:
        ConfigurationError: If the signing key or email transport is not configured
        PerRecipientSendError: If the email could not be delivered
    """
    _get_serializer()
    transport = transport or get_email_transport()

    code = generate_verification_code()
    token = generate_verification_token(email, code)

    logger.info("Sending verification code to %s", email)
    transport.send(email, f"رمز التحقق: {code} - بلاغ", build_verification_html(code, user_name))

    return VerificationChallenge(
        email=email,
        token=token,
        expires_at=now_millis() + CODE_TTL_SECONDS * 1000,
    )
