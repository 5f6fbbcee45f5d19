"""
Unit tests for notifications/verification_codes.py
"""

import os
import unittest
from unittest.mock import patch

from notifications.verification_codes import (
    build_verification_html,
    generate_verification_code,
    generate_verification_token,
    send_verification_code,
    verify_code,
)
from shared.errors import ConfigurationError
from tests.fixtures.mock_helpers import create_mock_transport

SECRET_ENV = {"VERIFICATION_SECRET_KEY": "test-secret-key-for-testing-must-be-at-least-32-chars-long"}


class TestGenerateVerificationCode(unittest.TestCase):

    def test_six_digits(self):
        for _ in range(50):
            code = generate_verification_code()
            self.assertEqual(len(code), 6)
            self.assertTrue(code.isdigit())
            self.assertNotEqual(code[0], "0")


@patch.dict(os.environ, SECRET_ENV)
class TestVerifyCode(unittest.TestCase):
    """Token validates only for the email and code it was issued for."""

    def test_valid_code(self):
        token = generate_verification_token("user@x.com", "123456")

        self.assertTrue(verify_code("user@x.com", "123456", token))

    def test_email_is_case_insensitive(self):
        token = generate_verification_token("User@X.com", "123456")

        self.assertTrue(verify_code("user@x.com", "123456", token))

    def test_wrong_code(self):
        token = generate_verification_token("user@x.com", "123456")

        self.assertFalse(verify_code("user@x.com", "654321", token))

    def test_wrong_email(self):
        token = generate_verification_token("user@x.com", "123456")

        self.assertFalse(verify_code("other@x.com", "123456", token))

    def test_tampered_token(self):
        token = generate_verification_token("user@x.com", "123456")

        self.assertFalse(verify_code("user@x.com", "123456", token[:-2] + "xx"))

    def test_expired_token(self):
        token = generate_verification_token("user@x.com", "123456")

        self.assertFalse(verify_code("user@x.com", "123456", token, max_age=-1))

    def test_missing_inputs(self):
        self.assertFalse(verify_code("", "123456", "token"))
        self.assertFalse(verify_code("user@x.com", "", "token"))
        self.assertFalse(verify_code("user@x.com", "123456", ""))

    def test_missing_secret_returns_false(self):
        token = generate_verification_token("user@x.com", "123456")

        with patch.dict(os.environ, {}, clear=True):
            self.assertFalse(verify_code("user@x.com", "123456", token))


class TestSendVerificationCode(unittest.TestCase):

    @patch.dict(os.environ, SECRET_ENV)
    @patch("notifications.verification_codes.generate_verification_code", return_value="482913")
    def test_sends_code_and_returns_token(self, mock_code):
        transport = create_mock_transport()

        challenge = send_verification_code("user@x.com", "Sara", transport=transport)

        to, subject, html = transport.send.call_args.args
        self.assertEqual(to, "user@x.com")
        self.assertEqual(subject, "رمز التحقق: 482913 - بلاغ")
        self.assertIn("482913", html)
        self.assertIn("Sara", html)
        self.assertNotIn("482913", challenge.token)
        self.assertTrue(verify_code("user@x.com", "482913", challenge.token))
        self.assertGreater(challenge.expires_at, 0)

    @patch.dict(os.environ, {}, clear=True)
    def test_missing_secret_raises_before_sending(self):
        transport = create_mock_transport()

        with self.assertRaises(ConfigurationError):
            send_verification_code("user@x.com", transport=transport)

        transport.send.assert_not_called()

    def test_html_default_greeting(self):
        html = build_verification_html("111111")

        self.assertIn("مرحباً بك", html)


if __name__ == "__main__":
    unittest.main()
