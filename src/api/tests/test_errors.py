"""Unit tests for domain error → HTTP status mapping."""

import unittest

from api.errors import domain_error_response
from domain.model.errors import (
    AuthenticationError,
    DependencyError,
    DomainError,
    DuplicateError,
    InvalidResetTokenError,
    NotFoundError,
    ValidationError,
    WeakPasswordError,
)


class TestDomainErrorResponse(unittest.TestCase):

    def test_status_codes(self):
        cases = [
            (ValidationError("Invalid email"), 400),
            (WeakPasswordError("Password must be at least 6 characters"), 400),
            (InvalidResetTokenError("Invalid or expired token"), 400),
            (NotFoundError("Email not found"), 404),
            (DuplicateError("Email already registered"), 409),
            (AuthenticationError("Invalid password"), 401),
            (DependencyError("Failed to send email"), 500),
        ]
        for error, expected in cases:
            with self.subTest(error=type(error).__name__):
                status_code, message = domain_error_response(error)
                self.assertEqual(status_code, expected)
                self.assertEqual(message, str(error))

    def test_unknown_domain_error_is_generic_500(self):
        self.assertEqual(domain_error_response(DomainError("boom")), (500, "Server error"))

    def test_empty_message_falls_back(self):
        self.assertEqual(domain_error_response(DependencyError()), (500, "Server error"))


if __name__ == '__main__':
    unittest.main()
