"""Route tests for admin login and the admin session check."""

import unittest
from datetime import timedelta

from fastapi.testclient import TestClient

from api.dependencies import get_settings
from api.main import app
from api.security import TokenIssuer
from utils.config import Settings

SETTINGS = Settings(
    jwt_secret="test-secret",
    admin_email="admin@example.com",
    admin_password="hunter22",
)


class TestAdminLogin(unittest.TestCase):

    def setUp(self):
        self.client = TestClient(app)
        self.settings = SETTINGS
        app.dependency_overrides[get_settings] = lambda: self.settings

    def tearDown(self):
        app.dependency_overrides.clear()

    def _login(self, **kwargs):
        return self.client.post("/api/users/admin", **kwargs)

    def test_valid_credentials_return_one_hour_token(self):
        response = self._login(json={"email": "admin@example.com", "password": "hunter22"})

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertTrue(data["success"])
        claims = TokenIssuer("test-secret").verify(data["token"])
        self.assertEqual(claims["email"], "admin@example.com")
        self.assertNotIn("sub", claims)
        self.assertEqual(claims["exp"] - claims["iat"], int(timedelta(hours=1).total_seconds()))

    def test_mismatched_credentials_return_401_for_any_payload_shape(self):
        payloads = [
            {"json": {"email": "admin@example.com", "password": "wrong"}},
            {"json": {"email": "someone@example.com", "password": "hunter22"}},
            {"json": {}},
            {"json": []},
            {"json": ["admin@example.com", "hunter22"]},
            {"json": "admin@example.com"},
            {"json": {"email": 1, "password": {"$ne": None}}},
            {"content": "not json", "headers": {"Content-Type": "application/json"}},
            {
                "content": '{"email": "\\ud800", "password": "x"}',
                "headers": {"Content-Type": "application/json"},
            },
            {},
        ]
        for payload in payloads:
            with self.subTest(payload=payload):
                response = self._login(**payload)
                self.assertEqual(response.status_code, 401)
                self.assertEqual(response.json(), {"success": False, "message": "Invalid credentials"})

    def test_unconfigured_admin_rejects_everything(self):
        self.settings = Settings(jwt_secret="test-secret")
        response = self._login(json={"email": None, "password": None})
        self.assertEqual(response.status_code, 401)


class TestAdminSession(unittest.TestCase):

    def setUp(self):
        self.client = TestClient(app)
        self.issuer = TokenIssuer("test-secret")
        app.dependency_overrides[get_settings] = lambda: SETTINGS

    def tearDown(self):
        app.dependency_overrides.clear()

    def _get(self, token):
        return self.client.get("/api/users/admin/me", headers={"Authorization": f"Bearer {token}"})

    def test_admin_token_accepted(self):
        token = self.issuer.issue({"email": "admin@example.com"}, timedelta(hours=1))
        response = self._get(token)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"success": True, "email": "admin@example.com"})

    def test_user_token_rejected(self):
        token = self.issuer.issue({"sub": "user-1"}, timedelta(days=30))
        self.assertEqual(self._get(token).status_code, 401)

    def test_token_for_other_email_rejected(self):
        token = self.issuer.issue({"email": "intruder@example.com"}, timedelta(hours=1))
        self.assertEqual(self._get(token).status_code, 401)

    def test_expired_admin_token_rejected(self):
        token = self.issuer.issue({"email": "admin@example.com"}, timedelta(seconds=-5))
        self.assertEqual(self._get(token).status_code, 401)

    def test_missing_token_rejected(self):
        self.assertEqual(self.client.get("/api/users/admin/me").status_code, 401)


if __name__ == '__main__':
    unittest.main()
