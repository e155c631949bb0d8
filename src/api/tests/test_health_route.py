"""Tests for the /health endpoint."""

import unittest
from unittest.mock import MagicMock, patch

from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from api.dependencies import get_settings
from api.main import app
from utils.config import Settings


class TestHealth(unittest.TestCase):

    def setUp(self):
        self.client = TestClient(app)
        app.dependency_overrides[get_settings] = lambda: Settings(
            jwt_secret="test-secret", mongo_url="mongodb://db", enable_email=True,
        )

    def tearDown(self):
        app.dependency_overrides.clear()

    @patch('api.routes.health.get_mongodb_client')
    def test_healthy_when_mongo_pings(self, mock_get_client):
        mock_get_client.return_value = MagicMock()

        response = self.client.get("/health")

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertTrue(data["success"])
        self.assertEqual(data["services"]["mongodb"]["status"], "healthy")
        self.assertEqual(data["services"]["email"]["status"], "enabled")
        self.assertEqual(data["services"]["ai"]["status"], "disabled")

    @patch('api.routes.health.get_mongodb_client', return_value=None)
    def test_degraded_without_mongo(self, _mock_get_client):
        response = self.client.get("/health")

        self.assertEqual(response.status_code, 503)
        self.assertEqual(response.json()["status"], "degraded")

    @patch('api.routes.health.get_mongodb_client')
    def test_degraded_when_ping_fails(self, mock_get_client):
        mock_get_client.return_value.admin.command.side_effect = ServerSelectionTimeoutError("down")

        response = self.client.get("/health")

        self.assertEqual(response.status_code, 503)
        self.assertFalse(response.json()["success"])


if __name__ == '__main__':
    unittest.main()
