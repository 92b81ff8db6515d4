"""Tests for application startup: settings check and index creation."""

import unittest
from unittest.mock import MagicMock, patch

from fastapi.testclient import TestClient

from api.config import Settings
from api.main import app

VALID_SETTINGS = Settings(jwt_secret_key='test-secret', bcrypt_rounds=4)


@patch('api.main.MongoProductRepository')
@patch('api.main.MongoUserRepository')
@patch('api.main.get_mongodb_client')
@patch('api.main.get_settings', return_value=VALID_SETTINGS)
class TestLifespan(unittest.TestCase):

    def test_starts_when_indexes_created(self, _settings, mock_get_client, mock_users, mock_products):
        mock_get_client.return_value = MagicMock()
        mock_users.return_value.ensure_indexes.return_value = True
        mock_products.return_value.ensure_indexes.return_value = True

        with TestClient(app) as client:
            self.assertEqual(client.get("/").status_code, 200)

        mock_users.return_value.ensure_indexes.assert_called_once()
        mock_products.return_value.ensure_indexes.assert_called_once()

    def test_refuses_to_start_without_unique_email_index(self, _settings, mock_get_client, mock_users, mock_products):
        mock_get_client.return_value = MagicMock()
        mock_users.return_value.ensure_indexes.return_value = False

        with self.assertLogs('api.main', level='ERROR') as logs:
            with self.assertRaises(RuntimeError) as ctx:
                with TestClient(app):
                    pass

        self.assertIn("idx_users_email", str(ctx.exception))
        self.assertTrue(any("unique user emails" in line for line in logs.output))
        mock_products.return_value.ensure_indexes.assert_not_called()

    def test_product_index_failure_is_not_fatal(self, _settings, mock_get_client, mock_users, mock_products):
        mock_get_client.return_value = MagicMock()
        mock_users.return_value.ensure_indexes.return_value = True
        mock_products.return_value.ensure_indexes.return_value = False

        with TestClient(app) as client:
            self.assertEqual(client.get("/").status_code, 200)

    def test_starts_when_mongodb_unavailable(self, _settings, mock_get_client, mock_users, mock_products):
        mock_get_client.return_value = None

        with TestClient(app) as client:
            self.assertEqual(client.get("/").status_code, 200)

        mock_users.assert_not_called()

    def test_refuses_to_start_without_jwt_secret(self, mock_settings, mock_get_client, mock_users, mock_products):
        mock_settings.return_value = Settings(bcrypt_rounds=4)

        with self.assertRaises(ValueError) as ctx:
            with TestClient(app):
                pass

        self.assertIn("JWT_SECRET_KEY", str(ctx.exception))
        mock_get_client.assert_not_called()


if __name__ == '__main__':
    unittest.main()
