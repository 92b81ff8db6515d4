"""Tests for Settings loaded from the environment."""

import os
import unittest
from unittest.mock import patch

from api.config import Settings


class TestSettingsFromEnv(unittest.TestCase):

    @patch.dict(os.environ, {}, clear=True)
    def test_missing_secret_does_not_raise_on_load(self):
        """Registration only needs the work factor, so loading must succeed."""
        settings = Settings.from_env()

        self.assertIsNone(settings.jwt_secret_key)
        self.assertEqual(settings.bcrypt_rounds, 12)

    @patch.dict(os.environ, {"JWT_SECRET_KEY": ""}, clear=True)
    def test_empty_secret_treated_as_missing(self):
        self.assertIsNone(Settings.from_env().jwt_secret_key)

    @patch.dict(os.environ, {"JWT_SECRET_KEY": "abc"}, clear=True)
    def test_defaults(self):
        settings = Settings.from_env()

        self.assertEqual(settings.jwt_secret_key, "abc")
        self.assertEqual(settings.jwt_algorithm, "HS256")
        self.assertEqual(settings.jwt_expiration_days, 5)
        self.assertEqual(settings.bcrypt_rounds, 12)

    @patch.dict(os.environ, {
        "JWT_SECRET_KEY": "abc",
        "JWT_EXPIRATION_DAYS": "1",
        "BCRYPT_ROUNDS": "10",
    }, clear=True)
    def test_overrides(self):
        settings = Settings.from_env()

        self.assertEqual(settings.jwt_expiration_days, 1)
        self.assertEqual(settings.bcrypt_rounds, 10)


class TestSettingsValidate(unittest.TestCase):

    def test_missing_secret_raises(self):
        with self.assertRaises(ValueError) as ctx:
            Settings().validate()
        self.assertIn("JWT_SECRET_KEY", str(ctx.exception))

    def test_secret_present_passes(self):
        Settings(jwt_secret_key="abc").validate()


if __name__ == '__main__':
    unittest.main()
