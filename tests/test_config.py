"""Unit tests for acme_auth.core.config: settings validation."""

import os
import unittest
from unittest.mock import patch

from pydantic import ValidationError

from acme_auth.core.config import Settings

REQUIRED = {
    "GITHUB_CLIENT_ID": "test-client-id",
    "GITHUB_CLIENT_SECRET": "test-client-secret",
    "JWT_SECRET": "test-jwt-secret-0123456789abcdef0123",
}


def _settings(**overrides: object) -> Settings:
    values: dict[str, object] = dict(REQUIRED)
    values.update(overrides)
    return Settings(_env_file=None, **values)


class TestDefaults(unittest.TestCase):
    """Optional settings fall back to the documented defaults."""

    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self) -> None:
        settings = _settings()
        self.assertEqual(settings.PORT, 3000)
        self.assertEqual(settings.DATABASE_URL, "postgresql://localhost/acme_db")
        self.assertEqual(settings.JWT_ALGORITHM, "HS256")
        self.assertIsNone(settings.JWT_EXPIRE_MINUTES)
        self.assertEqual(settings.GITHUB_OAUTH_URL, "https://github.com")
        self.assertEqual(settings.GITHUB_API_URL, "https://api.github.com")


class TestValidation(unittest.TestCase):
    """Invalid values are rejected at construction time."""

    def test_blank_client_id_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(GITHUB_CLIENT_ID="  ")

    def test_blank_jwt_secret_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(JWT_SECRET="")

    def test_non_sql_database_url_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(DATABASE_URL="mysql://localhost/acme_db")

    def test_postgres_alias_normalized(self) -> None:
        settings = _settings(DATABASE_URL="postgres://u:p@db:5432/acme_db")
        self.assertEqual(settings.DATABASE_URL, "postgresql://u:p@db:5432/acme_db")

    def test_port_range(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(PORT=0)
        with self.assertRaises(ValidationError):
            _settings(PORT=70000)

    def test_asymmetric_algorithm_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(JWT_ALGORITHM="RS256")

    def test_algorithm_normalized(self) -> None:
        self.assertEqual(_settings(JWT_ALGORITHM=" hs512 ").JWT_ALGORITHM, "HS512")

    def test_expire_minutes_range(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(JWT_EXPIRE_MINUTES=0)
        self.assertEqual(_settings(JWT_EXPIRE_MINUTES=60).JWT_EXPIRE_MINUTES, 60)

    def test_github_url_trailing_slash_stripped(self) -> None:
        settings = _settings(GITHUB_API_URL="https://github.example.com/api/v3/")
        self.assertEqual(settings.GITHUB_API_URL, "https://github.example.com/api/v3")

    def test_github_url_scheme_required(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(GITHUB_OAUTH_URL="github.com")


if __name__ == "__main__":
    unittest.main()
