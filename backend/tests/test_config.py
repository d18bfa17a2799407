"""
Unit tests for settings and connection URL parsing.
"""

import pytest

from feature_board.core.config import Settings, parse_database_name
from feature_board.core.exceptions import ConfigurationError


class TestParseDatabaseName:
    """Test database name extraction from the connection URL"""

    @pytest.mark.parametrize(
        "url,expected",
        [
            ("mongodb://localhost:27017/featureRequestBoard", "featureRequestBoard"),
            ("mongodb://db/board?retryWrites=true&w=majority", "board"),
            ("mongodb+srv://user:pw@cluster.example.net/prod?tls=true", "prod"),
        ],
    )
    def test_valid_urls(self, url, expected):
        assert parse_database_name(url) == expected

    @pytest.mark.parametrize(
        "url",
        ["mongodb://localhost:27017/", "mongodb://user:pw@localhost:27017"],
    )
    def test_missing_database(self, url):
        with pytest.raises(ConfigurationError):
            parse_database_name(url)


class TestSettings:
    """Test derived settings"""

    def test_defaults(self):
        settings = Settings(
            mongodb_url="mongodb://localhost:27017/featureRequestBoard",
            identity_token_key="",
            board_id="board",
            port=5001,
        )

        assert settings.database_name == "featureRequestBoard"
        assert settings.identity_mode == "jwks"
        assert settings.board_id == "board"
        assert settings.port == 5001

    def test_static_key_mode(self):
        settings = Settings(identity_token_key="secret")

        assert settings.identity_mode == "static_key"

    def test_is_development(self):
        assert Settings(environment="development").is_development
        assert not Settings(environment="production").is_development

    def test_firebase_issuer_derived_in_jwks_mode(self):
        settings = Settings(identity_token_key="", identity_token_audience="proj")

        assert settings.identity_issuer == "https://securetoken.google.com/proj"

    def test_no_issuer_for_static_key_without_config(self):
        settings = Settings(
            identity_token_key="secret",
            identity_token_audience="proj",
            identity_token_issuer="",
        )

        assert settings.identity_issuer is None
