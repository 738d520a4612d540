"""
Tests for trellokit.config module.
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from trellokit.config import TrelloConfig, load_config


class TestTrelloConfig:
    """Tests for TrelloConfig class."""

    def test_config_creation_with_kwargs(self):
        """Test creating config with keyword arguments."""
        config = TrelloConfig(_env_file=None, app_key="test-app-key")

        assert config.app_key == "test-app-key"
        assert config.user_token is None
        assert config.base_url == "https://api.trello.com/1"
        assert config.timeout == 30.0
        assert config.collection_limit is None
        assert config.debug is False

    def test_config_with_all_options(self):
        """Test creating config with all options."""
        config = TrelloConfig(
            _env_file=None,
            app_key="test-app-key",
            user_token="test-user-token",
            base_url="https://trello.example.com/1/",
            timeout=5,
            collection_limit=20,
            debug=True,
        )

        assert config.user_token == "test-user-token"
        assert config.base_url == "https://trello.example.com/1"
        assert config.timeout == 5
        assert config.collection_limit == 20
        assert config.debug is True

    def test_config_url_validation_invalid(self):
        """Test URL validation with invalid URLs."""
        invalid_urls = [
            "http://api.trello.com/1",  # Must be HTTPS
            "api.trello.com/1",  # Missing protocol
        ]
        for url in invalid_urls:
            with pytest.raises(ValidationError):
                TrelloConfig(_env_file=None, app_key="test-app-key", base_url=url)

    def test_config_app_key_validation_invalid(self):
        """Test that blank application keys are rejected."""
        for key in ["", "   "]:
            with pytest.raises(ValidationError):
                TrelloConfig(_env_file=None, app_key=key)

    def test_config_limit_validation_invalid(self):
        """Test that a non-positive collection limit is rejected."""
        with pytest.raises(ValidationError):
            TrelloConfig(_env_file=None, app_key="test-app-key", collection_limit=0)

    @patch.dict(os.environ, {
        "TRELLO_APP_KEY": "env-app-key",
        "TRELLO_USER_TOKEN": "env-user-token",
        "TRELLO_COLLECTION_LIMIT": "50",
        "TRELLO_DEBUG": "true",
    })
    def test_config_from_environment(self):
        """Test loading config from environment variables."""
        config = TrelloConfig(_env_file=None)

        assert config.app_key == "env-app-key"
        assert config.user_token == "env-user-token"
        assert config.collection_limit == 50
        assert config.debug is True

    def test_config_missing_app_key(self):
        """Test that the application key is required."""
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValidationError):
                TrelloConfig(_env_file=None)


class TestLoadConfig:
    """Tests for load_config function."""

    @patch.dict(os.environ, {
        "TRELLO_APP_KEY": "env-app-key",
        "TRELLO_USER_TOKEN": "env-user-token",
    })
    def test_load_config_kwargs_override_env(self):
        """Test that load_config kwargs override environment."""
        config = load_config(_env_file=None, user_token="override-token", debug=True)

        assert isinstance(config, TrelloConfig)
        assert config.user_token == "override-token"
        assert config.debug is True
        # Should still use env for key
        assert config.app_key == "env-app-key"
