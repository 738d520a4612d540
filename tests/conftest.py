"""
Pytest configuration and fixtures for trellokit tests.

Provides a mock JSON repository and sample organization payloads.
"""

from unittest.mock import AsyncMock

import pytest

from trellokit.client import TrelloClient
from trellokit.config import TrelloConfig
from trellokit.http import JsonRepository


@pytest.fixture
def trello_config():
    """Create a test TrelloConfig."""
    return TrelloConfig(
        _env_file=None,
        app_key="test-app-key",
        user_token="test-user-token",
    )


@pytest.fixture
def mock_repository():
    """Create a mock JsonRepository whose execute() returns an empty list."""
    repository = AsyncMock(spec=JsonRepository)
    repository.execute = AsyncMock(return_value=[])
    repository.close = AsyncMock()
    return repository


@pytest.fixture
def trello(trello_config, mock_repository):
    """Create a test TrelloClient backed by the mock repository."""
    return TrelloClient(config=trello_config, repository=mock_repository)


@pytest.fixture
def sample_org_payloads():
    """Two organization payloads as the API returns them."""
    return [
        {
            "id": "org1",
            "name": "Acme",
            "displayName": "ACME Corp",
            "desc": "Anvils and rockets",
            "url": "https://trello.com/w/acme",
        },
        {
            "id": "org2",
            "name": "Globex",
            "displayName": "Globex Inc",
            "desc": "",
            "url": "https://trello.com/w/globex",
        },
    ]


def setup_execute(repository, return_value=None, side_effect=None):
    """
    Helper function to set what the mock repository's execute() returns.

    Args:
        repository: Mock repository
        return_value: Decoded JSON to return
        side_effect: Exception or callable, passed to AsyncMock
    """
    repository.execute = AsyncMock(return_value=return_value, side_effect=side_effect)
    return repository.execute
