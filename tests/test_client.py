"""
Tests for trellokit.client module.
"""

import os
from unittest.mock import AsyncMock, patch

import pytest

from trellokit.client import TrelloClient
from trellokit.http import JsonRepository
from trellokit.members import Me, Member
from trellokit.organizations import OrganizationCollection, ReadOnlyOrganizationCollection


class TestTrelloClient:
    """Tests for TrelloClient class."""

    @pytest.mark.asyncio
    async def test_create_with_kwargs(self):
        """Test creating a client with explicit credentials."""
        with patch.dict(os.environ, {}, clear=True):
            trello = await TrelloClient.create(
                app_key="test-app-key",
                user_token="test-user-token",
                _env_file=None,
            )

        assert trello.config.app_key == "test-app-key"
        assert trello.auth.app_key == "test-app-key"
        assert trello.auth.user_token == "test-user-token"
        assert isinstance(trello.repository, JsonRepository)
        assert len(trello.cache) == 0
        await trello.close()

    @pytest.mark.asyncio
    async def test_create_with_debug_configures_logging(self):
        """Test that debug=True installs the log handler."""
        with patch("trellokit.client.configure_logging") as mock_configure:
            trello = await TrelloClient.create(app_key="test-app-key", debug=True, _env_file=None)

        mock_configure.assert_called_once_with(debug=True)
        await trello.close()

    def test_me_is_writable_and_stable(self, trello):
        """Test the authenticated member."""
        me = trello.me()

        assert isinstance(me, Me)
        assert me.id == "me"
        assert trello.me() is me
        assert trello.member("me") is me
        assert isinstance(me.organizations, OrganizationCollection)
        assert me.organizations is me.organizations

    def test_member_is_read_only(self, trello):
        """Test another member's organizations."""
        member = trello.member("someone")

        assert isinstance(member, Member)
        assert type(member.organizations) is ReadOnlyOrganizationCollection
        assert member.organizations.owner_id == "someone"
        assert not hasattr(member.organizations, "add")

    @pytest.mark.asyncio
    async def test_context_manager_closes_repository(self, trello, mock_repository):
        """Test context manager exit closes the repository."""
        async with trello as t:
            assert t is trello

        mock_repository.close.assert_called_once()

    @pytest.mark.asyncio
    async def test_close(self, trello):
        """Test closing the client."""
        trello.repository.close = AsyncMock()

        await trello.close()

        trello.repository.close.assert_called_once()
