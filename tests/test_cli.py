"""
Tests for the trellokit CLI.
"""

from unittest.mock import AsyncMock, patch

import pytest
from typer.testing import CliRunner

from trellokit.cli.main import app
from trellokit.errors import TrelloRequestError

from tests.conftest import setup_execute

runner = CliRunner()


@pytest.fixture(autouse=True)
def no_log_handlers():
    """Keep the CLI callback from installing handlers during tests."""
    with patch("trellokit.cli.main.configure_logging"):
        yield


@pytest.fixture
def patched_create(trello):
    """Make TrelloClient.create() return the mock-backed test client."""
    with patch(
        "trellokit.cli.commands.orgs.TrelloClient.create",
        new=AsyncMock(return_value=trello),
    ) as mock_create:
        yield mock_create


class TestOrgsCommands:
    """Tests for the orgs command group."""

    def test_list(self, patched_create, mock_repository, sample_org_payloads):
        """Test listing organizations."""
        execute = setup_execute(mock_repository, sample_org_payloads)

        result = runner.invoke(app, ["orgs", "list", "--filter", "members", "--limit", "5"])

        assert result.exit_code == 0
        assert "Acme" in result.output
        assert "Globex" in result.output
        endpoint, params = execute.call_args.args[1:]
        assert endpoint.path == "members/me/organizations"
        assert params == {"filter": "members", "limit": 5}

    def test_list_other_member(self, patched_create, mock_repository):
        """Test listing another member's organizations."""
        execute = setup_execute(mock_repository, [])

        result = runner.invoke(app, ["orgs", "list", "--member", "someone"])

        assert result.exit_code == 0
        assert "No organizations found" in result.output
        assert execute.call_args.args[1].path == "members/someone/organizations"

    def test_list_request_error(self, patched_create, mock_repository):
        """Test that request failures exit with status 1."""
        setup_execute(mock_repository, side_effect=TrelloRequestError("HTTP 401", status_code=401))

        result = runner.invoke(app, ["orgs", "list"])

        assert result.exit_code == 1
        assert "HTTP 401" in result.output

    def test_get(self, patched_create, mock_repository, sample_org_payloads):
        """Test looking up an organization by display name."""
        setup_execute(mock_repository, sample_org_payloads)

        result = runner.invoke(app, ["orgs", "get", "ACME Corp"])

        assert result.exit_code == 0
        assert "org1" in result.output

    def test_get_not_found(self, patched_create, mock_repository, sample_org_payloads):
        """Test that a miss exits with status 1."""
        setup_execute(mock_repository, sample_org_payloads)

        result = runner.invoke(app, ["orgs", "get", "acme corp"])

        assert result.exit_code == 1
        assert "not found" in result.output

    def test_create(self, patched_create, mock_repository):
        """Test creating an organization."""
        execute = setup_execute(mock_repository, {"id": "org9", "name": "NewCo"})

        result = runner.invoke(app, ["orgs", "create", "NewCo"])

        assert result.exit_code == 0
        assert "created successfully" in result.output
        assert "org9" in result.output
        assert execute.call_args.kwargs["body"].name == "NewCo"

    def test_create_blank_name(self, patched_create, mock_repository):
        """Test that validation errors exit with status 1 and no request."""
        result = runner.invoke(app, ["orgs", "create", "   "])

        assert result.exit_code == 1
        mock_repository.execute.assert_not_called()
