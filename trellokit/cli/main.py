"""
trellokit CLI - Command-line interface for Trello organizations.

Usage:
    trellokit orgs list       List a member's organizations
    trellokit orgs get        Find an organization by id, name or display name
    trellokit orgs create     Create an organization
"""

import typer

from ..utils.log import configure_logging
from .commands import orgs

# Create the main Typer app
app = typer.Typer(
    name="trellokit",
    help="Async client for Trello organizations",
    add_completion=False,
)

# Create orgs subcommand group
orgs_app = typer.Typer(help="Manage organizations")
orgs_app.command(name="list")(orgs.orgs_list_command)
orgs_app.command(name="get")(orgs.orgs_get_command)
orgs_app.command(name="create")(orgs.orgs_create_command)
app.add_typer(orgs_app, name="orgs")


@app.callback()
def callback(
    debug: bool = typer.Option(False, "--debug", help="Log requests to stderr"),
) -> None:
    """
    trellokit - Trello organizations from the command line.

    Credentials come from TRELLO_APP_KEY and TRELLO_USER_TOKEN.
    """
    configure_logging(debug=debug)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
