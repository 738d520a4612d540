"""
trellokit orgs command - Organization CLI.

List, look up and create organizations via command line.
"""

import asyncio
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from ...client import TrelloClient
from ...errors import TrelloError
from ...organizations import Organization, OrganizationFilter

console = Console()


def _print_org(org: Organization) -> None:
    console.print(f"ID: [cyan]{org.id}[/cyan]")
    console.print(f"Name: [cyan]{org.name}[/cyan]")
    console.print(f"Display name: [cyan]{org.display_name}[/cyan]")
    if org.description:
        console.print(f"Description: [cyan]{org.description}[/cyan]")
    if org.url:
        console.print(f"URL: [cyan]{org.url}[/cyan]")
    console.print()


def orgs_list_command(
    member: str = typer.Option("me", "--member", "-m", help="Member id or username"),
    org_filter: Optional[OrganizationFilter] = typer.Option(
        None,
        "--filter",
        "-f",
        help="Which organizations to list (all, members, public)",
    ),
    limit: Optional[int] = typer.Option(None, "--limit", "-l", min=1, help="Maximum orgs to return"),
) -> None:
    """
    List a member's organizations.

    Example:
        $ trellokit orgs list
        $ trellokit orgs list --member someone --filter public
    """
    console.print("\n[bold cyan]Organizations[/bold cyan]\n")

    asyncio.run(_list_orgs(member, org_filter, limit))


async def _list_orgs(
    member: str,
    org_filter: Optional[OrganizationFilter],
    limit: Optional[int],
) -> None:
    """Internal async function to list organizations."""
    try:
        async with await TrelloClient.create() as trello:
            orgs = trello.member(member).organizations
            if org_filter is not None:
                orgs.set_filter(org_filter)
            if limit is not None:
                orgs.limit = limit

            items = await orgs.list()
    except (TrelloError, ValidationError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if not items:
        console.print("[yellow]No organizations found[/yellow]\n")
        return

    table = Table(title=f"Organizations (showing {len(items)})")
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Display name", style="magenta")

    for org in items:
        table.add_row(org.id or "", org.name or "", org.display_name or "")

    console.print(table)
    console.print()


def orgs_get_command(
    key: str = typer.Argument(..., help="Organization id, name or display name"),
    member: str = typer.Option("me", "--member", "-m", help="Member id or username"),
) -> None:
    """
    Find one of a member's organizations by id, name or display name.

    Matching is case-sensitive.

    Example:
        $ trellokit orgs get "ACME Corp"
    """
    console.print("\n[bold cyan]Organization Details[/bold cyan]\n")

    asyncio.run(_get_org(key, member))


async def _get_org(key: str, member: str) -> None:
    """Internal async function to look up an organization."""
    try:
        async with await TrelloClient.create() as trello:
            org = await trello.member(member).organizations.find(key)
    except (TrelloError, ValidationError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if org is None:
        console.print(f"[red]Organization not found:[/red] {key}\n")
        raise typer.Exit(1)

    _print_org(org)


def orgs_create_command(
    name: str = typer.Argument(..., help="Organization name"),
) -> None:
    """
    Create a new organization for the authenticated member.

    Example:
        $ trellokit orgs create "NewCo"
    """
    console.print("\n[bold cyan]Creating Organization[/bold cyan]\n")

    asyncio.run(_create_org(name))


async def _create_org(name: str) -> None:
    """Internal async function to create an organization."""
    try:
        async with await TrelloClient.create() as trello:
            org = await trello.me().organizations.add(name)
    except (TrelloError, ValidationError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    console.print("[green]✓[/green] Organization created successfully!\n")
    _print_org(org)
