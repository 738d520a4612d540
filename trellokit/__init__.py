"""
trellokit - async client for Trello organizations.

Example:
    ```python
    from trellokit import OrganizationFilter, TrelloClient

    async with await TrelloClient.create() as trello:
        orgs = trello.me().organizations
        orgs.set_filter(OrganizationFilter.MEMBERS)

        # Loaded on first read, cached afterwards
        for org in await orgs.list():
            print(org.display_name)

        # Lookup by id, name or display name
        acme = orgs["ACME Corp"]

        # Create; refresh to see it in the collection
        new_org = await orgs.add("NewCo")
        await orgs.refresh()
    ```
"""

from .auth import TrelloAuthorization
from .caching import EntityCache
from .client import TrelloClient
from .config import TrelloConfig, load_config
from .errors import TrelloError, TrelloRequestError, TrelloValidationError
from .members import Me, Member
from .organizations import (
    Organization,
    OrganizationCollection,
    OrganizationData,
    OrganizationFilter,
    ReadOnlyOrganizationCollection,
)

__version__ = "0.1.0"

__all__ = [
    # Main client
    "TrelloClient",
    "TrelloConfig",
    "load_config",
    "TrelloAuthorization",
    "EntityCache",
    # Errors
    "TrelloError",
    "TrelloRequestError",
    "TrelloValidationError",
    # Members
    "Member",
    "Me",
    # Organizations
    "Organization",
    "OrganizationData",
    "OrganizationFilter",
    "ReadOnlyOrganizationCollection",
    "OrganizationCollection",
]
