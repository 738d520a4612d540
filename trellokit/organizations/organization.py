"""
Organization entity.
"""

import logging
from typing import TYPE_CHECKING, Optional

from ..auth import TrelloAuthorization
from ..http import EndpointFactory, EntityRequestType
from .models import OrganizationData, parse_organization

if TYPE_CHECKING:
    from ..client import TrelloClient

logger = logging.getLogger(__name__)


class Organization:
    """
    A Trello organization (workspace).

    Instances are shared through the client's EntityCache: every collection
    that contains the same remote organization holds this same object, and
    reassigning ``json`` updates what all of them see.

    Example:
        ```python
        orgs = await trello.me().organizations.list()
        org = orgs[0]
        print(org.id, org.name, org.display_name)
        await org.refresh()
        ```
    """

    def __init__(
        self,
        data: OrganizationData,
        auth: TrelloAuthorization,
        trello: "TrelloClient",
    ) -> None:
        """
        Initialize Organization.

        Args:
            data: Payload backing the entity
            auth: Credentials used for this entity's requests
            trello: Client providing the repository and the entity cache
        """
        self.json = data
        self.auth = auth
        self.trello = trello

    @property
    def id(self) -> Optional[str]:
        return self.json.id

    @property
    def name(self) -> Optional[str]:
        return self.json.name

    @property
    def display_name(self) -> Optional[str]:
        return self.json.display_name

    @property
    def description(self) -> Optional[str]:
        return self.json.description

    @property
    def url(self) -> Optional[str]:
        return self.json.url

    @property
    def website(self) -> Optional[str]:
        return self.json.website

    async def refresh(self) -> None:
        """
        Re-read the organization and replace its payload in place.

        Raises:
            TrelloRequestError: If the request fails or the response is not
                an organization
        """
        endpoint = EndpointFactory.build(
            EntityRequestType.ORGANIZATION_READ_REFRESH, {"_id": self.id}
        )
        data = await self.trello.repository.execute(self.auth, endpoint)
        self.json = parse_organization(data)

    async def delete(self) -> None:
        """
        Delete the organization and evict it from the entity cache.

        Collections that still reference it keep doing so until they are
        refreshed.

        Raises:
            TrelloRequestError: If the request fails
        """
        endpoint = EndpointFactory.build(
            EntityRequestType.ORGANIZATION_WRITE_DELETE, {"_id": self.id}
        )
        await self.trello.repository.execute(self.auth, endpoint)
        self.trello.cache.remove(Organization, self.id)
        logger.debug("Deleted organization %s", self.id)

    def __str__(self) -> str:
        return self.display_name or self.name or str(self.id)

    def __repr__(self) -> str:
        return f"<Organization id={self.id!r} name={self.name!r}>"
