"""
Organization collections.

Read-only and writable views of the organizations a member belongs to.
"""

import logging
from typing import TYPE_CHECKING, Optional

from ..auth import TrelloAuthorization
from ..collection import ReadOnlyCollection
from ..errors import TrelloValidationError
from ..http import EndpointFactory, EntityRequestType
from ..validation import NotNullOrWhiteSpaceRule
from .models import (
    OrganizationCollectionParameters,
    OrganizationData,
    OrganizationFilter,
    parse_organization,
    parse_organizations,
)
from .organization import Organization

if TYPE_CHECKING:
    from ..client import TrelloClient

logger = logging.getLogger(__name__)


class ReadOnlyOrganizationCollection(ReadOnlyCollection[Organization]):
    """
    A read-only collection of organizations.

    Example:
        ```python
        orgs = trello.member("someone").organizations
        orgs.set_filter(OrganizationFilter.PUBLIC)
        await orgs.refresh()

        acme = orgs["ACME Corp"]  # matches id, name or display name
        ```
    """

    def __init__(
        self,
        owner_id: str,
        trello: "TrelloClient",
        auth: Optional[TrelloAuthorization] = None,
    ) -> None:
        super().__init__(owner_id, trello, auth)
        self.parameters = OrganizationCollectionParameters()

    @classmethod
    def from_collection(
        cls,
        source: "ReadOnlyOrganizationCollection",
        auth: Optional[TrelloAuthorization] = None,
    ) -> "ReadOnlyOrganizationCollection":
        """
        Build a new collection for the same owner as ``source``.

        The copy gets its own parameters, so filters set on either side do
        not leak into the other. Items are not copied; the new collection
        starts stale.

        Args:
            source: Collection to copy
            auth: Credentials for the copy; defaults to the source's
        """
        collection = cls(source.owner_id, source.trello, auth or source.auth)
        collection.limit = source.limit
        collection.parameters = source.parameters.model_copy(deep=True)
        return collection

    def __getitem__(self, key):
        """Index by position (int) or look up by id, name or display name (str)."""
        if isinstance(key, str):
            return self.get_by_key(key)
        return super().__getitem__(key)

    def get_by_key(self, key: str) -> Optional[Organization]:
        """
        Retrieve the organization matching ``key``.

        Matches on id, name and display name. Comparison is case-sensitive.
        Only the current snapshot is searched.

        Args:
            key: The key to match

        Returns:
            The first matching organization, or None if none found
        """
        for org in self._items:
            if key in (org.id, org.name, org.display_name):
                return org
        return None

    async def find(self, key: str) -> Optional[Organization]:
        """Like get_by_key(), but loads the collection first if it is stale."""
        await self.ensure_fresh()
        return self.get_by_key(key)

    def set_filter(self, org_filter: OrganizationFilter) -> None:
        """
        Restrict which organizations the next refresh requests.

        Replaces any filter set before. Does not touch the network.
        """
        self.parameters.filter = OrganizationFilter(org_filter)

    async def _update(self) -> None:
        self._incorporate_limit(self.parameters)

        endpoint = EndpointFactory.build(
            EntityRequestType.MEMBER_READ_ORGANIZATIONS, {"_id": self.owner_id}
        )
        new_data = await self.trello.repository.execute(
            self.auth, endpoint, self.parameters.to_query()
        )

        orgs = []
        for data in parse_organizations(new_data):
            org = self.trello.cache.get_or_create(
                Organization, data, self.auth, self._create_entity
            )
            org.json = data
            orgs.append(org)

        self._items = orgs

    def _create_entity(self, data: OrganizationData, auth: TrelloAuthorization) -> Organization:
        return Organization(data, auth, self.trello)


class OrganizationCollection(ReadOnlyOrganizationCollection):
    """
    A collection of organizations that can create new ones.

    Example:
        ```python
        orgs = trello.me().organizations
        org = await orgs.add("NewCo")

        # The new organization shows up after the next refresh
        await orgs.refresh()
        ```
    """

    async def add(self, name: str) -> Organization:
        """
        Create a new organization.

        The returned organization is registered in the entity cache but not
        inserted into this collection; refresh to see it listed.

        Args:
            name: The name of the organization to add

        Returns:
            The Organization generated by Trello

        Raises:
            TrelloValidationError: If ``name`` is None, empty or whitespace
            TrelloRequestError: If the request fails or the response is not
                an organization
        """
        error = NotNullOrWhiteSpaceRule.instance.validate(name)
        if error is not None:
            raise TrelloValidationError(name, [error])

        data = OrganizationData(name=name)

        endpoint = EndpointFactory.build(EntityRequestType.MEMBER_WRITE_CREATE_ORGANIZATION)
        new_data = await self.trello.repository.execute(self.auth, endpoint, body=data)

        created = parse_organization(new_data)
        org = self.trello.cache.get_or_create(
            Organization, created, self.auth, self._create_entity
        )
        org.json = created
        logger.debug("Created organization %s (%s)", org.id, org.name)
        return org
