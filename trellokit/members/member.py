"""
Member owners of organization collections.
"""

from typing import TYPE_CHECKING, Optional

from ..organizations import OrganizationCollection, ReadOnlyOrganizationCollection

if TYPE_CHECKING:
    from ..client import TrelloClient


class Member:
    """
    A Trello member, addressed by id or username.

    Only exposes what the member's organizations need: the member's
    organizations can be read but not created through another member.
    """

    def __init__(self, member_id: str, trello: "TrelloClient") -> None:
        self.id = member_id
        self.trello = trello
        self._organizations: Optional[ReadOnlyOrganizationCollection] = None

    @property
    def organizations(self) -> ReadOnlyOrganizationCollection:
        """Organizations the member belongs to. Created on first access."""
        if self._organizations is None:
            self._organizations = ReadOnlyOrganizationCollection(self.id, self.trello)
        return self._organizations

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id!r}>"


class Me(Member):
    """The member the user token belongs to."""

    ID = "me"

    def __init__(self, trello: "TrelloClient") -> None:
        super().__init__(self.ID, trello)

    @property
    def organizations(self) -> OrganizationCollection:
        """Organizations of the authenticated member; supports add()."""
        if self._organizations is None:
            self._organizations = OrganizationCollection(self.id, self.trello)
        return self._organizations
