"""
trellokit organization models.

Pydantic models for organization payloads and collection parameters.
"""

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..collection import CollectionParameters
from ..errors import TrelloRequestError


class OrganizationFilter(str, Enum):
    """Subsets of a member's organizations the API can return."""

    ALL = "all"
    MEMBERS = "members"
    PUBLIC = "public"


class OrganizationData(BaseModel):
    """
    Organization payload as exchanged with the API.

    Field names follow the API's camelCase keys through aliases. Unknown keys
    are kept so nothing the API returns is lost when the payload is reassigned.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: Optional[str] = None
    name: Optional[str] = None
    display_name: Optional[str] = Field(None, alias="displayName")
    description: Optional[str] = Field(None, alias="desc")
    url: Optional[str] = None
    website: Optional[str] = None
    logo_hash: Optional[str] = Field(None, alias="logoHash")
    power_level: Optional[int] = Field(None, alias="powerLevel")
    premium_features: Optional[List[str]] = Field(None, alias="premiumFeatures")
    id_member_creator: Optional[str] = Field(None, alias="idMemberCreator")


class OrganizationCollectionParameters(CollectionParameters):
    """Query parameters of an organization collection read."""

    filter: Optional[OrganizationFilter] = None


def parse_organization(payload: Any) -> OrganizationData:
    """
    Parse one organization payload returned by the API.

    Raises:
        TrelloRequestError: If the payload is not an organization object
    """
    if not isinstance(payload, dict):
        raise TrelloRequestError(
            f"Expected an organization object, got {type(payload).__name__}"
        )
    try:
        return OrganizationData.model_validate(payload)
    except ValidationError as exc:
        raise TrelloRequestError(f"Invalid organization payload: {exc}") from exc


def parse_organizations(payload: Any) -> List[OrganizationData]:
    """
    Parse a list of organization payloads. An empty response is an empty list.

    Raises:
        TrelloRequestError: If the payload is not a list of organization objects
    """
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise TrelloRequestError(
            f"Expected a list of organizations, got {type(payload).__name__}"
        )
    return [parse_organization(item) for item in payload]
