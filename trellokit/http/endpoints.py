"""
Endpoint templates for the Trello REST API.

Each request type maps to an HTTP method and a path template. Templates use
str.format placeholders named after the parameters the caller supplies, e.g.
``{"_id": "me"}`` for ``members/{_id}/organizations``.
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel


class EntityRequestType(str, Enum):
    """Request types known to the endpoint factory."""

    MEMBER_READ_ORGANIZATIONS = "Member_Read_Organizations"
    MEMBER_WRITE_CREATE_ORGANIZATION = "Member_Write_CreateOrganization"
    ORGANIZATION_READ_REFRESH = "Organization_Read_Refresh"
    ORGANIZATION_WRITE_DELETE = "Organization_Write_Delete"


class Endpoint(BaseModel):
    """A resolved request: HTTP method plus path relative to the API root."""

    method: str
    path: str

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return f"{self.method} {self.path}"


_TEMPLATES: Dict[EntityRequestType, tuple] = {
    EntityRequestType.MEMBER_READ_ORGANIZATIONS: ("GET", "members/{_id}/organizations"),
    EntityRequestType.MEMBER_WRITE_CREATE_ORGANIZATION: ("POST", "organizations"),
    EntityRequestType.ORGANIZATION_READ_REFRESH: ("GET", "organizations/{_id}"),
    EntityRequestType.ORGANIZATION_WRITE_DELETE: ("DELETE", "organizations/{_id}"),
}


class EndpointFactory:
    """
    Builds Endpoint instances from request types.

    Example:
        ```python
        endpoint = EndpointFactory.build(
            EntityRequestType.MEMBER_READ_ORGANIZATIONS, {"_id": "me"}
        )
        # GET members/me/organizations
        ```
    """

    @staticmethod
    def build(
        request_type: EntityRequestType,
        params: Optional[Dict[str, Any]] = None,
    ) -> Endpoint:
        """
        Resolve a request type into an endpoint.

        Args:
            request_type: Which request to build
            params: Values for the path template placeholders

        Returns:
            Endpoint with the placeholders filled in

        Raises:
            KeyError: If the template needs a parameter that was not supplied
        """
        method, template = _TEMPLATES[EntityRequestType(request_type)]
        path = template.format(**(params or {}))
        return Endpoint(method=method, path=path)
