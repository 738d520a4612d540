"""
trellokit organizations module.

Organization entities and the collections that list and create them.
"""

from .collections import OrganizationCollection, ReadOnlyOrganizationCollection
from .models import (
    OrganizationCollectionParameters,
    OrganizationData,
    OrganizationFilter,
    parse_organization,
    parse_organizations,
)
from .organization import Organization

__all__ = [
    "Organization",
    "OrganizationData",
    "OrganizationFilter",
    "OrganizationCollectionParameters",
    "ReadOnlyOrganizationCollection",
    "OrganizationCollection",
    "parse_organization",
    "parse_organizations",
]
