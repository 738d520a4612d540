"""
trellokit HTTP module.

Endpoint templating and JSON request execution.
"""

from .endpoints import Endpoint, EndpointFactory, EntityRequestType
from .repository import JsonRepository

__all__ = [
    "Endpoint",
    "EndpointFactory",
    "EntityRequestType",
    "JsonRepository",
]
