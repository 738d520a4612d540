"""
Shared entity cache.

Maps (entity type, remote id) to the single local instance for that remote
object, so every collection that references it observes the same object.
"""

import logging
from typing import Callable, Dict, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel

from .auth import TrelloAuthorization

logger = logging.getLogger(__name__)

T = TypeVar("T")


class EntityCache:
    """
    Registry of cached entities with lookup-or-insert semantics.

    Example:
        ```python
        cache = EntityCache()
        org = cache.get_or_create(Organization, data, auth, factory)
        assert cache.get_or_create(Organization, data, auth, factory) is org
        ```
    """

    def __init__(self) -> None:
        self._entries: Dict[Tuple[type, str], object] = {}

    def get_or_create(
        self,
        entity_type: Type[T],
        data: BaseModel,
        auth: TrelloAuthorization,
        factory: Callable[[BaseModel, TrelloAuthorization], T],
    ) -> T:
        """
        Return the cached entity for ``data.id``, creating it if absent.

        The cached entity's payload is left untouched; callers that fetched
        fresh data reassign it themselves. Payloads without an id cannot be
        matched to a remote object, so they get a new, uncached entity.

        Args:
            entity_type: Entity class, part of the cache key
            data: Payload carrying the remote id
            auth: Credentials handed to the factory
            factory: Builds a new entity from payload and credentials

        Returns:
            The canonical local instance
        """
        if data.id is None:
            return factory(data, auth)

        key = (entity_type, data.id)
        entity = self._entries.get(key)
        if entity is None:
            entity = factory(data, auth)
            self._entries[key] = entity
            logger.debug("Cached new %s %s", entity_type.__name__, data.id)
        return entity

    def get(self, entity_type: Type[T], remote_id: str) -> Optional[T]:
        """Return the cached entity or None."""
        return self._entries.get((entity_type, remote_id))

    def remove(self, entity_type: type, remote_id: str) -> None:
        """Evict an entity. Missing entries are ignored."""
        self._entries.pop((entity_type, remote_id), None)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
