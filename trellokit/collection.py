"""
Base classes for cached, lazily refreshed entity collections.
"""

import asyncio
import logging
from typing import TYPE_CHECKING, Any, Dict, Generic, Iterator, List, Optional, TypeVar

from pydantic import BaseModel, Field

from .auth import TrelloAuthorization

if TYPE_CHECKING:
    from .client import TrelloClient

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CollectionParameters(BaseModel):
    """Query parameters shared by every collection read."""

    limit: Optional[int] = Field(None, ge=1)

    def to_query(self) -> Dict[str, Any]:
        """Return the parameters that are set, serialized for the query string."""
        return self.model_dump(mode="json", exclude_none=True)


class ReadOnlyCollection(Generic[T]):
    """
    Ordered, cached view of the entities a remote owner holds.

    The collection holds references to entities that live in the shared
    EntityCache. It starts stale; the first awaited read (``list()``,
    ``ensure_fresh()``) or an explicit ``refresh()`` loads it. Refreshes for one
    instance are serialized by a lock, and the sync accessors (iteration,
    ``len()``, indexing) only read the last loaded snapshot.

    Subclasses implement ``_update()``, which must replace ``self._items`` only
    after the request succeeded.
    """

    def __init__(
        self,
        owner_id: str,
        trello: "TrelloClient",
        auth: Optional[TrelloAuthorization] = None,
    ) -> None:
        """
        Initialize the collection.

        Args:
            owner_id: Id of the entity that owns the collection (e.g. a member)
            trello: Client providing the repository and the entity cache
            auth: Credentials to use; defaults to the client's
        """
        self.owner_id = owner_id
        self.trello = trello
        self.auth = auth or trello.auth
        self.limit: Optional[int] = trello.config.collection_limit
        self._items: List[T] = []
        self._needs_refresh = True
        self._lock = asyncio.Lock()

    @property
    def items(self) -> List[T]:
        """Snapshot of the current contents."""
        return list(self._items)

    @property
    def needs_refresh(self) -> bool:
        return self._needs_refresh

    def invalidate(self) -> None:
        """Mark the collection stale so the next awaited read reloads it."""
        self._needs_refresh = True

    async def refresh(self, force: bool = True) -> None:
        """
        Reload the collection from the API.

        On failure the previous contents and the stale flag are kept and the
        error propagates unchanged.

        Args:
            force: Reload even if another caller refreshed the collection
                while this one waited for the lock
        """
        async with self._lock:
            if not force and not self._needs_refresh:
                return
            await self._update()
            self._needs_refresh = False
        logger.debug(
            "%s for %s refreshed with %d items",
            type(self).__name__,
            self.owner_id,
            len(self._items),
        )

    async def ensure_fresh(self) -> None:
        """Refresh only if the collection is stale."""
        if self._needs_refresh:
            await self.refresh(force=False)

    async def list(self) -> List[T]:
        """Return the contents, loading them first if the collection is stale."""
        await self.ensure_fresh()
        return self.items

    def _incorporate_limit(self, parameters: CollectionParameters) -> None:
        if self.limit is not None:
            parameters.limit = self.limit

    async def _update(self) -> None:
        raise NotImplementedError

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __repr__(self) -> str:
        return f"<{type(self).__name__} owner={self.owner_id!r} items={len(self._items)}>"
