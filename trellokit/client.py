"""
Main trellokit client.

This is the primary interface users interact with.
"""

from typing import Optional

from .auth import TrelloAuthorization
from .caching import EntityCache
from .config import TrelloConfig, load_config
from .http import JsonRepository
from .members import Me, Member
from .utils.log import configure_logging


class TrelloClient:
    """
    Main client for the Trello organization API.

    Holds the configuration, the JSON repository that talks to the API and
    the entity cache shared by every collection created through it.

    Example:
        ```python
        from trellokit import TrelloClient

        # Initialize from environment variables
        trello = await TrelloClient.create()

        # Or with explicit credentials
        trello = await TrelloClient.create(
            app_key="your-app-key",
            user_token="your-user-token"
        )

        orgs = await trello.me().organizations.list()
        new_org = await trello.me().organizations.add("Acme")
        ```
    """

    def __init__(
        self,
        config: TrelloConfig,
        repository: JsonRepository,
        cache: Optional[EntityCache] = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            config: trellokit configuration
            repository: JSON repository used for every request
            cache: Entity cache; a new one is created when omitted

        Note:
            Use TrelloClient.create() instead of direct instantiation.
        """
        self.config = config
        self.repository = repository
        self.cache = cache if cache is not None else EntityCache()
        self.auth = TrelloAuthorization(
            app_key=config.app_key,
            user_token=config.user_token,
        )
        self._me: Optional[Me] = None

    @classmethod
    async def create(
        cls,
        app_key: Optional[str] = None,
        user_token: Optional[str] = None,
        **kwargs,
    ) -> "TrelloClient":
        """
        Create and initialize a client.

        Args:
            app_key: Trello application key (optional, loads from env)
            user_token: Trello user token (optional, loads from env)
            **kwargs: Additional configuration options

        Returns:
            Initialized TrelloClient

        Raises:
            ValidationError: If required configuration is missing or invalid
        """
        config_kwargs = kwargs.copy()
        if app_key:
            config_kwargs["app_key"] = app_key
        if user_token:
            config_kwargs["user_token"] = user_token

        config = load_config(**config_kwargs)

        if config.debug:
            configure_logging(debug=True)

        repository = JsonRepository(config)
        return cls(config=config, repository=repository)

    def me(self) -> Me:
        """Return the authenticated member. The same instance on every call."""
        if self._me is None:
            self._me = Me(self)
        return self._me

    def member(self, member_id: str) -> Member:
        """
        Return a member by id or username.

        Asking for ``"me"`` returns the authenticated member.
        """
        if member_id == Me.ID:
            return self.me()
        return Member(member_id, self)

    async def close(self) -> None:
        """Close the client and cleanup resources."""
        await self.repository.close()

    async def __aenter__(self) -> "TrelloClient":
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
