"""
JSON request execution for trellokit.

Sends resolved endpoints to the Trello REST API over httpx and returns the
decoded JSON. Every failure surfaces as TrelloRequestError; callers above this
layer do not catch or translate it.
"""

import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import BaseModel

from ..auth import TrelloAuthorization
from ..config import TrelloConfig
from ..errors import TrelloRequestError
from .endpoints import Endpoint

logger = logging.getLogger(__name__)


class JsonRepository:
    """
    Executes endpoints against the Trello API.

    The underlying httpx.AsyncClient is created on first use and reused until
    close() is called.

    Example:
        ```python
        repository = JsonRepository(config)
        endpoint = EndpointFactory.build(
            EntityRequestType.MEMBER_READ_ORGANIZATIONS, {"_id": "me"}
        )
        payloads = await repository.execute(auth, endpoint, {"filter": "all"})
        await repository.close()
        ```
    """

    BODY_SNIPPET_LENGTH = 200

    def __init__(
        self,
        config: TrelloConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize JsonRepository.

        Args:
            config: trellokit configuration (base URL, timeout)
            transport: Optional httpx transport, used by tests
        """
        self.config = config
        self._transport = transport
        self._http_client: Optional[httpx.AsyncClient] = None

    async def _get_http_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                base_url=self.config.base_url + "/",
                timeout=self.config.timeout,
                transport=self._transport,
                headers={"accept": "application/json"},
            )
        return self._http_client

    async def execute(
        self,
        auth: TrelloAuthorization,
        endpoint: Endpoint,
        parameters: Optional[Dict[str, Any]] = None,
        body: Optional[BaseModel] = None,
    ) -> Any:
        """
        Execute an endpoint and decode the response.

        Args:
            auth: Credentials added to the query string
            endpoint: Resolved endpoint (method and path)
            parameters: Extra query-string parameters
            body: Optional payload sent as the JSON body

        Returns:
            Decoded JSON (a list for collection reads, a dict for single
            entities), or None for an empty response

        Raises:
            TrelloRequestError: On transport failure, non-2xx status or a
                body that is not JSON
        """
        params: Dict[str, Any] = dict(parameters or {})
        params.update(auth.as_query())

        json_body = None
        if body is not None:
            json_body = body.model_dump(by_alias=True, exclude_unset=True, exclude_none=True)

        logger.debug("%s params=%s", endpoint, sorted(k for k in params if k != "token"))

        client = await self._get_http_client()
        try:
            response = await client.request(
                endpoint.method,
                endpoint.path,
                params=params,
                json=json_body,
            )
        except httpx.HTTPError as exc:
            logger.warning("%s failed: %s", endpoint, exc)
            raise TrelloRequestError(
                f"Network error calling {endpoint}: {exc}",
                url=endpoint.path,
            ) from exc

        if not response.is_success:
            snippet = response.text[: self.BODY_SNIPPET_LENGTH] if response.text else None
            logger.warning("%s returned HTTP %s", endpoint, response.status_code)
            raise TrelloRequestError(
                f"HTTP {response.status_code} calling {endpoint}",
                status_code=response.status_code,
                url=str(response.request.url.copy_remove_param("token")),
                body=snippet,
            )

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as exc:
            raise TrelloRequestError(
                f"Invalid JSON response from {endpoint}",
                status_code=response.status_code,
                url=endpoint.path,
                body=response.text[: self.BODY_SNIPPET_LENGTH],
            ) from exc

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._http_client:
            await self._http_client.aclose()
            self._http_client = None
