"""
trellokit auth models.
"""

from typing import Dict, Optional

from pydantic import BaseModel, Field


class TrelloAuthorization(BaseModel):
    """
    Credentials sent with every request.

    Trello authenticates requests with an application key and, for anything
    that touches private data or writes, a user token. Both travel as query
    parameters.
    """

    app_key: str = Field(..., min_length=1)
    user_token: Optional[str] = None

    model_config = {"frozen": True}

    def as_query(self) -> Dict[str, str]:
        """Return the credentials as query-string parameters."""
        params = {"key": self.app_key}
        if self.user_token:
            params["token"] = self.user_token
        return params
