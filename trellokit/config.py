"""
trellokit configuration management.

Loads configuration from environment variables or .env file.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TrelloConfig(BaseSettings):
    """
    trellokit configuration settings.

    Can be loaded from:
    1. Environment variables (TRELLO_APP_KEY, TRELLO_USER_TOKEN, etc.)
    2. .env file in project root
    3. Direct instantiation with kwargs

    Example:
        ```python
        # From environment
        config = TrelloConfig()

        # Direct instantiation
        config = TrelloConfig(
            app_key="your-app-key",
            user_token="your-user-token"
        )
        ```
    """

    model_config = SettingsConfigDict(
        env_prefix="TRELLO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Credentials
    app_key: str = Field(
        ...,
        description="Trello application (developer) key",
    )

    user_token: Optional[str] = Field(
        default=None,
        description="Trello user token (required by the API for write operations)",
    )

    # API
    base_url: str = Field(
        default="https://api.trello.com/1",
        description="Base URL of the Trello REST API",
    )

    timeout: float = Field(
        default=30.0,
        gt=0,
        description="HTTP timeout in seconds",
    )

    # Collections
    collection_limit: Optional[int] = Field(
        default=None,
        ge=1,
        description="Default item limit applied to newly created collections",
    )

    # Debug
    debug: bool = Field(
        default=False,
        description="Enable debug logging",
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Ensure the API URL is https and has no trailing slash."""
        if not v.startswith("https://"):
            raise ValueError("base_url must start with https://")
        return v.rstrip("/")

    @field_validator("app_key")
    @classmethod
    def validate_app_key(cls, v: str) -> str:
        """Ensure the application key is not empty."""
        if not v or not v.strip():
            raise ValueError("app_key must not be empty")
        return v.strip()


def load_config(**kwargs) -> TrelloConfig:
    """
    Load trellokit configuration.

    Priority order:
    1. Keyword arguments
    2. Environment variables (TRELLO_*)
    3. .env file

    Args:
        **kwargs: Override configuration values

    Returns:
        TrelloConfig instance

    Raises:
        ValidationError: If required fields are missing or invalid

    Example:
        ```python
        config = load_config(debug=True)
        ```
    """
    return TrelloConfig(**kwargs)
