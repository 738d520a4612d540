"""
trellokit exceptions.
"""

from typing import Any, List, Optional


class TrelloError(Exception):
    """Base class for all trellokit errors."""


class TrelloValidationError(TrelloError, ValueError):
    """
    Raised before any network call when an argument fails a validation rule.

    Attributes:
        value: The rejected value
        errors: Messages of the rules that rejected it
    """

    def __init__(self, value: Any, errors: List[str]) -> None:
        self.value = value
        self.errors = list(errors)
        super().__init__(f"Invalid value {value!r}: {'; '.join(self.errors)}")


class TrelloRequestError(TrelloError):
    """
    Raised by the JSON repository when a request cannot be completed.

    Covers transport failures, non-2xx responses and bodies that are not JSON.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        url: Optional[str] = None,
        body: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.url = url
        self.body = body
        super().__init__(message)
