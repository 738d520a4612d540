"""
Validation rules applied to arguments before any request is sent.
"""

from typing import Any, Optional, Protocol


class ValidationRule(Protocol):
    """A rule returns an error message for an invalid value, None otherwise."""

    def validate(self, value: Any) -> Optional[str]: ...


class NotNullOrWhiteSpaceRule:
    """Rejects None, empty strings and strings made only of whitespace."""

    instance: "NotNullOrWhiteSpaceRule"

    def validate(self, value: Optional[str]) -> Optional[str]:
        if value is None or not str(value).strip():
            return "Value cannot be null, empty, or whitespace."
        return None


NotNullOrWhiteSpaceRule.instance = NotNullOrWhiteSpaceRule()
