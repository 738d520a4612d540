"""
trellokit validation module.
"""

from .rules import NotNullOrWhiteSpaceRule, ValidationRule

__all__ = ["NotNullOrWhiteSpaceRule", "ValidationRule"]
