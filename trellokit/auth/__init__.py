"""
trellokit authorization module.
"""

from .models import TrelloAuthorization

__all__ = ["TrelloAuthorization"]
