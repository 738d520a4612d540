"""
trellokit members module.
"""

from .member import Me, Member

__all__ = ["Member", "Me"]
