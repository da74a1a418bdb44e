"""
Database models for the link shortener.

Importing this package registers every table with Base.metadata.
"""

from .link import Link
from .tag import Tag
from .visit import Visit

__all__ = ["Link", "Tag", "Visit"]
