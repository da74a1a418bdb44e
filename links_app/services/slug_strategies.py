"""
Slug generation strategies for the link shortener.
Uses Strategy Pattern to allow different generation algorithms.
"""

import secrets
import string
from abc import ABC, abstractmethod

from links_app.models.base import URL_SAFE_ALPHABET


class SlugStrategy(ABC):
    """Abstract base class for slug generation strategies"""

    @abstractmethod
    def generate(self) -> str:
        """
        Generate a candidate slug.

        Uniqueness is not checked here: the links table enforces it and
        the service retries on collision.
        """
        pass


class RandomSlugStrategy(SlugStrategy):
    """
    nanoid-style random slugs over the URL-safe alphabet (64 characters).

    6 characters give 64^6 (~6.9e10) possible slugs.
    """

    alphabet = URL_SAFE_ALPHABET

    def __init__(self, length: int = 6):
        if length < 1:
            raise ValueError(f"Slug length must be positive, got {length}")
        self.length = length

    def generate(self) -> str:
        return "".join(secrets.choice(self.alphabet) for _ in range(self.length))


class AlphanumericSlugStrategy(RandomSlugStrategy):
    """
    Random slugs using letters and digits only.

    Easier to read aloud and select with a double click than slugs
    containing '-' or '_'.
    """

    alphabet = string.digits + string.ascii_lowercase + string.ascii_uppercase
