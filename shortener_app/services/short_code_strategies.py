"""
Short code generation strategies for URL shortener.
Uses Strategy Pattern to allow different generation algorithms.
"""

import string
import random
import secrets
from abc import ABC, abstractmethod


class ShortCodeStrategy(ABC):
    """Abstract base class for short code generation strategies"""

    characters = string.ascii_letters + string.digits

    def __init__(self, length: int = 6):
        if length < 1:
            raise ValueError(f"Short code length must be positive, got {length}")
        self.length = length

    @abstractmethod
    def generate(self) -> str:
        """
        Generate a short code.

        Returns:
            A string of `length` characters drawn from a-z, A-Z and 0-9
        """
        pass


class RandomShortCodeStrategy(ShortCodeStrategy):
    """
    Pseudo-random generation strategy (default).
    Each position is drawn uniformly from 62 alphanumeric characters.

    Pros: Simple, fast
    Cons: Not cryptographically secure, no collision check (last write wins)
    """

    def generate(self) -> str:
        """Generate a random string of specified length"""
        return ''.join(random.choice(self.characters) for _ in range(self.length))


class SecureRandomShortCodeStrategy(ShortCodeStrategy):
    """
    Same alphabet and length as RandomShortCodeStrategy, but drawn from
    the OS CSPRNG so codes can't be predicted from earlier ones.
    """

    def generate(self) -> str:
        return ''.join(secrets.choice(self.characters) for _ in range(self.length))
