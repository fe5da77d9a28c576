"""
Short key generation strategies for URL shortener.
Uses Strategy Pattern to allow different generation algorithms.

Keys are never checked against the store: collisions are considered
negligible and a colliding insert simply overwrites the older mapping.
"""

import secrets
import string
from abc import ABC, abstractmethod

import shortuuid


class KeyStrategy(ABC):
    """Abstract base class for short key generation strategies"""
    
    @abstractmethod
    def generate(self) -> str:
        """
        Generate a short key.
        
        Returns:
            A new, effectively unique key string
        """
        pass


class ShortUUIDKeyStrategy(KeyStrategy):
    """
    Random UUID encoded with the base57 alphabet (22 characters).
    
    Pros: 128 bits of randomness, no coordination needed
    Cons: Longer than counter-based keys
    """
    
    def generate(self) -> str:
        return shortuuid.uuid()


class RandomKeyStrategy(KeyStrategy):
    """
    Fixed-length random string of letters and digits.
    
    Pros: Short, configurable length
    Cons: Collision risk grows quickly for small lengths
    """
    
    def __init__(self, length: int = 8):
        if length < 1:
            raise ValueError(f"Key length must be positive, got {length}")
        self.length = length
        self.characters = string.ascii_letters + string.digits
    
    def generate(self) -> str:
        """Generate a random string of the configured length"""
        return ''.join(secrets.choice(self.characters) for _ in range(self.length))
