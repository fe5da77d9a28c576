"""
Factory for creating short key generation strategies.
"""

from enum import Enum

from shortit.config import Settings
from shortit.exceptions import UnknownBackendError
from shortit.services.key_strategies import (
    KeyStrategy,
    RandomKeyStrategy,
    ShortUUIDKeyStrategy
)


class KeyStrategyType(Enum):
    """Available short key generation strategies"""
    SHORTUUID = "shortuuid"
    RANDOM = "random"


class KeyStrategyFactory:
    """Factory for creating short key generation strategies"""
    
    @classmethod
    def create(cls, strategy_type: KeyStrategyType, settings: Settings) -> KeyStrategy:
        """
        Create a short key generation strategy.
        
        Args:
            strategy_type: Type of strategy to create
            settings: Application settings (key length etc.)
        
        Returns:
            A KeyStrategy instance
        
        Raises:
            UnknownBackendError: If strategy_type is unknown
        """
        if strategy_type == KeyStrategyType.SHORTUUID:
            return ShortUUIDKeyStrategy()
        if strategy_type == KeyStrategyType.RANDOM:
            return RandomKeyStrategy(length=settings.key_length)
        raise UnknownBackendError(f"Unknown key strategy: {strategy_type}")

    @classmethod
    def from_name(cls, name: str, settings: Settings) -> KeyStrategy:
        """Create a strategy from its configured name (e.g. settings.key_strategy)"""
        try:
            strategy_type = KeyStrategyType(name)
        except ValueError:
            raise UnknownBackendError(f"Unknown key strategy: {name!r}") from None
        return cls.create(strategy_type, settings)
