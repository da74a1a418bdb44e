"""
Factory for slug generation strategies.

The strategy name comes from settings.slug_strategy; one instance per
strategy is kept for the life of the process.
"""

from enum import Enum
from typing import Dict, Type, Union

from links_app.config import settings
from links_app.services.slug_strategies import (
    AlphanumericSlugStrategy,
    RandomSlugStrategy,
    SlugStrategy,
)


class SlugStrategyType(Enum):
    """Available slug generation strategies"""
    RANDOM = "random"
    ALPHANUMERIC = "alphanumeric"


STRATEGY_CLASSES: Dict[SlugStrategyType, Type[SlugStrategy]] = {
    SlugStrategyType.RANDOM: RandomSlugStrategy,
    SlugStrategyType.ALPHANUMERIC: AlphanumericSlugStrategy,
}


class SlugFactory:

    _instances: Dict[SlugStrategyType, SlugStrategy] = {}

    @classmethod
    def create_strategy(
        cls, strategy_type: Union[SlugStrategyType, str, None] = None
    ) -> SlugStrategy:
        """
        Return the cached strategy for strategy_type, building it on first use.

        Accepts the enum or its configured name; None means settings.slug_strategy.

        Raises:
            ValueError: If the name is not a known strategy
        """
        if strategy_type is None:
            strategy_type = settings.slug_strategy
        strategy_type = SlugStrategyType(strategy_type)

        if strategy_type not in cls._instances:
            strategy_class = STRATEGY_CLASSES[strategy_type]
            cls._instances[strategy_type] = strategy_class(length=settings.slug_length)
        return cls._instances[strategy_type]

    @classmethod
    def clear_instances(cls):
        """Clear cached instances (for testing)"""
        cls._instances = {}
