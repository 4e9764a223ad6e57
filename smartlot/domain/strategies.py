# File: smartlot/domain/strategies.py
"""
Strategy Pattern Implementation for parking pricing

A pricing strategy turns a session's entry and exit time into a price.
Strategies are callable, so a plain function with the same signature
can be used wherever the lot expects a strategy.

Times may be datetimes or epoch milliseconds.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Callable, Union
import logging
import math

from .models import Money


Timestamp = Union[datetime, int, float]

# Anything callable as (entry_time, exit_time) -> Money
PriceFunction = Callable[[Timestamp, Timestamp], Money]

MILLIS_PER_HOUR = 60 * 60 * 1000


def _elapsed_millis(entry_time: Timestamp, exit_time: Timestamp) -> float:
    """Milliseconds between two timestamps of the same kind"""
    if isinstance(entry_time, datetime) and isinstance(exit_time, datetime):
        return (exit_time - entry_time) / timedelta(milliseconds=1)
    if isinstance(entry_time, datetime) or isinstance(exit_time, datetime):
        raise TypeError("entry_time and exit_time must both be datetimes or both be numbers")
    return float(exit_time - entry_time)


# ============================================================================
# STRATEGY INTERFACE
# ============================================================================

class PricingStrategy(ABC):
    """
    Abstract base class for pricing strategies
    Implementations must be pure: same input, same price, no side effects
    """

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def calculate_price(self, entry_time: Timestamp, exit_time: Timestamp) -> Money:
        """
        Calculate the price of a session
        Returns: Money
        """
        pass

    def __call__(self, entry_time: Timestamp, exit_time: Timestamp) -> Money:
        return self.calculate_price(entry_time, exit_time)

    def get_strategy_name(self) -> str:
        """Get human-readable strategy name"""
        return self.__class__.__name__.replace("PricingStrategy", "")

    def __str__(self) -> str:
        return f"{self.get_strategy_name()} Pricing"


# ============================================================================
# CONCRETE STRATEGIES
# ============================================================================

class HourlyPricingStrategy(PricingStrategy):
    """
    Charges per started hour: every partial hour rounds up to a full one

    - 0 ms          -> 0 hours
    - 1 ms .. 1 h   -> 1 hour
    - 1 h + 1 ms    -> 2 hours

    A negative duration (exit before entry) is charged as zero.
    """

    def __init__(self, price_per_hour: Union[Decimal, float, int], currency: str = "NIS"):
        super().__init__()
        price_per_hour = Decimal(str(price_per_hour))
        if not price_per_hour.is_finite():
            raise ValueError(f"Price per hour must be a finite number: {price_per_hour}")
        if price_per_hour < 0:
            raise ValueError(f"Price per hour cannot be negative: {price_per_hour}")
        self.price_per_hour = price_per_hour
        self.currency = currency

    def calculate_price(self, entry_time: Timestamp, exit_time: Timestamp) -> Money:
        duration_ms = _elapsed_millis(entry_time, exit_time)

        if duration_ms < 0:
            self.logger.warning(
                f"Exit time {exit_time} is before entry time {entry_time}; charging 0"
            )
            return Money.zero(self.currency)

        hours = math.ceil(duration_ms / MILLIS_PER_HOUR)
        return Money(self.price_per_hour * hours, self.currency)

    def __str__(self) -> str:
        return f"Hourly Pricing ({self.price_per_hour:.2f} {self.currency}/hour)"
