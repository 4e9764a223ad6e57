# File: smartlot/infrastructure/factories.py
"""
Factory Pattern Implementation for the Smart Parking Lot

Factories:
1. CarFactory - builds Car entities from raw license plate input
2. PricingStrategyFactory - builds pricing strategies by type name
3. ParkingLotFactory - builds a ParkingLot from application settings
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import TYPE_CHECKING, Callable, Dict, List, Optional, Type
import logging

from ..domain.aggregates import ParkingLot
from ..domain.models import Car
from ..domain.observers import LoggingObserver
from ..domain.strategies import HourlyPricingStrategy, PricingStrategy

if TYPE_CHECKING:
    from ..config import Settings


# ============================================================================
# DOMAIN OBJECT FACTORIES
# ============================================================================

class CarFactory(ABC):
    """Factory Method: subclasses decide how cars are constructed"""

    @abstractmethod
    def create_car(self, license_plate: str) -> Car:
        """Create a new car with unset entry/exit times"""
        pass


class RegularCarFactory(CarFactory):
    """Creates plain cars; surrounding whitespace in the plate is ignored"""

    def create_car(self, license_plate: str) -> Car:
        plate = (license_plate or "").strip()
        if not plate:
            raise ValueError("License plate cannot be empty")
        return Car(plate)


# ============================================================================
# STRATEGY FACTORIES
# ============================================================================

class PricingStrategyFactory:
    """Factory for creating PricingStrategy instances by type name"""

    def __init__(self):
        self._strategies: Dict[str, Type[PricingStrategy]] = {
            "hourly": HourlyPricingStrategy,
        }
        self.logger = logging.getLogger(self.__class__.__name__)

    def register(self, strategy_type: str, strategy_class: Type[PricingStrategy]) -> None:
        """Register an additional strategy type"""
        self._strategies[strategy_type.lower()] = strategy_class
        self.logger.debug(f"Registered pricing strategy '{strategy_type}'")

    @property
    def available_types(self) -> List[str]:
        return sorted(self._strategies)

    def create_by_type(self, strategy_type: str, **params) -> PricingStrategy:
        """Create strategy by type, passing params to its constructor"""
        strategy_class = self._strategies.get(strategy_type.lower())
        if not strategy_class:
            raise ValueError(
                f"Unknown pricing strategy type: {strategy_type}. "
                f"Available: {', '.join(self.available_types)}"
            )
        return strategy_class(**params)


# ============================================================================
# AGGREGATE FACTORY
# ============================================================================

class ParkingLotFactory:
    """Builds ParkingLot aggregates from settings"""

    def __init__(self, strategy_factory: Optional[PricingStrategyFactory] = None):
        self.strategy_factory = strategy_factory or PricingStrategyFactory()

    def create_pricing_strategy(self, settings: 'Settings') -> PricingStrategy:
        return self.strategy_factory.create_by_type(
            settings.pricing_strategy,
            price_per_hour=settings.price_per_hour,
            currency=settings.currency
        )

    def create_from_config(
        self,
        settings: 'Settings',
        clock: Optional[Callable[[], datetime]] = None
    ) -> ParkingLot:
        lot = ParkingLot(
            total_spots=settings.total_spots,
            pricing_strategy=self.create_pricing_strategy(settings),
            clock=clock,
            isolate_observer_errors=settings.isolate_observer_errors
        )
        lot.add_observer(LoggingObserver())
        return lot
