"""Domain layer: cars, spots, pricing, observers and the ParkingLot aggregate"""

from .models import Car, CarHistoryEntry, CarSnapshot, Money, ParkingSpot
from .strategies import HourlyPricingStrategy, PricingStrategy
from .observers import LoggingObserver, ObserverList
from .aggregates import AdmissionResult, ParkingLot, RemovalResult

__all__ = [
    "AdmissionResult",
    "Car",
    "CarHistoryEntry",
    "CarSnapshot",
    "HourlyPricingStrategy",
    "LoggingObserver",
    "Money",
    "ObserverList",
    "ParkingLot",
    "ParkingSpot",
    "PricingStrategy",
    "RemovalResult",
]
