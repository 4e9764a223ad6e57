from .factories import CarFactory, ParkingLotFactory, PricingStrategyFactory, RegularCarFactory

__all__ = ["CarFactory", "ParkingLotFactory", "PricingStrategyFactory", "RegularCarFactory"]
