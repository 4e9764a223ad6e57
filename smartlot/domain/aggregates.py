# File: smartlot/domain/aggregates.py
"""
Aggregate Root for the Smart Parking Lot

ParkingLot owns the spots, the session history and the observers.
All changes go through add_car / remove_car, which enforce:
- at most one spot holds a given license plate
- occupied + free == total at all times
- history is append-only and its entries never change

Expected business outcomes (duplicate plate, full lot, unknown plate)
are returned as result values, never raised.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple
import copy
import logging
import threading

from .models import Car, CarHistoryEntry, Money, ParkingSpot
from .observers import ObserverList, ParkingLotObserver
from .strategies import PriceFunction


Clock = Callable[[], datetime]


# ============================================================================
# OPERATION RESULTS
# ============================================================================

class AdmissionResult(str, Enum):
    """Outcome of ParkingLot.add_car; truthy only for OK"""
    OK = "ok"
    ALREADY_PRESENT = "already_present"
    LOT_FULL = "lot_full"

    def __bool__(self) -> bool:
        return self is AdmissionResult.OK


class RemovalResult(str, Enum):
    """Outcome of ParkingLot.remove_car; truthy only for OK"""
    OK = "ok"
    NOT_FOUND = "not_found"

    def __bool__(self) -> bool:
        return self is RemovalResult.OK


# ============================================================================
# PARKING LOT AGGREGATE
# ============================================================================

class ParkingLot:
    """
    Aggregate Root: fixed set of parking spots with entry/exit tracking

    Normally constructed once by the application's composition root and
    passed to its consumers. create_or_get() offers a shared process-wide
    instance where one is wanted: the first call creates it and later
    calls return it unchanged, ignoring their arguments.
    """

    _instance: Optional['ParkingLot'] = None
    _instance_lock = threading.Lock()

    def __init__(
        self,
        total_spots: int,
        pricing_strategy: PriceFunction,
        clock: Optional[Clock] = None,
        isolate_observer_errors: bool = True
    ):
        if total_spots < 0:
            raise ValueError(f"Total spots cannot be negative, got: {total_spots}")

        self._spots: List[ParkingSpot] = [ParkingSpot(number) for number in range(1, total_spots + 1)]
        self._history: List[CarHistoryEntry] = []
        self._observers = ObserverList(isolate_errors=isolate_observer_errors)
        self._pricing_strategy = pricing_strategy
        self._clock: Clock = clock or datetime.now
        self._logger = logging.getLogger(self.__class__.__name__)

        self._logger.info(f"Created ParkingLot with {total_spots} spots ({pricing_strategy})")

    # ========================================================================
    # SHARED INSTANCE
    # ========================================================================

    @classmethod
    def create_or_get(
        cls,
        total_spots: int,
        pricing_strategy: PriceFunction,
        **kwargs
    ) -> 'ParkingLot':
        """
        Return the process-wide lot, creating it on first call
        Arguments of later calls are ignored
        """
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls(total_spots, pricing_strategy, **kwargs)
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the process-wide lot so the next create_or_get builds a new one"""
        with cls._instance_lock:
            cls._instance = None

    # ========================================================================
    # COMMANDS
    # ========================================================================

    def add_car(self, car: Car) -> AdmissionResult:
        """
        Park a car in the first free spot, in spot order
        Returns: AdmissionResult.OK, ALREADY_PRESENT or LOT_FULL
        """
        if self.find_spot(car.license_plate) is not None:
            self._logger.info(f"Rejected {car.license_plate}: already parked")
            return AdmissionResult.ALREADY_PRESENT

        spot = next((s for s in self._spots if not s.is_occupied), None)
        if spot is None:
            self._logger.info(f"Rejected {car.license_plate}: lot is full")
            return AdmissionResult.LOT_FULL

        spot.occupy(car)
        car.entry_time = self._clock()
        self._logger.info(f"Car {car.license_plate} parked in spot {spot.number}")

        self.notify_observers()
        return AdmissionResult.OK

    def remove_car(self, license_plate: str) -> RemovalResult:
        """
        Remove a car, charge it and archive the session
        Returns: RemovalResult.OK or NOT_FOUND
        """
        spot = self.find_spot(license_plate)
        if spot is None:
            self._logger.info(f"Car {license_plate} not found")
            return RemovalResult.NOT_FOUND

        car = spot.current_car
        exit_time = self._clock()
        # Price first: a pricing failure leaves the car parked and unstamped
        paid = self._pricing_strategy(car.entry_time, exit_time)
        car.exit_time = exit_time

        entry = CarHistoryEntry(
            car=car.snapshot(),
            entry_time=car.entry_time,
            exit_time=exit_time,
            paid=paid
        )
        self._history.append(entry)
        spot.clear()
        self._logger.info(f"Car {license_plate} left spot {spot.number}, paid {paid.format()}")

        self.notify_observers()
        return RemovalResult.OK

    def add_observer(self, observer: ParkingLotObserver) -> None:
        self._observers.add(observer)

    def notify_observers(self) -> None:
        self._observers.notify(self)

    # ========================================================================
    # QUERY METHODS (Read-only)
    # ========================================================================

    @property
    def pricing_strategy(self) -> PriceFunction:
        return self._pricing_strategy

    @property
    def spots(self) -> Tuple[ParkingSpot, ...]:
        """Copies of the spots in spot order; changing them does not affect the lot"""
        return tuple(copy.copy(spot) for spot in self._spots)

    @property
    def history(self) -> Tuple[CarHistoryEntry, ...]:
        return tuple(self._history)

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    @property
    def total_spots(self) -> int:
        return len(self._spots)

    @property
    def occupied_spots(self) -> int:
        return sum(1 for spot in self._spots if spot.is_occupied)

    @property
    def free_spots(self) -> int:
        return self.total_spots - self.occupied_spots

    @property
    def occupancy_rate(self) -> float:
        """Occupancy in percent (0-100)"""
        if self.total_spots == 0:
            return 0.0
        return self.occupied_spots / self.total_spots * 100.0

    @property
    def average_parking_minutes(self) -> float:
        """Mean session length over the whole history, 0 when empty"""
        if not self._history:
            return 0.0
        total = sum(entry.duration_minutes for entry in self._history)
        return total / len(self._history)

    @property
    def todays_revenue(self) -> Money:
        """Sum paid for sessions that ended on the current calendar day"""
        today = self._clock().date()
        revenue = Money.zero(self._currency())
        for entry in self._history:
            if entry.exit_time.date() == today:
                revenue = revenue + entry.paid
        return revenue

    def find_spot(self, license_plate: str) -> Optional[ParkingSpot]:
        return next((spot for spot in self._spots if spot.holds(license_plate)), None)

    def find_car(self, license_plate: str) -> Optional[Car]:
        spot = self.find_spot(license_plate)
        return spot.current_car if spot else None

    def get_status_report(self) -> Dict[str, Any]:
        """Get comprehensive status report"""
        return {
            "capacity": {
                "total": self.total_spots,
                "occupied": self.occupied_spots,
                "free": self.free_spots,
                "occupancy_rate": self.occupancy_rate,
            },
            "spots": [spot.to_dict() for spot in self._spots],
            "statistics": {
                "completed_sessions": len(self._history),
                "average_parking_minutes": self.average_parking_minutes,
                "todays_revenue": self.todays_revenue.to_dict(),
            },
            "pricing": str(self._pricing_strategy),
            "timestamp": self._clock().isoformat(),
        }

    def _currency(self) -> str:
        if self._history:
            return self._history[-1].paid.currency
        currency = getattr(self._pricing_strategy, 'currency', None)
        return currency if isinstance(currency, str) else 'NIS'

    def __str__(self) -> str:
        return f"ParkingLot({self.occupied_spots}/{self.total_spots} occupied)"
