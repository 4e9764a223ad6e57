# File: smartlot/domain/models.py
"""
Domain Models for the Smart Parking Lot

This module contains:
1. Value Objects: Money, CarSnapshot, CarHistoryEntry
2. Entities: Car (identified by its license plate), ParkingSpot

Cars are stamped with entry/exit times by the ParkingLot aggregate.
A completed session is archived as an immutable CarHistoryEntry.
"""

import copy
from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, Optional, Union


# ============================================================================
# VALUE OBJECTS
# ============================================================================

CENTS = Decimal('0.01')


@dataclass(frozen=True)
class Money:
    """
    Value Object: Monetary amount with currency
    Amounts are always kept at cent precision
    """
    amount: Decimal
    currency: str = "NIS"

    def __post_init__(self):
        amount = self.amount
        if not isinstance(amount, Decimal):
            # str() keeps 10.1 as Decimal('10.1')
            amount = Decimal(str(amount))
        object.__setattr__(self, 'amount', amount.quantize(CENTS, rounding=ROUND_HALF_UP))

        if not self.currency:
            raise ValueError("Currency cannot be empty")

    @classmethod
    def zero(cls, currency: str = "NIS") -> 'Money':
        return cls(Decimal('0'), currency)

    def _check_currency(self, other: 'Money') -> None:
        if self.currency != other.currency:
            raise ValueError(f"Currency mismatch: {self.currency} vs {other.currency}")

    def __add__(self, other: 'Money') -> 'Money':
        self._check_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, multiplier: Union[int, Decimal]) -> 'Money':
        return Money(self.amount * Decimal(multiplier), self.currency)

    __rmul__ = __mul__

    def __lt__(self, other: 'Money') -> bool:
        self._check_currency(other)
        return self.amount < other.amount

    def __le__(self, other: 'Money') -> bool:
        self._check_currency(other)
        return self.amount <= other.amount

    def format(self) -> str:
        """Format for display, e.g. '20.00 NIS'"""
        return f"{self.amount:.2f} {self.currency}"

    def to_dict(self) -> Dict[str, Any]:
        return {"amount": str(self.amount), "currency": self.currency}

    def __str__(self) -> str:
        return self.format()


@dataclass(frozen=True)
class CarSnapshot:
    """Value Object: frozen copy of a car taken when its session is archived"""
    license_plate: str
    entry_time: Optional[datetime] = None
    exit_time: Optional[datetime] = None

    def __str__(self) -> str:
        return _describe_car(self.license_plate, self.entry_time, self.exit_time)


def _describe_car(license_plate: str, entry_time: Optional[datetime],
                  exit_time: Optional[datetime]) -> str:
    entry = entry_time.isoformat(sep=' ', timespec='seconds') if entry_time else '-'
    exit_ = exit_time.isoformat(sep=' ', timespec='seconds') if exit_time else '-'
    return f"Car(license_plate='{license_plate}', entry_time={entry}, exit_time={exit_})"


# ============================================================================
# ENTITIES
# ============================================================================

class Car:
    """
    Entity: a car identified by its license plate

    Entry and exit times start unset and are stamped by the parking lot.
    Supports duplication (Prototype) through duplicate().
    """

    def __init__(self, license_plate: str):
        self._license_plate = license_plate
        self.entry_time: Optional[datetime] = None
        self.exit_time: Optional[datetime] = None

    @property
    def license_plate(self) -> str:
        return self._license_plate

    @property
    def parking_duration(self) -> Optional[timedelta]:
        """Time between entry and exit, None while either is unset"""
        if self.entry_time is None or self.exit_time is None:
            return None
        return self.exit_time - self.entry_time

    def duplicate(self) -> 'Car':
        """Return an independent copy of this car"""
        return copy.copy(self)

    def snapshot(self) -> CarSnapshot:
        """Return an immutable copy of this car's current state"""
        return CarSnapshot(self.license_plate, self.entry_time, self.exit_time)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "license_plate": self.license_plate,
            "entry_time": self.entry_time.isoformat() if self.entry_time else None,
            "exit_time": self.exit_time.isoformat() if self.exit_time else None,
        }

    def __str__(self) -> str:
        return _describe_car(self.license_plate, self.entry_time, self.exit_time)

    def __repr__(self) -> str:
        return f"<Car {self.license_plate}>"


class ParkingSpot:
    """
    Entity: a single slot holding at most one car

    No validation is done here: the ParkingLot aggregate only ever
    occupies a spot it has found free.
    """

    def __init__(self, number: int):
        self.number = number
        self._car: Optional[Car] = None

    @property
    def is_occupied(self) -> bool:
        return self._car is not None

    @property
    def current_car(self) -> Optional[Car]:
        return self._car

    def occupy(self, car: Car) -> None:
        self._car = car

    def clear(self) -> None:
        self._car = None

    def holds(self, license_plate: str) -> bool:
        """Check whether this spot is occupied by a car with the given plate"""
        return self._car is not None and self._car.license_plate == license_plate

    def to_dict(self) -> Dict[str, Any]:
        return {
            "number": self.number,
            "occupied": self.is_occupied,
            "license_plate": self._car.license_plate if self._car else None,
        }

    def __str__(self) -> str:
        if self._car:
            return f"Spot {self.number}: Occupied ({self._car.license_plate})"
        return f"Spot {self.number}: Free"


@dataclass(frozen=True)
class CarHistoryEntry:
    """Value Object: archived record of one completed parking session"""
    car: CarSnapshot
    entry_time: datetime
    exit_time: datetime
    paid: Money

    @property
    def duration(self) -> timedelta:
        return self.exit_time - self.entry_time

    @property
    def duration_minutes(self) -> float:
        return self.duration.total_seconds() / 60.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "license_plate": self.car.license_plate,
            "entry_time": self.entry_time.isoformat(),
            "exit_time": self.exit_time.isoformat(),
            "duration_minutes": self.duration_minutes,
            "paid": self.paid.to_dict(),
        }
