# File: smartlot/application/dtos.py
"""
Data Transfer Objects (DTOs) for the Smart Parking Lot

1. Input DTOs - requests coming from the presentation layer
2. Output DTOs - results and read models handed back to it

DTOs are immutable, validated at creation and carry no business logic.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Optional
import json

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..domain.models import CarHistoryEntry, Money, ParkingSpot


# ============================================================================
# BASE DTO CLASSES
# ============================================================================

class BaseDTO(BaseModel):
    """Base DTO with common functionality"""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        use_enum_values=True
    )

    def to_dict(self, exclude_none: bool = False, **kwargs) -> Dict[str, Any]:
        """Convert DTO to dictionary"""
        return self.model_dump(exclude_none=exclude_none, **kwargs)

    def to_json(self, **kwargs) -> str:
        """Convert DTO to JSON string"""
        return self.model_dump_json(**kwargs)

    @classmethod
    def from_json(cls, json_str: str) -> 'BaseDTO':
        """Create DTO from JSON string"""
        return cls(**json.loads(json_str))


class OperationOutcomeDTO(str, Enum):
    """Outcome of an entry or exit request"""
    OK = "ok"
    ALREADY_PRESENT = "already_present"
    LOT_FULL = "lot_full"
    NOT_FOUND = "not_found"


class MoneyDTO(BaseDTO):
    """DTO for monetary values"""
    amount: Decimal = Field(description="Amount, two decimal places")
    currency: str = Field(default="NIS", description="Currency code")

    @classmethod
    def from_money(cls, money: Money) -> 'MoneyDTO':
        return cls(amount=money.amount, currency=money.currency)

    def format(self) -> str:
        return f"{self.amount:.2f} {self.currency}"


# ============================================================================
# INPUT DTOs
# ============================================================================

class LicensePlateRequest(BaseDTO):
    """Base for requests identified by license plate"""
    license_plate: str = Field(description="License plate number")

    @field_validator('license_plate')
    @classmethod
    def validate_license_plate(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("License plate cannot be empty")
        return v


class CarEntryRequest(LicensePlateRequest):
    """DTO for a car entering the lot"""
    pass


class CarExitRequest(LicensePlateRequest):
    """DTO for a car leaving the lot"""
    pass


# ============================================================================
# OUTPUT DTOs
# ============================================================================

class OperationResultDTO(BaseDTO):
    """DTO for the result of an entry or exit request"""
    success: bool = Field(description="Operation succeeded")
    outcome: OperationOutcomeDTO = Field(description="Detailed outcome")
    message: str = Field(description="Human-readable result message")
    license_plate: str = Field(description="License plate")
    spot_number: Optional[int] = Field(default=None, description="Spot used by the car")
    amount_paid: Optional[MoneyDTO] = Field(default=None, description="Amount charged on exit")


class SpotDTO(BaseDTO):
    """DTO for a parking spot"""
    number: int = Field(ge=1, description="Spot number (1-based)")
    occupied: bool = Field(description="Spot is occupied")
    license_plate: Optional[str] = Field(default=None, description="Plate of the parked car")
    entry_time: Optional[datetime] = Field(default=None, description="When the car entered")

    @classmethod
    def from_spot(cls, spot: ParkingSpot) -> 'SpotDTO':
        car = spot.current_car
        return cls(
            number=spot.number,
            occupied=spot.is_occupied,
            license_plate=car.license_plate if car else None,
            entry_time=car.entry_time if car else None
        )


class HistoryEntryDTO(BaseDTO):
    """DTO for a completed parking session"""
    license_plate: str
    entry_time: datetime
    exit_time: datetime
    duration_minutes: float = Field(description="Session length in minutes")
    paid: MoneyDTO

    @classmethod
    def from_entry(cls, entry: CarHistoryEntry) -> 'HistoryEntryDTO':
        return cls(
            license_plate=entry.car.license_plate,
            entry_time=entry.entry_time,
            exit_time=entry.exit_time,
            duration_minutes=entry.duration_minutes,
            paid=MoneyDTO.from_money(entry.paid)
        )


class LotStatisticsDTO(BaseDTO):
    """DTO for lot statistics"""
    total_spots: int = Field(ge=0)
    occupied_spots: int = Field(ge=0)
    free_spots: int = Field(ge=0)
    occupancy_rate: float = Field(ge=0, le=100, description="Occupancy in percent")
    average_parking_minutes: float
    todays_revenue: MoneyDTO
    completed_sessions: int = Field(ge=0)


class CarCloneDTO(BaseDTO):
    """DTO showing a parked car next to its duplicate"""
    original: str = Field(description="Description of the parked car")
    clone: str = Field(description="Description of the duplicate")
    spot_number: int


class LotStatusDTO(BaseDTO):
    """DTO bundling spots and statistics"""
    spots: List[SpotDTO]
    statistics: LotStatisticsDTO
