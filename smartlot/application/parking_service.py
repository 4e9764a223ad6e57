# File: smartlot/application/parking_service.py
"""
Application Service for the Smart Parking Lot

ParkingService is the boundary the presentation layer talks to:
- admit_car / release_car return OperationResultDTO for every business
  outcome (entered, already parked, lot full, exited, not found)
- invalid input raises a ParkingServiceError subclass
- read models are returned as DTOs, never live domain objects
"""

from typing import List, Optional
import logging

from pydantic import ValidationError

from ..domain.aggregates import AdmissionResult, ParkingLot, RemovalResult
from ..domain.observers import ParkingLotObserver
from ..infrastructure.factories import CarFactory, RegularCarFactory
from .dtos import (
    CarCloneDTO, CarEntryRequest, CarExitRequest, HistoryEntryDTO,
    LotStatisticsDTO, LotStatusDTO, MoneyDTO, OperationOutcomeDTO,
    OperationResultDTO, SpotDTO
)


# ============================================================================
# EXCEPTIONS
# ============================================================================

class ParkingServiceError(Exception):
    """Base exception for parking service errors"""
    pass


class InvalidLicensePlateError(ParkingServiceError):
    """Exception for missing or malformed license plates"""
    pass


class CarNotFoundError(ParkingServiceError):
    """Exception when a car is required but not parked in the lot"""
    pass


# ============================================================================
# MESSAGES
# ============================================================================

MESSAGES = {
    OperationOutcomeDTO.OK: {
        "entry": "Car entered the parking lot.",
        "exit": "Car exited the parking lot.",
    },
    OperationOutcomeDTO.ALREADY_PRESENT: "A car with this license plate is already parked in the lot.",
    OperationOutcomeDTO.LOT_FULL: "Parking lot is full.",
    OperationOutcomeDTO.NOT_FOUND: "Car not found in parking lot.",
}


# ============================================================================
# PARKING SERVICE
# ============================================================================

class ParkingService:
    """
    Main application service for parking management

    Use cases:
    1. Car entry and exit
    2. Duplicating a parked car's data
    3. Status, statistics and history queries
    4. Change subscription
    """

    def __init__(self, lot: ParkingLot, car_factory: Optional[CarFactory] = None):
        self.lot = lot
        self.car_factory = car_factory or RegularCarFactory()
        self.logger = logging.getLogger(self.__class__.__name__)
        self.logger.info("ParkingService initialized")

    # ========================================================================
    # COMMANDS
    # ========================================================================

    def admit_car(self, license_plate: str) -> OperationResultDTO:
        request = self._parse(CarEntryRequest, license_plate)
        car = self.car_factory.create_car(request.license_plate)

        result = self.lot.add_car(car)
        if result is AdmissionResult.OK:
            outcome = OperationOutcomeDTO.OK
            message = MESSAGES[outcome]["entry"]
        elif result is AdmissionResult.ALREADY_PRESENT:
            outcome = OperationOutcomeDTO.ALREADY_PRESENT
            message = MESSAGES[outcome]
        else:
            outcome = OperationOutcomeDTO.LOT_FULL
            message = MESSAGES[outcome]

        spot = self.lot.find_spot(car.license_plate) if result else None
        return OperationResultDTO(
            success=bool(result),
            outcome=outcome,
            message=message,
            license_plate=car.license_plate,
            spot_number=spot.number if spot else None
        )

    def release_car(self, license_plate: str) -> OperationResultDTO:
        request = self._parse(CarExitRequest, license_plate)
        plate = request.license_plate

        spot = self.lot.find_spot(plate)
        # Observers may archive further sessions; this one lands at the current end
        session_index = len(self.lot.history)
        result = self.lot.remove_car(plate)

        if result is RemovalResult.NOT_FOUND:
            return OperationResultDTO(
                success=False,
                outcome=OperationOutcomeDTO.NOT_FOUND,
                message=MESSAGES[OperationOutcomeDTO.NOT_FOUND],
                license_plate=plate
            )

        paid = self.lot.history[session_index].paid
        return OperationResultDTO(
            success=True,
            outcome=OperationOutcomeDTO.OK,
            message=MESSAGES[OperationOutcomeDTO.OK]["exit"],
            license_plate=plate,
            spot_number=spot.number,
            amount_paid=MoneyDTO.from_money(paid)
        )

    def clone_car(self, license_plate: str) -> CarCloneDTO:
        """Duplicate a parked car and describe both copies"""
        plate = self._validate_plate(license_plate)
        spot = self.lot.find_spot(plate)
        if spot is None:
            raise CarNotFoundError(MESSAGES[OperationOutcomeDTO.NOT_FOUND])

        original = spot.current_car
        clone = original.duplicate()
        self.logger.info(f"Cloned car {plate}")
        return CarCloneDTO(original=str(original), clone=str(clone), spot_number=spot.number)

    def subscribe(self, callback: ParkingLotObserver) -> None:
        """Register a callback fired after every successful entry or exit"""
        self.lot.add_observer(callback)

    # ========================================================================
    # QUERIES
    # ========================================================================

    def get_spots(self) -> List[SpotDTO]:
        return [SpotDTO.from_spot(spot) for spot in self.lot.spots]

    def get_history(self) -> List[HistoryEntryDTO]:
        return [HistoryEntryDTO.from_entry(entry) for entry in self.lot.history]

    def get_statistics(self) -> LotStatisticsDTO:
        lot = self.lot
        return LotStatisticsDTO(
            total_spots=lot.total_spots,
            occupied_spots=lot.occupied_spots,
            free_spots=lot.free_spots,
            occupancy_rate=lot.occupancy_rate,
            average_parking_minutes=lot.average_parking_minutes,
            todays_revenue=MoneyDTO.from_money(lot.todays_revenue),
            completed_sessions=len(lot.history)
        )

    def get_status(self) -> LotStatusDTO:
        return LotStatusDTO(spots=self.get_spots(), statistics=self.get_statistics())

    # ========================================================================
    # HELPERS
    # ========================================================================

    def _parse(self, request_class, license_plate: str):
        try:
            return request_class(license_plate=license_plate or "")
        except ValidationError as e:
            self.logger.warning(f"Rejected license plate {license_plate!r}")
            raise InvalidLicensePlateError("Please enter a license plate.") from e

    def _validate_plate(self, license_plate: str) -> str:
        return self._parse(CarEntryRequest, license_plate).license_plate
