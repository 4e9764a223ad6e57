# File: smartlot/presentation/controller.py
"""
Presentation controller for the Smart Parking Lot

Everything the GUI needs that does not touch a widget: input handling,
user-facing messages and the text/rows each tab renders.
"""

from datetime import datetime
from typing import List, Optional, Tuple
import logging

from ..application.dtos import HistoryEntryDTO
from ..application.parking_service import (
    CarNotFoundError, ParkingService, ParkingServiceError
)


TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

HistoryRow = Tuple[str, str, str, str, str]


def format_time(value: Optional[datetime]) -> str:
    if value is None:
        return "-"
    return value.strftime(TIME_FORMAT)


class ParkingLotController:
    """Mediates between the widgets and ParkingService"""

    def __init__(self, service: ParkingService):
        self.service = service
        self.logger = logging.getLogger(self.__class__.__name__)

    def subscribe(self, callback) -> None:
        self.service.subscribe(callback)

    # ========================================================================
    # ACTIONS
    # ========================================================================

    def add_car(self, license_plate: str) -> Tuple[bool, str]:
        """Returns: (success, message to show)"""
        try:
            result = self.service.admit_car(license_plate)
        except ParkingServiceError as e:
            return False, str(e)
        return result.success, result.message

    def remove_car(self, license_plate: str) -> Tuple[bool, str]:
        """Returns: (success, message to show)"""
        try:
            result = self.service.release_car(license_plate)
        except ParkingServiceError as e:
            return False, str(e)

        if result.success and result.amount_paid:
            return True, f"{result.message} Paid: {result.amount_paid.format()}"
        return result.success, result.message

    def clone_car(self, license_plate: str) -> Tuple[bool, str, str]:
        """Returns: (success, message to show, text for the result area)"""
        try:
            clone = self.service.clone_car(license_plate)
        except CarNotFoundError as e:
            return False, str(e), str(e)
        except ParkingServiceError:
            return False, "Please enter a license plate to clone.", ""

        text = f"Original car:\n{clone.original}\n\nCloned car:\n{clone.clone}"
        return True, "Car data cloned successfully!", text

    # ========================================================================
    # RENDERING
    # ========================================================================

    def status_text(self) -> str:
        lines = ["Parking Spot Status:"]
        for spot in self.service.get_spots():
            if spot.occupied:
                lines.append(f"Spot {spot.number}: Occupied ({spot.license_plate})")
            else:
                lines.append(f"Spot {spot.number}: Free")
        return "\n".join(lines) + "\n"

    def statistics_text(self) -> str:
        stats = self.service.get_statistics()
        return (
            "----- Parking Lot Statistics -----\n"
            f"Total spots: {stats.total_spots}\n"
            f"Occupied spots: {stats.occupied_spots}\n"
            f"Free spots: {stats.free_spots}\n"
            f"Occupancy rate: {stats.occupancy_rate:.1f}%\n"
            f"Completed sessions: {stats.completed_sessions}\n"
            f"Average parking time (minutes): {stats.average_parking_minutes:.2f}\n"
            f"Today's revenue: {stats.todays_revenue.format()}\n"
            "----------------------------------\n"
        )

    def history_rows(self) -> List[HistoryRow]:
        return [self._history_row(entry) for entry in self.service.get_history()]

    @staticmethod
    def _history_row(entry: HistoryEntryDTO) -> HistoryRow:
        return (
            entry.license_plate,
            format_time(entry.entry_time),
            format_time(entry.exit_time),
            f"{entry.duration_minutes:.1f}",
            entry.paid.format(),
        )
