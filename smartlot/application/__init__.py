from .parking_service import (
    CarNotFoundError, InvalidLicensePlateError, ParkingService, ParkingServiceError
)

__all__ = ["CarNotFoundError", "InvalidLicensePlateError", "ParkingService", "ParkingServiceError"]
