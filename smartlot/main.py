# File: smartlot/main.py
"""
Main application entry point for the Smart Parking Lot
Composition root: builds the lot, the service and the GUI and wires them together
"""

from pathlib import Path
from typing import List, Optional
import argparse
import logging
import sys

from .application.parking_service import ParkingService
from .config import ConfigurationError, Settings, load_settings
from .domain.aggregates import ParkingLot
from .infrastructure.factories import ParkingLotFactory, RegularCarFactory
from .presentation.controller import ParkingLotController


def setup_logging(settings: Settings) -> logging.Logger:
    """Setup application logging configuration"""
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if settings.log_file:
        log_path = Path(settings.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))

    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True
    )
    return logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="smartlot",
        description="Smart Parking Lot Management System"
    )
    parser.add_argument("--config", help="Path to a YAML settings file")
    parser.add_argument("--spots", type=int, dest="total_spots", help="Number of parking spots")
    parser.add_argument("--rate", type=float, dest="price_per_hour", help="Price per started hour")
    parser.add_argument("--log-level", dest="log_level", help="Logging level (DEBUG, INFO, ...)")
    parser.add_argument("--no-gui", action="store_true", help="Print lot statistics instead of opening the window")
    return parser.parse_args(argv)


class ParkingApplication:
    """Main application controller that sets up all components"""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.logger = logging.getLogger(self.__class__.__name__)
        self.setup_components()

    def setup_components(self) -> None:
        """Initialize all application components with dependency injection"""
        self.lot: ParkingLot = ParkingLotFactory().create_from_config(self.settings)
        self.logger.info(f"Parking lot initialized: {self.lot}")

        self.service = ParkingService(self.lot, car_factory=RegularCarFactory())
        self.controller = ParkingLotController(self.service)

    def print_summary(self) -> None:
        print(self.controller.status_text())
        print(self.controller.statistics_text())

    def run_gui(self) -> None:
        # Imported here so --no-gui works on interpreters built without Tk
        from .presentation.parking_gui import ParkingLotApp

        ParkingLotApp(self.controller).run()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application"""
    args = parse_args(argv)

    try:
        settings = load_settings(
            args.config,
            total_spots=args.total_spots,
            price_per_hour=args.price_per_hour,
            log_level=args.log_level
        )
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    logger = setup_logging(settings)
    logger.info("Starting Smart Parking Lot...")

    try:
        app = ParkingApplication(settings)
        if args.no_gui:
            app.print_summary()
        else:
            app.run_gui()
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
