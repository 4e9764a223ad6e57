# File: smartlot/domain/observers.py
"""
Observer Pattern for parking lot change notification

Observers are plain callables taking the lot. They run synchronously,
in registration order, after every successful admission or removal.
"""

from typing import TYPE_CHECKING, Callable, List
import logging

if TYPE_CHECKING:
    from .aggregates import ParkingLot


ParkingLotObserver = Callable[['ParkingLot'], None]


def _observer_name(observer: ParkingLotObserver) -> str:
    return getattr(observer, '__qualname__', observer.__class__.__name__)


class ObserverList:
    """
    Ordered list of registered observers

    With isolate_errors on, a failing observer is logged and the
    remaining observers still run. With it off, the exception propagates
    and aborts the rest of the chain.
    """

    def __init__(self, isolate_errors: bool = True):
        self.isolate_errors = isolate_errors
        self._observers: List[ParkingLotObserver] = []
        self._logger = logging.getLogger(self.__class__.__name__)

    def add(self, observer: ParkingLotObserver) -> None:
        self._observers.append(observer)
        self._logger.debug(f"Registered observer {_observer_name(observer)}")

    def notify(self, lot: 'ParkingLot') -> None:
        # Iterate over a copy: an observer may register another observer
        for observer in list(self._observers):
            if not self.isolate_errors:
                observer(lot)
                continue
            try:
                observer(lot)
            except Exception:
                self._logger.exception(f"Observer {_observer_name(observer)} failed")

    def __len__(self) -> int:
        return len(self._observers)

    def __iter__(self):
        return iter(list(self._observers))


class LoggingObserver:
    """Logs lot occupancy after each change"""

    def __init__(self, logger: logging.Logger = None):
        self.logger = logger or logging.getLogger(self.__class__.__name__)

    def __call__(self, lot: 'ParkingLot') -> None:
        self.logger.info(
            f"Lot changed: {lot.occupied_spots}/{lot.total_spots} occupied, "
            f"{len(lot.history)} completed sessions"
        )
