# File: tests/helpers.py
"""Shared test doubles"""

from datetime import datetime, timedelta


class FakeClock:
    """Manually advanced clock, injected into ParkingLot"""

    def __init__(self, start: datetime = datetime(2025, 3, 10, 9, 0, 0)):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


class RecordingObserver:
    """Observer that records every notification into a shared log"""

    def __init__(self, name: str, log: list):
        self.name = name
        self.log = log

    def __call__(self, lot) -> None:
        self.log.append((self.name, lot.occupied_spots))
