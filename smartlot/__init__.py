"""Smart Parking Lot: in-memory parking lot management with a desktop GUI"""

__version__ = "1.0.0"
