"""
Integration Tests Package for the Smart Parking Lot

Integration tests focus on:
1. Config -> factory -> lot -> service -> controller wiring
2. End-to-end user scenarios
3. GUI + Controller integration (skipped without a display)
"""
