#!/usr/bin/env python3
"""
Pricing Strategy Unit Tests
"""

import unittest
from datetime import datetime, timedelta
from decimal import Decimal

from smartlot.domain.models import Money
from smartlot.domain.strategies import HourlyPricingStrategy, PricingStrategy


HOUR_MS = 60 * 60 * 1000


class TestHourlyPricingStrategy(unittest.TestCase):
    """Unit tests for HourlyPricingStrategy"""

    def setUp(self):
        self.strategy = HourlyPricingStrategy(10.0)

    def test_one_hour(self):
        self.assertEqual(self.strategy.calculate_price(0, HOUR_MS), Money(Decimal("10")))

    def test_partial_hour_rounds_up(self):
        self.assertEqual(self.strategy.calculate_price(0, int(1.5 * HOUR_MS)), Money(Decimal("20")))
        self.assertEqual(self.strategy.calculate_price(0, HOUR_MS + 1), Money(Decimal("20")))
        self.assertEqual(self.strategy.calculate_price(0, 1), Money(Decimal("10")))

    def test_zero_duration(self):
        self.assertEqual(self.strategy.calculate_price(1000, 1000), Money(Decimal("0")))

    def test_datetimes(self):
        entry = datetime(2025, 1, 1, 10, 0)
        self.assertEqual(self.strategy(entry, entry + timedelta(minutes=90)), Money(Decimal("20")))
        self.assertEqual(self.strategy(entry, entry), Money(Decimal("0")))

    def test_negative_duration_is_charged_zero(self):
        with self.assertLogs("HourlyPricingStrategy", level="WARNING"):
            price = self.strategy.calculate_price(HOUR_MS, 0)
        self.assertEqual(price, Money(Decimal("0")))

    def test_mixed_timestamp_kinds_are_rejected(self):
        with self.assertRaises(TypeError):
            self.strategy.calculate_price(datetime(2025, 1, 1), 0)

    def test_negative_rate_is_rejected(self):
        with self.assertRaises(ValueError):
            HourlyPricingStrategy(-1)

    def test_non_finite_rate_is_rejected(self):
        for rate in (float("inf"), float("nan"), Decimal("Infinity"), "-inf"):
            with self.subTest(rate=rate):
                with self.assertRaises(ValueError):
                    HourlyPricingStrategy(rate)

    def test_currency_and_interface(self):
        strategy = HourlyPricingStrategy(15, currency="USD")
        self.assertIsInstance(strategy, PricingStrategy)
        self.assertEqual(strategy(0, HOUR_MS), Money(Decimal("15"), "USD"))
        self.assertIn("15.00 USD/hour", str(strategy))


if __name__ == "__main__":
    unittest.main()
