#!/usr/bin/env python3
"""
Application Entry Point Tests
"""

import io
import logging
import os
import tempfile
import unittest
from unittest.mock import patch

from smartlot.config import Settings
from smartlot.main import ParkingApplication, main, parse_args, setup_logging


class TestParseArgs(unittest.TestCase):

    def test_defaults(self):
        args = parse_args([])
        self.assertIsNone(args.config)
        self.assertIsNone(args.total_spots)
        self.assertIsNone(args.price_per_hour)
        self.assertIsNone(args.log_level)
        self.assertFalse(args.no_gui)

    def test_options(self):
        args = parse_args(["--spots", "4", "--rate", "7.5", "--log-level", "debug", "--no-gui"])
        self.assertEqual(args.total_spots, 4)
        self.assertEqual(args.price_per_hour, 7.5)
        self.assertEqual(args.log_level, "debug")
        self.assertTrue(args.no_gui)


class TestSetupLogging(unittest.TestCase):

    def tearDown(self):
        for handler in logging.root.handlers[:]:
            handler.close()
            logging.root.removeHandler(handler)
        logging.root.setLevel(logging.WARNING)

    def test_file_handler_created(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            log_file = os.path.join(tmpdir, "logs", "smartlot.log")
            setup_logging(Settings(log_file=log_file, log_level="DEBUG"))

            logging.getLogger("test").debug("hello")
            for handler in logging.root.handlers:
                handler.flush()

            self.assertEqual(logging.root.level, logging.DEBUG)
            with open(log_file, encoding="utf-8") as f:
                self.assertIn("test - DEBUG - hello", f.read())

            self.tearDown()

    def test_stream_only(self):
        setup_logging(Settings(log_file=None))
        self.assertEqual(len(logging.root.handlers), 1)
        self.assertIsInstance(logging.root.handlers[0], logging.StreamHandler)


class TestParkingApplication(unittest.TestCase):

    def test_components_are_wired(self):
        app = ParkingApplication(Settings(total_spots=3, log_file=None))

        self.assertEqual(app.lot.total_spots, 3)
        self.assertIs(app.service.lot, app.lot)
        self.assertIs(app.controller.service, app.service)

    @patch("sys.stdout", new_callable=io.StringIO)
    def test_print_summary(self, stdout):
        app = ParkingApplication(Settings(total_spots=1, log_file=None))
        app.print_summary()
        self.assertIn("Spot 1: Free", stdout.getvalue())
        self.assertIn("Total spots: 1", stdout.getvalue())


class TestMain(unittest.TestCase):

    def tearDown(self):
        for handler in logging.root.handlers[:]:
            logging.root.removeHandler(handler)

    @patch("smartlot.main.setup_logging", return_value=logging.getLogger("smartlot.main"))
    @patch("sys.stdout", new_callable=io.StringIO)
    def test_no_gui(self, stdout, _setup_logging):
        self.assertEqual(main(["--no-gui", "--spots", "3"]), 0)
        self.assertIn("Spot 3: Free", stdout.getvalue())

    @patch("sys.stderr", new_callable=io.StringIO)
    def test_bad_option_value(self, stderr):
        self.assertEqual(main(["--no-gui", "--spots", "-1"]), 2)
        self.assertIn("Configuration error", stderr.getvalue())

    @patch("sys.stderr", new_callable=io.StringIO)
    def test_missing_config_file(self, stderr):
        with tempfile.TemporaryDirectory() as tmpdir:
            missing = os.path.join(tmpdir, "missing.yaml")
            self.assertEqual(main(["--config", missing, "--no-gui"]), 2)

    @patch("smartlot.main.setup_logging", return_value=logging.getLogger("smartlot.main"))
    @patch.object(ParkingApplication, "run_gui", side_effect=RuntimeError("no display"))
    def test_fatal_error(self, _run_gui, _setup_logging):
        with self.assertLogs("smartlot.main", level="ERROR"):
            self.assertEqual(main([]), 1)


if __name__ == "__main__":
    unittest.main()
