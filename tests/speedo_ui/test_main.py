# Required before importing pygame, otherwise screen might flicker during tests
import os
os.environ["SDL_VIDEODRIVER"] = "dummy"

import logging
from pathlib import Path
import tempfile
import unittest
from unittest.mock import patch

import pygame

from speedo_ui.Settings import Settings
from speedo_ui.core.dataclasses import GaugeConfig
from speedo_ui.main import gauge_options, layout, parse_args, setup_logging
from speedo_ui.widgets.SpeedometerWidget import SpeedometerWidget


class TestParseArgs(unittest.TestCase):
    def test_defaults(self):
        args = parse_args([])

        self.assertEqual(args.log, "ERROR")
        self.assertFalse(args.log_to_file)
        self.assertEqual(args.settings, "settings.toml")

    def test_unknown_arguments_are_ignored(self):
        args = parse_args(["--log", "debug", "--whatever"])

        self.assertEqual(args.log, "debug")


class TestSetupLogging(unittest.TestCase):
    def test_invalid_level_raises(self):
        with self.assertRaises(ValueError):
            setup_logging("LOUD")

    @patch("speedo_ui.main.logging.basicConfig")
    def test_valid_level(self, mock_basic_config):
        setup_logging("info")

        kwargs = mock_basic_config.call_args.kwargs
        self.assertEqual(kwargs["level"], logging.INFO)
        self.assertEqual(kwargs["format"], "%(asctime)s - %(levelname)s - %(message)s")
        self.assertEqual(len(kwargs["handlers"]), 1)


class TestGaugeOptions(unittest.TestCase):
    def load(self, content: str) -> Settings:
        directory = tempfile.TemporaryDirectory()
        self.addCleanup(directory.cleanup)
        path = Path(directory.name) / "settings.toml"
        path.write_text(content)

        return Settings(str(path))

    def test_gauge_table_is_passed_through(self):
        settings = self.load("[gauge]\nmax_speed = 180\n")

        options = gauge_options(settings)

        self.assertEqual(options["max_speed"], 180)
        self.assertEqual(GaugeConfig.from_settings(options).max_speed, 180)

    def test_non_table_gauge_falls_back_to_defaults(self):
        settings = self.load("gauge = 5\n")

        with self.assertLogs(level="WARNING") as logs:
            options = gauge_options(settings)

        self.assertEqual(options, {})
        self.assertEqual(GaugeConfig.from_settings(options), GaugeConfig())
        self.assertIn("gauge", logs.output[0])


class TestLayout(unittest.TestCase):
    def setUp(self):
        pygame.init()

    def test_gauge_is_centered_in_window(self):
        widget = SpeedometerWidget((0, 0))

        layout(widget, (800, 300))

        self.assertEqual((widget.width, widget.height), (600, 300))
        self.assertEqual(widget.position, (100, 0))


if __name__ == "__main__":
    unittest.main()
