import argparse
from datetime import datetime
import logging
import time
from typing import Any, List, Mapping, Optional, Tuple

import pygame
from pygame import display

from speedo_ui.Settings import Settings
from speedo_ui.SimulatedSpeedFeed import SimulatedSpeedFeed
from speedo_ui.core.dataclasses import GaugeConfig
from speedo_ui.gauge.InputAdapter import InputAdapter
from speedo_ui.gauge.SizingPolicy import MeasureSpec
from speedo_ui.widgets.SpeedometerWidget import SpeedometerWidget


NUDGE_STEP = 5


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Speedometer gauge demo")
    parser.add_argument(
        "--log",
        default="ERROR",
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default is ERROR."
    )
    parser.add_argument(
        "--log-to-file",
        action="store_true",
        help="Save logs to txt file."
    )
    parser.add_argument(
        "--settings",
        default="settings.toml",
        help="Path to the settings file. Defaults are used if it does not exist."
    )

    args, _ = parser.parse_known_args(argv)

    return args


def setup_logging(level_name: str, log_to_file: bool = False) -> None:
    level = getattr(logging, level_name.upper(), None)

    if not isinstance(level, int):
        raise ValueError(f"Invalid log level: {level_name}")

    log_format = "%(asctime)s - %(levelname)s - %(message)s"
    handlers: List[logging.Handler] = [logging.StreamHandler()]

    if log_to_file:
        timestamp = datetime.now().strftime("%Y-%m-%d_%H:%M:%S")
        log_filename = f"{timestamp}.txt"
        handlers.append(logging.FileHandler(log_filename))

    logging.basicConfig(
        level=level,
        format=log_format,
        handlers=handlers
    )


def gauge_options(settings: Settings) -> Mapping[str, Any]:
    options = settings.get("gauge")

    if not isinstance(options, Mapping):
        logging.warning(f"Setting 'gauge' must be a table, got {options!r}, using defaults")
        return {}

    return options


def layout(widget: SpeedometerWidget, size: Tuple[int, int]) -> None:
    """Fit the gauge into the window and center it."""
    width, height = size
    measurement = widget.measure(MeasureSpec.at_most(width), MeasureSpec.at_most(height))
    widget.position = (
        (width - measurement.width) // 2,
        (height - measurement.height) // 2
    )


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    setup_logging(args.log, args.log_to_file)

    settings = Settings(args.settings)
    window = settings.get("window")
    simulation = settings.get("simulation")

    config = GaugeConfig.from_settings(gauge_options(settings))

    pygame.init()
    screen = display.set_mode((window["width"], window["height"]), pygame.RESIZABLE)
    display.set_caption(window["title"])
    clock = pygame.time.Clock()

    widget = SpeedometerWidget((0, 0), config)
    layout(widget, screen.get_size())

    feed = None
    if simulation["enabled"]:
        feed = SimulatedSpeedFeed(config.max_speed, simulation["period"])
        feed.add_observer(InputAdapter(widget))
        logging.info("Driving gauge from simulated feed")

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                layout(widget, event.size)
            elif event.type == pygame.KEYDOWN and feed is None:
                if event.key == pygame.K_UP:
                    widget.set_current_speed(widget.get_current_speed() + NUDGE_STEP)
                elif event.key == pygame.K_DOWN:
                    widget.set_current_speed(widget.get_current_speed() - NUDGE_STEP)

        if feed is not None:
            feed.tick(time.monotonic())

        screen.fill((255, 255, 255))
        widget.draw(screen)
        display.flip()
        clock.tick(window["fps"])

    pygame.quit()


if __name__ == "__main__":
    main()
