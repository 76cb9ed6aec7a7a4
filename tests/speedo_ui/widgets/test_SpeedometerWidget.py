# Required before importing pygame, otherwise screen might flicker during tests
import os
os.environ["SDL_VIDEODRIVER"] = "dummy"

import unittest
from unittest.mock import MagicMock

import pygame
from pygame import Surface

from speedo_ui.core.dataclasses import Bounds, GaugeConfig
from speedo_ui.gauge.GaugeRenderer import GaugeRenderer
from speedo_ui.gauge.InputAdapter import InputAdapter, SpeedFeed
from speedo_ui.gauge.SizingPolicy import MeasureSpec
from speedo_ui.gauge.primitives import Fill
from speedo_ui.widgets.SpeedometerWidget import SpeedometerWidget
from speedo_ui.widgets.Widget import Widget


class TestSpeedometerWidget(unittest.TestCase):
    def setUp(self):
        pygame.init()
        self.renderer = MagicMock()
        self.renderer.render.return_value = [Fill((0, 0, 0, 255))]
        self.painter = MagicMock()
        self.widget = SpeedometerWidget(
            position=(10, 20),
            renderer=self.renderer,
            painter=self.painter
        )
        self.screen = Surface((800, 600))

    def test_initialization_defaults(self):
        self.assertIsInstance(self.widget, Widget)
        self.assertEqual(self.widget.position, (10, 20))
        self.assertEqual(self.widget.get_max_speed(), 100)
        self.assertEqual(self.widget.get_current_speed(), 0)
        self.assertIsNone(self.widget.surface)
        self.assertTrue(self.widget.dirty)

    def test_config_is_applied(self):
        config = GaugeConfig(max_speed=240, current_speed=300, number_of_steps=12, radius_ratio=2.0)
        widget = SpeedometerWidget((0, 0), config, self.renderer, self.painter)

        self.assertEqual(widget.get_max_speed(), 240)
        self.assertEqual(widget.get_current_speed(), 240)
        self.assertEqual(widget.model.get_number_of_steps(), 12)
        self.assertEqual(widget.model.radius_ratio, 2.0)

    def test_default_renderer_uses_config(self):
        config = GaugeConfig(segment_degrees=2.0, exact_sweep=False)
        widget = SpeedometerWidget((0, 0), config)

        self.assertIsInstance(widget.renderer, GaugeRenderer)
        self.assertEqual(widget.renderer.segment_degrees, 2.0)
        self.assertFalse(widget.renderer.exact_sweep)

    def test_paints_are_built_once(self):
        self.assertEqual(self.widget.paints, self.widget.config.style.paints())

    def test_measure_resizes_and_recomputes_geometry(self):
        measurement = self.widget.measure(MeasureSpec.at_most(400), MeasureSpec.at_most(100))

        self.assertEqual((measurement.width, measurement.height), (200, 100))
        self.assertEqual((self.widget.width, self.widget.height), (200, 100))
        self.assertEqual(self.widget.model.bounds, Bounds(200, 100))
        self.assertEqual(self.widget.surface.get_size(), (200, 100))
        self.assertEqual(self.widget.model.geometry.center_y, 100)

    def test_measure_with_same_size_keeps_geometry(self):
        self.widget.measure(MeasureSpec.exactly(300), MeasureSpec.exactly(300))
        geometry = self.widget.model.geometry
        surface = self.widget.surface

        self.widget.measure(MeasureSpec.exactly(300), MeasureSpec.exactly(200))

        self.assertIs(self.widget.model.geometry, geometry)
        self.assertIs(self.widget.surface, surface)

    def test_draw_measures_unconstrained_when_never_measured(self):
        self.widget.draw(self.screen)

        self.assertEqual((self.widget.width, self.widget.height), (300, 150))

    def test_draw_renders_paints_and_blits(self):
        screen = MagicMock()
        self.widget.measure(MeasureSpec.exactly(300), MeasureSpec.exactly(150))
        self.widget.set_current_speed(40)

        self.widget.draw(screen)

        state, geometry, paints = self.renderer.render.call_args.args
        self.assertEqual(state.current_speed, 40)
        self.assertIs(geometry, self.widget.model.geometry)
        self.assertIs(paints, self.widget.paints)
        self.painter.paint.assert_called_once_with(self.widget.surface, [Fill((0, 0, 0, 255))])
        screen.blit.assert_called_once_with(self.widget.surface, (10, 20))
        self.assertFalse(self.widget.dirty)

    def test_draw_only_renders_when_dirty(self):
        self.widget.draw(self.screen)
        self.widget.draw(self.screen)

        self.assertEqual(self.renderer.render.call_count, 1)

        self.widget.set_current_speed(10)
        self.widget.draw(self.screen)

        self.assertEqual(self.renderer.render.call_count, 2)

    def test_unchanged_speed_still_invalidates(self):
        self.widget.set_current_speed(10)
        self.widget.draw(self.screen)

        self.widget.set_current_speed(10)

        self.assertTrue(self.widget.dirty)

    def test_rejected_max_speed_does_not_invalidate(self):
        self.widget.draw(self.screen)

        self.widget.set_max_speed(-5)

        self.assertFalse(self.widget.dirty)
        self.assertEqual(self.widget.get_max_speed(), 100)

    def test_speed_setter_saturates(self):
        self.widget.set_current_speed(150)

        self.assertEqual(self.widget.get_current_speed(), 100)

    def test_collapsed_widget_draws_nothing(self):
        screen = MagicMock()
        self.widget.measure(MeasureSpec.exactly(0), MeasureSpec.exactly(0))

        self.widget.draw(screen)

        self.renderer.render.assert_not_called()
        screen.blit.assert_not_called()

    def test_widget_is_a_speed_listener(self):
        feed = SpeedFeed()
        feed.add_observer(InputAdapter(self.widget))
        self.widget.draw(self.screen)

        feed.publish(75)

        self.assertEqual(self.widget.get_current_speed(), 75)
        self.assertTrue(self.widget.dirty)


class TestSpeedometerWidgetRendering(unittest.TestCase):
    def setUp(self):
        pygame.init()

    def test_draw_with_real_renderer_and_painter(self):
        screen = Surface((400, 300))
        widget = SpeedometerWidget((50, 50))
        widget.measure(MeasureSpec.at_most(300), MeasureSpec.at_most(300))

        for speed in (0, 33.3, 100, 250):
            widget.set_current_speed(speed)
            widget.draw(screen)

        self.assertEqual(widget.get_current_speed(), 100)
        self.assertFalse(widget.dirty)


if __name__ == "__main__":
    unittest.main()
