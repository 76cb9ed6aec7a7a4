import math

from speedo_ui.gauge.InputAdapter import SpeedFeed


class SimulatedSpeedFeed(SpeedFeed):
    """Publishes a sine wave sweeping the whole [0, max_speed] range."""
    def __init__(self, max_speed: float, period: float = 6.0) -> None:
        super().__init__()

        if period <= 0:
            raise ValueError(f"period must be positive, got {period}")

        self.max_speed = max_speed
        self.period = period

    def value_at(self, now: float) -> float:
        phase = 2 * math.pi * now / self.period
        return self.max_speed * 0.5 * (1 + math.sin(phase))

    def tick(self, now: float) -> float:
        value = self.value_at(now)
        self.publish(value)

        return value
