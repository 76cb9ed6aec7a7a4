from typing import Callable, List, Protocol


class SpeedChangeListener(Protocol):
    def on_speed_changed(self, new_speed: float) -> None:
        ...


SpeedReader = Callable[[], float]


class InputAdapter:
    """
    Forwards speed notifications from an external source to a listener.

    Delivery is synchronous, nothing is buffered or filtered. Instances are
    callable so they can be registered directly as an observer.
    """
    def __init__(self, listener: SpeedChangeListener) -> None:
        self.listener = listener

    def __call__(self, new_speed: float) -> None:
        self.deliver(new_speed)

    def deliver(self, new_speed: float) -> None:
        self.listener.on_speed_changed(new_speed)

    def poll(self, read_speed: SpeedReader) -> float:
        """Pull a value from a source that produces speeds on demand."""
        new_speed = read_speed()
        self.deliver(new_speed)

        return new_speed


class SpeedFeed:
    """Base for speed sources, notifies every observer on publish."""
    def __init__(self) -> None:
        self._observers: List[Callable[[float], None]] = []

    def add_observer(self, callback: Callable[[float], None]) -> None:
        self._observers.append(callback)

    def remove_observer(self, callback: Callable[[float], None]) -> None:
        if callback in self._observers:
            self._observers.remove(callback)

    def publish(self, new_speed: float) -> None:
        for callback in list(self._observers):
            callback(new_speed)
