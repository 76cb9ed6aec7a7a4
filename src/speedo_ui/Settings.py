from typing import Dict, Any
from pathlib import Path
import copy
import logging

import tomllib


class Settings:
    DEFAULTS: Dict[str, Any] = {
        "gauge": {
            "max_speed": 100,
            "current_speed": 0,
            "number_of_steps": 10,
            "on_color": "#FFEB3BFF",
            "off_color": "#00000040",
            "scale_color": "#2196F3FF",
            "reading_color": "#000000FF",
            "background_color": "#FFFFFFFF",
            "scale_text_size": 12,
            "reading_text_size": 50,
            "arc_width": 35,
            "density": 1.0,
            "radius_ratio": 1.4,
            "segment_degrees": 4,
            "exact_sweep": True,
        },
        "window": {
            "width": 600,
            "height": 300,
            "title": "Speedometer",
            "fps": 60,
        },
        "simulation": {
            "enabled": True,
            "period": 6.0,
        },
    }

    def __init__(self, path: str) -> None:
        self.path = Path(path)
        self.settings: Dict[str, Any] = {}
        self.load()

    def load(self) -> None:
        self.settings = copy.deepcopy(self.DEFAULTS)

        if not self.path.exists():
            logging.info(f"No settings file at '{self.path}', using defaults")
            return

        try:
            with self.path.open("rb") as file:
                loaded = tomllib.load(file)
        except tomllib.TOMLDecodeError as e:
            logging.warning(f"Malformed settings file '{self.path}': {e}, using defaults")
            return

        self.settings = self._merge(self.settings, loaded)

    def get(self, key: str, default: Any = None) -> Any:
        return self.settings.get(key, default)

    def _merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        for key, value in override.items():
            if (
                key in base
                and isinstance(base[key], dict)
                and isinstance(value, dict)
            ):
                base[key] = self._merge(base[key], value)
            else:
                base[key] = value
        return base
