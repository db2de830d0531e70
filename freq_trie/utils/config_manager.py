# config_manager.py - JSON config manager

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "max_results": 10,      # rows shown per search
    "ranked": True,         # sort matches by frequency
    "log_level": "INFO",
    "color": True,
    "word_separator": None, # None = any whitespace between word and count
}


class Config:
    """
    Settings for the command line front end.
    With a path, values are read from (and saved back to) a JSON file;
    without one they live in memory only.
    """

    def __init__(self, path: Optional[str] = None):
        self.path = path
        self.data: Dict[str, Any] = dict(DEFAULTS)
        if self.path:
            self._load()

    def _load(self):
        if not os.path.exists(self.path):
            self.save()
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("could not read config %s, using defaults: %s", self.path, e)
            return
        if not isinstance(loaded, dict):
            logger.warning("config %s is not a JSON object, using defaults", self.path)
            return
        unknown = set(loaded) - set(DEFAULTS)
        if unknown:
            logger.warning("ignoring unknown config keys: %s", ", ".join(sorted(unknown)))
        self.data.update({k: v for k, v in loaded.items() if k in DEFAULTS})

    def save(self):
        if not self.path:
            return
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key: str) -> Any:
        return self.data[key]

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    def set(self, key: str, val: Any):
        """Set an option, coercing to the type of its default, and save."""
        if key not in self.data:
            raise KeyError(f"no such option: {key}")
        default = DEFAULTS[key]
        if default is None or val is None:
            self.data[key] = val
        elif isinstance(default, bool) and isinstance(val, str):
            self.data[key] = val.strip().lower() in ("1", "true", "yes", "on")
        else:
            self.data[key] = type(default)(val)
        self.save()

    def items(self):
        return self.data.items()
