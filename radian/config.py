"""Configuration for composing the angle core with its collaborators.

Settings are read from a JSON file and merged section by section over the
defaults below.  Environment variables win over the file:

* ``RADIAN_CONFIG`` - path of the config file (default ``radian_config.json``)
* ``RADIAN_TRIG_BACKEND`` - trig provider name (``math``, ``numpy``, ``bare``)
* ``RADIAN_FORMAT`` - formatter name (``display``, ``compact``)

Nothing here runs at import time; call :meth:`RadianConfig.apply` once when
the application starts.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional
import copy
import json
import logging
import os

from . import trig
from .formatting import get_formatter

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "radian_config.json"

DEFAULT_CONFIG: Dict[str, Dict[str, Any]] = {
    "trig": {
        "backend": trig.MathTrig.name,
    },
    "format": {
        "style": "display",
        "precision": 5,
    },
}

_ENV_OVERRIDES = {
    "RADIAN_TRIG_BACKEND": ("trig", "backend"),
    "RADIAN_FORMAT": ("format", "style"),
}


class RadianConfig:
    """Configuration manager for provider and formatter selection."""

    def __init__(self, config_file: Optional[str] = None):
        self.config_file = config_file or os.getenv("RADIAN_CONFIG") or DEFAULT_CONFIG_FILE
        self.config = self.load_config()

    def load_config(self) -> Dict[str, Dict[str, Any]]:
        """Load configuration from file, falling back to defaults."""
        config = copy.deepcopy(DEFAULT_CONFIG)

        path = Path(self.config_file)
        if path.exists():
            try:
                loaded = json.loads(path.read_text(encoding="utf-8"))
            except (OSError, ValueError) as e:
                logger.warning("Could not load config file %s: %s", self.config_file, e)
            else:
                if isinstance(loaded, dict):
                    for section, values in loaded.items():
                        if isinstance(values, dict):
                            config.setdefault(section, {}).update(values)
                    logger.debug("loaded config from %s", self.config_file)
                else:
                    logger.warning("Ignoring config file %s: top level is not an object", self.config_file)

        for env_name, (section, key) in _ENV_OVERRIDES.items():
            value = os.getenv(env_name)
            if value:
                config[section][key] = value
        return config

    def save_config(self) -> None:
        """Save current configuration to file."""
        Path(self.config_file).write_text(json.dumps(self.config, indent=2), encoding="utf-8")

    def get(self, section: str, key: str, default=None):
        """Get a configuration value."""
        return self.config.get(section, {}).get(key, default)

    def set(self, section: str, key: str, value: Any):
        """Set a configuration value."""
        self.config.setdefault(section, {})[key] = value

    def formatter(self):
        fmt = get_formatter(self.get("format", "style", "display"))
        if hasattr(fmt, "precision"):
            fmt.precision = int(self.get("format", "precision", fmt.precision))
        return fmt

    def apply(self) -> trig.TrigProvider:
        """Install the configured trig provider and return it."""
        trig.set_provider(self.get("trig", "backend", trig.MathTrig.name))
        return trig.get_provider()
