"""Configuration management for countup."""

import logging
from pathlib import Path
from typing import Optional, Dict, Any
import yaml

_log = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "~/.config/countup/config.yaml"

ANIMATION_DEFAULTS: Dict[str, Any] = {
    "steps": 15,
    "tick_interval_ms": 17,
    "formatter": "plain",
}

DISPLAY_DEFAULTS: Dict[str, Any] = {
    "label": "value",
}


class ConfigManager:
    """Manage countup configuration from YAML."""

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = Path(config_path or DEFAULT_CONFIG_PATH).expanduser()
        self.data = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        if not self.config_path.exists():
            self._create_default_config()

        return self._read_yaml()

    def _read_yaml(self) -> Dict[str, Any]:
        """Read and parse YAML file."""
        try:
            with open(self.config_path, "r") as f:
                content = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            _log.warning("Error reading config %s: %s", self.config_path, e)
            return {}

        if not isinstance(content, dict):
            return {}
        return content

    def _create_default_config(self) -> None:
        """Create default configuration file."""
        default_config = {
            "animation": dict(ANIMATION_DEFAULTS),
            "display": dict(DISPLAY_DEFAULTS),
        }

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w") as f:
                yaml.dump(default_config, f, default_flow_style=False)
        except OSError as e:
            _log.warning("Could not write default config %s: %s", self.config_path, e)

    def _section(self, name: str) -> Dict[str, Any]:
        """Return a top-level mapping, or {} when it is missing or malformed."""
        section = self.data.get(name)
        if section is None:
            return {}
        if not isinstance(section, dict):
            _log.warning("Config section '%s' is not a mapping, using defaults", name)
            return {}
        return section

    def get_animation_config(self) -> Dict[str, Any]:
        """Get animation settings (steps, tick interval, formatter name)."""
        config = {**ANIMATION_DEFAULTS, **self._section("animation")}

        for key in ("steps", "tick_interval_ms"):
            try:
                config[key] = int(config[key])
            except (TypeError, ValueError):
                _log.warning("Invalid %s=%r in config, using %r", key, config[key], ANIMATION_DEFAULTS[key])
                config[key] = ANIMATION_DEFAULTS[key]

        config["formatter"] = str(config["formatter"])
        return config

    def get_display_config(self) -> Dict[str, Any]:
        """Get display settings."""
        return {**DISPLAY_DEFAULTS, **self._section("display")}

    def save(self) -> None:
        """Save configuration to file."""
        with open(self.config_path, "w") as f:
            yaml.dump(self.data, f, default_flow_style=False)
