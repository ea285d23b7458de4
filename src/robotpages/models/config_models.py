"""Configuration data models."""

import os
from dataclasses import dataclass
from typing import Any, Dict

import yaml
from robot.utils import timestr_to_secs


@dataclass
class PageLibraryConfig:
    """Configuration for PageLibrary (import arguments or YAML file)."""

    default_application: str = "Default"
    web_library: str = "Browser"  # Browser or SeleniumLibrary
    presence_timeout: float = 5.0  # seconds
    log_level: str = "INFO"
    warn_on_key_collision: bool = True

    @classmethod
    def from_kwargs(cls, **kwargs) -> "PageLibraryConfig":
        """Create config from keyword arguments (RF library import args)."""
        config = cls()
        config._apply(kwargs)
        return config

    @classmethod
    def from_yaml(cls, yaml_path: str) -> "PageLibraryConfig":
        """Load configuration from a YAML file."""
        with open(yaml_path, "r") as f:
            data = yaml.safe_load(f) or {}

        config = cls()
        config._apply(data)
        return config

    def update(self, **kwargs) -> None:
        """Update configuration values; None values are ignored."""
        self._apply(kwargs)

    def _apply(self, values: Dict[str, Any]) -> None:
        if values.get("default_application") is not None:
            self.default_application = self._expand_env(str(values["default_application"]))
        if values.get("web_library") is not None:
            self.web_library = self._expand_env(str(values["web_library"]))
        if values.get("presence_timeout") is not None:
            timeout = values["presence_timeout"]
            if isinstance(timeout, str):
                timeout = self._expand_env(timeout)
            # Accepts RF time format (e.g. "1s", "500ms", "2 minutes")
            self.presence_timeout = timestr_to_secs(timeout)
        if values.get("log_level") is not None:
            self.log_level = str(values["log_level"]).upper()
        if values.get("warn_on_key_collision") is not None:
            self.warn_on_key_collision = self._to_bool(values["warn_on_key_collision"])

    @staticmethod
    def _expand_env(value: str) -> str:
        """Resolve %{ENV_VAR} and ${ENV_VAR} references."""
        if (value.startswith("%{") or value.startswith("${")) and value.endswith("}"):
            return os.environ.get(value[2:-1], "")
        return value

    @staticmethod
    def _to_bool(value: Any) -> bool:
        if isinstance(value, str):
            return value.strip().lower() not in ("false", "no", "off", "0", "")
        return bool(value)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            key: value for key, value in self.__dict__.items()
            if not key.startswith('_')
        }
