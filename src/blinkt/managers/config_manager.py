"""
Config Manager

Loads the YAML configuration and turns it into typed config models.
Falls back to the packaged factory defaults when the user file is missing
or broken.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional, Union

from blinkt.models.config import AppConfig, BlinktConfig, LoggingConfig
from blinkt.models.enums import LogCategory, LogLevel
from blinkt.utils.logger import get_logger

log = get_logger().for_category(LogCategory.CONFIG)

FACTORY_DEFAULTS_PATH = Path(__file__).parent.parent / "config" / "factory_defaults.yaml"


class ConfigManager:
    """
    Configuration loader

    Example:
        config = ConfigManager("blinkt.yaml")
        config.load()

        blinkt = Blinkt.from_config(gpio, config.blinkt)
        configure_logger(config.logging.level, config.logging.colors)

    Keys missing from the user file take their factory default value.
    Invalid values raise the driver's validation errors (InvalidGpioPin,
    InvalidBrightnessLevel) rather than being silently replaced.
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None,
                 defaults_path: Union[str, Path] = FACTORY_DEFAULTS_PATH):
        """
        Args:
            config_path: User YAML file; None means factory defaults only
            defaults_path: Factory defaults fallback
        """
        self.config_path = Path(config_path) if config_path is not None else None
        self.factory_defaults_path = Path(defaults_path)
        self.data: Dict[str, Any] = {}
        self.config: Optional[AppConfig] = None

    def load(self) -> AppConfig:
        """
        Process:
        1. Load factory defaults
        2. Load user config.yaml on top (per section, per key)
        3. Fallback to factory defaults alone on read/parse failure
        4. Build typed AppConfig
        """
        defaults = self._read_yaml(self.factory_defaults_path)
        self.data = {section: dict(values or {}) for section, values in defaults.items()}

        if self.config_path is not None:
            try:
                user_data = self._read_yaml(self.config_path)
                self.data = self._merge(self.data, user_data)
                log.info("Loaded configuration", path=str(self.config_path))
            except (OSError, yaml.YAMLError) as ex:
                log.error("Failed to load config", path=str(self.config_path),
                          error=str(ex), error_type=type(ex).__name__)
                log.warn("Falling back to factory defaults")
        else:
            log.info("Using factory defaults")

        self.config = self._build(self.data)
        return self.config

    @property
    def blinkt(self) -> BlinktConfig:
        return self._require().blinkt

    @property
    def logging(self) -> LoggingConfig:
        return self._require().logging

    # -------------------------------
    # Internals
    # -------------------------------

    def _require(self) -> AppConfig:
        if self.config is None:
            raise RuntimeError("Call load() first")
        return self.config

    @staticmethod
    def _read_yaml(path: Path) -> Dict[str, Any]:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise yaml.YAMLError(f"Top level of {path} must be a mapping")
        return data

    @staticmethod
    def _merge(base: Dict[str, Any], user_data: Dict[str, Any]) -> Dict[str, Any]:
        merged = {section: dict(values) for section, values in base.items()}
        for section, values in user_data.items():
            if section not in merged:
                log.warn(f"Ignoring unknown config section '{section}'")
                continue
            if values is None:
                continue
            if not isinstance(values, dict):
                raise yaml.YAMLError(f"Config section '{section}' must be a mapping")
            merged[section].update(values)
        return merged

    @staticmethod
    def _build(data: Dict[str, Any]) -> AppConfig:
        blinkt_data = data.get("blinkt", {})
        logging_data = data.get("logging", {})

        level_name = str(logging_data.get("level", LogLevel.INFO.name)).upper()
        try:
            level = LogLevel[level_name]
        except KeyError:
            raise ValueError(f"Unknown log level: {level_name}") from None

        return AppConfig(
            blinkt=BlinktConfig(
                data_pin=blinkt_data.get("data_pin"),
                clock_pin=blinkt_data.get("clock_pin"),
                brightness=blinkt_data.get("brightness"),
                clear_on_exit=_require_bool(blinkt_data, "blinkt", "clear_on_exit", False),
            ),
            logging=LoggingConfig(
                level=level,
                colors=_require_bool(logging_data, "logging", "colors", True),
            ),
        )


def _require_bool(section_data: Dict[str, Any], section: str, key: str, default: bool) -> bool:
    """YAML true/false only; a quoted "false" is a string, not a boolean"""
    value = section_data.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"{section}.{key} must be true or false, got {value!r}")
    return value
