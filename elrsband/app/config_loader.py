# elrsband/app/config_loader.py
from __future__ import annotations

import logging
from pathlib import Path

import yaml

from elrsband.core.errors import ConfigError

from .config import MonitorConfig


class ConfigLoader:
    """
    Loads a MonitorConfig from a YAML file.

    Example:

        device_id: 0xEE
        timings:
          refresh_interval: 120
          stale_after: 350
        display:
          show_telem: false
        link:
          port: /dev/ttyUSB0
          baudrate: 400000

    Every section is optional; an empty file yields the defaults.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._log = logging.getLogger(__name__)

    def _load_yaml(self) -> object:
        if not self.path.exists():
            raise ConfigError(
                f"Missing config file: {self.path}",
                hint="Check the --config path.",
                details={"path": str(self.path)},
            )
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(
                f"Invalid YAML in {self.path}",
                details={"path": str(self.path), "error": str(e)},
            ) from e

    def load(self) -> MonitorConfig:
        data = self._load_yaml()
        if data is None:
            data = {}
        cfg = MonitorConfig.from_mapping(data)
        self._log.info("CONFIG_LOADED path=%s device_id=0x%02X", self.path, cfg.device_id)
        return cfg
