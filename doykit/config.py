# doykit/config.py

"""
Runtime configuration for doykit.

Configuration is a small frozen dataclass. It can be built in code or read
from a YAML file:

    sentinel: -1
    log_level: DEBUG
    month_abbreviations: [Jan, Feb, Mar, Apr, May, Jun,
                          Jul, Aug, Sep, Oct, Nov, Dec]

Usage:
    from doykit.config import load_config
    config = load_config("doykit.yaml")
    result = resolve_date_of_year(60, config=config)
"""

import logging
import os
from dataclasses import dataclass, field, fields
from typing import Tuple

import yaml

from .constants import SENTINEL, MONTH_ABBREVIATIONS, MONTHS_PER_YEAR


class ConfigError(Exception):
    """Raised when a configuration file or value is invalid."""
    pass


@dataclass(frozen=True)
class DoyConfig:
    """
    Settings shared by the resolvers and the logger factory.

    Attributes
    ----------
    sentinel : int
        Value written to month/day fields of a failed resolution.
        Must not be a valid month or day (i.e. must be < 1).
    log_level : str
        Logging level name used by ``doykit.logs.logger.get_logger``.
    month_abbreviations : tuple of str
        Twelve month labels, January first.
    """
    sentinel: int = SENTINEL
    log_level: str = "INFO"
    month_abbreviations: Tuple[str, ...] = field(default=MONTH_ABBREVIATIONS)

    def __post_init__(self):
        self.validate()

    def validate(self):
        """
        Validate configuration values.

        Raises
        ------
        ConfigError
            If the sentinel could be mistaken for a real month/day, the log
            level is unknown, or the month labels are not twelve strings.
        """
        if isinstance(self.sentinel, bool) or not isinstance(self.sentinel, int):
            raise ConfigError(f"sentinel must be an integer, got {self.sentinel!r}")
        if self.sentinel >= 1:
            raise ConfigError(
                f"sentinel must be below 1 so it cannot be a valid month or day, got {self.sentinel}"
            )
        if not isinstance(logging.getLevelName(str(self.log_level).upper()), int):
            raise ConfigError(f"Unknown log_level: {self.log_level!r}")
        labels = self.month_abbreviations
        if (not isinstance(labels, (list, tuple)) or len(labels) != MONTHS_PER_YEAR
                or not all(isinstance(label, str) and label.strip() for label in labels)):
            raise ConfigError(
                f"month_abbreviations must be {MONTHS_PER_YEAR} non-empty strings, got {labels!r}"
            )

    def month_label(self, month: int) -> str:
        """Return the label for a 1-based month number."""
        return self.month_abbreviations[month - 1]


DEFAULT_CONFIG = DoyConfig()


def load_config(config_path: str) -> DoyConfig:
    """
    Load a ``DoyConfig`` from a YAML file.

    Missing keys fall back to defaults; unknown keys are rejected.

    Parameters
    ----------
    config_path : str
        Path to the YAML file.

    Returns
    -------
    DoyConfig

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ConfigError
        If the file is not a mapping, has unknown keys, or holds invalid values.
    """
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Config file not found: {config_path}")
    with open(config_path, "r") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        return DoyConfig()
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file must contain a mapping, got {type(raw).__name__}")

    known = {f.name for f in fields(DoyConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ConfigError(f"Unknown config keys: {unknown}. Expected: {sorted(known)}")

    values = dict(raw)
    if "month_abbreviations" in values and isinstance(values["month_abbreviations"], list):
        values["month_abbreviations"] = tuple(values["month_abbreviations"])
    return DoyConfig(**values)
