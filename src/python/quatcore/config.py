"""
Library settings loaded from YAML.

A settings file is optional. When present it may either hold the keys at
top level or under a ``quatcore:`` section::

    quatcore:
      epsilon: 1.0e-4
      strict_finite: true
      log_level: DEBUG
"""
from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional, Union

import yaml

from quatcore.constants import QUAT_EPSILON
from quatcore.quaternion import Quaternion
from quatcore.validation import ensure_finite

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'


@dataclass
class QuatcoreConfig:
    """
    Settings for callers that compare and check quaternions.

    Attributes
    ----------
    epsilon : float
        Componentwise tolerance used by ``equals``.
    strict_finite : bool
        Whether ``check`` raises (True) or warns (False) on inf/NaN.
    log_level : str
        Level name applied by ``configure_logging``. A standard numeric
        level (e.g. 10) is accepted and stored as its name.
    """
    epsilon: float = QUAT_EPSILON
    strict_finite: bool = False
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        # PyYAML reads exponent-only literals such as 1e-4 as strings
        self.epsilon = float(self.epsilon)
        if self.epsilon <= 0:
            raise ValueError(f"epsilon must be positive, got {self.epsilon}")
        if not isinstance(self.strict_finite, bool):
            raise ValueError(
                f"strict_finite must be true or false, got {self.strict_finite!r}"
            )
        self.log_level = self._level_name(self.log_level)

    @staticmethod
    def _level_name(level: Union[str, int]) -> str:
        """Canonical level name for a level name or a standard numeric level."""
        if isinstance(level, bool) or not isinstance(level, (str, int)):
            raise ValueError(f"log_level must be a name or a number, got {level!r}")
        if isinstance(level, int):
            name = logging.getLevelName(level)
            if name.startswith("Level "):
                raise ValueError(f"Unknown log level: {level}")
            return name
        if not isinstance(logging.getLevelName(level.upper()), int):
            raise ValueError(f"Unknown log level: {level}")
        return level.upper()

    def equals(self, a: Quaternion, b: Quaternion) -> bool:
        """Quaternion equality with the configured tolerance."""
        return a.equals_with_epsilon(b, self.epsilon)

    def check(self, q: Quaternion, what: str = "quaternion") -> Quaternion:
        """``ensure_finite`` with the configured strictness."""
        return ensure_finite(q, what=what, strict=self.strict_finite)


def load_config(config_path: Optional[Union[str, Path]] = None) -> QuatcoreConfig:
    """
    Load library settings from a YAML file.

    Args:
        config_path: Path to the YAML file. None returns the defaults.

    Returns:
        QuatcoreConfig populated from the file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: On unknown keys or invalid values.
    """
    if config_path is None:
        return QuatcoreConfig()

    logger.info("Loading configuration from: %s", config_path)
    with open(config_path, 'r') as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"{config_path}: expected a mapping, got {type(raw).__name__}")
    section = raw.get('quatcore', raw) or {}

    known = {f.name for f in fields(QuatcoreConfig)}
    unknown = set(section) - known
    if unknown:
        raise ValueError(
            f"Unknown configuration keys: {sorted(unknown)}. Valid keys: {sorted(known)}"
        )

    config = QuatcoreConfig(**section)
    logger.info("Configuration: epsilon=%g strict_finite=%s log_level=%s",
                config.epsilon, config.strict_finite, config.log_level)
    return config


def configure_logging(level: Union[str, int, QuatcoreConfig] = "WARNING") -> logging.Logger:
    """
    Route library log records to stdout and set the ``quatcore`` level.

    Accepts a level name, a numeric level, or a QuatcoreConfig.
    """
    if isinstance(level, QuatcoreConfig):
        level = level.log_level
    if isinstance(level, str):
        level = level.upper()

    logging.basicConfig(
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    pkg_logger = logging.getLogger('quatcore')
    pkg_logger.setLevel(level)
    return pkg_logger
