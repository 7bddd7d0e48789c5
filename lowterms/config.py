"""Settings for the ``lowterms`` command line, read from a TOML file.

Example file::

    [lowterms]
    variant = "plain"
    log_level = "DEBUG"
"""
from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Type

from .base import RationalBase
from .errors import InvalidArgument
from .rational import Rational, SimplifiedRational

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "lowterms.toml"

VARIANTS: Dict[str, Type[RationalBase]] = {
    "simplified": SimplifiedRational,
    "plain": Rational,
}

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Settings:
    variant: str = "simplified"
    log_level: str = "WARNING"

    @property
    def rational_class(self) -> Type[RationalBase]:
        return VARIANTS[self.variant]


def settings_from_mapping(data: Dict[str, Any]) -> Settings:
    """Validate the ``[lowterms]`` table and build :class:`Settings`."""
    unknown = set(data) - {"variant", "log_level"}
    if unknown:
        raise InvalidArgument(f"Unknown config keys: {', '.join(sorted(unknown))}")

    variant = data.get("variant", Settings.variant)
    if variant not in VARIANTS:
        raise InvalidArgument(
            f"variant must be one of {sorted(VARIANTS)}, got {variant!r}"
        )

    log_level = str(data.get("log_level", Settings.log_level)).upper()
    if log_level not in _LOG_LEVELS:
        raise InvalidArgument(f"Unknown log_level: {log_level!r}")

    return Settings(variant=variant, log_level=log_level)


def load_settings(path: Optional[str] = None) -> Settings:
    """Load settings from *path*, or from ``./lowterms.toml`` if present.

    An explicitly given path must exist; the default file is optional.
    """
    if path is not None:
        config_path = Path(path).expanduser().resolve()
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
    else:
        config_path = Path.cwd() / DEFAULT_CONFIG_NAME
        if not config_path.exists():
            return Settings()

    with config_path.open("rb") as cf:
        params = tomllib.load(cf)

    table = params.get("lowterms", {})
    if not isinstance(table, dict):
        raise InvalidArgument("[lowterms] must be a table")
    settings = settings_from_mapping(table)
    logger.debug("Loaded settings from %s: %s", config_path, settings)
    return settings


__all__ = ["Settings", "VARIANTS", "load_settings", "settings_from_mapping"]
