"""
Runtime configuration.

Loaded from environment variables prefixed ``PROPCHECK_``. The only setting
with real logic behind it is the encoding-check gate: the check applies on
host platforms older than ``rules.ENCODING_CHECK_THRESHOLD`` and is skipped
when the platform version is unknown.
"""

from __future__ import annotations

import logging
import re
import sys
from typing import Optional, Tuple

from pydantic_settings import BaseSettings, SettingsConfigDict

from .rules import ENCODING_CHECK_THRESHOLD, PROPERTIES_EXTENSION

APP_LOGGER_NAME = "propcheck"
DEFAULT_FORMAT = "%(asctime)s [%(levelname).4s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger(__name__)

_VERSION = re.compile(r"^\s*(\d+(?:\.\d+)*)(.*)$")


def parse_version(version: str) -> Tuple[Tuple[int, ...], bool]:
    """
    "2.357" -> ((2, 357), True); "2.357-SNAPSHOT" -> ((2, 357), False).

    The flag tells whether the version is a plain release; a qualified
    version sorts before the release with the same numbers.
    """
    m = _VERSION.match(version)
    if m is None:
        raise ValueError(f"Unparseable version: {version!r}")
    numbers = tuple(int(part) for part in m.group(1).split("."))
    # trailing zeros are insignificant: 2.357 == 2.357.0
    while len(numbers) > 1 and numbers[-1] == 0:
        numbers = numbers[:-1]
    return numbers, not m.group(2).strip()


def is_older_than(version: str, threshold: str) -> bool:
    return parse_version(version) < parse_version(threshold)


def encoding_check_applies(platform_version: Optional[str],
                           threshold: str = ENCODING_CHECK_THRESHOLD) -> bool:
    if not platform_version:
        return False
    try:
        return is_older_than(platform_version, threshold)
    except ValueError as e:
        # an unreadable version is as good as no version
        logger.debug("encoding check skipped: %s", e)
        return False


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PROPCHECK_",
        extra="ignore",
    )

    platform_version: Optional[str] = None
    # Explicit override; when unset the gate follows platform_version.
    encoding_check: Optional[bool] = None
    extension: str = PROPERTIES_EXTENSION
    log_level: str = "WARNING"

    def encoding_check_enabled(self) -> bool:
        if self.encoding_check is not None:
            return self.encoding_check
        return encoding_check_applies(self.platform_version)


def setup_logging(level: str = "WARNING") -> None:
    root = logging.getLogger(APP_LOGGER_NAME)

    for handler in root.handlers[:]:
        root.removeHandler(handler)

    root.setLevel(getattr(logging, level.upper(), logging.WARNING))

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(DEFAULT_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)
