"""runtime settings shared by every sequence."""
import logging
from dataclasses import dataclass, field, fields, replace, asdict
from typing import Any, Callable

from .utils import equal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """configuration for default comparisons and rendering"""
    equal: Callable[[Any, Any], bool] = field(default=equal)
    string_separator: str = ', '


_active = Settings()


def settings() -> Settings:
    return _active


def configure(**changes: Any) -> Settings:
    """
    replaces the given settings fields and returns the new settings.
    operations read the settings when they use them, so running sessions see the change.
    """
    global _active
    known = {f.name for f in fields(Settings)}
    unknown = set(changes) - known
    if unknown:
        raise TypeError(f"unknown settings: {', '.join(sorted(unknown))}")
    _active = replace(_active, **changes)
    logger.debug("settings changed: %s", changes)
    return _active


def reset() -> Settings:
    """restores the default settings"""
    global _active
    _active = Settings()
    logger.debug("settings reset: %s", asdict(_active))
    return _active
