"""Plant settings for OEE targets and shifts."""

from oeewatch.config.settings import (
    OEESettings,
    OEETargets,
    ShiftSettings,
    load_settings,
    settings_from_mapping,
    settings_to_jsonable,
)

__all__ = [
    "OEESettings",
    "OEETargets",
    "ShiftSettings",
    "load_settings",
    "settings_from_mapping",
    "settings_to_jsonable",
]
