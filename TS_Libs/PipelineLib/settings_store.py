"""
Settings persistence for Tattoo Stencil.

Stencil settings are stored as a small JSON document:

    {
      "schema_version": 1,
      "settings": {"threshold": 128, "contrast": 1.5, ...}
    }

Functions:
    default_settings: The settings a fresh session starts with
    reset_settings: Restore defaults while keeping the current mode
    save_settings: Write settings to a JSON file
    load_settings: Read settings from a JSON file, falling back to defaults
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from TS_Libs.constants import (
    FIELD_SCHEMA_VERSION,
    FIELD_SETTINGS,
    SETTINGS_SCHEMA_VERSION,
)
from TS_Libs.StencilEngineLib.raster_models import StencilMode, StencilSettings
from TS_Libs.StencilEngineLib.stencil_errors import UnsupportedMode

logger = logging.getLogger(__name__)


def default_settings() -> StencilSettings:
    return StencilSettings()


def reset_settings(settings: StencilSettings) -> StencilSettings:
    """Return default settings, keeping the mode the user had selected."""
    return StencilSettings(mode=settings.mode)


def save_settings(settings_path: Union[str, Path], settings: StencilSettings) -> Path:
    """
    Save settings to a JSON file.

    Args:
        settings_path: Destination file
        settings: Settings to store

    Returns:
        The path written

    Raises:
        OSError: If the file cannot be written
    """
    settings_path = Path(settings_path)
    payload: Dict[str, Any] = {
        FIELD_SCHEMA_VERSION: SETTINGS_SCHEMA_VERSION,
        FIELD_SETTINGS: settings.to_dict(),
    }

    settings_path.parent.mkdir(parents=True, exist_ok=True)
    settings_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    logger.debug(f"Saved settings to {settings_path}")
    return settings_path


def load_settings(settings_path: Union[str, Path]) -> StencilSettings:
    """
    Load settings from a JSON file.

    Missing or unreadable files yield the defaults. Missing fields take
    their default value and numeric fields are clamped into range.

    Args:
        settings_path: File to read

    Returns:
        Loaded StencilSettings
    """
    settings_path = Path(settings_path)
    if not settings_path.exists():
        return default_settings()

    try:
        payload = json.loads(settings_path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Could not load settings file {settings_path}: {e}")
        return default_settings()

    if not isinstance(payload, dict):
        logger.warning(f"Ignoring malformed settings file {settings_path}")
        return default_settings()

    # Bare settings objects (no schema wrapper) are accepted as well
    data = payload.get(FIELD_SETTINGS, payload)
    if not isinstance(data, dict):
        logger.warning(f"Ignoring malformed settings file {settings_path}")
        return default_settings()

    if "mode" in data:
        try:
            StencilMode.parse(data["mode"])
        except UnsupportedMode as e:
            logger.warning(f"{e}; using default mode")
            data = {k: v for k, v in data.items() if k != "mode"}

    try:
        return StencilSettings.from_dict(data).clamped()
    except (TypeError, ValueError) as e:
        logger.warning(f"Invalid settings in {settings_path}: {e}")
        return default_settings()
