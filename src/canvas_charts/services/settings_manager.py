"""Theme files for the charting engine.

A theme is an EngineSettings object stored as JSON in the themes directory
(`./themes` by default). Files are validated against the schema on load, so
a bad palette or a negative hit radius fails here rather than mid-render.
"""

import json
import logging
from pathlib import Path

from ..schemas import EngineSettings

logger = logging.getLogger(__name__)

THEME_DIR = Path.cwd() / "themes"
THEME_SUFFIX = ".json"


def _theme_path(name: str, directory: Path | None) -> Path:
    filename = name if name.endswith(THEME_SUFFIX) else f"{name}{THEME_SUFFIX}"
    return (directory or THEME_DIR) / filename


def list_themes(directory: Path | None = None) -> list[str]:
    """Theme filenames in the themes directory, sorted (e.g. ['dark.json'])."""
    directory = directory or THEME_DIR
    if not directory.exists():
        return []
    return sorted(f.name for f in directory.glob(f"*{THEME_SUFFIX}"))


def load_settings(name: str, directory: Path | None = None) -> EngineSettings:
    """Load and validate a theme.

    Args:
        name: Theme filename, with or without the '.json' suffix.
        directory: Themes directory; defaults to THEME_DIR.

    Returns:
        Validated EngineSettings object.

    Raises:
        FileNotFoundError: If the theme file doesn't exist.
        ValidationError: If the JSON doesn't match the schema.
    """
    file_path = _theme_path(name, directory)
    if not file_path.exists():
        raise FileNotFoundError(f"Theme file not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        data = json.load(f)

    settings = EngineSettings.model_validate(data)
    logger.debug(f"Loaded theme {file_path.name}")
    return settings


def save_settings(
    settings: EngineSettings, name: str, directory: Path | None = None
) -> Path:
    """Write a theme file, creating the themes directory when needed.

    Returns:
        Path of the written file.
    """
    file_path = _theme_path(name, directory)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    with open(file_path, "w", encoding="utf-8") as f:
        f.write(settings.model_dump_json(indent=2))
    logger.info(f"Saved theme {file_path.name}")
    return file_path
