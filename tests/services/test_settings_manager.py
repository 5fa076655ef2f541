import json
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

# Import the module to patch, not just the function
import canvas_charts.services.settings_manager as settings_manager_module
from canvas_charts.schemas import EngineSettings


@pytest.fixture
def mock_theme_dir():
    """Create a temporary directory for themes."""
    with tempfile.TemporaryDirectory() as tmpdir:
        tmp_path = Path(tmpdir)

        theme_data = {
            "palette": ["#111111", "#222222"],
            "hit_radius": 10,
            "max_items": {"pie_chart": 6},
        }
        with open(tmp_path / "compact.json", "w") as f:
            json.dump(theme_data, f)

        with open(tmp_path / "broken.json", "w") as f:
            json.dump({"hit_radius": -1}, f)

        # Patch the THEME_DIR in the module
        with patch.object(settings_manager_module, "THEME_DIR", tmp_path):
            yield tmp_path


def test_list_and_load_themes(mock_theme_dir) -> None:
    assert settings_manager_module.list_themes() == ["broken.json", "compact.json"]

    settings = settings_manager_module.load_settings("compact")
    assert settings.palette == ["#111111", "#222222"]
    assert settings.hit_radius == 10
    assert settings.max_items_for("pie_chart") == 6
    assert settings.color_for(3) == "#222222"


def test_save_round_trip(mock_theme_dir) -> None:
    settings = EngineSettings(grid_intervals=5)
    path = settings_manager_module.save_settings(settings, "five_grid.json")

    assert path == mock_theme_dir / "five_grid.json"
    assert settings_manager_module.load_settings("five_grid.json") == settings


def test_invalid_theme_raises(mock_theme_dir) -> None:
    with pytest.raises(ValidationError):
        settings_manager_module.load_settings("broken.json")


def test_missing_theme_raises(mock_theme_dir) -> None:
    with pytest.raises(FileNotFoundError):
        settings_manager_module.load_settings("nope")


def test_list_themes_without_directory(tmp_path) -> None:
    assert settings_manager_module.list_themes(tmp_path / "missing") == []


def test_settings_carry_ui_metadata() -> None:
    schema = EngineSettings.model_json_schema()
    hit_radius = schema["properties"]["hit_radius"]
    assert hit_radius["ui_group"] == "Interaction"
    assert hit_radius["ui_format"] == "px"

