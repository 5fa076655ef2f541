"""Shared test fixtures."""

from typing import Callable

import pytest

from canvas_charts.renderers.base import RenderContext
from canvas_charts.schemas import EngineSettings, HitTestElement
from canvas_charts.services.controller import ChartController
from canvas_charts.surfaces import RecordingSurface
from tests.factories import (
    create_context,
    create_element,
    create_forecast_rows,
    create_rows,
)


@pytest.fixture
def rows_factory() -> Callable[..., list[dict]]:
    """Fixture that returns the row factory function."""
    return create_rows


@pytest.fixture
def element_factory() -> Callable[..., HitTestElement]:
    """Fixture that returns the hit-test element factory function."""
    return create_element


@pytest.fixture
def context_factory() -> Callable[..., RenderContext]:
    """Fixture that returns the render context factory function."""
    return create_context


@pytest.fixture
def forecast_rows() -> list[dict]:
    """Return a six-month cash outflow forecast."""
    return create_forecast_rows()


@pytest.fixture
def settings() -> EngineSettings:
    """Return the default engine settings."""
    return EngineSettings()


@pytest.fixture
def surface() -> RecordingSurface:
    """Return a 600x270 recording surface."""
    return RecordingSurface(600, 270)


@pytest.fixture
def controller(surface: RecordingSurface) -> ChartController:
    """Return a controller drawing onto the recording surface."""
    return ChartController(surface)
