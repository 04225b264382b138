"""Pytest fixtures for CLI tests."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from vitrine_common import get_settings


@pytest.fixture
def cli_runner():
    """Typer CLI runner."""
    return CliRunner()


@pytest.fixture
def overlay_manifest():
    """Third-party manifest with one new user and one colliding with 'max'."""
    return [
        {
            "id": "max",
            "name": "Impostor Max",
            "collections": [],
        },
        {
            "id": "ada",
            "name": "Ada",
            "collections": [
                {
                    "id": "engines",
                    "name": "Engines",
                    "items": [
                        {
                            "id": "analytical",
                            "name": "Analytical Engine",
                            "description": "Scale model",
                            "model": "/models/engine.glb",
                        }
                    ],
                }
            ],
        },
    ]


@pytest.fixture
def clear_settings_cache():
    """Clear the settings cache before and after each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
