from __future__ import annotations

import logging
from typing import Any, Dict, Iterator

import pytest


@pytest.fixture
def sample_config() -> Dict[str, Any]:
    """A valid config with two installers and no homepage or fallback."""
    return {
        "name": "TestApp",
        "installers": {
            "darwin": "https://example.com/app.dmg",
            "linux": "https://example.com/app.AppImage",
        },
    }


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Drop handlers the CLI installs so they never outlive captured streams."""
    yield
    logger = logging.getLogger("install_bridge")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.propagate = True
