"""Shared test fixtures.

Provides:
- ``registry`` - frozen registry with the full tool catalog
- ``dispatcher`` - dispatcher over ``registry``
- ``settings`` - settings with defaults, isolated from the environment
"""

import pytest

from kotlin_senior.config import Settings
from kotlin_senior.tools.dispatcher import Dispatcher
from kotlin_senior.tools.registry import ToolRegistry, build_registry


@pytest.fixture
def registry() -> ToolRegistry:
    return build_registry()


@pytest.fixture
def dispatcher(registry: ToolRegistry) -> Dispatcher:
    return Dispatcher(registry)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)
