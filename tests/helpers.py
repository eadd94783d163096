"""Test helpers shared across suites."""

from typing import Any

from config import Settings


def make_settings(**overrides: Any) -> Settings:
    """Build Settings from defaults plus ``overrides``, skipping .env files."""
    return Settings(_env_file=None, **overrides)
