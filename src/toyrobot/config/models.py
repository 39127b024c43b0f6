"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, toyrobot.toml only holds overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, PositiveInt

from toyrobot.domain.grid import Grid


class GridConfig(BaseModel):
    """[grid] section."""

    model_config = {"frozen": True}

    width: PositiveInt = 5
    height: PositiveInt = 5

    def to_grid(self) -> Grid:
        return Grid(self.width, self.height)


class SessionConfig(BaseModel):
    """[session] section."""

    model_config = {"frozen": True}

    # Interactive sessions end on an unknown verb; file sessions skip it.
    stop_on_unknown: bool = True


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True

