"""Environment-driven configuration for the Vite facade."""

from __future__ import annotations

import os
from enum import StrEnum
from pathlib import Path
from typing import TYPE_CHECKING, Final

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

if TYPE_CHECKING:
    from collections.abc import Mapping

DEFAULT_HOST: Final[str] = "http://localhost:5173"
DEFAULT_MANIFEST_PATH: Final[Path] = Path("dist/.vite/manifest.json")

# Checked in order; the first one that is set decides the mode.
MODE_VARIABLES: Final[tuple[str, ...]] = ("LOCO_ENV", "RAILS_ENV", "NODE_ENV")


class ViteMode(StrEnum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"


def guess_mode(environ: Mapping[str, str] | None = None) -> ViteMode:
    """Guess the mode from ``LOCO_ENV``, ``RAILS_ENV`` or ``NODE_ENV``.

    Only the literal ``production`` selects production; any other value, or no
    variable at all, selects development.
    """
    environ = os.environ if environ is None else environ
    for variable in MODE_VARIABLES:
        value = environ.get(variable)
        if value is not None:
            return ViteMode.PRODUCTION if value == ViteMode.PRODUCTION else ViteMode.DEVELOPMENT
    return ViteMode.DEVELOPMENT


class ViteSettings(BaseSettings):
    """Settings read from ``VITE_*`` environment variables.

    ``VITE_MODE`` takes precedence over the guessed mode.
    """

    model_config = SettingsConfigDict(env_prefix="VITE_", extra="ignore")

    host: str = DEFAULT_HOST
    manifest_path: Path = DEFAULT_MANIFEST_PATH
    manifest_source: str | None = None
    mode: ViteMode = Field(default_factory=guess_mode)
