from __future__ import annotations

from typing import Annotated, Literal

from pydantic import Field, StrictStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from treeconf.constants import ENV_PREFIX

_Separator = Annotated[StrictStr, Field(min_length=1)]


class TreeSettings(BaseSettings):
    """Runtime behaviour shared by every tree built without explicit settings."""

    callback_errors: Literal["log", "raise"] = "log"
    path_separator: _Separator = "."

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )


def get_settings() -> TreeSettings:
    global _settings
    if _settings is None:
        _settings = TreeSettings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next access re-reads the environment."""
    global _settings
    _settings = None


# Private singleton instance
_settings: TreeSettings | None = None


__all__ = [
    "TreeSettings",
    "get_settings",
    "reset_settings",
]
