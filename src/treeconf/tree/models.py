"""Error models for node lookup."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class UnknownPathError(BaseModel):
    """A lookup addressed a key the schema does not declare."""

    model_config = ConfigDict(extra="forbid")

    path: str
    key: str
    message: str
