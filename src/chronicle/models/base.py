"""Shared base model definitions for Chronicle domain objects."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ChronicleBaseModel(BaseModel):
    """Base model configured for Chronicle-wide defaults."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)


__all__ = ["ChronicleBaseModel"]
