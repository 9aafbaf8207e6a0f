"""Pydantic models for the cyclectl.toml sections.

Sparse TOML contract: defaults baked here, cyclectl.toml only contains
overrides. A fresh store needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from cyclectl.domain.types import VERTEX_LABEL


class StoreConfig(BaseModel):
    """[store] section.

    ``name`` picks the database file, ``.cyclectl/{name}.db``, so one
    directory can hold several independent stores.
    """

    model_config = {"frozen": True}

    name: str = Field(default="cyclectl", pattern=r"^[A-Za-z0-9_-]+$")


class BuilderConfig(BaseModel):
    """[builder] section.

    ``seed`` pins the random edge draws; None draws from OS entropy.
    """

    model_config = {"frozen": True}

    seed: int | None = None
    label: str = VERTEX_LABEL


class DetectorConfig(BaseModel):
    """[detector] section."""

    model_config = {"frozen": True}

    max_listed_cycles: int = Field(default=20, ge=1)
