"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, mushgraph.toml only contains
overrides. An empty file (or none at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel

from mushgraph.domain.ids import IdStrategy


class GraphConfig(BaseModel):
    """[graph] section: flags handed to GraphBuilder."""

    model_config = {"frozen": True}

    directed: bool = True
    weighted: bool = False
    tracking: bool = False
    id_strategy: IdStrategy = IdStrategy.UUID


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = 120
    color: bool = True
