"""
Pydantic models for wordbridge.

Configuration: ``PoetConfig``, saved and applied as JSON by the CLI.
Reporting: ``CorpusMetrics`` for the affinity graph, ``PoemSummary``
for one CLI run.
"""

import codecs
from typing import List, Literal

from pydantic import BaseModel, Field, field_validator

Representation = Literal["edges", "vertices"]


# =========================================================================
# Configuration
# =========================================================================


class PoetConfig(BaseModel):
    """Settings for building a ``GraphPoet`` from a corpus file."""

    representation: Representation = "vertices"
    encoding: str = "utf-8"

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError:
            raise ValueError(f"unknown encoding {value!r}") from None
        return value


# =========================================================================
# Reporting
# =========================================================================


class CorpusMetrics(BaseModel):
    """Summary statistics of an affinity graph."""

    total_words: int = 0
    total_adjacencies: int = 0
    total_weight: int = 0
    avg_out_degree: float = 0.0
    self_loops: int = 0
    isolated_words: int = 0


class PoemRecord(BaseModel):
    """One input line and the poem generated from it."""

    input: str
    poem: str
    bridges_inserted: int = 0


class PoemSummary(BaseModel):
    """Summary written by ``--summary``."""

    corpus: str
    representation: Representation = "vertices"
    metrics: CorpusMetrics = Field(default_factory=CorpusMetrics)
    poems: List[PoemRecord] = Field(default_factory=list)
