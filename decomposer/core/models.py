"""
Decomposer Core Data Models
============================

Pydantic models for the algorithm name decomposer. A
:class:`Decomposition` records the outcome for a single algorithm name;
a :class:`DecompositionReport` collects the outcomes of one batch run.

All models are serialisable to JSON and designed for consumption by both
the CLI output layer and the report generators.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field


class Decomposition(BaseModel):
    """Decomposition of one algorithm name.

    Attributes:
        algorithm: The name as supplied (``""`` for an absent name).
        segments: Non-empty ``/``-separated transformation segments, in order.
        tokens: Sorted sub-algorithm elements, including digest aliases.
        digest_aliases: Sorted elements added by digest hyphenation.
    """

    algorithm: str = ""
    segments: list[str] = Field(default_factory=list)
    tokens: list[str] = Field(default_factory=list)
    digest_aliases: list[str] = Field(default_factory=list)

    @property
    def token_set(self) -> set[str]:
        return set(self.tokens)

    @property
    def is_empty(self) -> bool:
        return not self.tokens


class DecompositionReport(BaseModel):
    """Results of decomposing a batch of algorithm names.

    Attributes:
        source: Where the names came from (``"arguments"``, ``"text"``,
            or a file path).
        results: One :class:`Decomposition` per name, in input order.
        started_at: UTC timestamp when the batch started.
        duration: Wall-clock duration of the batch in seconds.
    """

    source: str = "arguments"
    results: list[Decomposition] = Field(default_factory=list)
    started_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
    duration: float = 0.0

    @property
    def total_names(self) -> int:
        return len(self.results)

    @property
    def all_tokens(self) -> set[str]:
        """Union of the tokens of every result."""
        tokens: set[str] = set()
        for result in self.results:
            tokens.update(result.tokens)
        return tokens
