"""Actor universe shared by longitudinal variables and networks."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ActorSet:
    """An ordered set of ``n`` actors, addressed as ``0..n-1``.

    Attributes:
        id: Identifier, unique among the actor sets of one registry.
        name: Human readable label (e.g. "pupils").
        n: Number of actors.
    """

    id: int
    name: str
    n: int

    def __post_init__(self) -> None:
        if self.n < 0:
            raise ValueError(f"actor count must be non-negative, got {self.n}")

    def __len__(self) -> int:
        return self.n
