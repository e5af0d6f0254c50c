"""Directed network between the actors of one actor set.

Actors are the integers ``0..n-1``. Outgoing ties are kept per ego in
insertion order, which is the order ``out_ties`` reports alters in. Effects
that break ties by "first seen" rely on that order being stable.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable, Iterator

logger = logging.getLogger(__name__)


class Network:
    """Directed (optionally valued) network over ``n`` actors.

    Args:
        n: Number of actors.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"actor count must be non-negative, got {n}")
        self._n = n
        self._out: list[dict[int, int]] = [{} for _ in range(n)]
        self._in: list[dict[int, int]] = [{} for _ in range(n)]

    @property
    def n(self) -> int:
        return self._n

    @property
    def tie_count(self) -> int:
        """Total number of directed ties."""
        return sum(len(alters) for alters in self._out)

    def add_tie(self, ego: int, alter: int, value: int = 1) -> None:
        """Add (or revalue) the tie from ego to alter.

        A value of 0 removes the tie.
        """
        self._check_actor(ego)
        self._check_actor(alter)
        if ego == alter:
            raise ValueError(f"self-ties are not allowed (actor {ego})")
        if value == 0:
            self.remove_tie(ego, alter)
            return
        self._out[ego][alter] = value
        self._in[alter][ego] = value

    def remove_tie(self, ego: int, alter: int) -> None:
        self._check_actor(ego)
        self._check_actor(alter)
        self._out[ego].pop(alter, None)
        self._in[alter].pop(ego, None)

    def has_tie(self, ego: int, alter: int) -> bool:
        self._check_actor(ego)
        self._check_actor(alter)
        return alter in self._out[ego]

    def tie_value(self, ego: int, alter: int) -> int:
        """Value of the tie from ego to alter, 0 if absent."""
        self._check_actor(ego)
        self._check_actor(alter)
        return self._out[ego].get(alter, 0)

    def out_degree(self, actor: int) -> int:
        return len(self._out[actor])

    def in_degree(self, actor: int) -> int:
        return len(self._in[actor])

    def out_ties(self, actor: int) -> Iterator[int]:
        """Alters of the outgoing ties of ``actor``, in insertion order."""
        return iter(self._out[actor])

    def in_ties(self, actor: int) -> Iterator[int]:
        """Egos of the incoming ties of ``actor``, in insertion order."""
        return iter(self._in[actor])

    def ties(self) -> Iterator[tuple[int, int]]:
        """All ``(ego, alter)`` pairs, ego by ego."""
        for ego, alters in enumerate(self._out):
            for alter in alters:
                yield ego, alter

    def _check_actor(self, actor: int) -> None:
        if not 0 <= actor < self._n:
            raise ValueError(f"actor {actor} outside 0..{self._n - 1}")

    # -----------------------------------------------------------------
    # Constructors
    # -----------------------------------------------------------------

    @classmethod
    def from_edges(cls, n: int, edges: Iterable[tuple[int, int]]) -> Network:
        """Network with a tie for each ``(ego, alter)`` pair, in the given order."""
        g = cls(n)
        for ego, alter in edges:
            g.add_tie(ego, alter)
        return g

    @classmethod
    def complete(cls, n: int) -> Network:
        """Every actor is tied to every other actor."""
        g = cls(n)
        for ego in range(n):
            for alter in range(n):
                if ego != alter:
                    g.add_tie(ego, alter)
        return g

    @classmethod
    def random_erdos_renyi(
        cls,
        n: int,
        p: float = 0.1,
        rng: random.Random | None = None,
    ) -> Network:
        """Each directed tie exists independently with probability p."""
        rng = rng or random.Random()
        g = cls(n)
        for ego in range(n):
            for alter in range(n):
                if ego != alter and rng.random() < p:
                    g.add_tie(ego, alter)
        return g

    @classmethod
    def small_world(
        cls,
        n: int,
        k: int = 4,
        p_rewire: float = 0.1,
        rng: random.Random | None = None,
    ) -> Network:
        """Watts-Strogatz small-world network.

        Starts from a ring lattice where each actor is tied both ways to its
        k nearest neighbours, then moves each outgoing lattice tie to a
        random new alter with probability p_rewire.

        Args:
            n: Number of actors.
            k: Lattice neighbours per actor (rounded down to even).
            p_rewire: Probability of rewiring each lattice tie.
            rng: Random number generator for determinism.
        """
        rng = rng or random.Random()
        if n < 3:
            return cls.complete(n)

        half_k = min(k, n - 1) // 2
        g = cls(n)
        for ego in range(n):
            for step in range(1, half_k + 1):
                alter = (ego + step) % n
                g.add_tie(ego, alter)
                g.add_tie(alter, ego)

        for ego in range(n):
            for step in range(1, half_k + 1):
                if rng.random() >= p_rewire:
                    continue
                g.remove_tie(ego, (ego + step) % n)
                candidates = [c for c in range(n) if c != ego and not g.has_tie(ego, c)]
                if candidates:
                    g.add_tie(ego, rng.choice(candidates))

        logger.debug("Built small-world network: n=%d ties=%d", n, g.tie_count)
        return g
