"""Configuration classes for pathgraph components."""

from __future__ import annotations

import random
from dataclasses import dataclass


@dataclass(frozen=True)
class GeneratorConfig:
    """Options for random graph generation."""

    # Exclusive upper bound on generated edge weights
    max_weight: int = 100

    # Produce Vertex -> {Vertex: weight} when True, Vertex -> [Vertex] otherwise
    weighted: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.max_weight, bool) or not isinstance(self.max_weight, int):
            raise ValueError(
                f"max_weight must be a positive integer, got {self.max_weight!r}"
            )
        if self.max_weight <= 0:
            raise ValueError(
                f"max_weight must be a positive integer, got {self.max_weight}"
            )

    def draw_weight(self, rng: random.Random) -> int:
        """Draw one edge weight uniformly from ``[0, max_weight)``."""
        return rng.randrange(self.max_weight)


DEFAULT_GENERATOR_CONFIG = GeneratorConfig()
