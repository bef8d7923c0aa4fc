"""User-configurable game settings."""

from __future__ import annotations

import random
from dataclasses import dataclass

from arcadechess.core.enums import Color, Difficulty
from arcadechess.engine.search import SearchLimits


@dataclass
class GameSettings:
    """Settings for a game against the computer.

    ``seed`` makes the easy and medium tiers reproducible; ``None`` draws
    from system entropy.
    """

    difficulty: Difficulty = Difficulty.MEDIUM
    search_depth: int = 3
    ai_color: Color = Color.BLACK
    seed: int | None = None

    def __post_init__(self) -> None:
        self.difficulty = Difficulty(self.difficulty)
        self.ai_color = Color(self.ai_color)
        if self.search_depth < 1:
            raise ValueError(f"search_depth must be >= 1, got {self.search_depth}")

    @property
    def search_limits(self) -> SearchLimits:
        return SearchLimits(max_depth=self.search_depth)

    def make_rng(self) -> random.Random:
        return random.Random(self.seed)
