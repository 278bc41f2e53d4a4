"""
RNG - Seeded Layout Sampler
===========================

Provides deterministic sampling of brick sizes and positions. Every layout
run owns one sampler seeded once, so a run can be replayed from its seed.
"""

from __future__ import annotations

import random
from typing import Optional, Sequence, Tuple

from brick_layout.layout_core.geometry import Axis, Edge

# Guards the step count against float error, e.g. (0.3 - 0.1) / 0.1
_STEP_EPSILON = 1e-9


def size_count(min_side: float, max_side: float, step: float) -> int:
    """Number of sizes min_side, min_side + step, ... not above max_side."""
    return int((max_side - min_side) / step + _STEP_EPSILON) + 1


def new_seed() -> int:
    """Draw a fresh 64-bit seed from the OS entropy source."""
    return random.SystemRandom().getrandbits(64)


class LayoutRng:
    """
    Random source for one layout run.

    Wraps ``random.Random`` so all draws for a run come from a single,
    explicitly seeded generator.
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize sampler.

        Args:
            seed: Random seed for reproducibility. Drawn fresh if None.
        """
        if seed is None:
            seed = new_seed()
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def seed(self) -> int:
        """Seed this sampler was created with."""
        return self._seed

    def uniform(self, low: float, high: float) -> float:
        """Uniform float in [low, high]."""
        return self._rng.uniform(low, high)

    def sample_side_length(
        self,
        min_side: float,
        max_side: float,
        step: float
    ) -> float:
        """
        Sample a side length uniformly from min_side, min_side + step, ... <= max_side.

        Raises:
            ValueError: If max_side < min_side or step is not positive.
        """
        if step <= 0:
            raise ValueError(f"Size step must be positive, got {step}")
        if max_side < min_side:
            raise ValueError(f"Size ceiling {max_side} is below minimum {min_side}")
        count = size_count(min_side, max_side, step)
        return min_side + self._rng.randrange(count) * step

    def weighted_index(self, weights: Sequence[float]) -> int:
        """
        Choose an index with probability proportional to its weight.

        Raises:
            ValueError: If a weight is negative or no weight is positive.
        """
        if any(weight < 0 for weight in weights):
            raise ValueError(f"Weights must be non-negative, got {list(weights)}")
        total = sum(weights)
        if total <= 0:
            raise ValueError(f"No positive weight to sample from: {list(weights)}")

        r = self._rng.random() * total
        cumulative = 0.0
        last_positive = 0
        for index, weight in enumerate(weights):
            if weight <= 0:
                continue
            cumulative += weight
            last_positive = index
            if r < cumulative:
                return index
        return last_positive

    def choose_position(self, candidates: Sequence[Edge]) -> Tuple[float, float]:
        """
        Pick a square center from candidate intervals.

        Longer intervals are proportionally more likely; the coordinate along
        the chosen interval is uniform.

        Returns:
            (x, y) center of the new square.
        """
        chosen = candidates[self.weighted_index([edge.length for edge in candidates])]
        along = self.uniform(chosen.start, chosen.end)
        if chosen.axis is Axis.X:
            return (along, chosen.pos)
        return (chosen.pos, along)
