"""
Layout Generator
================

Main packing loop: grows a wall of non-overlapping square bricks outward
from a random seed brick until no allowed size fits anywhere.

Each iteration derives the free boundary of everything placed so far, samples
a side length, collects every legal center interval along that boundary and
places the brick at a length-weighted random spot. When nothing fits, the
size ceiling drops by one step; generation ends once the ceiling falls below
the minimum size.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from loguru import logger

from brick_layout.layout_core.bounds_filter import clip_to_bounds, clip_to_squares
from brick_layout.layout_core.candidate_finder import find_square_positions
from brick_layout.layout_core.config_loader import LayoutConfig, get_config
from brick_layout.layout_core.edge_tracker import prune_free_edges
from brick_layout.layout_core.geometry import Edge, Rect, Square
from brick_layout.layout_core.rng import LayoutRng


@dataclass
class LayoutResult:
    """Outcome of one generation run."""
    squares: List[Square]
    seed: int
    bounding_box: Rect
    ceiling_history: List[float] = field(default_factory=list)
    attempts: int = 0
    failures: int = 0

    @property
    def count(self) -> int:
        """Number of bricks placed."""
        return len(self.squares)

    @property
    def filled_area(self) -> float:
        return sum(square.area for square in self.squares)

    @property
    def fill_ratio(self) -> float:
        """Fraction of the bounding box covered by bricks."""
        if self.bounding_box.area <= 0:
            return 0.0
        return self.filled_area / self.bounding_box.area

    def __repr__(self) -> str:
        return f"LayoutResult(seed={self.seed}, bricks={self.count}, fill={self.fill_ratio:.3f})"


@dataclass
class LayoutContext:
    """
    Mutable state of a single run.

    Holds the raw edge accumulators (every edge of every placed square,
    never pruned in place), the placed squares and the current size ceiling.
    The ceiling is tracked as a level on the size grid, so repeated
    lowering never drifts off it.
    """
    rng: LayoutRng
    ceiling: float
    level: int
    squares: List[Square] = field(default_factory=list)
    horizontal_edges: List[Edge] = field(default_factory=list)
    vertical_edges: List[Edge] = field(default_factory=list)

    def add_square(self, x: float, y: float, side: float) -> Square:
        """Append a square and accumulate its boundary edges."""
        square = Square(x=x, y=y, side=side, index=len(self.squares))
        horizontal, vertical = square.edges()
        self.squares.append(square)
        self.horizontal_edges.extend(horizontal)
        self.vertical_edges.extend(vertical)
        return square


class LayoutGenerator:
    """
    Square packing driver.

    One call to ``generate`` is one complete, synchronous run. The generator
    owns a fresh context per run, so repeated calls with the same seed yield
    identical layouts.
    """

    def __init__(
        self,
        config: Optional[LayoutConfig] = None,
        seed: Optional[int] = None,
        bounding_box: Optional[Rect] = None
    ):
        """
        Initialize generator.

        Args:
            config: Layout configuration. Uses default if None.
            seed: Random seed for reproducibility. Drawn fresh per run if None.
            bounding_box: Packing region. Derived from the config if None.
        """
        if config is None:
            config = get_config()

        self._config = config
        self._seed = seed
        self._bounding_box = bounding_box if bounding_box is not None else config.bounding_box

        bricks = config.bricks
        self._min_side = bricks.min_width
        self._max_side = bricks.max_width
        self._step = bricks.width_step
        self._position_tolerance = config.tolerances.position
        self._coverage_tolerance = config.tolerances.coverage

    @property
    def config(self) -> LayoutConfig:
        return self._config

    @property
    def bounding_box(self) -> Rect:
        """Region the bricks are packed into."""
        return self._bounding_box

    def generate(self, seed: Optional[int] = None) -> LayoutResult:
        """
        Run the packer to completion.

        Args:
            seed: Seed for this run. Falls back to the constructor seed, then
                to a fresh random one.

        Returns:
            LayoutResult with bricks in creation order.
        """
        if seed is None:
            seed = self._seed
        rng = LayoutRng(seed)
        logger.info("Brick layout seed: {}", rng.seed)

        ctx = LayoutContext(
            rng=rng,
            ceiling=self._max_side,
            level=self._config.bricks.size_count - 1
        )
        result = LayoutResult(squares=ctx.squares, seed=rng.seed, bounding_box=self._bounding_box)

        if not self._place_seed_square(ctx):
            logger.info(
                "No brick size in [{}, {}] fits a {}x{} area",
                self._min_side, self._max_side,
                self._bounding_box.width, self._bounding_box.height
            )
            return result

        while self._step_once(ctx, result):
            pass

        logger.info(
            "Placed {} bricks in {} attempts ({} failed), fill {:.1%}",
            result.count, result.attempts, result.failures, result.fill_ratio
        )
        return result

    def _place_seed_square(self, ctx: LayoutContext) -> bool:
        """Place the first square uniformly inside the box. False if no size fits."""
        box = self._bounding_box
        fit_limit = min(self._max_side, box.width, box.height)
        if fit_limit < self._min_side:
            return False

        side = ctx.rng.sample_side_length(self._min_side, fit_limit, self._step)
        half = side / 2.0
        x = ctx.rng.uniform(box.left + half, box.right - half)
        y = ctx.rng.uniform(box.bottom + half, box.top - half)
        ctx.add_square(x, y, side)
        return True

    def _find_candidates(
        self,
        side: float,
        horizontal_free: List[Edge],
        vertical_free: List[Edge],
        squares: List[Square]
    ) -> List[Edge]:
        """All in-bounds center intervals for a square of ``side`` that clear ``squares``."""
        candidates = find_square_positions(
            side, horizontal_free, vertical_free,
            self._coverage_tolerance, self._position_tolerance
        )
        candidates += find_square_positions(
            side, vertical_free, horizontal_free,
            self._coverage_tolerance, self._position_tolerance
        )
        candidates = clip_to_bounds(side, candidates, self._bounding_box)
        return clip_to_squares(side, candidates, squares)

    def _step_once(self, ctx: LayoutContext, result: LayoutResult) -> bool:
        """
        Place one more square, shrinking the ceiling as needed.

        Returns:
            True if a square was placed, False once the ceiling drops below
            the minimum size.
        """
        horizontal_free = prune_free_edges(ctx.horizontal_edges, self._position_tolerance)
        vertical_free = prune_free_edges(ctx.vertical_edges, self._position_tolerance)

        while True:
            result.ceiling_history.append(ctx.ceiling)
            result.attempts += 1
            side = ctx.rng.sample_side_length(self._min_side, ctx.ceiling, self._step)
            candidates = self._find_candidates(side, horizontal_free, vertical_free, ctx.squares)
            if candidates:
                break

            result.failures += 1
            ctx.level -= 1
            ctx.ceiling = self._min_side + ctx.level * self._step
            if ctx.level < 0:
                result.ceiling_history.append(ctx.ceiling)
                logger.debug("No room left for side {}, stopping", side)
                return False
            logger.debug("No room for side {}, ceiling lowered to {}", side, ctx.ceiling)

        x, y = ctx.rng.choose_position(candidates)
        ctx.add_square(x, y, side)
        return True


def generate_layout(
    config: Optional[LayoutConfig] = None,
    seed: Optional[int] = None,
    bounding_box: Optional[Rect] = None
) -> LayoutResult:
    """
    Generate one brick layout.

    Args:
        config: Layout configuration. Uses default if None.
        seed: Random seed. Drawn fresh and logged if None.
        bounding_box: Packing region. Derived from the config if None.

    Returns:
        LayoutResult with bricks in creation order.
    """
    return LayoutGenerator(config, seed=seed, bounding_box=bounding_box).generate()
