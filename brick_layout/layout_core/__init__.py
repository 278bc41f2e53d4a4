"""
Layout Core - The brick packing engine.

Main exports:
- LayoutGenerator: Runs the packing loop for one seeded layout
- generate_layout: Convenience wrapper returning a LayoutResult
- LayoutConfig: Configuration loaded from layout_config.yaml
- check_layout: Verifies no-overlap and containment of a layout
"""

from brick_layout.layout_core.config_loader import LayoutConfig, load_config, get_config
from brick_layout.layout_core.geometry import Axis, Side, Edge, Rect, Square, edge_from_points
from brick_layout.layout_core.edge_tracker import prune_free_edges
from brick_layout.layout_core.candidate_finder import find_square_positions
from brick_layout.layout_core.bounds_filter import clip_to_bounds, clip_to_squares
from brick_layout.layout_core.rng import LayoutRng, new_seed
from brick_layout.layout_core.layout import LayoutGenerator, LayoutResult, generate_layout
from brick_layout.layout_core.layout_checks import LayoutCheckResult, check_layout
from brick_layout.layout_core.logger_setup import setup_logger

__all__ = [
    "LayoutConfig",
    "load_config",
    "get_config",
    "Axis",
    "Side",
    "Edge",
    "Rect",
    "Square",
    "edge_from_points",
    "prune_free_edges",
    "find_square_positions",
    "clip_to_bounds",
    "clip_to_squares",
    "LayoutRng",
    "new_seed",
    "LayoutGenerator",
    "LayoutResult",
    "generate_layout",
    "LayoutCheckResult",
    "check_layout",
    "setup_logger",
]
