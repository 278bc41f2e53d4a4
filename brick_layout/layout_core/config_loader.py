"""
Configuration Loader
====================

Loads and validates layout_config.yaml, providing typed access to all parameters.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from brick_layout.layout_core.geometry import Rect
from brick_layout.layout_core.rng import size_count as _size_count


@dataclass(frozen=True)
class AreaConfig:
    """Play area geometry and the margins kept free of bricks."""
    width: float
    height: float
    brick_bottom_margin_ratio: float  # Fraction of height below the brick region
    brick_top_margin_ratio: float     # Fraction of height above the brick region


@dataclass(frozen=True)
class BrickConfig:
    """Brick sizing parameters."""
    min_width: float
    max_width: float
    width_step: float

    @property
    def size_count(self) -> int:
        """Number of distinct side lengths in [min_width, max_width]."""
        return _size_count(self.min_width, self.max_width, self.width_step)


@dataclass(frozen=True)
class ToleranceConfig:
    """Numeric tolerances used by the packing stages."""
    position: float  # Same-position test when pruning facing edges
    coverage: float  # Slack for the redundant-coverage filter


@dataclass(frozen=True)
class LoggingConfig:
    """Logging parameters."""
    level: str


@dataclass(frozen=True)
class LayoutConfig:
    """
    Complete layout configuration loaded from YAML.

    All values are immutable to prevent accidental modification during generation.
    """
    area: AreaConfig
    bricks: BrickConfig
    tolerances: ToleranceConfig
    logging: LoggingConfig

    @property
    def bounding_box(self) -> Rect:
        """
        Region available to bricks.

        Spans the full area width; vertically it excludes the bottom and top
        margins. The area itself is centered on the origin.
        """
        area = self.area
        height_ratio = 1.0 - area.brick_bottom_margin_ratio - area.brick_top_margin_ratio
        mid_y = (height_ratio / 2.0 + area.brick_bottom_margin_ratio) * area.height - area.height / 2.0
        return Rect(x=0.0, y=mid_y, width=area.width, height=height_ratio * area.height)

    @classmethod
    def from_values(
        cls,
        min_width: float,
        max_width: float,
        width_step: float,
        area_width: float = 990.0,
        area_height: float = 760.0,
        bottom_margin_ratio: float = 0.0,
        top_margin_ratio: float = 0.0,
        position_tolerance: float = 0.01,
        coverage_tolerance: float = 0.5,
        log_level: str = "INFO"
    ) -> "LayoutConfig":
        """
        Build a validated config without a YAML file.

        With the default zero margins the bounding box is the whole area,
        centered on the origin.
        """
        config = cls(
            area=AreaConfig(
                width=float(area_width),
                height=float(area_height),
                brick_bottom_margin_ratio=float(bottom_margin_ratio),
                brick_top_margin_ratio=float(top_margin_ratio)
            ),
            bricks=BrickConfig(
                min_width=float(min_width),
                max_width=float(max_width),
                width_step=float(width_step)
            ),
            tolerances=ToleranceConfig(
                position=float(position_tolerance),
                coverage=float(coverage_tolerance)
            ),
            logging=LoggingConfig(level=str(log_level).upper())
        )
        _validate_config(config)
        return config


def _validate_config(config: LayoutConfig) -> None:
    """Validate configuration consistency."""
    area = config.area
    if area.width <= 0 or area.height <= 0:
        raise ValueError(f"Area must have positive size, got {area.width}x{area.height}")

    for name in ("brick_bottom_margin_ratio", "brick_top_margin_ratio"):
        ratio = getattr(area, name)
        if not 0.0 <= ratio < 1.0:
            raise ValueError(f"{name} must be in [0, 1), got {ratio}")

    if area.brick_bottom_margin_ratio + area.brick_top_margin_ratio >= 1.0:
        raise ValueError(
            f"Margin ratios ({area.brick_bottom_margin_ratio} + "
            f"{area.brick_top_margin_ratio}) leave no room for bricks"
        )

    bricks = config.bricks
    if bricks.min_width <= 0:
        raise ValueError(f"bricks.min_width must be positive, got {bricks.min_width}")
    if bricks.width_step <= 0:
        raise ValueError(f"bricks.width_step must be positive, got {bricks.width_step}")
    if bricks.max_width < bricks.min_width:
        raise ValueError(
            f"bricks.max_width ({bricks.max_width}) must not be smaller than "
            f"bricks.min_width ({bricks.min_width})"
        )

    if config.tolerances.position < 0 or config.tolerances.coverage < 0:
        raise ValueError("Tolerances must be non-negative")

    if config.logging.level not in ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"):
        raise ValueError(f"Unknown logging level '{config.logging.level}'")


def load_config(config_path: Optional[str] = None) -> LayoutConfig:
    """
    Load and validate layout configuration from YAML.

    Args:
        config_path: Path to layout_config.yaml. If None, uses default location.

    Returns:
        Validated LayoutConfig instance.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If config validation fails.
    """
    if config_path is None:
        config_path = os.path.join(
            os.path.dirname(os.path.dirname(__file__)),
            "layout_config.yaml"
        )

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        raw = yaml.safe_load(f) or {}

    area_data = raw["area"]
    area = AreaConfig(
        width=float(area_data["width"]),
        height=float(area_data["height"]),
        brick_bottom_margin_ratio=float(area_data.get("brick_bottom_margin_ratio", 0.0)),
        brick_top_margin_ratio=float(area_data.get("brick_top_margin_ratio", 0.0))
    )

    bricks_data = raw["bricks"]
    bricks = BrickConfig(
        min_width=float(bricks_data["min_width"]),
        max_width=float(bricks_data["max_width"]),
        width_step=float(bricks_data["width_step"])
    )

    # Optional sections
    tol_data = raw.get("tolerances", {})
    tolerances = ToleranceConfig(
        position=float(tol_data.get("position", 0.01)),
        coverage=float(tol_data.get("coverage", 0.5))
    )

    log_data = raw.get("logging", {})
    logging = LoggingConfig(level=str(log_data.get("level", "INFO")).upper())

    config = LayoutConfig(
        area=area,
        bricks=bricks,
        tolerances=tolerances,
        logging=logging
    )

    _validate_config(config)
    return config


# Module-level singleton for convenience
_cached_config: Optional[LayoutConfig] = None


def get_config() -> LayoutConfig:
    """Get the cached layout configuration, loading if necessary."""
    global _cached_config
    if _cached_config is None:
        _cached_config = load_config()
    return _cached_config


def reload_config(config_path: Optional[str] = None) -> LayoutConfig:
    """Reload the configuration (useful for testing)."""
    global _cached_config
    _cached_config = load_config(config_path)
    return _cached_config
