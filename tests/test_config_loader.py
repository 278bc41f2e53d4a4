"""
Tests for configuration loading and validation.
"""

import pytest

from brick_layout.layout_core import config_loader
from brick_layout.layout_core.config_loader import (
    LayoutConfig,
    get_config,
    load_config,
    reload_config,
)
from brick_layout.layout_core.geometry import Rect

VALID_YAML = """
area:
  width: 400
  height: 300
  brick_bottom_margin_ratio: 0.2
  brick_top_margin_ratio: 0.1
bricks:
  min_width: 20
  max_width: 60
  width_step: 20
tolerances:
  position: 0.02
  coverage: 1.0
logging:
  level: debug
"""


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "layout_config.yaml"
    path.write_text(VALID_YAML)
    return path


@pytest.fixture
def write_config(tmp_path):
    def _write(text):
        path = tmp_path / "custom.yaml"
        path.write_text(text)
        return str(path)
    return _write


class TestLoadConfig:
    """Test YAML parsing."""

    def test_default_config_loads(self):
        config = load_config()

        assert config.bricks.min_width <= config.bricks.max_width
        assert config.bricks.width_step > 0
        assert config.bounding_box.width == config.area.width

    def test_values_parsed(self, config_file):
        config = load_config(str(config_file))

        assert config.area.width == 400.0
        assert config.bricks.min_width == 20.0
        assert config.bricks.max_width == 60.0
        assert config.bricks.size_count == 3
        assert config.tolerances.position == 0.02
        assert config.tolerances.coverage == 1.0
        assert config.logging.level == "DEBUG"

    def test_bounding_box_excludes_margins(self, config_file):
        """Bricks fill the band between the bottom and top margins."""
        box = load_config(str(config_file)).bounding_box

        assert box.x == 0.0
        assert box.width == 400.0
        assert box.y == pytest.approx(15.0)
        assert box.height == pytest.approx(210.0)
        assert box.bottom == pytest.approx(-150.0 + 0.2 * 300)
        assert box.top == pytest.approx(150.0 - 0.1 * 300)

    def test_optional_sections_default(self, write_config):
        path = write_config(
            "area: {width: 100, height: 100}\n"
            "bricks: {min_width: 10, max_width: 20, width_step: 5}\n"
        )
        config = load_config(path)

        assert config.tolerances.position == 0.01
        assert config.tolerances.coverage == 0.5
        assert config.logging.level == "INFO"
        assert config.bounding_box == Rect(0.0, 0.0, 100.0, 100.0)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nope.yaml"))

    def test_missing_section(self, write_config):
        with pytest.raises(KeyError):
            load_config(write_config("area: {width: 100, height: 100}\n"))

    def test_cached_config(self, config_file):
        """reload_config replaces the cached singleton."""
        try:
            reloaded = reload_config(str(config_file))
            assert get_config() is reloaded
            assert get_config().area.width == 400.0
        finally:
            config_loader._cached_config = None


class TestValidation:
    """Test configuration consistency checks."""

    @pytest.mark.parametrize("kwargs", [
        dict(min_width=0, max_width=10, width_step=5),
        dict(min_width=10, max_width=5, width_step=5),
        dict(min_width=10, max_width=20, width_step=0),
        dict(min_width=10, max_width=20, width_step=5, area_width=0),
        dict(min_width=10, max_width=20, width_step=5, bottom_margin_ratio=0.6, top_margin_ratio=0.4),
        dict(min_width=10, max_width=20, width_step=5, position_tolerance=-1),
        dict(min_width=10, max_width=20, width_step=5, log_level="LOUD"),
    ])
    def test_invalid_values_rejected(self, kwargs):
        with pytest.raises(ValueError):
            LayoutConfig.from_values(**kwargs)

    def test_from_values(self):
        config = LayoutConfig.from_values(20, 40, 10, area_width=200, area_height=100)

        assert config.bounding_box == Rect(0.0, 0.0, 200.0, 100.0)
        assert config.bricks.size_count == 3

    def test_size_count_fractional_step(self):
        config = LayoutConfig.from_values(0.3, 0.9, 0.2, area_width=3, area_height=3)

        assert config.bricks.size_count == 4

    def test_config_is_frozen(self):
        config = LayoutConfig.from_values(20, 40, 10)

        with pytest.raises(AttributeError):
            config.bricks.min_width = 5
