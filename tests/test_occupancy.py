"""
Tests for the occupancy matrix and layout validation.
"""
import numpy as np
import pytest

from tilegrid.errors import LayoutValidationError
from tilegrid.layout_engine.occupancy import find_overlaps, has_overlaps, occupancy_grid, validate_layout
from tilegrid.models.item import GridItem


class TestOccupancyGrid:
    """Test rasterisation."""

    def test_shape_and_counts(self, three_items):
        grid = occupancy_grid(three_items, cols=6)
        assert grid.shape == (3, 6)
        assert grid[0, :4].tolist() == [1, 1, 1, 1]
        assert grid[:, 4:].sum() == 0
        assert grid.sum() == 2 + 2 + 8

    def test_overlap_cells_count_twice(self):
        grid = occupancy_grid([GridItem("a", 0, 0, 2, 2), GridItem("b", 1, 1, 2, 2)])
        assert grid[1, 1] == 2
        assert int((grid > 1).sum()) == 1

    def test_items_past_cols_widen_the_matrix(self):
        assert occupancy_grid([GridItem("a", 10, 0, 4, 1)], cols=12).shape == (1, 14)

    def test_empty_layout(self):
        grid = occupancy_grid([], cols=4)
        assert isinstance(grid, np.ndarray)
        assert grid.shape == (0, 4)

    def test_negative_position_raises(self):
        with pytest.raises(LayoutValidationError):
            occupancy_grid([GridItem("a", -1, 0, 2, 1)])


class TestOverlaps:
    """Test overlap detection."""

    def test_no_overlaps(self, three_items):
        assert not has_overlaps(three_items)
        assert find_overlaps(three_items) == []

    def test_overlap_pairs(self):
        layout = [GridItem("a", 0, 0, 2, 2), GridItem("b", 1, 1, 2, 2), GridItem("c", 5, 5, 1, 1)]
        assert has_overlaps(layout)
        assert find_overlaps(layout) == [("a", "b")]

    def test_empty_layout_has_no_overlaps(self):
        assert not has_overlaps([])


class TestValidateLayout:
    """Test structural validation."""

    def test_valid_layout_passes(self, three_items):
        validate_layout(three_items, cols=4)

    def test_every_violation_is_reported(self):
        layout = [
            GridItem("a", 0, 0, 2, 2),
            GridItem("a", 4, 0, 1, 1),
            GridItem("b", 1, 1, 2, 2),
            GridItem("wide", 3, 4, 3, 1),
        ]
        with pytest.raises(LayoutValidationError) as exc_info:
            validate_layout(layout, cols=5)
        violations = exc_info.value.violations
        assert "duplicate id: a" in violations
        assert "overlap: a and b" in violations
        assert any(v.startswith("wide: overflows 5 columns") for v in violations)
        assert len(violations) == 3

    def test_negative_and_empty_items(self):
        layout = [GridItem("neg", -1, 0, 1, 1), GridItem("flat", 2, 0, 0, 1)]
        with pytest.raises(LayoutValidationError) as exc_info:
            validate_layout(layout)
        assert len(exc_info.value.violations) == 2

    def test_overflow_is_ignored_without_cols(self):
        validate_layout([GridItem("wide", 10, 0, 4, 1)])
