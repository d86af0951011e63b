"""
Tests for compaction and bounds correction.
"""
import random

import pytest

from tilegrid.errors import InvalidGridConfigError
from tilegrid.layout_engine.compactor import compact, correct_bounds
from tilegrid.layout_engine.occupancy import has_overlaps, validate_layout
from tilegrid.models.item import CompactType, GridItem


class TestVerticalCompaction:
    """Test items floating up."""

    def test_item_floats_to_top(self, positions):
        out = compact([GridItem("a", 0, 3, 2, 1)], CompactType.VERTICAL, 12)
        assert positions(out) == {"a": (0, 0, 2, 1)}

    def test_item_stops_on_item_above(self, positions):
        layout = [GridItem("b", 0, 5, 2, 2), GridItem("a", 0, 0, 2, 1)]
        out = compact(layout, CompactType.VERTICAL, 12)
        assert positions(out) == {"a": (0, 0, 2, 1), "b": (0, 1, 2, 2)}

    def test_columns_are_not_changed(self, positions):
        layout = [GridItem("a", 5, 4, 2, 1), GridItem("b", 0, 7, 3, 1)]
        out = compact(layout, CompactType.VERTICAL, 12)
        assert positions(out) == {"a": (5, 0, 2, 1), "b": (0, 0, 3, 1)}

    def test_overlapping_input_is_separated(self, positions):
        layout = [GridItem("a", 0, 0, 2, 2), GridItem("b", 1, 1, 2, 2)]
        out = compact(layout, CompactType.VERTICAL, 12)
        assert positions(out) == {"a": (0, 0, 2, 2), "b": (1, 2, 2, 2)}
        assert not has_overlaps(out)


class TestHorizontalCompaction:
    """Test items floating left."""

    def test_item_floats_left(self, positions):
        out = compact([GridItem("a", 5, 0, 2, 1)], CompactType.HORIZONTAL, 12)
        assert positions(out) == {"a": (0, 0, 2, 1)}

    def test_item_stops_at_left_neighbour(self, positions):
        layout = [GridItem("a", 0, 0, 3, 1), GridItem("b", 7, 0, 2, 1)]
        out = compact(layout, CompactType.HORIZONTAL, 12)
        assert positions(out)["b"] == (3, 0, 2, 1)

    def test_push_past_right_edge_wraps_to_next_row(self, positions):
        layout = [GridItem("a", 0, 0, 3, 1), GridItem("b", 0, 0, 3, 1)]
        out = compact(layout, CompactType.HORIZONTAL, 4)
        assert positions(out) == {"a": (0, 0, 3, 1), "b": (0, 1, 3, 1)}

    def test_wrapped_item_floats_left_again(self, positions):
        """After wrapping, the item settles against the left edge of its new row."""
        layout = [GridItem("a", 2, 1, 3, 3), GridItem("b", 2, 1, 4, 3)]
        once = compact(layout, CompactType.HORIZONTAL, 6)
        assert positions(once) == {"a": (0, 1, 3, 3), "b": (0, 4, 4, 3)}
        assert compact(once, CompactType.HORIZONTAL, 6) == once


class TestNoCompaction:
    """Test compact type NONE."""

    def test_positions_are_kept(self, three_items):
        spread = [item.moved_to(item.x, item.y + 4) for item in three_items]
        assert compact(spread, CompactType.NONE, 12) == spread

    def test_collisions_are_still_resolved(self, positions):
        layout = [GridItem("a", 0, 0, 2, 2), GridItem("b", 1, 1, 2, 2)]
        out = compact(layout, CompactType.NONE, 12)
        assert positions(out) == {"a": (0, 0, 2, 2), "b": (1, 2, 2, 2)}

    def test_none_value_means_no_compaction(self):
        layout = [GridItem("a", 0, 3, 1, 1)]
        assert compact(layout, None, 12) == layout


class TestStatics:
    """Test that static items stay put and block others."""

    def test_static_never_moves(self):
        static = GridItem("s", 3, 4, 2, 2, static=True)
        out = compact([static], CompactType.VERTICAL, 12)
        assert out == [static]

    def test_item_rests_on_static(self, positions):
        layout = [GridItem("s", 0, 0, 4, 1, static=True), GridItem("a", 0, 3, 2, 1)]
        out = compact(layout, CompactType.VERTICAL, 12)
        assert positions(out)["a"] == (0, 1, 2, 1)

    def test_item_under_static_is_pushed_below(self, positions):
        """The static item is placed first even when it comes later in the input."""
        layout = [GridItem("a", 0, 0, 2, 1), GridItem("s", 0, 0, 4, 1, static=True)]
        out = compact(layout, CompactType.VERTICAL, 12)
        assert positions(out) == {"a": (0, 1, 2, 1), "s": (0, 0, 4, 1)}


class TestCompactContract:
    """Test properties that hold for every compaction."""

    LAYOUT = [
        GridItem("header", 0, 0, 12, 1, static=True),
        GridItem("a", 0, 4, 6, 2),
        GridItem("b", 3, 5, 6, 3),
        GridItem("c", 8, 9, 4, 1),
        GridItem("d", 0, 2, 3, 1),
    ]

    def test_order_and_ids_are_preserved(self):
        out = compact(self.LAYOUT, CompactType.VERTICAL, 12)
        assert [i.id for i in out] == [i.id for i in self.LAYOUT]

    def test_input_is_not_modified(self):
        before = list(self.LAYOUT)
        compact(self.LAYOUT, CompactType.VERTICAL, 12)
        assert self.LAYOUT == before

    @pytest.mark.parametrize("compact_type", list(CompactType))
    def test_result_is_valid(self, compact_type):
        out = compact(self.LAYOUT, compact_type, 12)
        validate_layout(out, cols=12)
        assert out[0] == self.LAYOUT[0]

    @pytest.mark.parametrize("compact_type", list(CompactType))
    def test_compaction_is_idempotent(self, compact_type):
        once = compact(self.LAYOUT, compact_type, 12)
        assert compact(once, compact_type, 12) == once

    def test_string_compact_type_is_accepted(self):
        assert compact(self.LAYOUT, "vertical", 12) == compact(self.LAYOUT, CompactType.VERTICAL, 12)

    def test_empty_layout(self):
        assert compact([], CompactType.VERTICAL, 12) == []

    @pytest.mark.parametrize("cols", [0, -3])
    def test_invalid_cols_raise(self, cols):
        with pytest.raises(InvalidGridConfigError):
            compact(self.LAYOUT, CompactType.VERTICAL, cols)


class TestCorrectBounds:
    """Test pulling items back inside the columns."""

    def test_wide_item_is_clamped_to_cols(self, positions):
        out = correct_bounds([GridItem("a", 3, 0, 20, 1)], 12)
        assert positions(out) == {"a": (0, 0, 12, 1)}

    def test_overflowing_item_is_shifted_left(self, positions):
        out = correct_bounds([GridItem("a", 10, 2, 4, 1)], 12)
        assert positions(out) == {"a": (8, 2, 4, 1)}

    def test_negative_position_is_raised_to_zero(self, positions):
        out = correct_bounds([GridItem("a", -2, -1, 2, 1)], 12)
        assert positions(out) == {"a": (0, 0, 2, 1)}

    def test_overlapping_statics_are_separated(self, positions):
        layout = [
            GridItem("s1", 0, 0, 2, 1, static=True),
            GridItem("s2", 1, 0, 2, 1, static=True),
        ]
        out = correct_bounds(layout, 12)
        assert positions(out) == {"s1": (0, 0, 2, 1), "s2": (1, 1, 2, 1)}

    def test_non_static_overlaps_are_left_alone(self):
        layout = [GridItem("a", 0, 0, 2, 1), GridItem("b", 1, 0, 2, 1)]
        assert correct_bounds(layout, 12) == layout

    def test_in_bounds_layout_is_unchanged(self, three_items):
        assert correct_bounds(three_items, 12) == three_items


def random_layout(seed):
    """Overlapping in-bounds items on a 1 to 6 column grid."""
    rng = random.Random(seed)
    cols = rng.randint(1, 6)
    layout = []
    for n in range(rng.randint(1, 8)):
        w = rng.randint(1, cols)
        layout.append(GridItem(
            f"i{n}",
            x=rng.randint(0, cols - w),
            y=rng.randint(0, 5),
            w=w,
            h=rng.randint(1, 3),
        ))
    return layout, cols


@pytest.mark.parametrize("compact_type", list(CompactType))
@pytest.mark.parametrize("seed", range(40))
def test_random_layouts_compact_to_a_fixed_point(seed, compact_type):
    """No overlaps, items stay inside the columns, and a second pass changes nothing."""
    layout, cols = random_layout(seed)
    once = compact(layout, compact_type, cols)
    validate_layout(once, cols=cols)
    assert [i.id for i in once] == [i.id for i in layout]
    assert [(i.w, i.h) for i in once] == [(i.w, i.h) for i in layout]
    assert compact(once, compact_type, cols) == once
