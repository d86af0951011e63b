"""
Tests for pointer event normalisation.
"""
import math

import pytest

from tilegrid.errors import InvalidGestureError, InvalidGridConfigError
from tilegrid.interaction.pointer import client_point
from tilegrid.models.geometry import ClientPoint, PointerEvent, PointerKind


class TestClientPoint:
    """Test accepted event shapes."""

    def test_client_point_passes_through(self):
        point = ClientPoint(1.5, 2.5)
        assert client_point(point) == point

    @pytest.mark.parametrize("event", [PointerEvent.mouse(12, 34), PointerEvent.touch(12, 34)])
    def test_pointer_events(self, event):
        assert client_point(event) == ClientPoint(12, 34)

    def test_pointer_event_kinds(self):
        assert PointerEvent.mouse(0, 0).kind == PointerKind.MOUSE
        assert PointerEvent.touch(0, 0).kind == PointerKind.TOUCH

    def test_mouse_mapping(self):
        assert client_point({"clientX": 5, "clientY": 6}) == ClientPoint(5.0, 6.0)

    def test_touch_mapping_uses_first_touch(self):
        event = {"touches": [{"clientX": 7, "clientY": 8}, {"clientX": 100, "clientY": 100}]}
        assert client_point(event) == ClientPoint(7.0, 8.0)

    def test_touchend_falls_back_to_changed_touches(self):
        event = {"touches": [], "changedTouches": [{"clientX": 9, "clientY": 10}]}
        assert client_point(event) == ClientPoint(9.0, 10.0)


class TestInvalidEvents:
    """Test rejected input."""

    @pytest.mark.parametrize("event", [None, 42, (1, 2), "click"])
    def test_unsupported_types(self, event):
        with pytest.raises(InvalidGestureError):
            client_point(event)

    def test_mapping_without_coordinates(self):
        with pytest.raises(InvalidGestureError):
            client_point({"touches": [], "changedTouches": []})

    def test_non_finite_coordinates(self):
        with pytest.raises(InvalidGridConfigError):
            client_point(PointerEvent.mouse(math.nan, 0))
