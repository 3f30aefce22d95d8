"""
Tests for the resize geometry calculator.

Covers:
- Direction -> size mapping for every handle
- The minimum size floor
- Aspect lock on corners (default off/on, shift inversion, edges never locked)
- Anchor stability for left/top handles
- Degenerate start rectangles
- The end-to-end scenarios from the handle drag protocol
"""
import pytest

from rect_resizer.components.resize_handles import HandleDirection as D
from rect_resizer.constants import MIN_RESIZE_SIZE
from rect_resizer.models.rect import ModifierKeys, Rect, Vec2
from rect_resizer.utils.resize_math import (
    apply_offsets, compute_rectangle, is_ratio_locked, round_half_up
)

SHIFT = ModifierKeys(shift=True)
NO_KEYS = ModifierKeys()


# ══════════════════════════════════════════════════════════════════════════
# End-to-end scenarios
# ══════════════════════════════════════════════════════════════════════════

class TestScenarios:

    def test_bottom_right_grows(self, start_rect):
        box = compute_rectangle(start_rect, D.BOTTOM_RIGHT, Vec2(20, 10), NO_KEYS, False)
        assert box == Rect(top=0, left=0, width=120, height=60)

    def test_bottom_right_with_shift_keeps_ratio(self, start_rect):
        box = compute_rectangle(start_rect, D.BOTTOM_RIGHT, Vec2(20, 10), SHIFT, False)
        assert box.width / box.height == pytest.approx(2.0)
        assert (box.width, box.height) == (120, 60)

    def test_bottom_right_with_shift_scales_from_candidate(self, start_rect):
        # Candidate 160x60 is wider than 2:1, so height follows width
        box = compute_rectangle(start_rect, D.BOTTOM_RIGHT, Vec2(60, 10), SHIFT, False)
        assert (box.width, box.height) == (160, 80)

    def test_top_left_pins_opposite_corner(self, start_rect):
        box = compute_rectangle(start_rect, D.TOP_LEFT, Vec2(10, 5), NO_KEYS, False)
        assert box == Rect(top=5, left=10, width=90, height=45)

    def test_right_edge_clamps_to_floor(self, start_rect):
        box = compute_rectangle(start_rect, D.CENTER_RIGHT, Vec2(-90, 0), NO_KEYS, False)
        assert box.width == 32
        assert box.height == 50


# ══════════════════════════════════════════════════════════════════════════
# Direction mapping
# ══════════════════════════════════════════════════════════════════════════

class TestDirectionMapping:

    @pytest.mark.parametrize("direction, expected", [
        (D.TOP_LEFT, Rect(10, 20, 80, 40)),
        (D.TOP_CENTER, Rect(10, 0, 100, 40)),
        (D.TOP_RIGHT, Rect(10, 0, 120, 40)),
        (D.CENTER_LEFT, Rect(0, 20, 80, 50)),
        (D.CENTER_RIGHT, Rect(0, 0, 120, 50)),
        (D.BOTTOM_LEFT, Rect(0, 20, 80, 60)),
        (D.BOTTOM_CENTER, Rect(0, 0, 100, 60)),
        (D.BOTTOM_RIGHT, Rect(0, 0, 120, 60)),
    ])
    def test_each_direction(self, start_rect, direction, expected):
        box = compute_rectangle(start_rect, direction, Vec2(20, 10), NO_KEYS, False)
        assert box == expected

    def test_accepts_tuple_delta(self, start_rect):
        box = compute_rectangle(start_rect, D.BOTTOM_RIGHT, (5, 5))
        assert (box.width, box.height) == (105, 55)

    def test_accepts_mapping_delta(self, start_rect):
        box = compute_rectangle(start_rect, D.BOTTOM_RIGHT, {'x': 5, 'y': -5})
        assert (box.width, box.height) == (105, 45)

    def test_zero_delta_is_identity(self, start_rect):
        for direction in D:
            box = compute_rectangle(start_rect, direction, Vec2(0, 0), NO_KEYS, False)
            assert box == Rect(0, 0, 100, 50)


# ══════════════════════════════════════════════════════════════════════════
# Minimum size
# ══════════════════════════════════════════════════════════════════════════

class TestMinimumSize:

    @pytest.mark.parametrize("direction", list(D))
    @pytest.mark.parametrize("delta", [(-500, -500), (500, 500), (-500, 500), (500, -500), (-31, -49)])
    @pytest.mark.parametrize("ratio_default", [False, True])
    def test_never_below_floor(self, start_rect, direction, delta, ratio_default):
        for keys in (NO_KEYS, SHIFT):
            box = compute_rectangle(start_rect, direction, Vec2(*delta), keys, ratio_default)
            assert box.width >= MIN_RESIZE_SIZE
            assert box.height >= MIN_RESIZE_SIZE

    def test_left_edge_floor_moves_anchor_to_floor(self, start_rect):
        box = compute_rectangle(start_rect, D.CENTER_LEFT, Vec2(95, 0), NO_KEYS, False)
        assert box.width == 32
        assert box.left == 100 - 32

    def test_bottom_edge_clamps_exactly(self, start_rect):
        box = compute_rectangle(start_rect, D.BOTTOM_CENTER, Vec2(0, -1000), NO_KEYS, False)
        assert box.height == 32


# ══════════════════════════════════════════════════════════════════════════
# Aspect lock
# ══════════════════════════════════════════════════════════════════════════

class TestAspectLock:

    @pytest.mark.parametrize("ratio_default, shift, expected", [
        (False, False, False),
        (False, True, True),
        (True, False, True),
        (True, True, False),
    ])
    def test_shift_inverts_default(self, ratio_default, shift, expected):
        keys = ModifierKeys(shift=shift)
        assert is_ratio_locked(D.BOTTOM_RIGHT, keys, ratio_default) is expected

    @pytest.mark.parametrize("direction", [D.TOP_CENTER, D.BOTTOM_CENTER, D.CENTER_LEFT, D.CENTER_RIGHT])
    def test_edges_never_lock(self, start_rect, direction):
        assert not is_ratio_locked(direction, SHIFT, False)
        assert not is_ratio_locked(direction, NO_KEYS, True)
        box = compute_rectangle(start_rect, direction, Vec2(30, 30), NO_KEYS, True)
        changed = box.width != 100 or box.height != 50
        assert changed
        assert box.width == 100 or box.height == 50

    @pytest.mark.parametrize("direction", [D.TOP_LEFT, D.TOP_RIGHT, D.BOTTOM_LEFT, D.BOTTOM_RIGHT])
    @pytest.mark.parametrize("delta", [(37, 3), (-13, 41), (7, -9), (120, 0), (0, 77), (-40, -10)])
    def test_corner_ratio_within_one_unit(self, start_rect, direction, delta):
        box = compute_rectangle(start_rect, direction, Vec2(*delta), NO_KEYS, True)
        ratio = start_rect.width / start_rect.height
        assert abs(box.width - box.height * ratio) <= 1 or abs(box.height - box.width / ratio) <= 1

    def test_ratio_default_locks_without_shift(self):
        start = Rect(0, 0, 90, 30)
        box = compute_rectangle(start, D.BOTTOM_RIGHT, Vec2(0, 30), NO_KEYS, True)
        assert (box.width, box.height) == (180, 60)

    def test_zero_height_disables_lock(self):
        start = Rect(0, 0, 100, 0)
        box = compute_rectangle(start, D.BOTTOM_RIGHT, Vec2(10, 10), SHIFT, False)
        assert (box.width, box.height) == (110, 32)

    def test_rounds_half_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(3.5) == 4
        assert round_half_up(2.4) == 2

    def test_locked_result_is_rounded(self):
        start = Rect(0, 0, 100, 30)
        box = compute_rectangle(start, D.BOTTOM_RIGHT, Vec2(0, 15), SHIFT, False)
        # height 45 -> width 150
        assert box.width == 150

    def test_locked_height_rounds_half_up(self):
        start = Rect(0, 0, 100, 40)
        box = compute_rectangle(start, D.BOTTOM_RIGHT, Vec2(1, 0), SHIFT, False)
        # width 101 -> height 40.4 rounds to 40
        assert (box.width, box.height) == (101, 40)
        box = compute_rectangle(start, D.BOTTOM_RIGHT, Vec2(5, 0), SHIFT, False)
        # width 105 -> height 42
        assert (box.width, box.height) == (105, 42)

    def test_floor_applies_before_lock(self):
        # Height 30 is lifted to 32 first, then width follows 32 * 10/3 = 106.67
        start = Rect(0, 0, 100, 30)
        box = compute_rectangle(start, D.BOTTOM_RIGHT, Vec2(1, 0), SHIFT, False)
        assert (box.width, box.height) == (107, 32)


# ══════════════════════════════════════════════════════════════════════════
# Anchors
# ══════════════════════════════════════════════════════════════════════════

class TestAnchors:

    @pytest.mark.parametrize("dx", [-40, -5, 0, 12, 60])
    def test_left_edge_keeps_right_edge(self, dx):
        start = Rect(top=30, left=70, width=100, height=50)
        box = compute_rectangle(start, D.CENTER_LEFT, Vec2(dx, 0), NO_KEYS, False)
        final = apply_offsets(start, box)
        assert final.right == start.right

    @pytest.mark.parametrize("dy", [-40, -5, 0, 12])
    def test_top_edge_keeps_bottom_edge(self, dy):
        start = Rect(top=30, left=70, width=100, height=50)
        box = compute_rectangle(start, D.TOP_CENTER, Vec2(0, dy), NO_KEYS, False)
        final = apply_offsets(start, box)
        assert final.bottom == start.bottom

    def test_top_left_keeps_bottom_right(self):
        start = Rect(top=30, left=70, width=100, height=50)
        final = apply_offsets(start, compute_rectangle(start, D.TOP_LEFT, Vec2(-25, 8)))
        assert (final.right, final.bottom) == (start.right, start.bottom)

    @pytest.mark.parametrize("direction", [D.BOTTOM_RIGHT, D.BOTTOM_CENTER, D.CENTER_RIGHT])
    def test_bottom_right_family_keeps_top_left(self, direction):
        start = Rect(top=30, left=70, width=100, height=50)
        final = apply_offsets(start, compute_rectangle(start, direction, Vec2(33, -12)))
        assert (final.top, final.left) == (start.top, start.left)

    def test_top_right_keeps_bottom_left(self):
        start = Rect(top=30, left=70, width=100, height=50)
        final = apply_offsets(start, compute_rectangle(start, D.TOP_RIGHT, Vec2(10, 10)))
        assert (final.left, final.bottom) == (start.left, start.bottom)
