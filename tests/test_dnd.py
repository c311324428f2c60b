"""Tests for drag-and-drop angle gaps and drop index resolution."""

from __future__ import annotations

import random

import pytest

from pielayout.angles import assign_angles
from pielayout.dnd import assign_angles_for_drag, compute_drop_index, drop_zone_boundaries
from pielayout.geometry import normalize_angle
from pielayout.models import DragLayout, LayoutInputError, MenuItem


# ═══════════════════════════════════════════════════════════════════
# assign_angles_for_drag
# ═══════════════════════════════════════════════════════════════════


class TestAssignAnglesForDrag:
    def test_without_drop_index_matches_assign_angles(self):
        items = [None, 45.0, None]
        result = assign_angles_for_drag(items, parent_angle=250.0)
        assert isinstance(result, DragLayout)
        assert result.angles == assign_angles(items, parent_angle=250.0)
        assert result.drop_angle is None

    def test_gap_in_the_middle(self):
        result = assign_angles_for_drag([None] * 4, drop_index=2)
        assert result.angles == pytest.approx([0.0, 72.0, 216.0, 288.0])
        assert result.drop_angle == pytest.approx(144.0)

    def test_gap_at_start_and_end(self):
        first = assign_angles_for_drag([None] * 4, drop_index=0)
        assert first.angles == pytest.approx([72.0, 144.0, 216.0, 288.0])
        assert first.drop_angle == pytest.approx(0.0)

        last = assign_angles_for_drag([None] * 4, drop_index=4)
        assert last.angles == pytest.approx([0.0, 72.0, 144.0, 216.0])
        assert last.drop_angle == pytest.approx(288.0)

    def test_gap_with_parent(self):
        result = assign_angles_for_drag([None] * 4, parent_angle=180.0, drop_index=1)
        assert result.angles == pytest.approx([0.0, 120.0, 240.0, 300.0])
        assert result.drop_angle == pytest.approx(60.0)

    def test_drop_into_empty_menu(self):
        result = assign_angles_for_drag([], drop_index=0)
        assert result.angles == []
        assert result.drop_angle == pytest.approx(0.0)

    def test_items_not_modified(self):
        items = [MenuItem("a"), MenuItem("b", angle=90.0)]
        before = list(items)
        assign_angles_for_drag(items, drop_index=1)
        assert items == before

    @pytest.mark.parametrize("drop_index", [-1, 3, 1.5, True])
    def test_invalid_drop_index(self, drop_index):
        with pytest.raises(LayoutInputError):
            assign_angles_for_drag([None, None], drop_index=drop_index)


@pytest.mark.parametrize(
    "items, parent_angle, drop_index",
    [
        ([None] * 4, None, 2),
        ([None] * 4, 180.0, 1),
        ([None] * 5, 45.0, 5),
        ([None, 90.0, None], None, 1),
        ([None, 90.0, None], 300.0, 3),
    ],
)
def test_drop_angle_round_trip(items, parent_angle, drop_index):
    result = assign_angles_for_drag(items, parent_angle, drop_index)

    real_items = [MenuItem(str(i), angle=item) for i, item in enumerate(items)]
    real_items.insert(drop_index, MenuItem("dropped", angle=result.drop_angle))
    angles = assign_angles(real_items, parent_angle)

    assert angles[drop_index] == pytest.approx(result.drop_angle)


# ═══════════════════════════════════════════════════════════════════
# compute_drop_index
# ═══════════════════════════════════════════════════════════════════


class TestComputeDropIndex:
    def test_no_items(self):
        assert compute_drop_index([], 123.0) == 0

    def test_single_item_sides(self):
        assert compute_drop_index([0.0], 45.0) == 0
        assert compute_drop_index([0.0], 350.0) == 0
        assert compute_drop_index([0.0], 180.0) == 1
        assert compute_drop_index([90.0], 270.0) == 1

    def test_single_item_wrapping_pointer(self):
        assert compute_drop_index([200.0], 10.0) == 0

    def test_four_items(self):
        angles = [0.0, 90.0, 180.0, 270.0]
        assert compute_drop_index(angles, 50.0) == 1
        assert compute_drop_index(angles, 10.0) == 0
        assert compute_drop_index(angles, 340.0) == 0
        assert compute_drop_index(angles, 200.0) == 2
        assert compute_drop_index(angles, 300.0) == 3

    def test_zone_boundaries_belong_to_the_earlier_side(self):
        angles = [0.0, 90.0, 180.0, 270.0]
        assert compute_drop_index(angles, 45.0) == 0
        assert compute_drop_index(angles, 135.0) == 1

    def test_unnormalized_pointer(self):
        assert compute_drop_index([0.0, 90.0, 180.0, 270.0], 410.0) == 1

    def test_non_finite_pointer(self):
        with pytest.raises(LayoutInputError):
            compute_drop_index([0.0, 180.0], float("nan"))


@pytest.mark.parametrize("parent_angle", [None, 0.0, 135.0, 270.0])
@pytest.mark.parametrize("count", range(2, 9))
def test_drop_index_total(count, parent_angle):
    angles = assign_angles([None] * count, parent_angle)
    for step in range(360):
        pointer = step + 0.5
        index = compute_drop_index(angles, pointer)
        assert 0 <= index <= count


def test_drop_index_total_with_fixed_angles():
    angles = assign_angles([None, 10.0, None, 200.0, None, None])
    for step in range(0, 720):
        index = compute_drop_index(angles, step * 0.5 + 0.25)
        assert 0 <= index <= len(angles)


class TestDropZoneBoundaries:
    def test_two_items_at_computed_midpoint(self):
        angles = [16.265660384140652, 105.97756637491787]
        pointer = (angles[0] + angles[1]) / 2.0
        assert compute_drop_index(angles, pointer) == 0

    def test_boundaries_shared_between_zones(self):
        boundaries = drop_zone_boundaries([330.0, 30.0, 90.0, 180.0, 270.0])
        assert boundaries == pytest.approx([360.0, 420.0, 495.0, 585.0, 660.0])

    def test_not_in_circular_order(self):
        with pytest.raises(LayoutInputError):
            compute_drop_index([0.0, 90.0, 45.0], 10.0)

    @pytest.mark.parametrize("seed", range(20))
    def test_pointer_on_computed_boundaries(self, seed):
        rng = random.Random(seed)
        count = rng.randint(2, 12)
        angles = sorted(rng.uniform(0.0, 360.0) for _ in range(count))

        for i in range(count - 1):
            pointer = (angles[i] + angles[i + 1]) / 2.0
            assert compute_drop_index(angles, pointer) == i

        wrap = normalize_angle((angles[-1] + angles[0] + 360.0) / 2.0)
        assert compute_drop_index(angles, wrap) in (0, count - 1)

    @pytest.mark.parametrize("seed", range(5))
    def test_random_pointers_always_land_in_a_zone(self, seed):
        rng = random.Random(seed)
        angles = sorted(rng.uniform(0.0, 360.0) for _ in range(rng.randint(2, 12)))
        for _ in range(200):
            index = compute_drop_index(angles, rng.uniform(0.0, 360.0))
            assert 0 <= index < len(angles)
