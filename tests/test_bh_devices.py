import pytest

from senseshift.bh_devices import (
    FIRMWARE_VERSION,
    TACTAL_LAYOUT,
    TACTAL_SIZE,
    TACTOSY2_LAYOUT,
    TACTOSY2_SIZE,
    TACTOSYF_LAYOUT,
    TACTOSYH_LAYOUT,
    TACTOSYH_SIZE,
    TACTSUIT_X16_GROUPS,
    TACTSUIT_X16_LAYOUT,
    TACTSUIT_X16_SIZE,
    TACTSUIT_X40_LAYOUT,
    TACTSUIT_X40_SIZE,
    TACTVISOR_LAYOUT,
    TACTVISOR_SIZE,
    WRIST_MOTOR_POSITION,
    firmware_version,
    grid_point,
)
from senseshift.interface import Target
from senseshift.plane import map_point
from senseshift.point2 import Point2


def _grid(size_x, size_y):
    return {grid_point(x, y, size_x, size_y) for x in range(size_x) for y in range(size_y)}


def test_firmware_version_default_is_all_ones():
    assert FIRMWARE_VERSION == 0xFFFF
    assert firmware_version() == FIRMWARE_VERSION


def test_firmware_version_packs_major_high_minor_low():
    version = firmware_version(3, 7)
    assert version >> 8 == 3
    assert version & 0xFF == 7


@pytest.mark.parametrize("major,minor", [(256, 0), (0, 256), (-1, 0)])
def test_firmware_version_rejects_out_of_range(major, minor):
    with pytest.raises(ValueError):
        firmware_version(major, minor)


@pytest.mark.parametrize("x,y,sx,sy", [(0, 0, 4, 5), (3, 4, 4, 5), (2, 0, 6, 1), (0, 2, 1, 3)])
def test_grid_point_matches_map_point(x, y, sx, sy):
    assert grid_point(x, y, sx, sy) == map_point(x, y, sx - 1, sy - 1)


@pytest.mark.parametrize("x,y,sx,sy", [(4, 0, 4, 5), (0, 5, 4, 5), (-1, 0, 4, 5), (0, 0, 0, 1)])
def test_grid_point_rejects_bad_cells(x, y, sx, sy):
    with pytest.raises(ValueError):
        grid_point(x, y, sx, sy)


def test_layout_sizes():
    assert len(TACTSUIT_X40_LAYOUT) == TACTSUIT_X40_SIZE == 40
    assert len(TACTSUIT_X16_LAYOUT) == TACTSUIT_X16_SIZE == 40
    assert len(TACTAL_LAYOUT) == TACTAL_SIZE == 6
    assert len(TACTVISOR_LAYOUT) == TACTVISOR_SIZE == 4
    assert len(TACTOSY2_LAYOUT) == TACTOSY2_SIZE == 6
    assert len(TACTOSYH_LAYOUT) == TACTOSYH_SIZE == 3
    assert list(TACTAL_LAYOUT) == [grid_point(x, 0, 6, 1) for x in range(6)]
    assert list(TACTVISOR_LAYOUT) == [grid_point(x, 0, 4, 1) for x in range(4)]


def test_x40_each_side_has_twenty_distinct_points():
    for target in (Target.CHEST_FRONT, Target.CHEST_BACK):
        points = [p for t, p in TACTSUIT_X40_LAYOUT if t == target]
        assert len(points) == 20
        assert set(points) == _grid(4, 5)


def test_x40_block_order():
    assert TACTSUIT_X40_LAYOUT[0] == (Target.CHEST_FRONT, grid_point(0, 0, 4, 5))
    assert TACTSUIT_X40_LAYOUT[1] == (Target.CHEST_FRONT, grid_point(1, 0, 4, 5))
    assert TACTSUIT_X40_LAYOUT[10] == (Target.CHEST_BACK, grid_point(0, 0, 4, 5))
    assert TACTSUIT_X40_LAYOUT[29] == (Target.CHEST_BACK, grid_point(3, 4, 4, 5))
    assert TACTSUIT_X40_LAYOUT[39] == (Target.CHEST_FRONT, grid_point(3, 4, 4, 5))


def test_x16_has_eight_distinct_points_per_side():
    for target in (Target.CHEST_FRONT, Target.CHEST_BACK):
        points = {p for t, p in TACTSUIT_X16_LAYOUT if t == target}
        assert points == _grid(4, 2)


def test_x16_shares_targets_with_x40():
    assert [t for t, _ in TACTSUIT_X16_LAYOUT] == [t for t, _ in TACTSUIT_X40_LAYOUT]
    assert TACTSUIT_X16_LAYOUT[0] == (Target.CHEST_FRONT, grid_point(0, 0, 4, 2))
    assert TACTSUIT_X16_LAYOUT[10] == (Target.CHEST_BACK, grid_point(0, 0, 4, 2))


def test_x16_groups_are_valid_distinct_indices():
    assert len(TACTSUIT_X16_GROUPS) == 16
    assert len(set(TACTSUIT_X16_GROUPS)) == 16
    assert all(0 <= i < TACTSUIT_X16_SIZE for i in TACTSUIT_X16_GROUPS)
    assert TACTSUIT_X16_LAYOUT[TACTSUIT_X16_GROUPS[0]] == (
        Target.CHEST_FRONT,
        grid_point(0, 0, 4, 2),
    )


def test_x16_groups_cover_every_x16_position():
    grouped = {TACTSUIT_X16_LAYOUT[i] for i in TACTSUIT_X16_GROUPS}
    assert grouped == set(TACTSUIT_X16_LAYOUT)
    expected = {
        (target, point)
        for target in (Target.CHEST_FRONT, Target.CHEST_BACK)
        for point in _grid(4, 2)
    }
    assert grouped == expected


def test_single_row_layouts_share_y_and_increase_in_x():
    for layout, size_x in ((TACTAL_LAYOUT, 6), (TACTVISOR_LAYOUT, 4)):
        assert {p.y for p in layout} == {grid_point(0, 0, size_x, 1).y}
        xs = [p.x for p in layout]
        assert xs == sorted(xs)
        assert len(set(xs)) == len(xs)


def test_tactosy2_is_row_major():
    assert TACTOSY2_LAYOUT[0] == grid_point(0, 0, 3, 2)
    assert TACTOSY2_LAYOUT[3] == grid_point(0, 1, 3, 2)
    assert TACTOSY2_LAYOUT[0].y < TACTOSY2_LAYOUT[3].y


def test_tactosy_columns():
    assert TACTOSYH_LAYOUT == TACTOSYF_LAYOUT
    assert list(TACTOSYH_LAYOUT) == [grid_point(0, y, 1, 3) for y in range(3)]
    ys = [p.y for p in TACTOSYH_LAYOUT]
    assert ys == sorted(ys) and len(set(ys)) == 3


def test_wrist_motor_position():
    assert WRIST_MOTOR_POSITION == Point2(127, 191)