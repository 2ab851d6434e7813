import pytest

from voxelchunk.camera import Camera
from voxelchunk.chunk import Block, Chunk
from voxelchunk.cursor import (
    CursorInput,
    clamp_cursor,
    movement_axes,
    update_cube_cursor,
)


@pytest.fixture
def chunk():
    return Chunk((8, 6, 8))


@pytest.fixture
def camera():
    return Camera(position=(0.0, 3.0, 0.0), target=(0.0, 0.0, 5.0))


def test_clamp_keeps_inside_values():
    assert clamp_cursor((2.0, 3.0, 1.0), (8, 6, 8)) == (2.0, 3.0, 1.0)


@pytest.mark.parametrize(
    "cursor", [(-3.0, 2.0, 2.0), (20.0, 2.0, 2.0), (2.0, -1.0, 30.0), (100.0, 100.0, -100.0)]
)
def test_clamp_result_in_bounds(cursor):
    size = (8, 6, 8)
    result = clamp_cursor(cursor, size)
    assert all(0 <= c <= extent - 1 for c, extent in zip(result, size))


def test_movement_axes_are_perpendicular(camera):
    (dx, dz), (sx, sz) = movement_axes(camera)
    assert dx * sx + dz * sz == 0
    assert abs(dx) + abs(dz) == 1
    assert abs(sx) + abs(sz) == 1


def test_movement_axes_ignore_height():
    low = Camera(position=(0.0, 0.0, 0.0), target=(3.0, 0.0, 0.0))
    high = Camera(position=(0.0, 9.0, 0.0), target=(3.0, -4.0, 0.0))
    assert movement_axes(low) == movement_axes(high)


def test_movement_axes_straight_down_is_still():
    cam = Camera(position=(1.0, 5.0, 1.0), target=(1.0, 0.0, 1.0))
    assert movement_axes(cam) == ((0, 0), (0, 0))


def test_forward_moves_by_axis(chunk, camera):
    (dx, dz), _ = movement_axes(camera)
    start = (4.0, 2.0, 4.0)
    moved = update_cube_cursor(chunk, start, camera, CursorInput(forward=True))
    assert moved == (start[0] + dx, start[1], start[2] + dz)


def test_forward_then_back_returns(chunk, camera):
    start = (4.0, 2.0, 4.0)
    moved = update_cube_cursor(chunk, start, camera, CursorInput(forward=True))
    back = update_cube_cursor(chunk, moved, camera, CursorInput(back=True))
    assert back == start


def test_right_then_left_returns(chunk, camera):
    start = (4.0, 2.0, 4.0)
    moved = update_cube_cursor(chunk, start, camera, CursorInput(right=True))
    assert moved != start
    back = update_cube_cursor(chunk, moved, camera, CursorInput(left=True))
    assert back == start


def test_up_and_down(chunk, camera):
    start = (4.0, 2.0, 4.0)
    up = update_cube_cursor(chunk, start, camera, CursorInput(up=True))
    assert up[1] == start[1] + 1
    down = update_cube_cursor(chunk, up, camera, CursorInput(down=True))
    assert down == start


def test_down_stops_at_one(chunk, camera):
    result = update_cube_cursor(chunk, (4.0, 1.0, 4.0), camera, CursorInput(down=True))
    assert result[1] == 1.0


def test_up_clamped_to_top(chunk, camera):
    top = chunk.size.y - 1
    result = update_cube_cursor(chunk, (4.0, float(top), 4.0), camera, CursorInput(up=True))
    assert result[1] == top


def test_reset_goes_to_origin(chunk, camera):
    result = update_cube_cursor(chunk, (4.0, 3.0, 5.0), camera, CursorInput(reset=True))
    assert result == (0.0, 0.0, 0.0)


def test_toggle_places_wood_then_air(chunk, camera):
    cursor = (3.0, 2.0, 3.0)
    update_cube_cursor(chunk, cursor, camera, CursorInput(toggle_block=True))
    assert chunk[3, 2, 3] == Block.WOOD
    update_cube_cursor(chunk, cursor, camera, CursorInput(toggle_block=True))
    assert chunk[3, 2, 3] == Block.AIR


def test_toggle_clears_canvas_floor(chunk, camera):
    update_cube_cursor(chunk, (2.0, 0.0, 2.0), camera, CursorInput(toggle_block=True))
    assert chunk[2, 0, 2] == Block.AIR


def test_toggle_out_of_bounds_changes_nothing(chunk, camera):
    before = chunk.copy()
    update_cube_cursor(chunk, (50.0, 2.0, 2.0), camera, CursorInput(toggle_block=True))
    assert chunk == before


def test_no_keys_keeps_position(chunk, camera):
    start = (4.0, 2.0, 4.0)
    assert update_cube_cursor(chunk, start, camera, CursorInput()) == start