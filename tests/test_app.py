import io

import pytest

from voxelchunk.app import AppState, main
from voxelchunk.camera import CAMERA_POSITION, CAMERA_TARGET
from voxelchunk.chunk import Block, Chunk
from voxelchunk.cursor import movement_axes


@pytest.fixture
def state():
    return AppState(Chunk((10, 10, 10)))


def test_initial_camera_and_cursor(state):
    assert state.camera.position == (5 - 4, CAMERA_POSITION[1], 5)
    assert state.camera.target == CAMERA_TARGET
    assert state.cursor == (5.0, 1.0, 5.0)
    assert state.third_mode is True


def test_toggle_mode_changes_status(state):
    assert state.status == "2D mode"
    state.handle_key("x")
    assert state.third_mode is False
    assert state.status == "3D mode"
    state.handle_key("X")
    assert state.third_mode is True


def test_sphere_key_fills_wood(state):
    before = state.chunk.copy()
    state.handle_key("T")
    assert state.chunk[5, 5, 5] == Block.WOOD
    assert state.chunk[0, 0, 0] == before[0, 0, 0]
    assert state.chunk != before


def test_z_key_targets_origin(state):
    state.handle_key("Z")
    assert state.camera.target == (0.0, 0.0, 0.0)


def test_p_key_prints_empty_chunk_header(state):
    assert state.handle_key("P") == "Chunk: width-0, height-0, depth-0"


def test_other_keys_produce_no_output(state):
    assert state.handle_key("T") is None


def test_f_key_toggles_block_under_cursor(state):
    cell = (5, 1, 5)
    assert state.chunk[cell] == Block.AIR
    state.handle_key("F")
    assert state.chunk[cell] == Block.WOOD
    state.handle_key("F")
    assert state.chunk[cell] == Block.AIR


def test_w_moves_cursor_along_view(state):
    (dx, dz), _ = movement_axes(state.camera)
    start = state.cursor
    state.handle_key("W")
    assert state.cursor == (start[0] + dx, start[1], start[2] + dz)


def test_w_then_s_returns_cursor(state):
    start = state.cursor
    state.handle_key("W")
    state.handle_key("S")
    assert state.cursor == start


def test_e_and_q_move_cursor_vertically(state):
    state.handle_key("E")
    assert state.cursor[1] == 2.0
    state.handle_key("Q")
    assert state.cursor[1] == 1.0


def test_ctrl_r_resets_cursor(state):
    state.handle_key("ctrl+r")
    assert state.cursor == (0.0, 0.0, 0.0)


def test_cursor_keys_ignored_in_free_mode(state):
    state.handle_key("X")
    start = state.cursor
    state.handle_key("W")
    state.handle_key("F")
    assert state.cursor == start
    assert state.chunk[5, 1, 5] == Block.AIR


def test_cursor_clamped_into_thin_chunk():
    app = AppState(Chunk((4, 1, 4)))
    app.handle_key("unknown")
    assert app.cursor == (2.0, 0.0, 2.0)


def test_help_lines_from_source(state):
    assert state.help_lines[0] == "X - Toggle 2D/3D movement"
    assert state.help_lines[-1] == "ESC - Quit"


def test_main_rejects_bad_size(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("a b c"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err


def test_main_rejects_negative_size(capsys):
    assert main(["--size", "-1", "2", "3"]) == 1
    assert "negative" in capsys.readouterr().err