"""Keyboard control of the block cursor that moves through a chunk."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Tuple

from .camera import Camera
from .chunk import Block, Chunk

Point = Tuple[float, float, float]
Step = Tuple[int, int]


@dataclass(frozen=True)
class CursorInput:
    """The keys pressed during one frame that affect the cube cursor."""

    toggle_block: bool = False
    forward: bool = False
    back: bool = False
    right: bool = False
    left: bool = False
    up: bool = False
    down: bool = False
    reset: bool = False


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _normalize(v: Point) -> Point:
    length = math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])
    if length == 0.0:
        return v
    return (v[0] / length, v[1] / length, v[2] / length)


def _cross(a: Point, b: Point) -> Point:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def clamp_cursor(cursor: Iterable[float], size: Iterable[int]) -> Point:
    """Pull a cursor position back inside a chunk of the given size."""
    clamped = []
    for component, extent in zip(cursor, size):
        value = float(component)
        if value < 0:
            value = 0.0
        if value >= float(extent):
            value = float(extent) - 1
        clamped.append(value)
    return (clamped[0], clamped[1], clamped[2])


def movement_axes(camera: Camera) -> Tuple[Step, Step]:
    """Grid steps on the x/z plane for moving forward and for strafing right.

    The camera's view direction is flattened onto the ground plane and each
    axis component is rounded to the nearest whole step.
    """
    raw = (
        camera.target[0] - camera.position[0],
        0.0,
        camera.target[2] - camera.position[2],
    )
    forward = _normalize(raw)
    right = _normalize(_cross(forward, tuple(camera.up)))
    return (
        (_round_half_away(forward[0]), _round_half_away(forward[2])),
        (_round_half_away(right[0]), _round_half_away(right[2])),
    )


def update_cube_cursor(
    chunk: Chunk, cursor: Iterable[float], camera: Camera, keys: CursorInput
) -> Point:
    """Apply one frame of key presses and return the new cursor position.

    Toggling swaps the block under the cursor between air and wood.
    """
    x, y, z = (float(c) for c in cursor)
    size = chunk.size
    (dx, dz), (strafe_x, strafe_z) = movement_axes(camera)

    if keys.toggle_block:
        cell = (int(x), int(y), int(z))
        if chunk.in_bounds(cell):
            block = Block.WOOD if chunk[cell] == Block.AIR else Block.AIR
            chunk.place_block(cell, block)

    if keys.forward:
        x += dx
        z += dz
    if keys.back:
        x -= dx
        z -= dz
    if keys.right:
        x += strafe_x
        z += strafe_z
    if keys.left:
        x -= strafe_x
        z -= strafe_z
    if keys.up and y < float(size.y):
        y += 1
    if keys.down and y > 1.0:
        y -= 1
    if keys.reset:
        x = y = z = 0.0

    return clamp_cursor((x, y, z), size)