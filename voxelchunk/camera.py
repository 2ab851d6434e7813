"""Camera setup and selection of the chunk cubes that get drawn."""

from __future__ import annotations

import itertools
import math
from dataclasses import dataclass
from typing import Iterator, Tuple

from .chunk import Block, Chunk

Vector = Tuple[float, float, float]
Color = Tuple[int, int, int, int]

CAMERA_POSITION: Vector = (4.304, 5.292, 16.295)
CAMERA_TARGET: Vector = (4.608, -0.151, -0.496)

MAX_RENDER_DISTANCE = 30.0

BLACK: Color = (0, 0, 0, 255)
WHITE: Color = (255, 255, 255, 255)
MAROON: Color = (190, 33, 55, 255)

_HIDDEN = frozenset({int(Block.AIR), int(Block.GRASS), int(Block.STONE)})


@dataclass
class Camera:
    """A perspective camera looking from ``position`` towards ``target``."""

    position: Vector
    target: Vector
    up: Vector = (0.0, 1.0, 0.0)
    fovy: float = 45.0
    projection: str = "perspective"


@dataclass(frozen=True)
class RenderedCube:
    """A unit cube to draw, with its fill colour and a black wireframe."""

    position: Vector
    color: Color
    wire_color: Color = BLACK


def init_camera() -> Camera:
    """The default camera: at (10, 10, 10) looking at the origin."""
    return Camera(position=(10.0, 10.0, 10.0), target=(0.0, 0.0, 0.0))


def _color_for(block: int) -> Color:
    if block == Block.WOOD:
        return MAROON
    if block == Block.CANVAS:
        return WHITE
    return BLACK


def visible_cubes(
    chunk: Chunk, camera: Camera, max_distance: float = MAX_RENDER_DISTANCE
) -> Iterator[RenderedCube]:
    """Yield the cubes worth drawing, in x, y, z order.

    Air, grass and stone are never drawn, and nothing farther from the camera
    than ``max_distance`` is drawn.
    """
    for pos in itertools.product(*(range(extent) for extent in chunk.size)):
        block = chunk[pos]
        if block in _HIDDEN:
            continue
        point = (float(pos[0]), float(pos[1]), float(pos[2]))
        if math.dist(camera.position, point) > max_distance:
            continue
        yield RenderedCube(position=point, color=_color_for(block))