"""Voxel chunk storage, filling helpers and text input/output."""

from __future__ import annotations

import itertools
import math
import sys
from enum import IntEnum
from typing import Iterable, Iterator, NamedTuple, TextIO


class Block(IntEnum):
    """Block kinds a chunk cell can hold."""

    AIR = 0
    GRASS = 1
    WOOD = 2
    STONE = 3
    CANVAS = 4


class Vec3(NamedTuple):
    """An integer position or size in chunk space."""

    x: int
    y: int
    z: int


def _vec(value: Iterable[int]) -> Vec3:
    return Vec3(*(int(component) for component in value))


def distance(p1: Iterable[int], p2: Iterable[int]) -> float:
    """Euclidean distance between two positions."""
    return math.dist(tuple(p1), tuple(p2))


class Chunk:
    """A dense three-dimensional grid of blocks indexed as ``chunk[x, y, z]``.

    A fresh chunk is empty air with a canvas floor on the ``y == 0`` layer.
    """

    def __init__(self, size: Iterable[int]) -> None:
        self.size = _vec(size)
        if any(extent < 0 for extent in self.size):
            raise ValueError(f"chunk size must not be negative: {tuple(self.size)}")
        width, height, depth = self.size
        self._blocks = [
            [[int(Block.AIR)] * depth for _ in range(height)] for _ in range(width)
        ]
        if height > 0:
            for column in self._blocks:
                column[0] = [int(Block.CANVAS)] * depth

    def __repr__(self) -> str:
        return f"Chunk(size={tuple(self.size)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chunk):
            return NotImplemented
        return self.size == other.size and self._blocks == other._blocks

    def in_bounds(self, position: Iterable[int]) -> bool:
        """Whether the position lies inside the chunk."""
        pos = _vec(position)
        return all(0 <= c < extent for c, extent in zip(pos, self.size))

    def __getitem__(self, position: Iterable[int]) -> int:
        pos = _vec(position)
        if not self.in_bounds(pos):
            raise IndexError(f"position {tuple(pos)} is outside chunk of size {tuple(self.size)}")
        return self._blocks[pos.x][pos.y][pos.z]

    def __setitem__(self, position: Iterable[int], block: int) -> None:
        pos = _vec(position)
        if not self.in_bounds(pos):
            raise IndexError(f"position {tuple(pos)} is outside chunk of size {tuple(self.size)}")
        self._blocks[pos.x][pos.y][pos.z] = int(block)

    def place_block(self, position: Iterable[int], block: int) -> bool:
        """Set a block if the position is inside the chunk; report whether it was set."""
        pos = _vec(position)
        if not self.in_bounds(pos):
            return False
        self._blocks[pos.x][pos.y][pos.z] = int(block)
        return True

    def fill_cuboid(self, p1: Iterable[int], p2: Iterable[int], block: int) -> None:
        """Fill the inclusive box spanned by two corners, clipped to the chunk."""
        a, b = _vec(p1), _vec(p2)
        ranges = [range(min(lo, hi), max(lo, hi) + 1) for lo, hi in zip(a, b)]
        for pos in itertools.product(*ranges):
            self.place_block(pos, block)

    def fill_sphere(self, center: Iterable[int], radius: float, block: int) -> None:
        """Fill every cell strictly closer than ``radius`` to ``center``."""
        c = _vec(center)
        reach = math.ceil(radius)
        ranges = [range(component - reach, component + reach + 1) for component in c]
        for pos in itertools.product(*ranges):
            if distance(c, pos) < radius:
                self.place_block(pos, block)

    def describe_block(self, position: Iterable[int]) -> str:
        """Describe the block at a position; raise IndexError naming the bad axis."""
        pos = _vec(position)
        for axis, component, extent in zip("XYZ", pos, self.size):
            if component < 0 or component >= extent:
                raise IndexError(f"{axis} coordinate is not valid")
        return f"Block {self[pos]} at X:{pos.x} Y:{pos.y} Z:{pos.z}"

    def format(self) -> str:
        """Render the whole chunk as text, one row of z values per (x, y)."""
        width, height, depth = self.size
        parts = [f"Chunk: width-{width}, height-{height}, depth-{depth}"]
        for column in self._blocks:
            for row in column:
                parts.append("".join(f"{value} " for value in row) + "\n")
            parts.append("\n")
        return "".join(parts)

    def copy(self) -> Chunk:
        """Return an independent copy of this chunk."""
        duplicate = Chunk(self.size)
        duplicate._blocks = [[list(row) for row in column] for column in self._blocks]
        return duplicate


def block_shell(
    chunk: Chunk, copy: Chunk, position: Iterable[int], target_block: int, shell_block: int
) -> Chunk:
    """Mark ``position`` in ``copy`` with ``shell_block`` unless ``chunk`` holds ``target_block`` there.

    Only the cell at ``position`` itself is examined; out-of-bounds positions
    leave ``copy`` untouched.
    """
    pos = _vec(position)
    if chunk.in_bounds(pos) and chunk[pos] != target_block:
        copy.place_block(pos, shell_block)
    return copy


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _take_int(tokens: Iterator[str]) -> int:
    try:
        token = next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of chunk data") from None
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"expected an integer, got {token!r}") from None


def read_chunk(stream: TextIO) -> Chunk:
    """Read a chunk: its size, then every x slice from the top layer down."""
    tokens = _tokens(stream)
    size = Vec3(_take_int(tokens), _take_int(tokens), _take_int(tokens))
    chunk = Chunk(size)
    for x in range(size.x):
        for y in reversed(range(size.y)):
            for z in range(size.z):
                chunk[x, y, z] = _take_int(tokens)
    return chunk


def read_chunk_file(path: str = "Chunks/1.in") -> Chunk:
    """Read a chunk from a text file."""
    with open(path, encoding="utf-8") as handle:
        return read_chunk(handle)


def init_chunk(stream: TextIO | None = None, out: TextIO | None = None) -> Chunk:
    """Prompt for a chunk size, read it and return a fresh chunk of that size."""
    stream = sys.stdin if stream is None else stream
    out = sys.stdout if out is None else out
    out.write("Set size to chunk: X Y Z\n")
    tokens = _tokens(stream)
    size = Vec3(_take_int(tokens), _take_int(tokens), _take_int(tokens))
    out.write(f"{size.x}{size.y}{size.z}\n")
    return Chunk(size)