# voxelchunk

A small voxel chunk editor. A chunk is a 3D grid of blocks (`Block.AIR`,
`GRASS`, `WOOD`, `STONE`, `CANVAS`). A new chunk is air with a canvas floor
on the `y == 0` layer. You build on it with a cube cursor, or fill spheres
and cuboids from code.

## Installing

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install .[test]
pytest
```

## Running the editor

```
voxelchunk
```

With no options the program prints `Set size to chunk: X Y Z` and reads
three integers from standard input. You can also give the size on the
command line:

```
voxelchunk --size 16 8 16
```

A negative size is refused with an error and exit status 1. Then a pygame
window opens.

The editor starts in cursor mode (the corner caption reads `2D mode`).
Keys in cursor mode:

- `W` / `S` move the cursor forward / back along the camera's view,
  `A` / `D` move it left / right; steps are snapped to the grid
- `E` / `Q` move the cursor up / down (it does not go below `y == 1` with `Q`)
- `F` places a wood block at the cursor if the cell is air, otherwise clears it to air
- `Ctrl+R` sends the cursor back to the origin

The cursor is always kept inside the chunk.

Keys in any mode:

- `X` switches between cursor mode and free camera (`3D mode`)
- `T` fills a wood sphere of radius 4 centred at (5, 5, 5)
- `Z` points the camera at the origin
- `P` prints the header `Chunk: width-0, height-0, depth-0` to standard output
- `ESC` or closing the window quits

In free camera mode the mouse is grabbed: move it to look around, `WASD`
moves the camera, `Space` and left `Ctrl` move it up and down.

Only wood and canvas blocks are drawn, and only those within 30 units of
the camera. Grass and stone are kept in the chunk but not shown.

## Using the library

```python
from voxelchunk.chunk import Block, Chunk, Vec3

chunk = Chunk(Vec3(10, 10, 10))
chunk.fill_sphere(Vec3(5, 5, 5), 4, Block.WOOD)
chunk.fill_cuboid(Vec3(0, 1, 0), Vec3(2, 3, 2), Block.STONE)
chunk.place_block(Vec3(9, 9, 9), Block.GRASS)

print(chunk[5, 5, 5])
print(chunk.describe_block((0, 0, 0)))   # "Block 4 at X:0 Y:0 Z:0"
print(chunk.format())
```

- `Chunk.place_block` returns `False` and changes nothing for a position
  outside the chunk; indexing (`chunk[x, y, z]`) raises `IndexError` there,
  and `describe_block` raises `IndexError` naming the bad axis.
- `fill_cuboid` fills the inclusive box between two corners;
  `fill_sphere` fills every cell strictly closer than the radius. Both clip
  to the chunk.
- `Chunk.copy` returns an independent copy; `block_shell(chunk, copy,
  position, target_block, shell_block)` sets `position` in `copy` to
  `shell_block` when `chunk` does not hold `target_block` there.
- `read_chunk(stream)` reads whitespace-separated integers: the three
  sizes, then for each `x` the layers from the top `y` down, each a row of
  `z` values. `read_chunk_file(path)` does the same for a file (default
  `Chunks/1.in`). Missing or non-integer data raises `ValueError`.

Other modules:

- `voxelchunk.camera`: `init_camera()` and `visible_cubes(chunk, camera,
  max_distance)`, which yields a `RenderedCube` for each cube to draw.
- `voxelchunk.cursor`: `update_cube_cursor(chunk, cursor, camera, keys)`
  applies one frame of `CursorInput` and returns the new cursor position;
  `clamp_cursor` and `movement_axes` are its building blocks.
- `voxelchunk.label`: `layout_label(lines, position)` computes the panel
  rectangle and line positions of a text label.
- `voxelchunk.textbox`: `TextBox`, the state of a single-line text entry
  with click focus, a character limit, held-backspace repeat and a blinking
  cursor. The editor window does not use it.
- `voxelchunk.app`: `AppState` and `main`.

## What it does not do

The editor cannot save a chunk, and it cannot open one: every session
starts from a fresh chunk of the size you give. `read_chunk` and
`read_chunk_file` load chunks from text only when called from code, and
there is no function that writes that format back out. The `P` key does
not print the chunk being edited.