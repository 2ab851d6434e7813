"""Interactive chunk editor: application state and the pygame window loop."""

from __future__ import annotations

import argparse
import math
import sys
from typing import Iterable, List, Optional, Sequence, Tuple

from .camera import (
    BLACK,
    CAMERA_POSITION,
    CAMERA_TARGET,
    MAROON,
    Camera,
    init_camera,
    visible_cubes,
)
from .chunk import Block, Chunk, Vec3, init_chunk
from .cursor import CursorInput, update_cube_cursor
from .label import layout_label

Point = Tuple[float, float, float]

WINDOW_SIZE = (1000, 1000)
WINDOW_TITLE = "Chunk test"
TARGET_FPS = 120

HELP_LINES: Tuple[str, ...] = (
    "X - Toggle 2D/3D movement",
    "T - Inserts exactly one sphere lmao",
    "WASD - Moves camera/cursor",
    "ESC - Quit",
)
HELP_POSITION: Point = (100.0, 100.0, 0.0)

SPHERE_CENTER = Vec3(5, 5, 5)
SPHERE_RADIUS = 4
SPHERE_BLOCK = Block.WOOD

STATUS_RECT = (300, 20, 50, 50)
STATUS_TEXT_POSITION = (305, 25)
STATUS_FONT_SIZE = 30

_RAYWHITE = (245, 245, 245)
_SKYBLUE_FADED = (102, 191, 255, 127)

_CURSOR_KEYS = {
    "F": CursorInput(toggle_block=True),
    "W": CursorInput(forward=True),
    "S": CursorInput(back=True),
    "D": CursorInput(right=True),
    "A": CursorInput(left=True),
    "E": CursorInput(up=True),
    "Q": CursorInput(down=True),
    "CTRL+R": CursorInput(reset=True),
}


class AppState:
    """Everything the editor keeps between frames, driven by key presses.

    In cursor mode (``third_mode``) the keyboard moves a block cursor through
    the chunk; otherwise the camera flies freely.
    """

    def __init__(self, chunk: Chunk) -> None:
        self.chunk = chunk
        size = chunk.size
        self.camera: Camera = init_camera()
        self.camera.position = (size.x / 2 - 4, CAMERA_POSITION[1], size.z / 2)
        self.camera.target = CAMERA_TARGET
        self.cursor: Point = (size.x / 2, 1.0, size.z / 2)
        self.third_mode = True
        self.help_lines: Tuple[str, ...] = HELP_LINES

    @property
    def status(self) -> str:
        """The mode caption shown in the corner of the window."""
        return "2D mode" if self.third_mode else "3D mode"

    def _apply_cursor(self, keys: CursorInput) -> None:
        if self.third_mode:
            self.cursor = update_cube_cursor(self.chunk, self.cursor, self.camera, keys)

    def handle_key(self, key: str) -> Optional[str]:
        """Apply one key press; return text to print, if the key produces any."""
        name = key.upper()
        output: Optional[str] = None
        if name == "Z":
            self.camera.target = (0.0, 0.0, 0.0)
        elif name == "P":
            output = Chunk((0, 0, 0)).format()
        elif name == "T":
            self.chunk.fill_sphere(SPHERE_CENTER, SPHERE_RADIUS, SPHERE_BLOCK)
        elif name == "X":
            self.third_mode = not self.third_mode
        self._apply_cursor(_CURSOR_KEYS.get(name, CursorInput()))
        return output


def _sub(a: Sequence[float], b: Sequence[float]) -> Point:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _dot(a: Sequence[float], b: Sequence[float]) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _cross(a: Sequence[float], b: Sequence[float]) -> Point:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _normalize(v: Sequence[float]) -> Point:
    length = math.sqrt(_dot(v, v))
    if length == 0.0:
        return (v[0], v[1], v[2])
    return (v[0] / length, v[1] / length, v[2] / length)


class _Projector:
    """Perspective projection of world points onto the window."""

    def __init__(self, camera: Camera, width: int, height: int) -> None:
        self.origin = camera.position
        self.forward = _normalize(_sub(camera.target, camera.position))
        self.right = _normalize(_cross(self.forward, camera.up))
        self.up = _cross(self.right, self.forward)
        self.half_w = width / 2
        self.half_h = height / 2
        self.focal = self.half_h / math.tan(math.radians(camera.fovy) / 2)

    def depth(self, point: Sequence[float]) -> float:
        return _dot(_sub(point, self.origin), self.forward)

    def project(self, point: Sequence[float]) -> Optional[Tuple[float, float]]:
        rel = _sub(point, self.origin)
        z = _dot(rel, self.forward)
        if z <= 0.1:
            return None
        x = _dot(rel, self.right)
        y = _dot(rel, self.up)
        return (self.half_w + x * self.focal / z, self.half_h - y * self.focal / z)


_FACES = (
    (0, 1, 3, 2), (4, 5, 7, 6), (0, 1, 5, 4),
    (2, 3, 7, 6), (0, 2, 6, 4), (1, 3, 7, 5),
)
_EDGES = (
    (0, 1), (1, 3), (3, 2), (2, 0), (4, 5), (5, 7),
    (7, 6), (6, 4), (0, 4), (1, 5), (2, 6), (3, 7),
)


def _corners(center: Sequence[float]) -> List[Point]:
    return [
        (center[0] + dx, center[1] + dy, center[2] + dz)
        for dx in (-0.5, 0.5)
        for dy in (-0.5, 0.5)
        for dz in (-0.5, 0.5)
    ]


def _draw_cube(surface, projector: _Projector, center, fill, wire) -> None:
    import pygame

    corners = _corners(center)
    points = [projector.project(c) for c in corners]
    if any(p is None for p in points):
        return
    if fill is not None:
        faces = sorted(
            _FACES,
            key=lambda face: -sum(projector.depth(corners[i]) for i in face),
        )
        for face in faces:
            pygame.draw.polygon(surface, fill[:3], [points[i] for i in face])
    for a, b in _EDGES:
        pygame.draw.line(surface, wire[:3], points[a], points[b])


def _fly(camera: Camera, pressed, mouse_rel: Tuple[int, int], dt: float) -> None:
    """Free-flight camera: WASD/space/ctrl to move, mouse to look."""
    import pygame

    speed = 5.0 * dt
    forward = _normalize(_sub(camera.target, camera.position))
    right = _normalize(_cross(forward, camera.up))
    move = [0.0, 0.0, 0.0]
    for key, direction, sign in (
        (pygame.K_w, forward, 1.0),
        (pygame.K_s, forward, -1.0),
        (pygame.K_d, right, 1.0),
        (pygame.K_a, right, -1.0),
        (pygame.K_SPACE, camera.up, 1.0),
        (pygame.K_LCTRL, camera.up, -1.0),
    ):
        if pressed[key]:
            move = [m + sign * c * speed for m, c in zip(move, direction)]

    yaw = -mouse_rel[0] * 0.003
    pitch = -mouse_rel[1] * 0.003
    fx, fy, fz = forward
    cos_y, sin_y = math.cos(yaw), math.sin(yaw)
    fx, fz = fx * cos_y + fz * sin_y, -fx * sin_y + fz * cos_y
    horizontal = math.hypot(fx, fz)
    angle = max(-1.5, min(1.5, math.atan2(fy, horizontal) + pitch))
    if horizontal > 0:
        fx, fz = fx / horizontal * math.cos(angle), fz / horizontal * math.cos(angle)
    fy = math.sin(angle)

    position = tuple(p + m for p, m in zip(camera.position, move))
    camera.position = position
    camera.target = (position[0] + fx, position[1] + fy, position[2] + fz)


def _key_name(event) -> str:
    import pygame

    name = pygame.key.name(event.key).upper()
    if event.mod & pygame.KMOD_CTRL:
        return f"CTRL+{name}"
    return name


def _draw_overlay(surface, state: AppState, fonts) -> None:
    import pygame

    label_font, status_font = fonts
    layout = layout_label(state.help_lines, HELP_POSITION)
    panel = pygame.Surface(layout.panel[2:] or (0, 0), pygame.SRCALPHA)
    panel.fill(layout.panel_color)
    surface.blit(panel, layout.panel[:2])
    for text, x, y in layout.lines:
        surface.blit(label_font.render(text, True, layout.text_color[:3]), (x, y))

    status_panel = pygame.Surface(STATUS_RECT[2:], pygame.SRCALPHA)
    status_panel.fill(_SKYBLUE_FADED)
    surface.blit(status_panel, STATUS_RECT[:2])
    surface.blit(status_font.render(state.status, True, MAROON[:3]), STATUS_TEXT_POSITION)


def _run(state: AppState) -> None:
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()
        fonts = (pygame.font.Font(None, 30), pygame.font.Font(None, STATUS_FONT_SIZE))
        running = True
        while running:
            dt = clock.tick(TARGET_FPS) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                        continue
                    output = state.handle_key(_key_name(event))
                    if output is not None:
                        print(output, end="", flush=True)
            state._apply_cursor(CursorInput())

            free_look = not state.third_mode
            pygame.mouse.set_visible(not free_look)
            pygame.event.set_grab(free_look)
            mouse_rel = pygame.mouse.get_rel()
            if free_look:
                _fly(state.camera, pygame.key.get_pressed(), mouse_rel, dt)

            screen.fill(_RAYWHITE)
            width, height = screen.get_size()
            projector = _Projector(state.camera, width, height)
            cubes = sorted(
                visible_cubes(state.chunk, state.camera),
                key=lambda cube: -projector.depth(cube.position),
            )
            for cube in cubes:
                _draw_cube(screen, projector, cube.position, cube.color, cube.wire_color)
            _draw_cube(screen, projector, state.cursor, None, MAROON)
            _draw_overlay(screen, state, fonts)
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: Optional[Iterable[str]] = None) -> int:
    """Ask for a chunk size on standard input and open the editor window."""
    parser = argparse.ArgumentParser(prog="voxelchunk", description="Voxel chunk editor.")
    parser.add_argument(
        "--size",
        nargs=3,
        type=int,
        metavar=("X", "Y", "Z"),
        help="chunk size; read from standard input when omitted",
    )
    args = parser.parse_args(None if argv is None else list(argv))
    try:
        chunk = Chunk(args.size) if args.size else init_chunk()
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    _run(AppState(chunk))
    return 0


if __name__ == "__main__":
    sys.exit(main())