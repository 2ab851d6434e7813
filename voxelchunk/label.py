"""Layout of a multi-line text label drawn over a translucent panel."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

Color = Tuple[int, int, int, int]
Rect = Tuple[int, int, int, int]

CHAR_WIDTH = 25
LINE_HEIGHT = 35
LINE_SPACING = 32
PADDING = 5
FONT_SIZE = 30

PANEL_COLOR: Color = (102, 191, 255, 127)
TEXT_COLOR: Color = (230, 41, 55, 255)


@dataclass(frozen=True)
class LabelLayout:
    """Where the label's panel and each of its lines are drawn."""

    panel: Rect
    lines: Tuple[Tuple[str, int, int], ...]
    font_size: int = FONT_SIZE
    panel_color: Color = PANEL_COLOR
    text_color: Color = TEXT_COLOR


def layout_label(lines: Sequence[str], position: Iterable[float]) -> LabelLayout:
    """Size the panel from the longest line and place each line below the last."""
    coords = list(position)
    left, top = int(coords[0]), int(coords[1])
    max_width = max((len(line) for line in lines), default=0)
    panel = (left, top, max_width * CHAR_WIDTH, len(lines) * LINE_HEIGHT)
    placed = tuple(
        (line, left + PADDING, top + LINE_SPACING * row + PADDING)
        for row, line in enumerate(lines)
    )
    return LabelLayout(panel=panel, lines=placed)