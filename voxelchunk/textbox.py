"""Single-line text entry box state with click focus and backspace repeat."""

from __future__ import annotations

from typing import Iterable, Union

BACKSPACE_DELAY = 0.5
BACKSPACE_INTERVAL = 0.05
BLINK_FRAMES = 20
FONT_SIZE = 20


class TextBox:
    """Holds the text typed into a box and the state needed to edit it."""

    def __init__(self, max_chars: int) -> None:
        self.max_chars = max_chars
        self.active = False
        self._chars: list[str] = []
        self._frames = 0
        self._shown_frame = 0
        self._backspace_timer = 0.0
        self._backspace_held = False

    @property
    def text(self) -> str:
        return "".join(self._chars)

    def click(self, inside: bool) -> None:
        """Focus the box on a click inside it, unfocus on a click elsewhere."""
        self.active = bool(inside)

    def _delete_last(self) -> None:
        if self._chars:
            self._chars.pop()

    def update(
        self,
        chars: Iterable[Union[str, int]] = (),
        backspace_pressed: bool = False,
        backspace_down: bool = False,
        delta: float = 0.0,
    ) -> None:
        """Advance one frame with the characters typed and backspace state."""
        if self.active:
            for key in chars:
                code = key if isinstance(key, int) else ord(key)
                if 32 <= code <= 125 and len(self._chars) < self.max_chars:
                    self._chars.append(chr(code))

            if backspace_pressed:
                self._delete_last()
                self._backspace_held = True
                self._backspace_timer = 0.0
            elif backspace_down and self._backspace_held:
                self._backspace_timer += delta
                if self._backspace_timer >= BACKSPACE_DELAY:
                    after = self._backspace_timer - BACKSPACE_DELAY
                    if int(after / BACKSPACE_INTERVAL) != int((after - delta) / BACKSPACE_INTERVAL):
                        self._delete_last()
            else:
                self._backspace_held = False

        self._shown_frame = self._frames
        self._frames = self._frames + 1 if self.active else 0

    def cursor_visible(self) -> bool:
        """Whether the blinking underscore is drawn for the current frame."""
        return self.active and (self._shown_frame // BLINK_FRAMES) % 2 == 0