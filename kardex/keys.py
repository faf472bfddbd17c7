"""Key events delivered by the host UI."""

import enum
from dataclasses import dataclass


class Direction(enum.Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Key:
    """A single key press.

    `code` is either one printable character or a name such as "enter",
    "backspace", "up". `alt` marks Alt-chords. Focus navigation arrives
    as its own key kind (`nav`), separate from the arrow keys a widget
    uses internally.
    """
    code: str = ""
    alt: bool = False
    nav: Direction | None = None

    @classmethod
    def char(cls, c: str) -> "Key":
        return cls(code=c)

    @classmethod
    def named(cls, name: str) -> "Key":
        return cls(code=name)

    @classmethod
    def alt_chord(cls, c: str) -> "Key":
        return cls(code=c, alt=True)

    @classmethod
    def navigate(cls, direction: Direction) -> "Key":
        return cls(nav=direction)

    @property
    def is_char(self) -> bool:
        return not self.alt and self.nav is None and len(self.code) == 1
