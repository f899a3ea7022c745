"""Stone colors and the immutable Stone value."""

from dataclasses import dataclass
from enum import IntEnum

try:
    from errors import InvalidColor, InvalidConfig
except ImportError:
    from Align_Omok_AI.errors import InvalidColor, InvalidConfig


class Color(IntEnum):
    # Same -1/1 encoding the game loop and logs use
    DARK = -1
    LIGHT = 1

    @property
    def opponent(self):
        return Color.LIGHT if self is Color.DARK else Color.DARK

    @property
    def label(self):
        return "Dark" if self is Color.DARK else "Light"


def to_color(value):
    """Coerce -1/1 or a Color into a Color; raise InvalidColor otherwise."""
    if isinstance(value, bool):
        raise InvalidColor(f"color must be -1 (dark) or 1 (light), got {value!r}")
    try:
        return Color(value)
    except ValueError as exc:
        raise InvalidColor(f"color must be -1 (dark) or 1 (light), got {value!r}") from exc


@dataclass(frozen=True)
class Stone:
    color: Color
    row: int
    col: int

    def __post_init__(self):
        object.__setattr__(self, "color", to_color(self.color))
        if self.row < 0 or self.col < 0:
            raise InvalidConfig(f"stone position must be non-negative, got ({self.row}, {self.col})")

    def moved_by(self, offset):
        """Return a copy shifted by `offset` on both axes."""
        return Stone(self.color, self.row + offset, self.col + offset)
