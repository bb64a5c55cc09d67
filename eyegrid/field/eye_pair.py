from dataclasses import dataclass, field
from enum import Enum


class Side(Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class EyeRef:
    """Addresses one consumable eye: pair index plus side."""

    index: int
    side: Side


@dataclass
class EyePair:
    """Left/right pair of eyes sharing size, colour and blink state."""

    # Left eye centre; the right eye sits `spacing` pixels to the right
    x: float
    y: float
    eye_size: float
    pupil_size: float
    spacing: float = 90.0

    # Eyelid closure: 0.0 = open, 1.0 = fully closed
    blink_phase: float = 0.0
    last_blink_time: float = 0.0

    eaten: dict = field(default_factory=lambda: {Side.LEFT: False, Side.RIGHT: False})

    def eye_position(self, side: Side) -> tuple:
        if side is Side.RIGHT:
            return (self.x + self.spacing, self.y)
        return (self.x, self.y)

    @property
    def center(self) -> tuple:
        """Nominal pair centre, halfway between the two eyes."""
        return (self.x + self.spacing / 2, self.y)

    def is_eaten(self, side: Side) -> bool:
        return self.eaten[side]

    def eat(self, side: Side):
        self.eaten[side] = True

    @property
    def is_exhausted(self) -> bool:
        return all(self.eaten.values())
