import math
from dataclasses import dataclass
from enum import Enum, auto

import numpy as np

from eyegrid.config import AgentConfig
from eyegrid.field.eye_pair import EyePair, EyeRef, Side
from eyegrid.utils.math_helpers import map_range, distance


class Mode(Enum):
    IDLE = auto()
    PURSUING = auto()


@dataclass
class Agent:
    """The eye-eating Pac-Man. Lives for the whole process."""

    x: float = 0.0
    y: float = 0.0
    size: float = 60.0
    speed: float = 4.0
    facing: float = 0.0       # radians, 0 = facing right
    mouth: float = 0.1        # half-angle of the mouth opening, radians
    target: EyeRef | None = None

    @property
    def position(self) -> tuple:
        return (self.x, self.y)

    @property
    def mode(self) -> Mode:
        return Mode.IDLE if self.target is None else Mode.PURSUING


def nearest_uneaten(field: list[EyePair], origin: tuple) -> EyeRef | None:
    """Closest uneaten eye to origin, or None when every eye is eaten.

    Candidates are ordered pair-ascending, left before right; ties go to the
    first candidate in that order.
    """
    refs = []
    points = []
    for i, pair in enumerate(field):
        for side in (Side.LEFT, Side.RIGHT):
            if not pair.is_eaten(side):
                refs.append(EyeRef(i, side))
                points.append(pair.eye_position(side))

    if not refs:
        return None

    pts = np.asarray(points, dtype=float)
    d = np.hypot(pts[:, 0] - origin[0], pts[:, 1] - origin[1])
    # argmin returns the first occurrence of the minimum
    return refs[int(np.argmin(d))]


class AgentController:
    """Two-state pursuit machine: IDLE scans for a target, PURSUING chases it."""

    def __init__(self, config: AgentConfig):
        self._cfg = config
        self.agent = Agent(size=config.size, speed=config.speed, mouth=config.mouth_min)

    def place(self, x: float, y: float):
        self.agent.x = x
        self.agent.y = y

    def clear_target(self):
        self.agent.target = None

    def update(self, field: list[EyePair], frame: int) -> bool:
        """Advance one frame. Returns True when the field is exhausted and
        must be regenerated (no target is acquired in that case)."""
        agent = self.agent
        self._animate_mouth(frame)

        if agent.mode is Mode.IDLE:
            agent.target = nearest_uneaten(field, agent.position)
            if agent.target is None:
                return True

        self._pursue(field)
        return False

    def _animate_mouth(self, frame: int):
        cfg = self._cfg
        self.agent.mouth = map_range(
            math.sin(frame * cfg.mouth_rate), (-1.0, 1.0), (cfg.mouth_min, cfg.mouth_max)
        )

    def _pursue(self, field: list[EyePair]):
        agent = self.agent
        ref = agent.target
        pair = field[ref.index]
        tx, ty = pair.eye_position(ref.side)

        # Constant-velocity steering straight at the target
        angle = math.atan2(ty - agent.y, tx - agent.x)
        agent.facing = angle
        agent.x += math.cos(angle) * agent.speed
        agent.y += math.sin(angle) * agent.speed

        if distance(agent.position, (tx, ty)) < agent.size / 2:
            pair.eat(ref.side)
            agent.target = None
