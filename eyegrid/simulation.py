"""Per-frame simulation update for the eye field and the Pac-Man agent.

One update() per display frame: blink every pair, step the agent, and
regenerate the whole field once every eye has been eaten. Resize and reset
are the only other entry points and both regenerate synchronously.
"""

import logging
import random
from dataclasses import dataclass

from eyegrid.config import Config, validate_canvas
from eyegrid.field.eye_pair import EyePair, Side
from eyegrid.field.generator import FieldGenerator
from eyegrid.field.blink import BlinkScheduler
from eyegrid.field.gaze import GazeModel
from eyegrid.agent.pacman import AgentController

log = logging.getLogger("eye-grid")


@dataclass
class Snapshot:
    """Read-only summary of the simulation for stats and debugging."""

    frame: int
    width: float
    height: float
    pairs: int
    eyes_remaining: int
    regenerations: int
    agent_position: tuple
    agent_mode: str


class Simulation:
    """Owns the eye field and the agent; the renderer reads it after update()."""

    def __init__(self, config: Config, now: float = 0.0,
                 rng: random.Random | None = None):
        self._cfg = config
        rng = rng or random.Random()
        self.width = config.canvas.width
        self.height = config.canvas.height

        self.generator = FieldGenerator(config.eyes, config.blink, rng)
        self.blinker = BlinkScheduler(config.blink, rng)
        self.gaze = GazeModel(config.gaze)
        self.controller = AgentController(config.agent)
        self.controller.place(self.width / 2, self.height / 2)

        self.pointer = (0.0, 0.0)
        self.frame = 0
        self.regenerations = 0
        self.field: list[EyePair] = []
        self.regenerate(now, reason="startup")

    @property
    def agent(self):
        return self.controller.agent

    @property
    def eyes_remaining(self) -> int:
        return sum(
            not pair.is_eaten(side)
            for pair in self.field
            for side in (Side.LEFT, Side.RIGHT)
        )

    def regenerate(self, now: float, reason: str = "reset"):
        """Replace the whole field and drop the agent's target."""
        self.field = self.generator.generate(self.width, self.height, now)
        self.controller.clear_target()
        self.regenerations += 1
        log.info(f"Field regenerated ({reason}): {len(self.field)} pairs")

    def update(self, now: float, pointer: tuple | None = None):
        """Advance one frame at time `now` (seconds)."""
        if pointer is not None:
            self.pointer = pointer
        self.frame += 1

        for pair in self.field:
            self.blinker.update(pair, now)

        if self.controller.update(self.field, self.frame):
            self.regenerate(now, reason="all eyes eaten")

    def resize(self, width: float, height: float, now: float):
        """Adopt a new canvas size and regenerate. The agent stays put."""
        validate_canvas(width, height, self._cfg.eyes)
        self.width = width
        self.height = height
        log.info(f"Canvas resized to {width}x{height}")
        self.regenerate(now, reason="resize")

    def reset(self, now: float):
        self.regenerate(now, reason="reset")

    def snapshot(self) -> Snapshot:
        agent = self.agent
        return Snapshot(
            frame=self.frame,
            width=self.width,
            height=self.height,
            pairs=len(self.field),
            eyes_remaining=self.eyes_remaining,
            regenerations=self.regenerations,
            agent_position=agent.position,
            agent_mode=agent.mode.name,
        )
