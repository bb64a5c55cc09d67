"""Turns simulation state into an ordered list of draw commands.

Back-to-front: for every uneaten eye an eyeball, a pupil and (while
blinking) an eyelid band, then the agent last. All colours are RGB tuples.
"""

import math
from dataclasses import dataclass

from eyegrid.field.eye_pair import Side
from eyegrid.simulation import Simulation

BLACK = (0, 0, 0)


@dataclass(frozen=True)
class Circle:
    cx: float
    cy: float
    diameter: float
    fill: tuple


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    fill: tuple


@dataclass(frozen=True)
class Arc:
    """Filled pie slice; angles in radians, clockwise in screen space."""
    cx: float
    cy: float
    diameter: float
    start: float
    end: float
    fill: tuple


def build_scene(sim: Simulation, agent_color: tuple = (255, 255, 0)) -> list:
    commands = []
    pointer = sim.pointer

    for pair in sim.field:
        color = sim.gaze.color_for(pair, pointer).to_rgb()
        size = pair.eye_size

        for side in (Side.LEFT, Side.RIGHT):
            if pair.is_eaten(side):
                continue
            ex, ey = pair.eye_position(side)
            px, py = sim.gaze.pupil_position((ex, ey), size, pointer)

            commands.append(Circle(ex, ey, size, color))
            commands.append(Circle(px, py, pair.pupil_size, BLACK))

            # Eyelid drops from the top of the eye
            lid = pair.blink_phase * size
            if lid > 0:
                commands.append(Rect(ex - size / 2, ey - size / 2, size, lid, BLACK))

    agent = sim.agent
    commands.append(Arc(
        agent.x, agent.y, agent.size,
        start=agent.facing + agent.mouth,
        end=agent.facing + 2 * math.pi - agent.mouth,
        fill=agent_color,
    ))
    return commands
