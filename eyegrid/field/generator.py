"""Random placement of eye pairs across the canvas.

Candidates are drawn uniformly inside the margins and rejected when they sit
closer than the minimum separation to any pair already placed. Each pair gets
a bounded number of attempts; once they run out the last candidate is kept
even though it overlaps, so generation always terminates.
"""

import logging
import random

import numpy as np

from eyegrid.config import FieldConfig, BlinkConfig, validate_canvas
from eyegrid.field.eye_pair import EyePair

log = logging.getLogger("eye-grid")


class FieldGenerator:
    """Produces fresh, fully uneaten fields of eye pairs."""

    def __init__(self, config: FieldConfig, blink: BlinkConfig,
                 rng: random.Random | None = None):
        self._cfg = config
        self._blink_interval = blink.interval
        self._rng = rng or random.Random()
        self.fallbacks = 0  # pairs accepted with overlap in the last generation

    def generate(self, width: float, height: float, now: float) -> list[EyePair]:
        """Place exactly num_pairs eye pairs on a width x height canvas."""
        validate_canvas(width, height, self._cfg)

        cfg = self._cfg
        margin = cfg.margin
        x_range = (margin, width - margin - cfg.eye_spacing)
        y_range = (margin, height - margin)

        # Accepted centres, kept as an array for a vectorised distance test
        centres = np.empty((0, 2))
        pairs = []
        self.fallbacks = 0

        for i in range(cfg.num_pairs):
            candidate = None
            for _ in range(cfg.max_placement_attempts):
                candidate = (
                    self._rng.uniform(*x_range),
                    self._rng.uniform(*y_range),
                )
                if not self._overlaps(candidate, centres):
                    break
            else:
                self.fallbacks += 1
                log.warning(
                    f"Pair {i}: no free spot after {cfg.max_placement_attempts} "
                    f"attempts, accepting overlap"
                )

            centres = np.vstack([centres, candidate])
            pairs.append(self._make_pair(candidate, now))

        return pairs

    def _overlaps(self, candidate: tuple, centres: np.ndarray) -> bool:
        if len(centres) == 0:
            return False
        d = np.hypot(centres[:, 0] - candidate[0], centres[:, 1] - candidate[1])
        return bool(np.any(d < self._cfg.min_separation))

    def _make_pair(self, position: tuple, now: float) -> EyePair:
        cfg = self._cfg
        eye_size = self._rng.uniform(cfg.eye_size_min, cfg.eye_size_max)
        # Random phase offset so pairs don't blink in lockstep
        offset = self._rng.uniform(-self._blink_interval, self._blink_interval)
        return EyePair(
            x=position[0],
            y=position[1],
            eye_size=eye_size,
            pupil_size=eye_size * cfg.pupil_ratio,
            spacing=cfg.eye_spacing,
            blink_phase=0.0,
            last_blink_time=now + offset,
        )
