import random

from eyegrid.config import BlinkConfig
from eyegrid.field.eye_pair import EyePair


class BlinkScheduler:
    """Drives the per-pair blink phase.

    Every `interval` seconds a pair rolls `chance` to snap its eyelids shut
    (phase 1.0). The phase then decays by `decay_step` per frame until the
    eye is open again. Rolls only happen while the eye is fully open.
    """

    def __init__(self, config: BlinkConfig, rng: random.Random | None = None):
        self._cfg = config
        self._rng = rng or random.Random()

    def update(self, pair: EyePair, now: float):
        if now - pair.last_blink_time > self._cfg.interval:
            if pair.blink_phase == 0.0 and self._rng.random() < self._cfg.chance:
                pair.blink_phase = 1.0
            pair.last_blink_time = now

        if pair.blink_phase > 0.0:
            pair.blink_phase = max(0.0, pair.blink_phase - self._cfg.decay_step)
