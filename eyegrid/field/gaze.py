"""Pointer-driven eye colour and pupil placement."""

import colorsys
import math
from typing import NamedTuple

from eyegrid.config import GazeConfig
from eyegrid.field.eye_pair import EyePair
from eyegrid.utils.math_helpers import map_range, distance


class HSBColor(NamedTuple):
    hue: float         # degrees, 0..360
    saturation: float  # percent, 0..100
    brightness: float  # percent, 0..100

    def to_rgb(self) -> tuple:
        """Convert to an 8-bit RGB tuple."""
        r, g, b = colorsys.hsv_to_rgb(
            (self.hue % 360.0) / 360.0,
            self.saturation / 100.0,
            self.brightness / 100.0,
        )
        return (round(r * 255), round(g * 255), round(b * 255))


class GazeModel:
    """Maps pointer distance to a pair colour and pupil offsets."""

    def __init__(self, config: GazeConfig):
        self._cfg = config

    def color_for(self, pair: EyePair, pointer: tuple) -> HSBColor:
        """One colour per pair, from the pointer's distance to the pair centre."""
        cfg = self._cfg
        d = distance(pointer, pair.center)
        return HSBColor(
            hue=map_range(d, cfg.hue_distance, cfg.hue_range, clamped=True),
            saturation=map_range(d, cfg.saturation_distance, cfg.saturation_range,
                                 clamped=True),
            brightness=map_range(d, cfg.brightness_distance, cfg.brightness_range,
                                 clamped=True),
        )

    def pupil_position(self, eye: tuple, eye_size: float, pointer: tuple) -> tuple:
        """Pupil centre, pushed from the eye centre toward the pointer."""
        angle = math.atan2(pointer[1] - eye[1], pointer[0] - eye[0])
        offset = eye_size * self._cfg.pupil_offset_ratio
        return (
            eye[0] + math.cos(angle) * offset,
            eye[1] + math.sin(angle) * offset,
        )
