import math
from PIL import Image, ImageDraw

from eyegrid.rendering.scene import Circle, Rect, Arc


class FrameRenderer:
    """Rasterises a scene to a PIL Image of the canvas size."""

    def __init__(self, width: int, height: int, background: tuple = (0, 0, 0)):
        self._background = background
        self.resize(width, height)

    @property
    def size(self) -> tuple:
        return self._img.size

    def resize(self, width: int, height: int):
        # Pre-allocate image and draw context (reused every frame)
        self._img = Image.new("RGB", (int(width), int(height)), self._background)
        self._draw = ImageDraw.Draw(self._img)

    def render(self, commands: list) -> Image.Image:
        """Render commands in order. Returns the internal image (do not modify)."""
        w, h = self._img.size
        self._draw.rectangle([0, 0, w - 1, h - 1], fill=self._background)

        for cmd in commands:
            if isinstance(cmd, Circle):
                self._circle(cmd.cx, cmd.cy, cmd.diameter / 2, cmd.fill)
            elif isinstance(cmd, Rect):
                self._draw.rectangle(
                    [cmd.x, cmd.y, cmd.x + cmd.width, cmd.y + cmd.height],
                    fill=cmd.fill,
                )
            elif isinstance(cmd, Arc):
                r = cmd.diameter / 2
                self._draw.pieslice(
                    [cmd.cx - r, cmd.cy - r, cmd.cx + r, cmd.cy + r],
                    start=math.degrees(cmd.start),
                    end=math.degrees(cmd.end),
                    fill=cmd.fill,
                )
            else:
                raise TypeError(f"unknown draw command: {cmd!r}")

        return self._img

    def _circle(self, cx: float, cy: float, r: float, fill: tuple):
        self._draw.ellipse(
            [cx - r, cy - r, cx + r, cy + r],
            fill=fill,
        )
