"""pygame window: shows rendered frames and turns input into simulation events."""

from dataclasses import dataclass

import pygame
from PIL import Image


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


@dataclass(frozen=True)
class Reset:
    pass


class EyeGridWindow:
    """Desktop host for the animation: input source and frame sink."""

    def __init__(self, width: int, height: int, resizable: bool = True,
                 title: str = "Eye Grid"):
        self._flags = pygame.RESIZABLE if resizable else 0
        self._title = title
        self._size = (width, height)
        self._surface = None

    def open(self):
        pygame.init()
        pygame.display.set_caption(self._title)
        self._surface = pygame.display.set_mode(self._size, self._flags)

    @property
    def size(self) -> tuple:
        return self._size

    def pointer(self) -> tuple:
        x, y = pygame.mouse.get_pos()
        return (float(x), float(y))

    def poll_events(self) -> list:
        """Drain the pygame queue into Quit / Resize / Reset events."""
        events = []
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                events.append(Quit())
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    events.append(Quit())
                elif ev.key == pygame.K_r:
                    events.append(Reset())
            elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
                events.append(Reset())
            elif ev.type == pygame.VIDEORESIZE:
                self._size = (ev.w, ev.h)
                self._surface = pygame.display.set_mode(self._size, self._flags)
                events.append(Resize(ev.w, ev.h))
        return events

    def present(self, image: Image.Image):
        """Blit a PIL frame to the window and flip."""
        frame = pygame.image.frombuffer(image.tobytes(), image.size, image.mode)
        self._surface.blit(frame, (0, 0))
        pygame.display.flip()

    def close(self):
        pygame.quit()
