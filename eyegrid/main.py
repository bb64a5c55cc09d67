#!/usr/bin/env python3
"""Eye Grid - Main entry point and orchestrator."""

import argparse
import logging
import random
import signal
import sys
import time

from eyegrid.config import load_config, ConfigError
from eyegrid.simulation import Simulation
from eyegrid.rendering.scene import build_scene
from eyegrid.rendering.renderer import FrameRenderer
from eyegrid.display.window import EyeGridWindow, Quit, Resize, Reset

log = logging.getLogger("eye-grid")


class EyeGridApp:
    def __init__(self, config_path: str = "config.yaml", debug: bool = False,
                 seed: int | None = None):
        self.config = load_config(config_path)
        self._debug = debug
        self._rng = random.Random(seed)
        self._running = False

        # Debug state (only used if --debug)
        self._debug_state = None
        self._debug_server = None
        self._render_fps = 0.0

    def start(self):
        self._running = True

        # Set up logging
        logging.basicConfig(
            level=getattr(logging, self.config.log_level),
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )

        canvas = self.config.canvas
        window = EyeGridWindow(canvas.width, canvas.height, canvas.resizable)
        window.open()
        log.info(f"Window opened at {canvas.width}x{canvas.height}")

        sim = Simulation(self.config, now=time.monotonic(), rng=self._rng)
        renderer = FrameRenderer(canvas.width, canvas.height)

        # Start debug server if requested
        if self._debug:
            from eyegrid.debug.web_server import DebugState, start_debug_server
            self._debug_state = DebugState()
            self._debug_server = start_debug_server(
                self._debug_state, self.config.debug.web_port
            )
            log.info(f"Debug server at http://0.0.0.0:{self.config.debug.web_port}")

        # Main render loop
        target_fps = canvas.fps_target
        frame_time = 1.0 / target_fps
        frame_count = 0
        fps_timer = time.monotonic()

        log.info(f"Entering render loop at {target_fps} FPS target")

        try:
            while self._running:
                now = time.monotonic()

                for event in window.poll_events():
                    if isinstance(event, Quit):
                        self._running = False
                    elif isinstance(event, Resize):
                        self._handle_resize(sim, renderer, event, now)
                    elif isinstance(event, Reset):
                        sim.reset(now)

                if self._debug_state and self._debug_state.take_reset_request():
                    sim.reset(now)

                # Update, then render what the update produced
                sim.update(now, window.pointer())
                commands = build_scene(sim, self.config.agent.color)
                image = renderer.render(commands)
                window.present(image)

                # FPS counting
                frame_count += 1
                if now - fps_timer >= 1.0:
                    self._render_fps = frame_count / (now - fps_timer)
                    frame_count = 0
                    fps_timer = now
                    log.debug(f"Render FPS: {self._render_fps:.1f}")
                    if self._debug_state:
                        self._debug_state.update_stats(sim.snapshot(), self._render_fps)

                if self._debug_state:
                    self._debug_state.update_frame(image)

                # Frame rate limiting
                elapsed = time.monotonic() - now
                sleep_time = frame_time - elapsed
                if sleep_time > 0:
                    time.sleep(sleep_time)

        except KeyboardInterrupt:
            log.info("Interrupted")
        finally:
            self._running = False
            if self._debug_server:
                self._debug_server.shutdown()
            window.close()
            log.info("Done")

    def _handle_resize(self, sim, renderer, event, now):
        try:
            sim.resize(event.width, event.height, now)
        except ConfigError as e:
            # Keep the old field; the window is too small to hold any pair
            log.warning(f"Ignoring resize: {e}")
            return
        renderer.resize(event.width, event.height)

    def stop(self):
        self._running = False


def main():
    parser = argparse.ArgumentParser(description="Eye Grid")
    parser.add_argument("--config", default="config.yaml", help="Config file path")
    parser.add_argument("--debug", action="store_true", help="Enable debug web server")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args()

    try:
        app = EyeGridApp(config_path=args.config, debug=args.debug, seed=args.seed)
    except ConfigError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(2)

    signal.signal(signal.SIGTERM, lambda *_: app.stop())

    app.start()


if __name__ == "__main__":
    main()
