#!/usr/bin/env python3
"""Renders simulation frames to PNG files for inspection without a window."""

import argparse
import os
import random
import sys
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from eyegrid.config import load_config
from eyegrid.simulation import Simulation
from eyegrid.rendering.scene import build_scene
from eyegrid.rendering.renderer import FrameRenderer


def main():
    parser = argparse.ArgumentParser(description="Render eye grid frames to PNG")
    parser.add_argument("--config", default="config.yaml", help="Config file path")
    parser.add_argument("--frames", type=int, default=300, help="Frames to simulate")
    parser.add_argument("--every", type=int, default=30, help="Save every Nth frame")
    parser.add_argument("--seed", type=int, default=1)
    args = parser.parse_args()

    config = load_config(args.config)
    fps = config.canvas.fps_target
    sim = Simulation(config, now=0.0, rng=random.Random(args.seed))
    renderer = FrameRenderer(config.canvas.width, config.canvas.height)

    out_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), "preview_output")
    os.makedirs(out_dir, exist_ok=True)

    # Pointer sweeps slowly across the canvas so the colours change
    for frame in range(args.frames):
        t = frame / fps
        pointer = (
            (frame * 3) % config.canvas.width,
            config.canvas.height / 2,
        )
        sim.update(t, pointer)
        if frame % args.every:
            continue
        img = renderer.render(build_scene(sim, config.agent.color))
        path = os.path.join(out_dir, f"frame_{frame:05d}.png")
        # Copy image since renderer reuses internal buffer
        img.copy().save(path)
        print(f"Saved {path} ({sim.eyes_remaining} eyes left)")

    print(f"\nAll previews saved to {out_dir}/")


if __name__ == "__main__":
    main()
