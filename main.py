"""
Endless Road -- Pseudo-3D driving demo
======================================
A flat, straight road of 500 segments, looped forever, seen from a pursuit
camera behind the car.  Sunset sky, city skyline, speed HUD.

Modes:
  python main.py                -- Drive at 60 fps
  python main.py --fps 30       -- Cap the frame rate
  python main.py --seed 7       -- Pick a different (but fixed) skyline

Controls:
  Up      -- Accelerate
  Down    -- Brake
  Left/Right -- Steer
  SPACE   -- Pause / Resume
  ESC     -- Quit
"""
import argparse

import numpy as np

from car import KMH_PER_UNIT, Car
from gui import GUI
from skyline import generate_city_buildings
from track import NUM_SEGMENTS, SEGMENT_LENGTH, reset_track, track_length

DEFAULT_FPS = 60


# =========================================================================
#  DEMO
# =========================================================================
class Demo:
    def __init__(self, fps=DEFAULT_FPS, seed=None):
        self.seed = seed
        self.gui = GUI(fps=fps)
        self.track = reset_track()
        self.skyline = generate_city_buildings(np.random.default_rng(seed))
        self.car = Car(track_length(self.track))
        self.running = True

    def run(self):
        print("=" * 60)
        print("  Endless Road -- pseudo-3D driving demo")
        print(f"  Track        : {NUM_SEGMENTS} segments x {SEGMENT_LENGTH} "
              f"= {track_length(self.track):,} units")
        print(f"  Frame cap    : {self.gui.fps} fps")
        print(f"  Skyline seed : {self.seed if self.seed is not None else 'random'}")
        print("=" * 60)
        print("  Arrows=Drive  SPACE=Pause  ESC=Quit")
        print("=" * 60)

        while self.running:
            self.running = self.gui.handle_events()
            if not self.running:
                break
            self.tick()

        print(
            f"\n  Frames:{self.gui.frames} | Ticks:{self.car.ticks} | "
            f"Dist:{self.car.dist:.0f} | Top:{round(self.car.top_speed * KMH_PER_UNIT)} km/h"
        )
        self.gui.quit()

    def tick(self):
        # one fixed step per frame; the frame time from draw() is not used
        if not self.gui.paused:
            self.car.update(self.gui.read_controls())
        self.gui.draw(self.track, self.skyline, self.car)


# =========================================================================
#  ENTRY POINT
# =========================================================================
def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Endless Road -- pseudo-3D driving demo"
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=DEFAULT_FPS,
        help="Frame rate cap (motion is one fixed step per frame).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the skyline generator.",
    )
    args = parser.parse_args(argv)
    if args.fps <= 0:
        parser.error("--fps must be positive")
    return args


def main(argv=None):
    args = parse_args(argv)
    Demo(fps=args.fps, seed=args.seed).run()


if __name__ == "__main__":
    main()
