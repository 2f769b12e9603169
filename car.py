"""
Car module -- Arcade speed and steering integration.
====================================================
One tick = one call to Car.update(controls).

  throttle : +ACCELERATION up to MAX_SPEED
  brake    : -2 * DECELERATION, floored at 0
  coasting : -DECELERATION (passive friction), floored at 0
  steering : nudges target_player_x, player_x eases toward it

Steps are fixed per tick, not scaled by elapsed time.
"""
from typing import NamedTuple

import pygame

MAX_SPEED    = 200
ACCELERATION = 0.1
DECELERATION = 0.3
HANDLING     = 0.3
STEER_STEP   = 0.125   # fraction of HANDLING per tick
STEER_BLEND  = 0.025   # player_x -> target_player_x per tick
KMH_PER_UNIT = 3.6


def _clamp(v, lo, hi):
    return max(lo, min(hi, v))


class Controls(NamedTuple):
    accelerate: bool = False
    brake: bool = False
    left: bool = False
    right: bool = False

    @classmethod
    def from_pressed(cls, pressed):
        """Build from a pygame.key.get_pressed() snapshot."""
        return cls(
            accelerate=bool(pressed[pygame.K_UP]),
            brake=bool(pressed[pygame.K_DOWN]),
            left=bool(pressed[pygame.K_LEFT]),
            right=bool(pressed[pygame.K_RIGHT]),
        )


class Car:
    """Player car: speed along the road and lateral offset on it."""

    def __init__(self, track_length):
        self.track_length = track_length

        # state
        self.position = 0.0
        self.speed = 0.0
        self.player_x = 0.0          # -1 = left road edge, +1 = right edge
        self.target_player_x = 0.0

        # stats
        self.ticks = 0
        self.dist = 0.0
        self.top_speed = 0.0

    # -- update ------------------------------------------------------------
    def update(self, controls):
        self.ticks += 1

        # throttle
        if controls.accelerate:
            self.speed = min(self.speed + ACCELERATION, MAX_SPEED)
        elif controls.brake:
            self.speed = max(0.0, self.speed - DECELERATION * 2)
        else:
            self.speed = max(0.0, self.speed - DECELERATION)

        # steering (no effect while standing still)
        if self.speed > 0:
            if controls.left:
                self.target_player_x -= HANDLING * STEER_STEP
            if controls.right:
                self.target_player_x += HANDLING * STEER_STEP
            self.target_player_x = _clamp(self.target_player_x, -1.0, 1.0)
            self.player_x += (self.target_player_x - self.player_x) * STEER_BLEND

        # movement
        self.position += self.speed
        self.dist += self.speed
        self.top_speed = max(self.top_speed, self.speed)

        # loop, keeping the offset into the current segment
        if self.position >= self.track_length:
            self.position -= self.track_length

    # -- readouts ----------------------------------------------------------
    @property
    def speed_kmh(self):
        return round(self.speed * KMH_PER_UNIT)

    @property
    def speed_ratio(self):
        return self.speed / MAX_SPEED
