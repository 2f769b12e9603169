"""
Camera module -- Pursuit-camera perspective projection.
=======================================================
Maps one world point to screen space for a camera sitting at
(camera_x, camera_y, camera_z) and looking down +z.

  camera  = world - camera offset
  scale   = depth / camera.z                (perspective divide)
  screen  = centre + scale * camera * half-canvas   (y flipped)
  w       = scale * ROAD_WIDTH * half-canvas-width  (projected half-width)

Every depth cue in the scene comes from this one transform.
"""
import math
from typing import NamedTuple

from track import ROAD_WIDTH

CANVAS_WIDTH  = 640
CANVAS_HEIGHT = 480
CAMERA_HEIGHT = 1000
CAMERA_DEPTH  = 0.84


def round_half_up(v):
    """Nearest integer, halves rounded toward +inf."""
    return math.floor(v + 0.5)


class ProjectedPoint(NamedTuple):
    camera_x: float
    camera_y: float
    camera_z: float
    scale: float
    x: int
    y: int
    w: int


def project(point, camera_x, camera_y, camera_z, camera_depth,
            width=CANVAS_WIDTH, height=CANVAS_HEIGHT, road_width=ROAD_WIDTH):
    """Project a WorldPoint; returns a new ProjectedPoint.

    The point must be in front of the camera.  Callers cull or clip
    anything at camera z <= 0 before getting here.
    """
    cx = point.x - camera_x
    cy = point.y - camera_y
    cz = point.z - camera_z
    assert cz > 0, f"projecting point at camera z={cz}"

    scale = camera_depth / cz
    return ProjectedPoint(
        camera_x=cx,
        camera_y=cy,
        camera_z=cz,
        scale=scale,
        x=round_half_up(width / 2 + scale * cx * width / 2),
        y=round_half_up(height / 2 - scale * cy * height / 2),
        w=round_half_up(scale * road_width * width / 2),
    )
