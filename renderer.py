"""
Renderer module -- Per-frame road projection and scene composition.
===================================================================
Road pipeline (one frame):
  1. base = floor(position / SEGMENT_LENGTH)
  2. walk n = base .. base + DRAW_DISTANCE - 1, nearest first
  3. project both edges of segment n % N from the pursuit camera
  4. cull: both edges behind the camera, or far edge below the canvas
  5. clip: near edge never above the horizon
  6. emit grass, road, rumble strips, lane markers

Draw calls are emitted in ascending segment order and the scene relies on
that order for overpaint.  Keep it when touching this loop.
"""
import math
from typing import NamedTuple

from camera import (CAMERA_DEPTH, CAMERA_HEIGHT, CANVAS_HEIGHT, CANVAS_WIDTH,
                    ProjectedPoint, project)
from hud import draw_hud, draw_player_car
from skyline import draw_skyline
from track import ROAD_WIDTH, SEGMENT_LENGTH, Palette, segment_at, track_length

DRAW_DISTANCE = 300
NEAR_PLANE    = 1.0     # camera z used for a near edge at or behind the camera

RUMBLE_FRACTION = 1 / 5
LANE_OFFSET     = 0.25
LANE_WIDTH      = 0.05
LANE_PERIOD     = 8     # lane dash on for the first half of every period

# -- Sky palette -----------------------------------------------------------
SUNSET_TOP = (255, 136, 68)
SUNSET_BOT = (255, 204, 51)
HORIZON    = (51, 51, 51)


class VisibleSegment(NamedTuple):
    index: int              # index into the track
    n: int                  # unwrapped draw index
    near: ProjectedPoint
    far: ProjectedPoint
    clipped_y1: int
    color: Palette


# ==========================================================================
#  Visibility
# ==========================================================================
def project_segment(segment, camera_z, player_x,
                    width=CANVAS_WIDTH, height=CANVAS_HEIGHT):
    """Project both edges of *segment*; None when it is fully behind the camera.

    A near edge on or behind the camera is moved up to NEAR_PLANE in front
    of it.  The road is flat and straight, so that is where the segment
    crosses the near plane.
    """
    if segment.p1.z - camera_z <= 0 and segment.p2.z - camera_z <= 0:
        return None

    p1 = segment.p1
    if p1.z - camera_z <= 0:
        p1 = p1._replace(z=camera_z + NEAR_PLANE)
    camera_x = player_x * ROAD_WIDTH
    near = project(p1, camera_x, CAMERA_HEIGHT, camera_z, CAMERA_DEPTH, width, height)
    far = project(segment.p2, camera_x, CAMERA_HEIGHT, camera_z, CAMERA_DEPTH, width, height)
    return near, far


def visible_segments(track, position, player_x,
                     width=CANVAS_WIDTH, height=CANVAS_HEIGHT):
    """Yield the segments that survive culling, nearest first.

    All DRAW_DISTANCE segments are considered every frame; there is no
    early exit at the farthest visible one.
    """
    base = math.floor(position / SEGMENT_LENGTH)
    length = track_length(track)

    for n in range(base, base + DRAW_DISTANCE):
        segment = segment_at(track, n)
        # past the end of the ring: pull the camera back one lap
        camera_z = position - length * (n // len(track))

        projected = project_segment(segment, camera_z, player_x, width, height)
        if projected is None:
            continue
        near, far = projected
        if far.y >= height:
            continue

        yield VisibleSegment(
            index=segment.index,
            n=n,
            near=near,
            far=far,
            clipped_y1=max(near.y, height // 2),
            color=segment.color,
        )


# ==========================================================================
#  Road
# ==========================================================================
def _quad(canvas, x1, y1, w1, x2, y2, w2, color):
    """Trapezoid centred on x1 (near, at y1) and x2 (far, at y2)."""
    canvas.fill_polygon(
        [(x1 - w1, y1), (x1 + w1, y1), (x2 + w2, y2), (x2 - w2, y2)], color)


def draw_segment(canvas, seg, width=CANVAS_WIDTH):
    x1, w1, y1 = seg.near.x, seg.near.w, seg.clipped_y1
    x2, w2, y2 = seg.far.x, seg.far.w, seg.far.y
    color = seg.color

    # grass
    canvas.fill_polygon([(0, y1), (width, y1), (width, y2), (0, y2)], color.grass)

    # road
    _quad(canvas, x1, y1, w1, x2, y2, w2, color.road)

    # rumble strips
    r1, r2 = w1 * RUMBLE_FRACTION, w2 * RUMBLE_FRACTION
    _quad(canvas, x1 - w1 + r1 / 2, y1, r1 / 2, x2 - w2 + r2 / 2, y2, r2 / 2, color.rumble)
    _quad(canvas, x1 + w1 - r1 / 2, y1, r1 / 2, x2 + w2 - r2 / 2, y2, r2 / 2, color.rumble)

    # lane markers
    if color.lane and seg.index % LANE_PERIOD < LANE_PERIOD // 2:
        l1, l2 = w1 * LANE_WIDTH / 2, w2 * LANE_WIDTH / 2
        for side in (-1, 1):
            _quad(canvas,
                  x1 + side * w1 * LANE_OFFSET, y1, l1,
                  x2 + side * w2 * LANE_OFFSET, y2, l2,
                  color.lane)


def render_road(canvas, track, position, player_x):
    drawn = 0
    for seg in visible_segments(track, position, player_x, canvas.width, canvas.height):
        draw_segment(canvas, seg, canvas.width)
        drawn += 1
    return drawn


# ==========================================================================
#  Full frame
# ==========================================================================
def render_scene(canvas, track, skyline, car):
    """Draw one frame; returns the number of road segments drawn."""
    w, h = canvas.width, canvas.height
    horizon = h // 2

    canvas.clear()
    canvas.fill_gradient(0, 0, w, horizon, SUNSET_TOP, SUNSET_BOT)
    draw_skyline(canvas, skyline, horizon)
    canvas.fill_rect(0, horizon - 1, w, 2, HORIZON)

    drawn = render_road(canvas, track, car.position, car.player_x)

    draw_player_car(canvas, w, h)
    draw_hud(canvas, car, w)
    return drawn
