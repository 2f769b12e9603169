"""
Track module -- Looped straight road built from flat segments.
==============================================================
The road is a fixed ring of NUM_SEGMENTS slices, each SEGMENT_LENGTH deep.
Segment n spans world z in [n * SEGMENT_LENGTH, (n + 1) * SEGMENT_LENGTH).
Every RUMBLE_LENGTH segments the palette flips between LIGHT and DARK,
which is what makes the stripes visibly scroll past the camera.

The track is flat (y = 0) and straight (x = 0).  Rendering indexes it
modulo its length, so the camera can drive forever on the same slices.
"""
from typing import NamedTuple, Optional, Tuple

ROAD_WIDTH     = 2000   # half-width basis in world units
SEGMENT_LENGTH = 200
RUMBLE_LENGTH  = 3      # segments per stripe
NUM_SEGMENTS   = 500
LANES          = 3

RGB = Tuple[int, int, int]


class Palette(NamedTuple):
    road: RGB
    grass: RGB
    rumble: RGB
    lane: Optional[RGB] = None


# -- Palette ---------------------------------------------------------------
LIGHT = Palette(road=(143, 143, 143), grass=(16, 170, 16),
                rumble=(187, 187, 187), lane=(255, 255, 255))
DARK  = Palette(road=(105, 105, 105), grass=(0, 154, 0),
                rumble=(255, 69, 0), lane=(204, 204, 204))


class WorldPoint(NamedTuple):
    z: float
    y: float = 0.0
    x: float = 0.0


class Segment(NamedTuple):
    """One slice of road: near edge p1, far edge p2."""
    index: int
    p1: WorldPoint
    p2: WorldPoint
    color: Palette


# ==========================================================================
#  Construction
# ==========================================================================
def palette_for(index):
    return DARK if (index // RUMBLE_LENGTH) % 2 else LIGHT


def make_segment(index):
    return Segment(
        index=index,
        p1=WorldPoint(z=index * SEGMENT_LENGTH),
        p2=WorldPoint(z=(index + 1) * SEGMENT_LENGTH),
        color=palette_for(index),
    )


def reset_track(num_segments=NUM_SEGMENTS):
    """Build the whole ring of segments.

    Returns a new tuple every call; callers rebind their track rather than
    patching the old one.
    """
    return tuple(make_segment(n) for n in range(num_segments))


# ==========================================================================
#  Lookup
# ==========================================================================
def segment_at(track, n):
    """Segment for draw index *n*, wrapping around the ring."""
    return track[n % len(track)]


def track_length(track):
    return len(track) * SEGMENT_LENGTH
