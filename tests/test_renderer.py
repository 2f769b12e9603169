from __future__ import annotations

import numpy as np
import pytest

from camera import CANVAS_HEIGHT, CANVAS_WIDTH
from car import Car
from renderer import (
    DRAW_DISTANCE,
    LANE_PERIOD,
    draw_segment,
    project_segment,
    render_road,
    render_scene,
    visible_segments,
)
from skyline import generate_city_buildings
from track import SEGMENT_LENGTH, track_length


def test_segment_zero_near_edge_is_centred_at_start(track) -> None:
    near, far = project_segment(track[0], camera_z=0.0, player_x=0.0)
    assert near.x == CANVAS_WIDTH // 2
    assert far.x == CANVAS_WIDTH // 2


def test_whole_road_is_centred_when_player_is_centred(track) -> None:
    segs = list(visible_segments(track, 0.0, 0.0))
    assert segs
    for seg in segs:
        assert seg.near.x == seg.far.x == CANVAS_WIDTH // 2


def test_segment_fully_behind_camera_is_not_projected(track) -> None:
    assert project_segment(track[3], camera_z=4 * SEGMENT_LENGTH, player_x=0.0) is None
    assert project_segment(track[3], camera_z=5 * SEGMENT_LENGTH, player_x=0.0) is None


def test_near_edge_on_camera_is_moved_in_front(track) -> None:
    near, far = project_segment(track[10], camera_z=10 * SEGMENT_LENGTH, player_x=0.0)
    assert 0 < near.camera_z < far.camera_z


@pytest.mark.parametrize("position", [0.0, 1234.5, 50_000.0, 99_950.0])
def test_visible_segments_are_in_front_of_camera(track, position: float) -> None:
    for seg in visible_segments(track, position, 0.3):
        assert seg.far.camera_z > 0
        assert seg.near.camera_z > 0


@pytest.mark.parametrize("position", [0.0, 777.0, 60_000.0])
def test_visible_segments_are_clipped_to_canvas(track, position: float) -> None:
    for seg in visible_segments(track, position, -0.5):
        assert seg.far.y < CANVAS_HEIGHT
        assert seg.clipped_y1 >= CANVAS_HEIGHT // 2
        assert seg.clipped_y1 >= seg.far.y


def test_segments_come_nearest_first_within_draw_distance(track) -> None:
    position = 12_345.0
    base = int(position // SEGMENT_LENGTH)
    ns = [seg.n for seg in visible_segments(track, position, 0.0)]
    assert ns == sorted(ns)
    assert len(set(ns)) == len(ns)
    assert ns[0] >= base
    assert ns[-1] < base + DRAW_DISTANCE


def test_far_edge_half_pixel_rounds_up_at_start(track) -> None:
    segs = {seg.index: seg for seg in visible_segments(track, 0.0, 0.0)}
    assert segs[95].far.y == 251
    assert segs[255].far.w == 11


def test_segments_below_the_canvas_are_culled(track) -> None:
    # at the start only segments whose far edge projects above y=480 survive
    first = next(visible_segments(track, 0.0, 0.0))
    assert first.index == 4


def test_road_stays_continuous_across_the_loop(track) -> None:
    length = track_length(track)
    start = list(visible_segments(track, 1000.0, 0.0))
    end = list(visible_segments(track, length - 1000.0, 0.0))

    assert len(end) == len(start)
    assert any(seg.n >= len(track) for seg in end)
    assert [s.far.y for s in end] == [s.far.y for s in start]


def test_draw_segment_emits_lane_markers_on_dash_segments(canvas, track) -> None:
    segs = {seg.index % LANE_PERIOD: seg for seg in visible_segments(track, 0.0, 0.0)}

    draw_segment(canvas, segs[1])
    assert len(canvas.polygons()) == 6   # grass, road, 2 rumble, 2 lane

    canvas.calls.clear()
    draw_segment(canvas, segs[5])
    assert len(canvas.polygons()) == 4


def test_draw_segment_polygon_order_and_colours(canvas, track) -> None:
    seg = next(s for s in visible_segments(track, 0.0, 0.0) if s.index % LANE_PERIOD == 4)
    draw_segment(canvas, seg)
    colours = [color for _, color in canvas.polygons()]
    assert colours == [seg.color.grass, seg.color.road, seg.color.rumble, seg.color.rumble]


def test_grass_spans_canvas_and_rumble_sits_on_road_edge(canvas, track) -> None:
    seg = next(visible_segments(track, 0.0, 0.0))
    draw_segment(canvas, seg)
    grass, road, left_rumble, right_rumble = [pts for pts, _ in canvas.polygons()[:4]]

    assert grass[0] == (0, seg.clipped_y1)
    assert grass[1] == (CANVAS_WIDTH, seg.clipped_y1)
    assert road[0] == (seg.near.x - seg.near.w, seg.clipped_y1)
    assert left_rumble[0][0] == pytest.approx(road[0][0])
    assert left_rumble[1][0] == pytest.approx(road[0][0] + seg.near.w / 5)
    assert right_rumble[1][0] == pytest.approx(road[1][0])


def test_render_road_draws_every_visible_segment(canvas, track) -> None:
    drawn = render_road(canvas, track, 5000.0, 0.1)
    assert drawn == len(list(visible_segments(track, 5000.0, 0.1)))
    assert len(canvas.polygons()) >= 4 * drawn


def test_render_scene_frame_layers(canvas, track) -> None:
    car = Car(track_length(track))
    car.speed = 150
    skyline = generate_city_buildings(np.random.default_rng(3))

    drawn = render_scene(canvas, track, skyline, car)
    names = canvas.names()

    assert drawn > 0
    assert names[:2] == ["clear", "fill_gradient"]
    first_poly = names.index("fill_polygon")
    last_poly = len(names) - 1 - names[::-1].index("fill_polygon")
    # sky, skyline and horizon before the road; car and HUD after it
    assert set(names[2:first_poly]) == {"fill_rect"}
    assert names.index("stroke_arc") > last_poly
    texts = [args[0] for name, args in canvas.calls if name == "fill_text"]
    assert texts == ["SPEED: 540 km/h", "1ST", "LAP 1/4"]


def test_speedometer_colour_follows_speed(canvas, track) -> None:
    car = Car(track_length(track))
    car.speed = 190
    render_scene(canvas, track, (), car)
    arcs = [args for name, args in canvas.calls if name == "stroke_arc"]
    assert len(arcs) == 2
    assert arcs[1][-1] == (255, 0, 0)
