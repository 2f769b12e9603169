"""
HUD module -- Player car sprite, speed readout and speedometer.
"""
import math

from camera import CANVAS_HEIGHT, CANVAS_WIDTH

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)

# Colors
BODY_COLOR  = (255, 0, 0)
ROOF_COLOR  = (204, 0, 0)
GAUGE_BG    = (51, 51, 51)
GAUGE_LOW   = (0, 255, 0)
GAUGE_MID   = (255, 255, 0)
GAUGE_HIGH  = (255, 0, 0)

CAR_W, CAR_H = 80, 40
GAUGE_X, GAUGE_Y, GAUGE_R = 120, 80, 60
GAUGE_WIDTH = 10
MARGIN = 20


def gauge_color(ratio):
    if ratio > 0.8:
        return GAUGE_HIGH
    if ratio > 0.5:
        return GAUGE_MID
    return GAUGE_LOW


def draw_player_car(canvas, width=CANVAS_WIDTH, height=CANVAS_HEIGHT):
    """Static rear view of the car, centred above the bottom edge."""
    x = width / 2 - CAR_W / 2
    y = height - CAR_H - MARGIN

    canvas.fill_rect(x, y, CAR_W, CAR_H * 0.5, BODY_COLOR)
    canvas.fill_rect(x + CAR_W * 0.25, y - CAR_H * 0.2, CAR_W * 0.5, CAR_H * 0.2, ROOF_COLOR)
    # rear window
    canvas.fill_rect(x + CAR_W * 0.25, y, CAR_W * 0.5, CAR_H * 0.2, BLACK)
    # wheels
    canvas.fill_rect(x - 5, y + CAR_H * 0.3, 10, CAR_H * 0.2, BLACK)
    canvas.fill_rect(x + CAR_W - 5, y + CAR_H * 0.3, 10, CAR_H * 0.2, BLACK)
    # lights
    canvas.fill_rect(x + 5, y, 10, 5, WHITE)
    canvas.fill_rect(x + CAR_W - 15, y, 10, 5, WHITE)


def draw_speedometer(canvas, x, y, radius, ratio):
    """Half-circle gauge filling left to right over the top."""
    canvas.stroke_arc(x, y, radius, math.pi, 2 * math.pi, GAUGE_WIDTH, GAUGE_BG)
    canvas.stroke_arc(x, y, radius, math.pi, math.pi + ratio * math.pi,
                      GAUGE_WIDTH, gauge_color(ratio))


def draw_hud(canvas, car, width=CANVAS_WIDTH):
    canvas.fill_text(f"SPEED: {car.speed_kmh} km/h", MARGIN, 30, WHITE)
    draw_speedometer(canvas, GAUGE_X, GAUGE_Y, GAUGE_R, car.speed_ratio)

    # placeholder race standing, there is no race logic
    canvas.fill_text("1ST", width - MARGIN, 30, WHITE, align="right")
    canvas.fill_text("LAP 1/4", width - MARGIN, 60, WHITE, align="right")
