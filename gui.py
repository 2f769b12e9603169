"""
GUI module -- pygame window, frame clock and keyboard state.
============================================================
One fixed 640x480 window.  The scene is drawn straight onto the display
surface through a Canvas; the GUI only owns the window, the clock and the
event pump.

  Arrow keys -- throttle / brake / steer
  SPACE      -- Pause / Resume
  ESC        -- Quit
"""
import pygame

from camera import CANVAS_HEIGHT, CANVAS_WIDTH
from canvas import Canvas
from car import Controls
from renderer import render_scene

TITLE = "Endless Road"


class GUI:
    """Single-window pygame front end."""

    def __init__(self, fps=60, width=CANVAS_WIDTH, height=CANVAS_HEIGHT):
        pygame.init()
        pygame.display.set_caption(TITLE)
        self.screen = pygame.display.set_mode((width, height))
        self.clock = pygame.time.Clock()
        self.canvas = Canvas(self.screen)

        self.fps = fps
        self.paused = False
        self.frames = 0

    # -------------------------------------------------------------------
    #  Events
    # -------------------------------------------------------------------
    def handle_events(self):
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                return False
            if ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    return False
                if ev.key == pygame.K_SPACE:
                    self.paused = not self.paused
        return True

    def read_controls(self):
        return Controls.from_pressed(pygame.key.get_pressed())

    # -------------------------------------------------------------------
    #  Main draw
    # -------------------------------------------------------------------
    def draw(self, track, skyline, car):
        """Render one frame, present it and wait for the next tick.

        Returns the frame time in milliseconds.
        """
        render_scene(self.canvas, track, skyline, car)
        if self.paused:
            self.canvas.fill_text("PAUSED", self.canvas.width / 2,
                                  self.canvas.height / 2 - 40,
                                  (255, 255, 255), align="center")
        pygame.display.flip()
        self.frames += 1
        return self.clock.tick(self.fps)

    def quit(self):
        pygame.quit()
