"""Main application class that ties everything together."""

import math
from typing import List

import pygame
from pygame.locals import *
from OpenGL.GL import *

from config import cloud as config
from .input_handler import InputHandler
from pointcloud import ControlSurface, PointCloudPipeline, ViewConfig, ViewConfigChannel
from rendering import PointRenderer, TextRenderer


def hud_lines(pipeline: PointCloudPipeline, controls: ControlSurface, fps: float,
              drawn_count: int, show_help: bool) -> List[str]:
    """HUD text, ASCII only so any system font can render it."""
    view = pipeline.view
    state = pipeline.state
    status = "PAUSED" if pipeline.paused else "RUNNING"
    lines = [
        f"Points: {drawn_count:,}/{pipeline.num_points:,}  |  FPS: {fps:.0f}  |  {status}",
        f"ax: {math.degrees(state.angle_x):.1f} deg  ay: {math.degrees(state.angle_y):.1f} deg"
        f"  |  z_start: {view.z_start:.2f}",
        f"Speed X: {view.rot_speed_x / math.pi:.2f}pi  Speed Y: {view.rot_speed_y / math.pi:.2f}pi rad/s"
        f"  |  Grid: {pipeline.grid_count}  Radius: {controls.circle_radius:.1f}",
    ]
    if show_help:
        lines.append(
            "Up/Down: z | PgUp/PgDn: speed X | Left/Right: speed Y | [ ]: radius"
            " | - =: grid | 0: defaults | SPACE: pause | R: reset | H: help"
        )
    return lines


class Application:
    """Main application managing the frame loop and rendering."""

    def __init__(self):
        pygame.init()
        self.width = config.WINDOW["width"]
        self.height = config.WINDOW["height"]
        pygame.display.set_mode(
            (self.width, self.height),
            DOUBLEBUF | OPENGL | RESIZABLE
        )
        pygame.display.set_caption(config.WINDOW["title"])
        pygame.key.set_repeat(300, 40)

        # Parameters flow one way: controls -> channel -> pipeline
        self.channel = ViewConfigChannel(ViewConfig())
        self.controls = ControlSurface(self.channel)
        self.input_handler = InputHandler(self.controls)

        # Rendering components
        self.point_renderer = PointRenderer()
        self.text_renderer = TextRenderer()
        self.background = config.COLORS["background"]

        # Point cloud
        print("[App] Initializing lattice pipeline...")
        self.pipeline = PointCloudPipeline(self.controls.grid_count, self.channel)

        # State
        self.clock = pygame.time.Clock()
        self.running = True
        self.fps = 0
        self.show_help = True

        self._setup_gl()
        print("[App] Ready!")

    def _setup_gl(self):
        """Initialize OpenGL settings."""
        # Depth only drives the perspective divide, never occlusion
        glDisable(GL_DEPTH_TEST)
        self._apply_viewport()

    def _apply_viewport(self):
        """Orthographic projection with the origin at the window center, y up."""
        glViewport(0, 0, self.width, self.height)
        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        glOrtho(
            -self.width / 2, self.width / 2,
            -self.height / 2, self.height / 2,
            -1, 1
        )
        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()

    def _handle_events(self):
        """Process all pending pygame events."""
        for event in pygame.event.get():
            if event.type == KEYDOWN and event.key == K_SPACE:
                self.pipeline.paused = not self.pipeline.paused
                print(f"[App] {'Paused' if self.pipeline.paused else 'Running'}")
            elif event.type == KEYDOWN and event.key == K_r:
                print("[App] Resetting rotation...")
                self.pipeline.state.reset()
            elif event.type == KEYDOWN and event.key == K_h:
                self.show_help = not self.show_help
            elif event.type == VIDEORESIZE:
                self.width, self.height = event.w, event.h
                self._apply_viewport()
            elif not self.input_handler.handle_event(event):
                self.running = False

    def _update(self, dt: float):
        """Advance the rotation state."""
        self.pipeline.set_grid_count(self.controls.grid_count)
        self.pipeline.update(dt)

    def _render(self):
        """Render the frame."""
        glClearColor(*self.background)
        glClear(GL_COLOR_BUFFER_BIT)

        self.pipeline.transform()
        screen = self.pipeline.map_to_screen(self.width, self.height)
        self.point_renderer.draw(
            screen, self.pipeline.colors, self.controls.circle_radius,
            mask=self.pipeline.finite_mask()
        )

        # Draw HUD
        screen_size = (self.width, self.height)
        lines = hud_lines(
            self.pipeline, self.controls, self.fps,
            self.point_renderer.drawn_count, self.show_help
        )
        for i, line in enumerate(lines):
            self.text_renderer.draw_text(
                line, 10, 10 + i * config.WINDOW["hud_line_height"], screen_size
            )

        pygame.display.flip()

    def run(self):
        """Main application loop."""
        print("[App] Starting main loop...")

        while self.running:
            dt = self.clock.tick() / 1000.0  # Uncapped FPS
            self.fps = self.clock.get_fps()

            self._handle_events()
            self._update(dt)
            self._render()

        pygame.quit()
        print("[App] Shutdown complete")
