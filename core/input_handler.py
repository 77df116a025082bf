"""Input handling for keyboard events."""

import pygame
from pygame.locals import *

from pointcloud import ControlSurface


class InputHandler:
    """Maps key presses to parameter adjustments on the control surface."""

    def __init__(self, controls: ControlSurface):
        self.controls = controls
        self._bindings = {
            K_UP: lambda: controls.adjust_z_start(1),
            K_DOWN: lambda: controls.adjust_z_start(-1),
            K_PAGEUP: lambda: controls.adjust_speed_x(1),
            K_PAGEDOWN: lambda: controls.adjust_speed_x(-1),
            K_RIGHT: lambda: controls.adjust_speed_y(1),
            K_LEFT: lambda: controls.adjust_speed_y(-1),
            K_RIGHTBRACKET: lambda: controls.adjust_radius(1),
            K_LEFTBRACKET: lambda: controls.adjust_radius(-1),
            K_EQUALS: lambda: controls.adjust_grid_count(1),
            K_MINUS: lambda: controls.adjust_grid_count(-1),
            K_0: controls.reset_view,
        }

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle a single pygame event.
        Returns False if the application should quit, True otherwise.
        """
        if event.type == QUIT:
            return False
        elif event.type == KEYDOWN:
            if event.key == K_ESCAPE:
                return False
            action = self._bindings.get(event.key)
            if action is not None:
                action()

        return True
