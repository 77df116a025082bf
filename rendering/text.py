"""Text rendering for HUD elements."""

from typing import Optional

import pygame
from OpenGL.GL import *

from config import cloud as config


class TextRenderer:
    """Renders text overlays using pygame fonts and OpenGL."""

    def __init__(self, font_name: Optional[str] = None, font_size: Optional[int] = None,
                 color: Optional[tuple] = None):
        self.font_name = config.WINDOW["hud_font"] if font_name is None else font_name
        self.font_size = config.WINDOW["hud_font_size"] if font_size is None else font_size
        if color is None:
            color = config.COLORS["text"]
        self.color = tuple(int(c * 255) for c in color)

        pygame.font.init()
        self.font = pygame.font.SysFont(self.font_name, self.font_size)

    def draw_text(self, text: str, x: int, y: int, screen_size: tuple):
        """
        Draw text at the given screen position.

        Args:
            text: The string to render
            x: X position from left edge
            y: Y position from top edge
            screen_size: (width, height) of the screen
        """
        text_surface = self.font.render(text, True, self.color)
        text_data = pygame.image.tobytes(text_surface, "RGBA", True)
        w, h = text_surface.get_size()

        # Pixel-aligned projection with the origin at the bottom-left corner
        glMatrixMode(GL_PROJECTION)
        glPushMatrix()
        glLoadIdentity()
        glOrtho(0, screen_size[0], 0, screen_size[1], -1, 1)
        glMatrixMode(GL_MODELVIEW)
        glPushMatrix()
        glLoadIdentity()

        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        glRasterPos2f(x, screen_size[1] - y - h)
        glDrawPixels(w, h, GL_RGBA, GL_UNSIGNED_BYTE, text_data)
        glDisable(GL_BLEND)

        glPopMatrix()
        glMatrixMode(GL_PROJECTION)
        glPopMatrix()
        glMatrixMode(GL_MODELVIEW)
