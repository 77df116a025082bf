"""Configuration for the rotating point-cloud lattice."""

import math

WINDOW = {
    "width": 960,
    "height": 720,
    "title": "Point Cloud Lattice",
    "hud_font": "monospace",
    "hud_font_size": 16,
    "hud_line_height": 22,
}

GRID = {
    "count": 10,               # Lattice points per axis (N, N³ total)
}

VIEW = {
    "z_start": 0.4,            # Distance from viewer to the near face of the grid
    "rot_speed_x": 0.25 * math.pi,   # rad/s
    "rot_speed_y": 0.25 * math.pi,   # rad/s
    "circle_radius": 5.0,      # Pixels
}

CONTROLS = {
    "z_start_step": 0.01,
    "z_start_min": 0.0,
    "z_start_max": 1.0,
    "speed_step": 0.05 * math.pi,
    "speed_min": -2.0 * math.pi,
    "speed_max": 2.0 * math.pi,
    "radius_step": 0.5,
    "min_radius": 1.0,
    "max_radius": 30.0,
    "min_grid_count": 1,
    "max_grid_count": 60,
}

COLORS = {
    "background": (0x18 / 255, 0x18 / 255, 0x18 / 255, 1.0),  # 0xFF181818
    "text": (0.9, 0.9, 0.9)
}
