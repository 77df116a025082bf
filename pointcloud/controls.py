"""Parameter controls that publish new view snapshots."""

from dataclasses import replace
from typing import Optional

from config import cloud as config
from .pipeline import ViewConfig, ViewConfigChannel


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class ControlSurface:
    """
    Adjusts the tunable parameters one step at a time.

    View changes are published as new ViewConfig snapshots on the channel;
    grid_count and circle_radius are plain settings the application reads
    each frame. Adjustments are bounded to the slider ranges in config.
    """

    def __init__(self, channel: ViewConfigChannel, grid_count: Optional[int] = None,
                 circle_radius: Optional[float] = None):
        self.channel = channel
        self.grid_count = config.GRID["count"] if grid_count is None else grid_count
        self.circle_radius = (
            config.VIEW["circle_radius"] if circle_radius is None else circle_radius
        )

    @property
    def view(self) -> ViewConfig:
        return self.channel.latest

    def _publish(self, **changes):
        self.channel.publish(replace(self.channel.latest, **changes))

    def adjust_z_start(self, direction: int):
        z = self.view.z_start + direction * config.CONTROLS["z_start_step"]
        self._publish(z_start=clamp(
            z, config.CONTROLS["z_start_min"], config.CONTROLS["z_start_max"]
        ))

    def adjust_speed_x(self, direction: int):
        speed = self.view.rot_speed_x + direction * config.CONTROLS["speed_step"]
        self._publish(rot_speed_x=clamp(
            speed, config.CONTROLS["speed_min"], config.CONTROLS["speed_max"]
        ))

    def adjust_speed_y(self, direction: int):
        speed = self.view.rot_speed_y + direction * config.CONTROLS["speed_step"]
        self._publish(rot_speed_y=clamp(
            speed, config.CONTROLS["speed_min"], config.CONTROLS["speed_max"]
        ))

    def adjust_radius(self, direction: int):
        self.circle_radius = clamp(
            self.circle_radius + direction * config.CONTROLS["radius_step"],
            config.CONTROLS["min_radius"],
            config.CONTROLS["max_radius"]
        )

    def adjust_grid_count(self, direction: int):
        self.grid_count = int(clamp(
            self.grid_count + direction,
            config.CONTROLS["min_grid_count"],
            config.CONTROLS["max_grid_count"]
        ))

    def reset_view(self):
        """Publish the configured defaults."""
        self.channel.publish(ViewConfig())
        self.circle_radius = config.VIEW["circle_radius"]
