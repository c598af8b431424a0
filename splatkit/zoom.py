"""Wheel zooming about the pointer for a scrollable picture view.

The view is modelled by its viewport size, a scale and the scene point at
the viewport centre.  Zooming keeps the scene point last under the pointer
under the pointer.  The view is not bounded by any scene rectangle.
"""

from __future__ import annotations

import enum
import math
from typing import Callable, Optional

__all__ = ["Modifiers", "ZoomController"]

Point = tuple[float, float]

DEFAULT_ZOOM_FACTOR_BASE = 1.0015
MOVE_THRESHOLD = 5


class Modifiers(enum.Flag):
    """Keyboard modifiers held during a wheel event."""

    NONE = 0
    SHIFT = enum.auto()
    CONTROL = enum.auto()
    ALT = enum.auto()
    META = enum.auto()


def _round(value: float) -> int:
    """Round half away from zero."""
    return int(math.floor(value + 0.5)) if value >= 0 else -int(math.floor(-value + 0.5))


class ZoomController:
    """Zooms a view around the pointer in response to wheel events."""

    def __init__(
        self,
        viewport_width: float,
        viewport_height: float,
        scale: float = 1.0,
        center: Point = (0.0, 0.0),
    ) -> None:
        if scale <= 0:
            raise ValueError("scale must be positive")
        self.viewport_width = viewport_width
        self.viewport_height = viewport_height
        self.scale = scale
        self.center: Point = (float(center[0]), float(center[1]))
        self.modifiers = Modifiers.CONTROL
        self.zoom_factor_base = DEFAULT_ZOOM_FACTOR_BASE
        self.target_viewport_pos: Point = (0.0, 0.0)
        self.target_scene_pos: Point = (0.0, 0.0)
        self.on_zoomed: list[Callable[[], None]] = []

    @property
    def _viewport_center(self) -> Point:
        return (self.viewport_width / 2.0, self.viewport_height / 2.0)

    def map_to_scene(self, viewport_pos: Point) -> Point:
        """Return the scene point shown at ``viewport_pos``."""
        cx, cy = self._viewport_center
        return (
            self.center[0] + (viewport_pos[0] - cx) / self.scale,
            self.center[1] + (viewport_pos[1] - cy) / self.scale,
        )

    def map_from_scene(self, scene_pos: Point) -> Point:
        """Return the viewport position at which ``scene_pos`` is shown."""
        cx, cy = self._viewport_center
        return (
            (scene_pos[0] - self.center[0]) * self.scale + cx,
            (scene_pos[1] - self.center[1]) * self.scale + cy,
        )

    def set_modifiers(self, modifiers: Modifiers) -> None:
        """Set the modifiers that must be held for the wheel to zoom."""
        self.modifiers = modifiers

    def set_zoom_factor_base(self, value: float) -> None:
        """Set the base raised to the wheel angle to get the zoom factor."""
        self.zoom_factor_base = value

    def mouse_move(self, viewport_pos: Point, scene_pos: Optional[Point] = None) -> None:
        """Track the pointer; small moves of up to five pixels are ignored."""
        dx = self.target_viewport_pos[0] - viewport_pos[0]
        dy = self.target_viewport_pos[1] - viewport_pos[1]
        if abs(dx) > MOVE_THRESHOLD or abs(dy) > MOVE_THRESHOLD:
            self.target_viewport_pos = (float(viewport_pos[0]), float(viewport_pos[1]))
            if scene_pos is None:
                scene_pos = self.map_to_scene(viewport_pos)
            self.target_scene_pos = (float(scene_pos[0]), float(scene_pos[1]))

    def wheel(self, angle_delta: float, modifiers: Modifiers = Modifiers.NONE) -> bool:
        """Handle a wheel turn; return True if it zoomed the view."""
        if modifiers != self.modifiers or angle_delta == 0:
            return False
        self.gentle_zoom(self.zoom_factor_base ** angle_delta)
        return True

    def gentle_zoom(self, factor: float) -> None:
        """Scale by ``factor`` keeping the target scene point under the pointer."""
        if factor <= 0:
            raise ValueError("zoom factor must be positive")
        self.scale *= factor
        self.center = self.target_scene_pos
        cx, cy = self._viewport_center
        delta = (self.target_viewport_pos[0] - cx, self.target_viewport_pos[1] - cy)
        mapped = self.map_from_scene(self.target_scene_pos)
        wanted = (_round(mapped[0] - delta[0]), _round(mapped[1] - delta[1]))
        self.center = self.map_to_scene(wanted)
        for callback in list(self.on_zoomed):
            callback()