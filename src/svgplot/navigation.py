"""Keyboard, drag and wheel navigation for 3D plots.

A :class:`ViewState` is an immutable set of camera parameters plus the
rates that input events apply to them.  Every handler returns a new
state; the caller builds a camera from it and redraws::

    state = state.on_key('up')
    plot.update_camera(state.camera())
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from svgplot.camera import Camera, axes_from_angles, forward_vector, make_camera
from svgplot.config import ViewConfig
from svgplot.vector import Vector3, isgoodnum

log = logging.getLogger(__name__)

KEYS = ('up', 'down', 'left', 'right', 'home')


@dataclass(frozen=True)
class ViewState:
    """Camera parameters driven by user input."""

    eye: Vector3
    xy_angle: float
    xz_angle: float
    distance: float
    pan_step: float = 1.0
    rotate_rate: float = 0.01
    elevation_rate: float = 0.05
    zoom_factor: float = 1.1
    min_distance: float = 1.0
    max_distance: float = 200.0
    home: ViewState | None = None

    @classmethod
    def from_config(cls, cfg: ViewConfig) -> ViewState:
        state = cls(eye=cfg.eye, xy_angle=cfg.xy_angle, xz_angle=cfg.xz_angle,
                    distance=cfg.distance, pan_step=cfg.pan_step,
                    rotate_rate=cfg.rotate_rate, elevation_rate=cfg.elevation_rate,
                    zoom_factor=cfg.zoom_factor, min_distance=cfg.min_distance,
                    max_distance=cfg.max_distance)
        return replace(state, home=state)

    def camera(self) -> Camera:
        x_axis, y_axis = axes_from_angles(self.xy_angle, self.xz_angle)
        return make_camera(self.eye, self.distance, x_axis, y_axis)

    def on_key(self, key: str) -> ViewState:
        """Pan the eye: ``up``/``down`` move along the heading,
        ``left``/``right`` strafe.  ``home`` returns to the starting
        view.  Unhandled keys return the state unchanged."""
        if not isinstance(key, str):
            raise ValueError('bad key: {!r}'.format(key))
        key = key.lower()
        if key in ('up', 'down'):
            step = forward_vector(self.xy_angle).scale(self.pan_step)
            eye = self.eye.add(step) if key == 'up' else self.eye.subtract(step)
        elif key in ('left', 'right'):
            x_axis, _ = axes_from_angles(self.xy_angle, self.xz_angle)
            step = x_axis.scale(self.pan_step)
            eye = self.eye.add(step) if key == 'right' else self.eye.subtract(step)
        elif key == 'home':
            if self.home is None:
                return self
            return replace(self.home, home=self.home)
        else:
            return self
        log.debug('key %s moves eye to %s', key, eye)
        return replace(self, eye=eye)

    def on_drag(self, dx: float, dy: float) -> ViewState:
        """Horizontal drag turns the heading, vertical drag raises or
        lowers the eye."""
        if not (isgoodnum(dx) and isgoodnum(dy)):
            raise ValueError('bad drag delta: {}, {}'.format(dx, dy))
        heading = self.xy_angle + dx * self.rotate_rate
        eye = Vector3(self.eye.x, self.eye.y, self.eye.z + dy * self.elevation_rate)
        return replace(self, xy_angle=heading, eye=eye)

    def on_wheel(self, delta: float) -> ViewState:
        """Zoom by ``zoom_factor`` per wheel notch, within the distance
        limits."""
        if not isgoodnum(delta):
            raise ValueError('bad wheel delta: {}'.format(delta))
        if delta == 0:
            return self
        dist = self.distance * self.zoom_factor if delta > 0 else self.distance / self.zoom_factor
        dist = min(max(dist, self.min_distance), self.max_distance)
        return replace(self, distance=dist)


__all__ = [
    'KEYS',
    'ViewState',
]
