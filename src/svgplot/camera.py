## planar perspective camera for svgplot 3D views
## Copyright (c) svgplot contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Camera model and point projection.

A camera is described by an eye point, a zoom ``distance`` and two raw
basis vectors spanning the projection plane.  From these the camera
derives

* ``x_axis`` and ``y_axis``, the normalized basis vectors, and
* ``normal``, the cross product of the *raw* basis vectors (not
  renormalized), which defines the visible half-space.

A world point ``p`` with ``d = p - eye`` projects to::

    lam = distance / d.normal
    (lam * d.x_axis, lam * d.y_axis)

Cameras are immutable.  Changing any parameter means building a new
camera with :meth:`Camera.update_parameters`, so the derived fields can
never go stale relative to each other.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from math import cos, sin
from typing import NamedTuple, Optional, Tuple

from svgplot.errors import (
    DegenerateCameraError,
    DegenerateVectorError,
    UnprojectablePointError,
)
from svgplot.vector import Vector3, VectorLike, epsilon, isgoodnum, vec3

log = logging.getLogger(__name__)


class ProjectedPoint(NamedTuple):
    """A point on the picture plane, in plot-space coordinates."""

    x: float
    y: float


@dataclass(frozen=True)
class Camera:
    """Immutable planar perspective camera.

    Use :func:`make_camera` to build one.  The constructor only rejects a
    bad distance or a zero plane normal; it expects the other derived
    fields to be consistent already.
    """

    eye: Vector3
    distance: float
    x_axis: Vector3
    y_axis: Vector3
    normal: Vector3
    x_axis_raw: Vector3
    y_axis_raw: Vector3

    def __post_init__(self):
        if not isgoodnum(self.distance) or self.distance <= 0:
            raise DegenerateCameraError('bad camera distance: {}'.format(self.distance))
        if self.normal.magnitude < epsilon:
            raise DegenerateCameraError('degenerate camera normal: {}'.format(self.normal))

    def update_parameters(self,
                          eye: Optional[VectorLike] = None,
                          distance: Optional[float] = None,
                          x_axis: Optional[VectorLike] = None,
                          y_axis: Optional[VectorLike] = None) -> Camera:
        """Return a new camera with the given parameters replaced.

        Omitted parameters keep their current value.  All derived fields
        are recomputed together from the raw axes.
        """
        return make_camera(self.eye if eye is None else eye,
                           self.distance if distance is None else distance,
                           self.x_axis_raw if x_axis is None else x_axis,
                           self.y_axis_raw if y_axis is None else y_axis)

    def depth(self, point: VectorLike) -> float:
        """Signed distance of ``point`` from the eye plane, in units of
        the plane normal's length."""
        return vec3(point).subtract(self.eye).dot(self.normal)

    def in_front_of_eye(self, point: VectorLike) -> bool:
        """Is ``point`` strictly on the visible side of the eye plane?"""
        return self.depth(point) > 0

    def projected_coords(self, point: VectorLike) -> ProjectedPoint:
        """Project a world point onto the picture plane.

        Raises :class:`~svgplot.errors.UnprojectablePointError` when the
        point lies in the plane through the eye.  Points behind the eye
        still project (mirrored); use :meth:`in_front_of_eye` or the
        clipper to exclude them.
        """
        d = vec3(point).subtract(self.eye)
        denom = d.dot(self.normal)
        if abs(denom) < epsilon:
            raise UnprojectablePointError('point {} lies in the eye plane'.format(point))
        lam = self.distance / denom
        return ProjectedPoint(lam * d.dot(self.x_axis), lam * d.dot(self.y_axis))


def make_camera(eye: VectorLike, distance: float,
                x_axis: VectorLike, y_axis: VectorLike) -> Camera:
    """Build a camera from an eye point, a zoom distance and the raw
    projection-plane basis vectors.

    Raises :class:`~svgplot.errors.DegenerateCameraError` if either axis
    has zero length, if the axes are parallel, or if ``distance`` is not
    a positive finite number.
    """
    if not isgoodnum(distance) or distance <= 0:
        raise DegenerateCameraError('bad camera distance: {}'.format(distance))

    eye = vec3(eye)
    xraw = vec3(x_axis)
    yraw = vec3(y_axis)

    try:
        xu = xraw.unit()
        yu = yraw.unit()
    except DegenerateVectorError as e:
        raise DegenerateCameraError('zero-length camera axis') from e

    if xu.cross(yu).magnitude < epsilon:
        raise DegenerateCameraError('parallel camera axes: {}, {}'.format(xraw, yraw))

    cam = Camera(eye=eye, distance=float(distance),
                 x_axis=xu, y_axis=yu,
                 normal=xraw.cross(yraw),
                 x_axis_raw=xraw, y_axis_raw=yraw)
    log.debug('camera eye=%s distance=%g normal=%s', eye, cam.distance, cam.normal)
    return cam


def project(eye: VectorLike, distance: float,
            x_axis: VectorLike, y_axis: VectorLike,
            point: VectorLike) -> ProjectedPoint:
    """One-shot projection of ``point`` through a freshly built camera."""
    return make_camera(eye, distance, x_axis, y_axis).projected_coords(point)


## camera basis from view angles
## -----------------------------

def axes_from_angles(xy_angle: float, xz_angle: float) -> Tuple[Vector3, Vector3]:
    """Return the ``(x_axis, y_axis)`` basis for a heading ``xy_angle``
    (rotation about +z) and a downward pitch ``xz_angle``.

    The resulting plane normal is the horizontal :func:`forward_vector`
    tilted down by ``xz_angle``.
    """
    x_axis = Vector3(cos(xy_angle), sin(xy_angle), 0.0)
    y_axis = Vector3(sin(xz_angle) * sin(xy_angle),
                     -sin(xz_angle) * cos(xy_angle),
                     cos(xz_angle))
    return x_axis, y_axis


def forward_vector(xy_angle: float) -> Vector3:
    """Horizontal unit vector the camera looks along for heading
    ``xy_angle``."""
    return Vector3(sin(xy_angle), -cos(xy_angle), 0.0)


__all__ = [
    'Camera',
    'ProjectedPoint',
    'make_camera',
    'project',
    'axes_from_angles',
    'forward_vector',
]
