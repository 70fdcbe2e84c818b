## near-plane segment clipping for svgplot 3D views
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

"""Clip 3D line segments against the eye plane before projection.

Each endpoint is classified with :meth:`Camera.in_front_of_eye`:

=====  =====  ==============================================
start  end    result
=====  =====  ==============================================
no     no     nothing to draw
yes    yes    both endpoints, unchanged
no     yes    start replaced by the clip point
yes    no     end replaced by the clip point
=====  =====  ==============================================

The clip point is not taken on the eye plane itself, where the
projection denominator vanishes, but on the parallel plane ``offset``
units in front of it: ``(C - eye) . normal == offset``.  A segment whose
visible end lies between the eye plane and the clip plane has nothing
left to draw.
"""

from __future__ import annotations

import logging
from typing import NamedTuple, Optional

from svgplot.camera import Camera, ProjectedPoint
from svgplot.errors import UnprojectablePointError, UnprojectableSegmentError
from svgplot.vector import Vector3, VectorLike, epsilon, vec3

log = logging.getLogger(__name__)

## distance of the clip plane in front of the eye plane, in world units
CLIP_OFFSET = 1.0


class ClippedSegment(NamedTuple):
    """Visible part of a world-space segment."""

    start: Vector3
    end: Vector3
    start_clipped: bool
    end_clipped: bool


class ProjectedSegment(NamedTuple):
    """Visible part of a segment projected to plot space."""

    start: ProjectedPoint
    end: ProjectedPoint
    start_clipped: bool
    end_clipped: bool


def clip_parameter(camera: Camera, start: VectorLike, end: VectorLike,
                   offset: float = CLIP_OFFSET) -> float:
    """Return ``lam`` such that ``start + lam * (end - start)`` lies on the
    clip plane.

    Raises :class:`~svgplot.errors.UnprojectableSegmentError` when the
    segment is parallel to the clip plane.
    """
    start = vec3(start)
    end = vec3(end)
    denom = end.subtract(start).dot(camera.normal)
    if abs(denom) < epsilon:
        raise UnprojectableSegmentError(
            'segment {} -> {} is parallel to the clip plane'.format(start, end))
    return (camera.eye.subtract(start).dot(camera.normal) + offset) / denom


def clip_segment(camera: Camera, start: VectorLike, end: VectorLike,
                 offset: float = CLIP_OFFSET) -> Optional[ClippedSegment]:
    """Return the visible part of ``start -> end`` in world space, or
    ``None`` if nothing of it should be drawn."""
    start = vec3(start)
    end = vec3(end)
    s_in = camera.in_front_of_eye(start)
    e_in = camera.in_front_of_eye(end)

    if s_in and e_in:
        return ClippedSegment(start, end, False, False)
    if not (s_in or e_in):
        return None

    try:
        lam = clip_parameter(camera, start, end, offset)
    except UnprojectableSegmentError as e:
        log.debug('skipping segment: %s', e)
        return None
    # the visible end is nearer than the clip plane
    if not 0 < lam < 1:
        log.debug('skipping segment %s -> %s: visible part within %g of the eye plane',
                  start, end, offset)
        return None

    clip = start.add(end.subtract(start).scale(lam))
    if e_in:
        return ClippedSegment(clip, end, True, False)
    return ClippedSegment(start, clip, False, True)


def clip_and_project(camera: Camera, start: VectorLike, end: VectorLike,
                     offset: float = CLIP_OFFSET) -> Optional[ProjectedSegment]:
    """Clip ``start -> end`` against the eye plane and project what is
    left.

    Returns ``None`` when nothing is visible; the caller should skip
    drawing the segment for this frame.
    """
    seg = clip_segment(camera, start, end, offset)
    if seg is None:
        return None
    try:
        return ProjectedSegment(camera.projected_coords(seg.start),
                                camera.projected_coords(seg.end),
                                seg.start_clipped, seg.end_clipped)
    except UnprojectablePointError as e:
        # an endpoint grazing the eye plane
        log.debug('skipping segment: %s', e)
        return None


__all__ = [
    'CLIP_OFFSET',
    'ClippedSegment',
    'ProjectedSegment',
    'clip_parameter',
    'clip_segment',
    'clip_and_project',
]
