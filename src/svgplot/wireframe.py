"""3D wireframe content that is clipped and projected into a drawable.

A :class:`Wireframe` is a flat list of segments, polylines and labels in
world space.  It keeps no projected state: every call to
:meth:`Wireframe.render` clips and projects the whole list against the
camera it is given, so replacing the camera and rendering again is a
complete redraw.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple, Union

from svgplot.camera import Camera
from svgplot.clip import CLIP_OFFSET, clip_and_project
from svgplot.errors import UnprojectablePointError
from svgplot.plot import ticks
from svgplot.style import GRID_STYLE, LineStyle, TextStyle
from svgplot.vector import ORIGIN, Vector3, VectorLike, vec3

log = logging.getLogger(__name__)

StyleArg = Union[LineStyle, TextStyle, dict, None]


@dataclass(frozen=True)
class Segment3:
    start: Vector3
    end: Vector3
    style: StyleArg = None


@dataclass(frozen=True)
class Polyline3:
    points: Tuple[Vector3, ...]
    style: StyleArg = None


@dataclass(frozen=True)
class Label3:
    text: str
    location: Vector3
    style: StyleArg = None


Item = Union[Segment3, Polyline3, Label3]


class Wireframe:
    """An ordered collection of 3D drawing items."""

    def __init__(self):
        self.__items: List[Item] = []

    def __len__(self) -> int:
        return len(self.__items)

    def __iter__(self):
        return iter(self.__items)

    def __repr__(self) -> str:
        return 'Wireframe({} items)'.format(len(self.__items))

    def clear(self) -> None:
        self.__items = []

    ## adding content

    def add_segment(self, start: VectorLike, end: VectorLike, style: StyleArg = None) -> Segment3:
        item = Segment3(vec3(start), vec3(end), style)
        self.__items.append(item)
        return item

    def add_polyline(self, points: Sequence[VectorLike], style: StyleArg = None) -> Polyline3:
        pts = tuple(vec3(p) for p in points)
        if len(pts) < 2:
            raise ValueError('polyline needs at least two points, got {}'.format(len(pts)))
        item = Polyline3(pts, style)
        self.__items.append(item)
        return item

    def add_label(self, text, location: VectorLike, style: StyleArg = None) -> Label3:
        item = Label3(str(text), vec3(location), style)
        self.__items.append(item)
        return item

    def add_curve(self, fx: Callable[[float], float], fy: Callable[[float], float],
                  fz: Callable[[float], float], start_t: float, end_t: float,
                  num_pts: int, style: StyleArg = None) -> Polyline3:
        """Add the parametric space curve ``(fx(t), fy(t), fz(t))`` sampled
        at ``num_pts`` equal steps of ``t``."""
        if not isinstance(num_pts, int) or isinstance(num_pts, bool) or num_pts < 1:
            raise ValueError('bad number of curve points: {}'.format(num_pts))
        inc = (end_t - start_t) / num_pts
        pts = []
        for i in range(num_pts + 1):
            t = start_t + i * inc
            pts.append(Vector3(fx(t), fy(t), fz(t)))
        return self.add_polyline(pts, style)

    def add_grid(self, xmin: float, xmax: float, ymin: float, ymax: float,
                 increment: float = 1, z: float = 0, style: StyleArg = None) -> List[Segment3]:
        """Add gridlines parallel to the x and y axes in the plane at
        height ``z``."""
        if style is None:
            style = GRID_STYLE
        out = []
        for x in ticks(xmin, xmax, increment):
            out.append(self.add_segment((x, ymin, z), (x, ymax, z), style))
        for y in ticks(ymin, ymax, increment):
            out.append(self.add_segment((xmin, y, z), (xmax, y, z), style))
        return out

    def add_axes(self, length: float = 10, labels: bool = True, style: StyleArg = None) -> None:
        """Add the three positive coordinate axes from the origin, with
        ``x``, ``y`` and ``z`` labels at their tips."""
        for name, tip in (('x', Vector3(length, 0, 0)),
                          ('y', Vector3(0, length, 0)),
                          ('z', Vector3(0, 0, length))):
            self.add_segment(ORIGIN, tip, style)
            if labels:
                self.add_label(name, tip, {'font-family': 'MJXTEX-I'})

    ## rendering

    def render(self, camera: Camera, drawable, offset: float = CLIP_OFFSET,
               first: int = 0) -> int:
        """Clip, project and draw every item from index ``first`` on;
        return the number of primitives handed to ``drawable``."""
        count = 0
        for item in self.__items[first:]:
            if isinstance(item, Segment3):
                seg = clip_and_project(camera, item.start, item.end, offset)
                if seg is None:
                    continue
                drawable.draw_line(seg.start, seg.end, item.style)
                count += 1
            elif isinstance(item, Polyline3):
                for run in _visible_runs(camera, item.points, offset):
                    if len(run) == 2:
                        drawable.draw_line(run[0], run[1], item.style)
                    else:
                        drawable.draw_polyline(run, item.style)
                    count += 1
            else:
                if not camera.in_front_of_eye(item.location):
                    continue
                try:
                    loc = camera.projected_coords(item.location)
                except UnprojectablePointError as e:
                    log.debug('skipping label %r: %s', item.text, e)
                    continue
                drawable.draw_text(item.text, loc, item.style)
                count += 1
        log.debug('rendered %d of %d wireframe items', count, len(self.__items))
        return count


## split a polyline into runs of connected visible projected points; a
## run ends where a piece is hidden or where clipping cut it short
def _visible_runs(camera: Camera, points: Sequence[Vector3], offset: float):
    runs = []
    run: Optional[list] = None
    for p1, p2 in zip(points, points[1:]):
        seg = clip_and_project(camera, p1, p2, offset)
        if seg is None:
            if run:
                runs.append(run)
            run = None
            continue
        if run is None or seg.start_clipped:
            if run:
                runs.append(run)
            run = [seg.start]
        run.append(seg.end)
        if seg.end_clipped:
            runs.append(run)
            run = None
    if run:
        runs.append(run)
    return runs


__all__ = [
    'Wireframe',
    'Segment3',
    'Polyline3',
    'Label3',
]
