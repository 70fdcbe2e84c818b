## svgwrite-rendered 2D plots for svgplot
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

"""SVG plot surface.

A :class:`Plot` covers the plot-space rectangle ``[left, right] x
[bottom, top]`` with an SVG canvas of ``width`` x ``height`` pixels.
Plot space has y pointing up; SVG pixel space has y pointing down, so::

    svg_x = x * dx + origin_x
    svg_y = origin_y - y * dy

with ``dx = width / (right - left)``, ``dy = height / (top - bottom)``,
``origin_x = -dx * left`` and ``origin_y = dy * top``.

All drawing methods take plot-space coordinates.  The document is
rebuilt from scratch by :meth:`Plot.clear`.
"""

import logging
from math import floor

import svgwrite

from svgplot.drawable import Drawable
from svgplot.style import AXIS_STYLE, GRID_STYLE, LABEL_STYLE, NUMBER_STYLE, merge_style
from svgplot.vector import isgoodnum

log = logging.getLogger(__name__)

## pixel offset of tick numbers and axis labels from their anchor point
LABEL_DX = -5
LABEL_DY = 12


## format a coordinate or tick value compactly: 2 -> "2", 0.5 -> "0.5"
def fmtnum(v):
    v = float(v) + 0.0
    if v == int(v) and abs(v) < 1e15:
        return str(int(v))
    return '%.10g' % v


## plot-space values lo, lo+inc, ... up to hi (inclusive or not), using
## an integer step count so rounding does not drift
def ticks(lo, hi, inc, inclusive=True):
    if inc <= 0:
        return []
    span = (hi - lo) / inc
    n = floor(span + 1e-9)
    vals = [lo + i * inc for i in range(n + 1)]
    if not inclusive and vals and abs(vals[-1] - hi) <= 1e-9 * max(1.0, abs(hi)):
        vals.pop()
    return vals


class Plot(Drawable):
    """Drawable that renders plot-space geometry into an SVG document."""

    def __init__(self, width, height, left, right, bottom, top):
        super().__init__()
        for name, val in (('width', width), ('height', height),
                          ('left', left), ('right', right),
                          ('bottom', bottom), ('top', top)):
            if not isgoodnum(val):
                raise ValueError('bad plot {}: {}'.format(name, val))
        if width <= 0 or height <= 0:
            raise ValueError('bad plot size: {} x {}'.format(width, height))
        if right <= left or top <= bottom:
            raise ValueError('bad plot bounds: [{}, {}] x [{}, {}]'.format(left, right, bottom, top))

        self.__width = width
        self.__height = height
        self.__left = left
        self.__right = right
        self.__bottom = bottom
        self.__top = top

        self.__dx = width / (right - left)
        self.__dy = height / (top - bottom)
        self.__origin_x = -self.__dx * left
        self.__origin_y = self.__dy * top

        self.__dwg = None
        self.clear()

    def __repr__(self):
        return 'Plot({}, {}, {}, {}, {}, {})'.format(self.__width, self.__height,
                                                   self.__left, self.__right,
                                                   self.__bottom, self.__top)

    ## properties

    @property
    def width(self):
        return self.__width

    @property
    def height(self):
        return self.__height

    @property
    def bounds(self):
        """``(left, right, bottom, top)`` in plot space"""
        return (self.__left, self.__right, self.__bottom, self.__top)

    @property
    def scale(self):
        """pixels per plot unit, ``(dx, dy)``"""
        return (self.__dx, self.__dy)

    @property
    def drawing(self):
        return self.__dwg

    @property
    def elements(self):
        """drawn SVG elements, in drawing order"""
        return [e for e in self.__dwg.elements if e.elementname != 'defs']

    ## coordinate mapping

    def svg_coords(self, x, y):
        """map a plot-space point to SVG pixel coordinates"""
        return (x * self.__dx + self.__origin_x,
                self.__origin_y - y * self.__dy)

    def svg_path_string(self, user_path):
        """Convert a plot-space path of ``command x y`` triples to SVG pixels.

        Upper-case (absolute) commands are mapped through
        :meth:`svg_coords`; lower-case (relative) commands are scaled by
        ``(dx, -dy)``.
        """
        entries = user_path.split()
        if len(entries) % 3 != 0:
            raise ValueError('bad path string, expected command x y triples: {}'.format(user_path))
        out = []
        for i in range(0, len(entries), 3):
            command = entries[i]
            if len(command) != 1 or not command.isalpha():
                raise ValueError('bad path command: {}'.format(command))
            try:
                x = float(entries[i + 1])
                y = float(entries[i + 2])
            except ValueError:
                raise ValueError('bad path coordinates: {} {}'.format(entries[i + 1], entries[i + 2]))
            if command.islower():
                x, y = x * self.__dx, -y * self.__dy
            else:
                x, y = self.svg_coords(x, y)
            out.append('{} {} {}'.format(command, fmtnum(x), fmtnum(y)))
        return ' '.join(out)

    ## document management

    def clear(self):
        """discard everything drawn so far and start a new document"""
        self.__dwg = svgwrite.Drawing(size=(self.__width, self.__height),
                                      viewBox='0 0 {} {}'.format(self.__width, self.__height),
                                      preserveAspectRatio='none',
                                      debug=False)

    def tostring(self):
        return self.__dwg.tostring()

    def save(self, filename):
        if not isinstance(filename, str):
            filename = str(filename)
        log.debug('writing %d elements to %s', len(self.elements), filename)
        self.__dwg.saveas(filename)

    ## low-level element creation in pixel space

    def _add_line(self, start, end, style):
        return self.__dwg.add(self.__dwg.line(start=start, end=end,
                                              **style.svg_attributes()))

    def _add_text(self, text, insert, style):
        return self.__dwg.add(self.__dwg.text(str(text), insert=insert,
                                              **style.svg_attributes()))

    def _add_path(self, d, style):
        return self.__dwg.add(self.__dwg.path(d=d, **style.svg_attributes()))

    ## Overload virtual svgplot.drawable base class drawing methods

    def draw_line(self, p1, p2, style=None):
        return self._add_line(self.svg_coords(p1[0], p1[1]),
                              self.svg_coords(p2[0], p2[1]),
                              self._linestyle(style))

    def draw_text(self, text, location, style=None):
        return self._add_text(text, self.svg_coords(location[0], location[1]),
                              self._textstyle(style))

    def draw_polyline(self, points, style=None):
        points = list(points)
        if len(points) < 2:
            return None
        coords = []
        for p in points:
            x, y = self.svg_coords(p[0], p[1])
            coords.append('{} {}'.format(fmtnum(x), fmtnum(y)))
        return self._add_path('M ' + ' L '.join(coords), self._linestyle(style))

    ## plot decorations

    def draw_gridlines(self, x_increment=1, y_increment=1, style=None):
        """Draw vertical and horizontal gridlines, bounds inclusive.  An
        increment of zero or less turns off that direction."""
        if style is None:
            style = GRID_STYLE
        elif isinstance(style, dict):
            style = merge_style(GRID_STYLE, style)
        for x in ticks(self.__left, self.__right, x_increment):
            self.draw_line((x, self.__bottom), (x, self.__top), style)
        for y in ticks(self.__bottom, self.__top, y_increment):
            self.draw_line((self.__left, y), (self.__right, y), style)

    def draw_coordinate_axes(self, x_axis=True, y_axis=True):
        """Draw the x and y axes through the origin, with arrowheads at the
        positive ends and italic axis labels."""
        if x_axis:
            self.draw_line((self.__left, 0), (self.__right, 0), AXIS_STYLE)
            arrow = self.svg_path_string('M {} 0'.format(fmtnum(self.__right)))
            self._add_path(arrow + ' m -5 -2 l 5 2 l -5 2', AXIS_STYLE)
            x, y = self.svg_coords(self.__right, 0)
            self._add_text('x', (x + LABEL_DX, y + LABEL_DY), LABEL_STYLE)

        if y_axis:
            self.draw_line((0, self.__bottom), (0, self.__top), AXIS_STYLE)
            arrow = self.svg_path_string('M 0 {}'.format(fmtnum(self.__top)))
            self._add_path(arrow + ' m -2 5 l 2 -5 l 2 5', AXIS_STYLE)
            x, y = self.svg_coords(0, self.__top)
            self._add_text('y', (x + LABEL_DX, y + LABEL_DY), LABEL_STYLE)

    def display_numbers(self, x_increment=1, y_increment=1):
        """Label the axes with tick values, from the lower bound up to but
        not including the upper bound."""
        for x in ticks(self.__left, self.__right, x_increment, inclusive=False):
            px, py = self.svg_coords(x, 0)
            self._add_text(fmtnum(x), (px + LABEL_DX, py + LABEL_DY), NUMBER_STYLE)
        for y in ticks(self.__bottom, self.__top, y_increment, inclusive=False):
            px, py = self.svg_coords(0, y)
            self._add_text(fmtnum(y), (px + LABEL_DX, py + LABEL_DY), NUMBER_STYLE)

    ## paths and curves

    def draw_path(self, user_path, style=None):
        """draw a path given in plot-space ``command x y`` triples"""
        return self._add_path(self.svg_path_string(user_path), self._linestyle(style))

    def draw_curve(self, fx, fy, start_t, end_t, num_pts, style=None):
        """Draw the parametric curve ``(fx(t), fy(t))`` for ``t`` in
        ``[start_t, end_t]``, sampled at ``num_pts`` equal steps."""
        if not isinstance(num_pts, int) or isinstance(num_pts, bool) or num_pts < 1:
            raise ValueError('bad number of curve points: {}'.format(num_pts))
        inc = (end_t - start_t) / num_pts
        pts = []
        for i in range(num_pts + 1):
            t = start_t + i * inc
            pts.append((fx(t), fy(t)))
        return self.draw_polyline(pts, style)

    def draw_function(self, f, start_x, end_x, num_pts, style=None):
        """graph ``y = f(x)`` over ``[start_x, end_x]``"""
        return self.draw_curve(lambda t: t, f, start_x, end_x, num_pts, style)


__all__ = [
    'Plot',
    'fmtnum',
    'ticks',
]
