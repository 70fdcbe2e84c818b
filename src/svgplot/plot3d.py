## perspective 3D wireframe plots for svgplot
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

import logging

from svgplot.camera import Camera
from svgplot.clip import CLIP_OFFSET
from svgplot.plot import Plot
from svgplot.vector import isgoodnum
from svgplot.wireframe import Wireframe

log = logging.getLogger(__name__)


## class to draw a 3D wireframe scene, seen through a camera, into an
## SVG plot.  The plot bounds are in projected (picture plane)
## coordinates.  Everything drawn is kept in a wireframe so that
## replacing the camera redraws the whole scene from scratch.
class Plot3D(Plot):

    def __init__(self, width, height, camera,
                 left=-10, right=10, bottom=-10, top=10,
                 clip_offset=CLIP_OFFSET):
        super().__init__(width, height, left, right, bottom, top)
        if not isinstance(camera, Camera):
            raise ValueError('bad camera: {}'.format(camera))
        if not isgoodnum(clip_offset) or clip_offset <= 0:
            raise ValueError('bad clip offset: {}'.format(clip_offset))
        self.__camera = camera
        self.__clip_offset = clip_offset
        self.__scene = Wireframe()

    def __repr__(self):
        return 'Plot3D({} items, eye={})'.format(len(self.__scene), self.__camera.eye)

    ## properties

    @property
    def camera(self):
        return self.__camera

    @property
    def clip_offset(self):
        return self.__clip_offset

    @property
    def scene(self):
        return self.__scene

    ## camera updates

    def update_camera(self, camera):
        """Replace the camera and redraw the full scene."""
        if not isinstance(camera, Camera):
            raise ValueError('bad camera: {}'.format(camera))
        self.__camera = camera
        return self.redraw()

    def redraw(self):
        """Clear the document and render the scene again; return the
        number of primitives drawn."""
        self.clear()
        n = self.__scene.render(self.__camera, self, self.__clip_offset)
        log.debug('redraw: %d primitives from eye %s', n, self.__camera.eye)
        return n

    ## draw what was added to the scene from index first on
    def _render_new(self, first):
        return self.__scene.render(self.__camera, self, self.__clip_offset, first)

    ## drawing in world space

    def draw_line3d(self, start, end, style=None):
        first = len(self.__scene)
        self.__scene.add_segment(start, end, style)
        return self._render_new(first)

    def draw_polyline3d(self, points, style=None):
        first = len(self.__scene)
        self.__scene.add_polyline(points, style)
        return self._render_new(first)

    def draw_curve3d(self, fx, fy, fz, start_t, end_t, num_pts, style=None):
        first = len(self.__scene)
        self.__scene.add_curve(fx, fy, fz, start_t, end_t, num_pts, style)
        return self._render_new(first)

    def draw_label3d(self, text, location, style=None):
        first = len(self.__scene)
        self.__scene.add_label(text, location, style)
        return self._render_new(first)

    def draw_grid3d(self, xmin, xmax, ymin, ymax, increment=1, z=0, style=None):
        first = len(self.__scene)
        self.__scene.add_grid(xmin, xmax, ymin, ymax, increment, z, style)
        return self._render_new(first)

    def draw_axes3d(self, length=10, labels=True, style=None):
        first = len(self.__scene)
        self.__scene.add_axes(length, labels, style)
        return self._render_new(first)

    ## export

    def export_dxf(self, filename):
        """Write the projected scene to a DXF file."""
        from svgplot.dxf_drawable import DxfDraw

        dd = DxfDraw()
        dd.linestyle = self.linestyle
        dd.textstyle = self.textstyle
        n = self.__scene.render(self.__camera, dd, self.__clip_offset)
        dd.save(filename)
        return n
