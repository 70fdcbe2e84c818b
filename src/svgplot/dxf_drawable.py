## svgplot drawable that writes projected geometry to DXF using the
## ezdxf package.
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

import ezdxf
from ezdxf.enums import TextEntityAlignment

import svgplot.drawable as drawable
from svgplot.vector import isgoodnum

log = logging.getLogger(__name__)

## AutoCAD color index for the stroke names svgplot uses; anything else
## is drawn BYLAYER
ACI_COLORS = {
    'red': 1,
    'yellow': 2,
    'green': 3,
    'cyan': 4,
    'aqua': 4,
    'blue': 5,
    'magenta': 6,
    'black': 7,
    'white': 7,
    'gray': 8,
    'grey': 8,
    'lightgray': 9,
    'lightgrey': 9,
}
BYLAYER = 256

ALIGNMENTS = {
    'start': TextEntityAlignment.LEFT,
    'middle': TextEntityAlignment.CENTER,
    'end': TextEntityAlignment.RIGHT,
}


def stroke2aci(stroke):
    return ACI_COLORS.get(stroke.lower(), BYLAYER)


## class to provide dxf drawing functionality for projected plots
class DxfDraw(drawable.Drawable):

    def __init__(self):
        super().__init__()

        # setup=False avoids creating default blocks that contain SOLID
        # entities unsupported by some CAD programs
        self.__doc = ezdxf.new(dxfversion='R2010', setup=False)
        self.__doc.header['$MEASUREMENT'] = 1 # metric
        self.__doc.header['$INSUNITS'] = 4 # millimeters
        self.__doc.layers.new('WIREFRAME', dxfattribs={'color': 7}) #white
        self.__doc.layers.new('LABELS', dxfattribs={'color': 2}) #yellow
        self.__msp = self.__doc.modelspace()
        self.__textheight = 0.75

    def __repr__(self):
        return 'an instance of DxfDraw'

    ## properties

    @property
    def document(self):
        return self.__doc

    @property
    def modelspace(self):
        return self.__msp

    @property
    def textheight(self):
        return self.__textheight

    @textheight.setter
    def textheight(self, h):
        if not isgoodnum(h) or h <= 0:
            raise ValueError('bad text height: {}'.format(h))
        self.__textheight = h

    def _lineattribs(self, style):
        style = self._linestyle(style)
        return {'layer': 'WIREFRAME',
                'color': stroke2aci(style.stroke),
                'linetype': 'Continuous'}

    ## Overload virtual svgplot.drawable base class drawing methods

    def draw_line(self, p1, p2, style=None):
        return self.__msp.add_line((p1[0], p1[1]), (p2[0], p2[1]),
                                   dxfattribs=self._lineattribs(style))

    def draw_polyline(self, points, style=None):
        pts = [(p[0], p[1]) for p in points]
        if len(pts) < 2:
            return None
        return self.__msp.add_lwpolyline(pts, dxfattribs=self._lineattribs(style))

    def draw_text(self, text, location, style=None):
        style = self._textstyle(style)
        txt = self.__msp.add_text(str(text),
                                  dxfattribs={'layer': 'LABELS',
                                              'height': self.__textheight,
                                              'color': BYLAYER})
        txt.set_placement((location[0], location[1]),
                          align=ALIGNMENTS[style.anchor])
        return txt

    def save(self, filename):
        filename = str(filename)
        log.debug('writing %d dxf entities to %s', len(self.__msp), filename)
        self.__doc.saveas(filename)
