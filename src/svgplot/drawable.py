## base class of drawable for svgplot
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

from svgplot.style import LineStyle, TextStyle, merge_style

## Generic drawing functions -- all coordinates are plot-space (x, y)
## pairs, and drawing uses the current pen (line style and text style)
## unless a style is passed explicitly.

class Drawable:
    """Base class for svgplot drawables"""

    def __init__(self):
        self.__linestyle = LineStyle()
        self.__textstyle = TextStyle()

    ## pure virtual functions -- override for specific rendering
    ## system
    def draw_line(self, p1, p2, style=None):
        raise NotImplementedError('pure virtual draw_line called: {}, {}'.format(p1, p2))

    def draw_text(self, text, location, style=None):
        raise NotImplementedError('pure virtual draw_text called: {}, {}'.format(text, location))

    ## non-virtual utility drawing functions

    ## draw a connected run of lines through points; backends with a
    ## native polyline primitive override this
    def draw_polyline(self, points, style=None):
        points = list(points)
        for p1, p2 in zip(points, points[1:]):
            self.draw_line(p1, p2, style)

    ## Various property functions

    @property
    def linestyle(self):
        return self.__linestyle

    def _set_linestyle(self, style):
        self.__linestyle = style

    @linestyle.setter
    def linestyle(self, style):
        if isinstance(style, LineStyle):
            self._set_linestyle(style)
        elif isinstance(style, dict):
            self._set_linestyle(LineStyle.from_mapping(style))
        else:
            raise ValueError('bad line style: ' + str(style))

    @property
    def textstyle(self):
        return self.__textstyle

    def _set_textstyle(self, style):
        self.__textstyle = style

    @textstyle.setter
    def textstyle(self, style):
        if isinstance(style, TextStyle):
            self._set_textstyle(style)
        elif isinstance(style, dict):
            self._set_textstyle(TextStyle.from_mapping(style))
        else:
            raise ValueError('bad text style: ' + str(style))

    ## resolve an optional per-call style against the current pen
    def _linestyle(self, style):
        if style is None:
            return self.linestyle
        if isinstance(style, dict):
            return merge_style(self.linestyle, style)
        if isinstance(style, LineStyle):
            return style
        raise ValueError('bad line style: ' + str(style))

    def _textstyle(self, style):
        if style is None:
            return self.textstyle
        if isinstance(style, dict):
            return merge_style(self.textstyle, style)
        if isinstance(style, TextStyle):
            return style
        raise ValueError('bad text style: ' + str(style))

    def __repr__(self):
        return 'an instance of Drawable'
