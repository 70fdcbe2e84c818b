"""Line and text style records for svgplot drawables."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional

from svgplot.vector import isgoodnum

TEXT_ANCHORS = ('start', 'middle', 'end')


def _keymap(cls) -> Dict[str, str]:
    """Accept both python and SVG (hyphenated) spellings of each field."""
    names = {}
    for f in fields(cls):
        names[f.name] = f.name
        names[f.name.replace('_', '-')] = f.name
    return names


def _translate(cls, mapping: Mapping[str, Any]) -> Dict[str, Any]:
    keymap = _keymap(cls)
    kwargs = {}
    for key, val in mapping.items():
        if key not in keymap:
            raise ValueError('unrecognized {} key: {}'.format(cls.__name__, key))
        kwargs[keymap[key]] = val
    return kwargs


def _from_mapping(cls, mapping: Mapping[str, Any]):
    return cls(**_translate(cls, mapping))


def merge_style(base, mapping: Mapping[str, Any]):
    """Return ``base`` with the keys of ``mapping`` overlaid on it."""
    mapping = dict(mapping)
    if isinstance(base, TextStyle) and 'text-anchor' in mapping:
        mapping['anchor'] = mapping.pop('text-anchor')
    return replace(base, **_translate(type(base), mapping))


@dataclass(frozen=True)
class LineStyle:
    """Stroke settings for lines and paths."""

    stroke: str = 'black'
    stroke_width: float = 1.0
    fill: str = 'none'
    dasharray: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.stroke, str) or not self.stroke:
            raise ValueError('bad stroke color: {}'.format(self.stroke))
        if not isgoodnum(self.stroke_width) or self.stroke_width < 0:
            raise ValueError('bad stroke width: {}'.format(self.stroke_width))
        if not isinstance(self.fill, str):
            raise ValueError('bad fill: {}'.format(self.fill))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> LineStyle:
        return _from_mapping(cls, mapping)

    def replace(self, **changes) -> LineStyle:
        return replace(self, **changes)

    def svg_attributes(self) -> Dict[str, Any]:
        """Keyword arguments for an svgwrite shape element."""
        attrs = {'stroke': self.stroke,
                 'stroke_width': self.stroke_width,
                 'fill': self.fill}
        if self.dasharray:
            attrs['stroke_dasharray'] = self.dasharray
        return attrs


@dataclass(frozen=True)
class TextStyle:
    """Font settings for text labels."""

    font_family: str = 'Arial'
    font_size: float = 12
    anchor: str = 'start'

    def __post_init__(self):
        if not isinstance(self.font_family, str) or not self.font_family:
            raise ValueError('bad font family: {}'.format(self.font_family))
        if not isgoodnum(self.font_size) or self.font_size <= 0:
            raise ValueError('bad font size: {}'.format(self.font_size))
        if self.anchor not in TEXT_ANCHORS:
            raise ValueError('bad text anchor: {}'.format(self.anchor))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> TextStyle:
        mapping = dict(mapping)
        # SVG spells the anchor attribute text-anchor
        if 'text-anchor' in mapping:
            mapping['anchor'] = mapping.pop('text-anchor')
        return _from_mapping(cls, mapping)

    def replace(self, **changes) -> TextStyle:
        return replace(self, **changes)

    def svg_attributes(self) -> Dict[str, Any]:
        return {'font_family': self.font_family,
                'font_size': self.font_size,
                'text_anchor': self.anchor}


GRID_STYLE = LineStyle(stroke='lightgray')
AXIS_STYLE = LineStyle()
LABEL_STYLE = TextStyle(font_family='MJXTEX-I', anchor='end')
NUMBER_STYLE = TextStyle(font_family='MJXTEX', anchor='end')


__all__ = [
    'TEXT_ANCHORS',
    'LineStyle',
    'TextStyle',
    'GRID_STYLE',
    'AXIS_STYLE',
    'LABEL_STYLE',
    'NUMBER_STYLE',
    'merge_style',
]
