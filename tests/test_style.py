import pytest

from svgplot.style import GRID_STYLE, LineStyle, TextStyle, merge_style


def test_line_style_defaults():
    s = LineStyle()
    assert s.stroke == 'black'
    assert s.svg_attributes() == {'stroke': 'black', 'stroke_width': 1.0, 'fill': 'none'}
    assert GRID_STYLE.stroke == 'lightgray'


def test_line_style_from_svg_mapping():
    s = LineStyle.from_mapping({'stroke': 'red', 'stroke-width': 2, 'dasharray': '4 2'})
    assert s == LineStyle(stroke='red', stroke_width=2, dasharray='4 2')
    assert s.svg_attributes()['stroke_dasharray'] == '4 2'


def test_unrecognized_keys_rejected():
    with pytest.raises(ValueError):
        LineStyle.from_mapping({'colour': 'red'})
    with pytest.raises(ValueError):
        TextStyle.from_mapping({'font-weight': 'bold'})


def test_text_style():
    s = TextStyle.from_mapping({'font-family': 'MJXTEX', 'text-anchor': 'end'})
    assert s.font_family == 'MJXTEX'
    assert s.anchor == 'end'
    assert s.font_size == 12
    assert s.svg_attributes()['text_anchor'] == 'end'
    with pytest.raises(ValueError):
        TextStyle(anchor='left')
    with pytest.raises(ValueError):
        TextStyle(font_size=0)


def test_merge_style_keeps_unset_fields():
    base = LineStyle(stroke='blue', stroke_width=3)
    merged = merge_style(base, {'stroke': 'red'})
    assert merged == LineStyle(stroke='red', stroke_width=3)
    assert base.stroke == 'blue'
    assert merge_style(TextStyle(), {'text-anchor': 'middle'}).anchor == 'middle'


def test_bad_line_values():
    with pytest.raises(ValueError):
        LineStyle(stroke_width=-1)
    with pytest.raises(ValueError):
        LineStyle(stroke='')
