import pytest

ezdxf = pytest.importorskip('ezdxf')

from svgplot.dxf_drawable import BYLAYER, DxfDraw, stroke2aci
from svgplot.style import LineStyle
## unit tests for svgplot dxf_drawable.py


def test_stroke2aci():
    assert stroke2aci('red') == 1
    assert stroke2aci('LightGray') == 9
    assert stroke2aci('#123456') == BYLAYER


def test_textheight():
    dd = DxfDraw()
    assert dd.textheight == 0.75
    dd.textheight = 2
    assert dd.textheight == 2
    with pytest.raises(ValueError):
        dd.textheight = 0


def test_entities():
    dd = DxfDraw()
    line = dd.draw_line((0, 0), (1, 2), LineStyle(stroke='blue'))
    assert line.dxftype() == 'LINE'
    assert line.dxf.layer == 'WIREFRAME'
    assert line.dxf.color == 5

    poly = dd.draw_polyline([(0, 0), (1, 0), (1, 1)], {'stroke': 'green'})
    assert poly.dxftype() == 'LWPOLYLINE'
    assert len(poly) == 3
    assert poly.dxf.color == 3
    assert dd.draw_polyline([(0, 0)]) is None

    txt = dd.draw_text('x', (3, 4), {'text-anchor': 'end'})
    assert txt.dxf.text == 'x'
    assert txt.dxf.layer == 'LABELS'
    assert len(dd.modelspace) == 3


def test_save(tmp_path):
    dd = DxfDraw()
    dd.draw_line((0, 0), (1, 1))
    out = tmp_path / 'lines.dxf'
    dd.save(out)
    doc = ezdxf.readfile(str(out))
    assert len(doc.modelspace().query('LINE')) == 1
