import pytest

from svgplot.camera import make_camera
from svgplot.plot3d import Plot3D
## unit tests for svgplot plot3d.py


@pytest.fixture
def cam():
    return make_camera((0, 0, 0), 1, (1, 0, 0), (0, 1, 0))


@pytest.fixture
def plot(cam):
    # ten pixels per unit, picture-plane origin at pixel (100, 100)
    return Plot3D(200, 200, cam)


def _lines(plot):
    return [e for e in plot.elements if e.elementname == 'line']


class TestPlot3D:

    def test_bad_arguments(self, cam):
        with pytest.raises(ValueError):
            Plot3D(200, 200, 'camera')
        with pytest.raises(ValueError):
            Plot3D(200, 200, cam, clip_offset=0)
        with pytest.raises(ValueError):
            Plot3D(200, 200, cam).update_camera(None)

    def test_clipped_line(self, plot):
        assert plot.draw_line3d((0, 0, -4), (0, 2, 6)) == 1
        line, = _lines(plot)
        assert line.attribs['x1'] == pytest.approx(100)
        assert line.attribs['y1'] == pytest.approx(90)
        assert line.attribs['x2'] == pytest.approx(100)
        assert line.attribs['y2'] == pytest.approx(96.6667, abs=1e-3)

    def test_hidden_line(self, plot):
        assert plot.draw_line3d((0, 0, -4), (0, 2, -6)) == 0
        assert _lines(plot) == []
        assert len(plot.scene) == 1

    def test_update_camera_redraws(self, plot, cam):
        plot.draw_line3d((0, 0, 5), (1, 0, 5))
        plot.draw_label3d('p', (1, 1, 5))
        plot.draw_grid3d(-1, 1, -1, 1, 1, z=5)
        assert len(plot.elements) == 1 + 1 + 6

        assert plot.update_camera(cam.update_parameters(eye=(0, 0, 20))) == 0
        assert plot.elements == []
        assert plot.camera.eye.z == 20

        assert plot.update_camera(cam) == 8
        assert len(plot.elements) == 8

    def test_curve_and_axes(self, cam):
        plot = Plot3D(200, 200, cam.update_parameters(eye=(0, 0, -30)))
        assert plot.draw_curve3d(lambda t: t, lambda t: t, lambda t: 0, 0, 1, 10) == 1
        assert plot.draw_axes3d(5) == 6
        assert [e.elementname for e in plot.elements].count('text') == 3
        assert plot.redraw() == 7

    def test_svg_output(self, plot, tmp_path):
        plot.draw_polyline3d([(0, 0, 5), (1, 0, 5), (1, 1, 5)])
        assert '<path' in plot.tostring()
        out = tmp_path / 'scene.svg'
        plot.save(out)
        assert out.read_text().startswith('<?xml')

    def test_export_dxf(self, plot, tmp_path):
        ezdxf = pytest.importorskip('ezdxf')
        plot.draw_line3d((0, 0, 5), (1, 0, 5))
        plot.draw_line3d((0, 0, -5), (1, 0, -5))
        plot.draw_label3d('q', (0, 1, 5))
        out = tmp_path / 'scene.dxf'
        assert plot.export_dxf(out) == 2
        msp = ezdxf.readfile(str(out)).modelspace()
        line, = msp.query('LINE')
        assert line.dxf.end.x == pytest.approx(0.2)
        assert len(msp.query('TEXT')) == 1
