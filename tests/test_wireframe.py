import pytest

from svgplot.camera import make_camera
from svgplot.drawable import Drawable
from svgplot.vector import Vector3
from svgplot.wireframe import Label3, Polyline3, Segment3, Wireframe


class Recorder(Drawable):
    """drawable that remembers what it was asked to draw"""

    def __init__(self):
        super().__init__()
        self.lines = []
        self.polylines = []
        self.texts = []

    def draw_line(self, p1, p2, style=None):
        self.lines.append(((p1[0], p1[1]), (p2[0], p2[1]), style))

    def draw_polyline(self, points, style=None):
        self.polylines.append([(p[0], p[1]) for p in points])

    def draw_text(self, text, location, style=None):
        self.texts.append((text, (location[0], location[1])))


def _flat(points):
    return [c for p in points for c in p]


@pytest.fixture
def cam():
    return make_camera((0, 0, 0), 1, (1, 0, 0), (0, 1, 0))


class TestContent:

    def test_add_items(self):
        wf = Wireframe()
        seg = wf.add_segment((0, 0, 1), (1, 1, 1))
        poly = wf.add_polyline([(0, 0, 1), (1, 0, 1), (1, 1, 1)])
        lab = wf.add_label(3, (0, 0, 2))
        assert isinstance(seg, Segment3)
        assert isinstance(poly, Polyline3)
        assert isinstance(lab, Label3) and lab.text == '3'
        assert len(wf) == 3
        assert list(wf) == [seg, poly, lab]
        wf.clear()
        assert len(wf) == 0

    def test_short_polyline(self):
        with pytest.raises(ValueError):
            Wireframe().add_polyline([(0, 0, 0)])

    def test_grid_and_axes(self):
        wf = Wireframe()
        assert len(wf.add_grid(-1, 1, -1, 1, 1)) == 6
        wf.add_axes(5)
        assert len(wf) == 6 + 6
        assert sum(isinstance(i, Label3) for i in wf) == 3

    def test_curve(self):
        wf = Wireframe()
        poly = wf.add_curve(lambda t: t, lambda t: 2 * t, lambda t: 1, 0, 1, 4)
        assert len(poly.points) == 5
        assert poly.points[-1].is_close(Vector3(1, 2, 1))
        with pytest.raises(ValueError):
            wf.add_curve(lambda t: t, lambda t: t, lambda t: t, 0, 1, 0)


class TestRender:

    def test_segments(self, cam):
        wf = Wireframe()
        wf.add_segment((1, 1, 5), (-1, 2, 10), {'stroke': 'red'})
        wf.add_segment((1, 1, -5), (2, 2, -1))
        rec = Recorder()
        assert wf.render(cam, rec) == 1
        (p1, p2, style), = rec.lines
        assert p1 == pytest.approx((0.2, 0.2))
        assert p2 == pytest.approx((-0.1, 0.2))
        assert style == {'stroke': 'red'}

    def test_polyline_breaks_at_hidden_parts(self, cam):
        wf = Wireframe()
        wf.add_polyline([(0, 0, 5), (1, 0, 5), (1, 0, -5),
                         (2, 0, -5), (2, 0, 5), (3, 0, 5)])
        rec = Recorder()
        assert wf.render(cam, rec) == 2
        first, second = rec.polylines
        assert _flat(first) == pytest.approx([0, 0, 0.2, 0, 1, 0])
        assert _flat(second) == pytest.approx([2, 0, 0.4, 0, 0.6, 0])

    def test_polyline_through_eye_plane_twice(self, cam):
        wf = Wireframe()
        wf.add_polyline([(0, 0, -5), (0, 2, 5), (0, 4, -5)])
        rec = Recorder()
        assert wf.render(cam, rec) == 1
        run, = rec.polylines
        assert _flat(run) == pytest.approx([0, 1.2, 0, 0.4, 0, 2.8])

    def test_two_point_run_drawn_as_line(self, cam):
        wf = Wireframe()
        wf.add_polyline([(0, 0, 5), (1, 0, 5)])
        rec = Recorder()
        assert wf.render(cam, rec) == 1
        assert rec.polylines == []
        assert rec.lines[0][1] == pytest.approx((0.2, 0))

    def test_labels(self, cam):
        wf = Wireframe()
        wf.add_label('front', (2, 4, 2))
        wf.add_label('behind', (2, 4, -2))
        wf.add_label('eye plane', (2, 4, 0))
        rec = Recorder()
        assert wf.render(cam, rec) == 1
        assert rec.texts == [('front', pytest.approx((1, 2)))]

    def test_render_from_index(self, cam):
        wf = Wireframe()
        wf.add_segment((0, 0, 1), (1, 0, 1))
        wf.add_segment((0, 0, 2), (0, 1, 2))
        rec = Recorder()
        assert wf.render(cam, rec, first=1) == 1
        assert rec.lines[0][1] == pytest.approx((0, 0.5))

    def test_render_with_moved_camera(self, cam):
        wf = Wireframe()
        wf.add_segment((0, 0, 5), (1, 0, 5))
        behind = cam.update_parameters(eye=(0, 0, 10))
        assert wf.render(behind, Recorder()) == 0
        assert wf.render(cam, Recorder()) == 1
