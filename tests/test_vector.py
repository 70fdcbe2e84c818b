import dataclasses
import math

import pytest

from svgplot.errors import DegenerateVectorError, ProjectionError
from svgplot.vector import ORIGIN, Vector3, close, epsilon, isgoodnum, vec3
## unit tests for svgplot vector.py


class TestVector:
    """unit tests for Vector3 arithmetic"""

    def test_create(self):
        a = Vector3(1, 2, 3)
        assert (a.x, a.y, a.z) == (1.0, 2.0, 3.0)
        assert isinstance(a.x, float)
        assert tuple(a) == (1.0, 2.0, 3.0)
        assert a[2] == 3.0
        assert len(a) == 3
        assert vec3((1, 2, 3)) == a
        assert vec3([1, 2, 3]) == a
        assert vec3(a) is a

    def test_bad_components(self):
        with pytest.raises(ValueError):
            Vector3(1, float('nan'), 0)
        with pytest.raises(ValueError):
            Vector3(True, 0, 0)
        with pytest.raises(ValueError):
            vec3((1, 2))

    def test_immutable(self):
        a = Vector3(1, 2, 3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            a.x = 5.0
        b = a.add(Vector3(1, 1, 1))
        assert a == Vector3(1, 2, 3)
        assert b == Vector3(2, 3, 4)

    def test_operations(self):
        a = Vector3(5, 0, 0)
        b = Vector3(0, 5, 0)
        c = Vector3(-3, -3, 0)
        d = Vector3(1, 1, 0)
        assert close(a.magnitude, 5.0)
        assert a.add(b).is_close(Vector3(5, 5, 0))
        assert a.subtract(b).is_close(Vector3(5, -5, 0))
        assert a.scale(0.5) == Vector3(2.5, 0, 0)
        assert close(a.dot(b), 0)
        assert close(d.dot(c), -6)
        assert a.cross(b).is_close(Vector3(0, 0, 25))
        assert b.cross(a).is_close(Vector3(0, 0, -25))
        assert close(a.subtract(b).magnitude, math.sqrt(50))

    def test_operators(self):
        a = Vector3(1, 2, 3)
        b = Vector3(3, 2, 1)
        assert a + b == Vector3(4, 4, 4)
        assert a - b == Vector3(-2, 0, 2)
        assert a * 2 == Vector3(2, 4, 6)
        assert 2 * a == Vector3(2, 4, 6)
        assert -a == Vector3(-1, -2, -3)
        with pytest.raises(TypeError):
            a * b

    def test_unit(self):
        a = Vector3(3, 4, 0)
        u = a.unit()
        assert u.is_close(Vector3(0.6, 0.8, 0))
        assert close(u.magnitude, 1.0)
        assert u.unit().is_close(u)

    def test_unit_of_zero_vector(self):
        with pytest.raises(DegenerateVectorError):
            ORIGIN.unit()
        with pytest.raises(ProjectionError):
            Vector3(epsilon / 10, 0, 0).unit()
        with pytest.raises(ValueError):
            Vector3(0, 0, 0).unit()


def test_isgoodnum():
    assert isgoodnum(1)
    assert isgoodnum(-2.5)
    assert not isgoodnum(False)
    assert not isgoodnum('1')
    assert not isgoodnum(float('inf'))
