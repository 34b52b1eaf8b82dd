from genspline import BSpline, Colorf, Point2, Interpolable, interpolate, register_interpolation
import numpy as np
import pytest
from scipy.spatial.transform import Rotation
from typing import Sequence


knots = [0.0, 0.0, 0.0, 0.0, 0.0, 0.2, 1.0, 2.0, 3.0, 5.0, 5.0, 5.0, 5.0, 5.0]
t_values = np.linspace(0.0, 5.0, 26)


def scalar_spline(values):
    return BSpline(4, values, knots)


class Angle:
    def __init__(self, deg):
        self.deg = deg


@register_interpolation(Angle)
def _(a, b, t):
    return Angle(a.deg + (b.deg - a.deg) * t)


class Weight:
    def __init__(self, w):
        self.w = w

    def interpolate(self, other, t):
        return Weight((1 - t) * self.w + t * other.w)


class Series:
    """
    Arithmetic type with unrelated 'interpolate' method (gap filling), like pandas.Series.
    """
    def __init__(self, values):
        self.values = list(values)

    def __mul__(self, t):
        return Series([t * v for v in self.values])

    __rmul__ = __mul__

    def __add__(self, other):
        return Series([a + b for a, b in zip(self.values, other.values)])

    def interpolate(self, method='linear'):
        return Series([0.0 if v is None else v for v in self.values])


class TestInterpolate:

    def test_values(self):
        assert interpolate(1.0, 3.0, 0.25) == 1.5
        assert interpolate(2, 4, 0.5) == 3.0
        assert np.allclose(interpolate(np.array([0.0, 2.0]), np.array([2.0, 4.0]), 0.5), [1.0, 3.0])
        assert interpolate((0.0, (1.0, 2.0)), (2.0, (3.0, 4.0)), 0.5) == (1.0, (2.0, 3.0))
        assert interpolate([0.0, 1.0], [1.0, 3.0], 0.5) == [0.5, 2.0]
        assert interpolate(Point2(0.0, 1.0), Point2(2.0, 3.0), 0.5) == Point2(1.0, 2.0)
        assert interpolate(Weight(1.0), Weight(3.0), 0.5).w == 2.0
        assert interpolate(Angle(10.0), Angle(20.0), 0.5).deg == 15.0

    def test_operators_before_method(self):
        assert interpolate(Series([0.0, 0.0]), Series([2.0, 4.0]), 0.5).values == [1.0, 2.0]
        spline = BSpline(1, [Series([0.0, 0.0]), Series([2.0, 4.0])], [0.0, 0.0, 1.0, 1.0])
        assert spline.eval(0.25).values == [0.5, 1.0]
        assert spline.eval(1.0).values == [2.0, 4.0]

    def test_errors(self):
        with pytest.raises(TypeError, match="str"):
            interpolate("a", "b", 0.5)
        with pytest.raises(ValueError):
            interpolate((1.0, 2.0), (1.0,), 0.5)

        spline = BSpline(1, ["a", "b"], [0.0, 0.0, 1.0, 1.0])
        with pytest.raises(TypeError):
            spline.eval(0.5)

    def test_rotation(self):
        r_0 = Rotation.identity()
        r_1 = Rotation.from_rotvec([0.0, 0.0, np.pi / 2])
        spline = BSpline(1, [r_0, r_1], [0.0, 0.0, 1.0, 1.0])
        assert (spline.eval(0.0).inv() * r_0).magnitude() < 1e-12
        assert (spline.eval(1.0).inv() * r_1).magnitude() < 1e-12
        assert np.allclose(spline.eval(0.5).as_rotvec(), [0.0, 0.0, np.pi / 4])

    def test_interpolable_annotations(self):
        assert interpolate.__annotations__['a'] is Interpolable
        assert BSpline.__init__.__annotations__['control_points'] == Sequence[Interpolable]


class TestGenericPoints:
    """
    Splines over compound values must agree with the scalar splines
    of the individual components.
    """

    def test_color(self):
        np.random.seed(3)
        rgb = np.random.rand(9, 3)
        spline = BSpline(4, [Colorf(*c) for c in rgb], knots)
        channels = [scalar_spline(list(rgb[:, i])) for i in range(3)]
        for t in t_values:
            color = spline.eval(t)
            assert isinstance(color, Colorf)
            for i in range(3):
                assert np.isclose(color[i], channels[i].eval(t))
        assert isinstance(spline.eval_array(t_values), list)
        with pytest.raises(TypeError):
            spline.to_scipy()

    def test_point2(self):
        np.random.seed(4)
        xy = np.random.rand(9, 2)
        spline = BSpline(4, [Point2(*p) for p in xy], knots)
        x_spline, y_spline = scalar_spline(list(xy[:, 0])), scalar_spline(list(xy[:, 1]))
        for t in t_values:
            pt = spline.eval(t)
            assert np.isclose(pt.x, x_spline.eval(t))
            assert np.isclose(pt.y, y_spline.eval(t))

    def test_matrix(self):
        np.random.seed(5)
        mats = np.random.rand(9, 2, 2)
        spline = BSpline(4, list(mats), knots)
        tuple_spline = BSpline(4, [tuple(map(tuple, m)) for m in mats], knots)
        entries = {(i, j): scalar_spline(list(mats[:, i, j])) for i in range(2) for j in range(2)}
        values = spline.eval_array(t_values)
        assert values.shape == (len(t_values), 2, 2)
        for t, mat in zip(t_values, values):
            tuple_mat = tuple_spline.eval(t)
            for (i, j), entry_spline in entries.items():
                assert np.isclose(mat[i, j], entry_spline.eval(t))
                assert np.isclose(tuple_mat[i][j], entry_spline.eval(t))


class TestPointTypes:

    def test_colorf(self):
        c = Colorf(0.2, 0.4, 0.6)
        assert c * 2.0 == Colorf(0.4, 0.8, 1.2)
        assert 0.5 * c == Colorf(0.1, 0.2, 0.3)
        assert (c + Colorf.broadcast(1.0)).clamp() == Colorf(1.0, 1.0, 1.0)
        assert Colorf(-1.0, 0.5, 2.0).clamp() == Colorf(0.0, 0.5, 1.0)
        assert Colorf(0.0, 1.0, 0.5).to_rgb8() == (0, 255, 128)
        srgb = Colorf(0.0, 1.0, 0.001).to_srgb()
        assert srgb.r == 0.0
        assert np.isclose(srgb.g, 1.0)
        assert np.isclose(srgb.b, 0.01292)
        assert (c[0], c[1], c[2]) == (0.2, 0.4, 0.6)
