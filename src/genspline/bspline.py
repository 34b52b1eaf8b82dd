"""
B-spline curves over generic control points.
These classes provide:
- storing and validation of the degree, control points and knots
- lookup of the knot span for given parameter
- evaluation of the basis functions
- evaluation of the curve using the de Boor algorithm

The control points may be any values that can be linearly interpolated,
see 'genspline.interpolate'.

Example, cardinal cubic B-spline:
    spline = BSpline(3, [0, 0, 0, 6, 0, 0, 0], [-2, -2, -2, -2, -1, 0, 1, 2, 2, 2, 2])
    t_min, t_max = spline.knot_domain()
    y = spline.eval(0.0)    # 4.0
"""
import copy
import logging
import numbers
from typing import Sequence

import numpy as np
import scipy.interpolate

from .interpolate import Interpolable, interpolate
from .spline_exceptions import ConstructionError, RangeError


def _check_degree(degree):
    if isinstance(degree, bool) or not isinstance(degree, numbers.Integral):
        raise ConstructionError("Degree must be an integer, got {}.".format(type(degree).__name__))
    if degree < 0:
        raise ConstructionError("Degree must be non-negative, got {}.".format(degree))


def unpack_knots(packed_knots):
    """
    Expand list of pairs (knot, multiplicity) to the full knot vector.
    """
    full_knots = []
    for knot, mult in packed_knots:
        if isinstance(mult, bool) or not isinstance(mult, numbers.Integral) or mult < 1:
            raise ConstructionError("Invalid multiplicity {} of the knot {}.".format(mult, knot))
        full_knots.extend([knot] * mult)
    return full_knots


class SplineBasis:
    """
    Represents a spline basis for a given knot vector and degree.
    Provides evaluation of the basis functions, knot span lookup etc.
    """

    @classmethod
    def make_equidistant(cls, degree, n_intervals, knot_range=(0.0, 1.0)):
        """
        Returns spline basis for an equidistant knot vector
        having 'n_intervals' subintervals. End knots have multiplicity 'degree + 1'.
        :param degree: degree of the spline basis
        :param n_intervals: number of non-empty knot spans
        :param knot_range: support of the spline, min and max valid 't'
        :return: SplineBasis
        """
        if n_intervals < 1:
            raise ConstructionError("Number of intervals must be positive, got {}.".format(n_intervals))
        n = n_intervals + 2 * degree + 1
        knots = np.full(n, float(knot_range[0]))
        diff = (knot_range[1] - knot_range[0]) / n_intervals
        for i in range(degree + 1, n - degree):
            knots[i] = (i - degree) * diff + knot_range[0]
        knots[-degree - 1:] = knot_range[1]
        return cls(degree, knots)

    @classmethod
    def make_from_packed_knots(cls, degree, knots):
        return cls(degree, unpack_knots(knots))

    def __init__(self, degree, knots):
        """
        Constructor of the basis.
        :param degree: Degree of the polynomials >= 0.
        :param knots: Sequence of the knots including multiplicities, non-decreasing.
        """
        _check_degree(degree)
        self._degree = degree

        try:
            knots = np.array(knots, dtype=float)
        except (TypeError, ValueError) as e:
            raise ConstructionError("Knots must be floats: {}".format(e)) from e
        if knots.ndim != 1:
            raise ConstructionError("Knots must form a vector, got shape {}.".format(knots.shape))
        if len(knots) < 2 * degree + 2:
            raise ConstructionError("Too few knots, got {}, at least {} needed for degree {}."
                                    .format(len(knots), 2 * degree + 2, degree))
        if not np.all(np.isfinite(knots)):
            i_bad = int(np.argmin(np.isfinite(knots)))
            raise ConstructionError("Knot {} at index {} is not finite.".format(knots[i_bad], i_bad))
        decreasing = np.nonzero(knots[1:] < knots[:-1])[0]
        if len(decreasing) > 0:
            i = int(decreasing[0])
            raise ConstructionError("Knots must be non-decreasing, knot[{}] = {} > knot[{}] = {}."
                                    .format(i, knots[i], i + 1, knots[i + 1]))
        knots.setflags(write=False)
        self._knots = knots

        self._size = len(knots) - degree - 1
        self._knots_idx_range = (degree, len(knots) - degree - 1)
        self._domain = (float(knots[self._knots_idx_range[0]]), float(knots[self._knots_idx_range[1]]))
        self._domain_size = self._domain[1] - self._domain[0]

    @property
    def degree(self):
        return self._degree

    @property
    def knots(self):
        return self._knots

    @property
    def size(self):
        """
        Number of basis functions.
        """
        return self._size

    @property
    def knots_idx_range(self):
        return self._knots_idx_range

    @property
    def domain(self):
        return self._domain

    @property
    def domain_size(self):
        return self._domain_size

    def __repr__(self):
        return "SplineBasis({}, {})".format(self.degree, list(self.knots))

    def pack_knots(self):
        """
        Return knots as the list of pairs (knot, multiplicity).
        """
        last, mult = self.knots[0], 0
        packed_knots = []
        for q in self.knots:
            if q == last:
                mult += 1
            else:
                packed_knots.append((float(last), mult))
                last, mult = q, 1
        packed_knots.append((float(last), mult))
        return packed_knots

    def check_domain(self, t):
        t_min, t_max = self.domain
        # NaN fails the comparison as well
        if not t_min <= t <= t_max:
            raise RangeError("Parameter t = {} out of the spline domain [{}, {}].".format(t, t_min, t_max))

    def find_knot_span(self, t):
        """
        Find the non-empty knot span containing the value 't',
        i.e. 'k' such that knots[k] <= t < knots[k+1].
        For t equal to the domain maximum the last non-empty span is returned.

        :param t: float, must be within the domain
        :return: k, degree <= k < size
        """
        self.check_domain(t)
        if t == self.domain[1]:
            k = int(np.searchsorted(self.knots, t, side='left')) - 1
            # max only applies to a domain of zero length
            return max(k, self.degree)
        return int(np.searchsorted(self.knots, t, side='right')) - 1

    def find_knot_interval(self, t):
        """
        Returns I = k - degree, where 'k' is the knot span of 't'.
        That is the index of the first basis function nonzero in 't'.
        """
        return self.find_knot_span(t) - self.degree

    def _basis(self, deg, idx, t, span):
        """
        Recursive evaluation of basis function of given degree and index.
        :param deg: Degree of the basis function
        :param idx: Index of the basis function to evaluate.
        :param t: Point of evaluation.
        :param span: Knot span of 't'.
        :return Value of the basis function.
        """
        if deg == 0:
            return 1.0 if idx == span else 0.0

        t_i = self.knots[idx]
        t_ik = self.knots[idx + deg]
        top = t - t_i
        bottom = t_ik - t_i
        if bottom != 0:
            value = top / bottom * self._basis(deg - 1, idx, t, span)
        else:
            value = 0.0

        t_ik1 = self.knots[idx + deg + 1]
        t_i1 = self.knots[idx + 1]
        top = t_ik1 - t
        bottom = t_ik1 - t_i1
        if bottom != 0:
            value += top / bottom * self._basis(deg - 1, idx + 1, t, span)
        return float(value)

    def fn_supp(self, i_base):
        """
        Support of the base function 'i_base'.
        :param i_base:
        :return: (t_min, t_max)
        """
        return (float(self.knots[i_base]), float(self.knots[i_base + self.degree + 1]))

    def eval(self, i_base, t):
        """
        :param i_base: Index of base function to evaluate.
        :param t: point in which evaluate
        :return: b_i(t)
        """
        assert 0 <= i_base < self.size
        return self._basis(self.degree, i_base, t, self.find_knot_span(t))

    def eval_vector(self, i_interval, t):
        """
        Values of all basis functions nonzero on the knot interval,
        i.e. functions i_interval, ..., i_interval + degree.
        :param i_interval: Result of find_knot_interval(t).
        :param t: point in which evaluate
        :return: numpy array of size degree + 1
        """
        k = i_interval + self.degree
        values = np.zeros(self.degree + 1)
        values[0] = 1.0
        left = np.zeros(self.degree + 1)
        right = np.zeros(self.degree + 1)
        for j in range(1, self.degree + 1):
            left[j] = t - self.knots[k + 1 - j]
            right[j] = self.knots[k + j] - t
            saved = 0.0
            for r in range(j):
                bottom = right[r + 1] + left[j - r]
                temp = values[r] / bottom if bottom != 0 else 0.0
                values[r] = saved + right[r + 1] * temp
                saved = left[j - r] * temp
            values[j] = saved
        return values


class BSpline:
    """
    B-spline curve of given degree over generic control points.
    The curve is immutable, it keeps private copies of the control points and knots.

    Corresponds to the knot vector 'knots' of length len(control_points) + degree + 1,
    the curve is defined on the closed interval [knots[degree], knots[-degree - 1]].
    """

    @classmethod
    def make_from_packed_knots(cls, degree, control_points, packed_knots):
        """
        :param packed_knots: List of pairs (knot, multiplicity).
        """
        return cls(degree, control_points, unpack_knots(packed_knots))

    @classmethod
    def make_clamped(cls, degree, control_points, knot_range=(0.0, 1.0)):
        """
        Spline with equidistant knots and end knots of multiplicity 'degree + 1',
        the curve starts in the first and ends in the last control point.
        """
        control_points = list(control_points)
        _check_degree(degree)
        n_intervals = len(control_points) - degree
        if n_intervals < 1:
            raise ConstructionError("Too few control points for curve, got {}, degree {}."
                                    .format(len(control_points), degree))
        basis = SplineBasis.make_equidistant(degree, n_intervals, knot_range)
        return cls(degree, control_points, basis.knots)

    def __init__(self, degree: int, control_points: Sequence[Interpolable], knots: Sequence[float]):
        """
        :param degree: Non-negative int, degree of the polynomial segments (curve order - 1).
        :param control_points: Sequence of at least 'degree + 1' interpolable values.
        :param knots: Non-decreasing sequence of len(control_points) + degree + 1 floats.
        """
        _check_degree(degree)
        control_points = list(control_points)
        knots = list(knots)
        n_points = len(control_points)
        if n_points < 1:
            raise ConstructionError("No control points given.")
        n_knots = n_points + degree + 1
        if len(knots) != n_knots:
            raise ConstructionError("Invalid number of knots, got {}, expected {} = {} control points + degree {} + 1."
                                    .format(len(knots), n_knots, n_points, degree))
        if n_points <= degree:
            raise ConstructionError("Too few control points for curve, got {}, at least {} needed for degree {}."
                                    .format(n_points, degree + 1, degree))
        self._basis = SplineBasis(degree, knots)
        self._control_points = tuple(self._own_copy(pt) for pt in control_points)
        self._numeric = all(isinstance(pt, (numbers.Number, np.ndarray)) for pt in self._control_points)
        logging.debug(f"BSpline degree: {degree}, points: {n_points}, domain: {self._basis.domain}")

    @staticmethod
    def _own_copy(point):
        if isinstance(point, np.ndarray):
            point = np.array(point)
            point.setflags(write=False)
            return point
        return copy.deepcopy(point)

    @property
    def basis(self):
        return self._basis

    @property
    def degree(self):
        return self._basis.degree

    @property
    def knots(self):
        """
        Read-only numpy array of knots.
        """
        return self._basis.knots

    @property
    def control_points(self):
        """
        Copy of the control points, changes of it do not affect the curve.
        """
        return copy.deepcopy(self._control_points)

    def __len__(self):
        return len(self._control_points)

    def __repr__(self):
        return "BSpline({}, {}, {})".format(self.degree, list(self._control_points), list(self.knots))

    def knot_domain(self):
        """
        Min and max 't' of the curve. The curve is defined on the closed
        interval [min, max], evaluation out of it raises RangeError.
        :return: (t_min, t_max)
        """
        return self._basis.domain

    def eval(self, t):
        """
        Compute a point on the curve at 't'.
        :param t: float, must be within the knot_domain.
        :return: value of the type of the control points
        """
        k = self._basis.find_knot_span(t)
        return self._de_boor(t, k)

    point = eval
    __call__ = eval

    def eval_array(self, t_values):
        """
        Evaluate the curve for the sequence of parameters.
        :return: numpy array for numeric control points, list otherwise
        """
        points = [self.eval(t) for t in t_values]
        if self._numeric:
            return np.array(points)
        return points

    def _de_boor(self, t, k):
        """
        De Boor algorithm computed bottom up. Level 'r' overwrites the values
        of the level 'r - 1' from the end, working[i] depends on working[i - 1]
        and working[i] of the previous level.
        :param t: parameter
        :param k: knot span of 't'
        """
        p = self.degree
        knots = self._basis.knots
        working = list(self._control_points[k - p: k + 1])
        for r in range(1, p + 1):
            for i in range(p, r - 1, -1):
                t_low = knots[k - p + i]
                bottom = knots[k + i - r + 1] - t_low
                if bottom == 0.0:
                    # zero length knot span, 0/0 := 0
                    alpha = 0.0
                else:
                    alpha = float((t - t_low) / bottom)
                working[i] = interpolate(working[i - 1], working[i], alpha)
        if p == 0:
            # no blending, the stored point itself
            return copy.deepcopy(working[0])
        return working[p]

    def to_scipy(self):
        """
        Equivalent scipy.interpolate.BSpline, only for numeric control points.
        """
        if not self._numeric:
            raise TypeError("Conversion to scipy BSpline needs numeric control points.")
        coefs = np.array(self._control_points, dtype=float)
        return scipy.interpolate.BSpline(np.array(self.knots), coefs, self.degree, extrapolate=False)
