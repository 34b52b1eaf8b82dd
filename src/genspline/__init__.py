"""
B-spline curves over generic control points.
"""
from .spline_exceptions import SplineError, ConstructionError, RangeError
from .interpolate import interpolate, register_interpolation, Interpolable
from .bspline import SplineBasis, BSpline, unpack_knots
from .point_types import Point2, Colorf

__version__ = '0.1.0'
