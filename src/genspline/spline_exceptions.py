"""
Exceptions raised by the spline construction and evaluation.
"""


class SplineError(Exception):
    pass


class ConstructionError(SplineError):
    """
    Inconsistent degree, control points and knots, or a malformed spline definition.
    """
    pass


class RangeError(SplineError):
    """
    Parameter out of the spline domain.
    """
    pass
