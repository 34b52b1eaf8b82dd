"""
Linear interpolation of the control point values.

The de Boor evaluation needs a single operation on the control points:
    interpolate(a, b, t) == a * (1 - t) + b * t
The generic function 'interpolate' provides it for:
- scalars, numpy arrays and any type with '*' by float and '+' (affine combination),
- types without these operators having own method 'interpolate(other, t)',
- tuples and lists (component wise, so nested tuples can represent matrices),
- scipy rotations (spherical linear interpolation).
Further types can be added by 'register_interpolation'.
"""
import functools
from typing import *

from scipy.spatial.transform import Rotation


class Interpolable(Protocol):
    """
    Capability required from the control point values: multiplication by
    a float and addition. Other types need an adapter, see 'register_interpolation'.
    """
    def __mul__(self, t: float): ...

    def __add__(self, other): ...


def _has_affine_ops(a):
    return hasattr(a, '__mul__') and hasattr(a, '__add__')


@functools.singledispatch
def interpolate(a: Interpolable, b: Interpolable, t: float) -> Interpolable:
    """
    Linear interpolation between 'a' and 'b'.
    The operators take precedence over an 'interpolate' method, which may
    have unrelated meaning (e.g. NaN filling of pandas.Series).
    :param a: value for t == 0
    :param b: value for t == 1
    :param t: float, interpolation parameter
    :return: a * (1 - t) + b * t
    """
    method = getattr(a, 'interpolate', None)
    if method is not None and not _has_affine_ops(a):
        return method(b, t)
    try:
        return a * (1.0 - t) + b * t
    except TypeError:
        raise TypeError("Can not interpolate values of type {}, "
                        "register an adapter by 'register_interpolation'.".format(type(a).__name__))


def register_interpolation(cls):
    """
    Decorator registering an interpolation function for the type 'cls'.
    Usage:
        @register_interpolation(Quaternion)
        def _(a, b, t):
            return a.slerp(b, t)
    """
    return interpolate.register(cls)


def _check_len(a, b):
    if len(a) != len(b):
        raise ValueError("Interpolated sequences differ in length: {} != {}".format(len(a), len(b)))


@interpolate.register(tuple)
def _(a, b, t):
    _check_len(a, b)
    return tuple(interpolate(x, y, t) for x, y in zip(a, b))


@interpolate.register(list)
def _(a, b, t):
    _check_len(a, b)
    return [interpolate(x, y, t) for x, y in zip(a, b)]


@interpolate.register(Rotation)
def _(a, b, t):
    # a * (a^-1 b)^t
    delta = (a.inv() * b).as_rotvec()
    return a * Rotation.from_rotvec(t * delta)
