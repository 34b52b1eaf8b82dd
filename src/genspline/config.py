"""
Spline definitions in YAML files.

Single spline:
    degree: 2
    type: point2            # float (default), point2, color, array
    control_points: [[-1.5, 0.0], [0.0, 1.5], [1.5, 0.0]]
    knots: [[0.0, 3], [3.0, 3]]    # packed (knot, multiplicity) pairs or a flat list

File with more splines:
    splines:
        position: {...}
        color: {...}
"""
import os
from typing import *

import numpy as np
import yaml

from .bspline import BSpline, unpack_knots
from .point_types import Point2, Colorf
from .spline_exceptions import ConstructionError


class YamlLimitedSafeLoader(type):
    """Meta YAML loader that skips the resolution of the specified YAML tags."""
    def __new__(cls, name, bases, namespace, do_not_resolve: List[str]) -> Type[yaml.SafeLoader]:
        do_not_resolve = set(do_not_resolve)
        implicit_resolvers = {
            key: [(tag, regex) for tag, regex in mappings if tag not in do_not_resolve]
            for key, mappings in yaml.SafeLoader.yaml_implicit_resolvers.items()
        }
        return super().__new__(
            cls,
            name,
            (yaml.SafeLoader, *bases),
            {**namespace, "yaml_implicit_resolvers": implicit_resolvers},
        )

class YamlNoTimestampSafeLoader(
    metaclass=YamlLimitedSafeLoader, do_not_resolve={"tag:yaml.org,2002:timestamp"}
):
    """A safe YAML loader that leaves timestamps as strings."""
    pass

class dotdict(dict):
    """
    dot.notation access to dictionary attributes
    """
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__

    def __getattr__(self, item):
        try:
            return self[item]
        except KeyError:
            return self.__getattribute__(item)

    @classmethod
    def create(cls, cfg : Any):
        """
        - recursively replace all dicts by the dotdict.
        """
        if isinstance(cfg, dict):
            items = ( (k, cls.create(v)) for k,v in cfg.items())
            return dotdict(items)
        elif isinstance(cfg, list):
            return [cls.create(i) for i in cfg]
        elif isinstance(cfg, tuple):
            return tuple([cls.create(i) for i in cfg])
        else:
            return cfg

    @staticmethod
    def serialize(cfg):
        if isinstance(cfg, (dict, dotdict)):
            return { k:dotdict.serialize(v) for k,v in cfg.items()}
        elif isinstance(cfg, list):
            return [dotdict.serialize(i) for i in cfg]
        elif isinstance(cfg, tuple):
            return [dotdict.serialize(i) for i in cfg]
        else:
            return cfg


def load_config(path):
    """
    Load configuration from given file, replace dictionaries by dotdict.
    """
    cfg_dir = os.path.dirname(path)
    with open(path) as f:
        cfg = yaml.load(f, Loader=YamlNoTimestampSafeLoader)
    if not isinstance(cfg, dict):
        raise ConstructionError(f"Expected mapping at top level of the config: {path}")
    cfg['_config_root_dir'] = os.path.abspath(cfg_dir)
    return dotdict.create(cfg)


def dump_config(cfg, path):
    with open(path, "w") as f:
        yaml.safe_dump(dotdict.serialize(cfg), f)


# control point type name -> (from config, to config)
point_types = {
    'float': (float, float),
    'point2': (lambda v: Point2(*v), lambda p: [p.x, p.y]),
    'color': (lambda v: Colorf(*v), lambda p: [p.r, p.g, p.b]),
    'array': (lambda v: np.array(v, dtype=float), lambda p: p.tolist()),
}


def _is_packed(knots):
    return len(knots) > 0 and all(isinstance(k, (list, tuple)) for k in knots)


def spline_from_config(cfg):
    """
    Make BSpline from the config mapping with keys: degree, control_points, knots
    and optional type.
    """
    for key in ('degree', 'control_points', 'knots'):
        if key not in cfg:
            raise ConstructionError(f"Missing key '{key}' in spline definition.")
    type_name = cfg.get('type', 'float')
    try:
        make_point, _ = point_types[type_name]
    except KeyError:
        raise ConstructionError(f"Unknown control point type: '{type_name}', "
                                f"allowed: {list(point_types.keys())}")
    try:
        points = [make_point(v) for v in cfg['control_points']]
    except (TypeError, ValueError) as e:
        raise ConstructionError(f"Wrong control points for type '{type_name}': {e}") from e
    knots = cfg['knots']
    if _is_packed(knots):
        knots = unpack_knots(knots)
    return BSpline(cfg['degree'], points, knots)


def spline_to_config(spline, type_name='float'):
    _, to_cfg = point_types[type_name]
    return dotdict(
        degree=spline.degree,
        type=type_name,
        control_points=[to_cfg(p) for p in spline.control_points],
        knots=[[knot, mult] for knot, mult in spline.basis.pack_knots()],
    )


def load_splines(path):
    """
    Load all splines from the 'splines' mapping of the YAML file.
    :return: dict name -> BSpline
    """
    cfg = load_config(path)
    if 'splines' not in cfg:
        raise ConstructionError(f"Missing key 'splines' in: {path}")
    return {name: spline_from_config(spline_cfg) for name, spline_cfg in cfg.splines.items()}
