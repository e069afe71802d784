"""
Rectangular parameter boxes.

``domain`` depends on the kind of solid only, never on its parameters: the
transforms absorb all sizes, so every sphere shares ``[0, 1] x [0, π] x
[0, 2π]`` and every box shares ``[-1, 1]^3``.
"""

import math

from geotransforms._registry import ShapeRegistry
from geotransforms._shapes import shape_kind

pi = math.pi

_BALL = ((0.0, 0.0, 0.0), (1.0, pi, 2 * pi))
_CYLINDRICAL = ((0.0, -pi, -1.0), (1.0, pi, 1.0))
_BOX = ((-1.0, -1.0, -1.0), (1.0, 1.0, 1.0))
_TOROIDAL = ((0.0, -pi, -pi), (1.0, pi, pi))

domain_table = ShapeRegistry("domain")
for _kind, _box in (
        ("sphere", _BALL),
        ("ellipsoid", _BALL),
        ("cylinder", _CYLINDRICAL),
        ("hollow_cylinder", _CYLINDRICAL),
        ("elliptic_cylinder", _CYLINDRICAL),
        ("triangular_toroid", ((-1.0, -pi, -1.0), (1.0, pi, 1.0))),
        ("spherical_cap", ((0.0, 0.0, -1.0), (1.0, 2 * pi, 1.0))),
        ("cube", _BOX),
        ("parallelepiped", _BOX),
        ("rectangular_pyramid", _BOX),
        ("square_pyramid", _BOX),
        ("truncated_square_pyramid", _BOX),
        ("ring", _TOROIDAL),
        ("torus", _TOROIDAL),
):
    domain_table.register(_kind, _box)


def domain(shape_or_kind):
    """Return ``(low, high)``, the parameter box of a shape variant.

    Parameters
    ----------
    shape_or_kind : Shape, type or str
        A shape instance, a shape class, or a kind name such as ``"torus"``.

    Returns
    -------
    low, high : tuple of float
        Lower and upper corners of the box in ``(λ, μ, ν)`` space.
    """
    low, high = domain_table[shape_kind(shape_or_kind)]
    return tuple(low), tuple(high)
