"""
Containment predicates.

Each solid is tested with a closed inequality in its canonical frame, so
points on the boundary count as inside. Zero-valued parameters never raise:
a degenerate solid contains the limit set of its non-degenerate neighbours
(a zero-height pyramid is its base square, a zero radius sphere its center).
"""

import math

from geotransforms._registry import ShapeRegistry
from geotransforms._shapes import shape_kind

contains_methods = ShapeRegistry("contains")


def _ratio2(u, a):
    """(u / a)**2, extended to a = 0 as 0 on u = 0 and inf elsewhere."""
    if a:
        return (u / a) ** 2
    return 0.0 if u == 0 else math.inf


def contains(point, shape) -> bool:
    """Return True if ``point = (x, y, z)`` lies inside or on ``shape``."""
    x, y, z = point
    return bool(contains_methods[shape_kind(shape)](shape, x, y, z))


def _contains_cube(s, x, y, z):
    return abs(x) <= s.a and abs(y) <= s.a and abs(z) <= s.a


def _contains_parallelepiped(s, x, y, z):
    return abs(x) <= s.a and abs(y) <= s.b and abs(z) <= s.c


def _contains_sphere(s, x, y, z):
    return x * x + y * y + z * z <= s.r * s.r


def _contains_ellipsoid(s, x, y, z):
    return _ratio2(x, s.a) + _ratio2(y, s.b) + _ratio2(z, s.c) <= 1


def _contains_cylinder(s, x, y, z):
    return abs(z) <= s.c and x * x + y * y <= s.r * s.r


def _contains_elliptic_cylinder(s, x, y, z):
    return abs(z) <= s.c and _ratio2(x, s.a) + _ratio2(y, s.b) <= 1


def _contains_hollow_cylinder(s, x, y, z):
    rmin, rmax = min(s.r, s.R), max(s.r, s.R)
    rho2 = x * x + y * y
    return abs(z) <= s.c and rmin * rmin <= rho2 <= rmax * rmax


def _contains_square_pyramid(s, x, y, z):
    # |x| <= a (b - z) / 2b
    if abs(z) > s.b or abs(x) > s.a or abs(y) > s.a:
        return False
    bound = s.a * (s.b - z)
    return 2 * s.b * abs(x) <= bound and 2 * s.b * abs(y) <= bound


def _contains_rectangular_pyramid(s, x, y, z):
    if abs(z) > s.c or abs(x) > s.a or abs(y) > s.b:
        return False
    taper = s.c - z
    return (2 * s.c * abs(x) <= s.a * taper
            and 2 * s.c * abs(y) <= s.b * taper)


def _contains_truncated_square_pyramid(s, x, y, z):
    # |x| <= a (1 - r (z + b/2) / b)
    if 2 * abs(z) > s.b or abs(x) > s.a or abs(y) > s.a:
        return False
    bound = s.a * (s.b - s.r * (z + s.b / 2))
    return s.b * abs(x) <= bound and s.b * abs(y) <= bound


def _contains_ring(s, x, y, z):
    d = math.sqrt(x * x + y * y) - s.R
    return _ratio2(d, s.a) + _ratio2(z, s.b) <= 1


def _contains_torus(s, x, y, z):
    d = math.sqrt(x * x + y * y) - s.R
    return d * d + z * z <= s.r * s.r


def _contains_triangular_toroid(s, x, y, z):
    d = math.sqrt(x * x + y * y) - s.r
    if abs(z) > s.c or abs(d) > s.b:
        return False
    return 2 * s.c * abs(d) <= s.b * (s.c - z)


def _contains_spherical_cap(s, x, y, z):
    if abs(z) > s.c:
        return False
    zc = z - s.c + s.r
    return x * x + y * y + zc * zc <= s.r * s.r


for _kind, _fn in (
        ("cube", _contains_cube),
        ("parallelepiped", _contains_parallelepiped),
        ("sphere", _contains_sphere),
        ("ellipsoid", _contains_ellipsoid),
        ("cylinder", _contains_cylinder),
        ("elliptic_cylinder", _contains_elliptic_cylinder),
        ("hollow_cylinder", _contains_hollow_cylinder),
        ("square_pyramid", _contains_square_pyramid),
        ("rectangular_pyramid", _contains_rectangular_pyramid),
        ("truncated_square_pyramid", _contains_truncated_square_pyramid),
        ("ring", _contains_ring),
        ("torus", _contains_torus),
        ("triangular_toroid", _contains_triangular_toroid),
        ("spherical_cap", _contains_spherical_cap),
):
    contains_methods.register(_kind, _fn)
