"""
Catalog of canonical solids.

Every shape is an immutable record of the few parameters that fix the solid
in its canonical pose: centered at the origin with its symmetry axis (if
any) along ``z``. Translations and rotations are left to the caller.

Zero-valued parameters are accepted and describe degenerate solids; their
transforms yield vanishing Jacobians instead of raising.
"""

import math
from dataclasses import astuple, dataclass, fields
from typing import ClassVar

import numpy as np

from geotransforms._registry import ShapeRegistry

shape_types = ShapeRegistry("shape")


def _register(cls):
    shape_types.register(cls.kind, cls)
    return cls


@dataclass(frozen=True)
class Shape:
    """Base class of the shape catalog."""
    kind: ClassVar[str] = ""

    def __post_init__(self):
        for f in fields(self):
            object.__setattr__(self, f.name, float(getattr(self, f.name)))

    @property
    def params(self) -> tuple:
        """Geometric parameters in declaration order."""
        return astuple(self)

    def __contains__(self, point) -> bool:
        from geotransforms._contains import contains
        return contains(point, self)

    def domain(self):
        """Parameter box mapped onto this solid, see :func:`domain`."""
        from geotransforms._domains import domain
        return domain(self)

    def ptransform(self, **kwargs):
        """Parametric transform of this solid, see :func:`ptransform`."""
        from geotransforms._transforms import ptransform
        return ptransform(self, **kwargs)

    def volume(self) -> float:
        raise NotImplementedError

    def halflengths(self) -> tuple:
        raise NotImplementedError


@_register
@dataclass(frozen=True)
class Cube(Shape):
    """Cube of half side ``a``."""
    kind: ClassVar[str] = "cube"
    a: float

    def volume(self):
        return 8 * self.a ** 3

    def halflengths(self):
        return (self.a, self.a, self.a)


@_register
@dataclass(frozen=True)
class Parallelepiped(Shape):
    """Rectangular box with half lengths ``a``, ``b``, ``c``."""
    kind: ClassVar[str] = "parallelepiped"
    a: float
    b: float
    c: float

    def volume(self):
        return 8 * self.a * self.b * self.c

    def halflengths(self):
        return (self.a, self.b, self.c)


@_register
@dataclass(frozen=True)
class Sphere(Shape):
    kind: ClassVar[str] = "sphere"
    r: float

    def volume(self):
        return 4 * math.pi * self.r ** 3 / 3

    def halflengths(self):
        return (self.r, self.r, self.r)


@_register
@dataclass(frozen=True)
class Ellipsoid(Shape):
    """Ellipsoid with semi-axes ``a``, ``b``, ``c``."""
    kind: ClassVar[str] = "ellipsoid"
    a: float
    b: float
    c: float

    def volume(self):
        return 4 * math.pi * self.a * self.b * self.c / 3

    def halflengths(self):
        return (self.a, self.b, self.c)


@_register
@dataclass(frozen=True)
class Cylinder(Shape):
    """Circular cylinder of radius ``r`` and half height ``c``."""
    kind: ClassVar[str] = "cylinder"
    r: float
    c: float

    def volume(self):
        return 2 * math.pi * self.r ** 2 * self.c

    def halflengths(self):
        return (self.r, self.r, self.c)


@_register
@dataclass(frozen=True)
class EllipticCylinder(Shape):
    """Cylinder with elliptic section (semi-axes ``a``, ``b``) and half
    height ``c``."""
    kind: ClassVar[str] = "elliptic_cylinder"
    a: float
    b: float
    c: float

    def volume(self):
        return 2 * math.pi * self.a * self.b * self.c

    def halflengths(self):
        return (self.a, self.b, self.c)


@_register
@dataclass(frozen=True)
class HollowCylinder(Shape):
    """Cylindrical shell between radii ``r`` (inner) and ``R`` (outer), half
    height ``c``."""
    kind: ClassVar[str] = "hollow_cylinder"
    r: float
    R: float
    c: float

    def volume(self):
        return 2 * math.pi * abs(self.R ** 2 - self.r ** 2) * self.c

    def halflengths(self):
        rmax = max(self.r, self.R)
        return (rmax, rmax, self.c)


@_register
@dataclass(frozen=True)
class SquarePyramid(Shape):
    """Square pyramid with base half width ``a`` at ``z = -b`` and apex at
    ``z = b``."""
    kind: ClassVar[str] = "square_pyramid"
    a: float
    b: float

    def volume(self):
        return 8 * self.a ** 2 * self.b / 3

    def halflengths(self):
        return (self.a, self.a, self.b)


@_register
@dataclass(frozen=True)
class RectangularPyramid(Shape):
    """Pyramid with base half widths ``a``, ``b`` at ``z = -c`` and apex at
    ``z = c``."""
    kind: ClassVar[str] = "rectangular_pyramid"
    a: float
    b: float
    c: float

    def volume(self):
        return 8 * self.a * self.b * self.c / 3

    def halflengths(self):
        return (self.a, self.b, self.c)


@_register
@dataclass(frozen=True)
class TruncatedSquarePyramid(Shape):
    """Frustum of a square pyramid.

    Parameters
    ----------
    a : float
        Half width of the base, which sits at ``z = -b/2``.
    b : float
        Height.
    r : float
        Taper ratio in ``[0, 1]``: the top face has half width ``(1 - r) a``.
        ``r = 0`` gives a box, ``r = 1`` a full pyramid.
    """
    kind: ClassVar[str] = "truncated_square_pyramid"
    a: float
    b: float
    r: float

    def volume(self):
        r = self.r
        return 4 * self.a ** 2 * self.b * (1 - r + r ** 2 / 3)

    def halflengths(self):
        return (self.a, self.a, self.b / 2)


TSP = TruncatedSquarePyramid


@_register
@dataclass(frozen=True)
class Ring(Shape):
    """Solid of revolution of an ellipse (radial semi-axis ``a``, axial
    semi-axis ``b``) whose center lies at distance ``R`` from the ``z``
    axis."""
    kind: ClassVar[str] = "ring"
    R: float
    a: float
    b: float

    def volume(self):
        return 2 * math.pi ** 2 * self.R * self.a * self.b

    def halflengths(self):
        rmax = self.R + self.a
        return (rmax, rmax, self.b)


@_register
@dataclass(frozen=True)
class Torus(Shape):
    """Torus with major radius ``R`` and tube radius ``r``."""
    kind: ClassVar[str] = "torus"
    R: float
    r: float

    def volume(self):
        return 2 * math.pi ** 2 * self.R * self.r ** 2

    def halflengths(self):
        rmax = self.R + self.r
        return (rmax, rmax, self.r)


@_register
@dataclass(frozen=True)
class TriangularToroid(Shape):
    """Solid of revolution of an isosceles triangle.

    The triangle has its base (half width ``b``) at ``z = -c`` centered at
    distance ``r`` from the ``z`` axis and its apex at ``(r, c)``. The solid
    is simple (not self-intersecting) for ``b <= r``.
    """
    kind: ClassVar[str] = "triangular_toroid"
    r: float
    b: float
    c: float

    def volume(self):
        return 4 * math.pi * self.r * self.b * self.c

    def halflengths(self):
        rmax = self.r + self.b
        return (rmax, rmax, self.c)


@_register
@dataclass(frozen=True)
class SphericalCap(Shape):
    """Cap of height ``2c`` cut from a sphere of radius ``r``.

    The flat face lies at ``z = -c`` and the apex at ``z = c``; the parent
    sphere is centered at ``z = c - r``. For ``c >= r`` the cut misses the
    sphere and the solid is the whole parent sphere, spanning
    ``c - 2r <= z <= c``.
    """
    kind: ClassVar[str] = "spherical_cap"
    r: float
    c: float

    def volume(self):
        h = min(2 * self.c, 2 * self.r)
        return math.pi * h ** 2 * (self.r - h / 3)

    def halflengths(self):
        h = 2 * self.c
        rho = self.r if h > self.r else math.sqrt(max(h * (2 * self.r - h), 0.0))
        return (rho, rho, self.c)


def shape_kind(shape_or_kind) -> str:
    """Resolve a shape instance, shape class or kind name to the kind name."""
    if isinstance(shape_or_kind, str):
        return shape_or_kind
    kind = getattr(shape_or_kind, "kind", None)
    if not kind:
        raise TypeError(f"Expected a Shape, Shape subclass or kind name, "
                        f"got {shape_or_kind!r}")
    return kind


def make_shape(kind: str, *args, **kwargs) -> Shape:
    """Build a shape from its kind name, e.g. ``make_shape("torus", 3, 1)``."""
    return shape_types[kind](*args, **kwargs)


def volume(shape: Shape) -> float:
    """Closed-form volume of ``shape``."""
    return shape.volume()


def halflengths(shape: Shape) -> np.ndarray:
    """Half lengths of the axis-aligned bounding box of ``shape``."""
    return np.array(shape.halflengths(), dtype=float)
