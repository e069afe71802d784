"""
Parametric transforms from rectangular boxes onto solids.

``ptransform(s)`` returns a callable ``T`` with

    j, x, y, z = T(lam, mu, nu)

where ``(lam, mu, nu)`` lies in ``domain(s)``, ``(x, y, z)`` is the matching point
inside ``s`` and ``j`` is the Jacobian determinant of the change of
variables, so that integrating ``j`` over the box gives the volume of ``s``.

All factors of ``j`` that only depend on the shape parameters (the weights)
are computed once in ``__init__``; a call only evaluates the terms that vary
with ``(lam, mu, nu)``. Only numpy ufuncs are used, so the transforms accept
scalars as well as broadcastable arrays of parameters.

Usage
-----
    from geotransforms import Torus, ptransform, domain

    T = ptransform(Torus(3.0, 1.0))
    j, x, y, z = T(0.5, 0.0, 1.0)
"""

import logging

import numpy as np

from geotransforms._config import settings
from geotransforms._domains import domain
from geotransforms._errors import DomainError
from geotransforms._registry import ShapeRegistry
from geotransforms._shapes import shape_kind

logger = logging.getLogger(__name__)

transform_types = ShapeRegistry("ptransform")


def _register(kind):
    def decorator(cls):
        cls.kind = kind
        transform_types.register(kind, cls)
        return cls
    return decorator


class ParametricTransform:
    """Base class: holds the originating shape and its precomputed weights."""
    __slots__ = ('shape',)
    kind = ""

    def __init__(self, shape):
        self.shape = shape

    def __call__(self, lam, mu, nu):
        raise NotImplementedError

    @property
    def domain(self):
        return domain(self.kind)

    def __eq__(self, other):
        return type(other) is type(self) and other.shape == self.shape

    def __hash__(self):
        return hash((type(self), self.shape))

    def __repr__(self):
        return f"{type(self).__name__}({self.shape!r})"


@_register("sphere")
class SphereTransform(ParametricTransform):
    """Spherical coordinates ``(lam, theta, phi)`` scaled by the radius."""
    __slots__ = ('w',)

    def __init__(self, shape):
        super().__init__(shape)
        self.w = shape.r ** 3

    def __call__(self, lam, theta, phi):
        st, ct = np.sin(theta), np.cos(theta)
        sp, cp = np.sin(phi), np.cos(phi)
        rho = lam * self.shape.r
        rho_st = rho * st
        j = self.w * lam * lam * st
        return j, rho_st * cp, rho_st * sp, rho * ct


@_register("ellipsoid")
class EllipsoidTransform(ParametricTransform):
    __slots__ = ('w',)

    def __init__(self, shape):
        super().__init__(shape)
        self.w = shape.a * shape.b * shape.c

    def __call__(self, lam, theta, phi):
        s = self.shape
        st, ct = np.sin(theta), np.cos(theta)
        sp, cp = np.sin(phi), np.cos(phi)
        lam_st = lam * st
        j = self.w * lam * lam_st
        return j, s.a * lam_st * cp, s.b * lam_st * sp, s.c * lam * ct


@_register("cylinder")
class CylinderTransform(ParametricTransform):
    """Polar coordinates in the section, linear along the axis."""
    __slots__ = ('w',)

    def __init__(self, shape):
        super().__init__(shape)
        self.w = shape.r ** 2 * shape.c

    def __call__(self, lam, phi, nu):
        rho = lam * self.shape.r
        return self.w * lam, rho * np.cos(phi), rho * np.sin(phi), nu * self.shape.c


@_register("elliptic_cylinder")
class EllipticCylinderTransform(ParametricTransform):
    __slots__ = ('w',)

    def __init__(self, shape):
        super().__init__(shape)
        self.w = shape.a * shape.b * shape.c

    def __call__(self, lam, phi, nu):
        s = self.shape
        return (self.w * lam, s.a * lam * np.cos(phi), s.b * lam * np.sin(phi),
                nu * s.c)


@_register("hollow_cylinder")
class HollowCylinderTransform(ParametricTransform):
    """``lam`` sweeps the radius linearly from ``r`` (lam = 0) to ``R`` (lam = 1)."""
    __slots__ = ('a', 'w')

    def __init__(self, shape):
        super().__init__(shape)
        self.a = shape.R - shape.r
        # |drho/dlam|: the radius may decrease with lam when R < r
        self.w = abs(self.a) * shape.c

    def __call__(self, lam, phi, nu):
        rho = lam * self.a + self.shape.r
        return self.w * rho, rho * np.cos(phi), rho * np.sin(phi), nu * self.shape.c


@_register("triangular_toroid")
class TriangularToroidTransform(ParametricTransform):
    """``nu`` moves from the base (kappa = 1) to the apex (kappa = 0) of the
    triangular section, ``lam`` across its width."""
    __slots__ = ('w',)

    def __init__(self, shape):
        super().__init__(shape)
        self.w = shape.b * shape.c

    def __call__(self, lam, phi, nu):
        s = self.shape
        kappa = (1 - nu) * 0.5
        rho = lam * kappa * s.b + s.r
        j = self.w * kappa * np.abs(rho)
        return j, rho * np.cos(phi), rho * np.sin(phi), nu * s.c


@_register("spherical_cap")
class SphericalCapTransform(ParametricTransform):
    """Disk slices of the cap: ``kappa = 1 - nu`` is the depth below the apex in
    units of ``c`` and the squared slice radius is ``c**2 kappa (a - kappa)`` with
    ``a = 2r/c``."""
    __slots__ = ('a', 'w')

    def __init__(self, shape):
        super().__init__(shape)
        self.a = 2 * shape.r / shape.c if shape.c else 0.0
        self.w = shape.c ** 3

    def __call__(self, lam, phi, nu):
        c = self.shape.c
        kappa = 1 - nu
        # rounding at the rim can leave a tiny negative radicand
        mu = np.maximum(kappa * (self.a - kappa), 0.0)
        k = c * lam * np.sqrt(mu)
        j = self.w * lam * mu
        return j, k * np.cos(phi), k * np.sin(phi), c * nu


@_register("cube")
class CubeTransform(ParametricTransform):
    __slots__ = ('w',)

    def __init__(self, shape):
        super().__init__(shape)
        self.w = shape.a ** 3

    def __call__(self, lam, mu, nu):
        a = self.shape.a
        x = a * lam
        # broadcast the constant j to the parameter shape
        return self.w + 0 * x, x, a * mu, a * nu


@_register("parallelepiped")
class ParallelepipedTransform(ParametricTransform):
    __slots__ = ('w',)

    def __init__(self, shape):
        super().__init__(shape)
        self.w = shape.a * shape.b * shape.c

    def __call__(self, lam, mu, nu):
        s = self.shape
        x = s.a * lam
        return self.w + 0 * x, x, s.b * mu, s.c * nu


@_register("square_pyramid")
class SquarePyramidTransform(ParametricTransform):
    """Box coordinates with the section shrunk by ``kappa = (1 - nu)/2``."""
    __slots__ = ('w',)

    def __init__(self, shape):
        super().__init__(shape)
        self.w = shape.a ** 2 * shape.b

    def __call__(self, lam, mu, nu):
        kappa = (1 - nu) * 0.5
        ka = kappa * self.shape.a
        return self.w * kappa * kappa, ka * lam, ka * mu, self.shape.b * nu


@_register("rectangular_pyramid")
class RectangularPyramidTransform(ParametricTransform):
    __slots__ = ('w',)

    def __init__(self, shape):
        super().__init__(shape)
        self.w = shape.a * shape.b * shape.c

    def __call__(self, lam, mu, nu):
        s = self.shape
        kappa = (1 - nu) * 0.5
        return self.w * kappa * kappa, kappa * s.a * lam, kappa * s.b * mu, s.c * nu


@_register("truncated_square_pyramid")
class TruncatedSquarePyramidTransform(ParametricTransform):
    """Like the square pyramid, with ``kappa`` running from 1 at the base to
    ``1 - r`` at the top."""
    __slots__ = ('a', 'w')

    def __init__(self, shape):
        super().__init__(shape)
        self.a = shape.b / 2
        self.w = shape.a ** 2 * self.a

    def __call__(self, lam, mu, nu):
        kappa = 1 - self.shape.r * (1 + nu) * 0.5
        ka = kappa * self.shape.a
        return self.w * kappa * kappa, ka * lam, ka * mu, self.a * nu


@_register("ring")
class RingTransform(ParametricTransform):
    """Elliptic polar coordinates ``(lam, theta)`` in the meridian section,
    revolved by ``phi``."""
    __slots__ = ('w',)

    def __init__(self, shape):
        super().__init__(shape)
        self.w = shape.a * shape.b

    def __call__(self, lam, theta, phi):
        s = self.shape
        st, ct = np.sin(theta), np.cos(theta)
        rho = s.a * lam * ct + s.R
        j = self.w * lam * np.abs(rho)
        return j, rho * np.cos(phi), rho * np.sin(phi), s.b * lam * st


@_register("torus")
class TorusTransform(ParametricTransform):
    __slots__ = ('w',)

    def __init__(self, shape):
        super().__init__(shape)
        self.w = shape.r ** 2

    def __call__(self, lam, theta, phi):
        s = self.shape
        st, ct = np.sin(theta), np.cos(theta)
        rlam = s.r * lam
        rho = rlam * ct + s.R
        j = self.w * lam * np.abs(rho)
        return j, rho * np.cos(phi), rho * np.sin(phi), rlam * st


class CheckedTransform:
    """Debug wrapper validating ``(lam, mu, nu)`` against the domain before
    delegating to the wrapped transform."""
    __slots__ = ('transform', 'low', 'high', 'atol')

    def __init__(self, transform, atol=None):
        self.transform = transform
        self.low, self.high = transform.domain
        self.atol = settings.domain_atol if atol is None else atol

    @property
    def shape(self):
        return self.transform.shape

    @property
    def domain(self):
        return self.low, self.high

    def __call__(self, lam, mu, nu):
        coords = (lam, mu, nu)
        for q, lo, hi in zip(coords, self.low, self.high):
            if np.any(q < lo - self.atol) or np.any(q > hi + self.atol):
                raise DomainError(self.transform.kind, coords,
                                  self.low, self.high)
        return self.transform(lam, mu, nu)

    def __repr__(self):
        return f"CheckedTransform({self.transform!r})"


def ptransform(shape, check_domain=None):
    """Return the parametric transform of ``shape``.

    Parameters
    ----------
    shape : Shape
        Any shape of the catalog.
    check_domain : bool or None
        Wrap the transform in a :class:`CheckedTransform`. ``None`` uses
        ``settings.check_domain``.

    Returns
    -------
    T : ParametricTransform or CheckedTransform
        Callable ``T(lam, mu, nu) -> (j, x, y, z)``.
    """
    T = transform_types[shape_kind(shape)](shape)
    if check_domain is None:
        check_domain = settings.check_domain
    logger.debug("Constructed %r (check_domain=%s)", T, check_domain)
    if check_domain:
        return CheckedTransform(T)
    return T
