"""
Field composition: turn a scalar field over Cartesian space into an
integrand over a shape.

Usage
-----
    from geotransforms import Sphere, ftransform, domain

    g = ftransform(lambda x, y, z: z * z, Sphere(1.0))
    g(0.5, 1.0, 2.0)          # j * f(x, y, z) at (lam, theta, phi)

    h = ftransform(lambda x, y, z: z * z, Sphere(1.0), specialized=False)
    h(0.1, 0.2, 0.3)          # f(x, y, z) inside the sphere, 0 outside
"""

import logging

import numpy as np

from geotransforms._contains import contains, contains_methods
from geotransforms._shapes import shape_kind
from geotransforms._transforms import ptransform

logger = logging.getLogger(__name__)


def _zero_like(r):
    """Zero with the type (and array shape) of ``r``, even if ``r`` is not finite."""
    if isinstance(r, (np.ndarray, np.generic)):
        return np.zeros_like(r)[()]
    return type(r)(0)


class FunctionTransformation:
    """Integrand ``g(lam, mu, nu) = j * f(x, y, z)`` over ``domain(shape)``.

    No containment test is made: the transform only produces points inside
    the shape for parameters inside its domain.

    Parameters
    ----------
    f : callable
        Scalar field ``f(x, y, z)``.
    t : callable
        Parametric transform, ``t(lam, mu, nu) -> (j, x, y, z)``.
    """
    __slots__ = ('f', 't')

    def __init__(self, f, t):
        self.f = f
        self.t = t

    @property
    def shape(self):
        return self.t.shape

    def __call__(self, lam, mu, nu):
        j, x, y, z = self.t(lam, mu, nu)
        return j * self.f(x, y, z)

    def __repr__(self):
        return f"FunctionTransformation({self.f!r}, {self.t!r})"


class GatedField:
    """Field ``f`` restricted to ``shape``: ``f(x, y, z)`` inside, zero outside.

    The zero has the type of ``f``'s result, so integer, float and complex
    fields keep their type.
    """
    __slots__ = ('f', 'shape')

    def __init__(self, f, shape):
        contains_methods[shape_kind(shape)]  # fail early on unknown shapes
        self.f = f
        self.shape = shape

    def __call__(self, x, y, z):
        r = self.f(x, y, z)
        if contains((x, y, z), self.shape):
            return r
        return _zero_like(r)

    def __repr__(self):
        return f"GatedField({self.f!r}, {self.shape!r})"


def ftransform(f, shape, specialized=True, **kwargs):
    """Compose the field ``f(x, y, z)`` with ``shape``.

    Parameters
    ----------
    f : callable
        Scalar field over Cartesian space.
    shape : Shape
        Solid to integrate over.
    specialized : bool
        If True (default) return ``g(lam, mu, nu) = j * f(x(...), y(...),
        z(...))`` over ``domain(shape)``, ready for an integrator over the
        rectangular box. If False return ``g(x, y, z)``, equal to ``f`` inside
        the shape and zero outside.
    **kwargs
        Forwarded to :func:`ptransform` (e.g. ``check_domain``). The generic
        path builds no transform and rejects them with ``TypeError``.

    Returns
    -------
    g : FunctionTransformation or GatedField
    """
    if specialized:
        g = FunctionTransformation(f, ptransform(shape, **kwargs))
    elif kwargs:
        raise TypeError(f"Options {sorted(kwargs)} only apply to the "
                        f"specialized path (specialized=True)")
    else:
        g = GatedField(f, shape)
    logger.debug("Composed field %r", g)
    return g
