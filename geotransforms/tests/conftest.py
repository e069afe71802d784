"""Shared fixtures for geotransforms tests."""

import numpy as np
import pytest

from geotransforms import (
    Cube, Parallelepiped, Sphere, Ellipsoid, Cylinder, EllipticCylinder,
    HollowCylinder, SquarePyramid, RectangularPyramid, TruncatedSquarePyramid,
    Ring, Torus, TriangularToroid, SphericalCap, settings,
)

# One non-degenerate instance per kind
CATALOG = [
    Cube(0.7),
    Parallelepiped(1.0, 2.0, 0.5),
    Sphere(1.3),
    Ellipsoid(1.0, 2.0, 3.0),
    Cylinder(1.5, 0.8),
    EllipticCylinder(1.0, 0.5, 2.0),
    HollowCylinder(0.5, 1.5, 1.0),
    SquarePyramid(1.0, 2.0),
    RectangularPyramid(1.0, 2.0, 1.5),
    TruncatedSquarePyramid(1.2, 2.0, 0.6),
    Ring(3.0, 1.0, 0.5),
    Torus(3.0, 1.0),
    TriangularToroid(2.0, 1.0, 0.5),
    SphericalCap(2.0, 0.6),
]


@pytest.fixture(params=CATALOG, ids=lambda s: s.kind)
def shape(request):
    """Each shape of the catalog in turn."""
    return request.param


@pytest.fixture
def restore_settings():
    """Restore package settings after a test changes them."""
    saved = (settings.check_domain, settings.domain_atol)
    yield settings
    settings.check_domain, settings.domain_atol = saved


def gauss_box(low, high, n=32):
    """Tensor Gauss-Legendre nodes and weights on the box [low, high]."""
    x, w = np.polynomial.legendre.leggauss(n)
    nodes, weights = [], []
    for lo, hi in zip(low, high):
        half = 0.5 * (hi - lo)
        nodes.append(half * x + 0.5 * (hi + lo))
        weights.append(half * w)
    L, M, N = np.meshgrid(*nodes, indexing='ij')
    W = np.einsum('i,j,k->ijk', *weights)
    return L, M, N, W


def sample_box(low, high, n=500, margin=1e-3, seed=0):
    """Uniform random parameters strictly inside [low, high]."""
    rng = np.random.default_rng(seed)
    low, high = np.asarray(low), np.asarray(high)
    inset = margin * (high - low)
    return rng.uniform(low + inset, high - inset, size=(n, 3))


@pytest.fixture
def quadrature():
    return gauss_box


@pytest.fixture
def sampler():
    return sample_box
