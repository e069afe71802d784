"""Tests for the containment predicates."""

import numpy as np
import pytest

from geotransforms import (
    Cube, Parallelepiped, Sphere, Ellipsoid, Cylinder, EllipticCylinder,
    HollowCylinder, SquarePyramid, RectangularPyramid, TruncatedSquarePyramid,
    Ring, Torus, TriangularToroid, SphericalCap, contains,
)
from geotransforms._contains import contains_methods
from geotransforms._shapes import shape_types


# (shape, inside points, outside points); boundary points count as inside
CASES = [
    (Cube(1.0),
     [(0, 0, 0), (1, 1, 1), (-1, 0.5, -0.5)],
     [(1.01, 0, 0), (0, 0, -1.5)]),
    (Parallelepiped(1.0, 2.0, 3.0),
     [(1, 2, 3), (0, -1.9, 2.5)],
     [(0, 2.1, 0), (1.1, 0, 0), (0, 0, 3.01)]),
    (Sphere(2.0),
     [(0, 0, 0), (2, 0, 0), (1, 1, 1)],
     [(1.5, 1.5, 0), (0, 0, -2.01)]),
    (Ellipsoid(1.0, 2.0, 3.0),
     [(1, 0, 0), (0, 2, 0), (0, 0, -3), (0.5, 1.0, 1.5)],
     [(1, 0.1, 0), (0.8, 1.6, 0.5)]),
    (Cylinder(1.0, 2.0),
     [(1, 0, 2), (0.6, 0.7, -2), (0, 0, 0)],
     [(0.8, 0.8, 0), (0, 0, 2.1)]),
    (EllipticCylinder(2.0, 1.0, 1.0),
     [(2, 0, 0), (0, 1, 1), (1, 0.8, -0.5)],
     [(1.5, 0.8, 0), (0, 0, 1.5)]),
    (HollowCylinder(1.0, 2.0, 1.0),
     [(1, 0, 0), (0, 2, 1), (1.2, 1.2, 0)],
     [(0, 0, 0), (0.5, 0.5, 0), (1.5, 1.5, 0), (1.5, 0, 1.5)]),
    (HollowCylinder(2.0, 1.0, 1.0),
     [(1.5, 0, 0)],
     [(0.5, 0, 0), (2.5, 0, 0)]),
    (SquarePyramid(1.0, 1.0),
     [(1, 1, -1), (0, 0, 1), (0.5, 0.5, 0), (-0.25, 0.25, 0.5)],
     [(0.6, 0, 0), (0, 0, 1.01), (0, 0, -1.01), (0.1, 0, 0.9)]),
    (RectangularPyramid(1.0, 2.0, 1.0),
     [(1, 2, -1), (0.5, 1.0, 0), (0, 0, 1)],
     [(0.5, 1.1, 0), (0.6, 0, 0)]),
    (TruncatedSquarePyramid(1.0, 2.0, 0.5),
     [(1, 1, -1), (0.5, 0.5, 1), (0.75, -0.75, 0)],
     [(0.6, 0, 1), (0.8, 0, 0), (0, 0, 1.1)]),
    (Ring(3.0, 1.0, 0.5),
     [(3, 0, 0), (4, 0, 0), (0, -2, 0), (0, 3, 0.5), (2.1, 2.1, 0)],
     [(0, 0, 0), (3, 0, 0.6), (4.1, 0, 0), (0, 4, 0.1)]),
    (Torus(3.0, 1.0),
     [(3, 0, 1), (0, 2, 0), (-4, 0, 0)],
     [(0, 0, 0), (3, 0, 1.1), (0, 3.8, 0.8)]),
    (TriangularToroid(2.0, 1.0, 1.0),
     [(1, 0, -1), (3, 0, -1), (2, 0, 1), (0, -2.25, 0)],
     [(0, 0, 0), (1.4, 0, 0), (2.6, 0, 0), (2, 0, 1.1)]),
    (SphericalCap(2.0, 0.5),
     [(0, 0, 0.5), (0, 0, -0.5), (1.7, 0, -0.5)],
     [(1.8, 0, -0.5), (0, 0, -0.6), (0, 0, 0.6), (1.2, 0, 0.3)]),
]


class TestContains:
    @pytest.mark.parametrize("shape, inside, outside", CASES,
                             ids=[c[0].kind for c in CASES])
    def test_inside_and_outside(self, shape, inside, outside):
        for p in inside:
            assert contains(p, shape), f"{p} should be inside {shape}"
        for p in outside:
            assert not contains(p, shape), f"{p} should be outside {shape}"

    def test_every_kind_has_a_predicate(self):
        assert set(contains_methods.available()) == \
            set(shape_types.available())

    def test_returns_builtin_bool(self):
        assert contains(np.array([0.0, 0.0, 0.0]), Sphere(1.0)) is True
        assert contains(np.array([2.0, 0.0, 0.0]), Sphere(1.0)) is False

    def test_in_operator(self):
        assert (0.5, 0.5, 0.5) in Cube(1.0)
        assert [3.0, 0.0, 0.0] not in Cube(1.0)

    def test_torus_matches_ring(self):
        rng = np.random.default_rng(1)
        torus, ring = Torus(2.0, 0.8), Ring(2.0, 0.8, 0.8)
        for p in rng.uniform(-3, 3, size=(200, 3)):
            assert contains(p, torus) == contains(p, ring)

    def test_full_cap_matches_sphere(self):
        rng = np.random.default_rng(2)
        cap, sphere = SphericalCap(1.0, 1.0), Sphere(1.0)
        for p in rng.uniform(-1.2, 1.2, size=(200, 3)):
            assert contains(p, cap) == contains(p, sphere)

    def test_not_a_shape(self):
        with pytest.raises(TypeError):
            contains((0, 0, 0), object())

    def test_unknown_kind_name(self):
        with pytest.raises(KeyError, match="No contains entry for shape kind"):
            contains((0, 0, 0), "dodecahedron")

    def test_wrong_point_length(self):
        with pytest.raises(ValueError):
            contains((0, 0), Sphere(1.0))


class TestDegenerate:
    @pytest.mark.parametrize("shape", [
        Sphere(0.0), Cube(0.0), Ellipsoid(0.0, 1.0, 1.0),
        Cylinder(1.0, 0.0), SquarePyramid(1.0, 0.0),
        RectangularPyramid(1.0, 1.0, 0.0), TruncatedSquarePyramid(1.0, 0.0, 0.5),
        Ring(2.0, 0.0, 0.0), TriangularToroid(2.0, 1.0, 0.0),
        SphericalCap(1.0, 0.0),
    ], ids=lambda s: s.kind)
    def test_no_division_errors(self, shape):
        for p in [(0, 0, 0), (0.5, 0.5, 0.5), (2.0, 0.0, 0.0)]:
            assert isinstance(contains(p, shape), bool)

    def test_zero_sphere_is_a_point(self):
        assert contains((0, 0, 0), Sphere(0.0))
        assert not contains((1e-9, 0, 0), Sphere(0.0))

    def test_flat_pyramid_is_its_base(self):
        s = SquarePyramid(1.0, 0.0)
        assert contains((0.5, -1.0, 0.0), s)
        assert not contains((1.5, 0.0, 0.0), s)
        assert not contains((0.5, 0.5, 1e-9), s)

    def test_thin_ring_is_a_circle(self):
        s = Ring(2.0, 0.0, 0.0)
        assert contains((2.0, 0.0, 0.0), s)
        assert contains((0.0, -2.0, 0.0), s)
        assert not contains((0.0, 0.0, 0.0), s)
        assert not contains((2.0, 0.0, 0.1), s)

    def test_flat_ellipsoid_is_an_ellipse(self):
        s = Ellipsoid(0.0, 1.0, 2.0)
        assert contains((0.0, 0.6, 1.2), s)
        assert not contains((0.0, 0.9, 1.9), s)
        assert not contains((0.1, 0.0, 0.0), s)
