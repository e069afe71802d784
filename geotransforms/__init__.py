"""
Change-of-variables kernels for canonical solids.

For each solid of the catalog the package provides a containment test, a
rectangular parameter box and a closed-form map of that box onto the
solid's interior together with its Jacobian determinant, so that volume
integrals over the solid become integrals over a box.

Submodules
----------
_shapes     : Shape catalog (Cube, Sphere, Torus, ...), volume, halflengths
_contains   : Containment predicates
_domains    : Parameter boxes
_transforms : Parametric transforms (ptransform)
_ftransform : Field composition (ftransform)
_config     : Package settings (domain checking)
"""

from geotransforms._config import TransformSettings, configure, settings
from geotransforms._errors import DomainError, GeometricTransformsError
from geotransforms._registry import ShapeRegistry
from geotransforms._shapes import (
    Shape, Cube, Parallelepiped, Sphere, Ellipsoid, Cylinder,
    EllipticCylinder, HollowCylinder, SquarePyramid, RectangularPyramid,
    TruncatedSquarePyramid, TSP, Ring, Torus, TriangularToroid, SphericalCap,
    shape_types, make_shape, volume, halflengths,
)
from geotransforms._contains import contains
from geotransforms._domains import domain
from geotransforms._transforms import (
    ParametricTransform, CheckedTransform, ptransform, transform_types,
)
from geotransforms._ftransform import (
    FunctionTransformation, GatedField, ftransform,
)

__version__ = '0.1.0'

__all__ = [
    'Shape', 'Cube', 'Parallelepiped', 'Sphere', 'Ellipsoid', 'Cylinder',
    'EllipticCylinder', 'HollowCylinder', 'SquarePyramid',
    'RectangularPyramid', 'TruncatedSquarePyramid', 'TSP', 'Ring', 'Torus',
    'TriangularToroid', 'SphericalCap',
    'shape_types', 'make_shape', 'volume', 'halflengths',
    'contains', 'domain',
    'ParametricTransform', 'CheckedTransform', 'ptransform',
    'transform_types',
    'FunctionTransformation', 'GatedField', 'ftransform',
    'ShapeRegistry', 'TransformSettings', 'configure', 'settings',
    'DomainError', 'GeometricTransformsError',
]
