"""Exception types raised by geotransforms."""


class GeometricTransformsError(Exception):
    """Base class for errors raised by this package."""


class DomainError(GeometricTransformsError, ValueError):
    """Parametric coordinates outside ``domain(shape)``.

    Only raised by transforms built with domain checking enabled; the
    default transforms never check their inputs.
    """

    def __init__(self, kind, coords, low, high):
        self.kind = kind
        self.coords = coords
        self.low = low
        self.high = high
        super().__init__(
            f"Parameters {coords} outside the {kind} domain "
            f"[{low}, {high}]"
        )
