"""
Package-wide settings.

Usage
-----
    from geotransforms import configure, settings

    configure(check_domain=True)   # debug mode: validate (λ, μ, ν)
    T = ptransform(Sphere(1.0))    # now a CheckedTransform
    configure(check_domain=False)
"""

import logging
from dataclasses import dataclass, fields

logger = logging.getLogger(__name__)


@dataclass
class TransformSettings:
    """Settings read when transforms are constructed.

    Attributes
    ----------
    check_domain : bool
        Wrap transforms returned by ``ptransform`` in a checker that raises
        ``DomainError`` for parameters outside ``domain(shape)``. Off by
        default; the check costs a comparison per coordinate per call.
    domain_atol : float
        Absolute tolerance for the domain check.
    """
    check_domain: bool = False
    domain_atol: float = 1e-12


settings = TransformSettings()


def configure(**kwargs) -> TransformSettings:
    """Update the module-level ``settings`` in place and return them."""
    known = {f.name for f in fields(TransformSettings)}
    unknown = set(kwargs) - known
    if unknown:
        raise TypeError(
            f"Unknown setting(s): {sorted(unknown)}. Available: {sorted(known)}"
        )
    for key, value in kwargs.items():
        setattr(settings, key, value)
    logger.debug("Updated transform settings: %s", settings)
    return settings
