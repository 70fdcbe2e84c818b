"""Exceptions raised by the svgplot projection core.

All of them derive from ``ValueError`` so that callers which already
guard geometry calls with ``except ValueError`` keep working.  None of
these conditions is fatal: a drawing pass that hits one simply skips
the affected element and carries on.
"""


class ProjectionError(ValueError):
    """Base class for projection and clipping failures."""


class DegenerateVectorError(ProjectionError):
    """A zero-length vector was normalized."""


class DegenerateCameraError(ProjectionError):
    """Camera parameters do not define a projection plane."""


class UnprojectablePointError(ProjectionError):
    """The point lies in the plane through the eye and has no projection."""


class UnprojectableSegmentError(ProjectionError):
    """A straddling segment runs parallel to the clip plane."""


__all__ = [
    'ProjectionError',
    'DegenerateVectorError',
    'DegenerateCameraError',
    'UnprojectablePointError',
    'UnprojectableSegmentError',
]
