"""
Domain models and value objects.

Contains the opaque Point2d container and its {x, y} record form.
"""

from fp_geometry.core.domain.point2d import (
    URI,
    Applicative,
    Functor,
    Point2d,
    ap,
    ap_,
    from_record,
    map,
    map_,
    of,
    origin,
    to_pair,
    to_record,
    xy,
)
from fp_geometry.core.domain.point_record import Point2dRecord

__all__ = [
    # Point2d model
    "Point2d",
    # Constructors
    "origin",
    "xy",
    "of",
    "from_record",
    # Functor / Applicative
    "map",
    "ap",
    "map_",
    "ap_",
    # Instances
    "URI",
    "Functor",
    "Applicative",
    # Destructors
    "to_pair",
    "to_record",
    # Record
    "Point2dRecord",
]
