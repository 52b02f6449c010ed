"""
Core math modules для fp-geometry

Сравнения с толерантностью и механическая проверка законов алгебраических
структур и операций Point2d.
"""

# Tolerance
from fp_geometry.core.math.tolerance import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
    is_valid_float,
    values_close,
)

# Laws
from fp_geometry.core.math.laws import (
    LawCheckConfig,
    LawCheckResult,
    LawViolation,
    check_applicative_composition,
    check_applicative_homomorphism,
    check_applicative_identity,
    check_applicative_interchange,
    check_descriptor_layering,
    check_field_laws,
    check_functor_composition,
    check_functor_identity,
    check_ring_laws,
    check_semiring_laws,
    ensure_laws_hold,
)

__all__ = [
    # Tolerance — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Tolerance — Comparisons
    "is_close",
    "is_valid_float",
    "values_close",
    # Laws — Exceptions
    "LawViolation",
    # Laws — Types
    "LawCheckConfig",
    "LawCheckResult",
    # Laws — Functor / Applicative
    "check_functor_identity",
    "check_functor_composition",
    "check_applicative_identity",
    "check_applicative_homomorphism",
    "check_applicative_interchange",
    "check_applicative_composition",
    # Laws — Structures
    "check_semiring_laws",
    "check_ring_laws",
    "check_field_laws",
    "check_descriptor_layering",
    "ensure_laws_hold",
]
