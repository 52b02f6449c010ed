"""
Algebra — дескрипторы алгебраических структур и type-class записи

Дескрипторы Semiring / Ring / Field строятся структурным расширением и
передаются в generic операции явным аргументом. Инстансы для float
находятся в fp_geometry.core.algebra.number.
"""

# Structure descriptors
from fp_geometry.core.algebra.structures import (
    Field,
    Ring,
    Semiring,
    extend_ring,
    extend_semiring,
)

# Type-class records
from fp_geometry.core.algebra.typeclasses import Applicative, Functor

__all__ = [
    # Structure descriptors
    "Semiring",
    "Ring",
    "Field",
    "extend_semiring",
    "extend_ring",
    # Type-class records
    "Functor",
    "Applicative",
]
