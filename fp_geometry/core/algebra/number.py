"""
Number — инстансы Semiring / Ring / Field для float

Конкретный скалярный тип для generic ядра. Все операции делегируют
нативным операторам Python float.

ИЗВЕСТНЫЕ ОГРАНИЧЕНИЯ (сохраняются намеренно):
1. Инстансы НЕ law abiding: переполнение, NaN и ошибки округления float
   нарушают ассоциативность и дистрибутивность
2. degree всегда возвращает 1, mod всегда возвращает 0.0 (заглушки)
3. div при делителе 0.0 ведёт себя как нативное деление float
   (ZeroDivisionError), дополнительных проверок нет
"""

from typing import Callable, Final

from fp_geometry.core.algebra.structures import (
    Field,
    Ring,
    Semiring,
    extend_ring,
    extend_semiring,
)

# =============================================================================
# CONSTRUCTORS
# =============================================================================

ZERO: Final[float] = 0.0

ONE: Final[float] = 1.0


# =============================================================================
# COMBINATORS (pipeable)
# =============================================================================


def add(x1: float) -> Callable[[float], float]:
    """add(x1)(x2) == x1 + x2"""
    return lambda x2: x1 + x2


def sub(x1: float) -> Callable[[float], float]:
    """sub(x1)(x2) == x1 - x2"""
    return lambda x2: x1 - x2


def mul(x1: float) -> Callable[[float], float]:
    """mul(x1)(x2) == x1 * x2"""
    return lambda x2: x1 * x2


def div(x1: float) -> Callable[[float], float]:
    """div(x1)(x2) == x1 / x2"""
    return lambda x2: x1 / x2


# =============================================================================
# NON-PIPEABLES
# =============================================================================


def _add(x1: float, x2: float) -> float:
    return add(x1)(x2)


def _sub(x1: float, x2: float) -> float:
    return sub(x1)(x2)


def _mul(x1: float, x2: float) -> float:
    return mul(x1)(x2)


def _div(x1: float, x2: float) -> float:
    return div(x1)(x2)


def _degree(_: float) -> int:
    return 1


def _mod(_x1: float, _x2: float) -> float:
    return 0.0


# =============================================================================
# INSTANCES
# =============================================================================

# Non law abiding semiring instance for float
SEMIRING: Final[Semiring[float]] = Semiring(zero=ZERO, one=ONE, add=_add, mul=_mul)

# Non law abiding ring instance for float
RING: Final[Ring[float]] = extend_semiring(SEMIRING, sub=_sub)

# Non law abiding field instance for float
FIELD: Final[Field[float]] = extend_ring(RING, div=_div, degree=_degree, mod=_mod)
