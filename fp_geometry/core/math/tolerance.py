"""
Tolerance — сравнение скаляров с учётом машинной точности

Используется при механической проверке законов алгебраических структур
для float-инстансов: точное равенство float нарушается ошибками округления,
поэтому значения сравниваются с относительной и абсолютной толерантностью.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN никогда не считается близким ни к чему (включая NaN)
2. Inf близок только к Inf того же знака
3. Точные числа (int, Fraction, Decimal) и нечисловые значения
   сравниваются точным равенством
"""

import cmath
import math
from numbers import Complex, Real
from typing import Any, Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для сравнения float
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для сравнения float (значения около нуля)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# СРАВНЕНИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Returns:
        True если значение finite
    """
    return math.isfinite(value)


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(0.1 + 0.2, 0.3)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(float("nan"), float("nan"))
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def values_close(
    a: Any,
    b: Any,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    approximate: bool = True,
) -> bool:
    """
    Сравнение двух значений произвольного скалярного типа.

    При approximate=True с толерантностью сравниваются только пары чисел,
    где хотя бы одно значение float (через is_close) или complex
    (через cmath.isclose). Точные типы (int, Fraction, Decimal), bool и
    нечисловые значения сравниваются точным равенством.

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность
        abs_tol: Абсолютная толерантность
        approximate: Разрешить приближённое сравнение float / complex

    Returns:
        True если значения считаются равными

    Examples:
        >>> values_close(0.1 + 0.2, 0.3)
        True
        >>> values_close(10**17 + 1, 10**17)
        False
    """
    if not approximate or isinstance(a, bool) or isinstance(b, bool):
        return a == b

    if isinstance(a, Real) and isinstance(b, Real):
        if isinstance(a, float) or isinstance(b, float):
            return is_close(float(a), float(b), rel_tol=rel_tol, abs_tol=abs_tol)
        return a == b

    if isinstance(a, Complex) and isinstance(b, Complex):
        if isinstance(a, complex) or isinstance(b, complex):
            return cmath.isclose(complex(a), complex(b), rel_tol=rel_tol, abs_tol=abs_tol)

    return a == b
