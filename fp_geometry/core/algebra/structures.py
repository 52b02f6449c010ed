"""
Algebraic Structure Descriptors — Semiring / Ring / Field

Дескрипторы алгебраических структур над скалярным типом T: записи
именованных операций и выделенных элементов, которые передаются в generic
функции явным аргументом (вместо type-class диспетчеризации).

Иерархия строится структурным расширением:
    Semiring: zero, one, add, mul
    Ring     = Semiring + sub
    Field    = Ring + div, degree, mod

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый уровень объявляет только новые поля, унаследованные поля никогда
   не переопределяются
2. Field всегда можно передать туда, где ожидается Ring или Semiring
3. Дескрипторы immutable (frozen=True) и не содержат разделяемого состояния

Законы структур (ассоциативность, дистрибутивность и т.д.) при создании
дескриптора НЕ проверяются. Для механической проверки см.
fp_geometry.core.math.laws.
"""

from dataclasses import dataclass, fields
from typing import Any, Callable, Dict, Generic, TypeVar

T = TypeVar("T")


# =============================================================================
# DESCRIPTORS
# =============================================================================


@dataclass(frozen=True)
class Semiring(Generic[T]):
    """
    Семикольцо над T.

    Контракт (не проверяется):
    - add и mul ассоциативны, add коммутативна
    - zero — нейтральный элемент для add, one — для mul
    - mul дистрибутивна относительно add, zero аннулирует при умножении
    """

    zero: T
    one: T
    add: Callable[[T, T], T]
    mul: Callable[[T, T], T]


@dataclass(frozen=True)
class Ring(Semiring[T]):
    """
    Кольцо над T: семикольцо + вычитание.

    Контракт: sub(a, b) == add(a, -b). Аддитивная инверсия отдельным полем
    не хранится, sub задаётся напрямую.
    """

    sub: Callable[[T, T], T]


@dataclass(frozen=True)
class Field(Ring[T]):
    """
    Поле над T: кольцо + деление, степень и остаток (euclidean-style).

    - div(a, b): a, умноженное на мультипликативную инверсию b; поведение при
      b == zero определяется самим скалярным типом
    - degree(a): неотрицательная мера размера для евклидовых алгоритмов
    - mod(a, b): остаток от деления
    """

    div: Callable[[T, T], T]
    degree: Callable[[T], int]
    mod: Callable[[T, T], T]


# =============================================================================
# EXTENSION
# =============================================================================


def _copy_fields(descriptor: Semiring, level: type) -> Dict[str, Any]:
    """Поля уровня level, скопированные из descriptor (значения, не копии)."""
    return {f.name: getattr(descriptor, f.name) for f in fields(level)}


def extend_semiring(semiring: Semiring[T], *, sub: Callable[[T, T], T]) -> Ring[T]:
    """
    Построение Ring из Semiring копированием всех полей и добавлением sub.

    Если передан Ring или Field, копируются только поля уровня Semiring.

    Args:
        semiring: Исходный дескриптор семикольца
        sub: Операция вычитания

    Returns:
        Новый Ring, поля семикольца которого идентичны исходным

    Examples:
        >>> S = Semiring(zero=0, one=1, add=lambda a, b: a + b, mul=lambda a, b: a * b)
        >>> R = extend_semiring(S, sub=lambda a, b: a - b)
        >>> R.add is S.add
        True
    """
    return Ring(**_copy_fields(semiring, Semiring), sub=sub)


def extend_ring(
    ring: Ring[T],
    *,
    div: Callable[[T, T], T],
    degree: Callable[[T], int],
    mod: Callable[[T, T], T],
) -> Field[T]:
    """
    Построение Field из Ring копированием всех полей и добавлением div, degree, mod.

    Args:
        ring: Исходный дескриптор кольца
        div: Деление
        degree: Мера степени
        mod: Остаток

    Returns:
        Новый Field, поля кольца которого идентичны исходным
    """
    return Field(**_copy_fields(ring, Ring), div=div, degree=degree, mod=mod)
