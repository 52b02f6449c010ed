"""
Point2d — непрозрачная точка в двумерном пространстве

Generic контейнер из двух компонент одного типа T (первая — x, вторая — y)
со структурными операциями:
- Конструкторы: origin (из нуля семикольца), xy (явная пара), of (broadcast)
- Functor: map
- Applicative: ap
- Деструктор: to_pair (единственный способ прочитать компоненты)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Точка immutable: каждая операция возвращает новую точку
2. Внутреннее представление (поля _x, _y) не является частью API,
   точки создаются только конструкторами этого модуля
3. Операции позиционные: x никогда не смешивается с y
4. Ошибки из пользовательских функций пробрасываются без изменений

Examples:
    >>> from fp_geometry.core.algebra import number as n
    >>> to_pair(origin(n.FIELD))
    (0.0, 0.0)
    >>> pipe(xy(3, 8), map(str), to_pair)
    ('3', '8')
"""

from dataclasses import dataclass
from typing import Callable, Generic, Tuple, TypeVar

from fp_geometry.core.algebra import typeclasses
from fp_geometry.core.algebra.structures import Semiring
from fp_geometry.core.domain.point_record import Point2dRecord
from fp_geometry.core.function import pipe

T = TypeVar("T")
T1 = TypeVar("T1")
T2 = TypeVar("T2")


# =============================================================================
# MODEL
# =============================================================================


@dataclass(frozen=True)
class Point2d(Generic[T]):
    """
    Точка в двумерном пространстве с компонентами типа T.

    Непрозрачный тип: не создавайте Point2d напрямую и не читайте поля
    _x/_y, используйте origin / xy / of и to_pair.

    Равенство покомпонентное.
    """

    _x: T
    _y: T

    def __repr__(self) -> str:
        return f"Point2d(x={self._x!r}, y={self._y!r})"


# =============================================================================
# CONSTRUCTORS
# =============================================================================


def origin(semiring: Semiring[T]) -> Point2d[T]:
    """
    Начало координат: обе компоненты равны semiring.zero.

    Принимает любой Semiring, в том числе Ring и Field.

    Examples:
        >>> from fp_geometry.core.algebra import number as n
        >>> to_pair(origin(n.SEMIRING))
        (0.0, 0.0)
    """
    return Point2d(semiring.zero, semiring.zero)


def xy(x: T, y: T) -> Point2d[T]:
    """
    Точка из явных координат x и y (без преобразований).

    Examples:
        >>> to_pair(xy(3, 8))
        (3, 8)
    """
    return Point2d(x, y)


def of(value: T) -> Point2d[T]:
    """
    Pointed embedding: обе компоненты равны value.

    of(a) == xy(a, a)
    """
    return Point2d(value, value)


def from_record(record: Point2dRecord[T]) -> Point2d[T]:
    """Точка из записи {x, y}."""
    return Point2d(record.x, record.y)


# =============================================================================
# FUNCTOR / APPLICATIVE (pipeable)
# =============================================================================


def map(f: Callable[[T1], T2]) -> Callable[[Point2d[T1]], Point2d[T2]]:
    """
    Применение f к каждой компоненте с сохранением позиции.

    Законы функтора:
        map(identity) == identity
        map(flow(f, g)) == flow(map(f), map(g))

    Исключение из f пробрасывается вызывающему, точка не создаётся.

    Examples:
        >>> pipe(xy(3, 8), map(lambda v: v * 2), to_pair)
        (6, 16)
    """

    def _map(point: Point2d[T1]) -> Point2d[T2]:
        return Point2d(f(point._x), f(point._y))

    return _map


def ap(
    fa: Point2d[T1],
) -> Callable[[Point2d[Callable[[T1], T2]]], Point2d[T2]]:
    """
    Аппликативное применение точки функций к точке аргументов.

    Первая функция применяется к первому аргументу, вторая ко второму:
        ap(xy(x1, x2))(xy(f1, f2)) == xy(f1(x1), f2(x2))

    Законы: identity, homomorphism, interchange, composition
    (см. fp_geometry.core.math.laws).

    Examples:
        >>> pipe(xy(lambda x: -x, lambda y: y), ap(xy(3, 8)), to_pair)
        (-3, 8)
    """

    def _ap(fab: Point2d[Callable[[T1], T2]]) -> Point2d[T2]:
        return Point2d(fab._x(fa._x), fab._y(fa._y))

    return _ap


# =============================================================================
# NON-PIPEABLES
# =============================================================================


def map_(fa: Point2d[T1], f: Callable[[T1], T2]) -> Point2d[T2]:
    return pipe(fa, map(f))


def ap_(fab: Point2d[Callable[[T1], T2]], fa: Point2d[T1]) -> Point2d[T2]:
    return pipe(fab, ap(fa))


# =============================================================================
# INSTANCES
# =============================================================================

URI = "Point2d"

Functor = typeclasses.Functor(uri=URI, map=map_)

Applicative = typeclasses.Applicative(uri=URI, map=map_, of=of, ap=ap_)


# =============================================================================
# DESTRUCTORS
# =============================================================================


def to_pair(point: Point2d[T]) -> Tuple[T, T]:
    """
    Компоненты точки в виде обычной пары (x, y).

    Единственный деструктор Point2d.
    """
    return (point._x, point._y)


def to_record(point: Point2d[T]) -> Point2dRecord[T]:
    """
    Компоненты точки в виде записи {x, y}.

    Examples:
        >>> to_record(xy(3, 8)).model_dump()
        {'x': 3, 'y': 8}
    """
    x, y = to_pair(point)
    return Point2dRecord(x=x, y=y)
