"""
Type-class instance records — Functor / Applicative

Записи операций контейнера, помеченные URI контейнера. Строятся тем же
структурным расширением, что и дескрипторы структур:
    Functor     : uri, map
    Applicative = Functor + of, ap

Операции в записях non-pipeable (uncurried):
    map(fa, f), ap(fab, fa), of(a)
"""

from dataclasses import dataclass
from typing import Any, Callable


@dataclass(frozen=True)
class Functor:
    """Функтор: uri контейнера + map(fa, f)."""

    uri: str
    map: Callable[[Any, Callable[[Any], Any]], Any]


@dataclass(frozen=True)
class Applicative(Functor):
    """Аппликативный функтор: Functor + of(a) + ap(fab, fa)."""

    of: Callable[[Any], Any]
    ap: Callable[[Any, Any], Any]
