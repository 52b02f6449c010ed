"""
Function helpers — композиция функций для pipeable API

Модуль содержит минимальный набор функций, на которых построен pipeable стиль
операций над Point2d:
- identity: тождественная функция (используется в законах функтора)
- pipe: последовательное применение функций к значению (слева направо)
- flow: композиция функций слева направо без начального значения

Все функции чистые и не имеют побочных эффектов.
"""

from typing import Any, Callable, TypeVar

A = TypeVar("A")


def identity(a: A) -> A:
    """
    Тождественная функция.

    Examples:
        >>> identity(3)
        3
    """
    return a


def pipe(value: Any, *fns: Callable[[Any], Any]) -> Any:
    """
    Применение функций к значению слева направо.

    pipe(a, f, g) == g(f(a))

    Args:
        value: Начальное значение
        *fns: Унарные функции, применяемые по порядку

    Returns:
        Результат последней функции (или value, если функций нет)

    Examples:
        >>> pipe(2, lambda x: x + 1, str)
        '3'
    """
    result = value
    for fn in fns:
        result = fn(result)
    return result


def flow(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """
    Композиция функций слева направо.

    flow(f, g)(a) == g(f(a)); flow() ведёт себя как identity.

    Examples:
        >>> flow(lambda x: x * 2, lambda x: x - 1)(5)
        9
    """

    def composed(value: Any) -> Any:
        return pipe(value, *fns)

    return composed
