"""
Laws — механическая проверка законов Functor / Applicative / Semiring / Ring / Field

Законы дескрипторов структур и операций Point2d только документированы и при
создании значений не проверяются. Модуль позволяет проверить их на конечном
наборе образцов (samples) и получить детерминированный результат.

Проверяемые законы:
- Functor: identity, composition
- Applicative: identity, homomorphism, interchange, composition
- Semiring: ассоциативность и коммутативность add, нейтральные элементы,
  ассоциативность mul, дистрибутивность, аннулирование нулём
- Ring: законы Semiring + аддитивная инверсия + согласованность sub
- Field: законы Ring + неотрицательность degree + integral domain +
  quotient/remainder + submultiplicative degree
- Layering: поля нижнего дескриптора присутствуют и идентичны в верхнем

ВАЖНО:
1. Проверка никогда не бросает исключение при нарушении закона, результат
   возвращается как LawCheckResult (нарушение логируется как WARNING)
2. ensure_laws_hold превращает нарушения в LawViolation
3. Исключения из самих операций (например, деление на ноль) НЕ перехватываются
4. NaN никогда не равен сам себе, поэтому NaN в образцах даёт нарушение
"""

import itertools
import logging
from dataclasses import dataclass, fields
from typing import Any, Callable, Iterable, List, Optional, Sequence

from fp_geometry.core.algebra.structures import Field, Ring, Semiring
from fp_geometry.core.domain.point2d import Point2d, ap, map, of, to_pair
from fp_geometry.core.function import flow, identity
from fp_geometry.core.math.tolerance import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    values_close,
)

logger = logging.getLogger(__name__)

# Сколько контрпримеров попадает в details
MAX_REPORTED_COUNTEREXAMPLES = 3


# =============================================================================
# EXCEPTIONS
# =============================================================================


class LawViolation(Exception):
    """
    Нарушение одного или нескольких законов.

    Бросается только ensure_laws_hold; функции check_* возвращают результаты.
    """

    pass


# =============================================================================
# CONFIG / RESULT
# =============================================================================


@dataclass(frozen=True)
class LawCheckConfig:
    """Конфигурация сравнения значений при проверке законов."""

    rel_tol: float = EPS_FLOAT_COMPARE_REL
    abs_tol: float = EPS_FLOAT_COMPARE_ABS
    approximate: bool = True  # False → точное равенство и для float


@dataclass(frozen=True)
class LawCheckResult:
    """Результат проверки одного закона."""

    law: str
    holds: bool
    samples_checked: int
    details: str


# =============================================================================
# HELPERS
# =============================================================================


def _close(a: Any, b: Any, config: LawCheckConfig) -> bool:
    return values_close(
        a,
        b,
        rel_tol=config.rel_tol,
        abs_tol=config.abs_tol,
        approximate=config.approximate,
    )


def _points_close(p: Point2d, q: Point2d, config: LawCheckConfig) -> bool:
    (px, py), (qx, qy) = to_pair(p), to_pair(q)
    return _close(px, qx, config) and _close(py, qy, config)


def _verdict(law: str, counterexamples: List[str], samples_checked: int) -> LawCheckResult:
    if counterexamples:
        details = "; ".join(counterexamples[:MAX_REPORTED_COUNTEREXAMPLES])
        logger.warning(
            "Law violated: %s (%d of %d sample(s)): %s",
            law,
            len(counterexamples),
            samples_checked,
            details,
        )
        return LawCheckResult(law=law, holds=False, samples_checked=samples_checked, details=details)

    logger.debug("Law holds: %s (%d sample(s))", law, samples_checked)
    return LawCheckResult(law=law, holds=True, samples_checked=samples_checked, details="ok")


def _check_equations(
    law: str,
    cases: Iterable[tuple],
    equation: Callable[..., tuple],
    config: LawCheckConfig,
) -> LawCheckResult:
    """
    Проверка уравнения lhs == rhs на каждом наборе аргументов.

    equation(*case) возвращает (lhs, rhs).
    """
    counterexamples: List[str] = []
    checked = 0
    for case in cases:
        checked += 1
        lhs, rhs = equation(*case)
        if not _close(lhs, rhs, config):
            counterexamples.append(f"args={case!r}: {lhs!r} != {rhs!r}")
    return _verdict(law, counterexamples, checked)


# =============================================================================
# FUNCTOR
# =============================================================================


def check_functor_identity(
    points: Sequence[Point2d], config: Optional[LawCheckConfig] = None
) -> LawCheckResult:
    """
    map(identity)(p) == p

    Args:
        points: Точки-образцы
        config: Настройки сравнения

    Returns:
        LawCheckResult("functor.identity", ...)
    """
    config = config or LawCheckConfig()
    counterexamples = [
        f"{p!r} -> {map(identity)(p)!r}"
        for p in points
        if not _points_close(map(identity)(p), p, config)
    ]
    return _verdict("functor.identity", counterexamples, len(points))


def check_functor_composition(
    points: Sequence[Point2d],
    f: Callable[[Any], Any],
    g: Callable[[Any], Any],
    config: Optional[LawCheckConfig] = None,
) -> LawCheckResult:
    """
    map(g)(map(f)(p)) == map(flow(f, g))(p)
    """
    config = config or LawCheckConfig()
    counterexamples = []
    for p in points:
        lhs = map(g)(map(f)(p))
        rhs = map(flow(f, g))(p)
        if not _points_close(lhs, rhs, config):
            counterexamples.append(f"{p!r}: {lhs!r} != {rhs!r}")
    return _verdict("functor.composition", counterexamples, len(points))


# =============================================================================
# APPLICATIVE
# =============================================================================


def check_applicative_identity(
    points: Sequence[Point2d], config: Optional[LawCheckConfig] = None
) -> LawCheckResult:
    """
    ap(p)(of(identity)) == p
    """
    config = config or LawCheckConfig()
    counterexamples = []
    for p in points:
        result = ap(p)(of(identity))
        if not _points_close(result, p, config):
            counterexamples.append(f"{p!r} -> {result!r}")
    return _verdict("applicative.identity", counterexamples, len(points))


def check_applicative_homomorphism(
    values: Sequence[Any],
    f: Callable[[Any], Any],
    config: Optional[LawCheckConfig] = None,
) -> LawCheckResult:
    """
    ap(of(x))(of(f)) == of(f(x))
    """
    config = config or LawCheckConfig()
    counterexamples = []
    for x in values:
        lhs = ap(of(x))(of(f))
        rhs = of(f(x))
        if not _points_close(lhs, rhs, config):
            counterexamples.append(f"x={x!r}: {lhs!r} != {rhs!r}")
    return _verdict("applicative.homomorphism", counterexamples, len(values))


def check_applicative_interchange(
    fab: Point2d,
    values: Sequence[Any],
    config: Optional[LawCheckConfig] = None,
) -> LawCheckResult:
    """
    ap(of(y))(fab) == ap(fab)(of(lambda h: h(y)))

    Args:
        fab: Точка функций
        values: Значения y
    """
    config = config or LawCheckConfig()
    counterexamples = []
    for y in values:
        lhs = ap(of(y))(fab)
        rhs = ap(fab)(of(lambda h, y=y: h(y)))
        if not _points_close(lhs, rhs, config):
            counterexamples.append(f"y={y!r}: {lhs!r} != {rhs!r}")
    return _verdict("applicative.interchange", counterexamples, len(values))


def check_applicative_composition(
    u: Point2d,
    v: Point2d,
    w: Point2d,
    config: Optional[LawCheckConfig] = None,
) -> LawCheckResult:
    """
    ap(w)(ap(v)(ap(u)(of(compose)))) == ap(ap(w)(v))(u)

    где compose = f -> g -> x -> f(g(x)).

    Args:
        u: Точка функций (внешние)
        v: Точка функций (внутренние)
        w: Точка аргументов
    """
    config = config or LawCheckConfig()

    def compose(f: Callable[[Any], Any]) -> Callable[[Callable[[Any], Any]], Callable[[Any], Any]]:
        return lambda g: lambda x: f(g(x))

    lhs = ap(w)(ap(v)(ap(u)(of(compose))))
    rhs = ap(ap(w)(v))(u)
    counterexamples = [] if _points_close(lhs, rhs, config) else [f"{lhs!r} != {rhs!r}"]
    return _verdict("applicative.composition", counterexamples, 1)


# =============================================================================
# SEMIRING / RING / FIELD
# =============================================================================


def check_semiring_laws(
    semiring: Semiring, samples: Sequence[Any], config: Optional[LawCheckConfig] = None
) -> List[LawCheckResult]:
    """
    Проверка законов семикольца на всех парах и тройках из samples.

    Args:
        semiring: Дескриптор (Semiring, Ring или Field)
        samples: Образцы элементов
        config: Настройки сравнения

    Returns:
        Список LawCheckResult, по одному на закон
    """
    config = config or LawCheckConfig()
    S = semiring
    singles = [(a,) for a in samples]
    pairs = list(itertools.product(samples, repeat=2))
    triples = list(itertools.product(samples, repeat=3))

    return [
        _check_equations(
            "semiring.add_associativity",
            triples,
            lambda a, b, c: (S.add(S.add(a, b), c), S.add(a, S.add(b, c))),
            config,
        ),
        _check_equations(
            "semiring.add_commutativity",
            pairs,
            lambda a, b: (S.add(a, b), S.add(b, a)),
            config,
        ),
        _check_equations(
            "semiring.add_left_identity",
            singles,
            lambda a: (S.add(S.zero, a), a),
            config,
        ),
        _check_equations(
            "semiring.add_right_identity",
            singles,
            lambda a: (S.add(a, S.zero), a),
            config,
        ),
        _check_equations(
            "semiring.mul_associativity",
            triples,
            lambda a, b, c: (S.mul(S.mul(a, b), c), S.mul(a, S.mul(b, c))),
            config,
        ),
        _check_equations(
            "semiring.mul_left_identity",
            singles,
            lambda a: (S.mul(S.one, a), a),
            config,
        ),
        _check_equations(
            "semiring.mul_right_identity",
            singles,
            lambda a: (S.mul(a, S.one), a),
            config,
        ),
        _check_equations(
            "semiring.left_distributivity",
            triples,
            lambda a, b, c: (S.mul(a, S.add(b, c)), S.add(S.mul(a, b), S.mul(a, c))),
            config,
        ),
        _check_equations(
            "semiring.right_distributivity",
            triples,
            lambda a, b, c: (S.mul(S.add(a, b), c), S.add(S.mul(a, c), S.mul(b, c))),
            config,
        ),
        _check_equations(
            "semiring.left_annihilation",
            singles,
            lambda a: (S.mul(S.zero, a), S.zero),
            config,
        ),
        _check_equations(
            "semiring.right_annihilation",
            singles,
            lambda a: (S.mul(a, S.zero), S.zero),
            config,
        ),
    ]


def check_ring_laws(
    ring: Ring, samples: Sequence[Any], config: Optional[LawCheckConfig] = None
) -> List[LawCheckResult]:
    """
    Законы семикольца + аддитивная инверсия + согласованность sub.

    - add(a, sub(zero, a)) == zero
    - add(sub(a, b), b) == a
    """
    config = config or LawCheckConfig()
    R = ring
    pairs = list(itertools.product(samples, repeat=2))

    return check_semiring_laws(R, samples, config) + [
        _check_equations(
            "ring.additive_inverse",
            [(a,) for a in samples],
            lambda a: (R.add(a, R.sub(R.zero, a)), R.zero),
            config,
        ),
        _check_equations(
            "ring.sub_consistency",
            pairs,
            lambda a, b: (R.add(R.sub(a, b), b), a),
            config,
        ),
    ]


def check_field_laws(
    field: Field, samples: Sequence[Any], config: Optional[LawCheckConfig] = None
) -> List[LawCheckResult]:
    """
    Законы кольца + euclidean-законы поля.

    - degree(a) >= 0
    - one != zero; a != zero и b != zero ⇒ mul(a, b) != zero
    - b != zero ⇒ a == add(mul(div(a, b), b), mod(a, b))
    - a != zero и b != zero ⇒ degree(a) <= degree(mul(a, b))

    Пары с b == zero пропускаются: поведение div на нуле определяется
    скалярным типом.
    """
    config = config or LawCheckConfig()
    F = field
    nonzero = [a for a in samples if not _close(a, F.zero, config)]
    pairs = list(itertools.product(samples, nonzero))
    nonzero_pairs = list(itertools.product(nonzero, repeat=2))

    degree_violations = [
        f"a={a!r}: degree={F.degree(a)!r}" for a in samples if F.degree(a) < 0
    ]

    domain_violations = []
    if _close(F.one, F.zero, config):
        domain_violations.append(f"one={F.one!r} == zero={F.zero!r}")
    for a, b in nonzero_pairs:
        product = F.mul(a, b)
        if _close(product, F.zero, config):
            domain_violations.append(f"args={(a, b)!r}: {product!r} == zero")

    submultiplicative_violations = []
    for a, b in nonzero_pairs:
        if F.degree(a) > F.degree(F.mul(a, b)):
            submultiplicative_violations.append(
                f"args={(a, b)!r}: degree(a)={F.degree(a)!r} > degree(a*b)={F.degree(F.mul(a, b))!r}"
            )

    return check_ring_laws(F, samples, config) + [
        _verdict("field.degree_non_negative", degree_violations, len(samples)),
        _verdict("field.integral_domain", domain_violations, len(nonzero_pairs) + 1),
        _check_equations(
            "field.quotient_remainder",
            pairs,
            lambda a, b: (F.add(F.mul(F.div(a, b), b), F.mod(a, b)), a),
            config,
        ),
        _verdict("field.submultiplicative", submultiplicative_violations, len(nonzero_pairs)),
    ]


# =============================================================================
# LAYERING
# =============================================================================


def check_descriptor_layering(lower: Semiring, higher: Semiring) -> LawCheckResult:
    """
    Проверка структурного расширения: каждое поле lower присутствует в higher
    и идентично (is или ==).

    Examples:
        >>> from fp_geometry.core.algebra import number as n
        >>> check_descriptor_layering(n.SEMIRING, n.FIELD).holds
        True
    """
    counterexamples = []
    if not isinstance(higher, type(lower)):
        counterexamples.append(
            f"{type(higher).__name__} does not extend {type(lower).__name__}"
        )

    lower_fields = fields(lower)
    for f in lower_fields:
        if not hasattr(higher, f.name):
            counterexamples.append(f"missing field {f.name!r}")
            continue
        inherited = getattr(higher, f.name)
        original = getattr(lower, f.name)
        if inherited is not original and inherited != original:
            counterexamples.append(f"field {f.name!r} redefined: {inherited!r} != {original!r}")

    return _verdict("descriptor.layering", counterexamples, len(lower_fields))


# =============================================================================
# ENFORCEMENT
# =============================================================================


def ensure_laws_hold(results: Iterable[LawCheckResult]) -> None:
    """
    Проверка, что все законы выполнены.

    Raises:
        LawViolation: Если хотя бы один результат holds=False
    """
    failed = [r for r in results if not r.holds]
    if failed:
        raise LawViolation(
            f"{len(failed)} law(s) violated: "
            + "; ".join(f"{r.law}: {r.details}" for r in failed)
        )
