"""
Тесты для дескрипторов алгебраических структур и float-инстансов

Проверяет:
1. Структурное расширение Semiring → Ring → Field
2. Идентичность унаследованных полей (layering)
3. Immutability дескрипторов
4. Float-инстансы: делегирование нативным операторам
5. Заглушки degree / mod и поведение div на нуле
"""

import dataclasses

import pytest

from fp_geometry.core.algebra import (
    Field,
    Ring,
    Semiring,
    extend_ring,
    extend_semiring,
)
from fp_geometry.core.algebra import number as n


@pytest.fixture
def int_semiring() -> Semiring[int]:
    """Семикольцо целых чисел"""
    return Semiring(zero=0, one=1, add=lambda a, b: a + b, mul=lambda a, b: a * b)


# =============================================================================
# EXTENSION
# =============================================================================


class TestExtension:
    """Тесты построения дескрипторов расширением"""

    def test_extend_semiring_copies_fields(self, int_semiring: Semiring[int]) -> None:
        ring = extend_semiring(int_semiring, sub=lambda a, b: a - b)
        assert isinstance(ring, Ring)
        assert ring.zero == int_semiring.zero
        assert ring.one == int_semiring.one
        assert ring.add is int_semiring.add
        assert ring.mul is int_semiring.mul
        assert ring.sub(5, 3) == 2

    def test_extend_ring_copies_fields(self, int_semiring: Semiring[int]) -> None:
        ring = extend_semiring(int_semiring, sub=lambda a, b: a - b)
        field = extend_ring(
            ring,
            div=lambda a, b: a // b,
            degree=abs,
            mod=lambda a, b: a % b,
        )
        assert isinstance(field, Field)
        assert field.sub is ring.sub
        assert field.add is int_semiring.add
        assert field.mod(7, 3) == 1
        assert field.degree(-4) == 4

    def test_extend_semiring_from_field_keeps_semiring_fields_only(self) -> None:
        """Из Field в extend_semiring копируются только поля семикольца"""
        ring = extend_semiring(n.FIELD, sub=lambda a, b: b - a)
        assert type(ring) is Ring
        assert ring.add is n.FIELD.add
        assert ring.sub(1.0, 3.0) == 2.0

    def test_inherited_fields_cannot_be_redefined(self, int_semiring: Semiring[int]) -> None:
        """Унаследованное поле нельзя передать повторно"""
        with pytest.raises(TypeError):
            extend_semiring(int_semiring, sub=lambda a, b: a - b, add=lambda a, b: 0)  # type: ignore[call-arg]

    def test_field_is_ring_and_semiring(self) -> None:
        assert isinstance(n.FIELD, Field)
        assert isinstance(n.FIELD, Ring)
        assert isinstance(n.FIELD, Semiring)

    def test_descriptor_is_frozen(self, int_semiring: Semiring[int]) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            int_semiring.zero = 10  # type: ignore[misc]

    def test_field_declares_only_new_fields(self) -> None:
        names = [f.name for f in dataclasses.fields(Field)]
        assert names == ["zero", "one", "add", "mul", "sub", "div", "degree", "mod"]


# =============================================================================
# NUMBER INSTANCES
# =============================================================================


class TestNumberLayering:
    """Поля семикольца идентичны в кольце и поле"""

    @pytest.mark.parametrize("name", ["zero", "one", "add", "mul"])
    def test_semiring_fields_shared(self, name: str) -> None:
        assert getattr(n.RING, name) is getattr(n.SEMIRING, name)
        assert getattr(n.FIELD, name) is getattr(n.SEMIRING, name)

    def test_ring_field_shared(self) -> None:
        assert n.FIELD.sub is n.RING.sub


class TestNumberCombinators:
    """Каррированные комбинаторы"""

    def test_constants(self) -> None:
        assert n.ZERO == 0.0
        assert n.ONE == 1.0

    def test_add(self) -> None:
        assert n.add(2.0)(3.0) == 5.0

    def test_sub_order(self) -> None:
        """sub(x1)(x2) == x1 - x2"""
        assert n.sub(10.0)(4.0) == 6.0

    def test_mul(self) -> None:
        assert n.mul(2.5)(4.0) == 10.0

    def test_div_order(self) -> None:
        """div(x1)(x2) == x1 / x2"""
        assert n.div(1.0)(4.0) == 0.25


class TestNumberInstances:
    """Операции float-инстансов"""

    def test_semiring_operations(self) -> None:
        assert n.SEMIRING.add(1.5, 2.5) == 4.0
        assert n.SEMIRING.mul(1.5, 2.0) == 3.0

    def test_ring_sub(self) -> None:
        assert n.RING.sub(1.0, 3.0) == -2.0

    def test_field_div(self) -> None:
        assert n.FIELD.div(9.0, 3.0) == 3.0

    def test_field_degree_placeholder(self) -> None:
        """degree всегда 1"""
        assert n.FIELD.degree(0.0) == 1
        assert n.FIELD.degree(-123.4) == 1

    def test_field_mod_placeholder(self) -> None:
        """mod всегда 0.0"""
        assert n.FIELD.mod(7.0, 3.0) == 0.0
        assert n.FIELD.mod(1.0, 0.0) == 0.0

    def test_div_by_zero_native_semantics(self) -> None:
        """Деление на ноль не валидируется: нативное поведение float"""
        with pytest.raises(ZeroDivisionError):
            n.FIELD.div(1.0, 0.0)

    def test_float_overflow_not_guarded(self) -> None:
        """Переполнение float не обрабатывается (non law abiding)"""
        assert n.SEMIRING.mul(1e308, 10.0) == float("inf")
