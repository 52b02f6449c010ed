"""
Point2dRecord — запись {x, y} для Point2d

Immutable Pydantic модель, представляющая точку в виде обычной записи
с именованными координатами. Используется для сериализации
(model_dump / model_dump_json) и обратного построения точки.

Сама точка Point2d остаётся непрозрачной: запись получается только через
to_record и превращается обратно в точку только через from_record.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class Point2dRecord(BaseModel, Generic[T]):
    """
    Запись координат точки.

    Immutable модель (frozen=True): изменения создают новый экземпляр.
    """

    x: T = Field(..., description="Первая компонента точки")
    y: T = Field(..., description="Вторая компонента точки")

    model_config = {"frozen": True}  # Immutable
