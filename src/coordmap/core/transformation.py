"""
轉換能力（Transformation）與串接（CompositeTransformation）

任何提供 transform(A) -> B 的物件都是「A 到 B 的轉換」。
每個轉換以 input_type / output_type 宣告自己的輸入/輸出型別，
串接時只在建立當下檢查一次中間型別，呼叫 transform 時不再檢查。
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from .errors import CompositionError

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


def ensure_composable(produced: type, expected: type) -> None:
    """確認上一段的輸出型別可以餵給下一段"""
    if not issubclass(produced, expected):
        raise CompositionError(
            f"cannot chain a transformation producing {produced.__name__} "
            f"into one expecting {expected.__name__}"
        )


class Transformation(ABC, Generic[A, B]):
    """單向轉換 A -> B"""

    __slots__ = ()

    @property
    @abstractmethod
    def input_type(self) -> type:
        """transform() 接受的座標型別"""

    @property
    @abstractmethod
    def output_type(self) -> type:
        """transform() 回傳的座標型別"""

    @abstractmethod
    def transform(self, value: A) -> B:
        """套用轉換"""

    def compose_after(self, next_transform: "Transformation[B, C]") -> "CompositeTransformation[A, B, C]":
        """
        先套用 self，再套用 next_transform

        Args:
            next_transform: B -> C 的轉換

        Returns:
            A -> C 的 CompositeTransformation

        Raises:
            CompositionError: self.output_type 與 next_transform.input_type 不相容
        """
        return CompositeTransformation(self, next_transform)

    def compose_before(self, previous_transform: "Transformation[C, A]") -> "CompositeTransformation[C, A, B]":
        """先套用 previous_transform，再套用 self"""
        return CompositeTransformation(previous_transform, self)


class CompositeTransformation(Transformation[A, C], Generic[A, B, C]):
    """兩個轉換的串接 first: A -> B, second: B -> C，不做任何快取"""

    __slots__ = ("_first", "_second")

    def __init__(self, first: Transformation[A, B], second: Transformation[B, C]) -> None:
        ensure_composable(first.output_type, second.input_type)
        self._first = first
        self._second = second

    @property
    def first(self) -> Transformation[A, B]:
        return self._first

    @property
    def second(self) -> Transformation[B, C]:
        return self._second

    @property
    def intermediate_type(self) -> type:
        return self._first.output_type

    @property
    def input_type(self) -> type:
        return self._first.input_type

    @property
    def output_type(self) -> type:
        return self._second.output_type

    def transform(self, value: A) -> C:
        intermediate = self._first.transform(value)
        return self._second.transform(intermediate)

    def __repr__(self) -> str:
        return f"CompositeTransformation({self._first!r}, {self._second!r})"
