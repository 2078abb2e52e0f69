"""
座標表示

- PlanarCoordinate: 一般平面座標 (x, y)，像素座標或真實世界座標
- HomogeneousCoordinate: 齊次座標 (u, v, w)，實際座標為 (u/w, v/w)

兩者皆為不可變的值型別，可與長度 2 / 3 的數值序列互相轉換，
供 MatrixTransform 做矩陣乘法使用。
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterator, Protocol, Sequence, Tuple, TypeVar

from .errors import DegenerateProjectionError, SequenceLengthError


class Scalar(Protocol):
    """座標分量需要的數值能力：加減乘除、絕對值（is_close 使用），以及乘法單位元（見 one_of）"""

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __truediv__(self, other: Any) -> Any: ...

    def __abs__(self) -> Any: ...


T = TypeVar("T", bound=Scalar)


def one_of(value: T) -> T:
    """
    取得與 value 同型別的乘法單位元

    float、int、Fraction、Decimal 以及 numpy 純量皆可用型別建構子取得 1。
    """
    return type(value)(1)


@dataclass(frozen=True)
class PlanarCoordinate(Generic[T]):
    x: T
    y: T

    def to_homogeneous(self) -> "HomogeneousCoordinate[T]":
        """嵌入齊次座標，w 固定為 1（一定成功）"""
        return HomogeneousCoordinate(self.x, self.y, one_of(self.x))

    def to_sequence(self) -> Tuple[T, T]:
        return (self.x, self.y)

    @classmethod
    def from_sequence(cls, values: Sequence[T]) -> "PlanarCoordinate[T]":
        """
        由數值序列建立平面座標

        Args:
            values: 至少 2 個元素的序列（list、tuple 或 numpy array），多餘元素忽略

        Raises:
            SequenceLengthError: 序列長度小於 2
        """
        if len(values) < 2:
            raise SequenceLengthError(expected=2, actual=len(values))
        return cls(values[0], values[1])

    def is_close(self, other: "PlanarCoordinate[T]", tolerance: float = 1e-9) -> bool:
        return abs(self.x - other.x) <= tolerance and abs(self.y - other.y) <= tolerance

    def __iter__(self) -> Iterator[T]:
        yield self.x
        yield self.y


@dataclass(frozen=True)
class HomogeneousCoordinate(Generic[T]):
    u: T  # x * w
    v: T  # y * w
    w: T  # projective scale

    def to_planar(self) -> PlanarCoordinate[T]:
        """
        投影回平面座標 (u/w, v/w)

        Raises:
            DegenerateProjectionError: w 為 0（無窮遠點）
        """
        if self.w == 0:
            raise DegenerateProjectionError(
                f"cannot project homogeneous coordinate ({self.u}, {self.v}, {self.w}) with w = 0"
            )
        return PlanarCoordinate(self.u / self.w, self.v / self.w)

    def to_sequence(self) -> Tuple[T, T, T]:
        return (self.u, self.v, self.w)

    @classmethod
    def from_sequence(cls, values: Sequence[T]) -> "HomogeneousCoordinate[T]":
        """
        由數值序列建立齊次座標

        Raises:
            SequenceLengthError: 序列長度小於 3
        """
        if len(values) < 3:
            raise SequenceLengthError(expected=3, actual=len(values))
        return cls(values[0], values[1], values[2])

    @property
    def is_at_infinity(self) -> bool:
        return self.w == 0


PixelCoordinate = PlanarCoordinate[float]
RealWorldCoordinate = PlanarCoordinate[float]
RectGridCoordinate = PlanarCoordinate[int]
