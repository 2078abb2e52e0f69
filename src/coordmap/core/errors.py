"""Exception hierarchy for the coordinate transform core."""
from __future__ import annotations

from typing import Tuple


class TransformError(Exception):
    """座標轉換相關錯誤的共同基底類別"""


class InvalidMatrixDimensionError(TransformError, ValueError):
    """矩陣形狀與宣告的維度不符"""

    def __init__(self, expected: Tuple[int, ...], actual: Tuple[int, ...]) -> None:
        self.expected = tuple(expected)
        self.actual = tuple(actual)
        super().__init__(
            f"expected transform with shape {_fmt_shape(self.expected)} "
            f"but received {_fmt_shape(self.actual)}"
        )


class SequenceLengthError(TransformError, ValueError):
    """數值序列長度不足以建立座標（或與矩陣維度不符）"""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected sequence of length {expected} but was {actual}")


class DegenerateProjectionError(TransformError, ZeroDivisionError):
    """齊次座標 w = 0，無法投影回平面座標"""


class CompositionError(TransformError, TypeError):
    """串接的兩個轉換，其輸出/輸入型別不一致"""


def _fmt_shape(shape: Tuple[int, ...]) -> str:
    return "x".join(str(dim) for dim in shape) or "scalar"
