"""Forward/backward pairing of two independent transformations."""
from __future__ import annotations

from typing import Generic, TypeVar

from .transformation import CompositeTransformation, Transformation, ensure_composable

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


class BidirectionalTransform(Generic[A, B]):
    """
    雙向轉換：forward (A -> B) 與 backward (B -> A)

    兩個方向各自獨立提供（例如分別校正得到的兩個矩陣），
    不檢查兩者是否互為反函數，backward(forward(x)) 不保證等於 x。
    """

    __slots__ = ("_forward", "_backward")

    def __init__(self, forward: Transformation[A, B], backward: Transformation[B, A]) -> None:
        """
        Raises:
            CompositionError: forward / backward 的輸入輸出型別對不上
        """
        ensure_composable(forward.output_type, backward.input_type)
        ensure_composable(backward.output_type, forward.input_type)
        self._forward = forward
        self._backward = backward

    @property
    def forward(self) -> Transformation[A, B]:
        return self._forward

    @property
    def backward(self) -> Transformation[B, A]:
        return self._backward

    def transform_forward(self, value: A) -> B:
        return self._forward.transform(value)

    def transform_backward(self, value: B) -> A:
        return self._backward.transform(value)

    def inverse(self) -> "BidirectionalTransform[B, A]":
        """交換兩個方向"""
        return BidirectionalTransform(self._backward, self._forward)

    def compose_after(self, next_transform: "BidirectionalTransform[B, C]") -> "BidirectionalTransform[A, C]":
        """
        串接兩個雙向轉換

        forward 為 self.forward 接 next.forward，
        backward 為 next.backward 接 self.backward。
        """
        return BidirectionalTransform(
            CompositeTransformation(self._forward, next_transform.forward),
            CompositeTransformation(next_transform.backward, self._backward),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(forward={self._forward!r}, backward={self._backward!r})"
