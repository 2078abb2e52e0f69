"""
像素座標 ↔ 真實世界平面座標

ScreenToRealWorldTransform 是平面座標上的 BidirectionalTransform，
由兩個 3x3 單應性矩陣組成：
- forward:  像素 -> 真實世界（to_real 矩陣）
- backward: 真實世界 -> 像素（to_pixel 矩陣）

兩個矩陣各自校正得到，不要求互為反矩陣。
"""
from __future__ import annotations

import numpy as np

from .bidirectional import BidirectionalTransform
from .coordinates import PixelCoordinate, PlanarCoordinate, RealWorldCoordinate
from .errors import InvalidMatrixDimensionError
from .matrix_transform import HOMOGRAPHY_SHAPE, MatrixTransform


class ScreenToRealWorldTransform(BidirectionalTransform[PlanarCoordinate, PlanarCoordinate]):
    __slots__ = ()

    def __init__(self, pixel_to_real: MatrixTransform, real_to_pixel: MatrixTransform) -> None:
        for matrix_transform in (pixel_to_real, real_to_pixel):
            if matrix_transform.shape != HOMOGRAPHY_SHAPE:
                raise InvalidMatrixDimensionError(expected=HOMOGRAPHY_SHAPE, actual=matrix_transform.shape)
        super().__init__(pixel_to_real.planar(), real_to_pixel.planar())

    @classmethod
    def from_matrices(cls, to_pixel, to_real) -> "ScreenToRealWorldTransform":
        """
        由兩個 3x3 矩陣建立轉換

        Args:
            to_pixel: 真實世界 -> 像素 的單應性矩陣
            to_real: 像素 -> 真實世界 的單應性矩陣

        Returns:
            ScreenToRealWorldTransform

        Raises:
            InvalidMatrixDimensionError: 任一矩陣不是 3x3
        """
        real_to_pixel = MatrixTransform.homography(to_pixel)
        pixel_to_real = MatrixTransform.homography(to_real)
        return cls(pixel_to_real, real_to_pixel)

    @property
    def to_pixel_matrix(self) -> np.ndarray:
        return self.backward.matrix_transform.matrix

    @property
    def to_real_matrix(self) -> np.ndarray:
        return self.forward.matrix_transform.matrix

    def pixel_to_real(self, coord: PixelCoordinate) -> RealWorldCoordinate:
        """像素座標 -> 真實世界座標（除以轉換後的 w）"""
        return self.transform_forward(coord)

    def real_to_pixel(self, coord: RealWorldCoordinate) -> PixelCoordinate:
        """真實世界座標 -> 像素座標"""
        return self.transform_backward(coord)

    def pixels_to_real(self, points) -> np.ndarray:
        """批次轉換 Nx2 像素座標"""
        return self.forward.transform_points(points)

    def reals_to_pixel(self, points) -> np.ndarray:
        """批次轉換 Nx2 真實世界座標"""
        return self.backward.transform_points(points)
