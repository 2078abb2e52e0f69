"""
矩陣轉換

MatrixTransform 包裝一個形狀固定的 numpy 矩陣，建構時檢查形狀，
之後不可再修改。對向量做 matrix @ vector；透過 homogeneous() / planar()
取得作用在齊次座標 / 平面座標上的轉換。

3x3 矩陣作用在齊次座標上即為單應性（homography）轉換：
旋轉、縮放、錯切、平移與透視都在一次矩陣乘法中完成。
"""
from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

from .coordinates import HomogeneousCoordinate, PlanarCoordinate
from .errors import DegenerateProjectionError, InvalidMatrixDimensionError, SequenceLengthError
from .transformation import Transformation

HOMOGRAPHY_SHAPE: Tuple[int, int] = (3, 3)
PROJECTION_SHAPE: Tuple[int, int] = (3, 4)


class MatrixTransform(Transformation[np.ndarray, np.ndarray]):
    """
    形狀為 (rows, cols) 的線性轉換，把長度 cols 的向量映射成長度 rows 的向量

    形狀只在建構時檢查一次，之後矩陣為唯讀。
    """

    __slots__ = ("_matrix", "_shape")

    def __init__(self, matrix, shape: Sequence[int]) -> None:
        """
        Args:
            matrix: 二維數值矩陣（numpy array 或巢狀 list）
            shape: 宣告的形狀 (rows, cols)，必須與 matrix 完全相同

        Raises:
            InvalidMatrixDimensionError: matrix 形狀與 shape 不符
        """
        expected = tuple(int(dim) for dim in shape)
        try:
            array = np.array(matrix, copy=True)
        except ValueError as exc:
            # ragged nested lists
            raise InvalidMatrixDimensionError(expected=expected, actual=(len(matrix),)) from exc

        if array.shape != expected:
            raise InvalidMatrixDimensionError(expected=expected, actual=array.shape)

        array.setflags(write=False)
        self._matrix = array
        self._shape = expected

    @classmethod
    def homography(cls, matrix) -> "MatrixTransform":
        """建立 3x3 單應性矩陣轉換"""
        return cls(matrix, HOMOGRAPHY_SHAPE)

    @property
    def matrix(self) -> np.ndarray:
        return self._matrix

    @property
    def shape(self) -> Tuple[int, ...]:
        return self._shape

    @property
    def in_dim(self) -> int:
        return self._shape[1]

    @property
    def out_dim(self) -> int:
        return self._shape[0]

    @property
    def input_type(self) -> type:
        return np.ndarray

    @property
    def output_type(self) -> type:
        return np.ndarray

    def transform(self, value) -> np.ndarray:
        """
        矩陣與向量相乘

        Args:
            value: 長度 in_dim 的向量

        Returns:
            長度 out_dim 的 numpy 向量

        Raises:
            SequenceLengthError: 向量長度與 in_dim 不符
        """
        vector = np.asarray(value)
        if vector.ndim != 1 or vector.shape[0] != self.in_dim:
            raise SequenceLengthError(expected=self.in_dim, actual=vector.size)
        return self._matrix @ vector

    def homogeneous(self) -> "HomogeneousMatrixTransform":
        return HomogeneousMatrixTransform(self)

    def planar(self) -> "PlanarMatrixTransform":
        return PlanarMatrixTransform(self)

    def __repr__(self) -> str:
        return f"MatrixTransform(shape={self._shape[0]}x{self._shape[1]})"


def _require_homogeneous_shape(matrix_transform: MatrixTransform) -> None:
    if matrix_transform.shape != HOMOGRAPHY_SHAPE:
        raise InvalidMatrixDimensionError(expected=HOMOGRAPHY_SHAPE, actual=matrix_transform.shape)


class HomogeneousMatrixTransform(Transformation[HomogeneousCoordinate, HomogeneousCoordinate]):
    """把 MatrixTransform 套用在齊次座標上：攤平 -> 相乘 -> 重建"""

    __slots__ = ("_matrix_transform",)

    def __init__(self, matrix_transform: MatrixTransform) -> None:
        _require_homogeneous_shape(matrix_transform)
        self._matrix_transform = matrix_transform

    @property
    def matrix_transform(self) -> MatrixTransform:
        return self._matrix_transform

    @property
    def input_type(self) -> type:
        return HomogeneousCoordinate

    @property
    def output_type(self) -> type:
        return HomogeneousCoordinate

    def transform(self, value: HomogeneousCoordinate) -> HomogeneousCoordinate:
        result = self._matrix_transform.transform(np.asarray(value.to_sequence()))
        return HomogeneousCoordinate.from_sequence(result.tolist())

    def __repr__(self) -> str:
        return f"HomogeneousMatrixTransform({self._matrix_transform!r})"


class PlanarMatrixTransform(Transformation[PlanarCoordinate, PlanarCoordinate]):
    """
    把 MatrixTransform 套用在平面座標上：嵌入齊次座標 -> 相乘 -> 除以 w

    結果的 w 為 0 時拋出 DegenerateProjectionError。
    """

    __slots__ = ("_homogeneous",)

    def __init__(self, matrix_transform: MatrixTransform) -> None:
        self._homogeneous = HomogeneousMatrixTransform(matrix_transform)

    @property
    def matrix_transform(self) -> MatrixTransform:
        return self._homogeneous.matrix_transform

    @property
    def input_type(self) -> type:
        return PlanarCoordinate

    @property
    def output_type(self) -> type:
        return PlanarCoordinate

    def transform(self, value: PlanarCoordinate) -> PlanarCoordinate:
        return self._homogeneous.transform(value.to_homogeneous()).to_planar()

    def transform_points(self, points) -> np.ndarray:
        """
        批次轉換點

        Args:
            points: 座標點陣列 Nx2

        Returns:
            轉換後的座標點陣列 Nx2

        Raises:
            ValueError: points 不是 Nx2
            DegenerateProjectionError: 任一點轉換後 w 為 0
        """
        points = np.asarray(points, dtype=float)
        if points.ndim != 2 or points.shape[1] != 2:
            raise ValueError(f"points must be an Nx2 array, got shape {points.shape}")

        matrix = self.matrix_transform.matrix.astype(float)
        pts = np.hstack([points, np.ones((points.shape[0], 1))])
        transformed = (matrix @ pts.T).T
        degenerate = transformed[:, 2] == 0
        if np.any(degenerate):
            rows = np.flatnonzero(degenerate).tolist()
            raise DegenerateProjectionError(f"points at rows {rows} project to w = 0")
        return transformed[:, :2] / transformed[:, [2]]

    def __repr__(self) -> str:
        return f"PlanarMatrixTransform({self.matrix_transform!r})"
