"""
座標轉換核心

提供：
- PlanarCoordinate / HomogeneousCoordinate: 平面與齊次座標
- MatrixTransform: 形狀固定、建構時檢查的矩陣轉換
- Transformation / CompositeTransformation: 單向轉換與串接
- BidirectionalTransform: 正向/反向各自獨立的雙向轉換
- ScreenToRealWorldTransform: 像素 ↔ 真實世界平面的單應性轉換
"""

from .bidirectional import BidirectionalTransform
from .coordinates import (
    HomogeneousCoordinate,
    PixelCoordinate,
    PlanarCoordinate,
    RealWorldCoordinate,
    RectGridCoordinate,
    Scalar,
    one_of,
)
from .errors import (
    CompositionError,
    DegenerateProjectionError,
    InvalidMatrixDimensionError,
    SequenceLengthError,
    TransformError,
)
from .matrix_transform import (
    HOMOGRAPHY_SHAPE,
    PROJECTION_SHAPE,
    HomogeneousMatrixTransform,
    MatrixTransform,
    PlanarMatrixTransform,
)
from .screen_transform import ScreenToRealWorldTransform
from .transformation import CompositeTransformation, Transformation

__all__ = [
    'BidirectionalTransform',
    'CompositeTransformation',
    'CompositionError',
    'DegenerateProjectionError',
    'HOMOGRAPHY_SHAPE',
    'HomogeneousCoordinate',
    'HomogeneousMatrixTransform',
    'InvalidMatrixDimensionError',
    'MatrixTransform',
    'PROJECTION_SHAPE',
    'PixelCoordinate',
    'PlanarCoordinate',
    'PlanarMatrixTransform',
    'RealWorldCoordinate',
    'RectGridCoordinate',
    'Scalar',
    'ScreenToRealWorldTransform',
    'SequenceLengthError',
    'Transformation',
    'TransformError',
    'one_of',
]
