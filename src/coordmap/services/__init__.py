"""
座標轉換服務

- CoordinateTransformer: 依配置為每個攝影機建立像素 ↔ 真實世界轉換
"""

from .coordinate_transformer import CoordinateTransformer

__all__ = [
    'CoordinateTransformer',
]
