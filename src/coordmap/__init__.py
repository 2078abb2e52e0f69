"""coordmap: pixel ↔ real-world planar coordinate mapping via composable homographies.

Layers (one-way dependency):
    services/ → config/, core/ → utils/
"""

from coordmap.core import (
    BidirectionalTransform,
    CompositeTransformation,
    HomogeneousCoordinate,
    MatrixTransform,
    PlanarCoordinate,
    ScreenToRealWorldTransform,
    Transformation,
)

__version__ = "0.1.0"

__all__ = [
    "BidirectionalTransform",
    "CompositeTransformation",
    "HomogeneousCoordinate",
    "MatrixTransform",
    "PlanarCoordinate",
    "ScreenToRealWorldTransform",
    "Transformation",
    "__version__",
]
