"""Test the pixel <-> real-world homography transform.

Tests for coordmap.core.screen_transform:
    - identity matrices leave (5, -3) unchanged in both directions
    - bench homography maps real (600, 100) to pixel (757.000, 51.311)
    - non-3x3 matrices rejected by from_matrices and the constructor
    - batch forms agree with single-point forms
    - w = 0 during projection raises DegenerateProjectionError
    - building a transform leaves existing loguru sinks alone

Run:
    pytest tests/test_screen_transform.py -v
"""

from __future__ import annotations

import numpy as np
import pytest
from loguru import logger

from coordmap.core import (
    BidirectionalTransform,
    DegenerateProjectionError,
    InvalidMatrixDimensionError,
    MatrixTransform,
    PixelCoordinate,
    PlanarCoordinate,
    RealWorldCoordinate,
    ScreenToRealWorldTransform,
)
from coordmap.utils.logger import LoggerManager


class TestIdentity:
    def test_pixel_to_real(self) -> None:
        transform = ScreenToRealWorldTransform.from_matrices(np.zeros((3, 3)), np.eye(3))
        result = transform.pixel_to_real(PixelCoordinate(5.0, -3.0))
        assert (result.x, result.y) == pytest.approx((5.0, -3.0), abs=0.01)

    def test_real_to_pixel(self) -> None:
        transform = ScreenToRealWorldTransform.from_matrices(np.eye(3), np.zeros((3, 3)))
        result = transform.real_to_pixel(RealWorldCoordinate(5.0, -3.0))
        assert (result.x, result.y) == pytest.approx((5.0, -3.0), abs=0.01)


class TestBenchHomography:
    def test_real_to_pixel(self, bench_to_pixel) -> None:
        transform = ScreenToRealWorldTransform.from_matrices(bench_to_pixel, np.zeros((3, 3)))
        pixel = transform.real_to_pixel(RealWorldCoordinate(600.0, 100.0))
        assert pixel.x == pytest.approx(757.000, abs=1e-3)
        assert pixel.y == pytest.approx(51.311, abs=1e-3)

    def test_pixel_to_real_with_inverse(self, bench_to_pixel) -> None:
        transform = ScreenToRealWorldTransform.from_matrices(bench_to_pixel, np.linalg.inv(bench_to_pixel))
        real = transform.pixel_to_real(PixelCoordinate(757.0, 51.3108))
        assert real.x == pytest.approx(600.0, abs=0.01)
        assert real.y == pytest.approx(100.0, abs=0.01)

    def test_batch_agrees(self, bench_to_pixel) -> None:
        transform = ScreenToRealWorldTransform.from_matrices(bench_to_pixel, np.linalg.inv(bench_to_pixel))
        reals = np.array([[600.0, 100.0], [200.0, 300.0], [0.0, 0.0]])
        pixels = transform.reals_to_pixel(reals)
        for real, pixel in zip(reals, pixels):
            single = transform.real_to_pixel(PlanarCoordinate(*real))
            assert tuple(pixel) == pytest.approx((single.x, single.y))
        np.testing.assert_allclose(transform.pixels_to_real(pixels), reals, atol=1e-6)


class TestValidation:
    @pytest.mark.parametrize(
        "to_pixel, to_real",
        [
            (np.zeros((3, 4)), np.eye(3)),
            (np.eye(3), np.zeros((2, 2))),
            (np.zeros((4, 4)), np.zeros((4, 4))),
        ],
    )
    def test_from_matrices_rejects_wrong_shapes(self, to_pixel, to_real) -> None:
        with pytest.raises(InvalidMatrixDimensionError) as exc_info:
            ScreenToRealWorldTransform.from_matrices(to_pixel, to_real)
        assert exc_info.value.expected == (3, 3)

    def test_constructor_rejects_projection_matrix(self) -> None:
        projection = MatrixTransform(np.zeros((3, 4)), (3, 4))
        with pytest.raises(InvalidMatrixDimensionError):
            ScreenToRealWorldTransform(projection, MatrixTransform.homography(np.eye(3)))

    def test_matrices_not_checked_for_inverse(self) -> None:
        # any pair of 3x3 matrices is accepted
        transform = ScreenToRealWorldTransform.from_matrices(np.eye(3), 5.0 * np.eye(3))
        assert isinstance(transform, BidirectionalTransform)


class TestDegenerate:
    def test_zero_matrix_projection(self) -> None:
        transform = ScreenToRealWorldTransform.from_matrices(np.eye(3), np.zeros((3, 3)))
        with pytest.raises(DegenerateProjectionError):
            transform.pixel_to_real(PixelCoordinate(1.0, 1.0))

    def test_batch_zero_matrix_projection(self) -> None:
        transform = ScreenToRealWorldTransform.from_matrices(np.zeros((3, 3)), np.eye(3))
        with pytest.raises(DegenerateProjectionError):
            transform.reals_to_pixel([[1.0, 1.0]])


class TestAccessors:
    def test_matrices_exposed_read_only(self, bench_to_pixel) -> None:
        transform = ScreenToRealWorldTransform.from_matrices(bench_to_pixel, np.eye(3))
        np.testing.assert_allclose(transform.to_pixel_matrix, bench_to_pixel)
        np.testing.assert_allclose(transform.to_real_matrix, np.eye(3))
        with pytest.raises(ValueError):
            transform.to_real_matrix[0, 0] = 2.0

    def test_inverse_maps_real_to_pixel_forward(self, bench_to_pixel) -> None:
        transform = ScreenToRealWorldTransform.from_matrices(bench_to_pixel, np.eye(3))
        inverted = transform.inverse()
        pixel = inverted.transform_forward(PlanarCoordinate(600.0, 100.0))
        assert pixel.x == pytest.approx(757.000, abs=1e-3)


class TestHostLogging:
    def test_from_matrices_keeps_existing_sinks(self) -> None:
        LoggerManager.shutdown()
        seen = []
        handler_id = logger.add(lambda message: seen.append(message.record["message"]), level="DEBUG")
        try:
            transform = ScreenToRealWorldTransform.from_matrices(np.eye(3), np.eye(3))
            transform.pixel_to_real(PixelCoordinate(1.0, 2.0))
            logger.info("detector message")
        finally:
            logger.remove(handler_id)
        assert seen == ["detector message"]
