import numpy as np
from typing import Dict, List, Optional, Sequence, Union
from pathlib import Path

from coordmap.config.loader import load_coordmap_config
from coordmap.config.schema import BaseConfig, CameraTransformConfig
from coordmap.config.settings import AppSettings, load_settings
from coordmap.core import PlanarCoordinate, ScreenToRealWorldTransform
from coordmap.utils.logger import LoggerManager, get_logger
from coordmap.utils.paths import set_config_root

PointLike = Union[PlanarCoordinate, Sequence[float]]


class CoordinateTransformer:
    """
    統一的座標轉換器
    處理多攝影機系統的座標轉換：像素座標 ↔ 真實世界平面座標

    每個啟用的攝影機對應一個 ScreenToRealWorldTransform，
    矩陣來源（設定檔內嵌或 .npy 檔案）由 CameraTransformConfig 指定。
    """

    def __init__(self, config: BaseConfig):
        """
        初始化座標轉換器

        Args:
            config: 配置物件，包含各攝影機的矩陣設定
        """
        self.logger = get_logger(
            name="coordinate_transformer",
            log_file="coordinate_transformer"
        )
        self.config = config
        self.transforms: Dict[str, ScreenToRealWorldTransform] = {}

        self._initialize_transforms()

    @classmethod
    def from_settings(cls, settings: Optional[AppSettings] = None) -> "CoordinateTransformer":
        """
        依環境設定載入配置檔、設定 logger 並建立轉換器

        Args:
            settings: AppSettings，None 時由環境變數（與 .env）讀取
        """
        settings = settings or load_settings()
        if settings.config_root:
            set_config_root(settings.config_root)

        config = load_coordmap_config(settings.config_path)

        overrides = {}
        if settings.log_level:
            overrides["level"] = settings.log_level
        if settings.log_dir:
            overrides["log_dir"] = settings.log_dir
        logging_config = config.logging.model_copy(update=overrides) if overrides else config.logging
        LoggerManager.configure(logging_config)

        return cls(config)

    def _initialize_transforms(self) -> None:
        """初始化各攝影機的座標轉換"""
        cameras = self.config.cameras
        self.logger.info(f"初始化 {len(cameras)} 個攝影機的座標轉換")

        for camera in cameras:
            if not camera.enabled:
                self.logger.warning(f"攝影機 {camera.camera_id} 已停用")
                continue

            try:
                self.transforms[camera.camera_id] = self._create_transform(camera)
                self.logger.info(f"成功載入攝影機 {camera.camera_id} 的座標轉換")
            except (OSError, ValueError) as e:
                self.logger.exception(f"載入攝影機 {camera.camera_id} 的座標轉換失敗: {e}")

        self.logger.info(f"已初始化 {len(self.transforms)} 個座標轉換")

    def _create_transform(self, camera: CameraTransformConfig) -> ScreenToRealWorldTransform:
        return ScreenToRealWorldTransform.from_matrices(
            to_pixel=self._load_matrix(camera, "to_pixel"),
            to_real=self._load_matrix(camera, "to_real"),
        )

    def _load_matrix(self, camera: CameraTransformConfig, direction: str):
        """
        取得單一方向的矩陣

        Args:
            camera: 攝影機配置
            direction: 'to_pixel' 或 'to_real'

        Returns:
            設定檔內嵌的巢狀 list，或由 .npy 檔案載入的 numpy array
        """
        inline = getattr(camera, direction)
        if inline is not None:
            return inline

        matrix_path = Path(getattr(camera, f"{direction}_path"))
        if not matrix_path.exists():
            raise FileNotFoundError(f"座標矩陣檔案不存在: {matrix_path}")
        return np.load(matrix_path)

    def _lookup(self, camera_id: str) -> Optional[ScreenToRealWorldTransform]:
        transform = self.transforms.get(camera_id)
        if transform is None:
            self.logger.warning(f"找不到攝影機 {camera_id} 的座標轉換")
        return transform

    # ===== 單點轉換方法 =====

    def pixel_to_real(self, camera_id: str, point: PointLike) -> Optional[PlanarCoordinate]:
        """
        將單點從像素座標轉換為真實世界座標

        Args:
            camera_id: 攝影機 ID
            point: 像素座標點，PlanarCoordinate 或 (x, y)

        Returns:
            真實世界座標點，找不到攝影機時為 None
        """
        transform = self._lookup(camera_id)
        if transform is None:
            return None
        return transform.pixel_to_real(_as_planar(point))

    def real_to_pixel(self, camera_id: str, point: PointLike) -> Optional[PlanarCoordinate]:
        """
        將單點從真實世界座標轉換為像素座標（反向轉換）

        Args:
            camera_id: 攝影機 ID
            point: 真實世界座標點，PlanarCoordinate 或 (x, y)

        Returns:
            像素座標點，找不到攝影機時為 None
        """
        transform = self._lookup(camera_id)
        if transform is None:
            return None
        return transform.real_to_pixel(_as_planar(point))

    # ===== 批次轉換方法 =====

    def pixels_to_real_batch(self, camera_id: str, points) -> Optional[np.ndarray]:
        """
        批次將多點從像素座標轉換為真實世界座標

        Args:
            camera_id: 攝影機 ID
            points: 像素座標點清單 [(x1, y1), (x2, y2), ...] 或 Nx2 陣列

        Returns:
            真實世界座標點陣列 Nx2，找不到攝影機時為 None
        """
        transform = self._lookup(camera_id)
        if transform is None:
            return None
        return transform.pixels_to_real(np.asarray(points, dtype=float))

    def reals_to_pixel_batch(self, camera_id: str, points) -> Optional[np.ndarray]:
        """
        批次將多點從真實世界座標轉換為像素座標（反向轉換）

        Args:
            camera_id: 攝影機 ID
            points: 真實世界座標點清單或 Nx2 陣列

        Returns:
            像素座標點陣列 Nx2，找不到攝影機時為 None
        """
        transform = self._lookup(camera_id)
        if transform is None:
            return None
        return transform.reals_to_pixel(np.asarray(points, dtype=float))

    # ===== 工具方法 =====

    def get_transform(self, camera_id: str) -> Optional[ScreenToRealWorldTransform]:
        return self.transforms.get(camera_id)

    def has_camera(self, camera_id: str) -> bool:
        return camera_id in self.transforms

    def get_available_cameras(self) -> List[str]:
        """
        取得所有已初始化座標轉換的攝影機 ID 清單
        """
        return list(self.transforms.keys())


def _as_planar(point: PointLike) -> PlanarCoordinate:
    if isinstance(point, PlanarCoordinate):
        return point
    return PlanarCoordinate.from_sequence(point)
