from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}

Matrix = List[List[float]]


class LoggingConfig(BaseModel):
    """日誌設定，對應 LoggerManager.initialize 的參數。"""

    model_config = ConfigDict(
        extra="allow",
        validate_assignment=True,
        validate_default=True,
        str_strip_whitespace=True,
    )

    level: str = Field(default="INFO", description="日誌等級")
    log_dir: Optional[str] = Field(default=None, description="日誌目錄，未設定時只輸出到控制台")
    rotation: str = Field(default="00:00", description="日誌輪轉條件")
    retention: str = Field(default="30 days", description="日誌保留時間")
    format: Optional[str] = Field(default=None, description="自定義日誌格式")

    @field_validator("level")
    @classmethod
    def validate_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"日誌等級必須是 {sorted(LOG_LEVELS)} 之一")
        return level

    @field_validator("log_dir")
    @classmethod
    def validate_log_dir(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        return value


class CameraTransformConfig(BaseModel):
    """攝影機配置：描述攝影機像素座標與真實世界平面之間的兩個單應性矩陣。

    每個方向擇一提供：直接寫在設定檔中的 3x3 矩陣，或 .npy 檔案路徑。
    矩陣形狀由 MatrixTransform 檢查，這裡不重複驗證。
    """

    model_config = ConfigDict(
        extra="allow",
        validate_assignment=True,
        validate_default=True,
    )

    camera_id: str = Field(..., description="攝影機識別")
    name: str = Field(default="", description="攝影機名稱（可選）")
    enabled: bool = Field(default=True, description="是否啟用此攝影機")
    to_pixel: Optional[Matrix] = Field(default=None, description="真實世界 -> 像素 矩陣")
    to_real: Optional[Matrix] = Field(default=None, description="像素 -> 真實世界 矩陣")
    to_pixel_path: Optional[str] = Field(default=None, description="真實世界 -> 像素 矩陣 .npy 檔案路徑")
    to_real_path: Optional[str] = Field(default=None, description="像素 -> 真實世界 矩陣 .npy 檔案路徑")

    @field_validator("camera_id")
    @classmethod
    def validate_camera_id(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("攝影機 ID 不能為空")
        return value.strip()

    @field_validator("to_pixel_path", "to_real_path")
    @classmethod
    def validate_matrix_path(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        if not value.strip():
            raise ValueError("矩陣檔案路徑不能為空")
        return value.strip()

    @model_validator(mode="after")
    def validate_matrix_sources(self) -> "CameraTransformConfig":
        for direction in ("to_pixel", "to_real"):
            inline = getattr(self, direction)
            path = getattr(self, f"{direction}_path")
            if inline is None and path is None:
                raise ValueError(f"攝影機 {self.camera_id} 缺少 {direction} 矩陣（{direction} 或 {direction}_path）")
            if inline is not None and path is not None:
                raise ValueError(f"攝影機 {self.camera_id} 的 {direction} 與 {direction}_path 只能擇一")
        return self


class BaseConfig(BaseModel):
    """全域配置模型，包含日誌設定與各攝影機的座標轉換矩陣。"""

    model_config = ConfigDict(
        extra="allow",
        validate_assignment=True,
    )

    version: str = Field(default="1.0.0", description="配置版本")
    name: str = Field(default="coordmap configuration", description="配置名稱")
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="日誌設定")
    cameras: List[CameraTransformConfig] = Field(default_factory=list, description="攝影機配置")

    @model_validator(mode="after")
    def validate_cameras(self) -> "BaseConfig":
        enabled_cameras = [cam for cam in self.cameras if cam.enabled]
        if not enabled_cameras:
            raise ValueError("至少需要一個啟用的攝影機")
        seen = set()
        for camera in self.cameras:
            if camera.camera_id in seen:
                raise ValueError(f"攝影機 ID 重複: {camera.camera_id}")
            seen.add(camera.camera_id)
        return self

    def get_enabled_cameras(self) -> List[CameraTransformConfig]:
        return [cam for cam in self.cameras if cam.enabled]

    def get_camera(self, camera_id: str) -> CameraTransformConfig:
        camera = next((cam for cam in self.cameras if cam.camera_id == camera_id), None)
        if camera is None:
            raise ValueError(f"找不到攝影機 '{camera_id}' 的設定")
        return camera
