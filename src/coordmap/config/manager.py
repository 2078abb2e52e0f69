import yaml
import json
from pathlib import Path
from typing import Dict, Any, Optional

from coordmap.config.schema import BaseConfig
from coordmap.utils.paths import get_config_root

DEFAULT_CONFIG_RELATIVE_PATH = "config/coordmap.yaml"
MATRIX_PATH_KEYS = ("to_pixel_path", "to_real_path")


class ConfigManager:
    def __init__(self, config: Optional[str] = None):
        if config:
            self.config_path = Path(config)
        else:
            self.config_path = get_config_root() / DEFAULT_CONFIG_RELATIVE_PATH

        raw_config = self._load_config(self.config_path)
        parsed_config = self._parse_cameras_config(raw_config)
        parsed_config = self._resolve_matrix_paths(parsed_config)
        self.config = BaseConfig(**parsed_config)

    def _load_config(self, config_path: Path) -> Dict[str, Any]:
        """
        載入配置文件，支援 YAML 和 JSON 格式。
        """
        if not Path(config_path).is_file():
            raise FileNotFoundError(f"配置檔案： {config_path} 不存在或無效")
        ext = Path(config_path).suffix.lower()
        with open(config_path, 'r', encoding='utf-8') as file:
            if ext in ['.yaml', '.yml']:
                config = yaml.safe_load(file)
            elif ext == '.json':
                config = json.load(file)
            else:
                raise ValueError("不支援的配置檔案格式，僅支援 YAML 和 JSON")
        if config is None:
            return {}
        if not isinstance(config, dict):
            raise ValueError(f"配置檔案內容必須是 mapping: {config_path}")
        return config

    def _parse_cameras_config(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        相機配置前處理：允許以 camera_id 為 key 的 dict 寫法
        """
        cameras = config.get("cameras")
        if isinstance(cameras, dict):
            camera_list = []
            for camera_id, camera_cfg in cameras.items():
                camera_cfg = dict(camera_cfg or {})
                camera_cfg["camera_id"] = camera_id
                camera_list.append(camera_cfg)
            config["cameras"] = camera_list
        return config

    def _resolve_matrix_paths(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        矩陣檔案的相對路徑以配置檔所在目錄為基準
        """
        base_dir = self.config_path.resolve().parent
        for camera_cfg in config.get("cameras") or []:
            if not isinstance(camera_cfg, dict):
                continue
            for key in MATRIX_PATH_KEYS:
                raw = camera_cfg.get(key)
                if isinstance(raw, str) and raw.strip():
                    path = Path(raw.strip()).expanduser()
                    if not path.is_absolute():
                        path = base_dir / path
                    camera_cfg[key] = str(path)
        return config
