import copy
import yaml
from pathlib import Path

DEFAULT_CONFIG = {
    "storage": {
        "path": "data/local_storage.json",
        "key": "attendance_records",
    },
    "clock": {
        "interval_seconds": 1,
        "display_format": "%H:%M:%S",
        "record_format": "%H:%M",
    },
    "leave": {
        "types": ["sick", "casual", "personal"],
    },
    "holidays": {
        # 空なら組み込みの祝日リストを使う
        "dates": {},
    },
    "export": {
        "directory": ".",
    },
    "share": {
        "channel": "link",
        "base_url": "https://wa.me/?text=",
        "slack_channel": "",
    },
    "logging": {
        "level": "WARNING",
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    },
}


def _deep_merge(base: dict, override: dict) -> dict:
    """ベース設定にオーバーライドをマージする"""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config(path: str = "config.yaml") -> dict:
    """YAML設定ファイルをロードし、デフォルト設定とマージして返す"""
    config_path = Path(path)
    if config_path.exists():
        with open(config_path, "r", encoding="utf-8") as f:
            user_config = yaml.safe_load(f) or {}
        return _deep_merge(copy.deepcopy(DEFAULT_CONFIG), user_config)
    return copy.deepcopy(DEFAULT_CONFIG)
