import json
from pathlib import Path
from typing import Optional

from attendance_widget.services.logging_setup import get_logger

logger = get_logger(__name__)


class LocalStorage:
    """JSONファイルによるキー・バリューストレージ（値は常に文字列）"""

    def __init__(self, path: str):
        self._path = Path(path)

    def _read_all(self) -> dict:
        if not self._path.exists():
            return {}
        try:
            raw = self._path.read_text(encoding="utf-8").strip()
            if not raw:
                return {}
            data = json.loads(raw)
        except (OSError, ValueError) as e:
            logger.warning("ストレージを読み込めません (%s): %s", self._path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("ストレージの形式が不正です: %s", self._path)
            return {}
        return data

    def _write_all(self, data: dict) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        tmp.replace(self._path)

    def get_item(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        if value is None:
            return None
        return str(value)

    def set_item(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)
