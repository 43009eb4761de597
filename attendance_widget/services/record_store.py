import json
from typing import Callable, Optional

from attendance_widget.services.local_storage import LocalStorage
from attendance_widget.services.logging_setup import get_logger
from attendance_widget.services.record import AttendanceRecord

logger = get_logger(__name__)


def serialize_records(records) -> str:
    return json.dumps([r.to_dict() for r in records], ensure_ascii=False)


def deserialize_records(raw: Optional[str]) -> list[AttendanceRecord]:
    """保存文字列をレコード一覧に戻す。失敗時は空リスト（データなし扱い）"""
    if not raw:
        return []
    try:
        data = json.loads(raw)
        if not isinstance(data, list):
            raise ValueError("record list must be an array")
        return [AttendanceRecord.from_dict(item) for item in data]
    except (ValueError, KeyError, TypeError) as e:
        logger.warning("保存済みレコードを解析できないため空で開始します: %s", e)
        return []


class RecordStore:
    """勤怠レコードの一覧を保持し、変更のたびにストレージへ書き戻す"""

    def __init__(self, storage: LocalStorage, key: str = "attendance_records"):
        self._storage = storage
        self._key = key
        self._records: list[AttendanceRecord] = []
        self._listeners: list[Callable] = []

    @classmethod
    def load(cls, storage: LocalStorage, key: str = "attendance_records") -> "RecordStore":
        """起動時に一度だけ読み込む"""
        store = cls(storage, key)
        store._records = deserialize_records(storage.get_item(key))
        logger.info("%d 件のレコードを読み込みました", len(store._records))
        return store

    @property
    def records(self) -> tuple:
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def subscribe(self, listener: Callable) -> None:
        """変更後に呼ばれるリスナーを登録（再描画用）"""
        self._listeners.append(listener)

    def find_by_date(self, date_key: str) -> Optional[AttendanceRecord]:
        return next((r for r in self._records if r.date == date_key), None)

    def append(self, record: AttendanceRecord) -> AttendanceRecord:
        # 日付の重複チェックはしない
        self._commit(self._records + [record])
        return record

    def set_check_out(self, date_key: str, hhmm: str) -> Optional[AttendanceRecord]:
        """出勤済み・退勤未済のレコードにだけ退勤時刻を入れる。それ以外は何もしない"""
        target = self.find_by_date(date_key)
        if target is None or not target.is_in_progress:
            return None

        updated = target.with_check_out(hhmm)
        self._commit([updated if r is target else r for r in self._records])
        return updated

    def _commit(self, records: list[AttendanceRecord]) -> None:
        self._storage.set_item(self._key, serialize_records(records))
        self._records = records
        for listener in self._listeners:
            listener(self.records)
