import time
from dataclasses import dataclass, replace
from typing import Optional

STATUS_PRESENT = "present"
STATUS_LEAVE = "leave"
STATUS_HOLIDAY = "holiday"
STATUSES = (STATUS_PRESENT, STATUS_LEAVE, STATUS_HOLIDAY)


def new_record_id() -> str:
    """作成時刻(ミリ秒)をIDとして使う"""
    return str(int(time.time() * 1000))


@dataclass(frozen=True)
class AttendanceRecord:
    id: str
    date: str                           # YYYY-MM-DD
    status: str                         # present / leave / holiday
    check_in: Optional[str] = None      # 出勤時刻
    check_out: Optional[str] = None     # 退勤時刻
    leave_reason: Optional[str] = None  # "<type>: <reason>"

    @property
    def is_complete(self) -> bool:
        return bool(self.check_in) and bool(self.check_out)

    @property
    def is_in_progress(self) -> bool:
        return bool(self.check_in) and not self.check_out

    def with_check_out(self, hhmm: str) -> "AttendanceRecord":
        return replace(self, check_out=hhmm)

    def to_dict(self) -> dict:
        """保存用の辞書に変換する。未設定の任意項目は出力しない"""
        data = {"id": self.id, "date": self.date}
        if self.check_in is not None:
            data["checkIn"] = self.check_in
        if self.check_out is not None:
            data["checkOut"] = self.check_out
        data["status"] = self.status
        if self.leave_reason is not None:
            data["leaveReason"] = self.leave_reason
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "AttendanceRecord":
        """保存形式から復元する。形式不正ならValueError"""
        if not isinstance(data, dict):
            raise ValueError(f"record must be an object: {data!r}")
        status = data.get("status")
        if status not in STATUSES:
            raise ValueError(f"unknown status: {status!r}")
        return cls(
            id=str(data["id"]),
            date=str(data["date"]),
            status=status,
            check_in=data.get("checkIn"),
            check_out=data.get("checkOut"),
            leave_reason=data.get("leaveReason"),
        )
