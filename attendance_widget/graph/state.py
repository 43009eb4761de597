from dataclasses import dataclass
from typing import TypedDict, Optional

from attendance_widget.services.record import AttendanceRecord


class ActionState(TypedDict):
    today: str                              # YYYY-MM-DD
    intent: str                             # "toggle" / "leave" / "holiday"
    leave_type: Optional[str]               # 休暇種別
    leave_reason: Optional[str]             # 休暇理由（自由記述）
    today_record: Optional[AttendanceRecord]  # 本日分の既存レコード
    action_taken: Optional[str]             # "check_in" / "check_out" / "leave" / "holiday" / "skipped" / "rejected"
    record: Optional[AttendanceRecord]      # 作成・更新されたレコード
    error_message: Optional[str]            # 却下・スキップ理由


@dataclass
class ActionResult:
    success: bool
    action: Optional[str]
    record: Optional[AttendanceRecord]
    error: Optional[str]
