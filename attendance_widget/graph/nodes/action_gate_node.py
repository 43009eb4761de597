# graph/nodes/action_gate_node.py
from dataclasses import dataclass
from typing import Optional

from attendance_widget.graph.state import ActionState
from attendance_widget.services.record import AttendanceRecord


@dataclass(frozen=True)
class ButtonState:
    label: str
    enabled: bool


def attendance_button(today_record: Optional[AttendanceRecord]) -> ButtonState:
    """出退勤ボタンの3状態（出勤 / 退勤 / 記録済み）"""
    if today_record is None:
        return ButtonState("Check In", True)
    if today_record.is_in_progress:
        return ButtonState("Check Out", True)
    return ButtonState("Attendance Recorded", False)


def can_request_absence(today_record: Optional[AttendanceRecord]) -> bool:
    """休暇・休日は本日のレコードが無い場合のみ可能"""
    return today_record is None


def action_gate_node(state: ActionState) -> dict:
    """意図と本日のレコードから実行するアクションを決定するノード"""
    intent = state["intent"]
    today_record = state.get("today_record")

    if intent == "toggle":
        if today_record is None:
            return {"action_taken": "check_in", "error_message": None}
        if today_record.is_in_progress:
            return {"action_taken": "check_out", "error_message": None}
        return {"action_taken": "skipped", "error_message": "attendance already recorded"}

    if intent in ("leave", "holiday"):
        if not can_request_absence(today_record):
            return {"action_taken": "skipped", "error_message": "a record already exists for today"}
        if intent == "leave" and not (state.get("leave_reason") or "").strip():
            return {"action_taken": "rejected", "error_message": "leave reason is required"}
        return {"action_taken": intent, "error_message": None}

    return {"action_taken": "rejected", "error_message": f"unknown action: {intent}"}
