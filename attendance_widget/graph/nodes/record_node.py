from datetime import datetime

from attendance_widget.graph.state import ActionState
from attendance_widget.services.record import (
    STATUS_HOLIDAY,
    STATUS_LEAVE,
    STATUS_PRESENT,
    AttendanceRecord,
    new_record_id,
)
from attendance_widget.services.record_store import RecordStore


def _now() -> datetime:
    """テスト時にモック可能な現在時刻取得"""
    return datetime.now()


def record_node(
    state: ActionState,
    record_store: RecordStore = None,
    time_format: str = "%H:%M",
) -> dict:
    """決定済みのアクションをストアに反映するノード"""
    action = state["action_taken"]
    today = state["today"]

    if action == "check_in":
        record = record_store.append(AttendanceRecord(
            id=new_record_id(),
            date=today,
            status=STATUS_PRESENT,
            check_in=_now().strftime(time_format),
        ))
        return {"record": record}

    if action == "check_out":
        record = record_store.set_check_out(today, _now().strftime(time_format))
        if record is None:
            return {"action_taken": "skipped", "record": None}
        return {"record": record}

    if action == "leave":
        reason = state["leave_reason"].strip()
        record = record_store.append(AttendanceRecord(
            id=new_record_id(),
            date=today,
            status=STATUS_LEAVE,
            leave_reason=f"{state['leave_type']}: {reason}",
        ))
        return {"record": record}

    if action == "holiday":
        record = record_store.append(AttendanceRecord(
            id=new_record_id(),
            date=today,
            status=STATUS_HOLIDAY,
        ))
        return {"record": record}

    return {"action_taken": "skipped", "record": None}
