# graph/nodes/today_lookup_node.py
from attendance_widget.graph.state import ActionState
from attendance_widget.services.record_store import RecordStore


def today_lookup_node(state: ActionState, record_store: RecordStore = None) -> dict:
    """本日分の既存レコードをストアから探すノード"""
    return {"today_record": record_store.find_by_date(state["today"])}
