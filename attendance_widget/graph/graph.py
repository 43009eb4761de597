# graph/graph.py
from functools import partial
from typing import Optional

from langgraph.graph import StateGraph, END

from attendance_widget.graph.state import ActionState, ActionResult
from attendance_widget.graph.nodes.today_lookup_node import today_lookup_node
from attendance_widget.graph.nodes.action_gate_node import action_gate_node
from attendance_widget.graph.nodes.record_node import record_node
from attendance_widget.services.logging_setup import get_logger

logger = get_logger(__name__)

SUCCESS_ACTIONS = ("check_in", "check_out", "leave", "holiday")


def route_after_gate(state: ActionState) -> str:
    if state["action_taken"] in ("skipped", "rejected"):
        return "end"
    return "record"


def build_graph(record_store=None, time_format: str = "%H:%M"):
    """アクション処理グラフを構築して返す

    ノード関数はストア依存を持つため functools.partial でラップし、
    LangGraphが期待する (state) -> dict シグネチャに合わせる。
    """
    workflow = StateGraph(ActionState)

    workflow.add_node("today_lookup", partial(today_lookup_node, record_store=record_store))
    workflow.add_node("action_gate", action_gate_node)
    workflow.add_node(
        "record",
        partial(record_node, record_store=record_store, time_format=time_format),
    )

    workflow.set_entry_point("today_lookup")
    workflow.add_edge("today_lookup", "action_gate")
    workflow.add_conditional_edges(
        "action_gate",
        route_after_gate,
        {"record": "record", "end": END},
    )
    workflow.add_edge("record", END)

    return workflow.compile()


def run_action(
    graph,
    intent: str,
    today: str,
    leave_type: Optional[str] = None,
    leave_reason: Optional[str] = None,
) -> ActionResult:
    """1回分のユーザー操作を実行して結果を返す"""
    state = graph.invoke({
        "today": today,
        "intent": intent,
        "leave_type": leave_type,
        "leave_reason": leave_reason,
        "today_record": None,
        "action_taken": None,
        "record": None,
        "error_message": None,
    })

    action = state.get("action_taken")
    success = action in SUCCESS_ACTIONS and state.get("record") is not None
    if success:
        logger.info("%s: %s", action, state["record"].date)
    else:
        logger.debug("%s は実行されませんでした: %s", intent, state.get("error_message"))

    return ActionResult(
        success=success,
        action=action,
        record=state.get("record"),
        error=state.get("error_message"),
    )
