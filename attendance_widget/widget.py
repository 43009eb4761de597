"""勤怠ウィジェット本体 - ストア・ティッカー・アクショングラフを束ねる"""
from datetime import date
from pathlib import Path

from attendance_widget.graph.graph import build_graph, run_action
from attendance_widget.graph.nodes.action_gate_node import (
    attendance_button,
    can_request_absence,
)
from attendance_widget.graph.state import ActionResult
from attendance_widget.schedulers.scheduler import ClockTicker
from attendance_widget.services.calendar_renderer import (
    build_month,
    render_month_text,
    shift_month,
    summarize_month,
)
from attendance_widget.services.exporter import build_share_text, export_csv
from attendance_widget.services.holiday_calendar import FixedHolidayCalendar
from attendance_widget.services.record_store import RecordStore


def _today() -> date:
    """テスト時にモック可能"""
    return date.today()


class AttendanceWidget:
    def __init__(
        self,
        store: RecordStore,
        holidays: FixedHolidayCalendar,
        sharer,
        config: dict,
    ):
        self.store = store
        self.holidays = holidays
        self.sharer = sharer
        self._config = config
        self._graph = build_graph(
            record_store=store,
            time_format=config["clock"]["record_format"],
        )
        self._ticker = ClockTicker(
            on_tick=self._on_tick,
            interval_seconds=config["clock"]["interval_seconds"],
            time_format=config["clock"]["display_format"],
        )
        self.current_time = ""
        today = _today()
        self.view_year, self.view_month = today.year, today.month
        # (year, month, today) -> MonthGrid。レコード変更で破棄して再描画
        self._grid_cache: dict = {}
        self.store.subscribe(self._on_records_changed)

    # --- ライフサイクル ---
    def mount(self):
        self._ticker.start()

    def unmount(self):
        self._ticker.stop()

    def _on_tick(self, current: str):
        self.current_time = current

    def _on_records_changed(self, records):
        self._grid_cache.clear()

    # --- 本日の状態 ---
    @property
    def today_key(self) -> str:
        return _today().isoformat()

    @property
    def today_record(self):
        return self.store.find_by_date(self.today_key)

    @property
    def button(self):
        return attendance_button(self.today_record)

    @property
    def absence_enabled(self) -> bool:
        return can_request_absence(self.today_record)

    # --- アクション ---
    def toggle_attendance(self) -> ActionResult:
        return run_action(self._graph, "toggle", self.today_key)

    def request_leave(self, leave_type: str, reason: str) -> ActionResult:
        """休暇申請。種別が空なら設定の先頭の種別を使う"""
        leave_type = (leave_type or "").strip() or self._config["leave"]["types"][0]
        return run_action(
            self._graph, "leave", self.today_key,
            leave_type=leave_type, leave_reason=reason,
        )

    def mark_holiday(self) -> ActionResult:
        return run_action(self._graph, "holiday", self.today_key)

    # --- 月移動 ---
    def next_month(self):
        self.view_year, self.view_month = shift_month(self.view_year, self.view_month, 1)

    def prev_month(self):
        self.view_year, self.view_month = shift_month(self.view_year, self.view_month, -1)

    def go_today(self):
        today = _today()
        self.view_year, self.view_month = today.year, today.month

    # --- 表示 ---
    def month_grid(self):
        today = _today()
        key = (self.view_year, self.view_month, today)
        if key not in self._grid_cache:
            self._grid_cache[key] = build_month(
                self.view_year, self.view_month,
                self.store.records, self.holidays, today=today,
            )
        return self._grid_cache[key]

    def render(self, color: bool = True) -> str:
        record = self.today_record
        if record is None:
            status = "No record"
        elif record.status == "present":
            status = f"Present (in {record.check_in or '-'} / out {record.check_out or '-'})"
        else:
            status = record.status.capitalize()
            if record.leave_reason:
                status += f" - {record.leave_reason}"

        summary = summarize_month(self.store.records, self.view_year, self.view_month)
        button = self.button
        lines = [
            f"{self.today_key}  {self.current_time}",
            f"Today: {status}",
            f"[{button.label}]" + ("" if button.enabled else " (disabled)"),
            "",
            render_month_text(self.month_grid(), color=color),
            "",
            (f"Present {summary.present} / In progress {summary.in_progress} / "
             f"Leave {summary.leave} / Holiday {summary.holiday}"),
        ]
        return "\n".join(lines)

    # --- エクスポート・共有（ストアは変更しない） ---
    def export_csv(self) -> Path:
        return export_csv(
            self.store.records,
            self._config["export"]["directory"],
            self.today_key,
        )

    def share_text(self) -> str:
        return build_share_text(self.store.records)

    def share(self) -> bool:
        return self.sharer.send(self.share_text())
