# services/calendar_renderer.py
import calendar
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from attendance_widget.services.holiday_calendar import FixedHolidayCalendar
from attendance_widget.services.record import (
    STATUS_HOLIDAY,
    STATUS_LEAVE,
    AttendanceRecord,
)

STYLE_HOLIDAY = "holiday"
STYLE_LEAVE = "leave"
STYLE_PRESENT = "present"
STYLE_IN_PROGRESS = "in_progress"
STYLE_PUBLIC_HOLIDAY = "public_holiday"
STYLE_SUNDAY = "sunday"
STYLE_SATURDAY = "saturday"
STYLE_DEFAULT = "default"

WEEKDAY_HEADER = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

ANSI_STYLES = {
    STYLE_HOLIDAY: "\033[45;97m",
    STYLE_LEAVE: "\033[43;30m",
    STYLE_PRESENT: "\033[42;30m",
    STYLE_IN_PROGRESS: "\033[46;30m",
    STYLE_PUBLIC_HOLIDAY: "\033[95m",
    STYLE_SUNDAY: "\033[91m",
    STYLE_SATURDAY: "\033[94m",
    STYLE_DEFAULT: "",
}
ANSI_RESET = "\033[0m"


@dataclass(frozen=True)
class DayCell:
    day: int
    date_key: str
    style: str
    record: Optional[AttendanceRecord] = None
    is_public_holiday: bool = False
    holiday_name: str = ""
    is_saturday: bool = False
    is_sunday: bool = False
    is_today: bool = False


@dataclass
class MonthGrid:
    year: int
    month: int
    offset: int                 # 先頭の空白セル数（月曜始まり）
    days_in_month: int
    cells: list = field(default_factory=list)   # None = 空白セル

    @property
    def day_cells(self) -> list[DayCell]:
        return [c for c in self.cells if c is not None]

    def weeks(self) -> list[list]:
        """7列ごとに区切る（最終週は空白で埋める）"""
        padded = self.cells + [None] * (-len(self.cells) % 7)
        return [padded[i:i + 7] for i in range(0, len(padded), 7)]


@dataclass(frozen=True)
class MonthSummary:
    present: int = 0
    in_progress: int = 0
    leave: int = 0
    holiday: int = 0


def date_key(year: int, month: int, day: int) -> str:
    return f"{year:04d}-{month:02d}-{day:02d}"


def first_day_offset(year: int, month: int) -> int:
    """1日の曜日を月曜始まりの列番号(0..6)で返す（日曜は6）"""
    sunday_based = (date(year, month, 1).weekday() + 1) % 7
    return 6 if sunday_based == 0 else sunday_based - 1


def day_style(
    record: Optional[AttendanceRecord],
    is_public_holiday: bool,
    is_sunday: bool,
    is_saturday: bool,
) -> str:
    """表示スタイルの優先順位: レコード(休日>休暇>完了>出勤中) > 祝日 > 日曜 > 土曜"""
    if record is not None:
        if record.status == STATUS_HOLIDAY:
            return STYLE_HOLIDAY
        if record.status == STATUS_LEAVE:
            return STYLE_LEAVE
        if record.is_complete:
            return STYLE_PRESENT
        if record.check_in:
            return STYLE_IN_PROGRESS
    if is_public_holiday:
        return STYLE_PUBLIC_HOLIDAY
    if is_sunday:
        return STYLE_SUNDAY
    if is_saturday:
        return STYLE_SATURDAY
    return STYLE_DEFAULT


def build_month(
    year: int,
    month: int,
    records,
    holidays: FixedHolidayCalendar,
    today: Optional[date] = None,
) -> MonthGrid:
    """指定月のカレンダーグリッドを生成する（純粋関数）"""
    offset = first_day_offset(year, month)
    days_in_month = calendar.monthrange(year, month)[1]
    today_key = today.isoformat() if today else None

    # 同じ日付のレコードは先頭のものを使う
    by_date: dict[str, AttendanceRecord] = {}
    for r in records:
        by_date.setdefault(r.date, r)

    cells: list = [None] * offset
    for day in range(1, days_in_month + 1):
        key = date_key(year, month, day)
        weekday = date(year, month, day).weekday()  # 0=月 ... 6=日
        record = by_date.get(key)
        is_public_holiday = key in holidays
        is_saturday = weekday == 5
        is_sunday = weekday == 6
        cells.append(
            DayCell(
                day=day,
                date_key=key,
                style=day_style(record, is_public_holiday, is_sunday, is_saturday),
                record=record,
                is_public_holiday=is_public_holiday,
                holiday_name=holidays.holiday_name(key),
                is_saturday=is_saturday,
                is_sunday=is_sunday,
                is_today=key == today_key,
            )
        )

    return MonthGrid(
        year=year,
        month=month,
        offset=offset,
        days_in_month=days_in_month,
        cells=cells,
    )


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """月移動（12月→1月で年を進め、1月→12月で年を戻す）"""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def summarize_month(records, year: int, month: int) -> MonthSummary:
    prefix = f"{year:04d}-{month:02d}-"
    counts = {STYLE_PRESENT: 0, STYLE_IN_PROGRESS: 0, STYLE_LEAVE: 0, STYLE_HOLIDAY: 0}
    for r in records:
        if not r.date.startswith(prefix):
            continue
        style = day_style(r, False, False, False)
        if style in counts:
            counts[style] += 1
    return MonthSummary(
        present=counts[STYLE_PRESENT],
        in_progress=counts[STYLE_IN_PROGRESS],
        leave=counts[STYLE_LEAVE],
        holiday=counts[STYLE_HOLIDAY],
    )


def render_month_text(grid: MonthGrid, color: bool = True) -> str:
    """ターミナル表示用のテキストカレンダー"""
    title = f"{calendar.month_name[grid.month]} {grid.year}"
    lines = [title.center(7 * 5 - 1), " ".join(f"{w:>4}" for w in WEEKDAY_HEADER)]

    for week in grid.weeks():
        parts = []
        for cell in week:
            if cell is None:
                parts.append("    ")
                continue
            mark = "*" if cell.is_today else " "
            text = f"{mark}{cell.day:>3}"
            style = ANSI_STYLES.get(cell.style, "")
            if color and style:
                text = f"{style}{text}{ANSI_RESET}"
            parts.append(text)
        lines.append(" ".join(parts))

    holidays = [c for c in grid.day_cells if c.is_public_holiday]
    for cell in holidays:
        lines.append(f"  {cell.date_key}: {cell.holiday_name}")
    return "\n".join(lines)
