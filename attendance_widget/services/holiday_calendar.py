# services/holiday_calendar.py
from datetime import date

# 2025年 インドの官報祝日（表示の色分けのみに使用）
DEFAULT_HOLIDAYS = {
    "2025-01-26": "Republic Day",
    "2025-03-14": "Holi",
    "2025-03-31": "Id-ul-Fitr",
    "2025-04-10": "Mahavir Jayanti",
    "2025-04-18": "Good Friday",
    "2025-05-12": "Buddha Purnima",
    "2025-06-07": "Id-ul-Zuha (Bakrid)",
    "2025-07-06": "Muharram",
    "2025-08-15": "Independence Day",
    "2025-08-16": "Janmashtami",
    "2025-09-05": "Milad-un-Nabi",
    "2025-10-02": "Gandhi Jayanti / Dussehra",
    "2025-10-20": "Diwali",
    "2025-11-05": "Guru Nanak Jayanti",
    "2025-12-25": "Christmas Day",
}


def _date_key(value) -> str:
    """YAMLの日付(date型)も文字列(YYYY-MM-DD)もキーに揃える"""
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


class FixedHolidayCalendar:
    """固定の祝日リストによる判定サービス（打刻はブロックしない）"""

    def __init__(self, holidays=None):
        # 日付→名称の辞書、または日付のみのリストを受け付ける
        holidays = holidays or DEFAULT_HOLIDAYS
        if isinstance(holidays, dict):
            items = holidays.items()
        else:
            items = ((d, "") for d in holidays)
        self._holidays: dict[str, str] = {
            _date_key(k): "" if v is None else str(v) for k, v in items
        }

    def __contains__(self, date_key: str) -> bool:
        return date_key in self._holidays

    def holiday_name(self, date_key: str) -> str:
        return self._holidays.get(date_key, "")
