# tests/test_holiday_calendar.py
import os
import tempfile
from datetime import date
from attendance_widget.main import create_services
from attendance_widget.services.config_loader import load_config
from attendance_widget.services.holiday_calendar import FixedHolidayCalendar


def test_default_holiday():
    """組み込みリストで祝日判定できること"""
    service = FixedHolidayCalendar()
    assert "2025-08-15" in service
    assert service.holiday_name("2025-08-15") == "Independence Day"


def test_workday():
    """平日が祝日でないこと"""
    service = FixedHolidayCalendar()
    assert "2025-03-04" not in service
    assert service.holiday_name("2025-03-04") == ""


def test_weekend_is_not_holiday():
    """土日は祝日リストには含まれない"""
    assert "2025-03-08" not in FixedHolidayCalendar()


def test_custom_holiday_mapping():
    service = FixedHolidayCalendar({"2026-01-01": "New Year"})
    assert "2026-01-01" in service
    assert "2025-08-15" not in service
    assert service.holiday_name("2026-01-01") == "New Year"


def test_custom_holiday_list():
    """日付だけのリストも受け付けること（名称は空）"""
    service = FixedHolidayCalendar(["2026-01-01", date(2026, 1, 26)])
    assert "2026-01-01" in service
    assert "2026-01-26" in service
    assert service.holiday_name("2026-01-26") == ""


def test_yaml_holiday_list_in_config(tmp_path, monkeypatch):
    """YAMLの日付リストで起動できること"""
    monkeypatch.delenv("ATTENDANCE_STORAGE_PATH", raising=False)
    with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
        f.write(
            "holidays:\n"
            "  dates: [2025-01-26, 2025-08-15]\n"
            "storage:\n"
            f"  path: {tmp_path / 'storage.json'}\n"
        )
        f.flush()
        config = load_config(f.name)
    os.unlink(f.name)

    _, holidays, _ = create_services(config)
    assert "2025-01-26" in holidays
    assert "2025-08-15" in holidays
    assert "2025-12-25" not in holidays


def test_yaml_holiday_mapping_in_config(tmp_path, monkeypatch):
    monkeypatch.delenv("ATTENDANCE_STORAGE_PATH", raising=False)
    with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
        f.write(
            "holidays:\n"
            "  dates:\n"
            "    2025-01-26: Republic Day\n"
            "storage:\n"
            f"  path: {tmp_path / 'storage.json'}\n"
        )
        f.flush()
        config = load_config(f.name)
    os.unlink(f.name)

    _, holidays, _ = create_services(config)
    assert holidays.holiday_name("2025-01-26") == "Republic Day"
