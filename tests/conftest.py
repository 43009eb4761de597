import pytest

from attendance_widget.services.local_storage import LocalStorage
from attendance_widget.services.record import AttendanceRecord
from attendance_widget.services.record_store import RecordStore


@pytest.fixture
def storage(tmp_path):
    return LocalStorage(str(tmp_path / "local_storage.json"))


@pytest.fixture
def store(storage):
    return RecordStore.load(storage)


@pytest.fixture
def make_record():
    def _make(**overrides) -> AttendanceRecord:
        base = {
            "id": "1700000000000",
            "date": "2025-03-03",
            "status": "present",
            "check_in": "09:00",
            "check_out": None,
            "leave_reason": None,
        }
        base.update(overrides)
        return AttendanceRecord(**base)
    return _make
