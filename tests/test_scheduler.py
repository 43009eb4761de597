# tests/test_scheduler.py
from datetime import datetime
from unittest.mock import MagicMock, patch
from attendance_widget.schedulers.scheduler import ClockTicker


def test_ticker_creation():
    """ティッカーが正しく生成されること"""
    ticker = ClockTicker(on_tick=MagicMock(), interval_seconds=1)
    assert ticker._interval == 1
    assert ticker.running is False


def test_tick_publishes_formatted_time():
    """整形した現在時刻をコールバックに渡すこと"""
    on_tick = MagicMock()
    ticker = ClockTicker(on_tick=on_tick, time_format="%H:%M:%S")
    with patch(
        "attendance_widget.schedulers.scheduler._now",
        return_value=datetime(2025, 3, 3, 9, 5, 7),
    ):
        result = ticker.tick()
    assert result == "09:05:07"
    on_tick.assert_called_once_with("09:05:07")


def test_ticker_start_stop():
    """開始・停止でスケジューラが解放されること"""
    ticker = ClockTicker(on_tick=MagicMock())

    with patch("attendance_widget.schedulers.scheduler.BackgroundScheduler") as mock_cls:
        ticker.start()
        mock_cls.return_value.add_job.assert_called_once()
        mock_cls.return_value.start.assert_called_once()
        assert ticker.running is True

        ticker.stop()
        mock_cls.return_value.shutdown.assert_called_once_with(wait=False)
        assert ticker.running is False


def test_ticker_start_twice_keeps_single_job():
    """二重開始しても1つのスケジューラのみ"""
    ticker = ClockTicker(on_tick=MagicMock())
    with patch("attendance_widget.schedulers.scheduler.BackgroundScheduler") as mock_cls:
        ticker.start()
        ticker.start()
        assert mock_cls.call_count == 1
        ticker.stop()


def test_ticker_stop_without_start():
    """未開始で停止しても例外にならないこと"""
    ticker = ClockTicker(on_tick=MagicMock())
    ticker.stop()
    assert ticker.running is False


def test_ticker_context_manager():
    """with文で開始・停止されること"""
    ticker = ClockTicker(on_tick=MagicMock())
    with patch("attendance_widget.schedulers.scheduler.BackgroundScheduler") as mock_cls:
        with ticker:
            assert ticker.running is True
        mock_cls.return_value.shutdown.assert_called_once()
    assert ticker.running is False
