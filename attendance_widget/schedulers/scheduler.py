# schedulers/scheduler.py
from datetime import datetime
from typing import Callable, Optional

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger


def _now() -> datetime:
    """テスト時にモック可能な現在時刻取得"""
    return datetime.now()


class ClockTicker:
    """APSchedulerで毎秒現在時刻を生成し、表示用コールバックへ渡す"""

    def __init__(
        self,
        on_tick: Callable[[str], None],
        interval_seconds: int = 1,
        time_format: str = "%H:%M:%S",
    ):
        self._on_tick = on_tick
        self._interval = interval_seconds
        self._format = time_format
        self._scheduler: Optional[BackgroundScheduler] = None

    @property
    def running(self) -> bool:
        return self._scheduler is not None

    def tick(self) -> str:
        """現在時刻を整形して通知する（ストアには触れない）"""
        current = _now().strftime(self._format)
        self._on_tick(current)
        return current

    def start(self):
        """ティッカー開始（マウント時）"""
        if self._scheduler is not None:
            return
        self.tick()
        self._scheduler = BackgroundScheduler()
        self._scheduler.add_job(
            self.tick,
            trigger=IntervalTrigger(seconds=self._interval),
            id="clock_tick",
            replace_existing=True,
        )
        self._scheduler.start()

    def stop(self):
        """ティッカー停止（アンマウント時）。ジョブとスレッドを解放する"""
        if self._scheduler is None:
            return
        self._scheduler.shutdown(wait=False)
        self._scheduler = None

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()
