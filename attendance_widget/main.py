"""勤怠ウィジェット - エントリーポイント"""
import os
import signal
import sys

from dotenv import load_dotenv

from attendance_widget.services.config_loader import load_config
from attendance_widget.services.holiday_calendar import FixedHolidayCalendar
from attendance_widget.services.local_storage import LocalStorage
from attendance_widget.services.logging_setup import configure_logging, get_logger
from attendance_widget.services.record_store import RecordStore
from attendance_widget.services.share_client import ConsoleNotifier, LinkSharer, SlackNotifier
from attendance_widget.widget import AttendanceWidget

logger = get_logger(__name__)

PREFIX = "[勤怠ウィジェット]"

HELP = """commands:
  in       check in / check out
  leave    request leave for today
  holiday  mark today as holiday
  prev / next / today   move the calendar
  export   write CSV
  share    share summary
  show     redraw
  quit"""


def create_services(config: dict):
    """設定に基づいてサービスインスタンスを生成"""
    # ストレージ
    storage_path = os.getenv("ATTENDANCE_STORAGE_PATH", config["storage"]["path"])
    storage = LocalStorage(storage_path)
    store = RecordStore.load(storage, key=config["storage"]["key"])

    # 祝日リスト
    holidays = FixedHolidayCalendar(config["holidays"].get("dates") or None)

    # 共有先
    share_config = config["share"]
    channel = share_config.get("channel", "link")
    if channel == "slack":
        sharer = SlackNotifier(
            token=os.getenv("SLACK_BOT_TOKEN", ""),
            channel=os.getenv("SLACK_SHARE_CHANNEL", share_config.get("slack_channel", "")),
        )
    elif channel == "console":
        sharer = ConsoleNotifier()
    else:
        sharer = LinkSharer(base_url=share_config["base_url"])

    return store, holidays, sharer


def prompt_leave(widget: AttendanceWidget, leave_types: list[str], read=input) -> bool:
    """休暇申請ダイアログ。理由が空の間は閉じない（'cancel'で中止）"""
    if not widget.absence_enabled:
        print(f"{PREFIX} 本日はすでに記録があります")
        return False

    options = "/".join(leave_types)
    leave_type = read(f"leave type ({options}): ").strip()
    if leave_type.lower() == "cancel":
        return False
    # 種別は一度だけ聞き、理由が空の間は理由だけを聞き直す
    while True:
        reason = read("reason: ")
        if reason.strip().lower() == "cancel":
            return False
        result = widget.request_leave(leave_type, reason)
        if result.success:
            print(f"{PREFIX} 休暇を登録しました: {result.record.leave_reason}")
            return True
        if result.action != "rejected":
            print(f"{PREFIX} {result.error}")
            return False
        print(f"{PREFIX} 理由を入力してください")


def handle_command(widget: AttendanceWidget, command: str, config: dict, read=input) -> bool:
    """コマンドを1つ処理する。終了ならFalse"""
    command = command.strip().lower()

    if command in ("quit", "exit", "q"):
        return False
    if command in ("", "show"):
        pass
    elif command == "in":
        result = widget.toggle_attendance()
        if result.success:
            label = "出勤" if result.action == "check_in" else "退勤"
            time_str = result.record.check_in if result.action == "check_in" else result.record.check_out
            print(f"{PREFIX} {label}を記録しました（{time_str}）")
        else:
            print(f"{PREFIX} {result.error}")
    elif command == "leave":
        prompt_leave(widget, config["leave"]["types"], read=read)
    elif command == "holiday":
        if not widget.absence_enabled:
            print(f"{PREFIX} 本日はすでに記録があります")
        elif read("mark today as holiday? [y/N]: ").strip().lower() == "y":
            result = widget.mark_holiday()
            if result.success:
                print(f"{PREFIX} 休日として登録しました")
    elif command == "prev":
        widget.prev_month()
    elif command == "next":
        widget.next_month()
    elif command == "today":
        widget.go_today()
    elif command == "export":
        path = widget.export_csv()
        print(f"{PREFIX} CSVを書き出しました: {path}")
    elif command == "share":
        if not widget.share():
            widget.sharer.send_error("share channel did not accept the summary")
    else:
        print(HELP)
        return True

    print(widget.render(color=sys.stdout.isatty()))
    return True


def main():
    """メイン起動処理"""
    load_dotenv()
    config = load_config(os.getenv("ATTENDANCE_CONFIG", "config.yaml"))
    configure_logging(config)

    store, holidays, sharer = create_services(config)
    widget = AttendanceWidget(store, holidays, sharer, config)

    widget.mount()

    def shutdown(signum, frame):
        raise SystemExit(0)

    signal.signal(signal.SIGTERM, shutdown)

    print(widget.render(color=sys.stdout.isatty()))
    print(HELP)
    try:
        while True:
            try:
                command = input(f"{widget.current_time} > ")
            except EOFError:
                break
            try:
                if not handle_command(widget, command, config):
                    break
            except OSError as e:
                logger.error("保存に失敗しました: %s", e)
                print(f"{PREFIX} 保存に失敗しました: {e}")
    except KeyboardInterrupt:
        pass
    finally:
        widget.unmount()
        print(f"{PREFIX} 停止しました")


if __name__ == "__main__":
    main()
