import sys
import webbrowser

from attendance_widget.services.exporter import build_share_url
from attendance_widget.services.logging_setup import get_logger

logger = get_logger(__name__)


class ConsoleNotifier:
    """コンソール出力による共有（フォールバック用）"""

    def send(self, message: str) -> bool:
        print(f"[勤怠共有]\n{message}", file=sys.stdout)
        return True

    def send_error(self, error: str) -> bool:
        print(f"[勤怠エラー] {error}", file=sys.stderr)
        return True


class LinkSharer:
    """メッセージアプリのディープリンクを新しいタブで開く"""

    def __init__(self, base_url: str = "https://wa.me/?text="):
        self._base_url = base_url
        self._fallback = ConsoleNotifier()

    def link_for(self, message: str) -> str:
        return build_share_url(message, self._base_url)

    def send(self, message: str) -> bool:
        url = self.link_for(message)
        try:
            opened = webbrowser.open_new_tab(url)
        except webbrowser.Error as e:
            logger.warning("ブラウザを開けません: %s", e)
            opened = False
        if not opened:
            # ブラウザが無い環境ではリンクを表示する
            return self._fallback.send(url)
        return True

    def send_error(self, error: str) -> bool:
        return self._fallback.send_error(error)


class SlackNotifier:
    """Slack APIによる共有サービス"""

    def __init__(self, token: str, channel: str):
        self._channel = channel
        self._client = None
        self._fallback = ConsoleNotifier()

        if token:
            try:
                from slack_sdk import WebClient
                self._client = WebClient(token=token)
            except Exception as e:
                logger.warning("Slackクライアントを初期化できません: %s", e)

    def send(self, message: str) -> bool:
        """メッセージ送信（未設定時はフォールバック）"""
        if self._client is None:
            return self._fallback.send(message)

        try:
            self._client.chat_postMessage(channel=self._channel, text=message)
            return True
        except Exception as e:
            logger.error("Slack送信に失敗しました: %s", e)
            return False

    def send_error(self, error: str) -> bool:
        message = f"❌ 勤怠データの共有に失敗しました（エラー: {error}）"
        return self.send(message)
