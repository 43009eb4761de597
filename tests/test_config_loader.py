import os
import tempfile
from attendance_widget.services.config_loader import DEFAULT_CONFIG, load_config


def test_load_config_defaults():
    """指定した値が上書きされること"""
    with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
        f.write("clock:\n  interval_seconds: 2\n")
        f.flush()
        config = load_config(f.name)
    os.unlink(f.name)
    assert config["clock"]["interval_seconds"] == 2
    assert config["clock"]["display_format"] == "%H:%M:%S"


def test_load_config_nested():
    """ネストされた設定が正しく取得できること"""
    with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
        f.write(
            "storage:\n"
            "  path: /tmp/att.json\n"
            "share:\n"
            "  channel: slack\n"
        )
        f.flush()
        config = load_config(f.name)
    os.unlink(f.name)
    assert config["storage"]["path"] == "/tmp/att.json"
    assert config["storage"]["key"] == "attendance_records"
    assert config["share"]["channel"] == "slack"
    assert config["share"]["base_url"] == "https://wa.me/?text="


def test_load_config_file_not_found():
    """存在しないファイルの場合デフォルト設定を返すこと"""
    config = load_config("nonexistent.yaml")
    assert config["storage"]["key"] == "attendance_records"
    assert config["clock"]["interval_seconds"] == 1


def test_load_config_does_not_share_defaults():
    """返した設定を変更してもデフォルトが汚れないこと"""
    config = load_config("nonexistent.yaml")
    config["leave"]["types"].append("other")
    assert "other" not in DEFAULT_CONFIG["leave"]["types"]


def test_load_config_empty_file():
    """空ファイルはデフォルト扱い"""
    with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
        f.write("")
        f.flush()
        config = load_config(f.name)
    os.unlink(f.name)
    assert config == DEFAULT_CONFIG
