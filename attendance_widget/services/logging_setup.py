import logging
import sys


def configure_logging(config: dict) -> None:
    """設定に従ってルートロガーを構成する"""
    log_config = config.get("logging", {})
    level = getattr(logging, str(log_config.get("level", "WARNING")).upper(), logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # ハンドラ重複を避ける
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(log_config.get("format")))
    root_logger.addHandler(handler)

    logging.getLogger("apscheduler").setLevel(max(level, logging.WARNING))


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
