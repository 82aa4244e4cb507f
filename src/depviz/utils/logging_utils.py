# src/depviz/utils/logging_utils.py
"""
提供與日誌記錄相關的通用工具。
"""

# 1. 標準庫導入
import logging

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
# (無)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def setup_console_logging(level: int = logging.INFO) -> None:
    """設定根 logger 輸出到主控台；若已有 handler 則只調整等級。"""
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if not root_logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(console_handler)
