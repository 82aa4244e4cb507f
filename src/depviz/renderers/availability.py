# src/depviz/renderers/availability.py
"""
在建構任何圖形之前，確認 Graphviz 執行檔可用。
"""

# 1. 標準庫導入
import logging
import os
import subprocess

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
from depviz.core.config_loader import RenderConfig
from depviz.core.exceptions import RendererUnavailable

GRAPHVIZ_EXECUTABLE = "dot"


def resolve_executable(graphviz_path: str | None) -> str:
    """回傳 Graphviz 執行檔路徑；未設定目錄時交由系統 PATH 搜尋。"""
    if graphviz_path:
        return os.path.join(graphviz_path, GRAPHVIZ_EXECUTABLE)
    return GRAPHVIZ_EXECUTABLE


def check_renderer_installed(config: RenderConfig) -> None:
    """
    執行 `<executable> -V` 確認 Graphviz 已安裝。每次渲染都會重新檢查。

    Raises:
        RendererUnavailable: 找不到執行檔或版本查詢失敗。
    """
    command = [resolve_executable(config.graphviz_path), "-V"]
    try:
        process = subprocess.run(command, capture_output=True, check=True)
    except FileNotFoundError as e:
        if config.graphviz_path:
            logging.error(f"無法執行指令 '{' '.join(command)}'。請確認 graphviz_path 設定正確。")
        else:
            logging.error(f"找不到 Graphviz。請確保 '{GRAPHVIZ_EXECUTABLE}' 已加入系統 PATH。")
        raise RendererUnavailable(command, e) from e
    except (subprocess.CalledProcessError, OSError) as e:
        logging.error(f"Graphviz 版本查詢失敗: {e}")
        raise RendererUnavailable(command, e) from e

    # dot -V 將版本資訊寫到 stderr
    version = process.stderr.decode("utf-8", errors="ignore").strip()
    logging.debug(f"偵測到 Graphviz: {version}")
