# src/depviz/core/exceptions.py
"""
定義渲染流程中所有可能拋出的例外類型。
"""

# 1. 標準庫導入
import os


class DepvizError(Exception):
    """所有 depviz 例外的基底類別。"""


class RendererUnavailable(DepvizError):
    """找不到 Graphviz 執行檔，或其版本查詢失敗。"""

    def __init__(self, command: list[str], error: Exception | str):
        self.command = command
        self.error = error
        super().__init__(f"無法執行 Graphviz 指令 '{' '.join(command)}': {error}")


class RenderFailed(DepvizError):
    """Graphviz 執行成功啟動，但回傳了錯誤狀態。"""

    def __init__(self, command: list[str], returncode: int | None, stderr: str):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(f"Graphviz 渲染失敗 (exit code: {returncode}):\n{stderr}")


class WriteFailed(DepvizError):
    """渲染結果無法寫入目標檔案。"""

    def __init__(self, path: str | os.PathLike, error: OSError):
        self.path = path
        self.error = error
        super().__init__(f"無法寫入圖檔 '{path}': {error}")
