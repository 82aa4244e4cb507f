# src/depviz/renderers/graph_renderer.py
"""
封裝依賴圖的 Graphviz 渲染邏輯。

提供三種輸出方式：SVG 位元組、寫入圖檔、DOT 文字。每次呼叫都會重新
檢查 Graphviz、建立全新的圖形模型，並呼叫一次外部執行檔。
"""

# 1. 標準庫導入
import logging
import os
import subprocess
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
from depviz.builders.graph_builder import DependencyGraph, build_dependency_graph
from depviz.core.config_loader import RenderConfig
from depviz.core.exceptions import RenderFailed, RendererUnavailable, WriteFailed
from depviz.renderers.availability import check_renderer_installed, resolve_executable
from depviz.renderers.graph_options import DEFAULT_OUTPUT_TYPE, GraphOptions, build_graph_options

ModuleMap = Mapping[str, Sequence[str]]
CycleList = Iterable[Sequence[str]]


def render_graph(graph: DependencyGraph, options: GraphOptions, timeout: float | None = None) -> bytes:
    """
    將圖形描述交給 Graphviz，回傳指定格式的輸出位元組。

    Raises:
        RendererUnavailable: 執行檔在檢查後消失。
        RenderFailed: Graphviz 回傳非零狀態或執行超時。
    """
    dot_source = graph.source(options)
    command = [resolve_executable(graph.graphviz_path), f"-T{options.output_type}"]

    logging.info(f"準備以 Graphviz 渲染 {options.output_type} 輸出 ({len(graph.nodes)} 個節點)。")
    try:
        process = subprocess.run(
            command, input=dot_source.encode("utf-8"), capture_output=True, check=True, timeout=timeout
        )
    except subprocess.CalledProcessError as e:
        error_message = e.stderr.decode("utf-8", errors="ignore") if e.stderr else ""
        logging.error("Graphviz 執行時返回錯誤。")
        logging.error(f"Graphviz 錯誤訊息:\n{error_message}")
        raise RenderFailed(command, e.returncode, error_message) from e
    except subprocess.TimeoutExpired as e:
        logging.error(f"Graphviz 執行超時 (超過 {timeout} 秒)。")
        raise RenderFailed(command, None, f"timed out after {timeout} seconds") from e
    except FileNotFoundError as e:
        logging.error(f"指令 '{command[0]}' 未找到。")
        raise RendererUnavailable(command, e) from e

    return process.stdout


def _render(modules: ModuleMap, circular: CycleList, config: RenderConfig, output_type: str) -> bytes:
    check_renderer_installed(config)
    options = build_graph_options(config)
    options.output_type = output_type
    graph = build_dependency_graph(modules, circular, config)
    return render_graph(graph, options, timeout=config.render_timeout)


def output_type_for_path(file_path: str | os.PathLike) -> str:
    """由副檔名決定輸出格式，沒有副檔名時使用 png。"""
    return Path(file_path).suffix[1:] or DEFAULT_OUTPUT_TYPE


def render_vector(modules: ModuleMap, circular: CycleList, config: RenderConfig | None = None) -> bytes:
    """回傳依賴圖的 SVG 位元組。"""
    return _render(modules, circular, config or RenderConfig(), "svg")


def render_to_file(
    modules: ModuleMap,
    circular: CycleList,
    file_path: str | os.PathLike,
    config: RenderConfig | None = None,
) -> Path:
    """
    將依賴圖渲染為圖檔並寫入 file_path，格式由副檔名決定。

    Returns:
        寫入檔案的絕對路徑。

    Raises:
        WriteFailed: 無法寫入檔案。
    """
    image = _render(modules, circular, config or RenderConfig(), output_type_for_path(file_path))

    output_path = Path(file_path)
    try:
        with open(output_path, "wb") as f:
            f.write(image)
    except OSError as e:
        logging.error(f"寫入圖檔 '{output_path}' 時發生錯誤: {e}")
        raise WriteFailed(output_path, e) from e

    resolved_path = output_path.resolve()
    logging.info(f"圖表已成功儲存至: {resolved_path}")
    return resolved_path


def render_text(modules: ModuleMap, circular: CycleList, config: RenderConfig | None = None) -> str:
    """回傳 Graphviz 輸出的 DOT 文字。"""
    output = _render(modules, circular, config or RenderConfig(), "dot")
    return output.decode("utf-8")
