"""
渲染器套件，負責呼叫 Graphviz 將依賴圖輸出為 SVG、圖檔或 DOT 文字。
"""

from .availability import check_renderer_installed
from .graph_options import GraphOptions, build_graph_options
from .graph_renderer import render_graph, render_text, render_to_file, render_vector

__all__ = [
    "GraphOptions",
    "build_graph_options",
    "check_renderer_installed",
    "render_graph",
    "render_text",
    "render_to_file",
    "render_vector",
]
