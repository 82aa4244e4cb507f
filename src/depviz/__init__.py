"""
depviz：以 Graphviz 將模組依賴圖渲染為 SVG、圖檔或 DOT 文字。
"""

from depviz.core.config_loader import ConfigLoader, RenderConfig
from depviz.core.exceptions import DepvizError, RenderFailed, RendererUnavailable, WriteFailed
from depviz.renderers.graph_renderer import render_text, render_to_file, render_vector

__all__ = [
    "ConfigLoader",
    "DepvizError",
    "RenderConfig",
    "RenderFailed",
    "RendererUnavailable",
    "WriteFailed",
    "render_text",
    "render_to_file",
    "render_vector",
]
