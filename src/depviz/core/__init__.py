"""
depviz 的核心套件：設定與例外定義。
"""

from .config_loader import ConfigLoader, RenderConfig
from .exceptions import DepvizError, RenderFailed, RendererUnavailable, WriteFailed

__all__ = [
    "ConfigLoader",
    "DepvizError",
    "RenderConfig",
    "RenderFailed",
    "RendererUnavailable",
    "WriteFailed",
]
