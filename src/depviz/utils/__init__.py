"""
通用工具函式套件。
"""

from .category_utils import apply_category_style, resolve_category_color, trim_category_prefix
from .logging_utils import setup_console_logging

__all__ = [
    "apply_category_style",
    "resolve_category_color",
    "setup_console_logging",
    "trim_category_prefix",
]
