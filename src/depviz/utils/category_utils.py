# src/depviz/utils/category_utils.py
"""
依模組識別字的前綴目錄決定節點分類、顏色與顯示標籤。
"""

# 1. 標準庫導入
import re
from typing import TYPE_CHECKING

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
from depviz.core.config_loader import RenderConfig

if TYPE_CHECKING:
    from depviz.builders.graph_builder import GraphNode

# 依優先順序排列；第一個「前綴相符且已設定顏色」的分類勝出
CATEGORY_COLOR_FIELDS: list[tuple[str, str]] = [
    ("assets/", "assets_color"),
    ("components/", "components_color"),
    ("hocs/", "hocs_color"),
    ("hooks/", "hooks_color"),
    ("pages/", "pages_color"),
    ("root/", "root_color"),
    ("utils/", "utils_color"),
]

INIT_PREFIX = "init/"
INIT_COLOR = "#FEC8D8"
DEFAULT_FILL_COLOR = "#ffffff"
NODE_FILL_STYLE = "filled,rounded"

_CATEGORY_PREFIX_PATTERN = re.compile(r"^(assets|hocs|pages|root|utils|hooks|components|init)/")


def resolve_category_color(module_id: str, config: RenderConfig) -> str:
    """
    根據模組識別字的分類前綴回傳節點的填滿顏色。

    Args:
        module_id: 模組識別字，例如 "components/Button"。
        config: 渲染設定。

    Returns:
        十六進位顏色字串，永遠有值。
    """
    for prefix, field_name in CATEGORY_COLOR_FIELDS:
        color = getattr(config, field_name)
        if color and module_id.startswith(prefix):
            return color

    if module_id.startswith(INIT_PREFIX):
        return INIT_COLOR

    return DEFAULT_FILL_COLOR


def apply_category_style(node: "GraphNode", config: RenderConfig) -> None:
    """為節點設定分類顏色與固定的填滿樣式。"""
    node.attrs["fillcolor"] = resolve_category_color(node.module_id, config)
    node.attrs["style"] = NODE_FILL_STYLE


def trim_category_prefix(module_id: str) -> str:
    """移除開頭的一段分類目錄 (例如 "components/Foo" -> "Foo")，僅處理一層。"""
    return _CATEGORY_PREFIX_PATTERN.sub("", module_id, count=1)
