# src/depviz/renderers/graph_options.py
"""
將渲染設定組裝成 Graphviz 的三組屬性 (圖、邊、節點)。
"""

# 1. 標準庫導入
from dataclasses import dataclass, field
from typing import Any

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
from depviz.core.config_loader import RenderConfig

DEFAULT_OUTPUT_TYPE = "png"


@dataclass
class GraphOptions:
    """Graphviz 的屬性分組與輸出格式。"""

    graph: dict[str, Any] = field(default_factory=dict)
    edge: dict[str, Any] = field(default_factory=dict)
    node: dict[str, Any] = field(default_factory=dict)
    output_type: str = DEFAULT_OUTPUT_TYPE


def build_graph_options(config: RenderConfig) -> GraphOptions:
    """
    以設定中的樣式建立預設屬性，再以使用者的 graphviz_options 逐項覆寫 (淺層合併)。

    Args:
        config: 渲染設定。

    Returns:
        GraphOptions，output_type 由呼叫端依輸出模式再行設定。
    """
    user_options = config.graphviz_options or {}

    graph_attrs = {
        "overlap": False,
        "pad": 0.3,
        "rankdir": config.rankdir,
        "layout": config.layout,
        "bgcolor": config.background_color,
        **(user_options.get("G") or {}),
    }
    edge_attrs = {
        "color": config.edge_color,
        **(user_options.get("E") or {}),
    }
    node_attrs = {
        "fontname": config.font_name,
        "fontsize": config.font_size,
        "color": config.node_color,
        "shape": config.node_shape,
        "style": config.node_style,
        "height": 0,
        "fontcolor": config.node_color,
        **(user_options.get("N") or {}),
    }

    return GraphOptions(graph=graph_attrs, edge=edge_attrs, node=node_attrs)


def to_graphviz_attrs(attrs: dict[str, Any]) -> dict[str, str]:
    """將屬性值轉成 Graphviz 接受的字串，未設定 (None) 的項目直接略過。"""
    converted = {}
    for key, value in attrs.items():
        if value is None:
            continue
        if isinstance(value, bool):
            converted[key] = "true" if value else "false"
        else:
            converted[key] = str(value)
    return converted
