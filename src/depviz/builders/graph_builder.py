# src/depviz/builders/graph_builder.py
"""
將模組依賴資料轉換為去重後的節點/邊集合，並產生 Graphviz 圖形描述。
"""

# 1. 標準庫導入
import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field

# 2. 第三方庫導入
import graphviz

# 3. 本專案導入
from depviz.core.config_loader import RenderConfig
from depviz.renderers.graph_options import GraphOptions, to_graphviz_attrs
from depviz.utils.category_utils import apply_category_style, trim_category_prefix


@dataclass
class GraphNode:
    """單一模組的節點：以原始識別字為鍵，name 為 DOT 中使用的節點名稱，顯示修剪後的標籤。"""

    module_id: str
    label: str
    name: str = ""
    attrs: dict[str, str] = field(default_factory=dict)


@dataclass
class DependencyGraph:
    """
    一次渲染呼叫所擁有的圖形模型。

    nodes 是以模組識別字為鍵的登錄表，保證同一識別字只會有一個節點；
    DOT 中一律使用登錄時配發的節點名稱 (n0, n1, ...)，避免識別字中的 `:` 被解析為 port。
    edges 依加入順序保存，不做去重。
    """

    graphviz_path: str | None = None
    nodes: dict[str, GraphNode] = field(default_factory=dict)
    edges: list[tuple[str, str]] = field(default_factory=list)
    cyclic_modules: set[str] = field(default_factory=set)

    def ensure_node(self, module_id: str) -> GraphNode:
        """取得模組的節點，若尚未建立則建立之。"""
        node = self.nodes.get(module_id)
        if node is None:
            node = GraphNode(module_id=module_id, label=trim_category_prefix(module_id), name=f"n{len(self.nodes)}")
            self.nodes[module_id] = node
        return node

    def add_edge(self, source: GraphNode, target: GraphNode) -> None:
        self.edges.append((source.module_id, target.module_id))

    def to_digraph(self, options: GraphOptions) -> graphviz.Digraph:
        """依目前的節點與邊建立 graphviz.Digraph。"""
        dot = graphviz.Digraph(
            "G",
            graph_attr=to_graphviz_attrs(options.graph),
            node_attr=to_graphviz_attrs(options.node),
            edge_attr=to_graphviz_attrs(options.edge),
        )
        for node in self.nodes.values():
            dot.node(node.name, label=graphviz.escape(node.label), **node.attrs)
        for source, target in self.edges:
            dot.edge(self.nodes[source].name, self.nodes[target].name)
        return dot

    def source(self, options: GraphOptions) -> str:
        """回傳 DOT 格式的圖形描述字串。"""
        return self.to_digraph(options).source


def flatten_cycles(circular: Iterable[Sequence[str]]) -> set[str]:
    """將循環依賴列表攤平成參與任一循環的模組集合。"""
    return {module_id for cycle in circular for module_id in cycle}


def build_dependency_graph(
    modules: Mapping[str, Sequence[str]],
    circular: Iterable[Sequence[str]],
    config: RenderConfig,
) -> DependencyGraph:
    """
    建立依賴圖模型。

    Args:
        modules: 模組識別字 -> 其依賴的模組識別字列表。
        circular: 循環依賴列表，每個循環為一串模組識別字。
        config: 渲染設定。

    Returns:
        每個識別字恰有一個節點的 DependencyGraph。
    """
    graph = DependencyGraph(graphviz_path=config.graphviz_path)
    # 目前僅保留在模型上，尚未用於標示循環邊
    graph.cyclic_modules = flatten_cycles(circular)

    for module_id, dependencies in modules.items():
        node = graph.ensure_node(module_id)
        apply_category_style(node, config)

        for dep_id in dependencies:
            dep_node = graph.ensure_node(dep_id)
            apply_category_style(dep_node, config)
            graph.add_edge(node, dep_node)

    logging.info(
        f"依賴圖建構完成：共 {len(graph.nodes)} 個節點，{len(graph.edges)} 條依賴邊，"
        f"{len(graph.cyclic_modules)} 個模組參與循環依賴。"
    )
    return graph
