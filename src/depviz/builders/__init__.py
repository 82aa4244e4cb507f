"""
建構器套件，負責將依賴資料轉換為圖形模型。
"""

from .graph_builder import DependencyGraph, GraphNode, build_dependency_graph

__all__ = [
    "DependencyGraph",
    "GraphNode",
    "build_dependency_graph",
]
