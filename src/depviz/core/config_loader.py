# src/depviz/core/config_loader.py
"""
負責載入、合併與轉換渲染相關的設定。

RenderConfig 是渲染流程唯一接受的設定物件；ConfigLoader 則負責
從 YAML 設定檔組裝出它。
"""

# 1. 標準庫導入
import copy
import dataclasses
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

# 2. 第三方庫導入
import yaml

# 3. 本專案導入
# (無)

DEFAULT_RENDER_CONFIG: dict[str, Any] = {
    "graphviz_path": None,
    "graphviz_options": {
        "G": {},
        "E": {},
        "N": {},
    },
    "rankdir": "LR",
    "layout": "dot",
    "background_color": "#111111",
    "edge_color": "#757575",
    "font_name": "Arial",
    "font_size": "14px",
    "node_color": "#c6c5fe",
    "node_shape": "box",
    "node_style": "rounded",
    "render_timeout": None,
    "category_colors": {
        "assets": None,
        "components": None,
        "hocs": None,
        "hooks": None,
        "pages": None,
        "root": None,
        "utils": None,
    },
}


@dataclass(frozen=True)
class RenderConfig:
    """
    渲染設定。

    Attributes:
        graphviz_path: Graphviz 執行檔所在目錄，未設定時從系統 PATH 尋找。
        graphviz_options: 直接傳遞給 Graphviz 的屬性，依 'G' (圖)、'E' (邊)、'N' (節點) 分組。
        rankdir: 圖的方向 (LR, TB, ...)。
        layout: Graphviz 佈局引擎名稱。
        background_color: 背景顏色。
        edge_color: 邊的顏色。
        font_name: 節點字型。
        font_size: 節點字級。
        node_color: 節點邊框與文字顏色。
        node_shape: 節點形狀。
        node_style: 節點樣式。
        assets_color ... utils_color: 各分類的節點填滿顏色，未設定時使用預設白色。
        render_timeout: 等待 Graphviz 的秒數上限，None 表示無限等待。
    """

    graphviz_path: str | None = None
    graphviz_options: dict[str, dict[str, Any]] = field(default_factory=dict)
    rankdir: str | None = "LR"
    layout: str | None = "dot"
    background_color: str | None = "#111111"
    edge_color: str | None = "#757575"
    font_name: str | None = "Arial"
    font_size: str | None = "14px"
    node_color: str | None = "#c6c5fe"
    node_shape: str | None = "box"
    node_style: str | None = "rounded"
    assets_color: str | None = None
    components_color: str | None = None
    hocs_color: str | None = None
    hooks_color: str | None = None
    pages_color: str | None = None
    root_color: str | None = None
    utils_color: str | None = None
    render_timeout: float | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RenderConfig":
        """從 (已合併預設值的) 設定字典建立 RenderConfig，並將 category_colors 展開為個別欄位。"""
        known_fields = {f.name for f in dataclasses.fields(cls)}
        kwargs: dict[str, Any] = {}

        for category, color in (data.get("category_colors") or {}).items():
            key = f"{category}_color"
            if key in known_fields:
                kwargs[key] = color
            else:
                logging.warning(f"未知的節點分類 '{category}'，已忽略。")

        for key, value in data.items():
            if key == "category_colors":
                continue
            if key not in known_fields:
                logging.warning(f"未知的設定項目 '{key}'，已忽略。")
                continue
            kwargs[key] = value

        return cls(**kwargs)


class ConfigLoader:
    """一個處理 YAML 設定檔載入與預設值合併的類別。"""

    def __init__(self, config_path: Path):
        self.config_path = config_path
        self.config = self._load_yaml(config_path)
        if self.config is not None:
            self.config = self._merge_configs(copy.deepcopy(DEFAULT_RENDER_CONFIG), self.config)

    @staticmethod
    def _load_yaml(path: Path) -> dict[str, Any] | None:
        """安全地載入一個 YAML 檔案。"""
        if not path.is_file():
            logging.error(f"指定的設定檔不存在: {path}")
            return None
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logging.error(f"解析設定檔 '{path.name}' 時發生錯誤: {e}")
            return None

        if not isinstance(data, dict):
            logging.error(f"設定檔 '{path.name}' 的頂層必須是對應表 (mapping)，實際為 {type(data).__name__}。")
            return None
        return data

    @staticmethod
    def _merge_configs(default: dict, user: dict) -> dict:
        """遞迴地合併使用者設定到預設設定中。"""
        for key, value in user.items():
            if isinstance(value, dict) and isinstance(default.get(key), dict):
                default[key] = ConfigLoader._merge_configs(default[key], value)
            else:
                default[key] = value
        return default

    def to_render_config(self) -> RenderConfig:
        """將載入的設定轉換為 RenderConfig；設定檔載入失敗時回傳預設值。"""
        if self.config is None:
            logging.warning(f"設定檔 '{self.config_path.name}' 未能載入，改用預設渲染設定。")
            return RenderConfig()
        return RenderConfig.from_dict(self.config)
