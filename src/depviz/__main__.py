"""
depviz 命令列執行入口。

讀取依賴資料 (JSON 或 YAML：{"modules": {...}, "circular": [[...]]})，
並依參數輸出圖檔、SVG 或 DOT 文字。
"""

# 1. 標準庫導入
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

# 2. 第三方庫導入
import yaml

# 3. 本專案導入
from depviz.core.config_loader import ConfigLoader, RenderConfig
from depviz.core.exceptions import DepvizError
from depviz.renderers.graph_renderer import render_text, render_to_file, render_vector
from depviz.utils.logging_utils import setup_console_logging


def load_dependency_data(path: Path) -> tuple[dict[str, list[str]], list[list[str]]]:
    """載入依賴資料檔，副檔名為 .json 時以 JSON 解析，其餘以 YAML 解析。"""
    with open(path, encoding="utf-8") as f:
        data: Any = json.load(f) if path.suffix == ".json" else yaml.safe_load(f)

    if not isinstance(data, dict) or not isinstance(data.get("modules"), dict):
        raise ValueError(f"依賴資料檔 '{path}' 缺少 'modules' 對應表。")
    return data["modules"], data.get("circular") or []


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="depviz", description="以 Graphviz 渲染模組依賴圖。")
    parser.add_argument("data", type=Path, help="依賴資料檔 (.json / .yaml)")
    parser.add_argument("-c", "--config", type=Path, help="渲染設定檔 (.yaml)")
    output = parser.add_mutually_exclusive_group(required=True)
    output.add_argument("--image", type=Path, help="輸出圖檔路徑，格式由副檔名決定")
    output.add_argument("--svg", type=Path, help="輸出 SVG 檔案路徑")
    output.add_argument("--dot", action="store_true", help="將 DOT 文字輸出到 stdout")
    parser.add_argument("-v", "--verbose", action="store_true", help="顯示除錯訊息")
    return parser


def main(argv: list[str] | None = None) -> int:
    """主函式，回傳行程結束碼。"""
    args = _build_parser().parse_args(argv)
    setup_console_logging(logging.DEBUG if args.verbose else logging.INFO)

    config = ConfigLoader(args.config).to_render_config() if args.config else RenderConfig()

    try:
        modules, circular = load_dependency_data(args.data)
    except (OSError, ValueError, yaml.YAMLError) as e:
        logging.error(f"讀取依賴資料時發生錯誤: {e}")
        return 1

    try:
        if args.image:
            render_to_file(modules, circular, args.image, config)
        elif args.svg:
            svg = render_vector(modules, circular, config)
            args.svg.write_bytes(svg)
            logging.info(f"SVG 已儲存至: {args.svg.resolve()}")
        else:
            sys.stdout.write(render_text(modules, circular, config))
    except DepvizError as e:
        logging.error(f"渲染失敗: {e}")
        return 1
    except OSError as e:
        logging.error(f"寫入輸出檔案時發生錯誤: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
