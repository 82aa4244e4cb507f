"""Tests for the command-line entry point."""

import json
from pathlib import Path

import pytest

from depviz.__main__ import load_dependency_data, main


@pytest.fixture
def data_file(tmp_path: Path, modules) -> Path:
    """Write the dependency map to a JSON file."""
    path = tmp_path / "deps.json"
    path.write_text(json.dumps({"modules": modules, "circular": [["utils/format"]]}), encoding="utf-8")
    return path


class TestLoadDependencyData:
    """Tests for load_dependency_data."""

    def test_json(self, data_file: Path, modules) -> None:
        loaded_modules, circular = load_dependency_data(data_file)

        assert loaded_modules == modules
        assert circular == [["utils/format"]]

    def test_yaml_without_circular(self, tmp_path: Path) -> None:
        path = tmp_path / "deps.yaml"
        path.write_text("modules:\n  pages/A:\n    - components/B\n", encoding="utf-8")

        loaded_modules, circular = load_dependency_data(path)

        assert loaded_modules == {"pages/A": ["components/B"]}
        assert circular == []

    def test_missing_modules_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "deps.json"
        path.write_text("[]", encoding="utf-8")

        with pytest.raises(ValueError, match="modules"):
            load_dependency_data(path)


class TestMain:
    """Tests for main."""

    def test_image_output(self, fake_graphviz, data_file: Path, tmp_path: Path) -> None:
        target = tmp_path / "graph.svg"

        assert main([str(data_file), "--image", str(target)]) == 0
        assert target.read_bytes() == b"<svg></svg>"

    def test_svg_output(self, fake_graphviz, data_file: Path, tmp_path: Path) -> None:
        target = tmp_path / "out.svg"

        assert main([str(data_file), "--svg", str(target)]) == 0
        assert target.read_bytes() == b"<svg></svg>"
        assert fake_graphviz.render_calls == [["dot", "-Tsvg"]]

    def test_dot_output(self, fake_graphviz, data_file: Path, capsys) -> None:
        assert main([str(data_file), "--dot"]) == 0

        assert capsys.readouterr().out.startswith("digraph G {")

    def test_config_file_is_applied(self, fake_graphviz, data_file: Path, tmp_path: Path) -> None:
        config_path = tmp_path / "depviz.yaml"
        config_path.write_text("rankdir: TB\n", encoding="utf-8")

        assert main([str(data_file), "--dot", "--config", str(config_path)]) == 0
        assert "rankdir=TB" in fake_graphviz.inputs[0]

    def test_unavailable_renderer_returns_error(self, fake_graphviz, data_file: Path) -> None:
        fake_graphviz.installed = False

        assert main([str(data_file), "--dot"]) == 1

    def test_unreadable_data_returns_error(self, fake_graphviz, tmp_path: Path) -> None:
        assert main([str(tmp_path / "missing.json"), "--dot"]) == 1
        assert fake_graphviz.calls == []

    def test_non_mapping_config_file_uses_defaults(self, fake_graphviz, data_file: Path, tmp_path: Path) -> None:
        config_path = tmp_path / "depviz.yaml"
        config_path.write_text("- rankdir\n- TB\n", encoding="utf-8")

        assert main([str(data_file), "--dot", "--config", str(config_path)]) == 0
        assert "rankdir=LR" in fake_graphviz.inputs[0]
