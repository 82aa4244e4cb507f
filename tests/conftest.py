"""Pytest configuration and fixtures for depviz tests."""

import subprocess

import pytest

from depviz.core.config_loader import RenderConfig


class FakeGraphviz:
    """Stands in for the Graphviz executable by replacing subprocess.run."""

    def __init__(self) -> None:
        self.calls: list[list[str]] = []
        self.inputs: list[str] = []
        self.installed = True
        self.render_error: bytes | None = None
        self.output = b"<svg></svg>"

    def __call__(self, command, input=None, capture_output=False, check=False, timeout=None):
        self.calls.append(list(command))

        if not self.installed:
            raise FileNotFoundError(2, "No such file or directory", command[0])

        if command[1] == "-V":
            return subprocess.CompletedProcess(command, 0, b"", b"dot - graphviz version 9.0.0")

        self.inputs.append(input.decode("utf-8"))
        if self.render_error is not None:
            raise subprocess.CalledProcessError(1, command, output=b"", stderr=self.render_error)
        if command[1] == "-Tdot":
            return subprocess.CompletedProcess(command, 0, input, b"")
        return subprocess.CompletedProcess(command, 0, self.output, b"")

    @property
    def render_calls(self) -> list[list[str]]:
        return [call for call in self.calls if call[1] != "-V"]


@pytest.fixture
def fake_graphviz(monkeypatch) -> FakeGraphviz:
    """Replace subprocess.run with a fake Graphviz executable."""
    fake = FakeGraphviz()
    monkeypatch.setattr(subprocess, "run", fake)
    return fake


@pytest.fixture
def config() -> RenderConfig:
    """Create default configuration."""
    return RenderConfig()


@pytest.fixture
def modules() -> dict[str, list[str]]:
    """A small dependency map spanning several categories."""
    return {
        "pages/Home": ["components/Button", "utils/format"],
        "components/Button": ["hooks/useClick", "init/setup"],
        "utils/format": [],
    }
