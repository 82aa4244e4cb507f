"""Unit tests for the Graphviz availability check."""

import os
import subprocess

import pytest

from depviz.core.config_loader import RenderConfig
from depviz.core.exceptions import RendererUnavailable
from depviz.renderers.availability import check_renderer_installed, resolve_executable


class TestResolveExecutable:
    """Tests for resolve_executable."""

    def test_uses_system_path_by_default(self) -> None:
        """Test that the bare executable name is used without a configured path."""
        assert resolve_executable(None) == "dot"

    def test_joins_configured_directory(self) -> None:
        """Test that the configured directory is prefixed."""
        assert resolve_executable("/opt/graphviz/bin") == os.path.join("/opt/graphviz/bin", "dot")


class TestCheckRendererInstalled:
    """Tests for check_renderer_installed."""

    def test_runs_version_query(self, fake_graphviz) -> None:
        """Test that a version query is issued and succeeds."""
        check_renderer_installed(RenderConfig())

        assert fake_graphviz.calls == [["dot", "-V"]]

    def test_uses_configured_path(self, fake_graphviz) -> None:
        """Test that the configured executable directory is used."""
        check_renderer_installed(RenderConfig(graphviz_path="/usr/local/bin"))

        assert fake_graphviz.calls == [[os.path.join("/usr/local/bin", "dot"), "-V"]]

    def test_missing_executable_raises(self, fake_graphviz) -> None:
        """Test that a missing executable raises RendererUnavailable."""
        fake_graphviz.installed = False

        with pytest.raises(RendererUnavailable) as exc_info:
            check_renderer_installed(RenderConfig())

        assert exc_info.value.command == ["dot", "-V"]
        assert isinstance(exc_info.value.error, FileNotFoundError)

    def test_failing_version_query_raises(self, monkeypatch) -> None:
        """Test that a non-zero exit of the version query raises RendererUnavailable."""

        def failing_run(command, **kwargs):
            raise subprocess.CalledProcessError(1, command, output=b"", stderr=b"broken")

        monkeypatch.setattr(subprocess, "run", failing_run)

        with pytest.raises(RendererUnavailable) as exc_info:
            check_renderer_installed(RenderConfig())

        assert isinstance(exc_info.value.error, subprocess.CalledProcessError)

    def test_check_is_not_cached(self, fake_graphviz) -> None:
        """Test that every call re-runs the version query."""
        check_renderer_installed(RenderConfig())
        check_renderer_installed(RenderConfig())

        assert len(fake_graphviz.calls) == 2
