"""Tests for fragsite.cli — argument parsing and subcommands."""

import json
import types
from unittest.mock import MagicMock, patch

import pytest

from fragsite.cli import main
from fragsite.config import SiteConfig
from fragsite.site import Site


@pytest.fixture
def fake_site(monkeypatch: pytest.MonkeyPatch, store) -> Site:
    """Register a fake module holding a Site instance."""
    site = Site(SiteConfig(host="127.0.0.1", port=8000, debug=True), store=store)
    mod = types.ModuleType("_run_test_site")
    mod.site = site  # type: ignore[attr-defined]
    monkeypatch.setitem(__import__("sys").modules, "_run_test_site", mod)
    return site


class TestNoCommand:
    def test_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "fragsite" in capsys.readouterr().out


class TestRun:
    @patch("fragsite.server.dev.run_dev_server")
    def test_dev_server_with_config_defaults(self, mock_server: MagicMock, fake_site: Site) -> None:
        main(["run", "_run_test_site:site"])
        args = mock_server.call_args[0]
        assert args[0] is fake_site
        assert args[1] == "127.0.0.1"
        assert args[2] == 8000
        assert mock_server.call_args[1]["app_path"] == "_run_test_site:site"

    @patch("fragsite.server.dev.run_dev_server")
    def test_host_and_port_override(self, mock_server: MagicMock, fake_site: Site) -> None:
        main(["run", "_run_test_site:site", "--host", "0.0.0.0", "--port", "3000"])
        args = mock_server.call_args[0]
        assert args[1] == "0.0.0.0"
        assert args[2] == 3000

    @patch("fragsite.server.production.run_production_server")
    def test_production_flag(self, mock_server: MagicMock, fake_site: Site) -> None:
        main(["run", "_run_test_site:site", "--production", "--workers", "4"])
        assert mock_server.call_args[0][0] is fake_site
        assert mock_server.call_args[1]["workers"] == 4

    def test_bad_import(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["run", "no_such_module_xyz:site"])
        assert exc_info.value.code == 1
        assert "Error" in capsys.readouterr().err

    def test_not_a_site(self, monkeypatch: pytest.MonkeyPatch) -> None:
        mod = types.ModuleType("_not_a_site")
        mod.site = 42  # type: ignore[attr-defined]
        monkeypatch.setitem(__import__("sys").modules, "_not_a_site", mod)
        with pytest.raises(SystemExit):
            main(["run", "_not_a_site"])


class TestServe:
    @patch("fragsite.server.production.run_production_server")
    def test_builds_site_over_directory(self, mock_server: MagicMock, public_dir) -> None:
        main(["serve", str(public_dir)])
        site = mock_server.call_args[0][0]
        assert isinstance(site, Site)
        assert site.config.assets_dir == str(public_dir)

    @patch("fragsite.server.dev.run_dev_server")
    def test_debug_uses_dev_server(self, mock_server: MagicMock, public_dir) -> None:
        main(["serve", str(public_dir), "--debug"])
        assert mock_server.called


class TestIndex:
    def test_writes_manifest(self, public_dir, capsys: pytest.CaptureFixture[str]) -> None:
        components = public_dir / "components"
        main(["index", str(components)])
        assert json.loads((components / "_index.json").read_text()) == [
            "email-campaign",
            "index",
            "slide-typography",
        ]
        assert "3 components" in capsys.readouterr().out

    def test_missing_directory(self, tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["index", str(tmp_path / "nope")])
        assert exc_info.value.code == 1
        assert "failed" in capsys.readouterr().err


class TestComponents:
    def test_lists_index(self, public_dir, capsys: pytest.CaptureFixture[str]) -> None:
        main(["components", str(public_dir)])
        out = capsys.readouterr().out
        assert out.splitlines()[0].split() == ["SLUG", "PATH", "TITLE"]
        assert "/slide-typography" in out
        assert "Email Campaign" in out
