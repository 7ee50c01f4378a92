"""Tests for routescope.cli: CLI entrypoint and the routes command."""

import json
import sys
import types

import pytest

from routescope.cli import main
from routescope.testing import FakeApp, FakeLayer, FakeRouter


def auth() -> None: ...


@pytest.fixture
def _fake_app_module(monkeypatch: pytest.MonkeyPatch) -> None:
    """Register a fake module holding a routing tree on sys.modules."""
    members = FakeRouter()
    members.get("/members", auth)

    app = FakeApp()
    app.get("/health")
    app.use("/orgs/:orgId", members)

    cyclic = FakeRouter()
    cyclic.use("/loop", cyclic)

    mod = types.ModuleType("_fake_routescope_cli")
    mod.app = app  # type: ignore[attr-defined]
    mod.empty = FakeApp()  # type: ignore[attr-defined]
    mod.cyclic = cyclic  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "_fake_routescope_cli", mod)


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_routes_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "--help"])
        assert exc_info.value.code == 0


class TestCLIMissingArgs:
    def test_routes_missing_app(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes"])
        assert exc_info.value.code == 2

    def test_bad_format(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "x:app", "--format", "yaml"])
        assert exc_info.value.code == 2


class TestCLINoCommand:
    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        captured = capsys.readouterr()
        assert "routescope" in captured.out


@pytest.mark.usefixtures("_fake_app_module")
class TestRoutesCommand:
    def test_table(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "_fake_routescope_cli:app"])
        out = capsys.readouterr().out
        assert "METHOD" in out
        assert "/health" in out
        assert "/orgs/:orgId/members" in out

    def test_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "_fake_routescope_cli:app", "--format", "json"])
        data = json.loads(capsys.readouterr().out)
        assert data == [
            {"path": "/health", "methods": ["GET"], "middlewares": []},
            {"path": "/orgs/:orgId/members", "methods": ["GET"], "middlewares": ["auth"]},
        ]

    def test_html(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "_fake_routescope_cli", "--format", "html"])
        assert '<table class="routescope">' in capsys.readouterr().out

    def test_no_endpoints(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "_fake_routescope_cli:empty"])
        assert "No endpoints found." in capsys.readouterr().out

    def test_skip_middleware_routes(
        self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        hidden = FakeRouter()
        hidden.get("/hidden")
        app = sys.modules["_fake_routescope_cli"].app
        monkeypatch.setattr(
            app._router,
            "stack",
            [*app._router.stack, FakeLayer(handle=hidden, name="<anonymous>")],
        )

        main(["routes", "_fake_routescope_cli:app", "--format", "json"])
        assert "/hidden" in capsys.readouterr().out

        main(["routes", "_fake_routescope_cli:app", "--format", "json", "--no-middleware-routes"])
        assert "/hidden" not in capsys.readouterr().out

    def test_unresolvable_app(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "_fake_routescope_cli:missing"])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err

    def test_malformed_tree(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "_fake_routescope_cli:cyclic"])
        assert exc_info.value.code == 1
        assert "cyclic" in capsys.readouterr().err
