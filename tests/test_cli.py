from __future__ import annotations

from pathlib import Path

import pytest

from mcpforge.cli import EXIT_EXISTS, EXIT_FAILURE, EXIT_OK, main


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)


def test_make_resource_creates_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main(["make-resource", "order items", "--app-root", str(tmp_path / "app")])

    target = tmp_path / "app" / "MCP" / "Resources" / "OrderItemsResource.py"
    assert exit_code == EXIT_OK
    assert target.exists()
    assert f"✅ Created: {target}" in capsys.readouterr().out


def test_make_resource_defaults_to_app_directory(tmp_path: Path):
    assert main(["make-resource", "weather"]) == EXIT_OK
    assert (tmp_path / "app" / "MCP" / "Resources" / "WeatherResource.py").exists()


def test_make_resource_refuses_existing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    assert main(["make-resource", "OrderResource"]) == EXIT_OK
    target = tmp_path / "app" / "MCP" / "Resources" / "OrderResource.py"
    before = target.read_text(encoding="utf-8")
    capsys.readouterr()

    exit_code = main(["make-resource", "order"])

    assert exit_code == EXIT_EXISTS
    assert "❌ MCP resource OrderResource already exists!" in capsys.readouterr().err
    assert target.read_text(encoding="utf-8") == before


def test_make_resource_rejects_blank_name(capsys: pytest.CaptureFixture[str]):
    with pytest.raises(SystemExit) as excinfo:
        main(["make-resource", "   "])
    assert excinfo.value.code == 2
    assert "invalid resource name" in capsys.readouterr().err


def test_make_resource_reads_pyproject(tmp_path: Path):
    (tmp_path / "pyproject.toml").write_text(
        '[tool.mcpforge]\napp_root = "service"\nnamespace = "service.resources"\n',
        encoding="utf-8",
    )

    assert main(["make-resource", "orders"]) == EXIT_OK

    target = tmp_path / "service" / "MCP" / "Resources" / "OrdersResource.py"
    assert "service.resources" in target.read_text(encoding="utf-8")


def test_make_resource_reports_invalid_config(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    config = tmp_path / "settings.toml"
    config.write_text('[tool.mcpforge]\nextension = "py"\n', encoding="utf-8")

    exit_code = main(["make-resource", "orders", "--config", str(config)])

    assert exit_code == EXIT_FAILURE
    assert "Invalid configuration" in capsys.readouterr().err
    assert not (tmp_path / "app").exists()


def test_make_resource_reports_io_failure(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    config = tmp_path / "settings.toml"
    config.write_text('[tool.mcpforge]\ntemplate = "missing.stub"\n', encoding="utf-8")

    exit_code = main(["make-resource", "orders", "--config", str(config)])

    assert exit_code == EXIT_FAILURE
    assert "cannot read template" in capsys.readouterr().err


def test_command_is_required():
    with pytest.raises(SystemExit):
        main([])


@pytest.mark.parametrize(
    "document",
    [
        '[tool.mcpforge]\napp_root = 5\n',
        '[tool.mcpforge]\ntemplate = ["a", "b"]\n',
        'tool = "x"\n',
        '[tool]\nmcpforge = "x"\n',
    ],
)
def test_make_resource_reports_malformed_config(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], document: str
):
    config = tmp_path / "settings.toml"
    config.write_text(document, encoding="utf-8")

    exit_code = main(["make-resource", "orders", "--config", str(config)])

    assert exit_code == EXIT_FAILURE
    assert "Invalid configuration" in capsys.readouterr().err
    assert not (tmp_path / "app").exists()
