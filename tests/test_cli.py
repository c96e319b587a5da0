from __future__ import annotations

from pathlib import Path

import pytest

from boilr import __version__
from boilr.cli import build_parser, main


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_version(capsys: pytest.CaptureFixture[str]):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_project_requires_org():
    with pytest.raises(SystemExit) as excinfo:
        main(["create", "project", "demo"])
    assert excinfo.value.code == 2


def test_cli_project_without_flutter(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main(
        ["create", "project", "demo", "--org", "com.example", "-d", str(tmp_path), "--skip-flutter-create"]
    )
    assert exit_code == 0
    assert (tmp_path / "demo" / "lib" / "core" / "router" / "app_router.dart").exists()
    assert 'Flutter project "demo" created successfully!' in capsys.readouterr().out


def test_cli_feature_updates_router(flutter_project: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main(["create", "feature", "user_profile", "--root", str(flutter_project)])
    assert exit_code == 0
    assert (flutter_project / "lib" / "features" / "user_profile" / "presentation" / "pages" / "user_profile_page.dart").exists()

    output = capsys.readouterr().out
    assert "Router updated with new feature route" in output
    router = (flutter_project / "lib" / "core" / "router" / "app_router.dart").read_text(encoding="utf-8")
    assert "name: Router.userProfileName," in router


def test_cli_feature_without_router_still_succeeds(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main(["create", "feature", "orders", "--root", str(tmp_path)])
    assert exit_code == 0
    output = capsys.readouterr().out
    assert "Router file" in output
    assert "Skipping router update." in output


def test_cli_existing_files_fail(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    assert main(["create", "widget", "avatar", "--root", str(tmp_path)]) == 0
    assert main(["create", "widget", "avatar", "--root", str(tmp_path)]) == 1
    assert "Failed to create widget" in capsys.readouterr().out
    assert main(["create", "widget", "avatar", "--root", str(tmp_path), "--force"]) == 0


def test_cli_invalid_name_fails(tmp_path: Path):
    assert main(["create", "provider", "***", "--root", str(tmp_path)]) == 1


def test_cli_invalid_org_fails(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    argv = ["create", "project", "demo", "--org", "not an org", "-d", str(tmp_path), "--skip-flutter-create"]
    assert main(argv) == 1
    assert "invalid organisation" in capsys.readouterr().out


def test_cli_registry_io_failure(flutter_project: Path, capsys: pytest.CaptureFixture[str]):
    router = flutter_project / "lib" / "core" / "router" / "app_router.dart"
    router.write_bytes(b"\xff\xfe not utf-8")
    assert main(["create", "feature", "orders", "--root", str(flutter_project)]) == 1
    assert "cannot access route registry" in capsys.readouterr().out
