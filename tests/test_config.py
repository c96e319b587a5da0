from __future__ import annotations

from pathlib import Path

import pytest

from boilr.config import ProjectConfig, ProjectLayout


def test_from_name_generates_expected_identifiers():
    config = ProjectConfig.from_name("My Cool App", org="com.example")
    assert config.name == "My Cool App"
    assert config.package == "my_cool_app"
    assert config.class_name == "MyCoolApp"
    assert config.org == "com.example"


def test_from_name_rejects_empty_input():
    with pytest.raises(ValueError):
        ProjectConfig.from_name("   ", org="com.example")


@pytest.mark.parametrize("org", ["", "example", "com..example", "1com.example"])
def test_from_name_rejects_invalid_org(org):
    with pytest.raises(ValueError):
        ProjectConfig.from_name("demo", org=org)


def test_context_includes_identifiers():
    context = ProjectConfig.from_name("Demo", org="com.example.demo").context()
    assert context == {
        "name": "Demo",
        "package_name": "demo",
        "class_name": "Demo",
        "org": "com.example.demo",
    }


def test_layout_paths(tmp_path: Path):
    layout = ProjectLayout.from_root(tmp_path)
    assert layout.router == tmp_path.resolve() / "lib" / "core" / "router" / "app_router.dart"
    assert layout.feature("user_profile") == tmp_path.resolve() / "lib" / "features" / "user_profile"
    assert layout.shared_widgets == tmp_path.resolve() / "lib" / "shared" / "widgets"
    assert layout.shared_providers == tmp_path.resolve() / "lib" / "shared" / "providers"


def test_layout_defaults_to_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.chdir(tmp_path)
    assert ProjectLayout.from_root().root == tmp_path.resolve()
