from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from boilr.templates import ROUTER_TEMPLATE  # noqa: E402

LOGIN_ROUTER = """import 'package:flutter_riverpod/flutter_riverpod.dart';
import 'package:go_router/go_router.dart';
import '../../features/auth/presentation/pages/login_page.dart';

class Router {
  static const String login = '/login';
  static const String loginName = 'login';
}

final routerProvider = Provider<GoRouter>((ref) {
  return GoRouter(
    initialLocation: Router.login,
    routes: [
      GoRoute(
        path: Router.login,
        name: Router.loginName,
        builder: (context, state) => const LoginPage(),
      ),
    ],
  );
});
"""


@pytest.fixture()
def login_router() -> str:
    """Registry holding a single ``login`` route."""

    return LOGIN_ROUTER


@pytest.fixture()
def generated_router() -> str:
    """Registry exactly as written by ``boilr create project``."""

    return ROUTER_TEMPLATE


@pytest.fixture()
def flutter_project(tmp_path: Path, generated_router: str) -> Path:
    """Minimal project tree holding only the generated route registry."""

    router = tmp_path / "lib" / "core" / "router" / "app_router.dart"
    router.parent.mkdir(parents=True)
    router.write_text(generated_router, encoding="utf-8")
    return tmp_path
