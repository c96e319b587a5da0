from __future__ import annotations

import pytest

from boilr.registry.anchors import scan
from boilr.registry.merger import DeclarationMerger, Insertion
from boilr.registry.schema import RouteDescriptor


@pytest.fixture()
def merger() -> DeclarationMerger:
    return DeclarationMerger(RouteDescriptor.from_name("user_profile"))


def test_insertion_apply():
    assert Insertion(3, "XY").apply("abcdef") == "abcXYdef"


def test_merge_import_inserts_after_anchor(merger: DeclarationMerger, login_router: str):
    anchors = scan(login_router)
    insertion = merger.merge_import(login_router, anchors.import_end)
    assert insertion == Insertion(
        anchors.import_end,
        "\nimport '../../features/user_profile/presentation/pages/user_profile_page.dart';",
    )


def test_merge_import_is_noop_when_line_exists(merger: DeclarationMerger):
    document = "import 'x.dart';\nimport '../../features/user_profile/presentation/pages/user_profile_page.dart';\n"
    assert merger.merge_import(document, scan(document).import_end) is None


def test_merge_constants_follows_existing_indentation(merger: DeclarationMerger):
    document = (
        "class Router {\n"
        "    static const String login = '/login';\n"
        "    static const String loginName = 'login';\n"
        "}\n"
    )
    insertion = merger.merge_constants(document, scan(document).constants_end)
    assert insertion.text == (
        "\n    static const String userProfile = '/user_profile';"
        "\n    static const String userProfileName = 'user_profile';"
    )


def test_merge_constants_is_noop_when_pair_exists(merger: DeclarationMerger, login_router: str):
    document = login_router.replace(
        "  static const String loginName = 'login';\n",
        "  static const String loginName = 'login';\n"
        "  static const String userProfile = '/user_profile';\n"
        "  static const String userProfileName = 'user_profile';\n",
    )
    assert merger.merge_constants(document, scan(document).constants_end) is None


def test_merge_route_before_closing_line(merger: DeclarationMerger, login_router: str):
    anchors = scan(login_router)
    insertion = merger.merge_route(login_router, anchors.list_close)
    assert insertion.offset == anchors.list_close - len("    ")
    assert insertion.text == (
        "      GoRoute(\n"
        "        path: Router.userProfile,\n"
        "        name: Router.userProfileName,\n"
        "        builder: (context, state) => const UserProfilePage(),\n"
        "      ),\n"
    )


def test_merge_route_into_inline_list(merger: DeclarationMerger):
    document = "import 'a.dart';\n  final r = GoRouter(routes: []);\n"
    close = scan(document).list_close
    patched = merger.merge_route(document, close).apply(document)
    assert patched == (
        "import 'a.dart';\n"
        "  final r = GoRouter(routes: [\n"
        "    GoRoute(\n"
        "      path: Router.userProfile,\n"
        "      name: Router.userProfileName,\n"
        "      builder: (context, state) => const UserProfilePage(),\n"
        "    ),\n"
        "  ]);\n"
    )


def test_merge_route_is_noop_when_entry_exists(merger: DeclarationMerger, login_router: str):
    anchors = scan(login_router)
    once = merger.merge_route(login_router, anchors.list_close).apply(login_router)
    assert merger.merge_route(once, scan(once).list_close) is None


def test_merger_keeps_windows_line_endings(merger: DeclarationMerger, login_router: str):
    document = login_router.replace("\n", "\r\n")
    anchors = scan(document)
    insertion = merger.merge_constants(document, anchors.constants_end)
    assert insertion.text.startswith("\r\n  static const String userProfile")
    assert "\r\n  static const String userProfileName" in insertion.text


def test_merge_route_separates_entry_missing_trailing_comma(merger: DeclarationMerger):
    document = "import 'a.dart';\n  final r = GoRouter(routes: [GoRoute(path: '/')]);\n"
    close = scan(document).list_close
    insertion = merger.merge_route(document, close)
    assert insertion.offset == close
    assert insertion.text.startswith(",\n    GoRoute(\n")
    assert insertion.apply(document).endswith("      builder: (context, state) => const UserProfilePage(),\n    ),]);\n")


@pytest.mark.parametrize(
    ("closing", "previous", "expected"),
    [
        ("\t\t],", "\t\t\t),", "\t\t\tGoRoute(\n\t\t\t\tpath: Router.userProfile,"),
        ("  ],", "      ),", "      GoRoute(\n          path: Router.userProfile,"),
        ("\t],", "", "\t\tGoRoute(\n\t\t\tpath: Router.userProfile,"),
    ],
)
def test_merge_route_reuses_list_indent_step(
    merger: DeclarationMerger, closing: str, previous: str, expected: str
):
    document = f"import 'a.dart';\nroutes: [\n{previous}\n{closing}\n"
    close = scan(document).list_close
    assert merger.merge_route(document, close).apply(document).count(expected) == 1
