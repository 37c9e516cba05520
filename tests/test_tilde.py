import pytest

from cssvendor.tilde import TildeResolver


@pytest.fixture
def project(tmp_path):
    (tmp_path / "node_modules" / "pkg").mkdir(parents=True)
    (tmp_path / "node_modules" / "pkg" / "_vars.scss").write_text("$a: 1;")
    (tmp_path / "styles").mkdir()
    (tmp_path / "styles" / "_base.scss").write_text("$b: 2;")
    return tmp_path


def test_node_modules(project):
    resolver = TildeResolver(project)
    assert resolver.resolve("@import '~pkg/vars';\n", "scss") == "@import 'pkg/vars';\n"
    assert resolver.resolve('@use "~pkg/vars" as v;', "scss") == '@use "pkg/vars" as v;'


def test_project_root(project):
    result = TildeResolver(project).resolve("@forward '~styles/base';", "scss")
    assert result == f"@forward '{(project / 'styles' / 'base').as_posix()}';"


@pytest.mark.parametrize(
    "text",
    [
        "@import url(~pkg/vars.css);",
        "// @import '~pkg/vars';",
        "@import '~missing/file';",
        "@import 'pkg/vars';",
    ],
)
def test_left_alone(project, text):
    assert TildeResolver(project).resolve(text, "scss") == text


def test_is_valid(project):
    base = project / "node_modules" / "pkg"
    assert TildeResolver.is_valid(base / "vars", "scss")
    assert TildeResolver.is_valid(base / "_vars.scss", "scss")
    assert not TildeResolver.is_valid(base / "vars", "less")
