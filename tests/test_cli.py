from pathlib import Path

from cssvendor.__main__ import main

SOURCE = "a {\n  display: flex;\n}\n"
PREFIXED = "a {\n  display: -webkit-flex;\n  display: -ms-flexbox;\n  display: flex;\n}\n"


def test_stdout(tmp_path, capsys):
    path = tmp_path / "site.css"
    path.write_text(SOURCE)
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == PREFIXED
    assert path.read_text() == SOURCE


def test_in_place(tmp_path):
    path = tmp_path / "site.scss"
    path.write_text(SOURCE)
    assert main(["-i", str(path)]) == 0
    assert path.read_text() == PREFIXED


def test_minify(tmp_path, capsys):
    path = tmp_path / "site.css"
    path.write_text(SOURCE)
    assert main(["--minify", str(path)]) == 0
    assert capsys.readouterr().out == "a{display:-webkit-flex;display:-ms-flexbox;display:flex}"


def test_config(tmp_path, capsys):
    config = tmp_path / "prefix.json"
    config.write_text('{"values": {"display": {"flex": ["-webkit-*"]}}}')
    path = tmp_path / "site.css"
    path.write_text(SOURCE)
    assert main(["-c", str(config), str(path)]) == 0
    assert capsys.readouterr().out == "a {\n  display: -webkit-flex;\n  display: flex;\n}\n"


def test_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.css")]) == 1


def test_bad_config(tmp_path):
    config = tmp_path / "prefix.json"
    config.write_text("[]")
    path = tmp_path / "site.css"
    path.write_text(SOURCE)
    assert main(["-c", str(config), str(path)]) == 2


def test_in_place_write_error(tmp_path, monkeypatch):
    path = tmp_path / "site.css"
    path.write_text(SOURCE)

    def read_only(self, *args, **kwargs):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "write_text", read_only)
    assert main(["-i", str(path)]) == 1
    assert path.read_text() == SOURCE
