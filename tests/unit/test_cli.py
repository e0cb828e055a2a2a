import json

import pytest

from turtlescene.cli import compile as cli


@pytest.fixture
def program_file(tmp_path):
    def write(text):
        path = tmp_path / "prog.tur"
        path.write_text(text, encoding="utf-8")
        return path

    return write


def test_cli_prints_summary(program_file, capsys):
    path = program_file("pendown move 10")
    assert cli.main([str(path)]) == cli.EXIT_OK
    out = capsys.readouterr().out
    assert "1 objects, 1 paints" in out
    assert "diagnostics" not in out


def test_cli_reports_diagnostics_and_strict(program_file, capsys):
    path = program_file("poploc")
    assert cli.main([str(path)]) == cli.EXIT_OK
    assert "diagnostics: poploc on empty stack" in capsys.readouterr().out
    assert cli.main([str(path), "--strict"]) == cli.EXIT_DIAGNOSTICS


def test_cli_parse_error(program_file, capsys):
    path = program_file("pendown\nwobble")
    assert cli.main([str(path)]) == cli.EXIT_ERROR
    err = capsys.readouterr().err
    assert "line 2, column 1" in err
    assert "wobble" in err


def test_cli_missing_file(tmp_path, capsys):
    assert cli.main([str(tmp_path / "nope.tur")]) == cli.EXIT_ERROR
    assert "File error" in capsys.readouterr().err


def test_cli_writes_json(program_file, tmp_path):
    path = program_file("pendown move 2")
    out = tmp_path / "scene.json"
    assert cli.main([str(path), "--json", str(out), "-q"]) == cli.EXIT_OK
    data = json.loads(out.read_text(encoding="utf-8"))
    assert len(data["scene"]["objects"]) == 1
    assert data["diagnostics"] == []


def test_cli_json_stdout(program_file, capsys):
    path = program_file("go 1 2")
    assert cli.main([str(path), "--json", "-"]) == cli.EXIT_OK
    lines = capsys.readouterr().out.splitlines()
    data = json.loads(lines[-1])
    assert data["scene"]["bounds"] == [0.0, 0.0, 1.0, 2.0]


@pytest.mark.parametrize(
    "argv, level",
    [
        (["x"], None),
        (["x", "-v"], 20),
        (["x", "-vv"], 10),
        (["x", "-vvv"], 5),
        (["x", "-q"], 40),
        (["x", "--log-level", "TRACE"], 5),
        (["x", "--log-level", "ERROR"], 40),
    ],
)
def test_resolve_log_level(argv, level):
    args = cli.build_argparser().parse_args(argv)
    resolved = cli.resolve_log_level(args)
    if level is not None:
        assert resolved == level
    else:
        assert isinstance(resolved, int)


def test_cli_rejects_non_utf8_input(tmp_path, capsys):
    path = tmp_path / "binary.tur"
    path.write_bytes(b"pendown move 10 \xff\xfe")
    assert cli.main([str(path)]) == cli.EXIT_ERROR
    err = capsys.readouterr().err
    assert "not valid UTF-8" in err


def test_trace_env_flag_sets_default_level(monkeypatch):
    monkeypatch.setattr(cli, "TRACE_ENABLED", True)
    assert cli.resolve_log_level(cli.build_argparser().parse_args(["x"])) == 5
    # Explicit flags still win
    assert cli.resolve_log_level(cli.build_argparser().parse_args(["x", "-q"])) == 40
