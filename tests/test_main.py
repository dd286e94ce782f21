import io

import pytest

import main


def run_shell(monkeypatch, capsys, script):
    monkeypatch.setattr("sys.stdin", io.StringIO(script))
    assert main.main(["main"]) == 0
    return capsys.readouterr().out.splitlines()


def test_canonical_session(monkeypatch, capsys):
    puts = "".join(f"PUT {k} {v}\n" for v, k in enumerate("SEARCHEXAMPLE"))
    out = run_shell(monkeypatch, capsys, puts + "\n".join([
        "LEN",
        "KEYS",
        "GET E",
        "LEVEL",
        "RANK M",
        "SELECT 0",
        "FLOOR B",
        "CEIL B",
        "SIZE B L",
        "KEYS B L",
        "MIN",
        "MAX",
        "EXIT",
        "LEN",
    ]) + "\n")
    assert out[:13] == ["OK"] * 13
    assert out[13:] == [
        "10",
        "A C E H L M P R S X",
        "12",
        "S E X A R C H M L P",
        "5",
        "A",
        "A",
        "C",
        "4",
        "C E H L",
        "A",
        "X",
    ]


def test_mutations(monkeypatch, capsys):
    out = run_shell(monkeypatch, capsys, "\n".join([
        "put b two words",
        "put a 1",
        "put c 3",
        "get b",
        "contains a",
        "del a",
        "contains a",
        "delmin",
        "delmax",
        "len",
        "show",
    ]) + "\n")
    assert out == [
        "OK", "OK", "OK",
        "two words",
        "true",
        "OK",
        "false",
        "OK",
        "OK",
        "0",
        "BST{}",
    ]


def test_absent_results_print_empty_line(monkeypatch, capsys):
    out = run_shell(monkeypatch, capsys, "GET x\nMIN\nFLOOR a\nCEIL a\nKEYS\n")
    assert out == ["", "", "", "", ""]


@pytest.mark.parametrize("line,expected", [
    ("SELECT 0", "ERR index out of range"),
    ("SELECT x", "ERR usage: SELECT <index>"),
    ("PUT k", "ERR usage: PUT <key> <value>"),
    ("GET", "ERR usage: GET <key>"),
    ("SIZE a", "ERR usage: SIZE <lo> <hi>"),
    ("KEYS a", "ERR usage: KEYS [<lo> <hi>]"),
    ("LEN extra", "ERR usage: LEN"),
    ("PUT '' v", "ERR invalid key"),
    ("FROB", "ERR unknown command"),
    ("PUT 'unbalanced", "ERR syntax"),
])
def test_errors(monkeypatch, capsys, line, expected):
    assert run_shell(monkeypatch, capsys, line + "\n") == [expected]


def test_internal_error_keeps_running(monkeypatch, capsys):
    def boom(args, st):
        raise RuntimeError("boom")

    monkeypatch.setitem(main.DISPATCH, "LEN", boom)
    out = run_shell(monkeypatch, capsys, "LEN\nPUT a 1\n")
    assert out == ["ERR internal", "OK"]
