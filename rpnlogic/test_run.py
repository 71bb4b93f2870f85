import io

from rpnlogic.run import main


def test_formula_commands(capsys):
    assert main(["nnf", " ab&! "]) == 0
    assert main(["cnf", "ABC&|"]) == 0
    assert main(["sat", "AA!&"]) == 0
    assert main(["eval", "10|"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "A!B!|", "AB|AC|&", "False", "=> True"
    ]


def test_table(capsys):
    assert main(["table", "A!"]) == 0
    assert capsys.readouterr().out == "| A | = |\n|---|---|\n| 0 | 1 |\n| 1 | 0 |\n"


def test_parse_error_exits_with_status(capsys):
    assert main(["nnf", "A&"]) == 1
    assert "✗" in capsys.readouterr().out


def test_interactive(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("ab|!\n#\n"))
    assert main(["nnf"]) == 0
    out = capsys.readouterr().out
    assert "A!B!&" in out
    assert "unknown symbol" in out


def test_set_and_arithmetic(capsys):
    assert main(["set", "AB&", "0,1,2", "1 2 3"]) == 0
    assert main(["powerset", "1", "2"]) == 0
    assert main(["adder", "2", "3"]) == 0
    assert main(["multiplier", "6", "7"]) == 0
    assert main(["gray", "2"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "=> { 1, 2 }", "{ }", "{ 1 }", "{ 2 }", "{ 1, 2 }", "5", "42",
        "      10 ->       11",
    ]


def test_duplicate_set_is_reported(capsys):
    assert main(["set", "A", "1,1"]) == 1
    assert "duplicate" in capsys.readouterr().out


def test_large_cnf(capsys):
    assert main(["cnf", "AB^CD^^EF^^GH^^IJ^^K^"]) == 0
    assert capsys.readouterr().out.count("&") == 1023


def test_too_deep_for_rewriting_is_reported(capsys):
    assert main(["nnf", "A" + "A|" * 5000]) == 1
    assert "nested too deeply" in capsys.readouterr().out
