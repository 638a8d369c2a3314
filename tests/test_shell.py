import io

from minilisp.__main__ import main
from minilisp.interpreter import Interpreter
from minilisp.shell import LispShell, paren_balance, read_chunks, run_source


def test_paren_balance():
    assert paren_balance("(a (b)") == 1
    assert paren_balance("(a)") == 0
    assert paren_balance("a))") == -2


def test_read_chunks_joins_lines_until_balanced():
    lines = ["(defun sq (x)\n", "  (* x x))\n", "\n", "(sq 3)\n", "x\n"]
    assert list(read_chunks(lines)) == ["(defun sq (x)\n  (* x x))\n", "(sq 3)\n", "x\n"]


def test_read_chunks_yields_unbalanced_tail():
    assert list(read_chunks(["(+ 1\n", "2\n"])) == ["(+ 1\n2\n"]


def test_run_source_continues_after_errors():
    out, err = io.StringIO(), io.StringIO()
    source = "(setq x 2)\n(undefined-fn 1)\n(+ x\n   3)\n(/ 1 0)\n'(a b)\n"
    failures = run_source(Interpreter(), source, out, err)
    assert failures == 2
    assert out.getvalue() == "2\n5\n(a b)\n"
    assert err.getvalue().count("Error:") == 2
    assert "undefined-fn" in err.getvalue()


def test_run_source_survives_deeply_nested_chunk():
    out, err = io.StringIO(), io.StringIO()
    source = "(" * 100000 + ")" * 100000 + "\n(+ 1 2)\n"
    assert run_source(Interpreter(), source, out, err) == 1
    assert out.getvalue() == "3\n"
    assert "nested too deeply" in err.getvalue()


def test_run_source_several_expressions_on_one_line():
    out, err = io.StringIO(), io.StringIO()
    assert run_source(Interpreter(), "(setq a 1) (+ a 1)\n", out, err) == 0
    assert out.getvalue() == "1\n2\n"


def _run_shell(text):
    out = io.StringIO()
    shell = LispShell(Interpreter(), stdin=io.StringIO(text), stdout=out)
    shell.use_rawinput = False
    shell.cmdloop()
    return out.getvalue()


def test_shell_session():
    output = _run_shell("(setq x 2)\n(+ x\n 3)\n\n(car x)\nquit\n(setq never 1)\n")
    assert "=> 2" in output
    assert "=> 5" in output
    assert "... " in output
    assert "Error: Undefined function: car" in output
    assert "never" not in output


def test_shell_stops_at_eof():
    output = _run_shell("(list 1 2)\n")
    assert "=> (1 2)" in output


def test_main_runs_file(tmp_path, capsys):
    program = tmp_path / "fact.lisp"
    program.write_text(
        "(defun fact (n)\n"
        "  (cond ((equal n 0) 1)\n"
        "        (t (* n (fact (- n 1))))))\n"
        "(fact 5)\n"
    )
    assert main([str(program)]) == 0
    assert capsys.readouterr().out == "fact\n120\n"


def test_main_reports_failures(tmp_path, capsys):
    program = tmp_path / "bad.lisp"
    program.write_text("(+ 1 2)\n(/ 1 0)\n")
    assert main([str(program)]) == 1
    captured = capsys.readouterr()
    assert captured.out == "3\n"
    assert "Division by zero" in captured.err


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.lisp")]) == 1
    assert "Error reading" in capsys.readouterr().err
