# tests/test_cli.py
from __future__ import annotations

import sys

import pytest

from perfectroot import __version__
from perfectroot.cli import main
from perfectroot.config import DEFAULT_CONFIG
from perfectroot.fmt import strip_ansi
from perfectroot.output_manager import OutputManager
from perfectroot.runtime import current
from perfectroot.utility import dec_digits, typename


@pytest.fixture
def keep_excepthook(monkeypatch):
    # --debug replaces sys.excepthook; put it back afterwards
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)


def test_main_prints_report_and_exits_zero(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    out = strip_ansi(captured.out)
    for n in (6, 28, 496, 8128):
        assert f"Perfect number: {n} = 1 + 2" in out
        assert f"Expected sqrt() of {n}\t\t= " in out
        assert f"Computed square root of {n}\t= " in out
    assert out.count("iterations.") == 4
    assert captured.err == ""


def test_arguments_do_not_change_report_or_exit_status(capsys):
    assert main([]) == 0
    plain = capsys.readouterr().out

    assert main(["10000", "--output", "x.md", "--quiet"]) == 0
    captured = capsys.readouterr()
    assert captured.out == plain
    assert "Ignoring arguments: 10000 --output x.md --quiet" in captured.err


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--version"])
    assert exc.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_debug_diagnostics_go_to_stderr(capsys, keep_excepthook):
    assert main(["--debug"]) == 0
    captured = capsys.readouterr()
    assert "[debug]" not in captured.out
    assert "Perfect number: 8128" in strip_ansi(captured.out)
    assert "[debug] configuration:" in captured.err
    assert "UPPER_BOUND" in captured.err
    assert "[debug] sqrt(8128): 6 iterations" in captured.err
    assert "scanned 10000 candidates [1..10000], found 4 perfect number(s)" in captured.err
    assert current().debug is True


def test_broken_pipe_exits_zero(monkeypatch, capsys):
    def reader_gone(*args, **kwargs):
        raise BrokenPipeError

    monkeypatch.setattr("perfectroot.cli.run", reader_gone)
    assert main([]) == 0
    assert capsys.readouterr().err == ""


def test_unexpected_error_is_reported_without_traceback(monkeypatch, capsys):
    def boom(*args, **kwargs):
        raise RuntimeError("kaput")

    monkeypatch.setattr("perfectroot.cli.run", boom)
    assert main([]) == 1
    err = capsys.readouterr().err
    assert "Unexpected error: RuntimeError: kaput" in err
    assert "--debug" in err


def test_unexpected_error_reraised_in_debug(monkeypatch, keep_excepthook):
    def boom(*args, **kwargs):
        raise RuntimeError("kaput")

    monkeypatch.setattr("perfectroot.cli.run", boom)
    with pytest.raises(RuntimeError):
        main(["--debug"])


def test_keyboard_interrupt(monkeypatch, capsys):
    def interrupted(*args, **kwargs):
        raise KeyboardInterrupt

    monkeypatch.setattr("perfectroot.cli.run", interrupted)
    assert main([]) == 130
    assert "Aborted by user." in capsys.readouterr().err


# ---------- output manager / utility -------------------------------------------


def test_output_manager_screen_and_buffer(capsys):
    om = OutputManager()
    om.write("a", "b", sep="-")
    om.write("\x1b[33mcolored\x1b[0m")
    om.close()
    assert strip_ansi(capsys.readouterr().out) == "a-b\ncolored\n"
    assert om.getvalue() == "a-b\n\x1b[33mcolored\x1b[0m\n"


def test_output_manager_quiet_only_buffers(capsys):
    om = OutputManager(quiet=True)
    om.write("hidden")
    om.close()
    assert capsys.readouterr().out == ""
    assert om.getvalue() == "hidden\n"


@pytest.mark.parametrize("n, digits", [(0, 1), (9, 1), (10, 2), (8128, 4), (-999, 3), (10**40, 41)])
def test_dec_digits(n, digits):
    assert dec_digits(n) == digits


def test_typename():
    assert typename(15) == "int"


def test_runtime_apply_takes_config_record():
    rt = current()
    rt.apply(DEFAULT_CONFIG)
    assert rt.settings == DEFAULT_CONFIG.as_dict()
    assert rt.settings["PRECISION"] == 15
