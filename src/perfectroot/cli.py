# src/perfectroot/cli.py

"""
Perfect Numbers and their Square Roots

Description:
    Finds the perfect numbers in 1..10000, shows each one as the sum of its
    proper divisors, then prints its square root twice: once from a trusted
    high-precision routine and once from the Babylonian method, together
    with the number of iterations the latter needed.

usage: perfectroot [--debug] [--version]

The report itself takes no input; --debug only adds diagnostics on stderr.
"""

from __future__ import annotations

import argparse
import faulthandler
import os
import platform
import sys
import traceback

from colorama import init as colorama_init

from perfectroot import __version__ as _ver
from perfectroot.config import DEFAULT_CONFIG
from perfectroot.driver import run
from perfectroot.output_manager import OutputManager
from perfectroot.runtime import APPLY
from perfectroot.runtime import reset as _rt_reset
from perfectroot.utility import typename


def _install_loud_error_handlers(debug: bool) -> None:
    if not debug:
        return
    # Always show full Python tracebacks
    try:
        faulthandler.enable()
    except (AttributeError, OSError, ValueError):
        # stderr without a real file descriptor (captured, redirected in-process)
        pass

    def _excepthook(exc_type, exc, tb):
        sys.stderr.write("\n[UNCAUGHT EXCEPTION]\n")
        traceback.print_exception(exc_type, exc, tb, file=sys.stderr)
        sys.stderr.flush()
    sys.excepthook = _excepthook


def _configure_text_streams() -> None:
    # Respect explicit user choice
    if os.environ.get("PYTHONIOENCODING"):
        return
    try:
        # Only touch redirected output (pipes/files), leave TTY as-is
        if not sys.stdout.isatty():
            enc = (sys.stdout.encoding or "").lower()
            if platform.system() == "Windows" or enc in ("", "ascii", "us-ascii"):
                sys.stdout.reconfigure(encoding="utf-8", errors="replace")
                sys.stderr.reconfigure(encoding="utf-8", errors="replace")
    except (AttributeError, OSError, ValueError):
        # captured/replaced streams may not support reconfigure()
        pass


def _silence_stdout() -> None:
    """Point stdout at devnull so the interpreter's final flush cannot raise again."""
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except (AttributeError, OSError, ValueError):
        pass


# ---- argparse ----
def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="perfectroot",
        description=(
            f"Perfect numbers in {DEFAULT_CONFIG.lower_bound}..{DEFAULT_CONFIG.upper_bound}, "
            "their divisors and square roots (Babylonian method)"
        ),
    )
    p.add_argument("--debug", action="store_true", help="Show configuration, timings and internal trace info on stderr")
    p.add_argument("--version", action="version", version=f"%(prog)s {_ver}")
    return p


def main(argv=None) -> int:
    """Thin wrapper: hide tracebacks unless debug."""
    try:
        return _main_impl(argv)
    except BrokenPipeError:
        # reader went away (e.g. piped into `head`); the report is not at fault
        _silence_stdout()
        return 0
    except KeyboardInterrupt:
        print("Aborted by user.", file=sys.stderr)
        return 130
    except Exception as e:
        debug = "--debug" in (argv if argv is not None else sys.argv)
        if debug:
            raise
        print(f"Unexpected error: {e.__class__.__name__}: {e}", file=sys.stderr)
        print("Run with --debug for a full traceback.", file=sys.stderr)
        return 1


# ---- main ----
def _main_impl(argv=None) -> int:

    colorama_init(autoreset=True)
    _configure_text_streams()

    parser = _build_parser()
    args, ignored = parser.parse_known_args(argv)

    rt = _rt_reset()
    rt.debug = bool(args.debug)
    APPLY(DEFAULT_CONFIG)

    _install_loud_error_handlers(args.debug)

    if ignored:
        print(f"Ignoring arguments: {' '.join(ignored)} (range and precision are fixed)", file=sys.stderr)

    if args.debug:
        print(f"[debug] perfectroot {_ver}", file=sys.stderr)
        print("[debug] configuration:", file=sys.stderr)
        for k, v in rt.settings.items():
            print(f"        {k:.<30} {v!r} ({typename(v)})", file=sys.stderr)
        print(f"[debug] tolerance: {DEFAULT_CONFIG.tolerance}", file=sys.stderr)

    om = OutputManager()
    try:
        run(DEFAULT_CONFIG, om)
    finally:
        om.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
