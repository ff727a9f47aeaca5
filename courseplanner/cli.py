"""
CLI (Command Line Interface).

Starts the interactive course planner:

    courseplanner
    courseplanner --prefix CSCI --prefix MATH --prefix PHYS
    python -m courseplanner

Note:
- The menu itself lives in courseplanner/interactive.py
- Without flags the session behaves exactly like the plain menu program
"""

from __future__ import annotations

import argparse
from pathlib import Path

from courseplanner.interactive import SessionState, run_interactive
from courseplanner.parse import DEFAULT_SUBJECT_PREFIXES


def _version() -> str:
    try:
        return (Path(__file__).resolve().parent / "VERSION").read_text(encoding="utf-8").strip()
    except OSError:
        return "unknown"


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser.
    """
    parser = argparse.ArgumentParser(prog="courseplanner", description="Course planner (interactive menu)")

    parser.add_argument(
        "--prefix",
        dest="prefixes",
        action="append",
        metavar="CODE",
        help="Subject prefix that marks a prerequisite code (repeatable, default: CSCI and MATH)",
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {_version()}")

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, runs the menu and exits with code 0.
    """
    args = build_parser().parse_args(argv)

    prefixes = tuple(p.strip() for p in (args.prefixes or []) if p.strip())
    if not prefixes:
        prefixes = DEFAULT_SUBJECT_PREFIXES

    run_interactive(SessionState(prefixes=prefixes))
    raise SystemExit(0)
