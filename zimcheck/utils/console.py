#!/usr/bin/env python3
"""
Console helpers for zimcheck.

The report text itself is a stable contract and is never coloured; only the
final status word is highlighted, and only on an interactive terminal.
"""
from typing import TextIO

from colorama import Fore, Style


def is_interactive(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    try:
        return bool(isatty and isatty())
    except ValueError:
        # closed stream
        return False


def format_status(passed: bool, stream: TextIO) -> str:
    """Return 'Pass' or 'Fail', coloured when ``stream`` is a terminal."""
    word = "Pass" if passed else "Fail"
    if not is_interactive(stream):
        return word
    color = Fore.GREEN if passed else Fore.RED
    return f"{color}{word}{Style.RESET_ALL}"
