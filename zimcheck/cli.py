# zimcheck/cli.py
#!/usr/bin/env python3
"""Command line interface entry point for zimcheck."""

import sys


def _fix_console_encoding():
    """Never crash on entry paths the console encoding cannot represent."""
    for stream in (sys.stdout, sys.stderr):
        if stream is None or not hasattr(stream, "reconfigure"):
            continue
        if (getattr(stream, "encoding", None) or "").lower() == "utf-8":
            continue
        try:
            stream.reconfigure(errors="replace")
        except (AttributeError, ValueError, OSError):
            pass


def main():
    """Console script entry point."""
    _fix_console_encoding()

    from zimcheck.main import main as zimcheck_main
    sys.exit(zimcheck_main())


if __name__ == "__main__":
    main()
