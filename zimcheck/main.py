#!/usr/bin/env python3
"""zimcheck driver: command line parsing, check selection and output."""

import argparse
import sys
import time
from typing import List, Optional

from zimcheck.__version__ import __version__
from zimcheck.archive import open_archive
from zimcheck.checks import CheckKind, DiagnosticReport, EnabledChecks, StatusCode, run_selected_checks
from zimcheck.config import load_config
from zimcheck.errors import UsageError, ZimcheckError
from zimcheck.utils.console import format_status
from zimcheck.utils.logger import setup_logger
from zimcheck.utils.progress import ProgressBar


HELP_TEXT = (
    "\n"
    "zimcheck checks the quality of a ZIM file.\n\n"
    "Usage: zimcheck [options] zimfile\n"
    "options:\n"
    "-A , --all             run all tests. Default if no flags are given.\n"
    "-0 , --empty           Empty content\n"
    "-C , --checksum        Internal CheckSum Test\n"
    "-I , --integrity       Low-level correctness/integrity checks\n"
    "-M , --metadata        MetaData Entries\n"
    "-F , --favicon         Favicon\n"
    "-P , --main            Main page\n"
    "-R , --redundant       Redundant data check\n"
    "-U , --url_internal    URL check - Internal URLs\n"
    "-X , --url_external    URL check - External URLs\n"
    "-D , --details         Details of error\n"
    "-B , --progress        Print progress report\n"
    "-J , --json            Output in JSON format\n"
    "-H , --help            Displays Help\n"
    "-V , --version         Displays software version\n"
    "     --config FILE     YAML configuration file\n"
    "     --log-level LEVEL Logging level (DEBUG, INFO, WARNING, ERROR)\n"
    "     --log-file FILE   Also write log records to FILE\n"
    "examples:\n"
    "zimcheck -A wikipedia.zim\n"
    "zimcheck --checksum --redundant wikipedia.zim\n"
    "zimcheck -F -R wikipedia.zim\n"
    "zimcheck -M --favicon wikipedia.zim\n"
)

# (short options, check kind); short options are accepted in both cases
CHECK_OPTIONS = [
    (("-0",), CheckKind.EMPTY),
    (("-C", "-c"), CheckKind.CHECKSUM),
    (("-I", "-i"), CheckKind.INTEGRITY),
    (("-M", "-m"), CheckKind.METADATA),
    (("-F", "-f"), CheckKind.FAVICON),
    (("-P", "-p"), CheckKind.MAIN_PAGE),
    (("-R", "-r"), CheckKind.REDUNDANT),
    (("-U", "-u"), CheckKind.URL_INTERNAL),
    (("-X", "-x"), CheckKind.URL_EXTERNAL),
]


class ArgumentParser(argparse.ArgumentParser):
    """argparse parser that raises instead of printing usage and exiting."""

    def error(self, message):
        raise UsageError(message)


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="zimcheck", add_help=False)

    parser.add_argument("files", nargs="*", help="ZIM file to check (the last one wins)")

    check_group = parser.add_argument_group("Checks")
    check_group.add_argument("-A", "-a", "--all", action="store_true", dest="all")
    for short_options, kind in CHECK_OPTIONS:
        check_group.add_argument(*short_options, f"--{kind.value}",
                                 action="store_true", dest=kind.value)

    output_group = parser.add_argument_group("Output")
    # No effect, reports always carry the details
    output_group.add_argument("-D", "-d", "--details", action="store_true")
    output_group.add_argument("-B", "-b", "--progress", action="store_true")
    output_group.add_argument("-J", "-j", "--json", action="store_true")
    output_group.add_argument("-H", "-h", "--help", action="store_true")
    output_group.add_argument("-V", "-v", "--version", action="store_true")

    settings_group = parser.add_argument_group("Settings")
    settings_group.add_argument("--config", default=None)
    settings_group.add_argument("--log-level", default="WARNING",
                                choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                                type=str.upper)
    settings_group.add_argument("--log-file", default=None)
    return parser


def select_checks(args: argparse.Namespace) -> EnabledChecks:
    """Enabled checks from the parsed flags; no check flag means all of them."""
    checks = EnabledChecks(
        kind for _, kind in CHECK_OPTIONS if getattr(args, kind.value)
    )
    if args.all or not checks:
        checks.enable_all()
    return checks


def _elapsed_seconds(start: float) -> int:
    return int(time.time() - start)


def _print_help() -> None:
    print(HELP_TEXT, end="")


def main(argv: Optional[List[str]] = None) -> int:
    """Run zimcheck and return the process exit status."""
    start = time.time()
    parser = build_parser()

    try:
        args, extras = parser.parse_known_args(argv)
    except UsageError as e:
        print(f"zimcheck: {e.message}", file=sys.stderr)
        _print_help()
        return StatusCode.FAIL

    unknown = [item for item in extras if item.startswith("-") and item != "-"]
    if unknown:
        print(f"Unknown option `{unknown[0]}'", file=sys.stderr)
        _print_help()
        return StatusCode.FAIL

    if args.help:
        _print_help()
        return -1

    if args.version:
        print(__version__)
        return StatusCode.PASS

    files = args.files + [item for item in extras if not item.startswith("-")]
    if not files:
        print("No file provided as argument", file=sys.stderr)
        _print_help()
        return -1
    filename = files[-1]

    logger = setup_logger("zimcheck", args.log_level, args.log_file)
    checks = select_checks(args)
    logger.debug("Enabled checks: %s", ", ".join(kind.value for kind in checks))

    report = DiagnosticReport(quiet=args.json)
    try:
        config = load_config(args.config)
        logger.debug("Configuration: %s", config.model_dump_without_none())
        report.info(f"[INFO] Checking zim file {filename}")
        with open_archive(filename) as archive, ProgressBar(enabled=args.progress) as progress:
            run_selected_checks(archive, checks, report, config, progress)
            file_uuid = archive.uuid
    except ZimcheckError as e:
        logger.debug("Aborting: %r", e)
        print(e.message, file=sys.stderr)
        if e.suggestion:
            print(e.suggestion, file=sys.stderr)
        return StatusCode.EXCEPTION
    except Exception as e:
        logger.error("An unexpected error occurred: %s", e, exc_info=True)
        print(e, file=sys.stderr)
        return StatusCode.EXCEPTION

    passed = report.overall_status()
    status = StatusCode.PASS if passed else StatusCode.FAIL

    if args.json:
        print(report.to_json(__version__, filename, file_uuid, checks))
        return status

    print(report.report(), end="")
    print(f"[INFO] Overall Test Status: {format_status(passed, sys.stdout)}")
    print(f"[INFO] Total time taken by zimcheck: {_elapsed_seconds(start)} seconds.")
    return status


if __name__ == "__main__":
    sys.exit(main())
