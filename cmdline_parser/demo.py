"""Demo module from cmdline_parser."""

import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from cmdline_parser.parser import CmdLineParser


APP_NAME = "Application name"
APP_VERSION = "1.0.0"
APP_DESCRIPTION = "Application description"

EXE_APP_NAME = "AppExec"
OPTIONS_USAGE_INFO = "-f <file_path> [OPTIONS]"
OPTIONS: dict[str, str] = {
    "-h, --help": "show help message",
    "-v, --version": "show version",
    "-V, --verbose": "enable verbose messages",
    "-f, --file": "file path",
}


@dataclass(slots=True)
class MissingOptionError(Exception):
    """
    Raised when a mandatory option or its value wasn't passed.
    """

    msg: str


def build_parser(print_method: Callable[[str], None] = print) -> CmdLineParser:
    """
    Returns a parser holding the demo application information.
    """
    parser = CmdLineParser(print_method)
    parser.set_app_name(APP_NAME)
    parser.set_app_version(APP_VERSION)
    parser.set_app_description(APP_DESCRIPTION)
    parser.set_app_usage_info(EXE_APP_NAME, OPTIONS_USAGE_INFO, OPTIONS)
    return parser


def _has_any(parser: CmdLineParser, *options: str) -> bool:
    return any(parser.has_option(o) for o in options)


def _file_path(parser: CmdLineParser) -> str:
    for option in ("-f", "--file"):
        value: str | None = parser.get_option(option)
        if value is not None:
            return value
    raise MissingOptionError("Missing file path\n")


def main(
    argv: Sequence[str] | None = None, print_method: Callable[[str], None] = print
) -> int:
    """
    Runs the demo application and returns its exit code.
    `argv` includes the program name, like sys.argv.
    """
    parser = build_parser(print_method)
    parser.parse_from(sys.argv if argv is None else argv)

    if _has_any(parser, "-h", "--help"):
        parser.show_help()
        return 0

    if _has_any(parser, "-v", "--version"):
        parser.show_version()
        return 0

    try:
        file_path: str = _file_path(parser)
    except MissingOptionError as e:
        print_method(e.msg)
        parser.show_help()
        return 0

    print_method(f"File path: {file_path}")

    verbose: bool = _has_any(parser, "-V", "--verbose")
    print_method(f"Verbose option passed: {str(verbose).lower()}")

    return 0


def run() -> None:
    raise SystemExit(main())
