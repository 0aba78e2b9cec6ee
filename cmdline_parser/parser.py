"""Parser module from cmdline_parser."""

import sys
import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field


logger = logging.getLogger(__name__)

USAGE_PREFIX = "Usage:"


@dataclass(slots=True)
class _ParserData:
    """
    Internal parser data used by cmdline_parser.
    """

    args: list[str] = field(default_factory=list)

    app_name: str = ""
    app_version: str = ""
    app_description: str = ""

    exe_app_name: str = ""
    options_usage_info: str = ""
    options: dict[str, str] = field(default_factory=dict)


class CmdLineParser:
    """
    Command line arguments parser.
    Stores the raw command line arguments and answers queries about them.

    Not thread-safe for concurrent writers. Any number of readers is fine once
    the arguments are parsed and no further writes occur.
    """

    data: _ParserData
    print_method: Callable[[str], None]

    def __init__(self, print_method: Callable[[str], None] = print) -> None:
        self.data = _ParserData()
        self.print_method = print_method

    # =============================================
    #                Parsing methods
    # =============================================
    def parse_from(self, args: Sequence[str], count: int | None = None) -> None:
        """
        Stores the command line arguments, program name included.
        Only the first `count` arguments are kept if `count` is given.
        Parsing again replaces the previously stored arguments.
        """
        tokens: list[str] = list(args)
        if count is not None:
            tokens = tokens[: max(count, 0)]
        self.data.args = tokens
        logger.debug("Parsed %d command line arguments", len(tokens))

    def parse(self) -> None:
        """
        Stores the command line arguments from sys.argv.
        """
        self.parse_from(sys.argv)

    # =============================================
    #                 Query methods
    # =============================================
    def get_args(self) -> list[str]:
        """
        Returns a copy of the command line arguments.
        """
        return list(self.data.args)

    def has_option(self, option: str) -> bool:
        """
        Returns True if `option` was passed (Example: -h).
        Only exact matches count.
        """
        return option in self.data.args

    def get_option(self, option: str) -> str | None:
        """
        Returns the value passed after `option` (Example: -f <value>).
        Returns None if the option wasn't passed or nothing follows it.
        """
        try:
            index: int = self.data.args.index(option)
        except ValueError:
            return None

        if index + 1 < len(self.data.args):
            return self.data.args[index + 1]
        return None

    # =============================================
    #              Application info
    # =============================================
    def set_app_name(self, name: str) -> None:
        """
        Application name, shown with the version information.
        """
        self.data.app_name = name

    def get_app_name(self) -> str:
        return self.data.app_name

    def set_app_version(self, version: str) -> None:
        """
        Application version, shown with the version information.
        """
        self.data.app_version = version

    def get_app_version(self) -> str:
        return self.data.app_version

    def set_app_description(self, description: str) -> None:
        """
        Application description, shown with the version information.
        """
        self.data.app_description = description

    def get_app_description(self) -> str:
        return self.data.app_description

    def show_version(self) -> None:
        """
        Prints the version information.
        Example:
            Parser 1.0.0
            Command line arguments parser
        """
        self.print_method(
            f"{self.data.app_name} {self.data.app_version}"
            "\n"
            f"{self.data.app_description}"
        )

    # =============================================
    #                  Usage info
    # =============================================
    def set_app_usage_info(
        self, exe_name: str, options_usage_info: str, options: Mapping[str, str]
    ) -> None:
        """
        Usage information shown in the help message.
        `options` maps the option aliases (Example: "-h, --help") to their help text.
        Replaces any previously set options.
        """
        self.data.exe_app_name = exe_name
        self.data.options_usage_info = options_usage_info
        # Help output lists the options sorted by alias
        self.data.options = dict(sorted(options.items()))
        logger.debug("Usage info set with %d options", len(self.data.options))

    def get_exe_app_name(self) -> str:
        return self.data.exe_app_name

    def get_options_usage_info(self) -> str:
        return self.data.options_usage_info

    def get_options(self) -> dict[str, str]:
        """
        Returns a copy of the options used in the help message.
        """
        return dict(self.data.options)

    def show_help(self) -> None:
        """
        Prints the help message.
        Example:
            Usage: ParserExe [OPTIONS]
                -h, --help        show help message
        """
        lines: list[str] = [
            f"{USAGE_PREFIX} {self.data.exe_app_name} {self.data.options_usage_info}"
        ]
        for alias, text in self.data.options.items():
            lines.append(f"\t{alias}\t\t{text}")

        self.print_method("\n".join(lines))
