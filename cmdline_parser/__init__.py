"""cmdline_parser, a minimal command line arguments parser."""

from .parser import CmdLineParser

__version__: str = "1.0.0"

__all__: list[str] = ["CmdLineParser"]
