"""Entry point for running the cmdline_parser demo as a module."""

from cmdline_parser.demo import run

if __name__ == "__main__":
    run()
