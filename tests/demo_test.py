import pytest
from cmdline_parser import demo


HELP_TEXT: str = (
    "Usage: AppExec -f <file_path> [OPTIONS]\n"
    "\t-V, --verbose\t\tenable verbose messages\n"
    "\t-f, --file\t\tfile path\n"
    "\t-h, --help\t\tshow help message\n"
    "\t-v, --version\t\tshow version\n"
)


@pytest.mark.parametrize("option", ["-h", "--help"])
def test_help(option: str, capsys):
    assert demo.main(["AppExec", "-f", "file.txt", option, "-v"]) == 0
    assert capsys.readouterr().out == HELP_TEXT


@pytest.mark.parametrize("option", ["-v", "--version"])
def test_version(option: str, capsys):
    assert demo.main(["AppExec", option]) == 0
    assert capsys.readouterr().out == "Application name 1.0.0\nApplication description\n"


def test_missing_file_path(capsys):
    assert demo.main(["AppExec", "-V"]) == 0
    assert capsys.readouterr().out == "Missing file path\n\n" + HELP_TEXT


def test_file_option_without_value(capsys):
    assert demo.main(["AppExec", "--file"]) == 0
    assert capsys.readouterr().out.startswith("Missing file path\n")


def test_file_path(capsys):
    assert demo.main(["AppExec", "--file", "data.csv"]) == 0
    assert (
        capsys.readouterr().out
        == "File path: data.csv\nVerbose option passed: false\n"
    )


def test_short_file_option_wins(capsys):
    assert demo.main(["AppExec", "--file", "long.csv", "-f", "short.csv", "--verbose"]) == 0
    assert (
        capsys.readouterr().out
        == "File path: short.csv\nVerbose option passed: true\n"
    )


def test_run_exits(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["AppExec", "-v"])

    with pytest.raises(SystemExit) as exc_info:
        demo.run()

    assert exc_info.value.code == 0
    assert capsys.readouterr().out.startswith("Application name 1.0.0")
