import logging

import pytest

from canonical_data_syncer import __version__
from canonical_data_syncer.args import Verbosity
from canonical_data_syncer.main import main, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.parametrize(
    "verbosity, level",
    [
        (Verbosity.quiet, logging.WARNING),
        (Verbosity.normal, logging.INFO),
        (Verbosity.detailed, logging.DEBUG),
    ],
)
def test_setup_logging(verbosity, level):
    handler = setup_logging(verbosity)
    assert logging.getLogger().level == level
    assert handler.level == level
    assert logging.getLogger().handlers == [handler]


def test_main_success(capsys):
    assert main(["-e", "two-fer", "-v", "d"]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Exercise: two-fer" in captured.err


def test_main_quiet(capsys):
    assert main(["-v", "q"]) == 0
    assert capsys.readouterr().err == ""


def test_main_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out == f"Canonical Data Syncer v{__version__}\n"


def test_main_usage_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["-m", "z"])
    assert excinfo.value.code == 1
    assert "invalid value for '-m': 'z'" in capsys.readouterr().out
