from canonical_data_syncer import __version__
from canonical_data_syncer.args.help import HelpFormatter, allowed_values
from canonical_data_syncer.args.options import Mode, Opt, Verbosity

DESCRIPTION_COLUMN = len("  -v, --verbosity <verbosity>  ")


def test_allowed_values():
    assert allowed_values(Mode) == "Allowed values: c[hoose], i[nclude], e[xclude]"
    assert allowed_values(Verbosity) == "Allowed values: q[uiet], n[ormal], d[etailed]"


def test_options_text_layout(registry):
    lines = HelpFormatter(registry, "sync").options_text().split("\n")
    assert lines[0] == "Options:"
    assert len(lines) == len(Opt) + 1

    descriptions = HelpFormatter(registry, "sync").descriptions()
    for line, opt in zip(lines[1:], Opt):
        assert line[DESCRIPTION_COLUMN:] == descriptions[opt]
        assert line[DESCRIPTION_COLUMN - 2:DESCRIPTION_COLUMN] == "  "


def test_option_rows(registry):
    text = HelpFormatter(registry, "sync").options_text()
    assert (
        "  -e, --exercise <slug>        Only sync this exercise\n" in text
    )
    assert (
        "  -m, --mode <mode>            What to do with missing test cases. "
        "Allowed values: c[hoose], i[nclude], e[xclude]\n" in text
    )
    assert (
        "  -v, --verbosity <verbosity>  The verbosity of output. "
        "Allowed values: q[uiet], n[ormal], d[etailed]\n" in text
    )
    assert "  -c, --check                  Terminates with" in text
    assert (
        "  -o, --offline                Do not check that the directory specified by "
        "`-p, --prob-specs-dir` is up-to-date\n" in text
    )
    assert text.endswith(
        "      --version                Show this tool's version information and exit"
    )


def test_usage(registry):
    formatter = HelpFormatter(registry, "sync")
    assert formatter.usage().startswith("Usage: sync [options]\n\nOptions:\n")
    assert formatter.help_text() == formatter.usage() + "\n"


def test_help_text_is_stable(registry):
    formatter = HelpFormatter(registry, "sync")
    first = formatter.help_text()
    assert formatter.help_text() == first
    assert HelpFormatter(registry, "sync").help_text() == first


def test_default_app_name(registry, monkeypatch):
    monkeypatch.setattr("sys.argv", ["/usr/local/bin/canonical_data_syncer", "-c"])
    assert HelpFormatter(registry).app_name == "canonical_data_syncer"
    monkeypatch.setattr("sys.argv", [""])
    assert HelpFormatter(registry).app_name == "canonical_data_syncer"


def test_version_text():
    assert HelpFormatter.version_text() == f"Canonical Data Syncer v{__version__}\n"
