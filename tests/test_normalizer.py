import pytest

from canonical_data_syncer.args.errors import InvalidValueError, TokenKind
from canonical_data_syncer.args.normalizer import OptionResolver, coerce_enum, normalize_option
from canonical_data_syncer.args.options import Mode, Opt, Verbosity


@pytest.fixture
def resolver(registry):
    return OptionResolver(registry)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Prob-Specs_Dir", "probspecsdir"),
        ("probSpecsDir", "probspecsdir"),
        ("--__", ""),
        ("MODE", "mode"),
    ],
)
def test_normalize_option(raw, expected):
    assert normalize_option(raw) == expected


@pytest.mark.parametrize(
    "key, expected",
    [
        ("exercise", Opt.exercise),
        ("Exercise", Opt.exercise),
        ("e", Opt.exercise),
        ("E", Opt.exercise),
        ("prob_specs_dir", Opt.probSpecsDir),
        ("PROB-SPECS-DIR", Opt.probSpecsDir),
        ("version", Opt.version),
        ("v", Opt.verbosity),
        ("h", Opt.help),
    ],
)
def test_resolve(resolver, key, expected):
    assert resolver.resolve(key) is expected


@pytest.mark.parametrize("key", ["chekc", "x", "_", "", "ver", "probspecs"])
def test_resolve_unknown(resolver, key):
    assert resolver.resolve(key) is None


@pytest.mark.parametrize("enum_cls", [Mode, Verbosity])
def test_coerce_first_letter(enum_cls):
    for member in enum_cls:
        letter = member.value[0]
        assert coerce_enum(enum_cls, TokenKind.short_option, "x", letter) is member
        assert coerce_enum(enum_cls, TokenKind.short_option, "x", letter.upper()) is member


@pytest.mark.parametrize("val, expected", [("include", Mode.include), ("EXCLUDE", Mode.exclude)])
def test_coerce_full_name(val, expected):
    assert coerce_enum(Mode, TokenKind.long_option, "mode", val) is expected


@pytest.mark.parametrize("val", ["z", "incl", "", "chose"])
def test_coerce_invalid(val):
    with pytest.raises(InvalidValueError) as excinfo:
        coerce_enum(Mode, TokenKind.short_option, "m", val)
    assert "invalid value for '-m'" in excinfo.value.message
    assert excinfo.value.exit_code == 1


def test_coerce_error_names_value():
    with pytest.raises(InvalidValueError) as excinfo:
        coerce_enum(Verbosity, TokenKind.long_option, "verbosity", "loud")
    assert excinfo.value.message == "invalid value for '--verbosity': 'loud'"
