"""
Option registry module for canonical_data_syncer

Declares the recognized command-line options, the closed value sets for
--mode and --verbosity, and the configuration record produced by parsing.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


class Mode(Enum):
    """What to do with missing test cases"""

    choose = "choose"
    include = "include"
    exclude = "exclude"


class Verbosity(Enum):
    """Amount of output produced while syncing"""

    quiet = "quiet"
    normal = "normal"
    detailed = "detailed"


class Opt(Enum):
    """Recognized options, in the order they are listed in the help text"""

    exercise = "exercise"
    check = "check"
    mode = "mode"
    verbosity = "verbosity"
    probSpecsDir = "probSpecsDir"
    offline = "offline"
    help = "help"
    version = "version"


# Options without a short form
OPTS_NO_SHORT = frozenset({Opt.version})

# Boolean switches
OPTS_NO_VALUE = frozenset({Opt.check, Opt.offline, Opt.help, Opt.version})


@dataclass(frozen=True)
class Conf:
    """Parsed command-line configuration"""

    exercise: str = ""
    check: bool = False
    mode: Mode = Mode.choose
    verbosity: Verbosity = Verbosity.normal
    prob_specs_dir: str = ""
    offline: bool = False


def gen_short_keys() -> Dict[Opt, Optional[str]]:
    """
    Derive the short key of every option

    Returns:
        Dict mapping each Opt to its lowercase first letter, or None for
        options that have no short form

    Raises:
        ValueError: if two options end up with the same short key
    """
    short_keys = {}
    seen = {}
    for opt in Opt:
        if opt in OPTS_NO_SHORT:
            short_keys[opt] = None
            continue

        key = opt.value[0].lower()
        if key in seen:
            raise ValueError(
                f"Short option '-{key}' is shared by '{seen[key].value}' and '{opt.value}'"
            )
        seen[key] = opt
        short_keys[opt] = key

    return short_keys


def camel_to_kebab(s: str) -> str:
    """Lowercase `s`, putting a '-' before each previously uppercase letter"""
    result = []
    for c in s:
        if "A" <= c <= "Z":
            result.append("-")
            result.append(c.lower())
        else:
            result.append(c)
    return "".join(result)


def list_opt(opt: Opt, short_keys: Dict[Opt, Optional[str]]) -> str:
    """Render an option as it appears in help and error text, e.g. '-c, --check'"""
    short = short_keys[opt]
    if short is None:
        return f"    --{camel_to_kebab(opt.value)}"
    return f"-{short}, --{camel_to_kebab(opt.value)}"


class OptionRegistry:
    """Lookup tables derived once from the Opt enumeration"""

    def __init__(self):
        self.short_keys = gen_short_keys()
        self.by_short = {
            short: opt for opt, short in self.short_keys.items() if short is not None
        }
        self.no_value = OPTS_NO_VALUE

    def takes_value(self, opt: Opt) -> bool:
        return opt not in self.no_value

    def list(self, opt: Opt) -> str:
        return list_opt(opt, self.short_keys)
