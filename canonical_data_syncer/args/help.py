"""
Help text module for canonical_data_syncer

Builds the aligned option listing shown by --help and after every usage
error. The listing depends only on the option registry, so it is built
on first use and reused.
"""

import sys
from enum import Enum
from pathlib import Path
from typing import Dict, Optional, Type

from .options import Mode, Opt, OptionRegistry, Verbosity

DEFAULT_APP_NAME = "canonical_data_syncer"

PARAM_NAMES = {
    Opt.exercise: "slug",
    Opt.mode: "mode",
    Opt.verbosity: "verbosity",
    Opt.probSpecsDir: "dir",
}


def allowed_values(enum_cls: Type[Enum]) -> str:
    """Describe the values of `enum_cls`, e.g. 'Allowed values: q[uiet], n[ormal]'"""
    values = ", ".join(f"{m.value[0]}[{m.value[1:]}]" for m in enum_cls)
    return f"Allowed values: {values}"


def default_app_name() -> str:
    """File name the program was invoked as"""
    if sys.argv and sys.argv[0]:
        return Path(sys.argv[0]).name
    return DEFAULT_APP_NAME


class HelpFormatter:
    """Renders usage, help and version text"""

    def __init__(self, registry: OptionRegistry, app_name: Optional[str] = None):
        self.registry = registry
        self.app_name = app_name or default_app_name()
        self._options_text = None

    def descriptions(self) -> Dict[Opt, str]:
        return {
            Opt.exercise: "Only sync this exercise",
            Opt.check: "Terminates with a non-zero exit code if one or more tests "
            "are missing. Doesn't update the tests",
            Opt.mode: f"What to do with missing test cases. {allowed_values(Mode)}",
            Opt.verbosity: f"The verbosity of output. {allowed_values(Verbosity)}",
            Opt.probSpecsDir: "Use this `problem-specifications` directory, "
            "rather than cloning temporarily",
            Opt.offline: "Do not check that the directory specified by "
            f"`{self.registry.list(Opt.probSpecsDir)}` is up-to-date",
            Opt.help: "Show this help message and exit",
            Opt.version: "Show this tool's version information and exit",
        }

    def syntax_strings(self) -> Dict[Opt, str]:
        """Start of each help line: the option forms and their parameter"""
        syntax = {}
        for opt in Opt:
            param = PARAM_NAMES.get(opt)
            param_text = f" <{param}>" if param else ""
            syntax[opt] = f"  {self.registry.list(opt)}{param_text}  "
        return syntax

    def options_text(self) -> str:
        """The 'Options:' block, without a trailing newline"""
        if self._options_text is None:
            syntax = self.syntax_strings()
            width = max(len(s) for s in syntax.values())
            descriptions = self.descriptions()
            lines = ["Options:"]
            for opt in Opt:
                lines.append(syntax[opt].ljust(width) + descriptions[opt])
            self._options_text = "\n".join(lines)
        return self._options_text

    def usage(self) -> str:
        return f"Usage: {self.app_name} [options]\n\n{self.options_text()}"

    def help_text(self) -> str:
        """Full help output, as written to the terminal"""
        return self.usage() + "\n"

    @staticmethod
    def version_text() -> str:
        from .. import __version__

        return f"Canonical Data Syncer v{__version__}\n"
