"""
canonical_data_syncer.args - Command line argument parsing module

Provides option resolution, value coercion, help text generation and
error reporting for the canonical_data_syncer command line.
"""

from .base import ArgumentParser, ParseOutcome
from .errors import (
    HelpRequested,
    InconsistentFlagsError,
    InvalidArgumentError,
    InvalidValueError,
    MissingValueError,
    ParserExit,
    UnknownOptionError,
    UsageError,
    VersionRequested,
)
from .help import HelpFormatter
from .options import Conf, Mode, Opt, OptionRegistry, Verbosity
from .validator import ArgumentValidator

# Primary export
__all__ = [
    "ArgumentParser",      # Main public interface
    "ParseOutcome",        # Result of ArgumentParser.parse()
    "Conf",                # Parsed configuration
    "Mode",
    "Verbosity",
    "Opt",
    "OptionRegistry",      # For testing/help generation
    "HelpFormatter",       # For testing/help generation
    "ArgumentValidator",   # For testing/validation
    "ParserExit",
    "HelpRequested",
    "VersionRequested",
    "UsageError",
    "UnknownOptionError",
    "MissingValueError",
    "InvalidValueError",
    "InvalidArgumentError",
    "InconsistentFlagsError",
]
