"""
Main argument parser module for canonical_data_syncer

Orchestrates scanning, option resolution, value coercion and validation,
and turns help/version requests and usage errors into a ParseOutcome.
"""

import logging
import sys
from dataclasses import dataclass, replace
from typing import Optional, Sequence

from .errors import (
    HelpRequested,
    InconsistentFlagsError,
    InvalidArgumentError,
    MissingValueError,
    ParserExit,
    TokenKind,
    UnknownOptionError,
    UsageError,
    VersionRequested,
    format_opt,
)
from .help import HelpFormatter
from .normalizer import OptionResolver, coerce_enum
from .options import Conf, Mode, Opt, OptionRegistry, Verbosity
from .reporter import Reporter
from .scanner import Token, scan
from .validator import ArgumentValidator

OPTION_KINDS = (TokenKind.long_option, TokenKind.short_option)


@dataclass(frozen=True)
class ParseOutcome:
    """Result of a parse: either a configuration, or text to print and an exit code"""

    exit_code: int = 0
    conf: Optional[Conf] = None
    text: str = ""
    error: Optional[str] = None

    @property
    def finished(self) -> bool:
        """True if the caller should print the text and exit"""
        return self.conf is None


class ArgumentParser:
    """Command line argument parser for canonical_data_syncer"""

    def __init__(self, app_name: Optional[str] = None):
        self.registry = OptionRegistry()
        self.resolver = OptionResolver(self.registry)
        self.formatter = HelpFormatter(self.registry, app_name)
        self.validator = ArgumentValidator()
        self.reporter = Reporter()

    def parse(self, argv: Optional[Sequence[str]] = None) -> ParseOutcome:
        """
        Parse command line arguments without exiting

        Args:
            argv: Arguments without the program name (defaults to sys.argv[1:])

        Returns:
            ParseOutcome holding the Conf, or the text and exit code to finish with
        """
        if argv is None:
            argv = sys.argv[1:]

        try:
            conf = self._process_cmd_line(list(argv))
        except UsageError as e:
            return ParseOutcome(
                exit_code=e.exit_code, text=self.formatter.help_text(), error=e.message
            )
        except ParserExit as e:
            return ParseOutcome(exit_code=e.exit_code, text=e.text)

        return ParseOutcome(conf=conf)

    def parse_args(self, argv: Optional[Sequence[str]] = None) -> Conf:
        """Parse command line arguments, exiting on help, version or error"""
        outcome = self.parse(argv)
        if outcome.finished:
            self.reporter.emit(outcome)
            sys.exit(outcome.exit_code)
        return outcome.conf

    def _takes_value(self, kind: TokenKind, key: str) -> bool:
        opt = self.resolver.resolve(key)
        return opt is not None and self.registry.takes_value(opt)

    def _process_cmd_line(self, argv) -> Conf:
        conf = Conf()

        for token in scan(argv, self._takes_value):
            if token.kind in OPTION_KINDS:
                opt = self._parse_option(token)
                conf = self._apply_option(conf, opt, token)
            elif token.kind is TokenKind.argument:
                self._handle_argument(token)
            elif token.kind is TokenKind.malformed:
                raise UnknownOptionError(f"invalid option: {format_opt(token.kind, token.key)}")

        self._validate_conf(conf)
        return conf

    def _parse_option(self, token: Token) -> Opt:
        """Resolve an option token, checking that it has a value if it needs one"""
        opt = self.resolver.resolve(token.key)
        if opt is None:
            raise UnknownOptionError(f"invalid option: {format_opt(token.kind, token.key)}")

        valid, error = self.validator.validate_value(
            self.registry, opt, token.kind, token.key, token.val
        )
        if not valid:
            raise MissingValueError(error)

        logging.debug("Option %s resolved to --%s", format_opt(token.kind, token.key), opt.value)
        return opt

    def _apply_option(self, conf: Conf, opt: Opt, token: Token) -> Conf:
        if opt is Opt.exercise:
            return replace(conf, exercise=token.val)
        if opt is Opt.mode:
            return replace(conf, mode=coerce_enum(Mode, token.kind, token.key, token.val))
        if opt is Opt.verbosity:
            return replace(
                conf, verbosity=coerce_enum(Verbosity, token.kind, token.key, token.val)
            )
        if opt is Opt.probSpecsDir:
            return replace(conf, prob_specs_dir=token.val)

        if token.val:
            logging.debug("Ignoring value %r given to switch --%s", token.val, opt.value)

        if opt is Opt.check:
            return replace(conf, check=True)
        if opt is Opt.offline:
            return replace(conf, offline=True)
        if opt is Opt.help:
            raise HelpRequested(self.formatter.help_text())
        if opt is Opt.version:
            raise VersionRequested(self.formatter.version_text())

        raise AssertionError(f"Unhandled option: {opt}")

    def _handle_argument(self, token: Token):
        """Bare arguments are only accepted as an alias for --help"""
        if token.key.lower() == Opt.help.value:
            raise HelpRequested(self.formatter.help_text())
        raise InvalidArgumentError(f"invalid argument: '{token.key}'")

    def _validate_conf(self, conf: Conf):
        errors = self.validator.validate_all(self.registry, conf)
        if errors:
            raise InconsistentFlagsError(errors[0])
