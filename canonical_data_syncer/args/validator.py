"""
Argument validation module for canonical_data_syncer

Checks that need more than one token: option values that must be present,
and combinations of options that only make sense together.
"""

from typing import List, Optional, Tuple

from .errors import TokenKind, format_opt
from .options import Conf, Opt, OptionRegistry


class ArgumentValidator:
    """Validates resolved options and the finished configuration"""

    @classmethod
    def validate_value(
        cls, registry: OptionRegistry, opt: Opt, kind: TokenKind, key: str, val: str
    ) -> Tuple[bool, Optional[str]]:
        """
        Validate that a value-bearing option received a value

        Args:
            registry: Option registry
            opt: Resolved option
            kind: Token kind, for the error message
            key: Option key as typed, for the error message
            val: Value given (empty if none)

        Returns:
            Tuple of (is_valid, error_message)
        """
        if not val and registry.takes_value(opt):
            return False, f"{format_opt(kind, key)} was given without a value"

        return True, None

    @classmethod
    def validate_offline(cls, registry: OptionRegistry, conf: Conf) -> Tuple[bool, Optional[str]]:
        """
        Validate that --offline is only used together with --prob-specs-dir

        Returns:
            Tuple of (is_valid, error_message)
        """
        if conf.offline and not conf.prob_specs_dir:
            return False, (
                f"'{registry.list(Opt.offline)}' was given without passing "
                f"'{registry.list(Opt.probSpecsDir)}'"
            )

        return True, None

    @classmethod
    def validate_all(cls, registry: OptionRegistry, conf: Conf) -> List[str]:
        """
        Validate the finished configuration

        Returns:
            List of error messages (empty if all valid)
        """
        errors = []

        valid, error = cls.validate_offline(registry, conf)
        if not valid:
            errors.append(error)

        return errors
