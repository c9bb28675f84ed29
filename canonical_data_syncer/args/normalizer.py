"""
Option and value normalization module for canonical_data_syncer

Resolves user spellings of option names (any case, '-' or '_' separators,
single-letter abbreviations) and coerces option values into the closed
Mode and Verbosity sets.
"""

from enum import Enum
from typing import Optional, Type, TypeVar

from .errors import InvalidValueError, TokenKind, format_opt
from .options import Opt, OptionRegistry

E = TypeVar("E", bound=Enum)


def normalize_option(s: str) -> str:
    """Return `s` lowercased and without any '_' or '-'"""
    result = []
    for c in s:
        if "A" <= c <= "Z":
            result.append(c.lower())
        elif c not in "_-":
            result.append(c)
    return "".join(result)


class OptionResolver:
    """Maps raw option keys to Opt members using a style-insensitive comparison"""

    def __init__(self, registry: OptionRegistry):
        self.registry = registry
        self.by_long = {normalize_option(opt.value): opt for opt in Opt}

    def resolve(self, key: str) -> Optional[Opt]:
        """
        Resolve a raw option key

        Args:
            key: Key as typed, without leading dashes (e.g. 'Prob-Specs_Dir', 'm')

        Returns:
            The matching Opt, or None if the key names no option
        """
        normalized = normalize_option(key)
        if not normalized:
            return None

        # A valid single-letter abbreviation
        if len(normalized) == 1 and normalized in self.registry.by_short:
            return self.registry.by_short[normalized]

        return self.by_long.get(normalized)


def coerce_enum(enum_cls: Type[E], kind: TokenKind, key: str, val: str) -> E:
    """
    Parse `val` as a member of `enum_cls`, case-insensitively

    A single letter is expanded to the first member, in declaration order,
    whose name starts with it.

    Args:
        enum_cls: Closed set to parse into (Mode or Verbosity)
        kind: Token kind of the option, used in the error message
        key: Option key as typed, used in the error message
        val: Value as typed

    Raises:
        InvalidValueError: if `val` names no member of `enum_cls`
    """
    normalized = val.lower()
    if len(normalized) == 1:
        for member in enum_cls:
            if member.value.startswith(normalized):
                normalized = member.value
                break

    for member in enum_cls:
        if member.value == normalized:
            return member

    raise InvalidValueError(f"invalid value for {format_opt(kind, key, val)}")
