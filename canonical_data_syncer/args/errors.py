"""
Parse error module for canonical_data_syncer

Every way a command line can end the parse early is an exception here.
ArgumentParser.parse() turns them into a ParseOutcome, so nothing below
ever exits the process itself.
"""

from enum import Enum


class TokenKind(Enum):
    """Classification of a single command-line token"""

    long_option = "long"
    short_option = "short"
    argument = "argument"
    end = "end"
    malformed = "malformed"


def format_opt(kind: TokenKind, key: str, val: str = "") -> str:
    """
    Describe an option for use in an error message

    Examples:
        format_opt(TokenKind.short_option, "h") == "'-h'"
        format_opt(TokenKind.long_option, "help") == "'--help'"
        format_opt(TokenKind.short_option, "v", "quiet") == "'-v': 'quiet'"
    """
    if kind is TokenKind.short_option:
        prefix = "-"
    elif kind in (TokenKind.long_option, TokenKind.malformed):
        prefix = "--"
    else:
        prefix = ""

    if val:
        return f"'{prefix}{key}': '{val}'"
    return f"'{prefix}{key}'"


class ParserExit(Exception):
    """Parsing stopped; the process should exit with `exit_code` after printing `text`"""

    exit_code = 0

    def __init__(self, text: str = ""):
        super().__init__(text)
        self.text = text


class HelpRequested(ParserExit):
    pass


class VersionRequested(ParserExit):
    pass


class UsageError(ParserExit):
    """A user-input error; the message is shown before the help text"""

    exit_code = 1

    def __init__(self, message: str, text: str = ""):
        super().__init__(text)
        self.message = message

    def __str__(self):
        return self.message


class UnknownOptionError(UsageError):
    pass


class MissingValueError(UsageError):
    pass


class InvalidValueError(UsageError):
    pass


class InvalidArgumentError(UsageError):
    pass


class InconsistentFlagsError(UsageError):
    pass
