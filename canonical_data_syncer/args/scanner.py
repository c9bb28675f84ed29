"""
Command-line scanner module for canonical_data_syncer

Splits raw arguments into option and argument tokens following getopt
conventions: '--key=val', '--key:val', '--key val', bundled short options
('-co'), '-kval', '-k=val', '-k val', and '--' to end scanning.
"""

from typing import Callable, Iterator, NamedTuple, Sequence, Tuple

from .errors import TokenKind

SEP_CHARS = "=:"


class Token(NamedTuple):
    kind: TokenKind
    key: str
    val: str = ""


def split_inline(body: str) -> Tuple[str, bool, str]:
    """Split 'key=val' at the first separator, returning (key, has_separator, val)"""
    for i, c in enumerate(body):
        if c in SEP_CHARS:
            return body[:i], True, body[i + 1:]
    return body, False, ""


def scan(argv: Sequence[str], takes_value: Callable[[TokenKind, str], bool]) -> Iterator[Token]:
    """
    Yield the tokens of `argv` lazily

    Args:
        argv: Arguments, without the program name
        takes_value: Tells whether an option key expects a value, so the
            scanner knows whether to consume the following argument

    Yields:
        Token for each option or bare argument. A Token of kind `end` is the
        last one yielded when '--' is met; later arguments are not scanned.
    """
    i = 0
    while i < len(argv):
        arg = argv[i]
        i += 1

        if arg == "--":
            yield Token(TokenKind.end, "")
            return

        if arg.startswith("--"):
            key, has_sep, val = split_inline(arg[2:])
            if not key:
                yield Token(TokenKind.malformed, arg[2:])
                continue
            if not has_sep and i < len(argv) and takes_value(TokenKind.long_option, key):
                val = argv[i]
                i += 1
            yield Token(TokenKind.long_option, key, val)

        elif arg.startswith("-") and len(arg) > 1:
            body = arg[1:]
            for pos, key in enumerate(body):
                if not takes_value(TokenKind.short_option, key):
                    yield Token(TokenKind.short_option, key)
                    continue

                # The rest of the bundle is this option's value
                val = body[pos + 1:]
                if val and val[0] in SEP_CHARS:
                    val = val[1:]
                elif not val and i < len(argv):
                    val = argv[i]
                    i += 1
                yield Token(TokenKind.short_option, key, val)
                break

        else:
            yield Token(TokenKind.argument, arg)
