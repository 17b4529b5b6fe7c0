from __future__ import annotations

import argparse
import logging
import sys

from typing import List, NoReturn, Optional, Sequence

from .charsets import EXCLUDED_CHARACTERS
from .config import (
    DEFAULT_COUNT,
    DEFAULT_LENGTH,
    MAX_COUNT,
    MAX_LENGTH,
    MIN_COUNT,
    MIN_LENGTH,
    MIN_SPECIAL_LENGTH,
    PROG_NAME,
)
from .errors import (
    IncompatibleSpecialLengthError,
    InvalidArgumentError,
    InvalidCountError,
    InvalidLengthError,
    PassgenError,
    UnknownFlagError,
)
from .logging_config import setup_logging
from .password_generator import GenerationPolicy, PasswordGenerator

logger = logging.getLogger(__name__)

_SWITCHES = ('-s', '-h')
_VALUE_OPTIONS = ('-l', '-c')


class _OptionParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing and exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise InvalidArgumentError(message)


def build_parser() -> argparse.ArgumentParser:
    """Return the parser for the passgen options."""
    parser = _OptionParser(prog=PROG_NAME, add_help=False)
    parser.add_argument('-l', dest='length', type=int, default=DEFAULT_LENGTH)
    parser.add_argument('-s', dest='include_special', action='store_true')
    parser.add_argument('-c', dest='count', type=int, default=DEFAULT_COUNT)
    parser.add_argument('-h', dest='help', action='store_true')
    return parser


def split_clusters(argv: Sequence[str]) -> List[str]:
    """
    Expand clustered short options the way getopt reads them.

    ``-sx`` becomes ``-s -x`` and ``-sl8`` becomes ``-s -l 8``. Only
    clusters led by a switch are expanded; ``-l8`` is left for argparse.
    """
    tokens: List[str] = []
    expect_value = False

    for token in argv:
        if expect_value:
            tokens.append(token)
            expect_value = False
            continue

        if len(token) > 2 and token[:2] in _SWITCHES:
            rest = token[1:]
            for pos, char in enumerate(rest):
                flag = f'-{char}'
                tokens.append(flag)
                if flag in _VALUE_OPTIONS:
                    value = rest[pos + 1:]
                    if value:
                        tokens.append(value)
                    else:
                        expect_value = True
                    break
            continue

        if token in _VALUE_OPTIONS:
            expect_value = True
        tokens.append(token)

    return tokens


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse command-line options.

    Extra words that are not options are ignored with a warning, as the
    flag-driven originals do.

    Raises:
        UnknownFlagError: If an option other than -l, -s, -c or -h is given.
        InvalidArgumentError: If -l or -c is missing its value or the value
            is not an integer.
    """
    if argv is None:
        argv = sys.argv[1:]

    options, extras = build_parser().parse_known_args(split_clusters(argv))

    unknown = [arg for arg in extras if arg.startswith('-') and arg != '-']
    if unknown:
        msg = f'unknown option: {" ".join(unknown)}'
        raise UnknownFlagError(msg)
    if extras:
        logger.warning('Ignoring extra arguments: %s', ' '.join(extras))

    return options


def usage_text(prog: str = PROG_NAME) -> str:
    """Return the help text shown for -h and for unknown options."""
    lines = [
        f'Usage: {prog} [OPTIONS]',
        'Options:',
        f'  -l LENGTH    Password length (default: {DEFAULT_LENGTH})',
        '  -s           Include special characters',
        f'  -c COUNT     Number of passwords to generate (default: {DEFAULT_COUNT})',
        '  -h           Show this help message',
        '',
        'Examples:',
        f'  {prog}                    # Generate {DEFAULT_LENGTH}-character password',
        f'  {prog} -l 16 -s           # Generate 16-character password with special chars',
        f'  {prog} -l 10 -c 5         # Generate 5 passwords of 10 characters each',
    ]
    return '\n'.join(lines)


def validate_options(options: argparse.Namespace) -> GenerationPolicy:
    """
    Check parsed options and build the generation policy.

    Args:
        options: Namespace produced by ``parse_args``.

    Returns:
        A policy valid for every password in this run.

    Raises:
        InvalidLengthError: If the length is outside [3, 128].
        InvalidCountError: If the count is outside [1, 100].
        IncompatibleSpecialLengthError: If -s is set and the length is below 4.
    """
    if options.length < MIN_LENGTH:
        msg = f'Password length must be at least {MIN_LENGTH}'
        raise InvalidLengthError(msg)
    if options.length > MAX_LENGTH:
        msg = f'Password length cannot exceed {MAX_LENGTH}'
        raise InvalidLengthError(msg)
    if options.count < MIN_COUNT:
        msg = f'Count must be at least {MIN_COUNT}'
        raise InvalidCountError(msg)
    if options.count > MAX_COUNT:
        msg = f'Count cannot exceed {MAX_COUNT}'
        raise InvalidCountError(msg)
    if options.include_special and options.length < MIN_SPECIAL_LENGTH:
        msg = (
            f'Password length must be at least {MIN_SPECIAL_LENGTH} '
            'when using special characters'
        )
        raise IncompatibleSpecialLengthError(msg)

    return GenerationPolicy(options.length, options.include_special)


def format_header(policy: GenerationPolicy, count: int) -> str:
    """Return the summary printed above the numbered passwords."""
    plural = 's' if count > 1 else ''
    charsets = 'Uppercase, Lowercase, Numbers'
    if policy.include_special:
        charsets += ', Special characters'

    lines = [
        f'Generated password{plural}:',
        f'Length: {policy.length} characters',
        f'Character sets: {charsets}',
        f'Excluded similar characters: {", ".join(EXCLUDED_CHARACTERS)}',
        '',
    ]
    return '\n'.join(lines)


def run(
    argv: Optional[Sequence[str]] = None,
    generator: Optional[PasswordGenerator] = None,
) -> int:
    """
    Parse ``argv``, print the requested passwords and return the exit code.

    All validation happens before anything is written to standard
    output, so a failing run prints either usage or nothing at all.
    """
    try:
        options = parse_args(argv)
    except UnknownFlagError as exc:
        logger.debug('Rejected arguments: %s', exc)
        print(usage_text())
        return 1
    except PassgenError as exc:
        print(f'Error: {exc}', file=sys.stderr)
        return 1

    if options.help:
        print(usage_text())
        return 0

    try:
        policy = validate_options(options)
    except PassgenError as exc:
        print(f'Error: {exc}', file=sys.stderr)
        return 1

    generator = generator or PasswordGenerator()
    logger.debug('Generating %d password(s) with %s', options.count, policy)

    passwords: List[str] = [generator.generate(policy) for _ in range(options.count)]

    print(format_header(policy, options.count))
    for index, password in enumerate(passwords, start=1):
        print(f'{index}: {password}')

    return 0


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the CLI."""
    setup_logging()
    sys.exit(run(argv))


if __name__ == '__main__':
    main()
