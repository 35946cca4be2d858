"""infix-calc CLI: evaluate one expression read from standard input.

Usage:
    calc                 Decimal
    calc -b 16           Hexadecimal (ff + 1 = 256)
    calc -v              Print every binary operation as it is applied

Only ``-b N`` and ``-v`` are accepted.  The word after ``-b`` is always
taken as the base, even if it looks like a flag.  An out-of-range base
(e.g. ``-b 40``) falls back to 10.
"""

import argparse
import re
import sys

from .calculator import Calculator
from .config import MIN_BASE, MAX_BASE, DEFAULT_BASE
from .errors import CalcError
from .evaluator import format_value

PROMPT = 'Please enter a mathematical expression: '

_RE_DIGITS = re.compile(r'[0-9]+')


class _UsageError(Exception):
    """Command line rejected; message is printed as-is."""
    pass


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that reports failures instead of exiting."""

    def error(self, message):
        raise _UsageError(f'Invalid argument "{message}"')


def _parse_base(text):
    """Base from ``-b``; DEFAULT_BASE if out of range."""
    if not _RE_DIGITS.fullmatch(text):
        raise _UsageError("Invalid base")
    base = int(text)
    if not MIN_BASE <= base <= MAX_BASE:
        return DEFAULT_BASE
    return base


def _check_args(argv):
    """Reject anything but exact ``-b N`` / ``-v`` words, left to right."""
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg == '-b':
            if i + 1 >= len(argv):
                raise _UsageError("Base not specified")
            _parse_base(argv[i + 1])
            i += 2
        elif arg == '-v':
            i += 1
        else:
            raise _UsageError(f'Invalid argument "{arg}"')


def main(argv=None):
    """CLI entry point."""
    if argv is None:
        argv = sys.argv[1:]
    parser = _Parser(
        prog='calc',
        add_help=False,
        allow_abbrev=False,
        description='Evaluate an infix arithmetic expression read from stdin.',
        epilog="""Examples:
  echo "2+3*4" | calc               14
  echo "ff+1" | calc -b 16          256
  echo "(2+3)*4" | calc -v          trace each operation""")
    parser.add_argument('-b', dest='base', type=_parse_base,
                        default=DEFAULT_BASE, metavar='N',
                        help=f'Numeral base {MIN_BASE}-{MAX_BASE} '
                             f'(default: {DEFAULT_BASE})')
    parser.add_argument('-v', dest='verbose', action='store_true',
                        help='Show each binary operation')

    try:
        _check_args(argv)
        args = parser.parse_args(argv)
    except _UsageError as e:
        print(e)
        return 1

    calculator = Calculator(args.base, args.verbose)

    print(PROMPT, end='', flush=True)
    try:
        source = sys.stdin.readline().rstrip('\r\n')
        result = calculator.evaluate(source)
    except CalcError as e:
        print(f"\nError: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        return 130

    for step in result.steps:
        print(step)
    print(f"{source} = {format_value(result.value)}")
    return 0
