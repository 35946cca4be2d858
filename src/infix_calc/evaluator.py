"""Postfix (RPN) evaluation on a numeric stack.

Arithmetic is done in numpy float64 with floating-point warnings
silenced, so ``1/0`` gives ``inf`` and ``(-8)^(1/3)`` gives ``nan``
instead of raising, exactly as IEEE-754 prescribes.
"""

import logging
import re
import numpy as np

from .config import DEFAULT_BASE, validate_base
from .errors import LexicalError, CalcSyntaxError, NumericFormatError
from .tokens import Number, Operator, Unknown

logger = logging.getLogger(__name__)

DIGITS = '0123456789abcdefghijklmnopqrstuvwxyz'

# strtod-style decimal literal; the tokenizer already turned ".5" into "0.5"
_RE_DECIMAL = re.compile(r'[0-9]+(?:\.[0-9]*)?(?:[eE][0-9]+)?')

_BINARY_OPS = {
    '+': np.add,
    '-': np.subtract,
    '*': np.multiply,
    '/': np.divide,
    '^': np.power,
}


class Evaluation:
    """Result of one evaluation: the value and its trace lines."""
    __slots__ = ('value', 'steps')

    def __init__(self, value, steps=()):
        self.value = value
        self.steps = list(steps)

    def __repr__(self):
        return f"Evaluation(value={self.value!r}, steps={self.steps!r})"


def format_value(x) -> str:
    """Format a float the way a default C++ ostream does (``%g``)."""
    return format(float(x), 'g')


def parse_number(text, base=DEFAULT_BASE, pos=None) -> float:
    """Parse numeral *text* in *base*.

    Base 10 accepts a decimal literal with an optional fraction.  Every
    other base is integer-only, with letters (either case) continuing the
    digit alphabet after 9.

    Raises:
        NumericFormatError if *text* is not a valid numeral in *base*.
        ConfigError if *base* is outside 2-36.
    """
    validate_base(base)
    if base == 10:
        if not _RE_DECIMAL.fullmatch(text):
            raise NumericFormatError(
                f"Invalid decimal number '{text}'", pos)
        return float(text)

    if not text:
        raise NumericFormatError("Empty number", pos)
    # int() alone would also take '0x', '_' and surrounding whitespace
    for c in text:
        d = DIGITS.find(c.lower())
        if d < 0 or d >= base:
            if c == '.':
                raise NumericFormatError(
                    f"Fractional number '{text}' is only supported in "
                    f"base 10", pos)
            raise NumericFormatError(
                f"Invalid digit '{c}' in base-{base} number '{text}'", pos)
    try:
        return float(int(text, base))
    except (OverflowError, ValueError):
        raise NumericFormatError(
            f"Number '{text}' is too large", pos) from None


def _apply(symbol, a, b):
    with np.errstate(all='ignore'):
        return _BINARY_OPS[symbol](np.float64(a), np.float64(b))


def evaluate(postfix, base=DEFAULT_BASE, verbose=False) -> Evaluation:
    """Evaluate a postfix token list.

    Args:
        postfix: Tokens in postfix order (see :func:`to_postfix`).
        base: Numeral base for :class:`Number` tokens (2-36).
        verbose: Record a ``"n) a op b = r;"`` line per binary operation.

    Returns:
        Evaluation with the final value and the trace lines.

    Raises:
        NumericFormatError: numeral invalid in *base*.
        CalcSyntaxError: missing operand, stray parenthesis, or not
            exactly one value left at the end.
        LexicalError: an :class:`Unknown` token.
        ConfigError: *base* outside 2-36.
    """
    validate_base(base)
    stack = []
    steps = []
    for token in postfix:
        if isinstance(token, Number):
            stack.append(parse_number(token.text, base, token.pos))
            continue

        if isinstance(token, Unknown):
            raise LexicalError(f"Unrecognized character '{token.char}'",
                               token.pos)
        if not isinstance(token, Operator):
            raise CalcSyntaxError("Mismatched parentheses", token.pos)

        op = token.symbol
        # a lone value under '-' is a negative number, not a subtraction
        if len(stack) == 1 and op == '-':
            stack.append(-stack.pop())
            continue

        if len(stack) < 2:
            raise CalcSyntaxError(f"Missing operand for '{op}'", token.pos)
        b = stack.pop()
        a = stack.pop()
        result = float(_apply(op, a, b))
        if verbose:
            steps.append(f"{len(steps) + 1}) {format_value(a)} {op} "
                         f"{format_value(b)} = {format_value(result)};")
        stack.append(result)

    if not stack:
        raise CalcSyntaxError("Empty expression")
    if len(stack) > 1:
        raise CalcSyntaxError(
            f"Malformed expression: {len(stack)} values left without "
            f"an operator between them")

    logger.debug("result: %s (%d steps)", format_value(stack[0]), len(steps))
    return Evaluation(stack[0], steps)
