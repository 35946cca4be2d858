"""Expression tokenizer.

Single left-to-right pass with maximal munch for numerals.  Never fails:
characters it cannot classify become :class:`Unknown` tokens and are
rejected later by the converter.
"""

from .tokens import (Number, Operator, LeftParen, RightParen, Unknown,
                     OPERATORS)

WHITESPACE = ' \t\n\r\f\v'
LEFT_BRACKETS = '(['
RIGHT_BRACKETS = ')]'


def is_numeral_char(c):
    """Digits, ASCII letters (base-36 alphabet) and the decimal point."""
    return ('0' <= c <= '9' or 'a' <= c <= 'z' or 'A' <= c <= 'Z'
            or c == '.')


def tokenize(source: str) -> list:
    """Split *source* into a list of tokens, in input order."""
    tokens = []
    i = 0
    n = len(source)
    while i < n:
        c = source[i]

        if c in WHITESPACE:
            i += 1
            continue

        if c in OPERATORS:
            tokens.append(Operator(c, pos=i))
            i += 1
            continue

        if c in LEFT_BRACKETS:
            tokens.append(LeftParen(pos=i))
            i += 1
            continue
        if c in RIGHT_BRACKETS:
            tokens.append(RightParen(pos=i))
            i += 1
            continue

        if is_numeral_char(c):
            start = i
            # .5 -> 0.5
            prefix = ''
            if c == '.':
                prefix = '0.'
                i += 1
            j = i
            while j < n and is_numeral_char(source[j]):
                j += 1
            tokens.append(Number(prefix + source[i:j], pos=start))
            i = j
            continue

        tokens.append(Unknown(c, pos=i))
        i += 1

    return tokens
