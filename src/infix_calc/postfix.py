"""Infix to postfix (RPN) conversion by the shunting-yard algorithm.

Operators come out after their operands, so ``2 + 3 * 4`` becomes
``2 3 4 * +``.  All operators are left-associative, ``^`` included:
``2 ^ 3 ^ 2`` becomes ``2 3 ^ 2 ^``.
"""

import logging

from .errors import LexicalError, CalcSyntaxError
from .precedence import PRECEDENCE, precedence
from .tokens import (Number, Operator, LeftParen, RightParen, Unknown,
                     format_tokens)

logger = logging.getLogger(__name__)


def _pops_before(top, incoming, table):
    """Must operator *top* be emitted before *incoming* is pushed?"""
    return (isinstance(top, Operator)
            and precedence(top.symbol, table) >= precedence(incoming.symbol, table))


def to_postfix(tokens, table=PRECEDENCE) -> list:
    """Reorder infix *tokens* into postfix order.

    Args:
        tokens: Token list from :func:`~infix_calc.tokenizer.tokenize`.
        table: Operator precedence mapping.

    Returns:
        New token list in postfix order; parentheses are consumed.

    Raises:
        LexicalError: on an :class:`Unknown` token.
        CalcSyntaxError: on mismatched parentheses.
    """
    output = []
    stack = []
    for token in tokens:
        if isinstance(token, Number):
            output.append(token)

        elif isinstance(token, Operator):
            while stack and _pops_before(stack[-1], token, table):
                output.append(stack.pop())
            stack.append(token)

        elif isinstance(token, LeftParen):
            stack.append(token)

        elif isinstance(token, RightParen):
            while stack and not isinstance(stack[-1], LeftParen):
                output.append(stack.pop())
            if not stack:
                raise CalcSyntaxError("Mismatched parentheses: unexpected "
                                      "closing bracket", token.pos)
            stack.pop()

        elif isinstance(token, Unknown):
            raise LexicalError(f"Unrecognized character '{token.char}'",
                               token.pos)

        else:
            raise TypeError(f"Not a token: {token!r}")

    while stack:
        token = stack.pop()
        if isinstance(token, LeftParen):
            raise CalcSyntaxError("Mismatched parentheses: unclosed "
                                  "opening bracket", token.pos)
        output.append(token)

    logger.debug("postfix: %s", format_tokens(output))
    return output
