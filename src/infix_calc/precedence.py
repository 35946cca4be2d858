"""Operator precedence table (higher = binds tighter)."""

from types import MappingProxyType

from .errors import LexicalError

PRECEDENCE = MappingProxyType({
    '+': 1,
    '-': 1,
    '*': 2,
    '/': 2,
    '^': 3,
})


def precedence(symbol, table=PRECEDENCE):
    """Binding strength of *symbol* in *table*."""
    try:
        return table[symbol]
    except KeyError:
        raise LexicalError(f"Unsupported operator '{symbol}'") from None
