"""Token model: one class per lexical category.

=============  ==========  =====================================
class          kind        payload
=============  ==========  =====================================
Number         num         text (digits, letters, ``.``)
Operator       op          symbol, one of ``+ - * / ^``
LeftParen      lparen      (none; from ``(`` or ``[``)
RightParen     rparen      (none; from ``)`` or ``]``)
Unknown        unknown     char, the unrecognized character
=============  ==========  =====================================

Every token remembers ``pos``, the 0-based column of its first character
in the source, for error reporting.  Equality ignores ``pos``.
"""

OPERATORS = '+-*/^'


class Token:
    """Base class for all tokens."""
    __slots__ = ('pos',)
    kind = ''

    def __init__(self, pos=None):
        self.pos = pos

    def _payload(self):
        return ()

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self._payload() == other._payload()

    def __hash__(self):
        return hash((self.kind,) + self._payload())

    def __repr__(self):
        args = ', '.join(repr(p) for p in self._payload())
        return f"{type(self).__name__}({args})"


class Number(Token):
    """Raw numeral text; parsed against the base only at evaluation."""
    __slots__ = ('text',)
    kind = 'num'

    def __init__(self, text, pos=None):
        super().__init__(pos)
        self.text = text

    def _payload(self):
        return (self.text,)

    def __str__(self):
        return self.text


class Operator(Token):
    __slots__ = ('symbol',)
    kind = 'op'

    def __init__(self, symbol, pos=None):
        if len(symbol) != 1 or symbol not in OPERATORS:
            raise ValueError(f"Not an operator: {symbol!r}")
        super().__init__(pos)
        self.symbol = symbol

    def _payload(self):
        return (self.symbol,)

    def __str__(self):
        return self.symbol


class LeftParen(Token):
    __slots__ = ()
    kind = 'lparen'

    def __str__(self):
        return '('


class RightParen(Token):
    __slots__ = ()
    kind = 'rparen'

    def __str__(self):
        return ')'


class Unknown(Token):
    """A character the tokenizer could not classify."""
    __slots__ = ('char',)
    kind = 'unknown'

    def __init__(self, char, pos=None):
        super().__init__(pos)
        self.char = char

    def _payload(self):
        return (self.char,)

    def __str__(self):
        return self.char


def format_tokens(tokens) -> str:
    """Render a token list as space-separated text, e.g. ``2 3 4 * +``."""
    return ' '.join(str(t) for t in tokens)
