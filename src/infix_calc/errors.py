"""Error types for infix-calc."""


class CalcError(Exception):
    """Base error for infix-calc.

    Pipeline errors may carry the 0-based source column of the offending
    token in ``pos``; it is appended to the message when known.
    """

    def __init__(self, msg, pos=None):
        self.msg = msg
        self.pos = pos
        super().__init__(self._format())

    def _format(self):
        if self.pos is None:
            return self.msg
        return f"{self.msg} (at column {self.pos + 1})"


class LexicalError(CalcError):
    """Unrecognized character in the expression."""
    pass


class CalcSyntaxError(CalcError):
    """Mismatched parentheses, missing operand or operator."""
    pass


class NumericFormatError(CalcError):
    """Numeral is not valid in the active base."""
    pass


class ConfigError(CalcError):
    """Invalid calculator configuration (e.g. base outside 2-36)."""
    pass
