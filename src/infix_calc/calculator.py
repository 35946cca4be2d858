"""Calculator facade: tokenize -> to_postfix -> evaluate."""

import logging

from .config import DEFAULT_BASE, validate_base
from .evaluator import Evaluation, evaluate
from .postfix import to_postfix
from .precedence import PRECEDENCE
from .tokenizer import tokenize
from .tokens import format_tokens

logger = logging.getLogger(__name__)


class Calculator:
    """Evaluate infix expressions in a fixed numeral base.

    The configuration is read once at the start of every call, so a
    calculation never sees a half-applied ``set_base``.  Instances are
    not safe to reconfigure from one thread while another calculates.
    """

    def __init__(self, base: int = DEFAULT_BASE, verbose: bool = False):
        self._base = validate_base(base)
        self._verbose = bool(verbose)

    def get_base(self) -> int:
        return self._base

    def set_base(self, base: int):
        """Change the base for subsequent calculations."""
        self._base = validate_base(base)

    @property
    def verbose(self) -> bool:
        return self._verbose

    def evaluate(self, source: str) -> Evaluation:
        """Run the full pipeline on *source*.

        Returns:
            Evaluation; ``steps`` holds one trace line per binary
            operation when the calculator is verbose, else it is empty.

        Raises:
            CalcError subclass for the first problem found.
        """
        base, verbose = self._base, self._verbose
        tokens = tokenize(source)
        logger.debug("tokens: %s", format_tokens(tokens))
        postfix = to_postfix(tokens, PRECEDENCE)
        return evaluate(postfix, base, verbose)

    def calculate(self, source: str) -> float:
        """Evaluate *source* and return only the final value."""
        return self.evaluate(source).value

    def __repr__(self):
        return f"Calculator(base={self._base}, verbose={self._verbose})"
