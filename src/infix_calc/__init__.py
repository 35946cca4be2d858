"""infix-calc: evaluate infix arithmetic in any base from 2 to 36.

Supports:
  - Operators + - * / ^ with the usual precedence (all left-associative)
  - Round and square brackets, interchangeable
  - Decimal fractions in base 10 (``.5`` reads as ``0.5``)
  - Integer numerals in bases 2-36 (``ff`` in base 16 is 255)
  - Leading unary minus on a lone operand (``-5``)
  - Optional numbered trace of every binary operation

Pipeline:
  tokenize -> to_postfix (shunting-yard) -> evaluate (RPN stack)

Usage as library:
    from infix_calc import Calculator
    Calculator(base=16).calculate('ff + 1')     # 256.0
"""

from .calculator import Calculator
from .errors import (CalcError, LexicalError, CalcSyntaxError,
                     NumericFormatError, ConfigError)
from .evaluator import Evaluation, evaluate, parse_number
from .postfix import to_postfix
from .tokenizer import tokenize

__version__ = '1.0.0'

__all__ = [
    'Calculator', 'Evaluation',
    'tokenize', 'to_postfix', 'evaluate', 'parse_number',
    'CalcError', 'LexicalError', 'CalcSyntaxError', 'NumericFormatError',
    'ConfigError',
]
