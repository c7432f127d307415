"""
Calculator Module
Evaluates arithmetic typed into the launcher using recursive descent

Grammar (lowest to highest precedence):
    additive       := multiplicative (('+' | '-') multiplicative)*
    multiplicative := power (('*' | '/' | '%') power)*
    power          := unary ('**' power)?
    unary          := ('-' | '+') unary | primary
    primary        := '(' additive ')' | function '(' additive ')' | constant | number
"""
import logging
import math
from typing import Callable, List, Optional, Tuple

from ..config import settings
from ..models.responses import EvaluationResult, ItemType, ResultItem
from ..utils.formatting import format_number
from ..utils.validators import within_length_bound

logger = logging.getLogger(__name__)


# Alternate glyphs rewritten before parsing
GLYPH_REPLACEMENTS = [
    ("x", "*"),
    ("×", "*"),  # multiplication sign
    ("÷", "/"),  # division sign
    ("^", "**"),
]


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


# Tried in order against the lower-cased input; each takes one argument
FUNCTIONS: List[Tuple[str, Callable[[float], float]]] = [
    ("sqrt", math.sqrt),
    ("sin", math.sin),
    ("cos", math.cos),
    ("tan", math.tan),
    ("log", math.log10),
    ("ln", math.log),
    ("abs", abs),
    ("floor", math.floor),
    ("ceil", math.ceil),
    ("round", _round_half_away),
]


class ExpressionError(ValueError):
    """Raised when an expression cannot be evaluated"""


class ExpressionParser:
    """
    Single-use recursive-descent parser over a normalized expression

    Every parse method consumes input from `pos` and returns a float.
    Failures raise ExpressionError (or a math-domain ValueError/OverflowError).
    """

    def __init__(self, text: str, max_depth: int):
        self.text = text
        self.pos = 0
        self.depth = 0
        self.max_depth = max_depth

    def parse(self) -> float:
        value = self.parse_additive()

        if self.pos != len(self.text):
            raise ExpressionError(f"Unexpected input: {self.text[self.pos:]!r}")

        return value

    def parse_additive(self) -> float:
        left = self.parse_multiplicative()

        while True:
            if self._consume("+"):
                left += self.parse_multiplicative()
            elif self._consume("-"):
                left -= self.parse_multiplicative()
            else:
                return left

    def parse_multiplicative(self) -> float:
        left = self.parse_power()

        while True:
            if self._consume("*"):
                left *= self.parse_power()
            elif self._consume("/"):
                right = self.parse_power()
                if right == 0:
                    raise ExpressionError("Division by zero")
                left /= right
            elif self._consume("%"):
                right = self.parse_power()
                if right == 0:
                    raise ExpressionError("Modulo by zero")
                left = math.fmod(left, right)
            else:
                return left

    def parse_power(self) -> float:
        base = self.parse_unary()

        if not self._consume("**"):
            return base

        # Right-associative: 2**3**2 == 2**(3**2)
        self._descend()
        exponent = self.parse_power()
        self.depth -= 1

        return math.pow(base, exponent)

    def parse_unary(self) -> float:
        self._descend()

        if self._consume("-"):
            value = -self.parse_unary()
        elif self._consume("+"):
            value = self.parse_unary()
        else:
            value = self.parse_primary()

        self.depth -= 1
        return value

    def parse_primary(self) -> float:
        if self._consume("("):
            value = self.parse_additive()
            self._expect(")")
            return value

        remaining = self.text[self.pos:].lower()

        for name, func in FUNCTIONS:
            if remaining.startswith(name + "("):
                self.pos += len(name) + 1
                argument = self.parse_additive()
                self._expect(")")
                return float(func(argument))

        if remaining.startswith("pi"):
            self.pos += 2
            return math.pi

        # "e" only when it does not start an identifier
        if remaining.startswith("e") and not remaining[1:2].isalpha():
            self.pos += 1
            return math.e

        return self.parse_number()

    def parse_number(self) -> float:
        start = self.pos
        seen_dot = False

        while self.pos < len(self.text):
            char = self.text[self.pos]
            if "0" <= char <= "9":
                self.pos += 1
            elif char == "." and not seen_dot:
                seen_dot = True
                self.pos += 1
            else:
                break

        literal = self.text[start:self.pos]
        if not literal or literal == ".":
            raise ExpressionError(f"Expected a number at position {start}")

        return float(literal)

    def _consume(self, token: str) -> bool:
        if self.text.startswith(token, self.pos):
            self.pos += len(token)
            return True
        return False

    def _expect(self, token: str) -> None:
        if not self._consume(token):
            raise ExpressionError(f"Expected {token!r} at position {self.pos}")

    def _descend(self) -> None:
        self.depth += 1
        if self.depth > self.max_depth:
            raise ExpressionError(f"Nesting deeper than {self.max_depth}")


def normalize_expression(expr: str) -> str:
    """
    Strip whitespace and rewrite alternate operator glyphs

    Args:
        expr: Raw expression text

    Returns:
        Expression ready for ExpressionParser
    """
    normalized = "".join(expr.split())

    for old, new in GLYPH_REPLACEMENTS:
        normalized = normalized.replace(old, new)

    return normalized


def evaluate(expr: str, max_depth: Optional[int] = None) -> Optional[float]:
    """
    Evaluate an arithmetic expression

    Args:
        expr: Expression text, e.g. "2 + 3 * 4" or "sqrt(16) ^ 2"
        max_depth: Override for settings.max_nesting_depth

    Returns:
        Finite result, or None if the expression is malformed, divides by
        zero, leaves trailing input or leaves the math domain
    """
    if not within_length_bound(expr):
        return None

    depth_limit = settings.max_nesting_depth if max_depth is None else max_depth
    normalized = normalize_expression(expr)

    try:
        value = ExpressionParser(normalized, depth_limit).parse()
    except (ValueError, OverflowError, RecursionError) as e:
        logger.debug(f"Expression {expr!r} not evaluated: {e}")
        return None

    if not math.isfinite(value):
        logger.debug(f"Expression {expr!r} produced a non-finite result")
        return None

    return value


def evaluate_result(query: str) -> EvaluationResult:
    """Evaluate a calculator query into an EvaluationResult"""
    value = evaluate(query)

    if value is None:
        return EvaluationResult.no_match()

    return EvaluationResult.number(value)


def calculator_items(query: str) -> List[ResultItem]:
    """
    Build the calculator result row for a query

    Args:
        query: Full calculator query

    Returns:
        One ResultItem whose content is the formatted value, or an empty list
    """
    if not query:
        return []

    value = evaluate(query)
    if value is None:
        return []

    display = format_number(value, settings.calculator_precision)

    return [
        ResultItem(
            id=f"calc:{display}",
            name=f"{query} = {display}",
            description="Press Enter to copy result",
            item_type=ItemType.CALCULATOR,
            icon="accessories-calculator",
            content=display
        )
    ]
