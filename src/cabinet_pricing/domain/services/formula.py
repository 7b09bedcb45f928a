"""Part dimension formula evaluation.

Part dimensions are stored as small arithmetic expressions over the
ordered cabinet's dimensions, e.g. ``"width"``, ``"height - 36"`` or
``"(width - 3) / 2"``. This module evaluates them with a restricted
tokenizer and recursive-descent parser. Only numbers, the variables
``width``/``height``/``depth`` (or ``w``/``h``/``d``), ``+ - * /`` and
parentheses are accepted; anything else is rejected before evaluation.

Grammar::

    expression := term (("+" | "-") term)*
    term       := factor (("*" | "/") factor)*
    factor     := ("+" | "-") factor | primary
    primary    := NUMBER | VARIABLE | "(" expression ")"
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass

from ..exceptions import FormulaError

logger = logging.getLogger(__name__)

__all__ = ["FormulaEvaluator", "Token", "tokenize"]

MAX_FORMULA_LENGTH = 256
MAX_NESTING_DEPTH = 32

VARIABLE_ALIASES: dict[str, str] = {
    "width": "width",
    "w": "width",
    "height": "height",
    "h": "height",
    "depth": "depth",
    "d": "depth",
}

_TOKEN_PATTERN = re.compile(
    r"\s*(?:(?P<number>\d+(?:\.\d*)?|\.\d+)|(?P<name>[A-Za-z_]+)|(?P<op>[-+*/()]))"
)


@dataclass(frozen=True)
class Token:
    """A lexical token of a formula.

    Attributes:
        kind: One of "number", "name" or "op".
        text: The source text of the token (names are lower-cased).
        position: Offset of the token in the formula.
    """

    kind: str
    text: str
    position: int


def tokenize(formula: str) -> list[Token]:
    """Split a formula into tokens, rejecting any disallowed character.

    Raises:
        FormulaError: On characters outside the arithmetic surface or
            identifiers other than the dimension variables.
    """
    tokens: list[Token] = []
    position = 0
    length = len(formula)
    while position < length:
        if formula[position:].strip() == "":
            break
        match = _TOKEN_PATTERN.match(formula, position)
        if match is None:
            offending = formula[position:].lstrip()[:1]
            raise FormulaError(formula, f"unexpected character {offending!r}")
        kind = match.lastgroup
        assert kind is not None
        text = match.group(kind)
        if kind == "name":
            text = text.lower()
            if text not in VARIABLE_ALIASES:
                raise FormulaError(formula, f"unknown identifier {text!r}")
        tokens.append(Token(kind=kind, text=text, position=match.start(kind)))
        position = match.end()
    return tokens


class _Parser:
    """Recursive-descent evaluator over a token list."""

    def __init__(self, formula: str, tokens: list[Token], values: dict[str, float]) -> None:
        self.formula = formula
        self.tokens = tokens
        self.values = values
        self.index = 0
        self.depth = 0

    def parse(self) -> float:
        if not self.tokens:
            raise FormulaError(self.formula, "empty expression")
        result = self._expression()
        if self.index != len(self.tokens):
            token = self.tokens[self.index]
            raise FormulaError(
                self.formula, f"unexpected {token.text!r} at position {token.position}"
            )
        return result

    def _peek(self) -> Token | None:
        if self.index < len(self.tokens):
            return self.tokens[self.index]
        return None

    def _advance(self) -> Token:
        token = self._peek()
        if token is None:
            raise FormulaError(self.formula, "unexpected end of expression")
        self.index += 1
        return token

    def _expression(self) -> float:
        value = self._term()
        while (token := self._peek()) is not None and token.text in ("+", "-"):
            self._advance()
            right = self._term()
            value = value + right if token.text == "+" else value - right
        return value

    def _term(self) -> float:
        value = self._factor()
        while (token := self._peek()) is not None and token.text in ("*", "/"):
            self._advance()
            right = self._factor()
            if token.text == "*":
                value = value * right
            else:
                if right == 0:
                    raise FormulaError(self.formula, "division by zero")
                value = value / right
        return value

    def _factor(self) -> float:
        token = self._peek()
        if token is not None and token.text in ("+", "-"):
            self._advance()
            self._enter()
            try:
                operand = self._factor()
            finally:
                self.depth -= 1
            return operand if token.text == "+" else -operand
        return self._primary()

    def _primary(self) -> float:
        token = self._advance()
        if token.kind == "number":
            return float(token.text)
        if token.kind == "name":
            return self.values[VARIABLE_ALIASES[token.text]]
        if token.text == "(":
            self._enter()
            try:
                value = self._expression()
            finally:
                self.depth -= 1
            closing = self._advance()
            if closing.text != ")":
                raise FormulaError(
                    self.formula, f"expected ')' at position {closing.position}"
                )
            return value
        raise FormulaError(
            self.formula, f"unexpected {token.text!r} at position {token.position}"
        )

    def _enter(self) -> None:
        self.depth += 1
        if self.depth > MAX_NESTING_DEPTH:
            raise FormulaError(self.formula, "expression nested too deeply")


class FormulaEvaluator:
    """Evaluates part dimension formulas to millimetre values.

    ``evaluate`` never raises: a blank formula contributes 0 and an
    invalid one is logged and also contributes 0. Use ``check`` to surface
    the error itself, e.g. when an administrator saves a formula.
    """

    def evaluate(
        self,
        formula: str | None,
        width: float,
        height: float,
        depth: float,
    ) -> float:
        """Resolve a formula against cabinet dimensions.

        Args:
            formula: Expression over width/height/depth, or None.
            width: Cabinet width in mm.
            height: Cabinet height in mm.
            depth: Cabinet depth in mm.

        Returns:
            The resolved dimension in mm, or 0.0 for a blank or invalid formula.
        """
        if formula is None or formula.strip() == "":
            return 0.0
        try:
            return self.compute(formula, width, height, depth)
        except FormulaError as e:
            logger.warning(f"{e}; part contributes 0")
            return 0.0

    def compute(self, formula: str, width: float, height: float, depth: float) -> float:
        """Resolve a formula, raising on any error.

        Raises:
            FormulaError: If the formula is blank, too long, malformed,
                divides by zero or produces a non-finite value.
        """
        if len(formula) > MAX_FORMULA_LENGTH:
            raise FormulaError(formula[:32] + "...", "formula too long")
        tokens = tokenize(formula)
        values = {"width": float(width), "height": float(height), "depth": float(depth)}
        result = _Parser(formula, tokens, values).parse()
        if not math.isfinite(result):
            raise FormulaError(formula, "result is not a finite number")
        return result

    def check(self, formula: str) -> None:
        """Validate a formula against reference dimensions.

        Raises:
            FormulaError: If the formula would not evaluate.
        """
        self.compute(formula, 600.0, 720.0, 560.0)
