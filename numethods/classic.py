"""Single-variable equation evaluation: a validating parser and a lenient one.

:class:`ClassicEquationParser` reads expressions in ``x`` with the constants
``pi`` and ``e`` and a wide set of functions, and rejects malformed input.
The free functions :func:`simple_tokenize`, :func:`simple_to_postfix`,
:func:`evaluate_postfix` and :func:`evaluate_expression` make up a lenient
evaluator: it skips characters it does not know and follows IEEE arithmetic
(``inf``/``nan``) where the strict parser raises.
"""

from __future__ import annotations

import math
from typing import Callable, Sequence

from .parser import OPERATORS, EquationError, _power, _scan_number, _to_float, to_postfix

__all__ = [
    "ClassicEquationParser",
    "simple_tokenize",
    "simple_to_postfix",
    "evaluate_postfix",
    "evaluate_expression",
]

_DIGITS = "0123456789"
_WHITESPACE = " \t\n\v\f\r"
_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2, "^": 3}

CLASSIC_CONSTANTS: dict[str, float] = {"pi": math.pi, "e": math.e}

CLASSIC_FUNCTIONS: tuple[str, ...] = (
    "sin", "cos", "tan", "asin", "acos", "atan",
    "sinh", "cosh", "tanh", "sqrt", "exp", "log", "log10",
)

SIMPLE_FUNCTIONS: tuple[str, ...] = ("sin", "cos", "exp", "log", "sqrt")


def _is_letter(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def _is_operator(token: str) -> bool:
    return token[0] in OPERATORS


def _read_word(text: str, start: int) -> tuple[str, int]:
    end = start
    while end < len(text) and _is_letter(text[end]):
        end += 1
    return text[start:end], end


def _ieee_log(value: float) -> float:
    if math.isnan(value):
        return value
    if value == 0:
        return -math.inf
    if value < 0:
        return math.nan
    return math.log(value)


def _ieee_sqrt(value: float) -> float:
    if math.isnan(value) or value < 0:
        return math.nan
    return math.sqrt(value)


def _ieee_exp(value: float) -> float:
    try:
        return math.exp(value)
    except OverflowError:
        return math.inf


def _guarded(func: Callable[[float], float]) -> Callable[[float], float]:
    def call(value: float) -> float:
        try:
            return func(value)
        except ValueError:
            return math.nan
        except OverflowError:
            return math.copysign(math.inf, value) if func is math.sinh else math.inf

    return call


_CLASSIC_MATH: dict[str, Callable[[float], float]] = {
    "sin": _guarded(math.sin),
    "cos": _guarded(math.cos),
    "tan": _guarded(math.tan),
    "asin": _guarded(math.asin),
    "acos": _guarded(math.acos),
    "atan": _guarded(math.atan),
    "sinh": _guarded(math.sinh),
    "cosh": _guarded(math.cosh),
    "tanh": _guarded(math.tanh),
    "sqrt": math.sqrt,
    "exp": _ieee_exp,
    "log": math.log,
    "log10": math.log10,
}

_SIMPLE_MATH: dict[str, Callable[[float], float]] = {
    "sin": _guarded(math.sin),
    "cos": _guarded(math.cos),
    "exp": _ieee_exp,
    "log": _ieee_log,
    "sqrt": _ieee_sqrt,
}


def _ieee_divide(a: float, b: float) -> float:
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


class ClassicEquationParser:
    """Parses an equation in ``x`` once and evaluates it for given values."""

    def __init__(self) -> None:
        self.tokens: tuple[str, ...] = ()
        self.postfix: tuple[str, ...] = ()

    def _tokenize(self, equation: str) -> list[str]:
        tokens: list[str] = []
        pos = 0
        while pos < len(equation):
            ch = equation[pos]
            if ch in _WHITESPACE:
                pos += 1
            elif ch in _DIGITS or ch == ".":
                number, pos = _scan_number(equation, pos)
                tokens.append(number)
            elif _is_letter(ch):
                word, pos = _read_word(equation, pos)
                if word in CLASSIC_FUNCTIONS or word in CLASSIC_CONSTANTS:
                    tokens.append(word)
                elif word in ("x", "X"):
                    tokens.append("x")
                else:
                    raise EquationError(f"Unknown identifier: {word}")
            elif ch in OPERATORS or ch in "()":
                if ch == "-" and (not tokens or tokens[-1] == "(" or _is_operator(tokens[-1])):
                    # Unary minus is rewritten as a parenthesised "0 -".
                    tokens.extend(("(", "0", "-"))
                    following = equation[pos + 1] if pos + 1 < len(equation) else ""
                    if following == "(":
                        tokens.append("(")
                        pos += 1
                    elif following == "x":
                        tokens.append("x")
                        pos += 1
                    tokens.append(")")
                else:
                    tokens.append(ch)
                pos += 1
            else:
                raise EquationError(f"Invalid character: '{ch}'")
        return tokens

    @staticmethod
    def _validate(tokens: Sequence[str]) -> None:
        depth = 0
        previous: str | None = None
        for position, token in enumerate(tokens):
            if token == "(":
                depth += 1
            elif token == ")":
                depth -= 1
            if previous is not None and _is_operator(token) and _is_operator(previous):
                raise EquationError(f"Consecutive operators at position {position}")
            if token in CLASSIC_FUNCTIONS:
                following = tokens[position + 1] if position + 1 < len(tokens) else None
                if following != "(":
                    raise EquationError(f"Function '{token}' not followed by parentheses")
            previous = token
        if depth != 0:
            raise EquationError("Mismatched parentheses in equation")

    def parse(self, equation: str) -> ClassicEquationParser:
        """Tokenize, validate and convert ``equation``; returns the parser."""
        self.tokens = ()
        self.postfix = ()
        tokens = self._tokenize(equation)
        self.tokens = tuple(tokens)
        self._validate(tokens)
        self.postfix = tuple(to_postfix(tokens))
        return self

    def evaluate(self, x_value: float) -> float:
        """Evaluate the parsed equation with ``x`` bound to ``x_value``."""
        stack: list[float] = []
        for token in self.postfix:
            if token == "x":
                stack.append(x_value)
            elif token[0] in _DIGITS or (token[0] == "-" and len(token) > 1):
                stack.append(_to_float(token))
            elif token in CLASSIC_CONSTANTS:
                stack.append(CLASSIC_CONSTANTS[token])
            elif _is_operator(token):
                if len(stack) < 2:
                    raise EquationError("Not enough operands")
                b = stack.pop()
                a = stack.pop()
                stack.append(self._apply_operator(token[0], a, b))
            elif token in CLASSIC_FUNCTIONS:
                if not stack:
                    raise EquationError("Not enough operands")
                stack.append(self._apply_function(token, stack.pop()))
        if len(stack) != 1:
            raise EquationError("Invalid expression")
        return stack[0]

    @staticmethod
    def _apply_operator(op: str, a: float, b: float) -> float:
        if op == "+":
            return a + b
        if op == "-":
            return a - b
        if op == "*":
            return a * b
        if op == "/":
            if b == 0:
                raise EquationError("Division by zero")
            return a / b
        return _power(a, b)

    @staticmethod
    def _apply_function(name: str, value: float) -> float:
        if name == "sqrt" and value < 0:
            raise EquationError("Square root of negative number")
        if name in ("log", "log10") and value <= 0:
            raise EquationError("Logarithm of non-positive number")
        return _CLASSIC_MATH[name](value)

    def postfix_text(self) -> str:
        """Describe the parsed equation in postfix notation."""
        return "Postfix notation: " + "".join(f"{token} " for token in self.postfix)


def simple_tokenize(expr: str) -> list[str]:
    """Split ``expr`` into numbers, words, operators and parentheses.

    Characters that fit none of these are skipped.
    """
    tokens: list[str] = []
    pos = 0
    while pos < len(expr):
        ch = expr[pos]
        if ch in _WHITESPACE:
            pos += 1
        elif ch in _DIGITS or ch == ".":
            end = pos
            while end < len(expr) and (expr[end] in _DIGITS or expr[end] == "."):
                end += 1
            tokens.append(expr[pos:end])
            pos = end
        elif _is_letter(ch):
            word, pos = _read_word(expr, pos)
            tokens.append(word)
        elif ch in OPERATORS or ch in "()":
            tokens.append(ch)
            pos += 1
        else:
            pos += 1
    return tokens


def simple_to_postfix(tokens: Sequence[str]) -> list[str]:
    """Reorder tokens into postfix; unknown words are dropped."""
    output: list[str] = []
    stack: list[str] = []
    for token in tokens:
        if token == "x" or token[0] in _DIGITS:
            output.append(token)
        elif token in SIMPLE_FUNCTIONS:
            stack.append(token)
        elif token == ",":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
        elif _is_operator(token):
            while stack and (
                (_is_operator(stack[-1]) and _PRECEDENCE[stack[-1][0]] >= _PRECEDENCE[token[0]])
                or stack[-1] in SIMPLE_FUNCTIONS
            ):
                output.append(stack.pop())
            stack.append(token)
        elif token == "(":
            stack.append(token)
        elif token == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if stack:
                stack.pop()
            if stack and stack[-1] in SIMPLE_FUNCTIONS:
                output.append(stack.pop())
    output.extend(reversed(stack))
    return output


def evaluate_postfix(postfix: Sequence[str], x: float) -> float:
    """Evaluate postfix tokens with ``x`` bound, using IEEE results for bad domains."""
    stack: list[float] = []
    for token in postfix:
        if token == "x":
            stack.append(x)
        elif token[0] in _DIGITS or (len(token) > 1 and token[0] == "-"):
            stack.append(_to_float(token))
        elif _is_operator(token) and len(token) == 1:
            if len(stack) < 2:
                raise EquationError("Not enough operands")
            b = stack.pop()
            a = stack.pop()
            if token == "+":
                stack.append(a + b)
            elif token == "-":
                stack.append(a - b)
            elif token == "*":
                stack.append(a * b)
            elif token == "/":
                stack.append(_ieee_divide(a, b))
            else:
                stack.append(_power(a, b))
        elif token in SIMPLE_FUNCTIONS:
            if not stack:
                raise EquationError("Not enough operands")
            stack.append(_SIMPLE_MATH[token](stack.pop()))
    if not stack:
        raise EquationError("Empty expression")
    return stack[-1]


def evaluate_expression(expr: str, x: float) -> float:
    """Tokenize, convert and evaluate ``expr`` at ``x`` with the lenient evaluator."""
    return evaluate_postfix(simple_to_postfix(simple_tokenize(expr)), x)