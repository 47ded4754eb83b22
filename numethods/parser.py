"""Infix equation parsing and evaluation in one or two variables (x and y)."""

from __future__ import annotations

import math
import re
from typing import Callable, Sequence

__all__ = ["EquationError", "EquationParser", "tokenize", "to_postfix"]


class EquationError(ValueError):
    """Raised when an equation cannot be parsed or evaluated."""


OPERATORS = "+-*/^"
_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2, "^": 3}
_DIGITS = "0123456789"
_WHITESPACE = " \t\n\v\f\r"
_WORD = re.compile(r"[A-Za-z]+")
_FLOAT_PREFIX = re.compile(r"(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

CONSTANTS: dict[str, float] = {"pi": 3.141592654, "e": 2.718281828}

FUNCTIONS: tuple[str, ...] = (
    "sin", "cos", "tan", "asin", "acos", "atan",
    "sinh", "cosh", "tanh", "sqrt", "exp", "ln", "log",
)

_MATH: dict[str, Callable[[float], float]] = {
    "sin": math.sin,
    "cos": math.cos,
    "tan": math.tan,
    "asin": math.asin,
    "acos": math.acos,
    "atan": math.atan,
    "sinh": math.sinh,
    "cosh": math.cosh,
    "tanh": math.tanh,
    "sqrt": math.sqrt,
    "exp": math.exp,
    "ln": math.log,
    "log": math.log10,
}


def _is_operator(token: str) -> bool:
    return token[0] in OPERATORS


def _is_function(token: str) -> bool:
    return token in FUNCTIONS


def _is_operand(token: str) -> bool:
    return (
        token in ("x", "y")
        or token[0] in _DIGITS
        or (token[0] == "-" and len(token) > 1 and token[1] in _DIGITS)
        or token in CONSTANTS
    )


def _scan_number(text: str, start: int) -> tuple[str, int]:
    pos = start
    has_decimal = has_exponent = False
    while pos < len(text):
        ch = text[pos]
        if ch == ".":
            if has_decimal or has_exponent:
                raise EquationError("Invalid number format")
            has_decimal = True
        elif ch in "eE":
            if has_exponent:
                raise EquationError("Invalid number format")
            has_exponent = True
        elif ch in "+-" and pos > 0 and text[pos - 1] in "eE":
            pass
        elif ch not in _DIGITS:
            break
        pos += 1
    return text[start:pos], pos


def tokenize(equation: str) -> list[str]:
    """Split an equation into number, name, operator and parenthesis tokens.

    A leading or post-operator minus becomes the two tokens ``0`` and ``-``.
    """
    tokens: list[str] = []
    pos = 0
    while pos < len(equation):
        ch = equation[pos]
        if ch in _WHITESPACE:
            pos += 1
        elif ch in _DIGITS or ch == ".":
            number, pos = _scan_number(equation, pos)
            tokens.append(number)
        elif ch.isascii() and ch.isalpha():
            word = _WORD.match(equation, pos).group()
            pos += len(word)
            if _is_function(word) or word in CONSTANTS:
                tokens.append(word)
            elif word in ("x", "X"):
                tokens.append("x")
            elif word in ("y", "Y"):
                tokens.append("y")
            else:
                raise EquationError(f"Unknown identifier: {word}")
        elif ch in OPERATORS or ch in "()":
            if ch == "-" and (not tokens or tokens[-1] == "(" or _is_operator(tokens[-1])):
                tokens.extend(("0", "-"))
            else:
                tokens.append(ch)
            pos += 1
        else:
            raise EquationError(f"Invalid character: '{ch}'")
    return tokens


def _validate(tokens: Sequence[str], allow_xy: bool) -> None:
    depth = 0
    previous: str | None = None
    for position, token in enumerate(tokens):
        if token == "(":
            depth += 1
        elif token == ")":
            depth -= 1
        if previous is not None and _is_operator(token) and _is_operator(previous):
            raise EquationError(f"Consecutive operators at position {position}")
        if _is_function(token):
            following = tokens[position + 1] if position + 1 < len(tokens) else None
            if following != "(":
                raise EquationError(f"Function '{token}' not followed by parentheses")
        previous = token
    if depth != 0:
        raise EquationError("Mismatched parentheses in equation")
    if not allow_xy and "x" in tokens and "y" in tokens:
        raise EquationError("Equation cannot contain both x and y at the same time.")


def to_postfix(tokens: Sequence[str]) -> list[str]:
    """Convert infix tokens to postfix order (all operators left-associative)."""
    output: list[str] = []
    stack: list[str] = []
    for token in tokens:
        if _is_operand(token):
            output.append(token)
        elif _is_function(token) or token == "(":
            stack.append(token)
        elif token == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise EquationError("Mismatched parentheses")
            stack.pop()
            if stack and _is_function(stack[-1]):
                output.append(stack.pop())
        elif _is_operator(token):
            while stack and stack[-1] != "(" and (
                (_is_operator(stack[-1]) and _PRECEDENCE[stack[-1][0]] >= _PRECEDENCE[token[0]])
                or _is_function(stack[-1])
            ):
                output.append(stack.pop())
            stack.append(token)
    while stack:
        token = stack.pop()
        if token == "(":
            raise EquationError("Mismatched parentheses")
        output.append(token)
    return output


def _to_float(token: str) -> float:
    match = _FLOAT_PREFIX.match(token)
    if match is None:
        raise EquationError(f"Invalid number: {token}")
    value = float(match.group())
    if math.isinf(value):
        raise EquationError(f"Number out of range: {token}")
    return value


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value.is_integer() and value % 2 == 1


def _power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except ValueError:
        if base == 0:
            return math.copysign(math.inf, base) if _is_odd_integer(exponent) else math.inf
        return math.nan
    except OverflowError:
        return -math.inf if base < 0 and _is_odd_integer(exponent) else math.inf


def _apply_function(name: str, value: float) -> float:
    if name == "sqrt" and value < 0:
        raise EquationError("Square root of negative number")
    if name in ("ln", "log") and value <= 0:
        raise EquationError("Logarithm of non-positive number")
    try:
        return _MATH[name](value)
    except ValueError:
        return math.nan
    except OverflowError:
        return math.copysign(math.inf, value) if name == "sinh" else math.inf


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


class EquationParser:
    """Parses an equation once and evaluates it for given variable values."""

    def __init__(self, allow_xy: bool = False) -> None:
        self.allow_xy = allow_xy
        self.tokens: tuple[str, ...] = ()
        self.postfix: tuple[str, ...] = ()

    def parse(self, equation: str) -> EquationParser:
        """Tokenize, validate and convert ``equation``; returns the parser."""
        self.tokens = ()
        self.postfix = ()
        tokens = tokenize(equation)
        self.tokens = tuple(tokens)
        _validate(tokens, self.allow_xy)
        self.postfix = tuple(to_postfix(tokens))
        return self

    def evaluate(self, x_value: float) -> float:
        """Evaluate with ``x_value`` bound to whichever variable the equation uses."""
        has_x = "x" in self.postfix
        has_y = "y" in self.postfix
        if not self.allow_xy and has_x and has_y:
            raise EquationError("This equation requires either x or y, not both.")
        if has_x:
            return self.evaluate_xy(x_value, 0.0)
        if has_y:
            return self.evaluate_xy(0.0, x_value)
        return self.evaluate_xy(0.0, 0.0)

    def evaluate_xy(self, x_value: float, y_value: float) -> float:
        """Evaluate with explicit values for both x and y."""
        stack: list[float] = []
        for token in self.postfix:
            if token == "x":
                stack.append(x_value)
            elif token == "y":
                stack.append(y_value)
            elif token[0] in _DIGITS or (token[0] == "-" and len(token) > 1 and token[1] in _DIGITS):
                stack.append(_to_float(token))
            elif token in CONSTANTS:
                stack.append(CONSTANTS[token])
            elif _is_operator(token):
                if len(stack) < 2:
                    raise EquationError("Not enough operands")
                b = stack.pop()
                a = stack.pop()
                stack.append(_apply_operator(token[0], a, b))
            elif _is_function(token):
                if not stack:
                    raise EquationError("Not enough operands")
                stack.append(_apply_function(token, stack.pop()))
        if len(stack) != 1:
            raise EquationError("Invalid expression")
        return stack[0]

    def postfix_text(self) -> str:
        """Describe the parsed equation in postfix notation."""
        return "Postfix notation: " + "".join(f"{token} " for token in self.postfix)