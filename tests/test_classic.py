import math

import pytest

from numethods.classic import (
    ClassicEquationParser,
    evaluate_expression,
    evaluate_postfix,
    simple_to_postfix,
    simple_tokenize,
)
from numethods.parser import EquationError


def parsed(equation):
    return ClassicEquationParser().parse(equation)


@pytest.mark.parametrize("value", [0.0, 1.5, -2.0, 3.0])
def test_polynomial_matches_python(value):
    assert parsed("2*x^2 + 3*x - 1").evaluate(value) == pytest.approx(2 * value**2 + 3 * value - 1)


@pytest.mark.parametrize(
    "name, func",
    [("sin", math.sin), ("cos", math.cos), ("tan", math.tan), ("atan", math.atan),
     ("sinh", math.sinh), ("cosh", math.cosh), ("tanh", math.tanh), ("exp", math.exp)],
)
def test_functions_match_math(name, func):
    assert parsed(f"{name}(x)").evaluate(0.7) == pytest.approx(func(0.7))


def test_log_is_natural_logarithm():
    assert parsed("log(x)").evaluate(10.0) == pytest.approx(math.log(10.0))


def test_constants():
    assert parsed("pi").evaluate(0.0) == pytest.approx(math.pi)
    assert parsed("e").evaluate(0.0) == pytest.approx(math.e)


def test_uppercase_x_accepted():
    assert parsed("X*X").evaluate(4.0) == pytest.approx(4.0 * 4.0)


def test_scientific_notation():
    assert parsed("1.5e2 + x").evaluate(1.0) == pytest.approx(1.5e2 + 1.0)


def test_unary_minus_on_x():
    parser = parsed("-x")
    assert parser.tokens == ("(", "0", "-", "x", ")")
    assert parser.evaluate(2.0) == pytest.approx(-2.0)


def test_unary_minus_before_number_cannot_evaluate():
    parser = parsed("-5")
    with pytest.raises(EquationError, match="Not enough operands"):
        parser.evaluate(0.0)


def test_postfix_text():
    assert parsed("x^2").postfix_text() == "Postfix notation: x 2 ^ "


def test_parse_returns_parser_and_resets():
    parser = ClassicEquationParser()
    assert parser.parse("x+1") is parser
    parser.parse("x*3")
    assert parser.evaluate(2.0) == pytest.approx(2.0 * 3)


@pytest.mark.parametrize(
    "equation, message",
    [
        ("y + 1", "Unknown identifier: y"),
        ("x # 2", "Invalid character"),
        ("x + * 2", "Consecutive operators"),
        ("(x + 1", "Mismatched parentheses"),
        ("sin x", "not followed by parentheses"),
        ("log10(x)", "not followed by parentheses"),
        ("1.2.3", "Invalid number format"),
    ],
)
def test_parse_errors(equation, message):
    with pytest.raises(EquationError, match=message):
        parsed(equation)


@pytest.mark.parametrize(
    "equation, value, message",
    [
        ("1/x", 0.0, "Division by zero"),
        ("sqrt(x)", -1.0, "Square root of negative number"),
        ("log(x)", 0.0, "Logarithm of non-positive number"),
    ],
)
def test_evaluate_errors(equation, value, message):
    with pytest.raises(EquationError, match=message):
        parsed(equation).evaluate(value)


def test_failed_parse_leaves_no_postfix():
    parser = parsed("x+1")
    with pytest.raises(EquationError):
        parser.parse("x + * 1")
    assert parser.postfix == ()


def test_simple_tokenize():
    assert simple_tokenize("3.5*x + sin(x)") == ["3.5", "*", "x", "+", "sin", "(", "x", ")"]


def test_simple_tokenize_skips_unknown_characters():
    assert simple_tokenize("2 # 3") == ["2", "3"]


def test_simple_to_postfix():
    tokens = ["3.5", "*", "x", "+", "sin", "(", "x", ")"]
    assert simple_to_postfix(tokens) == ["3.5", "x", "*", "x", "sin", "+"]


def test_evaluate_postfix_direct():
    assert evaluate_postfix(["x", "2", "*"], 4.0) == pytest.approx(4.0 * 2)


@pytest.mark.parametrize("value", [0.5, 1.0, 2.5])
def test_evaluate_expression_matches_python(value):
    result = evaluate_expression("3.5*x + sin(x)", value)
    assert result == pytest.approx(3.5 * value + math.sin(value))


def test_evaluate_expression_ieee_results():
    assert evaluate_expression("log(x)", 0.0) == -math.inf
    assert math.isnan(evaluate_expression("sqrt(x)", -1.0))
    assert evaluate_expression("1/x", 0.0) == math.inf
    assert math.isnan(evaluate_expression("x/x", 0.0))


def test_evaluate_expression_returns_top_of_stack():
    assert evaluate_expression("2 # 3", 0.0) == pytest.approx(3.0)


def test_evaluate_expression_empty_raises():
    with pytest.raises(EquationError):
        evaluate_expression("", 0.0)


def test_evaluate_expression_missing_operand_raises():
    with pytest.raises(EquationError, match="Not enough operands"):
        evaluate_expression("*x", 1.0)