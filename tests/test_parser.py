import math

import pytest

from numethods.parser import EquationError, EquationParser, to_postfix, tokenize


def parsed(equation, allow_xy=False):
    return EquationParser(allow_xy).parse(equation)


def test_tokenize_basic_expression():
    assert tokenize("3 + x") == ["3", "+", "x"]


def test_tokenize_scientific_notation():
    assert tokenize("1.5e-3*x") == ["1.5e-3", "*", "x"]


def test_tokenize_uppercase_variables_are_normalised():
    assert tokenize("X+Y") == ["x", "+", "y"]


def test_tokenize_leading_minus_becomes_zero_minus():
    assert tokenize("-x") == ["0", "-", "x"]


def test_tokenize_minus_after_parenthesis_is_unary():
    assert tokenize("(-x)") == ["(", "0", "-", "x", ")"]


def test_tokenize_functions_and_constants():
    assert tokenize("sin(pi)") == ["sin", "(", "pi", ")"]


def test_tokenize_unknown_identifier():
    with pytest.raises(EquationError, match="Unknown identifier: foo"):
        tokenize("foo + 1")


def test_tokenize_invalid_character():
    with pytest.raises(EquationError, match="Invalid character: '#'"):
        tokenize("2 # 3")


@pytest.mark.parametrize("text", ["1.2.3", "1e5e2", "1e5.2"])
def test_tokenize_invalid_number_format(text):
    with pytest.raises(EquationError, match="Invalid number format"):
        tokenize(text)


def test_to_postfix_respects_precedence():
    assert to_postfix(["2", "+", "3", "*", "x"]) == ["2", "3", "x", "*", "+"]


def test_to_postfix_power_is_left_associative():
    assert to_postfix(["2", "^", "3", "^", "x"]) == ["2", "3", "^", "x", "^"]


def test_to_postfix_parentheses_override_precedence():
    assert to_postfix(["(", "2", "+", "3", ")", "*", "x"]) == ["2", "3", "+", "x", "*"]


def test_to_postfix_function_follows_argument():
    assert to_postfix(["sin", "(", "x", ")"]) == ["x", "sin"]


@pytest.mark.parametrize("tokens", [[")"], ["(", "x"], ["x", ")", "("]])
def test_to_postfix_mismatched_parentheses(tokens):
    with pytest.raises(EquationError, match="Mismatched parentheses"):
        to_postfix(tokens)


def test_parse_consecutive_operators():
    with pytest.raises(EquationError, match="Consecutive operators at position 2"):
        parsed("x+*2")


def test_parse_function_without_parentheses():
    with pytest.raises(EquationError, match="Function 'sin' not followed by parentheses"):
        parsed("sin x")


def test_parse_unbalanced_parentheses():
    with pytest.raises(EquationError, match="Mismatched parentheses in equation"):
        parsed("(x+1")


def test_parse_rejects_x_and_y_by_default():
    with pytest.raises(EquationError, match="cannot contain both x and y"):
        parsed("x*y")


def test_parse_stores_postfix():
    parser = parsed("x+1")
    assert parser.postfix == ("x", "1", "+")
    assert parser.postfix_text() == "Postfix notation: x 1 + "


def test_parse_returns_parser_and_reparse_replaces_equation():
    parser = EquationParser()
    assert parser.parse("x") is parser
    parser.parse("2")
    assert parser.evaluate(7.0) == pytest.approx(2.0)


def test_evaluate_uses_x():
    assert parsed("x*x").evaluate(3.0) == pytest.approx(3.0 * 3.0)


def test_evaluate_binds_argument_to_y_when_only_y_used():
    assert parsed("y+1").evaluate(4.0) == pytest.approx(4.0 + 1)


def test_evaluate_unary_minus():
    assert parsed("-x").evaluate(5.0) == pytest.approx(-5.0)


def test_evaluate_constants_from_table():
    assert parsed("pi").evaluate(0.0) == 3.141592654
    assert parsed("e").evaluate(0.0) == 2.718281828


def test_evaluate_scientific_number():
    assert parsed("2e3").evaluate(0.0) == pytest.approx(2e3)


@pytest.mark.parametrize(
    "name, func, value",
    [
        ("sin", math.sin, 0.5),
        ("cos", math.cos, 0.5),
        ("tan", math.tan, 0.5),
        ("asin", math.asin, 0.5),
        ("acos", math.acos, 0.5),
        ("atan", math.atan, 0.5),
        ("sinh", math.sinh, 0.5),
        ("cosh", math.cosh, 0.5),
        ("tanh", math.tanh, 0.5),
        ("sqrt", math.sqrt, 2.0),
        ("exp", math.exp, 0.5),
        ("ln", math.log, 2.0),
        ("log", math.log10, 2.0),
    ],
)
def test_evaluate_functions_match_math(name, func, value):
    assert parsed(f"{name}(x)").evaluate(value) == pytest.approx(func(value))


def test_evaluate_xy_with_flag():
    parser = parsed("x*y", allow_xy=True)
    assert parser.evaluate_xy(2.0, 3.0) == pytest.approx(2.0 * 3.0)


def test_evaluate_with_both_variables_sets_y_to_zero():
    parser = parsed("x+y", allow_xy=True)
    assert parser.evaluate(3.0) == pytest.approx(3.0)


def test_evaluate_both_variables_rejected_when_flag_cleared():
    parser = parsed("x+y", allow_xy=True)
    parser.allow_xy = False
    with pytest.raises(EquationError, match="either x or y, not both"):
        parser.evaluate(1.0)


def test_evaluate_division_by_zero():
    with pytest.raises(EquationError, match="Division by zero"):
        parsed("1/x").evaluate(0.0)


def test_evaluate_sqrt_of_negative():
    with pytest.raises(EquationError, match="Square root of negative number"):
        parsed("sqrt(x)").evaluate(-1.0)


@pytest.mark.parametrize("name", ["ln", "log"])
def test_evaluate_log_of_non_positive(name):
    with pytest.raises(EquationError, match="Logarithm of non-positive number"):
        parsed(f"{name}(x)").evaluate(0.0)


def test_evaluate_missing_operator_is_invalid():
    with pytest.raises(EquationError, match="Invalid expression"):
        parsed("2 x").evaluate(1.0)


def test_evaluate_without_parse_is_invalid():
    with pytest.raises(EquationError, match="Invalid expression"):
        EquationParser().evaluate(1.0)


def test_evaluate_fractional_power_of_negative_is_nan():
    result = parsed("x^0.5").evaluate(-4.0)
    assert str(result) == "nan"


def test_evaluate_exp_overflow_is_infinite():
    assert parsed("exp(x)").evaluate(1000.0) == math.inf


def test_evaluate_asin_out_of_domain_is_nan():
    result = parsed("asin(x)").evaluate(2.0)
    assert str(result) == "nan"


def test_evaluate_is_deterministic_across_calls():
    parser = parsed("x^2 + sin(x)")
    first = parser.evaluate(1.25)
    assert parser.evaluate(1.25) == first
    assert parser.evaluate(-1.25) == pytest.approx(1.25 ** 2 + math.sin(-1.25))