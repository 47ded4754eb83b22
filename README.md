# numethods

A small toolkit of classic numerical methods, built around an expression parser
that never evaluates Python code. It covers:

- **Expression parsing** (`numethods.parser`): infix formulas in `x`, or in `y`, or in
  both when allowed. They may use `+ - * / ^`, parentheses, the constants `pi` and `e`
  and the functions `sin cos tan asin acos atan sinh cosh tanh sqrt exp ln log`
  (`ln` is the natural logarithm, `log` is base 10).
- **A second, single-variable evaluator** (`numethods.classic`): a validating parser in
  `x` where `log` is the natural logarithm and `log10` is base 10, and a lenient evaluator
  that skips unknown characters and returns `inf`/`nan` where the strict parsers raise.
- **Root finding**: the bisection and secant methods.
- **Numerical integration**: the trapezoidal rule, Simpson's 1/3 rule and Simpson's 3/8 rule.
- **Interpolation**: Lagrange interpolation (forward and inverse) and Newton's divided differences.

It has no runtime dependencies beyond the standard library and needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command-line tools

Each tool is interactive: it prompts for the function, data points or bounds it needs
and prints the result. Apart from `--help` they take no command-line options.

| Command                         | What it does                                              |
|---------------------------------|-----------------------------------------------------------|
| `numethods`                     | Numerical integration calculator (same as below)          |
| `numethods-integrate`           | Numerical integration: trapezoidal, Simpson 1/3, 3/8      |
| `numethods-bisection`           | Root of `f(x)` by bisection, with an iteration table      |
| `numethods-secant`              | Root of `f(x)` by the secant method                       |
| `numethods-lagrange`            | Lagrange interpolation: `y` for a given `x`, or inverse   |
| `numethods-divided-difference`  | Newton divided-difference table and interpolated value    |

## Library use

### Parsing and evaluating expressions

```python
from numethods.parser import EquationParser, EquationError

p = EquationParser(allow_xy=False)
p.parse("sin(x)^2 + cos(x)^2")
print(p.evaluate(1.234))        # 1.0 (up to rounding)
print(p.postfix_text())

try:
    p.parse("sqrt(x")
except EquationError as err:
    print(err)                  # Mismatched parentheses in equation
```

`evaluate(value)` binds the value to whichever variable the expression uses. With
`EquationParser(allow_xy=True)` an expression may use both `x` and `y`; evaluate it with
`evaluate_xy(x_value, y_value)`. The functions `tokenize` and `to_postfix` expose the two
parsing stages.

`EquationError` (a `ValueError`) is raised for unknown names or characters, malformed
numbers, consecutive operators, a function not followed by `(`, unbalanced parentheses,
division by zero, the square root of a negative number and the logarithm of a number
that is not positive.

Points to know:

- All operators, `^` included, associate to the left.
- A minus at the start, after `(` or after another operator is read as `0 -`.
  So `2*-3` gives `-6`, but `2^-x` is read as `(2^0) - x`; write `2^(-x)` instead.
- `pi` and `e` are taken as `3.141592654` and `2.718281828`.

The `numethods.classic` module offers `ClassicEquationParser` (methods `parse`,
`evaluate`, `postfix_text`). It uses the full-precision `math.pi` and `math.e`. A unary
minus there is wrapped in its own parentheses. The module also has the lenient helpers
`simple_tokenize`, `simple_to_postfix`, `evaluate_postfix` and `evaluate_expression`.

```python
from numethods.classic import evaluate_expression

print(evaluate_expression("x^2 + 1", 3.0))   # 10.0
```

### Root finding

```python
from numethods.bisection import bisection, format_table, NoSignChangeError
from numethods.secant import SecantSolver

result = bisection("x^3 - x - 2", 1.0, 2.0, 1e-6, 100)
print(result.root, result.converged)
print(format_table(result))

solver = SecantSolver("x^2 - 2")
outcome = solver.solve(1.0, 2.0, 1e-6, 100)
print(outcome.root)
print(outcome.report())
```

`bisection` stops when `|f(c)| < tol`. Otherwise it returns the midpoint of the final
bracket after `max_iter` halvings. If `f(a)` and `f(b)` do not have opposite signs it
raises `NoSignChangeError`. Each `BisectionStep` records `a`, `b`, `c` and `f(c)`.

`SecantSolver.solve` stops when two successive iterates differ by less than the
tolerance. The defaults are `1e-6` and 100 iterations. The `SecantResult` carries `root`,
`converged`, `stalled` and the `SecantStep`s. `stalled` is set when two function values
are too close together to draw a secant through them.

### Integration

```python
from numethods.integration import NumericalIntegrator, parse_bound

integ = NumericalIntegrator("x^2", 0.0, 3.0, 7)   # 7 points, 6 intervals
print(integ.trapezoidal())
print(integ.simpsons_13())   # needs an even number of intervals
print(integ.simpsons_38())   # needs a number of intervals divisible by 3
print(integ.table())
```

The constructor raises `ValueError` when `n < 2` or `b <= a`. It raises `EquationError`
when the function cannot be evaluated at one of the points. The Simpson rules raise
`ValueError` when the interval count does not suit them.

`parse_bound` reads a bound from text. The text must start with a number. A plain
number such as `1.5e2` is taken as is. Longer text such as `2*3.5` is evaluated as an
expression with the variable set to 0.

### Interpolation

```python
from numethods.lagrange import LagrangeInterpolator
from numethods.divided_difference import DividedDifferenceInterpolator

lag = LagrangeInterpolator([1.0, 2.0, 3.0], [1.0, 4.0, 9.0])
print(lag.interpolate_y(2.5))   # 6.25
print(lag.interpolate_x(4.0))   # inverse interpolation

dd = DividedDifferenceInterpolator([1.0, 2.0, 3.0, 4.0], [1.0, 8.0, 27.0, 64.0])
print(dd.evaluate(2.5))
print(dd.table(2.5))
print(dd.format_table(2.5))
```

`DividedDifferenceInterpolator` takes from 2 to 20 points with distinct `x` values.
Values closer together than `1e-9` count as duplicates and raise `ValueError`. It uses the
forward form when the target is nearer the first node and the backward form otherwise.
The table it returns or prints follows the form it used.

## What it does not do

The tools read their input only from interactive prompts; there is no batch mode,
file input or output format other than the printed text. The parsers handle single
expressions with one or two variables; there is no support for systems of equations,
user-defined functions or symbolic manipulation.