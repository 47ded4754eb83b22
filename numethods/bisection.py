"""Root finding by repeated interval halving."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

from .parser import EquationError, EquationParser

__all__ = ["NoSignChangeError", "BisectionStep", "BisectionResult", "bisection", "format_table", "main"]


class NoSignChangeError(ValueError):
    """Raised when f(a) and f(b) do not have opposite signs."""

    def __init__(self, fa: float, fb: float) -> None:
        super().__init__("No sign change: f(a) and f(b) must have opposite signs.")
        self.fa = fa
        self.fb = fb


@dataclass(frozen=True)
class BisectionStep:
    """One halving: the bracket [a, b], its midpoint c and f(c)."""

    iteration: int
    a: float
    b: float
    c: float
    fc: float


@dataclass(frozen=True)
class BisectionResult:
    """Outcome of a bisection run."""

    root: float
    converged: bool
    steps: tuple[BisectionStep, ...]


def bisection(expr: str, a: float, b: float, tol: float, max_iter: int) -> BisectionResult:
    """Find a root of ``expr`` in [a, b].

    Stops as soon as |f(c)| < tol; otherwise returns the midpoint of the final
    bracket after ``max_iter`` halvings.
    """
    parser = EquationParser().parse(expr)
    fa = parser.evaluate(a)
    fb = parser.evaluate(b)
    if fa * fb >= 0:
        raise NoSignChangeError(fa, fb)

    steps: list[BisectionStep] = []
    for iteration in range(1, max_iter + 1):
        c = (a + b) / 2
        fc = parser.evaluate(c)
        steps.append(BisectionStep(iteration, a, b, c, fc))
        if abs(fc) < tol:
            return BisectionResult(c, True, tuple(steps))
        if fa * fc < 0:
            b = c
        else:
            a, fa = c, fc
    return BisectionResult((a + b) / 2, False, tuple(steps))


def format_table(result: BisectionResult) -> str:
    """Render the iteration table followed by the closing verdict."""
    lines = [f"{'Iter':<8}{'a':<15}{'b':<15}{'c':<15}{'f(c)':<15}"]
    lines.extend(
        f"{step.iteration:<8}{step.a:<15g}{step.b:<15g}{step.c:<15g}{step.fc:<15g}"
        for step in result.steps
    )
    lines.append("")
    if result.converged:
        lines.append(f"Root found: {result.root:g}")
    else:
        lines.append(f"Approximate root after max iterations: {result.root:g}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Ask for a function, a bracket, a tolerance and an iteration limit, then bisect."""
    argparse.ArgumentParser(prog="numethods-bisection", description="Bisection root finder.").parse_args(argv)
    try:
        expr = input("Enter function f(x): ")
        a = float(input("Enter first guess x0: "))
        b = float(input("Enter second guess x1: "))
        tol = float(input("Enter tolerance: "))
        max_iter = int(input("Enter max iterations: "))
    except (ValueError, EOFError):
        print("Invalid input.")
        return 1
    try:
        result = bisection(expr, a, b, tol, max_iter)
    except NoSignChangeError as exc:
        print(exc)
        return 0
    except EquationError as exc:
        print(f"Error: {exc}")
        return 1
    print(format_table(result))
    return 0