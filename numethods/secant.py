"""Root finding with the secant method."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

from .parser import EquationError, EquationParser

__all__ = ["SecantStep", "SecantResult", "SecantSolver", "main"]

_FLAT_THRESHOLD = 1e-12


@dataclass(frozen=True)
class SecantStep:
    """One secant iterate and the function value there."""

    iteration: int
    x: float
    fx: float


@dataclass(frozen=True)
class SecantResult:
    """Outcome of a secant run.

    ``stalled`` is set when two successive function values were too close to
    draw a secant through them.
    """

    root: float
    converged: bool
    stalled: bool
    steps: tuple[SecantStep, ...]

    def report(self) -> str:
        """Render the iterations and the closing verdict."""
        lines = [f"Iteration {step.iteration}: x = {step.x:g}, f(x) = {step.fx:g}" for step in self.steps]
        if self.stalled:
            lines.append("Division by zero error in secant method.")
        elif self.converged:
            lines.append(f"Converged to root: {self.root:g}")
        else:
            lines.append(
                "Did not converge within the maximum number of iterations. "
                f"Last approximation: {self.root:g}"
            )
        return "\n".join(lines)


class SecantSolver:
    """Solves f(x) = 0 for one equation in x."""

    def __init__(self, expression: str) -> None:
        self.expression = expression
        self._parser = EquationParser().parse(expression)

    def solve(
        self, x0: float, x1: float, tolerance: float = 1e-6, max_iterations: int = 100
    ) -> SecantResult:
        """Iterate from the two guesses until successive iterates differ by less than ``tolerance``."""
        evaluate = self._parser.evaluate
        f0 = evaluate(x0)
        f1 = evaluate(x1)
        steps: list[SecantStep] = []
        x2 = x1
        for iteration in range(1, max_iterations + 1):
            if abs(f1 - f0) < _FLAT_THRESHOLD:
                return SecantResult(x1, False, True, tuple(steps))
            x2 = x1 - f1 * (x1 - x0) / (f1 - f0)
            f2 = evaluate(x2)
            steps.append(SecantStep(iteration, x2, f2))
            if abs(x2 - x1) < tolerance:
                return SecantResult(x2, True, False, tuple(steps))
            x0, f0, x1, f1 = x1, f1, x2, f2
        return SecantResult(x2, False, False, tuple(steps))


def main(argv: list[str] | None = None) -> int:
    """Ask for a function, two guesses, a tolerance and an iteration limit, then solve."""
    argparse.ArgumentParser(prog="numethods-secant", description="Secant root finder.").parse_args(argv)
    try:
        expr = input("Enter function f(x): ")
        x0 = float(input("Enter first guess x0: "))
        x1 = float(input("Enter second guess x1: "))
        tol = float(input("Enter tolerance: "))
        max_iter = int(input("Enter max iterations: "))
    except (ValueError, EOFError):
        print("Invalid input.")
        return 1
    try:
        result = SecantSolver(expr).solve(x0, x1, tol, max_iter)
    except EquationError as exc:
        print(f"Error: {exc}")
        return 1
    print(result.report())
    return 0