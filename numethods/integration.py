"""Numerical integration over equally spaced points."""

from __future__ import annotations

import argparse
import math
import re

from .parser import EquationError, EquationParser

__all__ = ["NumericalIntegrator", "parse_bound", "main"]

_NUMBER_PREFIX = re.compile(
    r"\s*[+-]?(?:infinity|inf|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)",
    re.IGNORECASE,
)
_INT_PREFIX = re.compile(r"\s*[+-]?\d+")


def parse_bound(text: str) -> float:
    """Read an integration bound.

    The text must start with a number. A plain number is taken as is; any
    longer text is evaluated as an equation with the variable set to 0.
    """
    match = _NUMBER_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    literal = match.group()
    value = float(literal)
    if math.isinf(value) and "inf" not in literal.lower():
        raise ValueError(f"number out of range: {text!r}")
    if match.end() == len(text):
        return value
    return EquationParser().parse(text).evaluate(0.0)


class NumericalIntegrator:
    """Samples an equation at ``n`` equally spaced points on [a, b] and integrates it."""

    def __init__(self, equation: str, a: float, b: float, n: int) -> None:
        if n < 2:
            raise ValueError("Number of points must be at least 2")
        if b <= a:
            raise ValueError("Upper bound must be greater than lower bound.")
        self.equation = equation
        self.parser = EquationParser().parse(equation)
        self.a = a
        self.b = b
        self.n = n
        self.h = (b - a) / (n - 1)
        self.x = tuple(a + i * self.h for i in range(n))
        self.fx = tuple(self._evaluate(point) for point in self.x)

    def _evaluate(self, point: float) -> float:
        try:
            return self.parser.evaluate(point)
        except EquationError as exc:
            raise EquationError(f"Error evaluating at x = {point:g}: {exc}") from exc

    def trapezoidal(self) -> float:
        """Integrate with the trapezoidal rule."""
        total = self.fx[0] + self.fx[-1] + 2 * sum(self.fx[1:-1])
        return self.h / 2.0 * total

    def simpsons_13(self) -> float:
        """Integrate with Simpson's 1/3 rule; needs an even number of intervals."""
        if (self.n - 1) % 2 != 0:
            raise ValueError("Simpson's 1/3 needs even intervals")
        total = self.fx[0] + self.fx[-1]
        total += sum((2 if i % 2 == 0 else 4) * value for i, value in enumerate(self.fx[1:-1], start=1))
        return self.h / 3.0 * total

    def simpsons_38(self) -> float:
        """Integrate with Simpson's 3/8 rule; needs a multiple of three intervals."""
        if (self.n - 1) % 3 != 0:
            raise ValueError("Simpson's 3/8 needs intervals divisible by 3")
        total = self.fx[0] + self.fx[-1]
        total += sum((2 if i % 3 == 0 else 3) * value for i, value in enumerate(self.fx[1:-1], start=1))
        return 3.0 * self.h / 8.0 * total

    def table(self) -> str:
        """Render the sampled points, eliding the middle of long tables."""
        show = min(self.n, 10)
        half = show // 2

        def row(i: int) -> str:
            return f"{i}\t{self.x[i]:.6f}\t{self.fx[i]:.6f}\n"

        parts = ["\nGenerated Points Table:\n", "Index\tx\t\tf(x)\n"]
        parts.extend(row(i) for i in range(half))
        if self.n > show:
            parts.append("...\t...\t\t...\n")
            parts.extend(row(i) for i in range(self.n - half, self.n))
        return "".join(parts)


def _leading_int(text: str) -> int | None:
    match = _INT_PREFIX.match(text)
    return int(match.group()) if match else None


def _ask_bound(prompt: str) -> float:
    while True:
        try:
            return parse_bound(input(prompt))
        except ValueError as exc:
            print(f"Invalid input ({exc}). Please try again.")


def _ask_count(prompt: str, minimum: int) -> int:
    while True:
        value = _leading_int(input(prompt))
        if value is not None and value >= minimum:
            return value
        print(f"Invalid input. Please enter an integer >= {minimum}.")


def _ask_choice() -> int:
    print("\nChoose integration method:")
    print("1. Trapezoidal Rule")
    print("2. Simpson's 1/3 Rule")
    print("3. Simpson's 3/8 Rule")
    print("4. All Methods")
    print("5. Exit")
    prompt = "Enter choice: "
    while True:
        choice = _leading_int(input(prompt))
        if choice is not None and 1 <= choice <= 5:
            return choice
        prompt = "Invalid choice. Please enter 1-5: "


def _run_method(integrator: NumericalIntegrator, choice: int) -> None:
    try:
        if choice == 1:
            print(f"\nTrapezoidal Rule Result: {integrator.trapezoidal():.6f}")
        elif choice == 2:
            print(f"\nSimpson's 1/3 Rule Result: {integrator.simpsons_13():.6f}")
        elif choice == 3:
            print(f"\nSimpson's 3/8 Rule Result: {integrator.simpsons_38():.6f}")
        elif choice == 4:
            print("\nAll Integration Methods:")
            print(f"Trapezoidal Rule: {integrator.trapezoidal():.6f}")
            print(f"Simpson's 1/3 Rule: {integrator.simpsons_13():.6f}")
            print(f"Simpson's 3/8 Rule: {integrator.simpsons_38():.6f}")
    except ValueError as exc:
        print(f"Error: {exc}")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive integration calculator."""
    argparse.ArgumentParser(prog="numethods-integrate", description="Numerical integration.").parse_args(argv)
    print("==== Numerical Integration Calculator ====")
    try:
        while True:
            equation = input("\nEnter equation (e.g., exp((-x)^2)): ")
            try:
                EquationParser().parse(equation)
                break
            except EquationError as exc:
                print(f"Error: {exc}\nPlease try again.")

        a = _ask_bound("Enter lower bound (a): ")
        b = _ask_bound("Enter upper bound (b): ")
        while b <= a:
            print("Upper bound must be greater than lower bound.")
            b = _ask_bound("Enter upper bound (b): ")
        n = _ask_count("Enter number of points (>=2): ", 2)

        try:
            integrator = NumericalIntegrator(equation, a, b, n)
        except EquationError as exc:
            print(exc)
            return 1

        print(integrator.table(), end="")
        while True:
            choice = _ask_choice()
            if choice == 5:
                return 0
            _run_method(integrator, choice)
    except EOFError:
        return 1