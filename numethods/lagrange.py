"""Lagrange polynomial interpolation, forwards (y at x) and inverse (x at y)."""

from __future__ import annotations

import argparse
import math
from typing import Sequence

__all__ = ["LagrangeInterpolator", "main"]


def _divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE results when the denominator is zero."""
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _lagrange(nodes: Sequence[float], values: Sequence[float], at: float) -> float:
    result = 0.0
    for i, (node_i, value_i) in enumerate(zip(nodes, values)):
        numerator = 1.0
        denominator = 1.0
        for j, node_j in enumerate(nodes):
            if i != j:
                numerator *= at - node_j
                denominator *= node_i - node_j
        result += value_i * _divide(numerator, denominator)
    return result


class LagrangeInterpolator:
    """Interpolating polynomial through the points (x[i], y[i])."""

    def __init__(self, x: Sequence[float], y: Sequence[float]) -> None:
        if len(x) != len(y):
            raise ValueError("x and y must have the same number of values")
        self.x = tuple(float(value) for value in x)
        self.y = tuple(float(value) for value in y)

    def interpolate_y(self, x_value: float) -> float:
        """Value of the interpolating polynomial at ``x_value``."""
        return _lagrange(self.x, self.y, x_value)

    def interpolate_x(self, y_value: float) -> float:
        """Inverse interpolation: the x at which the data reach ``y_value``."""
        return _lagrange(self.y, self.x, y_value)


def _read_values(label: str, count: int) -> list[float]:
    print(f"\nEnter the values of {label}:")
    return [float(input(f"  {label.lower()}[{i}] = ")) for i in range(count)]


def main(argv: list[str] | None = None) -> int:
    """Run the interactive Lagrange interpolation program."""
    argparse.ArgumentParser(prog="numethods-lagrange", description="Lagrange interpolation.").parse_args(argv)
    print("------ Lagrange Interpolation Program ------\n")
    print("1. Calculate y for a given x")
    print("2. Calculate x for a given y (inverse interpolation)")
    try:
        choice = int(input("Enter your choice (1 or 2): "))
        count = int(input("\nEnter the number of data points: "))
        x = _read_values("X", count)
        y = _read_values("Y", count)
        interpolator = LagrangeInterpolator(x, y)
        if choice == 1:
            value = float(input("\nEnter the value of x to interpolate y: "))
            result = interpolator.interpolate_y(value)
            print(f"\nInterpolated value at x = {value:.6f} is y(x) = {result:.6f}")
        elif choice == 2:
            value = float(input("\nEnter the value of y to interpolate x: "))
            result = interpolator.interpolate_x(value)
            print(f"\nInterpolated value at y = {value:.6f} is x(y) = {result:.6f}")
        else:
            print("Invalid choice.")
    except (ValueError, EOFError):
        print("Invalid input.")
        return 1
    return 0