"""Newton divided-difference interpolation with forward and backward forms."""

from __future__ import annotations

import argparse
from typing import Sequence

__all__ = ["DividedDifferenceInterpolator", "main"]

MAX_POINTS = 20
_DUPLICATE_GAP = 1e-9


class DividedDifferenceInterpolator:
    """Newton interpolating polynomial through (x[i], f[i]).

    The forward form (built from x[0]) is used when the evaluation point is
    closer to the first node than to the last; the backward form otherwise.
    """

    def __init__(self, x: Sequence[float], f: Sequence[float]) -> None:
        if len(x) != len(f):
            raise ValueError("x and f must have the same number of values")
        if not 1 < len(x) <= MAX_POINTS:
            raise ValueError(f"Number of points must be > 1 and <= {MAX_POINTS}")
        nodes = [float(value) for value in x]
        for i, node in enumerate(nodes):
            if any(abs(node - earlier) < _DUPLICATE_GAP for earlier in nodes[:i]):
                raise ValueError("Duplicate value found! X values must be distinct.")
        self.x = tuple(nodes)
        self.f = tuple(float(value) for value in f)
        self._diffs = self._divided_differences()

    def _divided_differences(self) -> list[list[float]]:
        # diffs[k][m] is the k-th divided difference over x[m .. m+k].
        diffs = [list(self.f)]
        for order in range(1, len(self.x)):
            previous = diffs[-1]
            diffs.append(
                [
                    (previous[m + 1] - previous[m]) / (self.x[m + order] - self.x[m])
                    for m in range(len(previous) - 1)
                ]
            )
        return diffs

    def _is_forward(self, at: float) -> bool:
        return abs(at - self.x[0]) < abs(at - self.x[-1])

    def table(self, at: float) -> tuple[tuple[float, ...], ...]:
        """Rows of the difference table used for ``at``, one row per node.

        Forward rows start at each node and run down the diagonal; backward
        rows end at each node, so row i holds i + 1 entries.
        """
        n = len(self.x)
        if self._is_forward(at):
            return tuple(tuple(self._diffs[j][i] for j in range(n - i)) for i in range(n))
        return tuple(tuple(self._diffs[j][i - j] for j in range(i + 1)) for i in range(n))

    def evaluate(self, at: float) -> float:
        """Value of the interpolating polynomial at ``at``."""
        n = len(self.x)
        forward = self._is_forward(at)
        result = 0.0
        for order in range(n):
            product = 1.0
            for j in range(order):
                product *= at - (self.x[j] if forward else self.x[n - 1 - j])
            coefficient = self._diffs[order][0] if forward else self._diffs[order][n - 1 - order]
            result += product * coefficient
        return result

    def format_table(self, at: float) -> str:
        """Render the difference table used for ``at`` as tab-separated text."""
        n = len(self.x)
        header = "Sn\tXi\tf(Xi)\t" + "".join(f"{order} diff\t" for order in range(1, n))
        lines = [header]
        for i, row in enumerate(self.table(at)):
            node = f"{self.x[i]:g}" if i == 0 else f"{self.x[i]:.4f}"
            lines.append(f"{i + 1}\t{node}\t" + "".join(f"{value:.4f}\t" for value in row))
        return "\n".join(lines)


def _ask_float(prompt: str) -> float:
    while True:
        try:
            return float(input(prompt))
        except ValueError:
            print("❌ Invalid input. Please enter a valid number.")


def _ask_count() -> int:
    while True:
        try:
            count = int(input("Enter number of points (n > 1): "))
        except ValueError:
            count = 0
        if 1 < count <= MAX_POINTS:
            return count
        print(f"❌ Invalid number. Please enter an integer > 1 and <= {MAX_POINTS}.")


def _ask_nodes(count: int) -> list[float]:
    nodes: list[float] = []
    while len(nodes) < count:
        value = _ask_float(f"Enter X[{len(nodes)}]: ")
        if any(abs(value - node) < _DUPLICATE_GAP for node in nodes):
            print("❌ Duplicate value found! X values must be distinct.")
            continue
        nodes.append(value)
    return nodes


def main(argv: list[str] | None = None) -> int:
    """Run the interactive divided-difference interpolation program."""
    argparse.ArgumentParser(
        prog="numethods-divided", description="Newton divided-difference interpolation."
    ).parse_args(argv)
    try:
        count = _ask_count()
        print()
        x = _ask_nodes(count)
        print()
        f = [_ask_float(f"Enter F[{j}]: ") for j in range(count)]
        print()
        at = _ask_float("Enter value of X to evaluate f(X): ")
    except EOFError:
        return 1

    low, high = min(x), max(x)
    if at < low or at > high:
        print(f"⚠️ Warning: X = {at:g} is outside the interpolation range [{low:g}, {high:g}].")
        print("The result might be less accurate (this is extrapolation).\n")

    interpolator = DividedDifferenceInterpolator(x, f)
    print()
    print(interpolator.format_table(at))
    print(f"\nThe value of P{count - 1}({at:.4f}): {interpolator.evaluate(at):.6f}\n")
    return 0