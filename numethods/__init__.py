"""Numerical methods: expression parsing, root finding, integration and interpolation."""

__version__ = "0.1.0"

__all__ = [
    "parser",
    "classic",
    "bisection",
    "secant",
    "integration",
    "lagrange",
    "divided_difference",
    "cli",
]