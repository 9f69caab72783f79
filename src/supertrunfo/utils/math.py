"""Guarded division helpers for derived metrics and scoring."""


def safe_div(a: float, b: float) -> float:
    """Return a/b, or 0.0 unless b is strictly positive."""
    return a / b if b > 0 else 0.0


def safe_inverse(x: float) -> float:
    """Return 1/x for positive x, else 0.0."""
    return safe_div(1.0, x)
