"""Test helpers shared across modules."""

from seemore.core.models import LayoutConstraints, TextStyle


class CountingOracle:
    """Wraps an oracle and counts every query made against it."""

    def __init__(self, inner):
        self.inner = inner
        self.calls = 0

    def measure(self, text, style, constraints):
        self.calls += 1
        return self.inner.measure(text, style, constraints)

    def offset_at_point(self, text, style, constraints, point):
        self.calls += 1
        return self.inner.offset_at_point(text, style, constraints, point)


def fits(oracle, text: str, width: float, max_lines: int) -> bool:
    constraints = LayoutConstraints(max_width=width, max_lines=max_lines)
    return not oracle.measure(text, TextStyle(), constraints).overflowed
