from .base import (
    FontLoadError,
    LayoutOracle,
    LineBox,
    LineBreakingOracle,
    SeeMoreError,
)
from .monospace import MonospaceOracle


def create_oracle(kind: str, **kwargs) -> LayoutOracle:
    """Build a layout oracle by name (``monospace`` or ``pillow``)."""
    if kind == "monospace":
        return MonospaceOracle(**kwargs)
    if kind == "pillow":
        from .pillow import PillowOracle

        return PillowOracle(**kwargs)
    raise NotImplementedError(f"Layout oracle '{kind}' is not supported.")


def oracle_from_config(layout) -> LayoutOracle:
    """Build the oracle a ``LayoutConfig`` section names."""
    if layout.oracle == "monospace":
        return MonospaceOracle(cell_width=layout.cell_width, line_height=layout.line_height)
    return create_oracle(layout.oracle)


__all__ = [
    "FontLoadError",
    "LayoutOracle",
    "LineBox",
    "LineBreakingOracle",
    "MonospaceOracle",
    "SeeMoreError",
    "create_oracle",
    "oracle_from_config",
]
