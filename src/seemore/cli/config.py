"""Configuration for the CLI tool."""

from typing import Optional

from pydantic import BaseModel, Field

from seemore.core.constants import MIN_LINES


class CLIConfig(BaseModel):
    """CLI configuration settings; unset values fall back to AppConfig."""

    width: int = Field(default=80, gt=0, description="Render width in cells")
    max_lines: Optional[int] = Field(
        default=None, ge=MIN_LINES, description="Lines shown while collapsed"
    )
    strategy: Optional[str] = Field(default=None, description="Truncation strategy")
    html: bool = Field(default=False, description="Clean HTML input first")
    expanded: bool = Field(default=False, description="Start expanded")
    use_color: bool = Field(default=True, description="ANSI colours")

    def widget_overrides(self) -> dict:
        """WidgetConfig fields set explicitly on the command line."""
        overrides: dict = {}
        if self.max_lines is not None:
            overrides["max_lines"] = self.max_lines
        if self.strategy is not None:
            overrides["truncation_strategy"] = self.strategy
        if self.html:
            overrides["processors"] = ("html_clean",)
        return overrides
