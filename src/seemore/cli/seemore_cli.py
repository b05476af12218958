"""Render collapsible text in the terminal, once or interactively."""

import logging
import sys
from typing import Optional, TextIO

from seemore.configs.config import AppConfig, get_app_config
from seemore.core.models import Presentation, WidgetConfig
from seemore.core.styles import Theme
from seemore.core.widget import SeeMoreText
from seemore.infra.logging import setup_logging
from seemore.layout.monospace import MonospaceOracle

from .config import CLIConfig
from .formatter import SpanFormatter, tappable_spans

logger = logging.getLogger(__name__)

HELP_TEXT = (
    "Commands: <enter>/t toggle, w N set width, o N tap token N, "
    "l list tokens, q quit\n"
)


class SeeMoreCLI:
    """Terminal host for one SeeMoreText widget."""

    def __init__(
        self,
        config: CLIConfig,
        text: str,
        app_config: Optional[AppConfig] = None,
        input_stream: TextIO = sys.stdin,
        output_stream: TextIO = sys.stdout,
    ):
        """Initialize the CLI.

        Parameters
        ----------
        config
            CLI configuration.
        text
            Raw text to render.
        app_config
            Application defaults (default: read from config files / env).
        input_stream
            Input stream for interactive commands (default: stdin).
        output_stream
            Output stream for rendered text (default: stdout).
        """
        self.config = config
        self.input_stream = input_stream
        self.output_stream = output_stream
        self.width = config.width

        app_config = app_config or get_app_config()
        # The terminal is a character grid, whatever oracle the app config names.
        self.oracle = MonospaceOracle(
            cell_width=app_config.layout.cell_width,
            line_height=app_config.layout.line_height,
        )
        widget_config = WidgetConfig.from_display_config(
            app_config.display,
            text=text,
            on_url_tap=self._announce("Open URL"),
            on_hashtag_tap=self._announce("Open hashtag"),
            on_mention_tap=self._announce("Open profile"),
            **config.widget_overrides(),
        )
        self.widget = SeeMoreText(
            widget_config,
            self.oracle,
            theme=Theme.from_theme_config(app_config.theme),
            on_rebuild=self._render,
        )
        if config.expanded:
            self.widget.toggle_controller.expand()
        self.formatter = SpanFormatter(output_stream, self.oracle, config.use_color)
        self.presentation: Optional[Presentation] = None

    def render_once(self) -> Presentation:
        """Lay out at the configured width and print the result."""
        presentation = self.widget.layout(self.width)
        self._render(presentation)
        return presentation

    def run(self) -> None:
        """Run the interactive loop."""
        self._print(HELP_TEXT)
        self.render_once()
        while True:
            try:
                command = self._get_user_input().strip().lower()
            except KeyboardInterrupt:
                self._print("\n\nInterrupted. Use 'q' to exit.\n")
                continue
            except EOFError:
                self._print("\n")
                break

            if command in ("q", "quit", "exit"):
                break
            self._handle_command(command)

    def _handle_command(self, command: str) -> None:
        if command in ("", "t"):
            self.widget.toggle()
        elif command == "l":
            self.formatter.render_tokens(self.presentation)
        elif command.startswith("w "):
            width = _parse_int(command[2:])
            if width is None or width <= 0:
                self._print("Width must be a positive integer.\n")
                return
            self.width = width
            self.render_once()
        elif command.startswith("o "):
            index = _parse_int(command[2:])
            spans = tappable_spans(self.presentation)
            if index is None or not 0 <= index < len(spans):
                self._print("No such token; 'l' lists them.\n")
                return
            self.widget.tap(spans[index])
        else:
            self._print(HELP_TEXT)

    def _render(self, presentation: Presentation) -> None:
        self.presentation = presentation
        self.formatter.render(presentation, self.width)
        self.output_stream.flush()

    def _announce(self, verb: str):
        def callback(value: str) -> None:
            self._print(f"-> {verb}: {value}\n")

        return callback

    def _get_user_input(self) -> str:
        """Get a command from the input stream."""
        self._print("> ")
        line = self.input_stream.readline()
        if not line:
            raise EOFError
        return line.rstrip("\n\r")

    def _print(self, text: str) -> None:
        """Print text to output stream."""
        self.output_stream.write(text)
        self.output_stream.flush()


def _parse_int(value: str) -> Optional[int]:
    try:
        return int(value.strip())
    except ValueError:
        return None


def main(
    text: str,
    config: CLIConfig,
    interactive: bool = False,
    debug: bool = False,
) -> None:
    """Main entry point for the CLI.

    Parameters
    ----------
    text
        Raw text to render.
    config
        CLI configuration.
    interactive
        Keep reading toggle/width commands after the first render.
    debug
        Enable debug logging.
    """
    app_config = get_app_config()
    logging_config = app_config.logging
    if debug:
        logging_config = logging_config.model_copy(update={"level": "DEBUG"})
    setup_logging(logging_config)

    cli = SeeMoreCLI(config, text, app_config=app_config)
    if interactive:
        cli.run()
    else:
        cli.render_once()
