"""Tests for the terminal CLI."""

from io import StringIO

import pytest

from seemore.cli.__main__ import parse_args
from seemore.cli.config import CLIConfig
from seemore.cli.seemore_cli import SeeMoreCLI
from seemore.configs.config import AppConfig

LONG_TEXT = "Check #news from @ana at https://ex.io/a " + "word " * 30


def _cli(commands: str = "", **config) -> tuple[SeeMoreCLI, StringIO]:
    output = StringIO()
    cli_config = CLIConfig(width=20, max_lines=2, use_color=False, **config)
    cli = SeeMoreCLI(
        cli_config,
        LONG_TEXT,
        app_config=AppConfig(),
        input_stream=StringIO(commands),
        output_stream=output,
    )
    return cli, output


class TestSeeMoreCLI:
    def test_render_once_prints_collapsed_text(self):
        cli, output = _cli()

        presentation = cli.render_once()

        lines = output.getvalue().splitlines()
        assert len(lines) == 2
        assert lines[0] == "Check #news from"
        assert lines[-1].endswith("... See more")
        assert presentation.is_overflowing

    def test_toggle_command_expands(self):
        cli, output = _cli("t\nq\n")

        cli.run()

        text = output.getvalue()
        assert "See more" in text
        assert "See less" in text
        assert cli.widget.expanded is True

    def test_tap_token_announces_callback(self):
        cli, output = _cli("o 0\nq\n")

        cli.run()

        assert "-> Open hashtag: #news" in output.getvalue()
        assert cli.widget.expanded is False

    def test_list_tokens(self):
        cli, output = _cli("l\n")

        cli.run()

        assert "[0] hashtag: #news" in output.getvalue()
        assert "[1] mention: @ana" in output.getvalue()

    def test_width_command_rerenders(self):
        cli, output = _cli("w 200\nq\n")

        cli.run()

        assert cli.width == 200
        assert cli.presentation.is_overflowing is False

    def test_invalid_commands(self):
        cli, output = _cli("w 0\no 99\nxyz\n")

        cli.run()

        text = output.getvalue()
        assert "Width must be a positive integer." in text
        assert "No such token" in text
        assert text.count("Commands:") == 2

    def test_starts_expanded(self):
        cli, output = _cli(expanded=True)

        presentation = cli.render_once()

        assert presentation.is_expanded
        assert output.getvalue().rstrip().endswith("See less")

    def test_html_input_is_cleaned(self):
        output = StringIO()
        cli = SeeMoreCLI(
            CLIConfig(width=80, html=True, use_color=False),
            "<p>Hi <b>@bob</b></p>",
            app_config=AppConfig(),
            output_stream=output,
        )

        cli.render_once()

        assert output.getvalue() == "Hi @bob\n"

    def test_color_output_wraps_tokens(self):
        output = StringIO()
        cli = SeeMoreCLI(
            CLIConfig(width=80), "see #tag", app_config=AppConfig(), output_stream=output
        )

        cli.render_once()

        assert "\033[36m#tag\033[0m" in output.getvalue()


class TestParseArgs:
    def test_defaults(self):
        args = parse_args(["hello"])

        assert args.text == "hello"
        assert args.max_lines is None
        assert args.strategy is None
        assert not args.interactive

    def test_flags(self):
        args = parse_args(
            ["--width", "40", "--max-lines", "3", "--strategy", "fast_corner", "--html", "--no-color"]
        )

        assert args.text is None
        assert (args.width, args.max_lines, args.strategy) == (40, 3, "fast_corner")
        assert args.html and args.no_color

    def test_unknown_strategy_rejected(self):
        with pytest.raises(SystemExit):
            parse_args(["--strategy", "guess", "x"])
