"""Text processor protocol, built-in implementations, and registry.

Lives in infra so that both config models and the widget layer can
import without circular dependencies.
"""

from __future__ import annotations

import logging
import re
from abc import abstractmethod
from typing import Any, Iterable, Protocol

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

_EXCESS_NEWLINES = re.compile(r"\n{3,}")
_HTML_TAG = re.compile(r"<[^>]+>")


class TextProcessor(Protocol):
    """Structural protocol: anything with ``.process(str) -> str``."""

    @property
    def processor_name(self) -> str:
        return ""

    @abstractmethod
    def process(self, content: str) -> str: ...


# ---------------------------------------------------------------------------
# HTML cleaning
# ---------------------------------------------------------------------------


def clean(raw_html: str, skip_cleaning: bool = False) -> str:
    """Convert raw HTML to plain text.

    * ``<script>`` and ``<style>`` blocks are dropped with their content
    * ``<br>`` becomes a newline, carriage returns are removed
    * every other tag (custom ``<t>`` included) is stripped
    * entities are decoded, ``&nbsp;`` to a plain space
    * three or more consecutive newlines collapse to two; the result is trimmed

    Never raises: if cleaning fails the input is returned unchanged.
    """
    if skip_cleaning or not raw_html:
        return raw_html

    try:
        return _perform_cleaning(raw_html)
    except Exception:
        logger.warning("HTML cleaning failed, using raw input", exc_info=True)
        return raw_html


def _perform_cleaning(html: str) -> str:
    soup = BeautifulSoup(html.replace("\r", ""), "html.parser")

    for tag in soup(["script", "style"]):
        tag.decompose()
    for br in soup.find_all("br"):
        br.replace_with("\n")

    text = soup.get_text().replace("\xa0", " ")
    text = _EXCESS_NEWLINES.sub("\n\n", text)
    return text.strip()


def contains_html(text: str) -> bool:
    return _HTML_TAG.search(text) is not None


def count_html_tags(html: str) -> int:
    return len(_HTML_TAG.findall(html))


# ---------------------------------------------------------------------------
# Built-in processors
# ---------------------------------------------------------------------------


class HtmlCleanProcessor(TextProcessor):
    """Strip markup from raw HTML, keeping line breaks."""

    processor_name = "html_clean"

    def process(self, content: str) -> str:
        return clean(content)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

_KNOWN_PROCESSORS: dict[str, type] = {
    HtmlCleanProcessor.processor_name: HtmlCleanProcessor,
}


def get_processor(name: str, **kwargs: Any) -> TextProcessor:
    """Look up a processor by name and return an instance."""
    cls = _KNOWN_PROCESSORS.get(name)
    if cls is None:
        raise NotImplementedError(f"Processor '{name}' is not supported.")
    return cls(**kwargs)


def apply_processors(content: str, names: Iterable[str]) -> str:
    """Run *content* through the named processors in order."""
    for name in names:
        content = get_processor(name).process(content)
    return content
