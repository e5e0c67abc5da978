"""Queryable HTML document built with BeautifulSoup on lxml's HTML parser.

lxml closes elements whose end tag may be omitted (``<li>``, ``<p>``) the
way browsers do, so sibling items never nest into each other.

The tree supports CSS selector lookup (via soupsieve) and visible-text
extraction.  One :class:`ParsedDocument` is built per request and discarded
with it.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from bs4 import BeautifulSoup, Tag, UnicodeDammit

from backend.scraper.errors import ParseError

logger = logging.getLogger(__name__)

_INVISIBLE_TAGS = ["script", "style", "noscript", "template"]
_WHITESPACE = re.compile(r"\s+")

# Characters sniffed for a NUL when rejecting binary payloads.
_SNIFF_CHARS = 1024


def node_text(node: Tag) -> str:
    """Return the visible text of *node* with whitespace runs collapsed."""
    return _WHITESPACE.sub(" ", node.get_text()).strip()


class ParsedDocument:
    """Read-only wrapper around a parsed HTML tree."""

    def __init__(self, soup: BeautifulSoup) -> None:
        # Serialized length is measured before invisible content is dropped
        self._length = len(str(soup))
        for tag in soup(_INVISIBLE_TAGS):
            tag.decompose()
        self._soup = soup

    def __len__(self) -> int:
        return self._length

    def select(self, selector: str) -> List[Tag]:
        """Return every node matching *selector*, in document order."""
        return self._soup.select(selector)

    def first_text(self, selector: str) -> str:
        """Return the text of the first node matching *selector*, or ``""``."""
        node = self._soup.select_one(selector)
        if node is None:
            return ""
        return node_text(node)


def parse_document(body: bytes, encoding: Optional[str] = None) -> ParsedDocument:
    """Parse raw HTML *body* into a :class:`ParsedDocument`.

    *encoding* is the charset declared by the server; when ``None`` it is
    sniffed from a byte order mark or a ``<meta charset>`` in the markup.
    The binary check runs on the decoded text, so UTF-16 and UTF-32 pages
    are accepted.

    Raises:
        ParseError: If the payload is binary or the parser gives up.
    """
    dammit = UnicodeDammit(
        body,
        known_definite_encodings=[encoding] if encoding else [],
        is_html=True,
    )
    markup = dammit.unicode_markup
    if markup is None:
        raise ParseError("payload could not be decoded")
    if "\x00" in markup[:_SNIFF_CHARS]:
        raise ParseError("payload looks binary")
    logger.debug("Decoded document as %s", dammit.original_encoding)
    try:
        soup = BeautifulSoup(markup, "lxml")
    except Exception as exc:
        logger.warning("Error parsing HTML: %s", exc)
        raise ParseError(str(exc)) from exc
    return ParsedDocument(soup)
