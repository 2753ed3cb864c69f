from __future__ import annotations
from bs4 import BeautifulSoup
from bs4.element import Tag
import logging
from typing import List, Callable, Optional

from .literal import CRLF, literal, literal_array
from .whitespace import normalize

logger = logging.getLogger(__name__)


class HtmlLiteral:
    """
    A chain-friendly pipeline that turns pasted HTML into call-notation
    literals.  The markup is parsed into a detached <div>, its whitespace is
    collapsed the way a browser lays it out, and the result is rendered with
    `to_literal()`.  Each stage returns `self`.
    """

    _DEFAULT_PARSER = "lxml"
    _DOCUMENT_TAGS = ["html", "head", "body"]

    # --- life-cycle ---------------------------------------------------------

    def __init__(
        self,
        raw_html: str,
        parser: Optional[str] = None,
        newline: str = CRLF,
    ) -> None:
        self.raw_html: str = raw_html
        self.parser: str = parser or self._DEFAULT_PARSER
        self.newline: str = newline
        self.dom_tree: Optional[BeautifulSoup] = None
        self.wrapper: Optional[Tag] = None

    # --- helpers -----------------------------------------------------------

    def _assert_parsed(self) -> None:
        if self.wrapper is None:
            raise RuntimeError("Call parse_the_fragment_into_a_wrapper() first")

    def to_html(self) -> str:
        """Return the wrapper's current inner HTML."""
        self._assert_parsed()
        return self.wrapper.decode_contents(formatter="html")

    def to_literal(self) -> str:
        """
        Render the wrapper's content.  A single top-level node is rendered on
        its own, anything else as an array.
        """
        self._assert_parsed()
        children = self.wrapper.contents
        if len(children) == 1:
            return literal(children[0], self.newline)
        return literal_array(children, self.newline)

    # --- pipeline stages ---------------------------------------------------

    def parse_the_fragment_into_a_wrapper(self) -> "HtmlLiteral":
        """
        Parse raw HTML as the content of a <div>, the way assigning innerHTML
        to a detached element does.
        """
        self.dom_tree = BeautifulSoup(
            f"<div>{self.raw_html}</div>",
            self.parser,
            multi_valued_attributes=None,
        )
        # The wrapper is the first element in document order for every builder.
        wrapper = self.dom_tree.find("div")

        # A stray </div> in the markup closes the wrapper early; pull whatever
        # ended up after it back inside.
        for stray in list(wrapper.next_siblings):
            wrapper.append(stray.extract())

        # Document-level tags pasted along with the content are dropped, their
        # children kept in place.
        for tag in wrapper.find_all(self._DOCUMENT_TAGS):
            tag.unwrap()

        self.wrapper = wrapper
        logger.debug(
            "parsed %d chars with %s into %d top-level nodes",
            len(self.raw_html), self.parser, len(wrapper.contents),
        )
        return self

    # ----------------------------------------------------------------------

    def merge_adjacent_text_nodes(self) -> "HtmlLiteral":
        """Join neighbouring text nodes into one, like Node.normalize()."""
        self._assert_parsed()
        self.wrapper.smooth()
        return self

    # ----------------------------------------------------------------------

    def normalize_whitespace(self) -> "HtmlLiteral":
        """
        Trim whitespace at block boundaries, collapse the rest to single
        spaces and drop comments and other non-content nodes.
        """
        self._assert_parsed()
        before = len(self.wrapper.get_text())
        normalize(self.wrapper)
        logger.debug(
            "whitespace normalized: %d -> %d text chars",
            before, len(self.wrapper.get_text()),
        )
        return self

    # ----------------------------------------------------------------------

    _DEFAULT_PIPE = [
        "parse_the_fragment_into_a_wrapper",
        "merge_adjacent_text_nodes",
        "normalize_whitespace",
    ]

    def run(self, order: Optional[List[str]] = None) -> "HtmlLiteral":
        """
        Run a pipeline.  Pass a list of *method names* (strings) to customize
        ordering / selection; otherwise the default pipeline is executed.
        """
        steps: List[str] = order or self._DEFAULT_PIPE
        for name in steps:
            if name not in self._DEFAULT_PIPE:
                raise ValueError(f"unknown pipeline stage: {name!r}")
            fn: Callable[[], HtmlLiteral] = getattr(self, name)
            logger.debug("running stage %s", name)
            fn()
        return self


def convert(raw_html: str, parser: Optional[str] = None, newline: str = CRLF) -> str:
    """Parse, normalize and render `raw_html` in one call."""
    return HtmlLiteral(raw_html, parser=parser, newline=newline).run().to_literal()
