from __future__ import annotations
from bs4.element import NavigableString, PageElement, PreformattedString, Tag
import re
from typing import Optional


# --- tag families ----------------------------------------------------------

# developer.mozilla.org/en-US/docs/Web/HTML/Block-level_elements
BLOCK_TAGS = frozenset({
    "ADDRESS", "ARTICLE", "ASIDE", "BLOCKQUOTE", "DD", "DETAILS", "DIALOG",
    "DIV", "DL", "DT", "FIELDSET", "FIGCAPTION", "FIGURE", "FOOTER", "FORM",
    "H1", "H2", "H3", "H4", "H5", "H6", "HEADER", "HGROUP", "HR", "LI",
    "MAIN", "NAV", "OL", "P", "PRE", "SECTION", "TABLE", "UL",
})

# developer.mozilla.org/en-US/docs/Web/HTML/Inline_elements
INLINE_TAGS = frozenset({
    "A", "ABBR", "ACRONYM", "AUDIO", "B", "BDI", "BDO", "BIG", "BR", "BUTTON",
    "CANVAS", "CITE", "CODE", "DATA", "DATALIST", "DEL", "DFN", "EM", "EMBED",
    "I", "IFRAME", "IMG", "INPUT", "INS", "KBD", "LABEL", "MAP", "MARK",
    "METER", "NOSCRIPT", "OBJECT", "OUTPUT", "PICTURE", "PROGRESS", "Q",
    "RUBY", "S", "SAMP", "SCRIPT", "SELECT", "SLOT", "SMALL", "SPAN",
    "STRONG", "SUB", "SUP", "SVG", "TEMPLATE", "TEXTAREA", "TIME", "TT", "U",
    "VAR", "VIDEO", "WBR",
})

# Whitespace is TAB, LF, CR and SPACE only; no-break spaces are content.
WHITESPACE = "\t\n\r "

_WS_RUN = re.compile(r"[\t\n\r ]+")
_ENDS_WITH_WS = re.compile(r"[\t\n\r ]$")


def is_block(tag_name: Optional[str]) -> bool:
    """`tag_name` must already be upper-cased."""
    return tag_name in BLOCK_TAGS


# --- node helpers ----------------------------------------------------------

def is_text(node: PageElement) -> bool:
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def _is_block_element(node: Optional[PageElement]) -> bool:
    return isinstance(node, Tag) and is_block(node.name.upper())


def _text_content(node: PageElement) -> str:
    """Like DOM textContent: <script> and <style> text counts too."""
    if isinstance(node, Tag):
        return "".join(str(s) for s in node.descendants if is_text(s))
    return str(node)


def _ends_with_whitespace(node: Optional[PageElement]) -> bool:
    return node is not None and _ENDS_WITH_WS.search(_text_content(node)) is not None


def _set_text(node: NavigableString, value: str) -> NavigableString:
    """Swap `node` for a string of the same class holding `value`."""
    if value == str(node):
        return node
    replacement = type(node)(value)
    node.replace_with(replacement)
    return replacement


def collapse_text(text: str) -> str:
    return _WS_RUN.sub(" ", text)


# --- passes ----------------------------------------------------------------

def trim_leading(element: Tag, force_trim_start: bool) -> None:
    """
    Forward pass: strip leading whitespace at the start of block contexts and
    drop every comment, doctype or other non-text, non-element child.
    """
    trim_start = force_trim_start or is_block(element.name.upper())

    for child in list(element.contents):
        if not (is_text(child) or isinstance(child, Tag)):
            child.extract()
            continue

        if element.contents[0] is child:
            hand = trim_start
        else:
            prev = child.previous_sibling
            hand = _is_block_element(prev) or _ends_with_whitespace(prev)

        if isinstance(child, Tag):
            trim_leading(child, hand)
            continue

        if hand:
            child = _set_text(child, child.lstrip(WHITESPACE))
        if len(child) == 0:
            child.extract()


def trim_trailing(element: Tag, force_trim_end: bool) -> None:
    """
    Backward pass: strip trailing whitespace at the end of block contexts and
    collapse whitespace runs inside every surviving text node.

    Unlike the forward pass, a following sibling only counts when it is a
    block element; its leading text is not looked at.
    """
    trim_end = force_trim_end or is_block(element.name.upper())

    for child in reversed(list(element.contents)):
        is_last = element.contents[-1] is child
        hand = trim_end if is_last else _is_block_element(child.next_sibling)

        if is_text(child):
            value = child.rstrip(WHITESPACE) if hand else str(child)
            if len(value) == 0:
                child.extract()
            else:
                _set_text(child, collapse_text(value))
        elif isinstance(child, Tag):
            trim_trailing(child, hand)


def normalize(root: Tag) -> None:
    """Normalize whitespace below `root` in place."""
    trim = is_block(root.name.upper())
    trim_leading(root, trim)
    trim_trailing(root, trim)
