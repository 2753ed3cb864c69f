from __future__ import annotations
from bs4.element import PageElement, Tag
import json
from typing import Iterable, List

from .props import get_props
from .whitespace import is_text

CRLF = "\r\n"


def literal(node: PageElement, newline: str = CRLF) -> str:
    """
    Render one node in call notation:

        textNode("Hello")
        p({
        className:"lead",
        },[
        textNode("Hello"),
        ])
    """
    if is_text(node):
        return f"textNode({json.dumps(str(node), ensure_ascii=False)})"
    if isinstance(node, Tag):
        return compose_dom(node.name.lower(), get_props(node), node.contents, newline)
    raise TypeError(f"cannot render {type(node).__name__} node as a literal")


def compose_dom(
    tag: str, props: List[str], children: List[PageElement], newline: str = CRLF
) -> str:
    args: List[str] = []
    if props:
        args.append(newline.join(["{", *props, "}"]))
    if children:
        args.append(literal_array(children, newline))
    return tag + "(" + ",".join(args) + ")"


def literal_array(nodes: Iterable[PageElement], newline: str = CRLF) -> str:
    children = [literal(node, newline) + "," for node in nodes]
    return newline.join(["[", *children, "]"])
