from __future__ import annotations
from bs4.element import Tag
import json
import re
from typing import Dict, FrozenSet, List, Optional, Union


# --- attribute -> property names -------------------------------------------

# Attributes whose DOM property is spelled differently. Attributes missing
# here are serialized under their own name.
ATTR_PROPS: Dict[str, str] = {
    "accept-charset": "acceptCharset",
    "accesskey": "accessKey",
    "allowfullscreen": "allowFullscreen",
    "cellpadding": "cellPadding",
    "cellspacing": "cellSpacing",
    "class": "className",
    "colspan": "colSpan",
    "contenteditable": "contentEditable",
    "crossorigin": "crossOrigin",
    "datetime": "dateTime",
    "enterkeyhint": "enterKeyHint",
    "for": "htmlFor",
    "formaction": "formAction",
    "formenctype": "formEnctype",
    "formmethod": "formMethod",
    "formnovalidate": "formNoValidate",
    "formtarget": "formTarget",
    "frameborder": "frameBorder",
    "http-equiv": "httpEquiv",
    "inputmode": "inputMode",
    "ismap": "isMap",
    "longdesc": "longDesc",
    "maxlength": "maxLength",
    "minlength": "minLength",
    "nomodule": "noModule",
    "novalidate": "noValidate",
    "nowrap": "noWrap",
    "playsinline": "playsInline",
    "readonly": "readOnly",
    "referrerpolicy": "referrerPolicy",
    "rowspan": "rowSpan",
    "tabindex": "tabIndex",
    "usemap": "useMap",
    "valign": "vAlign",
}

# Typed properties per tag; "*" holds the ones every element has.
BOOLEAN_PROPS: Dict[str, FrozenSet[str]] = {
    "*": frozenset({"autofocus", "hidden", "inert"}),
    "audio": frozenset({"autoplay", "controls", "loop", "muted"}),
    "button": frozenset({"disabled", "formNoValidate"}),
    "details": frozenset({"open"}),
    "dialog": frozenset({"open"}),
    "fieldset": frozenset({"disabled"}),
    "form": frozenset({"noValidate"}),
    "iframe": frozenset({"allowFullscreen"}),
    "img": frozenset({"isMap"}),
    "input": frozenset({
        "checked", "disabled", "formNoValidate", "multiple", "readOnly", "required",
    }),
    "link": frozenset({"disabled"}),
    "ol": frozenset({"reversed"}),
    "optgroup": frozenset({"disabled"}),
    "option": frozenset({"disabled", "selected"}),
    "script": frozenset({"async", "defer", "noModule"}),
    "select": frozenset({"disabled", "multiple", "required"}),
    "td": frozenset({"noWrap"}),
    "textarea": frozenset({"disabled", "readOnly", "required"}),
    "th": frozenset({"noWrap"}),
    "track": frozenset({"default"}),
    "video": frozenset({"autoplay", "controls", "loop", "muted", "playsInline"}),
}

NUMERIC_PROPS: Dict[str, FrozenSet[str]] = {
    "*": frozenset({"tabIndex"}),
    "canvas": frozenset({"height", "width"}),
    "col": frozenset({"span"}),
    "colgroup": frozenset({"span"}),
    "img": frozenset({"height", "width"}),
    "input": frozenset({"height", "maxLength", "minLength", "size", "width"}),
    "li": frozenset({"value"}),
    "ol": frozenset({"start"}),
    "select": frozenset({"size"}),
    "td": frozenset({"colSpan", "rowSpan"}),
    "textarea": frozenset({"cols", "maxLength", "minLength", "rows"}),
    "th": frozenset({"colSpan", "rowSpan"}),
    "video": frozenset({"height", "width"}),
}

_NO_PROPS: FrozenSet[str] = frozenset()

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

PropValue = Union[str, int, bool]


def get_prop_name(attr_name: str) -> Optional[str]:
    return ATTR_PROPS.get(attr_name)


def _has_prop(table: Dict[str, FrozenSet[str]], tag: str, prop_name: str) -> bool:
    return prop_name in table["*"] or prop_name in table.get(tag, _NO_PROPS)


def _parse_int(raw: str) -> Optional[int]:
    match = _LEADING_INT.match(raw)
    return int(match.group(1)) if match else None


def get_value(attr_name: str, prop_name: str, element: Tag) -> PropValue:
    """
    Typed value of an attribute, read the way the matching DOM property
    would report it. Falls back to the raw attribute string.
    """
    raw = element.get(attr_name)
    if raw is None:
        raw = ""
    elif isinstance(raw, list):
        # multi-valued attributes (class, rel, ...) when the soup splits them
        raw = " ".join(raw)

    tag = element.name.lower()

    if _has_prop(BOOLEAN_PROPS, tag, prop_name):
        return True
    if prop_name == "draggable":
        return raw.lower() == "true"
    if prop_name == "spellcheck":
        return raw.lower() != "false"
    if prop_name == "translate":
        return raw.lower() != "no"

    if _has_prop(NUMERIC_PROPS, tag, prop_name):
        parsed = _parse_int(raw)
        if parsed is not None:
            return parsed
    return raw


def get_props(element: Tag) -> List[str]:
    """One `name:value,` entry per attribute, in attribute order."""
    props: List[str] = []
    for attr in element.attrs:
        key = get_prop_name(attr) or attr
        value = get_value(attr, key, element)
        name = key if "-" not in key else f'"{key}"'
        props.append(f"{name}:{json.dumps(value, ensure_ascii=False)},")
    return props
