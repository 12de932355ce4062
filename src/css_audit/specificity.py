"""Selector specificity approximation."""

import re

PSEUDO_ELEMENT = re.compile(r"::[a-zA-Z-]+")
ID = re.compile(r"#[a-zA-Z_-][\w-]*")
ATTRIBUTE = re.compile(r"\[[^\]]*\]")
CLASS = re.compile(r"\.[a-zA-Z_-][\w-]*")
PSEUDO_CLASS = re.compile(r":[a-zA-Z-]+")
ELEMENT = re.compile(r"[a-zA-Z][\w-]*")


def specificity_of(selector: str) -> tuple[int, int, int]:
    """Weight a single (non-grouped) selector as (ids, classes, elements).

    Attribute selectors and pseudo-classes share the class bucket;
    pseudo-elements count as elements. Combinators and ``*`` count nothing.

    Examples:
        >>> specificity_of("#a#b.c")
        (2, 1, 0)
        >>> specificity_of("div.class")
        (0, 1, 1)
    """
    s = PSEUDO_ELEMENT.sub(" E", selector)

    ids = len(ID.findall(s))
    s = ID.sub("", s)

    classes = (
        len(CLASS.findall(s))
        + len(ATTRIBUTE.findall(s))
        + len(PSEUDO_CLASS.findall(s))
    )
    s = PSEUDO_CLASS.sub("", ATTRIBUTE.sub("", CLASS.sub("", s)))

    elements = len(ELEMENT.findall(s))
    return ids, classes, elements
