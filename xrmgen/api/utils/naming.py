"""Identifier helpers for names that come from labels and workflow arguments."""

import keyword
import re

_NON_WORD = re.compile(r"[^0-9A-Za-z_]+")


def to_identifier(text: str, fallback: str = "Value") -> str:
    """
    Turn a display label into a Python identifier.

    Examples:
    - "Not Specified" -> "NotSpecified"
    - "2nd Tier"      -> "_2ndTier"
    - "class"         -> "Class"
    - "None"          -> "None_"
    """
    parts = [p for p in _NON_WORD.split(text or "") if p]
    name = "".join(p[:1].upper() + p[1:] for p in parts) or fallback
    if name[0].isdigit():
        name = f"_{name}"
    if keyword.iskeyword(name):
        name = f"{name}_"
    return name


def to_member_names(labels_and_values):
    """
    Unique enum member names for (label, value) pairs, in order.

    A label that collapses onto an earlier member name gets its value appended.
    """
    names = []
    seen = set()
    for label, value in labels_and_values:
        name = to_identifier(label)
        if name in seen:
            name = f"{name}_{value}".replace("-", "m")
        seen.add(name)
        names.append(name)
    return names
