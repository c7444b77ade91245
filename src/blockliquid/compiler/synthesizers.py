"""
Leaf formatters turning mappings into attribute and declaration strings.

Functions
---------
map_to_attributes(mapping)
    Serialize an attribute mapping into `` key="value"`` pairs.
map_to_css(mapping, spaces, important)
    Serialize a style mapping into newline-separated CSS declarations.

Notes
-----
- Neither function escapes its input. Attribute values containing a double
  quote produce broken markup; keeping untrusted data out of them is the
  caller's responsibility.
"""

from typing import Mapping, Optional

from blockliquid._utils import kebab_case


def map_to_attributes(mapping: Mapping[str, Optional[str]]) -> str:
    """
    Serialize an attribute mapping.

    Parameters
    ----------
    mapping : Mapping[str, str or None]
        Attribute names and values, emitted in insertion order.

    Returns
    -------
    str
        ``""`` for an empty mapping, otherwise one `` key="value"`` pair per
        entry, each preceded by a single space. ``None`` values are emitted
        as the literal ``null``.

    Examples
    --------
    >>> map_to_attributes({"href": "/cart", "builder-id": "b1"})
    ' href="/cart" builder-id="b1"'
    >>> map_to_attributes({})
    ''
    """
    attributes = ""
    for key, value in mapping.items():
        attributes += f' {key}="{"null" if value is None else value}"'
    return attributes


def map_to_css(
    mapping: Mapping[str, Optional[str]], spaces: int = 2, important: bool = False
) -> str:
    """
    Serialize a style mapping into CSS declarations.

    Parameters
    ----------
    mapping : Mapping[str, str or None]
        Style property names (camel case allowed) and values.
    spaces : int, default=2
        Indentation of every declaration.
    important : bool, default=False
        Append ``!important`` to every emitted declaration.

    Returns
    -------
    str
        One ``"\\n<indent><property>: <value>;"`` per entry with a
        non-blank value. Empty, whitespace-only and ``None`` values are
        skipped, so an empty mapping yields ``""``.

    Examples
    --------
    >>> map_to_css({"backgroundColor": "red", "margin": " "})
    '\\n  background-color: red;'
    >>> map_to_css({"color": "red"}, spaces=4, important=True)
    '\\n    color: red !important;'
    """
    css = ""
    for key, value in mapping.items():
        if value is None or not str(value).strip():
            continue
        suffix = " !important" if important else ""
        css += f"\n{' ' * spaces}{kebab_case(key)}: {value}{suffix};"
    return css
