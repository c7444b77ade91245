"""
Recursive serialization of block trees.

This module renders one element and its subtree to markup. The walk is
exposed in two shapes:

- `iter_fragments` yields typed fragments (markup pieces and style bodies)
  in document order. The document compiler consumes it directly, so style
  bodies are collected without re-scanning rendered text.
- `block_to_liquid` joins those fragments into a single string where each
  element's styles are embedded as an inline ``<style>`` block right
  before its opening tag.

Functions
---------
iter_fragments(element, email_mode, extract_css)
    Walk an element tree depth-first, pre-order, yielding fragments.
block_to_liquid(element, email_mode, extract_css)
    Render an element tree to a markup string with inline styles.
element_attributes(element)
    Return the attribute mapping of an element's opening tag.
"""

from typing import Iterator, NamedTuple

from blockliquid.types import Element, to_element

from .styles import BLOCK_CLASS, block_css
from .synthesizers import map_to_attributes

DEFAULT_TAG = "div"

STYLE = "style"
MARKUP = "markup"


class Fragment(NamedTuple):
    """Piece of serialized output: ``kind`` is ``"style"`` or ``"markup"``."""

    kind: str
    text: str


def element_attributes(element: Element) -> dict:
    """
    Return the attribute mapping of an element's opening tag.

    User properties come first in their own order, followed by
    ``builder-id`` and the merged ``class``. A user ``class`` or
    ``builder-id`` property keeps its position but takes the generated
    value.

    Parameters
    ----------
    element : Element

    Returns
    -------
    dict
        Attribute names to values.

    Examples
    --------
    >>> from blockliquid.types import Element
    >>> element_attributes(Element(id="b1", properties={"data-x": "1"},
    ...                            class_name="foo"))
    {'data-x': '1', 'builder-id': 'b1', 'class': 'builder-block b1 foo'}
    """
    class_value = f"{BLOCK_CLASS} {element.id}"
    if element.class_name:
        class_value += f" {element.class_name}"
    return {
        **(element.properties or {}),
        "builder-id": element.id,
        "class": class_value,
    }


def iter_fragments(
    element: Element, email_mode: bool = False, extract_css: bool = False
) -> Iterator[Fragment]:
    """
    Walk an element tree depth-first, pre-order, yielding fragments.

    For every element, a ``style`` fragment holding its CSS (only when the
    CSS is not blank) comes first, then the opening tag, the fragments of
    each child in order and the closing tag.

    Parameters
    ----------
    element : Element
        Root of the subtree to serialize.
    email_mode : bool, default=False
        Forwarded to `block_css` for every element.
    extract_css : bool, default=False
        Output mode of the enclosing document, passed unchanged to every
        child. Style fragments are yielded either way; the document
        compiler decides where they end up.

    Yields
    ------
    Fragment
    """
    css = block_css(element, email_mode=email_mode)
    if css.strip():
        yield Fragment(STYLE, css)

    tag = element.tag_name or DEFAULT_TAG
    yield Fragment(MARKUP, f"<{tag}{map_to_attributes(element_attributes(element))}>")
    for child in element.children or []:
        yield from iter_fragments(
            child, email_mode=email_mode, extract_css=extract_css
        )
    yield Fragment(MARKUP, f"</{tag}>")


def block_to_liquid(
    element, email_mode: bool = False, extract_css: bool = False
) -> str:
    """
    Render an element and its subtree to markup.

    Parameters
    ----------
    element : Element or Mapping
        Element record or content-schema mapping of the subtree root.
    email_mode : bool, default=False
        Emit email-client-safe styles (see `block_css`).
    extract_css : bool, default=False
        Output mode of the enclosing document, passed unchanged down the
        tree. Inline style blocks are always embedded at this level and
        extracted by the document compiler.

    Returns
    -------
    str
        Markup where every element with non-blank CSS is preceded by its
        own ``<style>...</style>`` block.

    Raises
    ------
    TypeError
        If `element` is neither an `Element` nor a mapping.

    Examples
    --------
    >>> block_to_liquid({"id": "b1", "tagName": "span"}, email_mode=True)
    '<span builder-id="b1" class="builder-block b1"></span>'
    >>> block_to_liquid({"id": "b1"})
    '<style>.builder-block.b1 {}</style><div builder-id="b1" class="builder-block b1"></div>'
    """
    parts = []
    fragments = iter_fragments(
        to_element(element), email_mode=email_mode, extract_css=extract_css
    )
    for fragment in fragments:
        if fragment.kind == STYLE:
            parts.append(f"<style>{fragment.text}</style>")
        else:
            parts.append(fragment.text)
    return "".join(parts)
