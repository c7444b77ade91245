"""
Per-element style extraction.

This module computes the CSS of a single element from its responsive
styles: one base rule built from the ``large`` breakpoint and one
``max-width`` media query per narrower breakpoint that declares anything.

Functions
---------
block_css(element, email_mode, breakpoints)
    Return the CSS string of one element.

Notes
-----
- Media queries only ever use ``max-width``: the base rule describes the
  widest viewport and each query narrows it.
- ``xsmall`` never gets a query of its own.
- A narrower breakpoint can override declarations of a wider one but cannot
  unset them, so a declaration dropped at a smaller size keeps its wider
  value. Templates built on top of this output rely on that inheritance.
- In email mode no base rule is emitted and queries target the
  ``<id>-subject`` class with ``!important`` declarations, which email
  clients honour more reliably than compound selectors.
"""

from typing import Sequence

from blockliquid.sizes import BREAKPOINTS
from blockliquid.types import Breakpoint, Element

from .synthesizers import map_to_css

BLOCK_CLASS = "builder-block"
EMAIL_SUBJECT_SUFFIX = "-subject"


def block_css(
    element: Element,
    email_mode: bool = False,
    breakpoints: Sequence[Breakpoint] = BREAKPOINTS,
) -> str:
    """
    Return the CSS of one element.

    Parameters
    ----------
    element : Element
        Element whose ``responsive_styles`` are serialized. Children are
        not visited.
    email_mode : bool, default=False
        Emit email-client-safe CSS: no base rule, ``.<id>-subject``
        selectors and ``!important`` declarations.
    breakpoints : Sequence[Breakpoint], optional
        Breakpoint table in ascending order. The last entry provides the
        base rule, the first one is never queried.

    Returns
    -------
    str
        The base rule (normal mode only) followed by the media queries,
        widest first. May be ``""`` in email mode.

    Examples
    --------
    >>> from blockliquid.types import Element
    >>> el = Element(id="b1", responsive_styles={
    ...     "large": {"color": "red"}, "small": {"color": "blue"}})
    >>> print(block_css(el))
    .builder-block.b1 {
      color: red;}
    @media only screen and (max-width: 640px) {
    .builder-block.b1 {
        color: blue; } }
    """
    styles = element.responsive_styles or {}
    widest, narrowest = breakpoints[-1].name, breakpoints[0].name

    css = ""
    if not email_mode:
        css = f".{BLOCK_CLASS}.{element.id} {{{map_to_css(styles.get(widest) or {})}}}"

    if email_mode:
        selector = f".{element.id}{EMAIL_SUBJECT_SUFFIX}"
    else:
        selector = f".{BLOCK_CLASS}.{element.id}"

    for bp in reversed(breakpoints):
        if bp.name in (widest, narrowest):
            continue
        size_styles = styles.get(bp.name)
        if not size_styles:
            continue
        css += (
            f"\n@media only screen and (max-width: {bp.max}px) {{ \n"
            f"{selector} {{{map_to_css(size_styles, 4, email_mode)} }} }}"
        )
    return css
