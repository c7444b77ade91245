"""
Responsive size model.

This module holds the fixed table of named breakpoints used to scope
responsive styles, together with the lookup functions over it. The table
is an immutable ordered tuple of `Breakpoint` records; every lookup takes
the table as an optional argument so a different table can be substituted.

Attributes
----------
BREAKPOINTS : tuple of Breakpoint
    The default table, ordered from the narrowest to the widest range.
SIZE_NAMES : tuple of str
    Breakpoint names in ascending order.

Functions
---------
get_breakpoint(name, breakpoints)
    Return the breakpoint record registered under a name or alias.
width_for_breakpoint(name, breakpoints)
    Return the representative width of a breakpoint.
breakpoint_for_width(width, breakpoints)
    Return the name of the narrowest breakpoint containing a width.

Notes
-----
- The order of the table is meaningful: base styles come from the widest
  breakpoint and media queries are emitted from the widest to the
  narrowest one.
- ``xsmall`` is the implicit range below ``small.min``; it never gets a
  media query of its own.

Examples
--------
>>> from blockliquid.sizes import width_for_breakpoint, breakpoint_for_width
>>> width_for_breakpoint("medium")
642
>>> breakpoint_for_width(700)
'medium'
>>> breakpoint_for_width(5000)
'large'
"""

from typing import Sequence

from blockliquid.types import Breakpoint
from blockliquid._utils import convert_from_alias, read_config, validate_string_flag

ERR_MSG_UNSUPPORTED_BREAKPOINT_F = read_config("messages")["errors"][
    "unsupported_breakpoint_f"
]

BREAKPOINTS = (
    Breakpoint(name="xsmall", min=0, max=0, default=0),
    Breakpoint(name="small", min=320, max=640, default=321),
    Breakpoint(name="medium", min=641, max=991, default=642),
    Breakpoint(name="large", min=990, max=1200, default=991),
)

SIZE_NAMES = tuple(bp.name for bp in BREAKPOINTS)


def get_breakpoint(
    name: str, breakpoints: Sequence[Breakpoint] = BREAKPOINTS
) -> Breakpoint:
    """
    Return the breakpoint record registered under `name`.

    Parameters
    ----------
    name : str
        Breakpoint name or one of its aliases (case-insensitive), e.g.
        ``"md"`` or ``"tablet"`` for ``"medium"``.
    breakpoints : Sequence[Breakpoint], optional
        Breakpoint table to search. Defaults to `BREAKPOINTS`.

    Returns
    -------
    Breakpoint

    Raises
    ------
    ValueError
        If no breakpoint of the table matches `name`.
    """
    names = [bp.name for bp in breakpoints]
    canonical = convert_from_alias(name, names, path="breakpoints")
    validate_string_flag(
        canonical,
        names,
        err_msg=ERR_MSG_UNSUPPORTED_BREAKPOINT_F.format(name, names),
    )
    return breakpoints[names.index(canonical)]


def width_for_breakpoint(
    name: str, breakpoints: Sequence[Breakpoint] = BREAKPOINTS
) -> int:
    """
    Return the representative width of a breakpoint.

    Parameters
    ----------
    name : str
        Breakpoint name or alias.
    breakpoints : Sequence[Breakpoint], optional
        Breakpoint table. Defaults to `BREAKPOINTS`.

    Returns
    -------
    int
        The breakpoint's ``default`` width in pixels.

    Raises
    ------
    ValueError
        If `name` is not a known breakpoint.

    Examples
    --------
    >>> width_for_breakpoint("small")
    321
    >>> width_for_breakpoint("desktop")
    991
    """
    return get_breakpoint(name, breakpoints).default


def breakpoint_for_width(
    width: int, breakpoints: Sequence[Breakpoint] = BREAKPOINTS
) -> str:
    """
    Return the name of the narrowest breakpoint whose range reaches `width`.

    Breakpoints are scanned in table order and the first one whose ``max``
    is greater than or equal to `width` wins. Widths above every ``max``
    fall into ``large``, which is treated as unbounded.

    Parameters
    ----------
    width : int
        Viewport width in pixels. Any integer is accepted; non-positive
        widths resolve to ``xsmall``.
    breakpoints : Sequence[Breakpoint], optional
        Breakpoint table in ascending order. Defaults to `BREAKPOINTS`.

    Returns
    -------
    str
        Breakpoint name.

    Examples
    --------
    >>> breakpoint_for_width(-10)
    'xsmall'
    >>> breakpoint_for_width(640)
    'small'
    >>> breakpoint_for_width(641)
    'medium'
    """
    for bp in breakpoints:
        if width <= bp.max:
            return bp.name
    return "large"
