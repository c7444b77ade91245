"""
General-purpose utilities and temporary helpers.

This module contains miscellaneous helpers that don't yet have a dedicated
home in the package: logging utilities and small tree-walking helpers used
by the compiler for diagnostics.

Methods
-------
temp_log_level(logger, level)
    Temporarily sets the logging level of a logger within a context.
iter_elements(elements)
    Iterate over an element tree depth-first, pre-order.
collect_duplicate_ids(elements)
    Return ids that occur more than once in an element tree.

Examples
--------
>>> from blockliquid.types import Element
>>> from blockliquid._utils import collect_duplicate_ids
>>> tree = [Element(id="a", children=[Element(id="a")]), Element(id="b")]
>>> collect_duplicate_ids(tree)
['a']
"""

from contextlib import contextmanager
from typing import Iterable, Iterator


@contextmanager
def temp_log_level(logger, level):
    """
    Temporarily sets the logging level of a logger within a context.

    Parameters
    ----------
    logger : logging.Logger
        The logger whose level will be temporarily changed.
    level : int
        The logging level to set (e.g., logging.INFO, logging.DEBUG).

    Usage
    -----
    >>> import logging
    >>> logger = logging.getLogger("my_logger")
    >>> with temp_log_level(logger, logging.INFO):
    ...     logger.info("This will be shown if logger level was lower before")
    ...
    # After the context, logger level is restored to its original value.

    Notes
    -----
    After exiting the context, the original log level is always restored,
    even if an exception occurs.
    """
    old_level = logger.level
    logger.setLevel(level)
    try:
        yield
    finally:
        logger.setLevel(old_level)


def iter_elements(elements: Iterable) -> Iterator:
    """
    Iterate over an element tree depth-first, pre-order.

    Parameters
    ----------
    elements : Iterable[Element]
        Top-level elements of the tree.

    Yields
    ------
    Element
        Every element of the tree, parents before their children.
    """
    stack = list(reversed(list(elements)))
    while stack:
        element = stack.pop()
        yield element
        stack.extend(reversed(element.children))


def collect_duplicate_ids(elements: Iterable) -> list[str]:
    """
    Return element ids that occur more than once in an element tree.

    Ids are reported once each, in the order their second occurrence is
    met during a pre-order walk.

    Parameters
    ----------
    elements : Iterable[Element]
        Top-level elements of the tree.

    Returns
    -------
    list[str]
        Duplicated ids; empty if all ids are unique.
    """
    seen = set()
    duplicates = {}
    for element in iter_elements(elements):
        if element.id in seen:
            duplicates[element.id] = None
        seen.add(element.id)
    return list(duplicates)
