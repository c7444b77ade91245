"""
Input validation utilities.

This module provides small validation functions used at the public
boundary of blockliquid. The compile path itself is total and never
validates content; these checks only guard flags and optional strict
modes.

Methods
-------
validate_string_flag(arg, supported_values, err_msg)
    Validate that a string flag is among a set of supported values.
validate_unique_ids(elements, err_msg)
    Ensure that every element id in a tree occurs only once.

Examples
--------
>>> import blockliquid._utils as utils

>>> utils.validate_string_flag("huge", {"small", "large"},
...                            err_msg="Unsupported breakpoint 'huge'.")
Traceback (most recent call last):
    ...
ValueError: Unsupported breakpoint 'huge'.
"""

from typing import Iterable

from .helpers import collect_duplicate_ids


def validate_string_flag(
    arg: str, supported_values: Iterable[str], err_msg: str
) -> None:
    """
    Validate a string flag against a set of supported values.

    Parameters
    ----------
    arg : str
        The string flag to validate.
    supported_values : Iterable[str]
        An iterable containing all supported flag values.
    err_msg : str
        The error message used in the raised ``ValueError`` if validation fails.

    Raises
    ------
    ValueError
        If `arg` is not found in `supported_values`.

    Examples
    --------
    >>> validate_string_flag("small", {"small", "large"}, "unsupported")
    >>> validate_string_flag("huge", {"small", "large"}, "unsupported")
    Traceback (most recent call last):
        ...
    ValueError: unsupported
    """
    if arg not in supported_values:
        raise ValueError(err_msg)


def validate_unique_ids(elements: Iterable, err_msg: str) -> None:
    """
    Validate that element ids are unique across an element tree.

    Element ids double as CSS selector keys, so a collision makes the
    styles of one element apply to another.

    Parameters
    ----------
    elements : Iterable[Element]
        Top-level elements of the tree; children are checked recursively.
    err_msg : str
        Error message for the raised ``ValueError``. It may contain one
        ``{}`` placeholder, filled with the list of duplicated ids.

    Raises
    ------
    ValueError
        If at least one id occurs more than once.
    """
    duplicates = collect_duplicate_ids(elements)
    if duplicates:
        raise ValueError(err_msg.format(duplicates))
