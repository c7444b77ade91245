"""
Conversion utilities for names and aliases.

This module provides low-level conversion functions used by the compiler:
turning camel-case style property names into CSS property names and
resolving user-facing aliases into canonical names.

Methods
-------
kebab_case(name)
    Convert a property name in camel, snake or space case to kebab case.
convert_from_alias(arg, default_values, path)
    Convert a string alias into its canonical (default) configuration value.

Examples
--------
>>> from blockliquid._utils import kebab_case, convert_from_alias
>>> kebab_case("backgroundColor")
'background-color'
>>> convert_from_alias("tablet", path="breakpoints")
'medium'
"""

import re
from typing import Iterable

from .readers import read_config

# Word pattern for splitting identifiers: acronyms, capitalized words,
# lowercase runs and digit runs.
_WORD_PATTERN = re.compile(r"[A-Z]{2,}(?=[A-Z][a-z]|[0-9]|\b|_)|[A-Z]?[a-z]+|[A-Z]+|[0-9]+")


def kebab_case(name: str) -> str:
    """
    Convert a property name to kebab case.

    Words are detected at case boundaries and at any non-alphanumeric
    separator (``_``, ``-``, spaces), lowercased and joined with ``-``.
    Leading and trailing separators are dropped.

    Parameters
    ----------
    name : str
        Property name, e.g. ``"backgroundColor"`` or ``"border_top"``.

    Returns
    -------
    str
        Kebab-case name.

    Examples
    --------
    >>> kebab_case("backgroundColor")
    'background-color'
    >>> kebab_case("WebkitTransform")
    'webkit-transform'
    >>> kebab_case("z_index")
    'z-index'
    >>> kebab_case("color")
    'color'
    """
    return "-".join(word.lower() for word in _WORD_PATTERN.findall(name))


def convert_from_alias(arg: str, default_values: Iterable = None, path: str = "global"):
    """
    Convert a string alias into its canonical (default) configuration value.

    Lookup is case-insensitive and uses the alias configuration file
    (``config/aliases.json``).

    Parameters
    ----------
    arg : str
        Input string to convert.
    default_values : Iterable, optional
        Subset of default values to restrict the search domain.
        If ``None`` (default), lookup is performed across the entire
        alias set for the specified path.
    path : str, default='global'
        Section name in the alias configuration, e.g. ``"breakpoints"``.

    Returns
    -------
    str
        Canonical name corresponding to the alias.
        If no matching alias is found, returns the input argument unchanged.

    Raises
    ------
    KeyError
        If the specified alias section ``path`` does not exist in the configuration.

    Examples
    --------
    >>> convert_from_alias("LG", path="breakpoints")
    'large'
    >>> convert_from_alias("huge", path="breakpoints")
    'huge'
    """
    alias_dict = read_config("aliases")

    if path not in alias_dict:
        raise KeyError(f"Aliases path '{path}' not found in configuration.")

    arg_lower = arg.lower()
    if default_values is None:
        for default_value, aliases in alias_dict[path].items():
            if arg_lower in aliases:
                return default_value
    else:
        for default_value in default_values:
            if default_value in alias_dict[path]:
                if arg_lower in alias_dict[path][default_value]:
                    return default_value
    return arg
