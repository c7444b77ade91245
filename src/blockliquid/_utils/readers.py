"""
Configuration and file reading utilities.

This module provides utilities for reading the JSON resources shipped
with blockliquid (error messages, breakpoint aliases). All functions
include caching so the same files are read from disk only once.

Methods
-------
read_config
    Read and cache JSON configuration files from the package's config directory.

Notes
-----
- All functions use LRU caching to avoid repeated file I/O

Examples
--------
>>> from blockliquid._utils import read_config

>>> read_config("messages")["errors"]["unsupported_breakpoint_f"]
"Unsupported breakpoint '{}'. Choose from: {}."
"""

import json
import pathlib
from functools import lru_cache


@lru_cache(maxsize=2)
def read_config(name) -> dict:
    """
    Read and cache JSON configuration files.

    This function reads JSON files from the package's `config/` directory
    and caches the results to avoid repeated file system access. The cache
    can hold up to 2 different configurations simultaneously.

    Parameters
    ----------
    name : str
        The name of the configuration file (without .json extension).
        File is located at `config/{name}.json` relative to the package root.

    Returns
    -------
    dict
        The parsed JSON content of the configuration file.

    Raises
    ------
    FileNotFoundError
        If the requested configuration file does not exist.

    Examples
    --------
    >>> from blockliquid._utils import read_config

    >>> read_config("aliases")["breakpoints"]["small"]
    ['small', 'sm', 'mobile']

    Notes
    -----
    - The cache size is set to 2 because blockliquid ships exactly two
      configuration files: ``messages`` and ``aliases``.
    """
    path = pathlib.Path(__file__).resolve().parent.parent / f"config/{name}.json"
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)
