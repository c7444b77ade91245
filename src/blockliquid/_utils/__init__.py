"""
Internal utilities for blockliquid.

This module provides low-level utilities for name conversion, validation,
configuration access and logging. These are internal APIs
and may change without notice.

Methods
-------
kebab_case(name)
    Convert a property name to kebab case.
convert_from_alias(arg, default_values, path)
    Convert a string alias into its canonical (default) configuration value.
validate_string_flag(arg, supported_values, err_msg)
    Validate a string flag against a set of supported values.
validate_unique_ids(elements, err_msg)
    Validate that element ids are unique across an element tree.
iter_elements(elements)
    Iterate over an element tree depth-first, pre-order.
collect_duplicate_ids(elements)
    Return ids that occur more than once in an element tree.
temp_log_level(logger, level)
    Temporarily sets the logging level of a logger within a context.
read_config(name)
    Read and cache JSON configuration files.

Notes
-----
- These utilities are for internal use only
- APIs may change between versions without deprecation warnings
"""

from .conversion import convert_from_alias, kebab_case
from .helpers import collect_duplicate_ids, iter_elements, temp_log_level
from .readers import read_config
from .validation import validate_string_flag, validate_unique_ids

__all__ = [
    "kebab_case",
    "convert_from_alias",
    "validate_string_flag",
    "validate_unique_ids",
    "iter_elements",
    "collect_duplicate_ids",
    "temp_log_level",
    "read_config",
]
