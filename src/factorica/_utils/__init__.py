"""
Internal utilities for the factorica package.

This module provides low-level utilities for input conversion, argument
validation, configuration reading and logging. These are internal APIs and
may change without notice.

Methods
-------
ensure_factor(data, data_name)
    Coerce an input into a ``pandas.Categorical``.
convert_series(data, data_name)
    Convert an auxiliary vector into a positional ``pandas.Series``.
wrap_like(template, categorical)
    Return a categorical result in the same container as the caller's input.
convert_from_alias(arg, default_values, path)
    Convert a string alias into its canonical (default) configuration value.
validate_string_flag(arg, supported_values, err_msg)
    Validate a string flag against a set of supported values.
validate_lengths_match(array1, array2, err_msg)
    Validate that two sequences have the same length.
validate_ordered_flag(ordered)
    Validate the ``ordered`` argument.
validate_summary_args(fun, n_data, args, kwargs)
    Validate that extra arguments can be consumed by a summary function.
validate_scalar_summary(value, level)
    Validate that a per-group summary is a single scalar.
VerboseAdapter(logger, verbose)
    Logger adapter emitting records for one call regardless of logger levels.
read_config(name)
    Read and cache JSON configuration files.

Notes
-----
- These utilities are for internal use only
- Use the public API of :mod:`factorica` for stable functionality
"""

from .conversion import convert_from_alias, convert_series, ensure_factor, wrap_like
from .helpers import VerboseAdapter
from .readers import read_config
from .validation import (
    validate_lengths_match,
    validate_ordered_flag,
    validate_scalar_summary,
    validate_string_flag,
    validate_summary_args,
)

__all__ = [
    "ensure_factor",
    "convert_series",
    "wrap_like",
    "convert_from_alias",
    "validate_string_flag",
    "validate_lengths_match",
    "validate_ordered_flag",
    "validate_summary_args",
    "validate_scalar_summary",
    "VerboseAdapter",
    "read_config",
]
