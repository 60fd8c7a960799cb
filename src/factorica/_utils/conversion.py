"""
Conversion utilities for factors and auxiliary vectors.

This module provides low-level conversion functions that bring the inputs of
the public reordering functions into a single, predictable representation:
factors become ``pandas.Categorical`` and auxiliary vectors become positional
``pandas.Series``. It also resolves user-facing aliases to canonical names.

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

Notes
-----
- Functions return new objects rather than modifying their input in-place
- Auxiliary vectors are aligned by position, the index of a Series is ignored

Examples
--------
>>> from factorica._utils import ensure_factor

>>> ensure_factor(["b", "a", "b"])
['b', 'a', 'b']
Categories (2, object): ['a', 'b']
"""

from collections import deque
from enum import Enum
from typing import Any, Iterable, Sequence

import numpy as np
import pandas as pd

from factorica.types import ArgumentError
from .readers import read_config

_SEQUENCE_TYPES = (list, tuple, np.ndarray, deque)


def ensure_factor(data: Any, data_name: str = "f") -> pd.Categorical:
    """
    Coerce an input into a ``pandas.Categorical``.

    Already categorical inputs pass through unchanged, everything else from
    the supported set is converted. The set of accepted inputs is closed:
    anything outside it raises ``ArgumentError``.

    Parameters
    ----------
    data : pandas.Categorical, pandas.Series, pandas.DataFrame or Sequence
        Supported inputs:
        - ``pandas.Categorical`` - returned as-is
        - ``pandas.Series`` of ``category`` dtype - its categorical values
        - any other ``pandas.Series`` - converted like a sequence
        - one-column ``pandas.DataFrame`` - its only column
        - 1D list, tuple, ``numpy.ndarray`` or ``collections.deque`` of
          labels (strings, numbers, missing values); levels are the sorted
          unique labels
        - 1D sequence of members of a single ``enum.Enum`` class; levels are
          the member names in definition order, including unused members
    data_name : str, default='f'
        Name of the input parameter, used for error reporting.

    Returns
    -------
    pandas.Categorical
        Categorical representation of `data`.

    Raises
    ------
    ArgumentError
        If the type of `data` is not supported.
        If `data` is multidimensional.
        If `data` mixes enum members of different classes or enum members
        with plain labels.

    Examples
    --------
    >>> import enum
    >>> class Size(enum.Enum):
    ...     SMALL = 1
    ...     LARGE = 2
    ...     MEDIUM = 3
    >>> ensure_factor([Size.LARGE, None, Size.SMALL])
    ['LARGE', NaN, 'SMALL']
    Categories (3, object): ['SMALL', 'LARGE', 'MEDIUM']
    """
    errors = read_config("messages")["errors"]
    if isinstance(data, pd.Categorical):
        return data
    if isinstance(data, pd.DataFrame):
        if data.shape[1] != 1:
            raise ArgumentError(errors["multidimensional_data_f"].format(data_name))
        data = data.iloc[:, 0]
    if isinstance(data, pd.Series):
        if isinstance(data.dtype, pd.CategoricalDtype):
            return data.array
        data = data.to_list()
    if not isinstance(data, _SEQUENCE_TYPES):
        raise ArgumentError(
            errors["unsupported_input_f"].format(type(data).__name__, data_name)
        )
    if isinstance(data, np.ndarray) and data.ndim != 1:
        raise ArgumentError(errors["multidimensional_data_f"].format(data_name))

    values = list(data)
    _validate_flat(values, data_name)
    enum_class = _extract_enum_class(values, data_name)
    if enum_class is not None:
        return pd.Categorical(
            [value.name if isinstance(value, Enum) else None for value in values],
            categories=[member.name for member in enum_class],
        )
    return pd.Categorical(values)


def convert_series(data: Any, data_name: str = "x") -> pd.Series:
    """
    Convert an auxiliary vector into a positional ``pandas.Series``.

    Parameters
    ----------
    data : Sequence, numpy.ndarray, pandas.Series or one-column DataFrame
        Values aligned by position with the observations of a factor.
    data_name : str, default='x'
        Name of the input parameter, used for error reporting.

    Returns
    -------
    pandas.Series
        Series with a fresh ``RangeIndex``. Missing numeric values (``None``)
        are represented as ``NaN``.

    Raises
    ------
    ArgumentError
        If `data` is not a supported 1D container.

    Examples
    --------
    >>> convert_series(pd.Series([3, 1], index=["p", "q"])).index.tolist()
    [0, 1]
    """
    errors = read_config("messages")["errors"]
    if isinstance(data, pd.DataFrame):
        if data.shape[1] != 1:
            raise ArgumentError(errors["multidimensional_data_f"].format(data_name))
        data = data.iloc[:, 0]
    if isinstance(data, pd.Series):
        return data.reset_index(drop=True)
    if isinstance(data, pd.Categorical):
        return pd.Series(data)
    if not isinstance(data, _SEQUENCE_TYPES):
        raise ArgumentError(
            errors["unsupported_input_f"].format(type(data).__name__, data_name)
        )
    if isinstance(data, np.ndarray):
        if data.ndim != 1:
            raise ArgumentError(errors["multidimensional_data_f"].format(data_name))
        return pd.Series(data)
    values = list(data)
    _validate_flat(values, data_name)
    return pd.Series(values, dtype=object if len(values) == 0 else None)


def wrap_like(template: Any, categorical: pd.Categorical) -> pd.Categorical | pd.Series:
    """
    Return `categorical` in the same container type as `template`.

    A ``pandas.Series`` (or one-column DataFrame) template gives a Series
    with the template's index and name; any other template gives the bare
    ``pandas.Categorical``.
    """
    if isinstance(template, pd.DataFrame):
        template = template.iloc[:, 0]
    if isinstance(template, pd.Series):
        return pd.Series(categorical, index=template.index, name=template.name)
    return categorical


def convert_from_alias(arg: str, default_values: Iterable = None, path: str = "summary"):
    """
    Convert a string alias into its canonical (default) configuration value.

    The function maps short or alternative forms of names to the
    corresponding default value, using the alias configuration file.

    Parameters
    ----------
    arg : str
        Input string to convert. The function is case-insensitive.
    default_values : Iterable, optional
        Subset of default values to restrict the search domain.
        If ``None`` (default), lookup is performed across the entire
        alias set for the specified path.
    path : str, default='summary'
        Section name in the alias configuration. Each section defines
        its own mapping between canonical names and their aliases.

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
    >>> from factorica._utils import convert_from_alias
    >>> convert_from_alias("avg")
    'mean'
    >>> convert_from_alias("n", default_values={"count", "sum"})
    'count'
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


def _validate_flat(values: Sequence, data_name: str):
    for value in values:
        if isinstance(value, (*_SEQUENCE_TYPES, dict, set, pd.Series)):
            raise ArgumentError(
                read_config("messages")["errors"]["multidimensional_data_f"].format(
                    data_name
                )
            )


def _extract_enum_class(values: Sequence, data_name: str):
    enum_classes = {type(value) for value in values if isinstance(value, Enum)}
    if not enum_classes:
        return None
    labels = [value for value in values if not isinstance(value, Enum)]
    if len(enum_classes) > 1 or not all(pd.isna(label) for label in labels):
        raise ArgumentError(
            read_config("messages")["errors"]["unsupported_input_f"].format(
                "mixed enum sequence", data_name
            )
        )
    return enum_classes.pop()
