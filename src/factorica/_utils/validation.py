"""
Argument validation utilities.

This module provides the precondition checks shared by the public reordering
functions. Every check raises ``factorica.ArgumentError`` on failure and
returns ``None`` otherwise, so callers can run all of them before building
any output.

Methods
-------
validate_string_flag(arg, supported_values, err_msg)
    Validate that a string flag is among a set of supported values.
validate_lengths_match(array1, array2, err_msg)
    Check that two sequences have the same number of observations.
validate_ordered_flag(ordered)
    Check that the ``ordered`` argument is ``None``, ``True`` or ``False``.
validate_summary_args(fun, n_data, args, kwargs)
    Check that extra arguments can all be consumed by a summary function.
validate_scalar_summary(value, level)
    Check that a per-group summary is a single scalar.

Examples
--------
>>> import factorica._utils as utils

>>> utils.validate_lengths_match([1, 2, 3], [1, 2],
...                              err_msg="length mismatch")
Traceback (most recent call last):
    ...
factorica.types.ArgumentError: length mismatch
"""

import inspect
from typing import Any, Callable, Iterable, Mapping, Sequence

import numpy as np
import pandas as pd

from factorica.types import ArgumentError
from .readers import read_config


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
        The error message used in the raised ``ArgumentError`` if validation
        fails.

    Raises
    ------
    ArgumentError
        If `arg` is not found in `supported_values`.

    Examples
    --------
    >>> validate_string_flag(
        "D", {"A", "B", "C"}, "Method 'D' not in supported methods")
    Traceback (most recent call last):
        ...
    ArgumentError: Method 'D' not in supported methods
    """
    if arg not in supported_values:
        raise ArgumentError(err_msg)


def validate_lengths_match(array1: Sequence, array2: Sequence, err_msg: str) -> None:
    """
    Validate that two 1D arrays (or sequences) have the same length.

    Parameters
    ----------
    array1 : Sequence
        First input array-like structure.
    array2 : Sequence
        Second input array-like structure.
    err_msg : str
        Error message used in the raised ``ArgumentError`` if validation
        fails.

    Raises
    ------
    ArgumentError
        If the arrays have mismatched lengths.
    """
    if len(array1) != len(array2):
        raise ArgumentError(err_msg)


def validate_ordered_flag(ordered: Any) -> None:
    """
    Validate the ``ordered`` argument of the level reordering functions.

    ``None`` means "inherit from the input", ``True``/``False`` force the
    result to be (un)ordered. NumPy booleans are accepted as well.

    Raises
    ------
    ArgumentError
        For any other value, including strings such as ``"true"``.
    """
    if ordered is not None and not isinstance(ordered, (bool, np.bool_)):
        raise ArgumentError(
            read_config("messages")["errors"]["unsupported_ordered_f"].format(ordered)
        )


def validate_summary_args(
    fun: Callable, n_data: int, args: Sequence = (), kwargs: Mapping = None
) -> None:
    """
    Validate that extra arguments can be consumed by a summary function.

    The summary function is called as ``fun(*data, *args, **kwargs)`` once
    per group, where ``data`` holds `n_data` group slices. This check binds
    such a call against ``inspect.signature(fun)`` up front, so an argument
    the function does not accept fails once, before any group is evaluated.

    Parameters
    ----------
    fun : Callable
        Summary function.
    n_data : int
        Number of data vectors passed first (1 for ``fct_reorder``, 2 for
        ``fct_reorder2``).
    args : Sequence, default=()
        Extra positional arguments.
    kwargs : Mapping, optional
        Extra keyword arguments.

    Raises
    ------
    ArgumentError
        If the call cannot be bound to the signature of `fun`.

    Notes
    -----
    - Callables without an introspectable signature (some C extensions)
      are not checked.
    - Functions accepting ``**kwargs`` consume every keyword argument.

    Examples
    --------
    >>> import numpy as np
    >>> validate_summary_args(np.median, 1, kwargs={"na_rm": True})
    Traceback (most recent call last):
        ...
    ArgumentError: Arguments passed on to the summary function 'median' cannot
    be used by it: 'na_rm'.
    """
    kwargs = {} if kwargs is None else kwargs
    try:
        signature = inspect.signature(fun)
    except (TypeError, ValueError):
        return
    try:
        signature.bind(*([None] * n_data), *args, **kwargs)
    except TypeError as e:
        params = signature.parameters
        if any(p.kind is inspect.Parameter.VAR_KEYWORD for p in params.values()):
            unused = []
        else:
            unused = [
                name
                for name in kwargs
                if name not in params
                or params[name].kind is inspect.Parameter.POSITIONAL_ONLY
            ]
        detail = ", ".join(repr(name) for name in unused) if unused else str(e)
        raise ArgumentError(
            read_config("messages")["errors"]["summary_args_invalid_f"].format(
                getattr(fun, "__name__", repr(fun)), detail
            )
        ) from e


def validate_scalar_summary(value: Any, level: Any) -> None:
    """
    Validate that the summary of one group is a single scalar.

    Raises
    ------
    ArgumentError
        If `value` is a list, tuple, array, Series or any other
        non-scalar object.
    """
    if not pd.api.types.is_scalar(value):
        raise ArgumentError(
            read_config("messages")["errors"]["summary_not_scalar_f"].format(
                level, type(value).__name__
            )
        )
