"""
Reorder factor levels by sorting along other variables.

``fct_reorder`` suits 1D displays where the factor is mapped to position
(boxplots, bar charts): levels are sorted by a summary of one variable.
``fct_reorder2`` suits 2D displays where the factor is mapped to a
non-position aesthetic such as line colour: levels are sorted by a summary
of two variables, by default the `y` value at the largest `x`, so that the
legend order matches the order of the line end-points.

Classes
-------
ReorderMethods
    Collection of static methods:
    - ``fct_reorder`` orders levels by a one-variable summary,
    - ``fct_reorder2`` orders levels by a two-variable summary,
    - ``last2`` / ``first2`` are the two-variable summaries used with
      ``fct_reorder2``.

Examples
--------
>>> import pandas as pd
>>> import factorica

>>> species = ["setosa", "virginica", "versicolor", "setosa", "virginica"]
>>> width = [3.5, 3.0, 2.8, 3.4, 2.9]
>>> factorica.fct_reorder(species, width)
['setosa', 'virginica', 'versicolor', 'setosa', 'virginica']
Categories (3, object): ['versicolor', 'virginica', 'setosa']
>>> factorica.fct_reorder(species, width, desc=True).categories.tolist()
['setosa', 'virginica', 'versicolor']

>>> chicks = pd.DataFrame({
...     "chick": ["a", "a", "b", "b"],
...     "time": [0, 10, 0, 10],
...     "weight": [40, 90, 42, 120],
... })
>>> factorica.fct_reorder2(chicks["chick"], chicks["time"], chicks["weight"])
0    a
1    a
2    b
3    b
Name: chick, dtype: category
Categories (2, object): ['b', 'a']
"""

import logging
from typing import Any, Callable, Sequence

import numpy as np
import pandas as pd

from factorica._utils import (
    VerboseAdapter,
    convert_from_alias,
    convert_series,
    ensure_factor,
    read_config,
    validate_lengths_match,
    validate_string_flag,
    validate_summary_args,
    wrap_like,
)
from factorica.types import ArgumentError, FactorLike
from .primitives import LevelMethods

logger = logging.getLogger(__name__)

SUMMARY_FUNCTIONS = {
    "median": np.median,
    "mean": np.mean,
    "min": np.min,
    "max": np.max,
    "sum": np.sum,
    "count": len,
}


class ReorderMethods:
    """
    Reorder the levels of a factor by summaries of other variables.

    Methods
    -------
    fct_reorder(f, x, fun="median", *args, desc=False, verbose=False, **kwargs)
        Sort levels by ``fun(x)`` computed per level.
    fct_reorder2(f, x, y, fun=None, *args, desc=True, verbose=False, **kwargs)
        Sort levels by ``fun(x, y)`` computed per level, ``last2`` by default.
    last2(x, y)
        The `y` value at the largest `x`.
    first2(x, y)
        The `y` value at the smallest `x`.
    """

    _errors = read_config("messages")["errors"]

    @staticmethod
    def fct_reorder(
        f: FactorLike,
        x: Sequence[Any],
        fun: Callable | str = "median",
        *args,
        desc: bool = False,
        verbose: bool = False,
        **kwargs,
    ) -> pd.Categorical | pd.Series:
        """
        Reorder factor levels by a summary of another variable.

        Parameters
        ----------
        f : FactorLike
            A factor, or an input coercible to one (see ``ensure_factor``).
        x : Sequence
            Values aligned by position with the observations of `f`.
        fun : Callable or str, default="median"
            Summary function taking the group's values (a NumPy array) and
            returning a single value. Can also be one of the names
            {"median", "mean", "min", "max", "sum", "count"} or their
            aliases ("med", "avg", "n", ...).
        *args
            Extra positional arguments passed on to `fun` for every group.
        desc : bool, default=False
            Order levels by descending summary.
        verbose : bool, default=False
            Log empty groups, missing summaries and the resulting level order.
        **kwargs
            Extra keyword arguments passed on to `fun` for every group,
            e.g. ``q=0.9`` for ``numpy.quantile``.

        Returns
        -------
        pandas.Categorical or pandas.Series
            Factor with the same observations and reordered levels. A
            Series input gives a Series with the same index and name.

        Raises
        ------
        ArgumentError
            If `f` and `x` differ in length.
            If `fun` is an unknown name or not callable.
            If `args`/`kwargs` cannot be passed on to `fun`.
            If `fun` returns more than one value for a group.

        Notes
        -----
        - Ties keep the original level order (stable sort).
        - Levels without observations, and levels whose summary is missing,
          are placed after all other levels in their original order,
          whatever the direction.

        Examples
        --------
        >>> import numpy as np
        >>> f = ["a", "b", "b", "c", "c", "c"]
        >>> x = [9, 1, 2, 5, 6, 100]
        >>> fct_reorder(f, x, "mean").categories.tolist()
        ['b', 'a', 'c']
        >>> fct_reorder(f, x, np.quantile, q=0.1).categories.tolist()
        ['b', 'c', 'a']
        """
        factor = ensure_factor(f)
        x_values = convert_series(x, data_name="x")
        validate_lengths_match(
            factor,
            x_values,
            err_msg=ReorderMethods._errors["arrays_lens_mismatch_f"].format(
                "f", len(factor), "x", len(x_values)
            ),
        )
        fun = _resolve_summary(fun)
        validate_summary_args(fun, 1, args, kwargs)

        summary = LevelMethods.group_summary(
            factor, [x_values], fun, args, kwargs, verbose=verbose
        )
        idx = LevelMethods.order_levels(summary, desc=desc)
        result = LevelMethods.lvls_reorder(factor, idx)
        VerboseAdapter(logger, verbose).info(
            "Levels ordered by %s: %s.",
            getattr(fun, "__name__", "summary"),
            result.categories.tolist(),
        )
        return wrap_like(f, result)

    @staticmethod
    def fct_reorder2(
        f: FactorLike,
        x: Sequence[Any],
        y: Sequence[Any],
        fun: Callable = None,
        *args,
        desc: bool = True,
        verbose: bool = False,
        **kwargs,
    ) -> pd.Categorical | pd.Series:
        """
        Reorder factor levels by a summary of two other variables.

        Parameters
        ----------
        f : FactorLike
            A factor, or an input coercible to one.
        x, y : Sequence
            Values aligned by position with the observations of `f`.
        fun : Callable, optional
            Summary function ``fun(x_group, y_group, *args, **kwargs)``
            returning a single value. Defaults to ``last2``.
        *args
            Extra positional arguments passed on to `fun`.
        desc : bool, default=True
            Order levels by descending summary. The default is descending,
            unlike ``fct_reorder``, so that the top-to-bottom order of a
            legend matches the top-to-bottom order of the line end-points.
        verbose : bool, default=False
            Log empty groups, missing summaries and the resulting level order.
        **kwargs
            Extra keyword arguments passed on to `fun`.

        Returns
        -------
        pandas.Categorical or pandas.Series
            Factor with the same observations and reordered levels.

        Raises
        ------
        ArgumentError
            If `f`, `x` and `y` differ in length.
            If `fun` is not callable.
            If `args`/`kwargs` cannot be passed on to `fun`.
            If `fun` returns more than one value for a group.

        Notes
        -----
        Ties and levels without a summary are handled as in ``fct_reorder``.
        """
        factor = ensure_factor(f)
        x_values = convert_series(x, data_name="x")
        y_values = convert_series(y, data_name="y")
        errors = ReorderMethods._errors
        validate_lengths_match(
            factor,
            x_values,
            err_msg=errors["arrays_lens_mismatch_f"].format(
                "f", len(factor), "x", len(x_values)
            ),
        )
        validate_lengths_match(
            x_values,
            y_values,
            err_msg=errors["arrays_lens_mismatch_f"].format(
                "x", len(x_values), "y", len(y_values)
            ),
        )
        if fun is None:
            fun = ReorderMethods.last2
        if not callable(fun):
            raise ArgumentError(
                errors["unsupported_method_f"].format(fun, "any callable")
            )
        validate_summary_args(fun, 2, args, kwargs)

        summary = LevelMethods.group_summary(
            factor, [x_values, y_values], fun, args, kwargs, verbose=verbose
        )
        idx = LevelMethods.order_levels(summary, desc=desc)
        result = LevelMethods.lvls_reorder(factor, idx)
        VerboseAdapter(logger, verbose).info(
            "Levels ordered by %s: %s.",
            getattr(fun, "__name__", "summary"),
            result.categories.tolist(),
        )
        return wrap_like(f, result)

    @staticmethod
    def last2(x: Sequence[Any], y: Sequence[Any]) -> Any:
        """
        Return the value of `y` at the largest `x`.

        Positions are sorted by `x` ascending with missing `x` first, and the
        `y` value at the last position is returned. When several
        observations share the largest `x`, the one appearing last wins.

        Parameters
        ----------
        x, y : Sequence
            Aligned vectors of the same length.

        Returns
        -------
        Any
            A single `y` value, or ``NaN`` if the vectors are empty.

        Raises
        ------
        ArgumentError
            If `x` and `y` differ in length.

        Examples
        --------
        >>> last2([3, 1, 2], ["c", "a", "b"])
        'c'
        """
        x_values, y_values = _align_pair(x, y)
        if len(y_values) == 0:
            return np.nan
        order = x_values.sort_values(kind="stable", na_position="first").index
        return y_values.iloc[order[-1]]

    @staticmethod
    def first2(x: Sequence[Any], y: Sequence[Any]) -> Any:
        """
        Return the value of `y` at the smallest `x`.

        Positions are sorted by `x` ascending with missing `x` last, and the
        `y` value at the first position is returned.

        Examples
        --------
        >>> first2([3, 1, 2], ["c", "a", "b"])
        'a'
        """
        x_values, y_values = _align_pair(x, y)
        if len(y_values) == 0:
            return np.nan
        order = x_values.sort_values(kind="stable", na_position="last").index
        return y_values.iloc[order[0]]


def _resolve_summary(fun: Callable | str) -> Callable:
    errors = read_config("messages")["errors"]
    if isinstance(fun, str):
        name = convert_from_alias(fun, SUMMARY_FUNCTIONS, path="summary")
        validate_string_flag(
            name,
            SUMMARY_FUNCTIONS,
            err_msg=errors["unsupported_method_f"].format(
                fun, list(SUMMARY_FUNCTIONS)
            ),
        )
        return SUMMARY_FUNCTIONS[name]
    if not callable(fun):
        raise ArgumentError(
            errors["unsupported_method_f"].format(fun, list(SUMMARY_FUNCTIONS))
        )
    return fun


def _align_pair(x: Sequence[Any], y: Sequence[Any]) -> tuple[pd.Series, pd.Series]:
    x_values = convert_series(x, data_name="x")
    y_values = convert_series(y, data_name="y")
    validate_lengths_match(
        x_values,
        y_values,
        err_msg=read_config("messages")["errors"]["arrays_lens_mismatch_f"].format(
            "x", len(x_values), "y", len(y_values)
        ),
    )
    return x_values, y_values
