"""
Level-set primitives shared by the reordering functions.

This module holds the low-level building blocks every reorderer goes through:
permuting the level set of a factor, rebuilding a factor against an explicit
level list, evaluating a summary function per level, counting observations
per level and turning a per-level key into a stable level order.

Classes
-------
LevelMethods
    Collection of static methods:
    - ``lvls_reorder`` permutes levels, observations keep their labels,
    - ``refactor`` rebuilds a factor against a new explicit level list,
    - ``group_summary`` evaluates a summary function on each level's group,
    - ``count_levels`` counts observations per level,
    - ``order_levels`` stably orders levels by a per-level key.

Examples
--------
>>> import pandas as pd
>>> from factorica.levels import lvls_reorder, refactor

>>> f = pd.Categorical(["a", "b", "c", "a"])
>>> lvls_reorder(f, [2, 0, 1])
['a', 'b', 'c', 'a']
Categories (3, object): ['c', 'a', 'b']
>>> refactor(f, ["c", "a"])
['a', NaN, 'c', 'a']
Categories (2, object): ['c', 'a']
"""

import logging
from typing import Any, Callable, Mapping, Sequence

import numpy as np
import pandas as pd

from factorica._utils import (
    VerboseAdapter,
    convert_series,
    ensure_factor,
    read_config,
    validate_ordered_flag,
    validate_scalar_summary,
    wrap_like,
)
from factorica.types import ArgumentError, FactorLike, OrderedFlag

logger = logging.getLogger(__name__)


class LevelMethods:
    """
    Static primitives operating on the level set of a factor.

    All methods are pure: the input factor is never modified and a new
    object is returned.

    Methods
    -------
    lvls_reorder(f, idx, ordered=None)
        Reorder levels by their current positions listed in new order.
    refactor(f, new_levels, ordered=None)
        Rebuild a factor against an explicit list of levels.
    group_summary(f, values, fun, args=(), kwargs=None, verbose=False)
        Apply a summary function to every level's group of values.
    count_levels(f)
        Count observations per level.
    order_levels(keys, desc=False)
        Stable positional order of levels by a per-level key.
    """

    _errors = read_config("messages")["errors"]
    _warns = read_config("messages")["warns"]

    @staticmethod
    def lvls_reorder(
        f: FactorLike, idx: Sequence[int], ordered: OrderedFlag = None
    ) -> pd.Categorical | pd.Series:
        """
        Reorder the levels of a factor by a permutation of level positions.

        Parameters
        ----------
        f : FactorLike
            Factor (or input coercible to one, see ``ensure_factor``).
        idx : Sequence[int]
            Current 0-based positions of the levels, listed in the new order.
            Must contain every position in ``range(n_levels)`` exactly once.
        ordered : bool, optional
            Whether the result is an ordered categorical. ``None`` (default)
            keeps the ``ordered`` attribute of `f`.

        Returns
        -------
        pandas.Categorical or pandas.Series
            New factor with permuted levels. Every observation keeps its
            label. A Series input gives a Series with the same index and name.

        Raises
        ------
        ArgumentError
            If `idx` is not a permutation of the level positions.
            If `ordered` is not ``None``, ``True`` or ``False``.

        Examples
        --------
        >>> lvls_reorder(["x", "y", "z"], [1, 2, 0], ordered=True)
        ['x', 'y', 'z']
        Categories (3, object): ['y' < 'z' < 'x']
        """
        factor = ensure_factor(f)
        validate_ordered_flag(ordered)
        idx = list(idx)
        n_levels = len(factor.categories)
        positions = [int(i) for i in idx if _is_position(i)]
        if len(positions) != len(idx) or sorted(positions) != list(range(n_levels)):
            raise ArgumentError(
                LevelMethods._errors["invalid_permutation_f"].format(
                    "f", n_levels, idx
                )
            )

        ordered = factor.ordered if ordered is None else bool(ordered)
        new_levels = factor.categories[np.asarray(positions, dtype=np.intp)]
        result = factor.reorder_categories(new_levels, ordered=ordered)
        logger.debug("Levels reordered to %s.", list(new_levels))
        return wrap_like(f, result)

    @staticmethod
    def refactor(
        f: FactorLike, new_levels: Sequence[Any], ordered: OrderedFlag = None
    ) -> pd.Categorical | pd.Series:
        """
        Rebuild a factor against an explicit list of levels.

        Unlike ``lvls_reorder``, `new_levels` need not be a permutation of the
        current levels: labels missing from `new_levels` turn the matching
        observations into missing values, and labels not present in `f`
        become unused levels.

        Parameters
        ----------
        f : FactorLike
            Factor (or input coercible to one).
        new_levels : Sequence
            The new level set, in order. Labels are matched by equality.
        ordered : bool, optional
            ``None`` (default) keeps the ``ordered`` attribute of `f`.

        Returns
        -------
        pandas.Categorical or pandas.Series
            Rebuilt factor, in the container type of `f`.

        Raises
        ------
        ArgumentError
            If `new_levels` contains duplicates.
            If `ordered` is not ``None``, ``True`` or ``False``.

        Examples
        --------
        >>> refactor(["1", "10", "x"], ["1", "10"])
        ['1', '10', NaN]
        Categories (2, object): ['1', '10']
        """
        factor = ensure_factor(f)
        validate_ordered_flag(ordered)
        levels = pd.Index(list(new_levels))
        if levels.has_duplicates:
            raise ArgumentError(
                LevelMethods._errors["duplicate_levels_f"].format(
                    levels[levels.duplicated()].unique().tolist()
                )
            )

        ordered = factor.ordered if ordered is None else bool(ordered)
        result = factor.set_categories(levels, ordered=ordered)
        n_dropped = int(((result.codes == -1) & (factor.codes != -1)).sum())
        if n_dropped:
            logger.info("%d observations fell outside the new levels.", n_dropped)
        logger.debug("Factor rebuilt with levels %s.", levels.tolist())
        return wrap_like(f, result)

    @staticmethod
    def group_summary(
        f: FactorLike,
        values: Sequence[Sequence[Any]],
        fun: Callable,
        args: Sequence = (),
        kwargs: Mapping = None,
        verbose: bool = False,
    ) -> pd.Series:
        """
        Apply a summary function to each level's group of values.

        For every level of `f`, the positions of its observations select a
        slice of each vector in `values`; `fun` is called as
        ``fun(*slices, *args, **kwargs)``.

        Parameters
        ----------
        f : FactorLike
            Grouping factor. Missing observations belong to no group.
        values : Sequence of array-like
            Vectors aligned by position with `f`. Slices are passed to
            `fun` as NumPy arrays.
        fun : Callable
            Summary function returning a single scalar per group.
        args : Sequence, default=()
            Extra positional arguments for `fun`.
        kwargs : Mapping, optional
            Extra keyword arguments for `fun`.
        verbose : bool, default=False
            Log empty groups and missing summaries whatever the logger level.

        Returns
        -------
        pandas.Series
            One summary per level, indexed by the levels in their current
            order. Levels without observations get ``NaN`` and `fun` is not
            called for them.

        Raises
        ------
        ArgumentError
            If `fun` returns a non-scalar result for any group.
        """
        factor = ensure_factor(f)
        kwargs = {} if kwargs is None else kwargs
        arrays = [
            convert_series(vector, data_name=f"values[{i}]").to_numpy()
            for i, vector in enumerate(values)
        ]
        log = VerboseAdapter(logger, verbose)
        codes = factor.codes
        counts = np.bincount(codes[codes >= 0], minlength=len(factor.categories))
        # missing observations (code -1) sort first and are skipped
        order = np.argsort(codes, kind="stable")[np.count_nonzero(codes < 0):]
        groups = np.split(order, np.cumsum(counts)[:-1])

        summary = []
        for level, positions in zip(factor.categories, groups):
            if len(positions) == 0:
                log.info(LevelMethods._warns["empty_group_f"].format(level))
                summary.append(np.nan)
                continue
            result = fun(*(array[positions] for array in arrays), *args, **kwargs)
            if isinstance(result, np.ndarray) and result.ndim == 0:
                result = result.item()
            validate_scalar_summary(result, level)
            if pd.isna(result):
                log.info(LevelMethods._warns["missing_summary_f"].format(level))
            summary.append(result)
        return pd.Series(summary, index=factor.categories, dtype=object).infer_objects()

    @staticmethod
    def count_levels(f: FactorLike) -> pd.Series:
        """
        Count observations per level.

        Returns
        -------
        pandas.Series
            Integer counts indexed by the levels in their current order.
            Unused levels count 0, missing observations are not counted.

        Examples
        --------
        >>> count_levels(pd.Categorical(["b", "a", "b"], categories=["b", "a", "c"]))
        b    2
        a    1
        c    0
        dtype: int64
        """
        factor = ensure_factor(f)
        codes = factor.codes
        counts = np.bincount(codes[codes >= 0], minlength=len(factor.categories))
        return pd.Series(counts, index=factor.categories, dtype="int64")

    @staticmethod
    def order_levels(keys: pd.Series, desc: bool = False) -> list[int]:
        """
        Return level positions stably ordered by a per-level key.

        Parameters
        ----------
        keys : pandas.Series
            One key per level, in current level order.
        desc : bool, default=False
            Sort in descending order.

        Returns
        -------
        list of int
            Current level positions in their new order, ready for
            ``lvls_reorder``.

        Notes
        -----
        - Ties keep the current level order in both directions.
        - Missing keys are placed last in both directions, in current order.
        """
        positional = keys.reset_index(drop=True)
        ordered_keys = positional.sort_values(
            ascending=not desc, kind="stable", na_position="last"
        )
        return ordered_keys.index.to_list()


def _is_position(value: Any) -> bool:
    """Whether `value` is an integer level position (integral floats allowed)."""
    if isinstance(value, (bool, np.bool_)):
        return False
    if isinstance(value, (int, np.integer)):
        return True
    return isinstance(value, (float, np.floating)) and float(value).is_integer()
