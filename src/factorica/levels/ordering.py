"""
Reorder factor levels by first appearance, frequency, or numeric value.

Classes
-------
OrderMethods
    Collection of static methods:
    - ``fct_inorder`` orders levels by first appearance,
    - ``fct_infreq`` orders levels by decreasing frequency,
    - ``fct_inseq`` orders levels by the numeric value of their labels.

Examples
--------
>>> import factorica

>>> f = ["b", "b", "a", "c", "c", "c"]
>>> factorica.fct_inorder(f).categories.tolist()
['b', 'a', 'c']
>>> factorica.fct_infreq(f).categories.tolist()
['c', 'b', 'a']
>>> factorica.fct_inorder(f, ordered=True)
['b', 'b', 'a', 'c', 'c', 'c']
Categories (3, object): ['b' < 'a' < 'c']

>>> factorica.fct_inseq(["3", "10", "1", "2"]).categories.tolist()
['1', '2', '3', '10']
"""

import logging

import pandas as pd

from factorica._utils import (
    ensure_factor,
    read_config,
    validate_ordered_flag,
    wrap_like,
)
from factorica.types import ArgumentError, FactorLike, OrderedFlag
from .primitives import LevelMethods

logger = logging.getLogger(__name__)


class OrderMethods:
    """
    Reorder the levels of a factor using only the factor itself.

    Methods
    -------
    fct_inorder(f, ordered=None)
        Levels in order of first appearance.
    fct_infreq(f, ordered=None)
        Levels by decreasing number of observations.
    fct_inseq(f, ordered=None)
        Levels by increasing numeric value of their labels.
    """

    _errors = read_config("messages")["errors"]
    _warns = read_config("messages")["warns"]

    @staticmethod
    def fct_inorder(
        f: FactorLike, ordered: OrderedFlag = None
    ) -> pd.Categorical | pd.Series:
        """
        Reorder factor levels by first appearance.

        Parameters
        ----------
        f : FactorLike
            A factor, or an input coercible to one.
        ordered : bool, optional
            Whether the result is an ordered categorical. ``None`` (default)
            inherits the ``ordered`` attribute of `f`.

        Returns
        -------
        pandas.Categorical or pandas.Series
            Factor whose levels follow the position of the first non-missing
            observation of each level.

        Raises
        ------
        ArgumentError
            If `ordered` is not ``None``, ``True`` or ``False``.

        Notes
        -----
        Levels that are never observed keep their original relative order
        after all observed levels. When every observation is missing the
        original level order is returned unchanged.
        """
        factor = ensure_factor(f)
        validate_ordered_flag(ordered)

        codes = factor.codes
        observed = pd.unique(codes[codes >= 0]).tolist()
        if not observed:
            logger.info("All observations are missing; level order is kept.")
        seen = set(observed)
        unseen = [code for code in range(len(factor.categories)) if code not in seen]
        result = LevelMethods.lvls_reorder(factor, observed + unseen, ordered=ordered)
        return wrap_like(f, result)

    @staticmethod
    def fct_infreq(
        f: FactorLike, ordered: OrderedFlag = None
    ) -> pd.Categorical | pd.Series:
        """
        Reorder factor levels by decreasing frequency.

        Parameters
        ----------
        f : FactorLike
            A factor, or an input coercible to one.
        ordered : bool, optional
            ``None`` (default) inherits the ``ordered`` attribute of `f`.

        Returns
        -------
        pandas.Categorical or pandas.Series
            Factor whose most frequent level comes first. Levels with equal
            counts keep their original relative order; missing observations
            are not counted.

        Raises
        ------
        ArgumentError
            If `ordered` is not ``None``, ``True`` or ``False``.
        """
        factor = ensure_factor(f)
        validate_ordered_flag(ordered)

        counts = LevelMethods.count_levels(factor)
        idx = LevelMethods.order_levels(counts, desc=True)
        result = LevelMethods.lvls_reorder(factor, idx, ordered=ordered)
        return wrap_like(f, result)

    @staticmethod
    def fct_inseq(
        f: FactorLike, ordered: OrderedFlag = None
    ) -> pd.Categorical | pd.Series:
        """
        Reorder factor levels by the numeric value of their labels.

        Each label is parsed with ``pandas.to_numeric``; labels that do not
        parse count as ``NaN``. The factor is then rebuilt against the
        sorted level list with ``refactor``.

        Parameters
        ----------
        f : FactorLike
            A factor, or an input coercible to one.
        ordered : bool, optional
            ``None`` (default) inherits the ``ordered`` attribute of `f`.

        Returns
        -------
        pandas.Categorical or pandas.Series
            Factor whose levels are sorted numerically ("2" before "10").
            Labels keep their original text.

        Raises
        ------
        ArgumentError
            If no level can be parsed as a number.
            If `ordered` is not ``None``, ``True`` or ``False``.

        Notes
        -----
        Non-numeric labels are placed after every numeric label, in their
        original relative order, since ``NaN`` sorts last.

        Examples
        --------
        >>> fct_inseq(["10", "2", "1"]).categories.tolist()
        ['1', '2', '10']
        >>> fct_inseq(["b", "10", "a", "9"]).categories.tolist()
        ['9', '10', 'a', 'b']
        """
        factor = ensure_factor(f)
        validate_ordered_flag(ordered)

        levels = factor.categories
        numeric = pd.to_numeric(
            pd.Series(levels.to_numpy(dtype=object)), errors="coerce"
        )
        if numeric.notna().sum() == 0:
            raise ArgumentError(OrderMethods._errors["no_numeric_levels"])
        non_numeric = levels[numeric.isna().to_numpy()].tolist()
        if non_numeric:
            logger.info(OrderMethods._warns["non_numeric_levels_f"].format(non_numeric))

        idx = LevelMethods.order_levels(numeric)
        result = LevelMethods.refactor(factor, levels[idx], ordered=ordered)
        return wrap_like(f, result)
