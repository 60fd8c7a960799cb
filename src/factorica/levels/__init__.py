"""
Facade for factor level reordering.

This package gathers the level-reordering functions and the primitives they
are built on into a single namespace.

Classes
-------
LevelMethods
    Level-set primitives: permutation, rebuild, per-level summaries, counts.
ReorderMethods
    Reordering by summaries of other variables.
OrderMethods
    Reordering by first appearance, frequency or numeric label value.

Methods
-------
fct_reorder(f, x, fun, *args, desc, verbose, **kwargs)
    Reorder levels by a summary of another variable.
fct_reorder2(f, x, y, fun, *args, desc, verbose, **kwargs)
    Reorder levels by a summary of two other variables.
last2(x, y)
    The value of `y` at the largest `x`.
first2(x, y)
    The value of `y` at the smallest `x`.
fct_inorder(f, ordered)
    Reorder levels by first appearance.
fct_infreq(f, ordered)
    Reorder levels by decreasing frequency.
fct_inseq(f, ordered)
    Reorder levels by the numeric value of their labels.
lvls_reorder(f, idx, ordered)
    Permute levels by their current positions.
refactor(f, new_levels, ordered)
    Rebuild a factor against an explicit level list.

Examples
--------
>>> import pandas as pd
>>> import factorica.levels as levels
...
>>> df = pd.DataFrame({
...     "city": ["Oslo", "Rome", "Oslo", "Lima", "Rome", "Oslo"],
...     "temp": [4.0, 18.5, 6.0, 19.0, 21.0, 5.0],
... })
>>> df["city"] = levels.fct_infreq(df["city"])
>>> df["city"].cat.categories.tolist()
['Oslo', 'Rome', 'Lima']
>>> levels.fct_reorder(df["city"], df["temp"], desc=True).cat.categories.tolist()
['Rome', 'Lima', 'Oslo']
"""

from .ordering import OrderMethods
from .primitives import LevelMethods
from .reorder import ReorderMethods

fct_reorder = ReorderMethods.fct_reorder
fct_reorder2 = ReorderMethods.fct_reorder2
last2 = ReorderMethods.last2
first2 = ReorderMethods.first2

fct_inorder = OrderMethods.fct_inorder
fct_infreq = OrderMethods.fct_infreq
fct_inseq = OrderMethods.fct_inseq

lvls_reorder = LevelMethods.lvls_reorder
refactor = LevelMethods.refactor

__all__ = [
    "LevelMethods",
    "ReorderMethods",
    "OrderMethods",
    "fct_reorder",
    "fct_reorder2",
    "last2",
    "first2",
    "fct_inorder",
    "fct_infreq",
    "fct_inseq",
    "lvls_reorder",
    "refactor",
]
