"""
Type utilities and exceptions used throughout the factorica package.

This module defines the shared error type raised by every public function and
the type aliases used in signatures across the package.

Classes
-------
ArgumentError
    Raised when the arguments of a level-reordering call are malformed:
    length mismatches, non-scalar summaries, unusable extra arguments for a
    summary function, or labels that cannot be interpreted as requested.

Attributes
----------
FactorLike
    Union of inputs accepted wherever a factor is expected.
OrderedFlag
    ``None`` (inherit from the input), ``True`` or ``False``.

Notes
-----
- ``ArgumentError`` subclasses ``ValueError``, so code that already catches
  ``ValueError`` keeps working.

Examples
--------
>>> import factorica
>>> try:
...     factorica.fct_reorder(["a", "b"], [1, 2, 3])
... except factorica.ArgumentError as e:
...     print(e)
length mismatch: 'f' has 2 observations, 'x' has 3.
"""

from collections import deque
from typing import Optional, Sequence, Union

import numpy as np
import pandas as pd


class ArgumentError(ValueError):
    """
    Error raised for invalid arguments to a factorica function.

    Every precondition in the package is checked before any output is built,
    so raising this error never leaves a partially reordered result behind.
    """


FactorLike = Union[pd.Categorical, pd.Series, pd.DataFrame, np.ndarray, deque, Sequence]

OrderedFlag = Optional[bool]
