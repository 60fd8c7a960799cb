"""
factorica — level reordering for categorical variables.

Features include:
- Reordering levels by a summary of one or two other variables
- Reordering levels by first appearance, frequency or numeric label value
- Level permutation and rebuild primitives working on pandas categoricals
"""
import logging

from ._utils import ensure_factor
from .levels import (
    fct_infreq,
    fct_inorder,
    fct_inseq,
    fct_reorder,
    fct_reorder2,
    first2,
    last2,
    lvls_reorder,
    refactor,
)
from .types import ArgumentError

__version__ = "0.1.0"

__all__ = [
    "ArgumentError",
    "ensure_factor",
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

logger = logging.getLogger("factorica")
if not logger.hasHandlers():
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
    logger.addHandler(handler)
logger.setLevel(logging.WARNING)
