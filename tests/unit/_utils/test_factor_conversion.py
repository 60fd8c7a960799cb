import enum
from collections import deque

import pytest
import pandas as pd
import numpy as np

from factorica import ArgumentError
from factorica._utils import (ensure_factor, convert_series, wrap_like,
                              convert_from_alias)


class Size(enum.Enum):
    SMALL = 1
    LARGE = 2
    MEDIUM = 3


class Colour(enum.Enum):
    RED = "r"


LABEL_SEQUENCES = [
    # list
    ["b", "a", "b", None],

    # tuple
    ("b", "a", "b", None),

    # numpy array
    np.array(["b", "a", "b", None], dtype=object),

    # deque
    deque(["b", "a", "b", None]),

    # plain Series
    pd.Series(["b", "a", "b", None]),

    # one-column DataFrame
    pd.DataFrame({"col": ["b", "a", "b", None]}),
]

UNSUPPORTED_INPUTS = [
    "abc",
    42,
    {"a": 1},
    {"a", "b"},
    None,
]

MULTIDIMENSIONAL_INPUTS = [
    [["a", "b"], ["c", "d"]],
    np.array([["a", "b"], ["c", "d"]]),
    pd.DataFrame({"A": ["a"], "B": ["b"]}),
]

# tests for ensure_factor()

def test_ensure_factor_categorical_passes_through():
    cat = pd.Categorical(["x", "y"], categories=["y", "x"], ordered=True)
    assert ensure_factor(cat) is cat

def test_ensure_factor_categorical_series():
    s = pd.Series(["x", "y", "x"], dtype=pd.CategoricalDtype(["y", "x"]))
    factor = ensure_factor(s)
    assert isinstance(factor, pd.Categorical)
    assert factor.categories.tolist() == ["y", "x"]
    assert factor.tolist() == ["x", "y", "x"]

@pytest.mark.parametrize("data", LABEL_SEQUENCES)
def test_ensure_factor_label_sequences(data):
    factor = ensure_factor(data)
    assert isinstance(factor, pd.Categorical)
    assert factor.categories.tolist() == ["a", "b"]
    assert factor.codes.tolist() == [1, 0, 1, -1]

def test_ensure_factor_numeric_labels():
    factor = ensure_factor([3, 1, 2, 1])
    assert factor.categories.tolist() == [1, 2, 3]

def test_ensure_factor_enum_members():
    factor = ensure_factor([Size.LARGE, None, Size.SMALL, Size.LARGE])
    assert factor.categories.tolist() == ["SMALL", "LARGE", "MEDIUM"]
    assert factor.codes.tolist() == [1, -1, 0, 1]

def test_ensure_factor_mixed_enums():
    with pytest.raises(ArgumentError, match="mixed enum"):
        ensure_factor([Size.LARGE, Colour.RED])
    with pytest.raises(ArgumentError, match="mixed enum"):
        ensure_factor([Size.LARGE, "LARGE"])

@pytest.mark.parametrize("data", UNSUPPORTED_INPUTS)
def test_ensure_factor_unsupported_input(data):
    with pytest.raises(ArgumentError, match="Unsupported type"):
        ensure_factor(data)

@pytest.mark.parametrize("data", MULTIDIMENSIONAL_INPUTS)
def test_ensure_factor_multidimensional_input(data):
    with pytest.raises(ArgumentError, match="multidimensional"):
        ensure_factor(data)

def test_ensure_factor_argument_error_is_value_error():
    with pytest.raises(ValueError):
        ensure_factor(42)

def test_ensure_factor_does_not_mutate_input():
    data = ["b", "a"]
    ensure_factor(data)
    assert data == ["b", "a"]

# tests for convert_series()

def test_convert_series_resets_index():
    s = pd.Series([3, 1, 2], index=["p", "q", "r"], name="x")
    result = convert_series(s)
    assert result.index.tolist() == [0, 1, 2]
    assert result.tolist() == [3, 1, 2]
    assert s.index.tolist() == ["p", "q", "r"]

def test_convert_series_none_becomes_nan():
    result = convert_series([1.0, None, 3.0])
    assert np.isnan(result.iloc[1])

def test_convert_series_empty():
    result = convert_series([])
    assert len(result) == 0

@pytest.mark.parametrize("data", MULTIDIMENSIONAL_INPUTS)
def test_convert_series_multidimensional_input(data):
    with pytest.raises(ArgumentError, match="multidimensional"):
        convert_series(data)

def test_convert_series_unsupported_input():
    with pytest.raises(ArgumentError, match="Unsupported type"):
        convert_series(3.5, data_name="x")

# tests for wrap_like()

def test_wrap_like_series_template():
    template = pd.Series(["a", "b"], index=[10, 20], name="grp")
    result = wrap_like(template, pd.Categorical(["a", "b"]))
    assert isinstance(result, pd.Series)
    assert result.index.tolist() == [10, 20]
    assert result.name == "grp"
    assert result.dtype == "category"

def test_wrap_like_other_template():
    cat = pd.Categorical(["a"])
    assert wrap_like(["a"], cat) is cat

# tests for convert_from_alias()

@pytest.mark.parametrize("alias, expected", [
    ("MED", "median"),
    ("avg", "mean"),
    ("n", "count"),
    ("maximum", "max"),
    ("unknown", "unknown"),
])
def test_convert_from_alias_summary(alias, expected):
    assert convert_from_alias(alias) == expected

def test_convert_from_alias_restricted_domain():
    assert convert_from_alias("avg", default_values={"median"}) == "avg"

def test_convert_from_alias_unknown_path():
    with pytest.raises(KeyError):
        convert_from_alias("avg", path="nonexistent")
