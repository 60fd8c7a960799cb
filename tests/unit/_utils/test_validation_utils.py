import pytest
import numpy as np

from factorica import ArgumentError
from factorica._utils import (
    validate_string_flag, validate_lengths_match, validate_ordered_flag,
    validate_summary_args, validate_scalar_summary, read_config)


# tests for validate_string_flag()

def test_validate_string_flag_positive_case():
    validate_string_flag(arg="A", supported_values=["A", "B", "C"],
                         err_msg="my_error_message")

def test_validate_string_flag_negative_case():
    with pytest.raises(ArgumentError, match="my_error_message"):
        validate_string_flag(arg="D", supported_values=["A", "B", "C"],
                             err_msg="my_error_message")

# tests for validate_lengths_match()

def test_validate_lengths_match_positive_case():
    validate_lengths_match(array1=[1, 2, 3], array2=["a", "b", "c"],
                           err_msg="my_error_message")

def test_validate_lengths_match_negative_case():
    with pytest.raises(ArgumentError, match="my_error_message"):
        validate_lengths_match(array1=[1, 2, 3], array2=[4, 5],
                               err_msg="my_error_message")

# tests for validate_ordered_flag()

@pytest.mark.parametrize("ordered", [None, True, False, np.bool_(True)])
def test_validate_ordered_flag_positive_case(ordered):
    validate_ordered_flag(ordered)

@pytest.mark.parametrize("ordered", ["true", 1, "inherit", [True]])
def test_validate_ordered_flag_negative_case(ordered):
    with pytest.raises(ArgumentError, match="'ordered' must be"):
        validate_ordered_flag(ordered)

# tests for validate_summary_args()

def test_validate_summary_args_accepted_kwargs():
    validate_summary_args(np.quantile, 1, kwargs={"q": 0.5})
    validate_summary_args(np.median, 1)

def test_validate_summary_args_accepted_positional():
    def weighted(x, weight):
        return x.sum() * weight

    validate_summary_args(weighted, 1, args=(2,))

def test_validate_summary_args_unused_kwarg():
    with pytest.raises(ArgumentError, match="'na_rm'"):
        validate_summary_args(np.median, 1, kwargs={"na_rm": True})

def test_validate_summary_args_unused_positional():
    def two_data(x, y):
        return x[0]

    with pytest.raises(ArgumentError, match="two_data"):
        validate_summary_args(two_data, 2, args=(1,))

def test_validate_summary_args_var_keyword_consumes_everything():
    def flexible(x, **kwargs):
        return x[0]

    validate_summary_args(flexible, 1, kwargs={"anything": 1, "else": 2})

def test_validate_summary_args_positional_only_keyword():
    with pytest.raises(ArgumentError, match="'obj'"):
        validate_summary_args(len, 0, kwargs={"obj": [1]})

# tests for validate_scalar_summary()

@pytest.mark.parametrize("value", [1, 2.5, "a", None, np.nan, np.float64(3)])
def test_validate_scalar_summary_positive_case(value):
    validate_scalar_summary(value, level="a")

@pytest.mark.parametrize("value", [(1, 2), [1], np.array([1, 2]), {"a": 1}])
def test_validate_scalar_summary_negative_case(value):
    with pytest.raises(ArgumentError,
                       match="must return a single value per group"):
        validate_scalar_summary(value, level="a")

# tests for read_config()

def test_read_config_messages_structure():
    messages = read_config("messages")
    assert set(messages) == {"errors", "warns"}
    assert "arrays_lens_mismatch_f" in messages["errors"]

def test_read_config_missing_file():
    with pytest.raises(FileNotFoundError):
        read_config("does_not_exist")
