import pytest

from pushswap.parsing import (
    INT_MAX,
    INT_MIN,
    InputError,
    assign_ranks,
    is_valid_token,
    parse_arguments,
    parse_int,
    validate_arguments,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("-7", -7),
        ("+5", 5),
        ("  \t12abc", 12),
        ("-2147483648", -2147483648),
        ("2147483647", 2147483647),
        ("99999999999", 99999999999),
    ],
)
def test_parse_int_values(text, expected):
    assert parse_int(text) == expected


@pytest.mark.parametrize("text", ["+-3", "-", "", "abc", "- 4"])
def test_parse_int_without_digits_gives_zero(text):
    assert parse_int(text) == 0


@pytest.mark.parametrize("token", ["0", "-0", "+17", "-2147483648", "2147483647"])
def test_valid_tokens(token):
    assert is_valid_token(token) is True


@pytest.mark.parametrize(
    "token",
    ["", "+", "-", "1a", "--1", "+-1", "1-", "2147483648", "-2147483649", "1\t2", "١"],
)
def test_invalid_tokens(token):
    assert is_valid_token(token) is False


def test_validate_arguments_splits_on_spaces():
    assert validate_arguments(["3 1", "  2 "]) == ["3", "1", "2"]


def test_validate_arguments_rejects_empty_argument():
    with pytest.raises(InputError):
        validate_arguments(["1", ""])


def test_validate_arguments_rejects_bad_token():
    with pytest.raises(InputError):
        validate_arguments(["1 two 3"])


def test_validate_arguments_accepts_blank_argument():
    assert validate_arguments(["   "]) == []


def test_parse_arguments_returns_numbers_in_order():
    assert parse_arguments(["4 -1", "+8"]) == [4, -1, 8]


def test_parse_arguments_limits():
    assert parse_arguments([str(INT_MIN), str(INT_MAX)]) == [INT_MIN, INT_MAX]


def test_parse_arguments_out_of_range():
    with pytest.raises(InputError):
        parse_arguments([str(INT_MAX + 1)])


def test_assign_ranks_is_permutation_preserving_order():
    values = [50, -3, 12, 7, 1000]
    ranks = assign_ranks(values)
    assert sorted(ranks) == list(range(len(values)))
    for i, a in enumerate(values):
        for j, b in enumerate(values):
            assert (a < b) == (ranks[i] < ranks[j])


def test_assign_ranks_sorted_input_gives_identity():
    assert assign_ranks([1, 2, 3, 4]) == [0, 1, 2, 3]


def test_assign_ranks_rejects_duplicates():
    with pytest.raises(InputError):
        assign_ranks([3, 1, 3])


def test_assign_ranks_empty():
    assert assign_ranks([]) == []