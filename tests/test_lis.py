import pytest

from drillbox.lis import dp_longest_increasing_subsequence, lis_elements, optimized_lis


def _generate_large_case(size):
    return [i if i % 2 == 0 else size - i for i in range(size)]


def _is_subsequence(nums, sub):
    remaining = iter(nums)
    return all(any(value == item for item in remaining) for value in sub)


LENGTH_CASES = [
    ([10, 9, 2, 5, 3, 7, 101, 18], 4),
    ([0, 1, 0, 3, 2, 3], 4),
    ([7, 7, 7, 7, 7, 7, 7], 1),
    ([4, 10, 4, 3, 8, 9], 3),
    ([], 0),
    ([5], 1),
    ([5, 4, 3, 2, 1], 1),
    ([1, 2, 3, 4, 5], 5),
    ([3, 10, 2, 1, 20], 3),
    ([50, 3, 10, 7, 40, 80], 4),
]


@pytest.mark.parametrize("nums,expected", LENGTH_CASES)
def test_dp_longest_increasing_subsequence(nums, expected):
    assert dp_longest_increasing_subsequence(nums) == expected


@pytest.mark.parametrize(
    "nums,expected", LENGTH_CASES + [(_generate_large_case(1000), 500)]
)
def test_optimized_lis(nums, expected):
    assert optimized_lis(nums) == expected


@pytest.mark.parametrize(
    "nums,expected_length",
    [
        ([10, 9, 2, 5, 3, 7, 101, 18], 4),
        ([0, 1, 0, 3, 2, 3], 4),
        ([7, 7, 7, 7, 7, 7, 7], 1),
        ([4, 10, 4, 3, 8, 9], 3),
        ([], 0),
        ([5], 1),
        ([5, 4, 3, 2, 1], 1),
        ([1, 2, 3, 4, 5], 5),
    ],
)
def test_lis_elements(nums, expected_length):
    result = lis_elements(nums)
    assert len(result) == expected_length
    assert all(a < b for a, b in zip(result, result[1:]))
    assert _is_subsequence(nums, result)


def test_example_cases():
    assert dp_longest_increasing_subsequence([10, 9, 2, 5, 3, 7, 101, 18]) == 4
    assert optimized_lis([0, 1, 0, 3, 2, 3]) == 4
    assert len(lis_elements([10, 9, 2, 5, 3, 7, 101, 18])) == 4
    assert dp_longest_increasing_subsequence([7, 7, 7, 7, 7, 7, 7]) == 1


def test_lis_elements_picks_earliest_choices():
    assert lis_elements([10, 9, 2, 5, 3, 7, 101, 18]) == [2, 5, 7, 101]


def test_lis_elements_on_increasing_input_returns_it_whole():
    assert lis_elements([1, 2, 3, 4, 5]) == [1, 2, 3, 4, 5]


def test_lengths_agree_on_large_case():
    nums = _generate_large_case(200)
    assert dp_longest_increasing_subsequence(nums) == optimized_lis(nums)
    assert len(lis_elements(nums)) == optimized_lis(nums)