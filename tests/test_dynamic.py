import math

import pytest

from algokata.dynamic import (
    calculate_minimum_hp,
    find_max_form,
    is_scramble,
    length_of_lis,
    min_cut,
    min_distance,
    num_distinct,
    partition,
    unique_paths,
    word_break,
)


@pytest.mark.parametrize("m,n", [(1, 1), (1, 5), (3, 7), (4, 4), (10, 3)])
def test_unique_paths_matches_binomial(m, n):
    assert unique_paths(m, n) == math.comb(m + n - 2, m - 1)


def test_unique_paths_symmetric():
    assert unique_paths(6, 9) == unique_paths(9, 6)


def test_unique_paths_rejects_empty_grid():
    with pytest.raises(ValueError):
        unique_paths(0, 3)


@pytest.mark.parametrize("word", ["", "a", "horse", "intention"])
def test_min_distance_identity_and_empty(word):
    assert min_distance(word, word) == 0
    assert min_distance("", word) == len(word)
    assert min_distance(word, "") == len(word)


@pytest.mark.parametrize("a,b", [("horse", "ros"), ("intention", "execution"), ("abc", "yabd")])
def test_min_distance_symmetric_and_bounded(a, b):
    d = min_distance(a, b)
    assert d == min_distance(b, a)
    assert abs(len(a) - len(b)) <= d <= max(len(a), len(b))


def test_min_distance_triangle_inequality():
    a, b, c = "kitten", "sitting", "mitten"
    assert min_distance(a, c) <= min_distance(a, b) + min_distance(b, c)


def test_min_distance_single_replacement():
    assert min_distance("cat", "cut") == 1


def test_is_scramble_basic_properties():
    assert is_scramble("", "")
    assert is_scramble("abc", "abc")
    assert not is_scramble("abc", "ab")
    assert not is_scramble("abc", "abd")


def test_is_scramble_swapped_halves():
    assert is_scramble("abcd", "cdab")
    assert is_scramble("great", "rgeat")


def test_is_scramble_known_negative():
    assert not is_scramble("abcde", "caebd")


def test_num_distinct_edges():
    assert num_distinct("rabbit", "") == 1
    assert num_distinct("rabbit", "rabbit") == 1
    assert num_distinct("ab", "abc") == 0


@pytest.mark.parametrize("n", [0, 1, 2, 5, 8])
def test_num_distinct_counts_pairs(n):
    assert num_distinct("a" * n, "aa") == math.comb(n, 2)


@pytest.mark.parametrize("s", ["", "a", "aab", "racecar", "abcba"])
def test_partition_pieces_are_palindromes_and_rejoin(s):
    parts = partition(s)
    assert parts
    for pieces in parts:
        assert "".join(pieces) == s
        assert all(p == p[::-1] for p in pieces)
    assert len({tuple(p) for p in parts}) == len(parts)


def test_partition_distinct_letters_has_one_way():
    assert partition("abc") == [["a", "b", "c"]]


def test_partition_empty_string():
    assert partition("") == [[]]


@pytest.mark.parametrize("s", ["a", "ab", "aab", "abccbc", "banana"])
def test_min_cut_agrees_with_partition(s):
    assert min_cut(s) == min(len(p) for p in partition(s)) - 1


def test_min_cut_palindrome_needs_none():
    assert min_cut("racecar") == 0


def test_min_cut_rejects_empty():
    with pytest.raises(ValueError):
        min_cut("")


def test_word_break_example():
    words = ["cat", "cats", "and", "sand", "dog"]
    assert word_break("catsanddog", words) == ["cat sand dog", "cats and dog"]


def test_word_break_results_are_valid_and_sorted():
    words = ["apple", "pen", "applepen", "pine", "pineapple"]
    s = "pineapplepenapple"
    result = word_break(s, words)
    assert result == sorted(result)
    assert result
    for sentence in result:
        assert sentence.replace(" ", "") == s
        assert all(w in words for w in sentence.split(" "))


def test_word_break_no_way():
    assert word_break("catsandog", ["cats", "dog", "sand", "and", "cat"]) == []


@pytest.mark.parametrize("cell", [-5, 0, 3, 100])
def test_minimum_hp_single_cell(cell):
    assert calculate_minimum_hp([[cell]]) == max(1 - cell, 1)


def test_minimum_hp_non_negative_dungeon():
    assert calculate_minimum_hp([[0, 2], [5, 0]]) == 1


def test_minimum_hp_example():
    assert calculate_minimum_hp([[-2, -3, 3], [-5, -10, 1], [10, 30, -5]]) == 7


def test_minimum_hp_rejects_empty():
    with pytest.raises(ValueError):
        calculate_minimum_hp([])


def test_length_of_lis_simple_shapes():
    assert length_of_lis([]) == 0
    assert length_of_lis([1, 2, 3, 4, 5]) == 5
    assert length_of_lis([5, 4, 3, 2, 1]) == 1
    assert length_of_lis([7, 7, 7, 7]) == 1


def test_length_of_lis_bounded_by_distinct_count():
    nums = [10, 9, 2, 5, 3, 7, 101, 18]
    assert 1 <= length_of_lis(nums) <= len(set(nums))
    assert length_of_lis(nums) >= length_of_lis(nums[:4])


def test_find_max_form_everything_fits():
    strs = ["10", "0001", "111001", "1", "0"]
    zeros = sum(s.count("0") for s in strs)
    ones = sum(s.count("1") for s in strs)
    assert find_max_form(strs, zeros, ones) == len(strs)


def test_find_max_form_no_budget():
    assert find_max_form(["", "0", "1", ""], 0, 0) == 2


def test_find_max_form_monotone_in_budget():
    strs = ["10", "0001", "111001", "1", "0"]
    assert find_max_form(strs, 5, 3) <= find_max_form(strs, 6, 4)
    assert find_max_form(strs, 1, 1) <= find_max_form(strs, 5, 3)


def test_find_max_form_rejects_negative():
    with pytest.raises(ValueError):
        find_max_form(["0"], -1, 0)