import pytest

from contestlib.hashing import (
    DoubleHash,
    PolynomialHash,
    find_occurrences,
    rabin_karp,
    single_hash_occurrences,
)

CASES = [
    ("abababaa", "aba"),
    ("ababbababa", "aba"),
    ("aaaaa", "aa"),
    ("abcabcabc", "cab"),
    ("xyz", "xyzw"),
    ("hello", "z"),
]


def test_find_occurrences_source_example():
    assert find_occurrences("abababaa", "aba") == [1, 3, 5]


def test_single_hash_source_example():
    assert single_hash_occurrences("ababbababa", "aba") == [0, 5, 7]


@pytest.mark.parametrize("text,pattern", CASES)
def test_search_functions_agree(text, pattern):
    expected = rabin_karp(pattern, text)
    assert [p - 1 for p in find_occurrences(text, pattern)] == expected
    assert single_hash_occurrences(text, pattern) == expected


@pytest.mark.parametrize("text,pattern", CASES)
def test_reported_positions_hold_pattern(text, pattern):
    positions = rabin_karp(pattern, text)
    assert all(text[p:p + len(pattern)] == pattern for p in positions)
    assert positions == sorted(set(positions))
    assert bool(positions) == (pattern in text)


@pytest.mark.parametrize("l1,r1,l2,r2", [(1, 1, 3, 3), (1, 2, 3, 4), (1, 2, 3, 5), (1, 3, 4, 5), (2, 4, 6, 8)])
def test_compare_substrings_source_queries(l1, r1, l2, r2):
    text = "abababaa"
    hashed = DoubleHash(text)
    first, second = text[l1 - 1:r1], text[l2 - 1:r2]
    assert hashed.compare_substrings(l1, r1, l2, r2) == (first > second) - (first < second)


def test_compare_substrings_is_antisymmetric():
    text = "abbabaab"
    hashed = DoubleHash(text)
    n = len(text)
    ranges = [(i, j) for i in range(1, n + 1) for j in range(i, n + 1)]
    for a in ranges[::3]:
        for b in ranges[::5]:
            assert hashed.compare_substrings(*a, *b) == -hashed.compare_substrings(*b, *a)


def test_substring_hash_matches_hash_of_substring():
    text = "HelloWorldabc"
    hashed = DoubleHash(text)
    for i in range(1, len(text) + 1):
        for j in range(i, len(text) + 1):
            assert hashed.substring_hash(i, j) == hashed.hash_of(text[i - 1:j])


def test_empty_substring_hash_matches_empty_string():
    hashed = DoubleHash("abc")
    assert hashed.substring_hash(2, 1) == hashed.hash_of("")


def test_polynomial_substring_hash_matches_standalone_hash():
    text = "ababbababa"
    hashed = PolynomialHash(text)
    for i in range(1, len(text) + 1):
        for j in range(i, len(text) + 1):
            assert hashed.substring_hash(i, j) == PolynomialHash(text[i - 1:j]).value


@pytest.mark.parametrize("left,right", [(0, 2), (2, 5), (3, 0)])
def test_invalid_ranges_raise(left, right):
    with pytest.raises(ValueError):
        DoubleHash("abc").substring_hash(left, right)
    with pytest.raises(ValueError):
        PolynomialHash("abc").substring_hash(left, right)


def test_empty_pattern_raises():
    with pytest.raises(ValueError):
        rabin_karp("", "abc")
    with pytest.raises(ValueError):
        find_occurrences("abc", "")
    with pytest.raises(ValueError):
        single_hash_occurrences("abc", "")