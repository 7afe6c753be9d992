import pytest

from contestlib.suffix_array import SubstringIndex, build_suffix_array

TEXTS = ["banana$", "mississippi$", "abracadabra", "aaaa", "z", "abab"]


def test_banana_suffix_array():
    assert build_suffix_array("banana$") == [6, 5, 3, 1, 0, 4, 2]


def test_empty_text():
    assert build_suffix_array("") == []


@pytest.mark.parametrize("text", TEXTS)
def test_result_is_permutation(text):
    assert sorted(build_suffix_array(text)) == list(range(len(text)))


@pytest.mark.parametrize("text", TEXTS)
def test_rotations_are_sorted(text):
    rotations = [text[i:] + text[:i] for i in build_suffix_array(text)]
    assert rotations == sorted(rotations)


@pytest.mark.parametrize("text", ["banana$", "mississippi$", "abcab$"])
def test_suffixes_sorted_with_sentinel(text):
    suffixes = [text[i:] for i in build_suffix_array(text)]
    assert suffixes == sorted(suffixes)


@pytest.mark.parametrize("text", ["mississippi", "abracadabra", "aaab"])
def test_every_substring_is_found(text):
    index = SubstringIndex(text)
    for i in range(len(text)):
        for j in range(i + 1, len(text) + 1):
            assert index.contains(text[i:j])


@pytest.mark.parametrize("pattern", ["ssis", "pp", "mississippix", "q", "issx", "ippi", "sips"])
def test_contains_agrees_with_membership(pattern):
    text = "mississippi"
    assert SubstringIndex(text).contains(pattern) == (pattern in text)


def test_empty_pattern_is_contained():
    assert SubstringIndex("abc").contains("") is True