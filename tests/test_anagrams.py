import pytest

from shopalgos.anagrams import find_group, word_grouping

WORDS = ["The", "teh", "het", "stupid", "studpi", "apple", "appel"]


def test_groups_source_example():
    groups = word_grouping(WORDS)
    as_sets = {frozenset(g) for g in groups}
    assert as_sets == {
        frozenset({"The", "teh", "het"}),
        frozenset({"stupid", "studpi"}),
        frozenset({"apple", "appel"}),
    }


def test_groups_preserve_first_seen_order():
    groups = word_grouping(WORDS)
    assert groups[0] == ["The", "teh", "het"]
    assert [g[0] for g in groups] == ["The", "stupid", "apple"]


def test_every_word_lands_in_exactly_one_group():
    groups = word_grouping(WORDS)
    flattened = [w for g in groups for w in g]
    assert sorted(flattened) == sorted(WORDS)


def test_empty_input_gives_no_groups():
    assert word_grouping([]) == []


def test_non_letter_raises():
    with pytest.raises(ValueError):
        word_grouping(["abc1"])


def test_find_group_returns_containing_group():
    groups = word_grouping(WORDS)
    group = find_group(groups, "teh")
    assert group == ["The", "teh", "het"]


def test_find_group_missing_word():
    groups = word_grouping(WORDS)
    assert find_group(groups, "banana") is None