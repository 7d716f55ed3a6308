import pytest

from ftkit.numbers import is_number
from ftkit.text import (
    compare,
    compare_n,
    count_char,
    count_if,
    count_number_words,
    count_printable_words,
    count_words,
    find,
    find_within,
    split_char,
    split_printable,
    split_words,
    substring,
    trim,
)


def test_count_char_counts_every_occurrence():
    assert count_char("aaa", "a") == len("aaa")


def test_count_char_absent():
    assert count_char("abc", "z") == 0


def test_count_char_rejects_empty_char():
    with pytest.raises(ValueError):
        count_char("abc", "")


def test_count_if_with_predicate():
    items = ["12", "x", "-3", "+"]
    assert count_if(items, is_number) == len(["12", "-3"])


def test_count_if_empty():
    assert count_if([], bool) == 0


def test_split_char_drops_empty_pieces():
    assert split_char("  a  bb c ", " ") == ["a", "bb", "c"]


def test_count_words_matches_split():
    s = "room1-room2--room3-"
    assert count_words(s, "-") == len(split_char(s, "-"))


def test_count_words_none_is_zero():
    assert count_words(None, " ") == 0


def test_split_char_rejects_empty_separator():
    with pytest.raises(ValueError):
        split_char("abc", "")


def test_count_number_words_accepts_numbers():
    s = "12 -3 4"
    assert count_number_words(s, " ") == len(split_char(s, " "))


def test_count_number_words_rejects_other_chars():
    assert count_number_words("12 x", " ") == 0


def test_split_printable_splits_on_non_printable():
    assert split_printable("ab\tcd \n ef", 10) == ["ab", "cd", "ef"]


def test_count_printable_words_matches_split():
    s = "  ##start\n\tname 1 2  "
    assert count_printable_words(s) == len(split_printable(s, 100))


def test_count_printable_words_none_is_zero():
    assert count_printable_words(None) == 0


def test_split_printable_limits_word_count():
    assert split_printable("a b c", 2) == ["a", "b"]


def test_split_printable_requires_positive_count():
    with pytest.raises(ValueError):
        split_printable("a b", 0)


def test_split_words_limit():
    assert split_words("1 2 3", " ", 2) == ["1", "2"]


def test_split_words_zero_is_empty():
    assert split_words("1 2 3", " ", 0) == []


def test_split_words_negative_raises():
    with pytest.raises(ValueError):
        split_words("1 2", " ", -1)


def test_trim_strips_space_tab_newline():
    assert trim(" \t\nhello world\n ") == "hello world"


def test_trim_keeps_carriage_return():
    assert trim("\rx\r") == "\rx\r"


def test_trim_all_whitespace_gives_empty():
    assert trim("  \t\n") == ""


def test_substring_slice():
    assert substring("lem-in", 4, 2) == "in"


def test_substring_whole_round_trip():
    s = "antfarm"
    assert substring(s, 0, len(s)) == s


def test_substring_out_of_range_raises():
    with pytest.raises(ValueError):
        substring("abc", 2, 2)


def test_find_locates_needle():
    haystack, needle = "hello world", "world"
    index = find(haystack, needle)
    assert haystack[index:index + len(needle)] == needle


def test_find_empty_needle_is_start():
    assert find("abc", "") == 0


def test_find_absent():
    assert find("abc", "abd") == -1


def test_find_within_bound_too_short():
    assert find_within("abcdef", "cd", 3) == -1


def test_find_within_bound_long_enough():
    index = find_within("abcdef", "cd", 4)
    assert "abcdef"[index:index + 2] == "cd"


def test_find_within_empty_needle():
    assert find_within("abc", "", 0) == 0


def test_find_within_negative_length_raises():
    with pytest.raises(ValueError):
        find_within("abc", "a", -1)


def test_compare_equal():
    assert compare("start", "start") == 0


def test_compare_sign_and_antisymmetry():
    assert compare("abc", "abd") < 0
    assert compare("abd", "abc") == -compare("abc", "abd")


def test_compare_prefix_is_smaller():
    assert compare("ab", "abc") < 0
    assert compare("abc", "ab") > 0


def test_compare_n_ignores_tail():
    assert compare_n("abc", "abd", 2) == 0


def test_compare_n_full_length_matches_compare():
    assert compare_n("abc", "abd", 3) == compare("abc", "abd")


def test_compare_n_negative_raises():
    with pytest.raises(ValueError):
        compare_n("a", "b", -1)