import pytest

from marktree.flanking import is_punctuation, scan_delims, smart_dashes


def test_is_punctuation_categories():
    assert is_punctuation("!")
    assert is_punctuation("_")
    assert not is_punctuation("a")
    assert not is_punctuation("$")


def test_run_length_counts_repeated_char():
    data = "***a"
    count, _, _ = scan_delims(data, 0, "*", frozenset())
    assert count == len("***")


def test_star_at_start_opens_only():
    _, can_open, can_close = scan_delims("*a*", 0, "*", frozenset())
    assert can_open and not can_close


def test_star_at_end_closes_only():
    _, can_open, can_close = scan_delims("*a*", 2, "*", frozenset())
    assert can_close and not can_open


def test_intraword_star_opens_and_closes():
    _, can_open, can_close = scan_delims("a*b", 1, "*", frozenset())
    assert can_open and can_close


def test_intraword_underscore_neither():
    _, can_open, can_close = scan_delims("a_b", 1, "_", frozenset())
    assert not can_open and not can_close


def test_surrounded_by_spaces_neither():
    _, can_open, can_close = scan_delims("a * b", 2, "*", frozenset())
    assert not can_open and not can_close


def test_quote_run_is_single():
    count, can_open, _ = scan_delims("''x", 0, "'", frozenset())
    assert count == 1
    assert can_open


def test_quote_after_closing_bracket_cannot_open():
    _, can_open, _ = scan_delims("]'x", 1, "'", frozenset())
    assert not can_open


def test_skip_chars_treated_as_line_boundary():
    _, with_skip, _ = scan_delims("~*a", 1, "*", frozenset("~"))
    _, at_start, _ = scan_delims("*a", 0, "*", frozenset())
    assert with_skip == at_start


def test_smart_dashes_from_source_examples():
    assert smart_dashes(2) == "\u2013"
    assert smart_dashes(3) == "\u2014"


@pytest.mark.parametrize("count", range(2, 30))
def test_smart_dashes_account_for_every_hyphen(count):
    result = smart_dashes(count)
    ems = result.count("\u2014")
    ens = result.count("\u2013")
    assert ems * 3 + ens * 2 == count
    assert result == "\u2014" * ems + "\u2013" * ens


def test_smart_dashes_negative_raises():
    with pytest.raises(ValueError):
        smart_dashes(-1)