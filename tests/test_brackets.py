from codelessons.brackets import find_bracket_groups

HAYSTACK = "This is only a [test]trash1 [best] garbage\npre [rest] mid [quest] post."


def test_source_example():
    assert find_bracket_groups(HAYSTACK) == [
        ("[test]trash1 [best]", "test", "best"),
        ("[rest] mid [quest]", "rest", "quest"),
    ]


def test_greedy_match_takes_last_bracket_on_line():
    groups = find_bracket_groups("[a] [b] [c]")
    assert len(groups) == 1
    assert groups[0][1:] == ("a", "c")


def test_single_bracket_does_not_match():
    assert find_bracket_groups("only [one] here") == []


def test_brackets_on_different_lines_do_not_pair():
    assert find_bracket_groups("[left]\n[right]") == []


def test_whole_match_is_substring():
    for whole, first, last in find_bracket_groups(HAYSTACK):
        assert whole in HAYSTACK
        assert whole.startswith(f"[{first}]")
        assert whole.endswith(f"[{last}]")