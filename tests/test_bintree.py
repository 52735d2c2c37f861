import random

import pytest

from bicitree.bintree import (
    BinTree,
    TreeFormat,
    TreeFormatError,
    format_tree,
    from_inline,
    from_left_visual,
    from_postorder,
    from_visual,
    parse_tree,
    to_inline,
    to_left_visual,
    to_postorder,
    to_visual,
)


def _random_tree(rng, counter, depth):
    if depth == 0 or rng.random() < 0.25:
        return None
    counter[0] += 1
    label = "n" * rng.randint(1, 4) + str(counter[0])
    return BinTree(
        label,
        _random_tree(rng, counter, depth - 1),
        _random_tree(rng, counter, depth - 1),
    )


def _trees():
    rng = random.Random(1234)
    trees = [None, BinTree("a"), BinTree("a", BinTree("b")), BinTree("a", None, BinTree("c"))]
    trees.append(BinTree("root", BinTree("l", BinTree("ll")), BinTree("r", None, BinTree("rr"))))
    for _ in range(40):
        trees.append(_random_tree(rng, [0], 6))
    return trees


SAMPLE = BinTree("a", BinTree("b"), BinTree("c"))


def test_inline_pinned():
    assert to_inline(SAMPLE) == "a(b,c)"


def test_inline_empty_tree():
    assert to_inline(None) == "()"
    assert from_inline("()") is None


def test_inline_parse_partial_children():
    assert from_inline("a(b)") == BinTree("a", BinTree("b"))
    assert from_inline("a(,c)") == BinTree("a", None, BinTree("c"))


def test_inline_reads_first_word_only():
    assert from_inline("a(b,c) ignored") == SAMPLE


def test_postorder_pinned_leaf():
    assert to_postorder(BinTree("x")) == "1\nx 0\n"


def test_postorder_codes():
    lines = to_postorder(BinTree("a", BinTree("b"), BinTree("c"))).splitlines()
    assert lines[0] == "3"
    assert lines[-1].split() == ["a", "2"]
    one_left = to_postorder(BinTree("a", BinTree("b"))).splitlines()
    assert one_left[-1].split()[1] == "-1"
    one_right = to_postorder(BinTree("a", None, BinTree("c"))).splitlines()
    assert one_right[-1].split()[1] == "1"


def test_postorder_underflow_raises():
    with pytest.raises(TreeFormatError):
        from_postorder("2\na 0\nb 2\n")


def test_postorder_truncated_raises():
    with pytest.raises(TreeFormatError):
        from_postorder("3\na 0\n")


def test_left_visual_pinned_leaf():
    assert to_left_visual(BinTree("x")) == "[x]\n \\__.\n \\__."


def test_left_visual_bad_input_raises():
    with pytest.raises(TreeFormatError):
        from_left_visual("x")


def test_left_visual_empty():
    assert to_left_visual(None) == "."
    assert from_left_visual(".") is None


def test_visual_empty():
    assert to_visual(None) == ""
    assert from_visual("") is None


def test_visual_leaf_round_trip():
    assert from_visual(to_visual(BinTree("leaf"))) == BinTree("leaf")


def test_visual_bad_stem_raises():
    with pytest.raises(TreeFormatError):
        from_visual("a\nx\n")


def test_visual_value_with_space_raises():
    with pytest.raises(TreeFormatError):
        to_visual(BinTree("a b"))


def test_left_visual_value_with_space_raises():
    with pytest.raises(TreeFormatError):
        to_left_visual(BinTree("a b"))


@pytest.mark.parametrize("fmt", list(TreeFormat))
def test_round_trip_all_formats(fmt):
    for tree in _trees():
        assert parse_tree(format_tree(tree, fmt), fmt) == tree


def test_visual_root_column_above_children():
    lines = to_visual(SAMPLE).splitlines()
    root_col = lines[0].index("a")
    assert lines[1].index("|") == root_col
    stems = [i for i, ch in enumerate(lines[3]) if ch == "|"]
    assert len(stems) == 2
    assert stems[0] < root_col < stems[1]


def test_convert_int_values():
    tree = BinTree(1, BinTree(2), BinTree(3))
    for fmt in TreeFormat:
        assert parse_tree(format_tree(tree, fmt), fmt, int) == tree


def test_convert_failure_raises():
    with pytest.raises(TreeFormatError):
        from_inline("a(b,c)", int)
    with pytest.raises(TreeFormatError):
        from_visual(to_visual(SAMPLE), int)


def test_invalid_format_raises():
    with pytest.raises(TreeFormatError):
        format_tree(SAMPLE, 7)
    with pytest.raises(TreeFormatError):
        parse_tree("a", 0)


def test_size_and_preorder():
    tree = BinTree("a", BinTree("b", BinTree("d")), BinTree("c"))
    assert tree.size() == 4
    assert list(tree) == ["a", "b", "d", "c"]


def test_size_matches_postorder_count():
    for tree in _trees():
        if tree is not None:
            assert int(to_postorder(tree).splitlines()[0]) == tree.size()