"""Immutable binary trees and their four text representations."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Iterator, Optional

MIN_HYPHENS_DESCENDANT = 4
MIN_SPACE_BETWEEN_SUBTREES = 4


class TreeFormat(IntEnum):
    """Text representations a tree can be written in or read from."""

    POSTORDER = 1
    LEFT_VISUAL = 2
    VISUAL = 3
    INLINE = 4


class TreeFormatError(ValueError):
    """Raised when a tree cannot be written or read in a given format."""


@dataclass(frozen=True)
class BinTree:
    """A non-empty binary tree node; an empty tree is ``None``."""

    value: Any
    left: Optional["BinTree"] = None
    right: Optional["BinTree"] = None

    def size(self) -> int:
        """Number of nodes in the tree."""
        return sum(1 for _ in self)

    def __iter__(self) -> Iterator[Any]:
        """Yield the values in preorder."""
        yield self.value
        if self.left is not None:
            yield from self.left
        if self.right is not None:
            yield from self.right


Tree = Optional[BinTree]
Converter = Callable[[str], Any]


def _tree_size(tree: Tree) -> int:
    return 0 if tree is None else tree.size()


def _value_to_string(value: Any) -> str:
    text = str(value)
    if not text:
        raise TreeFormatError("length 0 is not allowed for strings describing values")
    if " " in text:
        raise TreeFormatError("white spaces are not allowed for strings describing values")
    return text


def _convert(text: str, convert: Converter) -> Any:
    try:
        return convert(text)
    except (ValueError, TypeError) as exc:
        raise TreeFormatError(f"could not transform {text!r} into a value") from exc


def _string_to_value(text: str, convert: Converter) -> Any:
    words = text.split()
    if len(words) != 1:
        raise TreeFormatError(f"could not transform {text!r} into a value")
    return _convert(words[0], convert)


def _require(condition: bool) -> None:
    if not condition:
        raise TreeFormatError("wrong format input tree")


def _first_non_blank(line: str) -> int:
    return len(line) - len(line.lstrip(" "))


def _root_position(line: str) -> int:
    return (_first_non_blank(line) + len(line) - 1) // 2


def _indent(lines: list[str], space: int) -> list[str]:
    pad = " " * space
    return [pad + line for line in lines]


# Inline format -------------------------------------------------------------


def to_inline(tree: Tree) -> str:
    """Write a tree as ``root(left,right)``; the empty tree is ``()``."""
    if tree is None:
        return "()"
    return _inline(tree)


def _inline(tree: Tree) -> str:
    if tree is None:
        return ""
    head = str(tree.value)
    if tree.left is None and tree.right is None:
        return head
    return f"{head}({_inline(tree.left)},{_inline(tree.right)})"


def _inline_tokens(text: str) -> list[tuple[str, str]]:
    tokens: list[tuple[str, str]] = []
    start = 0
    for pos, char in enumerate(text):
        if char in ",()":
            if start < pos:
                tokens.append(("value", text[start:pos]))
            start = pos + 1
            tokens.append((char, ""))
    if start < len(text):
        tokens.append(("value", text[start:]))
    return tokens


def from_inline(text: str, convert: Converter = str) -> Tree:
    """Read the first whitespace-separated word of ``text`` as an inline tree."""
    words = text.split()
    tokens = _inline_tokens(words[0] if words else "")
    position = 0

    def kind() -> Optional[str]:
        return tokens[position][0] if position < len(tokens) else None

    def read() -> Tree:
        nonlocal position
        if kind() != "value":
            return None
        value = _convert(tokens[position][1], convert)
        position += 1
        if kind() != "(":
            return BinTree(value)
        position += 1
        left = read()
        if kind() != ",":
            if kind() == ")":
                position += 1
            return BinTree(value, left)
        position += 1
        right = read()
        if kind() == ")":
            position += 1
        return BinTree(value, left, right)

    return read()


# Postorder format ----------------------------------------------------------


def _postorder_nodes(tree: Tree) -> Iterator[BinTree]:
    if tree is None:
        return
    yield from _postorder_nodes(tree.left)
    yield from _postorder_nodes(tree.right)
    yield tree


def _children_code(node: BinTree) -> int:
    if node.left is None and node.right is None:
        return 0
    if node.left is None:
        return 1
    if node.right is None:
        return -1
    return 2


def to_postorder(tree: Tree) -> str:
    """Write the node count, then one ``value code`` line per node in postorder."""
    lines = [str(_tree_size(tree))]
    lines.extend(f"{node.value} {_children_code(node)}" for node in _postorder_nodes(tree))
    return "\n".join(lines) + "\n"


def from_postorder(text: str, convert: Converter = str) -> Tree:
    """Read a tree written by :func:`to_postorder`."""
    words = iter(text.split())

    def next_word() -> str:
        try:
            return next(words)
        except StopIteration:
            raise TreeFormatError("unexpected end of postorder input") from None

    def next_int() -> int:
        word = next_word()
        try:
            return int(word)
        except ValueError:
            raise TreeFormatError(f"expected an integer, got {word!r}") from None

    stack: list[BinTree] = []

    def pop() -> BinTree:
        if not stack:
            raise TreeFormatError("postorder input refers to a missing subtree")
        return stack.pop()

    for _ in range(next_int()):
        value = _convert(next_word(), convert)
        code = next_int()
        if code == 0:
            stack.append(BinTree(value))
        elif code == -1:
            stack.append(BinTree(value, left=pop()))
        elif code == 1:
            stack.append(BinTree(value, right=pop()))
        else:
            right = pop()
            left = pop()
            stack.append(BinTree(value, left, right))
    return stack[-1] if stack else None


# Left visual format --------------------------------------------------------


def _left_visual_lines(tree: Tree) -> list[str]:
    if tree is None:
        return ["."]
    root = _value_to_string(tree.value)
    left = _left_visual_lines(tree.left)
    right = _left_visual_lines(tree.right)
    result = [f"[{root}]"]
    result.extend((" \\__" if i == 0 else " |  ") + line for i, line in enumerate(right))
    result.extend((" \\__" if i == 0 else "    ") + line for i, line in enumerate(left))
    return result


def to_left_visual(tree: Tree) -> str:
    """Draw a tree sideways: the right subtree first, then the left one."""
    return "\n".join(_left_visual_lines(tree))


def from_left_visual(text: str, convert: Converter = str) -> Tree:
    """Read a tree drawn by :func:`to_left_visual`."""
    lines = iter(text.splitlines())

    def read(column: int) -> Tree:
        line = next(lines, "")
        if column > len(line):
            raise TreeFormatError("wrong format for input tree")
        body = line[column:]
        if body == ".":
            return None
        if not body or body[0] != "[" or body[-1] != "]":
            raise TreeFormatError("wrong format for input tree")
        value = _string_to_value(body[1:-1], convert)
        right = read(column + 4)
        left = read(column + 4)
        return BinTree(value, left, right)

    return read(0)


# Visual format -------------------------------------------------------------


def _merge_lines(left: list[str], right: list[str]) -> Iterator[str]:
    for left_line, right_line in itertools.zip_longest(left, right):
        if right_line is None:
            yield left_line
        elif left_line is None:
            yield right_line
        else:
            width = max(len(left_line), len(right_line))
            a = left_line.ljust(width)
            b = right_line.ljust(width)
            yield "".join(x if x != " " else y for x, y in zip(a, b))


def _visual_lines(tree: Tree) -> list[str]:
    if tree is None:
        return []
    root = _value_to_string(tree.value)
    relative = (len(root) - 1) // 2
    left = _visual_lines(tree.left)
    left_pos = _root_position(left[0]) if left else 0
    right = _visual_lines(tree.right)
    right_pos = _root_position(right[0]) if right else 0

    if not left and not right:
        return [root]

    if not left:
        root_pos = right_pos - MIN_HYPHENS_DESCENDANT - 1
        if root_pos < relative:
            shift = relative - root_pos
            right = _indent(right, shift)
            right_pos += shift
            root_pos = relative
        return [
            " " * (root_pos - relative) + root,
            " " * root_pos + "|",
            " " * (root_pos + 1) + "-" * (right_pos - root_pos - 1),
            " " * right_pos + "|",
            *right,
        ]

    if not right:
        root_pos = left_pos + MIN_HYPHENS_DESCENDANT + 1
        if root_pos < relative:
            shift = relative - root_pos
            left = _indent(left, shift)
            left_pos += shift
            root_pos = relative
        return [
            " " * (root_pos - relative) + root,
            " " * root_pos + "|",
            " " * (left_pos + 1) + "-" * max(0, root_pos - left_pos - 1),
            " " * left_pos + "|",
            *left,
        ]

    add_space = left_pos + 2 + 2 * MIN_HYPHENS_DESCENDANT - right_pos
    for left_line, right_line in zip(left, right):
        add_space = max(
            add_space,
            len(left_line) - _first_non_blank(right_line) + MIN_SPACE_BETWEEN_SUBTREES,
        )
    if (right_pos + add_space - left_pos) % 2 == 1:
        add_space += 1
    if add_space > 0:
        right = _indent(right, add_space)
        right_pos += add_space
    elif add_space < 0:
        left = _indent(left, -add_space)
        left_pos -= add_space

    root_pos = (left_pos + right_pos) // 2
    if root_pos < relative:
        shift = relative - root_pos
        left = _indent(left, shift)
        right = _indent(right, shift)
        left_pos += shift
        right_pos += shift
        root_pos = relative

    return [
        " " * (root_pos - relative) + root,
        " " * root_pos + "|",
        " " * (left_pos + 1)
        + "-" * (root_pos - left_pos - 1)
        + " "
        + "-" * max(0, right_pos - root_pos - 1),
        " " * left_pos + "|" + " " * (right_pos - left_pos - 1) + "|",
        *_merge_lines(left, right),
    ]


def to_visual(tree: Tree) -> str:
    """Draw a tree top-down with the root centred over its subtrees."""
    return "\n".join([*_visual_lines(tree), ""])


def from_visual(text: str, convert: Converter = str) -> Tree:
    """Read a tree drawn by :func:`to_visual`, stopping at the first empty line."""
    lines = list(itertools.takewhile(lambda line: line != "", text.splitlines()))
    if not lines:
        return None

    def read(row: int, column: int) -> Tree:
        if (
            row < 0
            or row >= len(lines)
            or column < 0
            or column >= len(lines[row])
            or lines[row][column] == " "
        ):
            return None
        line = lines[row]
        start = column
        while start > 0 and line[start - 1] != " ":
            start -= 1
        end = column
        while end + 1 < len(line) and line[end + 1] != " ":
            end += 1
        value = _string_to_value(line[start : end + 1], convert)
        if row + 1 >= len(lines):
            return BinTree(value)
        below = lines[row + 1]
        down = start
        while down < len(below) and down <= end and below[down] == " ":
            down += 1
        if down >= len(below) or down > end:
            return BinTree(value)
        _require(below[down] == "|")
        _require(row + 3 < len(lines))
        branches = lines[row + 2]
        stems = lines[row + 3]

        left = None
        col = down - 1
        if 0 <= col < len(branches) and branches[col] == "-":
            while col >= 0 and branches[col] == "-":
                col -= 1
            _require(0 <= col < len(stems) and stems[col] == "|")
            left = read(row + 4, col)

        right = None
        col = down + 1
        if col < len(branches) and branches[col] == "-":
            while 0 <= col < len(branches) and branches[col] == "-":
                col += 1
            _require(0 <= col < len(stems) and stems[col] == "|")
            right = read(row + 4, col)

        return BinTree(value, left, right)

    return read(0, _first_non_blank(lines[0]))


# Dispatch ------------------------------------------------------------------


def _as_format(fmt: Any) -> TreeFormat:
    try:
        return TreeFormat(fmt)
    except ValueError:
        raise TreeFormatError(f"wrong tree format: {fmt!r}") from None


def format_tree(tree: Tree, fmt: TreeFormat = TreeFormat.INLINE) -> str:
    """Write a tree in the given format."""
    writers = {
        TreeFormat.INLINE: to_inline,
        TreeFormat.POSTORDER: to_postorder,
        TreeFormat.LEFT_VISUAL: to_left_visual,
        TreeFormat.VISUAL: to_visual,
    }
    return writers[_as_format(fmt)](tree)


def parse_tree(
    text: str, fmt: TreeFormat = TreeFormat.INLINE, convert: Converter = str
) -> Tree:
    """Read a tree in the given format, converting each value with ``convert``."""
    readers = {
        TreeFormat.INLINE: from_inline,
        TreeFormat.POSTORDER: from_postorder,
        TreeFormat.LEFT_VISUAL: from_left_visual,
        TreeFormat.VISUAL: from_visual,
    }
    return readers[_as_format(fmt)](text, convert)