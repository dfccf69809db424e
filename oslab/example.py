"""Walk-through of tree insertion and deletion that renders each step."""

from __future__ import annotations

from typing import Optional, Sequence

from oslab.data import Record, compare_records, format_char
from oslab.rbtree import RBTree

LETTERS = "REDSOXCUBT"


def run_example() -> str:
    """Insert letters, delete one, then drain by minimum; return the rendered log."""
    tree = RBTree(compare_records, None)
    out: list[str] = []

    for letter in LETTERS:
        tree.insert(Record(ord(letter)))
        out.append(f"insert {letter}")
        out.append(tree.format(format_char))
        out.append("\n")

    query = Record(ord("O"))
    out.append(f"delete {format_char(query)}")
    node = tree.find(query)
    if node is not None:
        tree.delete(node)
    out.append(tree.format(format_char))

    while (node := tree.minimal()) is not None:
        out.append("\ndelete " + format_char(node.data))
        tree.delete(node)
        out.append(tree.format(format_char))

    tree.clear()
    return "".join(out)


def main(argv: Optional[Sequence[str]] = None) -> int:
    print(run_example(), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())