"""Command line front end: a tree menu, the largest contiguous sum, quicksort."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator
from typing import TextIO

from algobox.bst import BinarySearchTree
from algobox.search import max_subarray_sum
from algobox.sorting import quick_sort

_MENU = (
    "\n1.For insert\n2.For searching.\n3.Find min and max.\n4.Find height."
    "\n5.In Order Traversal\n6.Pre Order Traversal\n7.Post Order Traversal\n8.Exit  "
)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int | None:
    token = next(tokens, None)
    if token is None:
        return None
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"not an integer: {token!r}") from None


def _run_tree_menu(stream: TextIO, write: Callable[[str], object]) -> None:
    tree = BinarySearchTree()
    tokens = _tokens(stream)
    write("\n********* Binary Search Tree ********\n")
    while True:
        write(_MENU)
        choice = _read_int(tokens)
        if choice is None or choice == 8:
            return
        if choice == 1:
            write("Enter a value: ")
            value = _read_int(tokens)
            if value is None:
                return
            tree.insert(value)
        elif choice == 2:
            write("Enter the value to search for: ")
            value = _read_int(tokens)
            if value is None:
                return
            write("\nElement Found!\n" if value in tree else "\nElement not found.\n")
        elif choice == 3:
            try:
                write(f"\nThe max element in the tree is {tree.maximum()}.\n")
                write(f"The min element in the tree is {tree.minimum()}.\n")
            except ValueError:
                write("\nTree is empty.\n")
        elif choice == 4:
            write(f"\nThe height of root node is: {tree.height()}.\n")
        elif choice in (5, 6, 7):
            traversal = {5: tree.inorder, 6: tree.preorder, 7: tree.postorder}[choice]
            write("".join(f" {value} " for value in traversal()))
        else:
            write("\nWrong Choice!")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="algobox")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("bst", help="interactive binary search tree menu on stdin")
    kadane = commands.add_parser("kadane", help="largest sum of a contiguous run")
    kadane.add_argument("values", nargs="*", type=int)
    quick = commands.add_parser("quicksort", help="sort integers with quicksort")
    quick.add_argument("values", nargs="*", type=int)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command named in ``argv`` and return the exit status."""
    args = _build_parser().parse_args(argv)
    out = sys.stdout
    if args.command == "kadane":
        out.write(
            f"Maximum Sum of Contiguous Subarray is: {max_subarray_sum(args.values)}\n"
        )
    elif args.command == "quicksort":
        out.write(
            "Array after sorting:"
            + "".join(f"{value} " for value in quick_sort(args.values))
            + "\n"
        )
    else:
        try:
            _run_tree_menu(sys.stdin, out.write)
        except ValueError as error:
            print(f"algobox: {error}", file=sys.stderr)
            return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())