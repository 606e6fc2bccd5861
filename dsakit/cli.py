"""Command line front end for the linked-list search, length and dedupe tools."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence

from dsakit.linked_list import (
    contains,
    format_list,
    from_iterable,
    length,
    remove_sorted_duplicates,
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dsakit",
        description=(
            "Linked-list tools. Values come from the command line or, when none "
            "are given, from standard input as a count followed by that many values."
        ),
    )
    commands = parser.add_subparsers(dest="command", required=True)

    length_cmd = commands.add_parser("length", help="count the nodes of a list")
    length_cmd.add_argument("values", nargs="*", type=int)

    search_cmd = commands.add_parser("search", help="check whether a value is in a list")
    search_cmd.add_argument("values", nargs="*", type=int)
    search_cmd.add_argument(
        "-k", "--key", type=int,
        help="value to look for; read after the values from stdin when omitted",
    )

    dedupe_cmd = commands.add_parser("dedupe", help="drop repeats from a sorted list")
    dedupe_cmd.add_argument("values", nargs="*", type=int)
    return parser


class _StdinValues:
    """Integers read one by one from whitespace-separated standard input."""

    def __init__(self, parser: argparse.ArgumentParser) -> None:
        self._parser = parser
        self._tokens: Iterator[str] = iter(sys.stdin.read().split())

    def next_int(self, what: str) -> int:
        token = next(self._tokens, None)
        if token is None:
            self._parser.error(f"missing {what} on standard input")
        try:
            return int(token)
        except ValueError:
            self._parser.error(f"invalid {what} on standard input: {token!r}")

    def values(self) -> list[int]:
        count = self.next_int("number of nodes")
        if count < 0:
            self._parser.error(f"number of nodes must not be negative, got {count}")
        return [self.next_int("element") for _ in range(count)]


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command named in ``argv`` and print its result."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    values: list[int] = args.values
    key = getattr(args, "key", None)
    if not values:
        reader = _StdinValues(parser)
        values = reader.values()
        if args.command == "search" and key is None:
            key = reader.next_int("element to search")
    elif args.command == "search" and key is None:
        parser.error("--key is required when values are given")

    head = from_iterable(values)
    if args.command == "length":
        print(f"Length of Linked List: {length(head)}")
    elif args.command == "search":
        if contains(head, key):
            print("Element found in the linked list.")
        else:
            print("Element not found in the linked list.")
    else:
        print("Linked List after removing duplicates:")
        print(format_list(remove_sorted_duplicates(head)))
    return 0


if __name__ == "__main__":
    sys.exit(main())