"""Argument helpers for command handlers."""

from typing import List


def parse_arguments(args: str) -> List[str]:
    """Split a command's argument text on whitespace.

    Empty or whitespace-only text yields an empty list.
    """
    return args.split()
