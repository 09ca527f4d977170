"""
Help-text helpers: find the usage block and the option descriptions in a docstring.

Example document

    Naval Fate.

    Usage:
      naval_fate ship <name> move <x> <y> [--speed=<kn>]
      naval_fate -h | --help

    Options:
      -h --help     Show this screen.
      --speed=<kn>  Speed in knots [default: 10].

- printable_usage(doc) → the "Usage:" block, up to the first blank line.
- formal_usage(printable) → "( ship <name> ... ) | ( -h | --help )".
- parse_doc_options(doc) → [Option('-h', '--help', 0, False), Option(None, '--speed', 1, '10')].
"""
import re

from .faults import *
from .patterns import Option


def printable_usage(doc):
    """
    Return the usage block of ``doc`` (case-insensitive "usage:" up to the first blank line).
    """
    split = re.split(r"(usage:)", doc, flags=re.IGNORECASE)
    if len(split) < 3:
        raise MissingUsageError(
            '"usage:" (case-insensitive) not found.',
            hint='start the usage block with "Usage:"',
        )
    elif len(split) > 3:
        raise DuplicatedUsageError(
            'More than one "usage:" (case-insensitive).',
            hint='keep a single "Usage:" block',
        )
    return re.split(r"\n\s*\n", "".join(split[1:]))[0].strip()


def formal_usage(printable):
    """
    Turn a printable usage block into one grammar line, one group per program mention.
    """
    words = printable.split()[1:]  # drop "usage:"
    if not words:
        return "(  )"
    program, *words = words
    return "( " + " ".join(") | (" if word == program else word for word in words) + " )"


def parse_doc_options(doc):
    """
    Parse every option description of ``doc`` (lines starting with "-", leading spaces allowed).
    """
    return [Option.parse("-" + chunk) for chunk in re.split(r"^ *-|\n *-", doc)[1:]]


__all__ = (
    "printable_usage",
    "formal_usage",
    "parse_doc_options",
)
