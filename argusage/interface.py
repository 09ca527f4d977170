"""
Argusage entry point: derive a command-line parser from a help text.

What this module provides
- docopt(doc, argv, ...): parse the usage and option descriptions of ``doc``,
  resolve ``argv`` against them and return {name: value} for every declared
  argument, command and option.
- extras(...): --help / --version handling.

Pipeline
1. printable_usage(doc) / parse_doc_options(doc)          (argusage.usage)
2. parse_pattern(formal_usage(usage), options)            (argusage.grammar)
3. parse_argv(argv, options, options_first)               (argusage.argv)
4. extras(help, version, observed, doc)
5. pattern.fix().match(observed)                          (argusage.patterns)
6. result = declared options, then pattern leaves, then matched leaves (later wins)

Faults
- malformed usage text raises a LanguageError, whatever the runtime flags.
- bad input raises an InputError; with shell=True it is rendered to stderr
  together with the usage and the process exits with status 1.

Quick start
    \"\"\"Naval Fate.

    Usage:
      naval_fate ship <name> move <x> <y> [--speed=<kn>]
      naval_fate -h | --help

    Options:
      -h --help     Show this screen.
      --speed=<kn>  Speed in knots [default: 10].
    \"\"\"
    from argusage import docopt

    if __name__ == "__main__":
        arguments = docopt(__doc__, shell=True, colorful=True)
"""
import shlex
import sys
from collections.abc import Iterable

from rich.console import Console
from rich.text import Text

from .argv import parse_argv
from .faults import *
from .grammar import parse_pattern
from .usage import formal_usage, parse_doc_options, printable_usage
from .utils import Unset, coalesce


def _tokenize(argv):
    """
    Normalize argv into a list of strings.

    - Unset: sys.argv[1:].
    - str: shell-like string, split via shlex.split.
    - Iterable[str]: taken item by item (each must be a string).
    """
    argv = coalesce(argv, sys.argv[1:])
    if isinstance(argv, str):
        return shlex.split(argv)
    elif isinstance(argv, Iterable):
        tokens = list(argv)
        if not all(isinstance(token, str) for token in tokens):
            raise TypeError("docopt() argv must be a string or an iterable of strings")
        return tokens
    raise TypeError("docopt() argv must be a string or an iterable of strings")


def extras(help, version, observed, doc, /, *, colorful=False):
    """
    Print the help text or the version and exit when they were asked for.

    - help: honor -h/--help when true.
    - version: printed on --version when not Unset.
    """
    console = Console(highlight=colorful, no_color=not colorful)
    if help and any(leaf.name in ("-h", "--help") and leaf.value for leaf in observed):
        console.print(Text(doc.strip("\n")), soft_wrap=True)
        sys.exit()
    if version is not Unset and any(leaf.name == "--version" and leaf.value for leaf in observed):
        console.print(Text(str(version)), soft_wrap=True)
        sys.exit()


def docopt(doc, argv=Unset, /, *, help=True, version=Unset, options_first=False, shell=False, colorful=False, fancy=False):
    """
    Parse ``argv`` according to the usage described in ``doc``.

    Parameters
    - doc: str
      help text holding a "Usage:" block and, optionally, option descriptions.
    - argv: Unset | str | Iterable[str]
      tokens to parse; Unset reads sys.argv[1:], a string is split with shlex.
    - help: bool
      print ``doc`` and exit on -h/--help.
    - version: Unset | object
      printed on --version (then exit) when provided.
    - options_first: bool
      stop reading options at the first positional (for sub-command dispatch).
    - shell, colorful, fancy: bool
      runtime flags for input errors (render and exit instead of raising).

    Returns
    - dict[str, object]: every declared leaf name mapped to its value.

    Raises
    - LanguageError: the usage text is malformed.
    - InputError: argv does not fit the usage (only when shell is False).
    """
    if not isinstance(doc, str):
        raise TypeError("docopt() first argument must be a string")

    usage = printable_usage(doc)
    options = parse_doc_options(doc)
    pattern = parse_pattern(formal_usage(usage), options)
    context = {"usage": usage, "shell": shell, "colorful": colorful, "fancy": fancy}

    try:
        observed = parse_argv(_tokenize(argv), options, options_first=options_first)
    except InputError as error:
        trigger(error, **context)

    extras(help, version, observed, doc, colorful=colorful)

    matched, left, collected = pattern.fix().match(observed)
    if not matched:
        trigger(UsageMismatchError(
            "input does not match the usage",
            hint="compare the arguments with the usage below",
        ), **context)
    elif left:
        trigger(UnparsedTokensError(
            "unexpected input: %s" % " ".join(str(leaf.value if leaf.name is None else leaf.name) for leaf in left),
            leftover=left,
            hint="remove the extra inputs or compare them with the usage below",
        ), **context)

    return {leaf.name: leaf.value for leaf in options + pattern.flat + collected}


__all__ = (
    "docopt",
    "extras",
)
