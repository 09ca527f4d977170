"""
Usage grammar: tokenizer and recursive-descent parser.

Grammar (one formal usage line, e.g. "( [-v] FILE ) | ( --version )")

    expr ::= seq ( "|" seq )*
    seq  ::= ( atom [ "..." ] )*
    atom ::= "(" expr ")" | "[" expr "]" | "options"
           | long-option | short-options | argument | command

Resulting tree
- parse_pattern() always returns a Required root.
- a seq of two or more atoms becomes Required when it is one alternative of several.
- two or more alternatives become one Either; a single one is returned as is.
- an atom followed by "..." becomes OneOrMore.
- "options" expands in place to every declared option.
"""
import re

from .faults import *
from .patterns import Argument, Command, Either, OneOrMore, Optional, Required
from .tokens import TokenStream, parse_long, parse_shorts


def tokenize_pattern(source):
    """
    Split a formal usage string into grammar tokens (brackets, bars and ellipses stand alone).
    """
    return TokenStream(re.sub(r"([\[\]()|]|\.\.\.)", r" \1 ", source), strict=False)


def parse_pattern(source, options):
    """
    Compile a formal usage string into a Required-rooted pattern tree.

    ``options`` is the list of declared options; options that the usage
    mentions without declaring them are appended to it.
    """
    tokens = tokenize_pattern(source)
    result = parse_expr(tokens, options)
    if tokens.current is not None:
        raise UnexpectedEndingError(
            "unexpected ending: %r" % " ".join(tokens),
            hint="check that every ')' and ']' closes a group opened before it",
        )
    return Required(*result)


def parse_expr(tokens, options):
    seq = parse_seq(tokens, options)
    if tokens.current != "|":
        return seq
    result = [Required(*seq)] if len(seq) > 1 else seq
    while tokens.current == "|":
        tokens.move()
        seq = parse_seq(tokens, options)
        result += [Required(*seq)] if len(seq) > 1 else seq
    return [Either(*result)] if len(result) > 1 else result


def parse_seq(tokens, options):
    result = []
    while tokens.current not in (None, "]", ")", "|"):
        atom = parse_atom(tokens, options)
        if tokens.current == "...":
            atom = [OneOrMore(*atom)]
            tokens.move()
        result += atom
    return result


def parse_atom(tokens, options):
    token = tokens.current
    if token in ("(", "["):
        tokens.move()
        closer, pattern = {"(": (")", Required), "[": ("]", Optional)}[token]
        result = pattern(*parse_expr(tokens, options))
        if tokens.move() != closer:
            raise UnmatchedBracketError(
                "unmatched %r" % token,
                hint="close the group with %r" % closer,
            )
        return [result]
    elif token == "options":
        tokens.move()
        return options
    elif token.startswith("--") and token != "--":
        return parse_long(tokens, options)
    elif token.startswith("-") and token not in ("-", "--"):
        return parse_shorts(tokens, options)
    elif token.startswith("<") and token.endswith(">") or token.isupper():
        return [Argument(tokens.move())]
    else:
        return [Command(tokens.move())]


__all__ = (
    "tokenize_pattern",
    "parse_pattern",
    "parse_expr",
    "parse_seq",
    "parse_atom",
)
