"""
Command-line resolver: raw argv tokens to observed leaves.

parse_argv(tokens, options, options_first=False) returns a flat list where
options are resolved copies of the declared ones (carrying their observed
value) and everything else is Argument(None, token), in order.
"""
from .patterns import Argument
from .tokens import TokenStream, parse_long, parse_shorts


def parse_argv(source, options, options_first=False):
    """
    Resolve argv tokens against the declared options.

    - "--" ends option scanning; it and every later token are positionals.
    - "--name[=value]" is a long option (unique prefixes are accepted).
    - "-abc" is a cluster of short options; "-" alone is a positional.
    - with options_first, the first positional also ends option scanning.
    """
    tokens = TokenStream(source, strict=True)
    parsed = []
    while tokens.current is not None:
        if tokens.current == "--":
            return parsed + [Argument(None, token) for token in tokens]
        elif tokens.current.startswith("--"):
            parsed += parse_long(tokens, options)
        elif tokens.current.startswith("-") and tokens.current != "-":
            parsed += parse_shorts(tokens, options)
        elif options_first:
            return parsed + [Argument(None, token) for token in tokens]
        else:
            parsed.append(Argument(None, tokens.move()))
    return parsed


__all__ = (
    "parse_argv",
)
