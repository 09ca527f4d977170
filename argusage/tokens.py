"""
Token streams and option resolution shared by the grammar and argv layers.

Both the usage grammar and the command line spell options the same way
(``--long``, ``--long=value``, ``-abc``, ``-ovalue``), so both are resolved
here against the declared options. The stream decides which fault family
applies:

- strict (argv): unknown options are rejected, unique long prefixes are
  accepted, resolved options carry the observed value, and failures are
  InputError subclasses.
- lenient (grammar): unknown options are declared on the fly, resolved
  options keep their declared default, and failures are LanguageError
  subclasses.
"""
from .faults import *
from .patterns import Option


_PUNCTUATION = frozenset(("(", ")", "[", "]", "|", "..."))


class TokenStream(list):
    """
    A consumable list of tokens.

    A string source is split on whitespace; any other iterable is taken as-is.
    """

    def __init__(self, source, /, *, strict=False):
        if isinstance(source, str):
            source = source.split()
        super().__init__(source or ())
        self.strict = strict

    @property
    def current(self):
        return self[0] if self else None

    def move(self):
        return self.pop(0) if self else None

    @property
    def exhausted(self):
        """
        True when the head of the stream cannot be taken as an option value.

        Grammar punctuation never counts as a value in lenient mode.
        """
        return self.current is None or not self.strict and self.current in _PUNCTUATION

    def fault(self, input, language, message, /, **options):
        """
        Build the strict (input) or lenient (language) flavor of one failure.
        """
        return (input if self.strict else language)(message, **options)


def parse_long(tokens, options):
    """
    Resolve ``--name`` or ``--name=value`` at the head of the stream.

    Returns a one-element list with the resolved option.
    """
    raw, eq, value = tokens.move().partition("=")
    value = value if eq else None

    similar = [option for option in options if option.long and option.long == raw]
    if tokens.strict and not similar:
        similar = [option for option in options if option.long and option.long.startswith(raw)]

    if not similar:
        if tokens.strict:
            raise UnknownSwitchError(
                "%s is not recognized" % raw,
                input=raw,
                hint="check the spelling of %r against the usage below" % raw,
            )
        option = Option(None, raw, 1 if eq else 0)
        options.append(option)
        return [option]
    elif len(similar) > 1:
        raise tokens.fault(
            AmbiguousSwitchError,
            AmbiguousDeclarationError,
            "%s is not a unique prefix: %s?" % (raw, ", ".join(option.long for option in similar)),
            input=raw,
            hint="spell out one of %s" % ", ".join(option.long for option in similar),
        )

    declared = similar[0]
    option = Option(declared.short, declared.long, declared.argcount, declared.value)
    if option.argcount == 1:
        if value is None:
            if tokens.exhausted:
                raise tokens.fault(
                    OptionValueRequiredError,
                    MissingOptionValueError,
                    "%s requires argument" % option.name,
                    input=option.name,
                    hint="add a value (for example: %s=<value>)" % option.name,
                )
            value = tokens.move()
    elif value is not None:
        raise tokens.fault(
            FlagAssignmentError,
            UnexpectedOptionValueError,
            "%s must not have an argument" % option.name,
            input=option.name,
            hint="remove everything from '=' (for example: %s)" % option.name,
        )

    if tokens.strict:
        option.value = True if value is None else value
    return [option]


def parse_shorts(tokens, options):
    """
    Resolve a cluster of short options (``-abc``, ``-ofile``) at the head of the stream.

    Each character is one option; a value-taking option swallows the rest of
    the cluster, or the next token when the cluster ends with it.
    """
    left = tokens.move()[1:]
    parsed = []
    while left:
        short, left = "-" + left[0], left[1:]
        similar = [option for option in options if option.short == short]

        if len(similar) > 1:
            raise tokens.fault(
                AmbiguousSwitchError,
                AmbiguousDeclarationError,
                "%s is specified ambiguously %d times" % (short, len(similar)),
                input=short,
            )
        elif not similar:
            if tokens.strict:
                raise UnknownSwitchError(
                    "%s is not recognized" % short,
                    input=short,
                    hint="check the spelling of %r against the usage below" % short,
                )
            option = Option(short, None, 0)
            options.append(option)
            parsed.append(option)
            continue

        declared = similar[0]
        option = Option(declared.short, declared.long, declared.argcount, declared.value)
        value = True
        if option.argcount:
            if not left:
                if tokens.exhausted:
                    raise tokens.fault(
                        OptionValueRequiredError,
                        MissingOptionValueError,
                        "%s requires argument" % short,
                        input=short,
                        hint="add a value (for example: %s <value>)" % short,
                    )
                left = tokens.move()
            value, left = left, ""

        if tokens.strict:
            option.value = value
        parsed.append(option)
    return parsed


__all__ = (
    "TokenStream",
    "parse_long",
    "parse_shorts",
)
