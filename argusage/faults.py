"""
Argusage faults (language and input errors) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every surfaced issue.
  Codes are grouped by domain to keep copy consistent and make logs/searches
  predictable.
- ParseException: base type that carries message + options and knows how to
  render itself in a friendly, lowercased, and actionable way.
- LanguageError / InputError: the two disjoint taxonomies.
  • LanguageError: the usage text itself is malformed (the program author's
    mistake). Always raised, whatever the runtime flags say.
  • InputError: argv does not satisfy an otherwise well-formed usage (the
    user's mistake). Raised, or rendered with the usage and exited in shell mode.
- trigger(): central entry point to surface any fault.
- getdoc(): optional description lookup for a code from the host application.

Integration
- The grammar/argv layers raise faults directly; docopt() routes input faults through
  trigger(fault, **ctx) so the runtime flags (shell/colorful/fancy) and the
  printable usage are attached before surfacing.
"""
import os.path
import sys
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping (by high-level domain)
    - input errors (111xx)
      • UNKNOWN_SWITCH, FLAG_ASSIGNMENT, OPTION_VALUE_REQUIRED, AMBIGUOUS_SWITCH,
        UNPARSED_TOKENS, USAGE_MISMATCH
    - language errors (131xx)
      • MISSING_USAGE, DUPLICATED_USAGE, UNMATCHED_BRACKET, UNEXPECTED_ENDING,
        AMBIGUOUS_DECLARATION, OPTION_REQUIRES_ARGUMENT, OPTION_FORBIDS_ARGUMENT

    spacing leaves room for future additions without reshuffling existing codes.
    """
    # --- input errors (11xxx) ---
    UNKNOWN_SWITCH              = 11112
    FLAG_ASSIGNMENT             = 11113
    OPTION_VALUE_REQUIRED       = 11117
    AMBIGUOUS_SWITCH            = 11119
    UNPARSED_TOKENS             = 11141
    USAGE_MISMATCH              = 11142

    # --- language errors (13xxx) ---
    MISSING_USAGE               = 13101
    DUPLICATED_USAGE            = 13102
    UNMATCHED_BRACKET           = 13111
    UNEXPECTED_ENDING           = 13112
    AMBIGUOUS_DECLARATION       = 13121
    OPTION_REQUIRES_ARGUMENT    = 13122
    OPTION_FORBIDS_ARGUMENT     = 13123

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class ParseException(Exception):
    """
    base fault: a message plus read-only options.

    recognized options
    - code, title, hint: override the class defaults shown in the header/footer.
    - usage: printable usage block appended to the rendering.
    - prog: program name for the header (a __prog__ in __main__ wins).
    - shell, colorful, fancy: runtime flags (see __trigger__ and __rich__).
    """
    __code__ = Unset
    __title__ = "parse error"
    __palette__ = {}

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        self.message = message
        self.options = MappingProxyType(options)

    @property
    def code(self):
        return self.options.get("code", type(self).__code__)

    @property
    def title(self):
        return self.options.get("title", type(self).__title__)

    @property
    def hint(self):
        return self.options.get("hint", "")

    def __rich__(self):
        main = __import__("__main__")
        colorful = self.options.get("colorful", False)
        fancy = self.options.get("fancy", False)

        styles = defaultdict(str, {
            "prog-name": "bold #E6E6F0",  # near-white program name
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
            "usage": "#8A8FA3",  # slate usage block
        } | type(self).__palette__ | getattr(main, "__styles__", {}))

        def styler(style):
            return styles[style] if colorful else ""

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if not colorful:
                return Text(str(fragment))
            if isinstance(fragment, Text):
                return fragment
            return Text(str(fragment), style)

        prog = getattr(main, "__prog__", self.options.get("prog") or os.path.basename(sys.argv[0]))
        code = self.code.normalize() if isinstance(self.code, FaultCode) else "-"

        header = Text.assemble(
            "[ ",
            text(prog, styler("prog-name")),
            " — ",
            text(code, styler("code")),
            " | ",
            text(self.title.title(), styler("title")),
            " ]"
        )
        renders = [text(self.message, styler("message"))]
        if self.hint:
            renders.append(Text.assemble(text(" → ", styler("hint-arrow")), text(self.hint, styler("hint"))))
        if self.options.get("usage"):
            renders.append(text(self.options["usage"], styler("usage")))

        if fancy:
            return Panel(Group(*renders), title=header, title_align="left")

        return Group(header, *renders)

    def __trigger__(self):
        raise self from None

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class LanguageError(ParseException):
    """
    the usage text is malformed; it is a bug in the program, never in its input.
    """
    __title__ = "malformed usage"
    __palette__ = {
        "code": "bold #FFB400",  # amber fault code
        "title": "bold #FF7A45",  # orange title
        "message": "#D6D6DE",
    }

    def __trigger__(self):
        # raised even in shell mode
        raise self from None


class MissingUsageError(LanguageError):
    __code__ = FaultCode.MISSING_USAGE
    __title__ = "missing usage"


class DuplicatedUsageError(LanguageError):
    __code__ = FaultCode.DUPLICATED_USAGE
    __title__ = "duplicated usage"


class UnmatchedBracketError(LanguageError):
    __code__ = FaultCode.UNMATCHED_BRACKET
    __title__ = "unmatched bracket"


class UnexpectedEndingError(LanguageError):
    __code__ = FaultCode.UNEXPECTED_ENDING
    __title__ = "unexpected ending"


class AmbiguousDeclarationError(LanguageError):
    __code__ = FaultCode.AMBIGUOUS_DECLARATION
    __title__ = "ambiguous declaration"


class InconsistentOptionError(LanguageError):
    __title__ = "inconsistent option"


class MissingOptionValueError(InconsistentOptionError):
    __code__ = FaultCode.OPTION_REQUIRES_ARGUMENT


class UnexpectedOptionValueError(InconsistentOptionError):
    __code__ = FaultCode.OPTION_FORBIDS_ARGUMENT


class InputError(ParseException):
    """
    argv does not fit the usage; the caller usually prints the usage and exits.
    """
    __title__ = "bad input"
    __palette__ = {
        "code": "bold #00E5FF",  # neon cyan fault code
        "title": "bold #FF4DA6",  # friendly pinky title
        "message": "#C8C8D0",
    }

    def __trigger__(self):
        if not self.options.get("shell", False):
            raise self from None
        console.print(self)
        sys.exit(1)


class UnknownSwitchError(InputError):
    __code__ = FaultCode.UNKNOWN_SWITCH
    __title__ = "unknown option"


class AmbiguousSwitchError(InputError):
    __code__ = FaultCode.AMBIGUOUS_SWITCH
    __title__ = "ambiguous option"


class OptionValueRequiredError(InputError):
    __code__ = FaultCode.OPTION_VALUE_REQUIRED
    __title__ = "option value required"


class FlagAssignmentError(InputError):
    __code__ = FaultCode.FLAG_ASSIGNMENT
    __title__ = "option cannot take a value"


class UsageMismatchError(InputError):
    __code__ = FaultCode.USAGE_MISMATCH
    __title__ = "usage mismatch"


class UnparsedTokensError(InputError):
    __code__ = FaultCode.UNPARSED_TOKENS
    __title__ = "unparsed input"


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see ParseException).
    - options are merged into the fault via __replace__(**options) before triggering.
    - input errors in shell mode are rendered via the rich console and exit(1);
      everything else is raised.
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    fault.__replace__(**options).__trigger__()


def getdoc(code, /):
    """
    optional documentation fetch for a fault code.

    the host application may expose a __docs__ mapping in __main__ where keys
    are FaultCode instances and values are short documentation strings.
    when not found, returns None.
    """
    if not isinstance(code, FaultCode):
        raise TypeError("getdoc() argument must be a fault-code")
    try:
        return getattr(__import__("__main__"), "__docs__", {})[code]
    except KeyError:
        return None


__all__ = (
    "FaultCode",
    "ParseException",
    "LanguageError",
    "MissingUsageError",
    "DuplicatedUsageError",
    "UnmatchedBracketError",
    "UnexpectedEndingError",
    "AmbiguousDeclarationError",
    "InconsistentOptionError",
    "MissingOptionValueError",
    "UnexpectedOptionValueError",
    "InputError",
    "UnknownSwitchError",
    "AmbiguousSwitchError",
    "OptionValueRequiredError",
    "FlagAssignmentError",
    "UsageMismatchError",
    "UnparsedTokensError",
    "trigger",
    "getdoc",
)
