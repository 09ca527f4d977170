r"""
Argusage pattern algebra: the grammar tree, its matcher and its fixer.

Overview
- Leaves (one observable token kind each)
  • Argument(name, value): positional value, e.g. <file> or FILE.
  • Command(name, value): literal word, e.g. add; value is a bool or a count.
  • Option(short, long, argcount, value): -o/--output, with or without a value.

- Branches (children combined under a rule)
  • Required(*children): all children, in order.
  • Optional(*children): every child is attempted, none is needed.
  • OneOrMore(child): the single child, at least once.
  • Either(*children): exactly one alternative; the one consuming most wins.

Match contract
- pattern.match(left, collected) -> (matched, left, collected)
  • left: observed leaves not consumed yet (from argusage.argv.parse_argv).
  • collected: leaves bound so far, in match order.
  • both lists are never mutated; new lists are returned.
  • on failure the original left/collected are handed back untouched.

Fixing (run once on a freshly parsed tree)
- fix_identities(): equal leaves (same class, same name) become one shared instance.
- fix_list_arguments(): leaves that may occur more than once along one either-group
  start as [] (arguments, valued options) or 0 (commands, flags) so matches
  accumulate instead of overwriting.

Quick example:
    >>> pattern = Required(Command("go"), OneOrMore(Argument("<dir>"))).fix()
    >>> pattern.match([Argument(None, "go"), Argument(None, "n"), Argument(None, "s")])
    (True, [], [Command('go', True), Argument('<dir>', ['n', 's'])])
"""
import copy
import re


def _accumulate(value, increment):
    """
    grow a count or a list of values by one match.

    counts only take counts and lists only take lists; booleans are not counts.
    """
    match value, increment:
        case bool(), _:
            raise TypeError("cannot accumulate into a boolean value")
        case int(), int():
            return value + increment
        case list(), list():
            return value + increment
        case _:
            raise TypeError("cannot accumulate %r into %r" % (increment, value))


def _extract(children, *types):
    """
    pop and return the first child whose exact type is one of ``types`` (or None).
    """
    for index, child in enumerate(children):
        if type(child) in types:
            return children.pop(index)
    return None


class Pattern:
    """
    Common behavior of every grammar node.

    Subclasses provide ``flat`` (leaves in declaration order) and ``match``.
    """

    def fix(self):
        """
        Normalize a freshly parsed tree: shared identities, then accumulators.
        """
        self.fix_identities()
        self.fix_list_arguments()
        return self

    def fix_identities(self, uniq=None):
        return self

    def fix_list_arguments(self):
        """
        Find leaves that can be matched more than once and make them accumulate.

        Only the default value of such leaves changes; the tree shape does not.
        """
        for group in self.either_groups():
            for leaf in group:
                if group.count(leaf) < 2:
                    continue
                for twin in group:
                    if twin != leaf:
                        continue
                    if type(twin) is Argument or type(twin) is Option and twin.argcount:
                        twin.value = []
                    elif type(twin) is Command or type(twin) is Option and not twin.argcount:
                        twin.value = 0
        return self

    def either_groups(self):
        """
        Expand the tree into every choice-resolved, flat sequence of leaves.

        Either branches into one group per alternative, Required/Optional are
        spliced in place, and OneOrMore contributes its children twice (enough
        to tell "may repeat" apart from "occurs once").
        """
        groups = [[self]]
        result = []
        while groups:
            children = groups.pop(0)
            if (either := _extract(children, Either)) is not None:
                groups.extend([child] + children for child in either.children)
            elif (branch := _extract(children, Required, Optional)) is not None:
                groups.append(branch.children + children)
            elif (repeated := _extract(children, OneOrMore)) is not None:
                groups.append(repeated.children * 2 + children)
            else:
                result.append(children)
        return result


class LeafPattern(Pattern):
    """
    A grammar node bound to a single observed token.

    Equality and hashing only look at the concrete class and the name; the
    value is payload and never participates.
    """

    def __init__(self, name, value=None):
        self.name = name
        self.value = value

    def __repr__(self):
        return "%s(%r, %r)" % (type(self).__name__, self.name, self.value)

    def __rich_repr__(self):
        yield self.name
        yield self.value

    def __eq__(self, other):
        return type(self) is type(other) and self.name == other.name

    def __hash__(self):
        return hash((type(self), self.name))

    @property
    def flat(self):
        return [self]

    def rebind(self, value):
        """
        Return a copy of this leaf carrying ``value``.
        """
        clone = copy.copy(self)
        clone.value = value
        return clone

    def single_match(self, left):
        """
        Locate the observed leaf this pattern consumes: (position, bound leaf) or (None, None).
        """
        raise NotImplementedError

    def match(self, left, collected=None):
        collected = [] if collected is None else collected
        position, found = self.single_match(left)
        if found is None:
            return False, left, collected
        left = left[:position] + left[position + 1:]

        # Only counts and lists accumulate; anything else is bound as observed.
        if isinstance(self.value, bool) or not isinstance(self.value, int | list):
            return True, left, collected + [found]

        increment = 1 if isinstance(self.value, int) else [found.value]
        for index, leaf in enumerate(collected):
            if leaf.name == self.name:
                leaf = leaf.rebind(_accumulate(leaf.value, increment))
                return True, left, collected[:index] + [leaf] + collected[index + 1:]
        return True, left, collected + [found.rebind(increment)]


class BranchPattern(Pattern):
    """
    A grammar node combining ordered children under a rule.
    """

    def __init__(self, *children):
        self.children = list(children)

    def __repr__(self):
        return "%s(%s)" % (type(self).__name__, ", ".join(map(repr, self.children)))

    def __rich_repr__(self):
        yield from self.children

    def __eq__(self, other):
        return type(self) is type(other) and self.children == other.children

    __hash__ = None

    @property
    def flat(self):
        return [leaf for child in self.children for leaf in child.flat]

    def fix_identities(self, uniq=None):
        """
        Point every occurrence of equal leaves at one canonical instance.

        The canonical instance is the first occurrence in ``flat`` order, so
        running this twice keeps the same references.
        """
        if uniq is None:
            uniq = {}
            for leaf in self.flat:
                uniq.setdefault(leaf, leaf)
        for index, child in enumerate(self.children):
            if isinstance(child, LeafPattern):
                self.children[index] = uniq[child]
            else:
                child.fix_identities(uniq)
        return self


class Argument(LeafPattern):

    def single_match(self, left):
        for index, leaf in enumerate(left):
            if type(leaf) is Argument:
                return index, Argument(self.name, leaf.value)
        return None, None


class Command(Argument):

    def __init__(self, name, value=False):
        super().__init__(name, value)

    def single_match(self, left):
        # A command only ever looks at the next positional.
        for index, leaf in enumerate(left):
            if type(leaf) is Argument:
                if leaf.value == self.name:
                    return index, Command(self.name, True)
                break
        return None, None


class Option(LeafPattern):
    """
    A switch, identified by its short and/or long spelling.

    Parameters
    - short: str | None, e.g. "-o".
    - long: str | None, e.g. "--output".
    - argcount: 0 (flag) or 1 (takes a value); anything else is rejected.
    - value: default value; a valued option without a default holds None.
    """

    def __init__(self, short=None, long=None, argcount=0, value=False):
        if argcount not in (0, 1):
            raise ValueError("option argcount must be 0 or 1 (got %r)" % (argcount,))
        self.short, self.long, self.argcount = short, long, argcount
        self.value = None if value is False and argcount else value

    @classmethod
    def parse(cls, description):
        """
        Build an option from one description line.

        Options and help text are separated by two spaces; option words are
        split on whitespace, commas and equal signs. A word that is not a
        switch means the option takes a value, whose default is read from a
        case-insensitive ``[default: X]`` in the help text.

        Examples
        - "-h, --help  Show help."             → Option('-h', '--help', 0, False)
        - "-o FILE  Output [default: a.out]"   → Option('-o', None, 1, 'a.out')
        """
        short, long, argcount, value = None, None, 0, False
        options, _, description = description.strip().partition("  ")
        for word in filter(None, re.split(r"[\s,=]+", options)):
            if word.startswith("--"):
                long = word
            elif word.startswith("-"):
                short = word
            else:
                argcount = 1
                if match := re.search(r"\[default: (.*)\]", description, flags=re.IGNORECASE):
                    value = match[1]
        return cls(short, long, argcount, value)

    @property
    def name(self):
        return self.long or self.short

    def __repr__(self):
        return "Option(%r, %r, %r, %r)" % (self.short, self.long, self.argcount, self.value)

    def __rich_repr__(self):
        yield self.short
        yield self.long
        yield self.argcount
        yield self.value

    def single_match(self, left):
        for index, leaf in enumerate(left):
            if self.name == leaf.name:
                return index, leaf
        return None, None


class Required(BranchPattern):

    def match(self, left, collected=None):
        collected = [] if collected is None else collected
        current, bound = left, collected
        for child in self.children:
            matched, current, bound = child.match(current, bound)
            if not matched:
                return False, left, collected
        return True, current, bound


class Optional(BranchPattern):

    def match(self, left, collected=None):
        collected = [] if collected is None else collected
        for child in self.children:
            _, left, collected = child.match(left, collected)
        return True, left, collected


class OneOrMore(BranchPattern):

    def match(self, left, collected=None):
        if len(self.children) != 1:
            raise TypeError("one-or-more pattern takes exactly one child (%d given)" % len(self.children))
        collected = [] if collected is None else collected
        current, bound, times = left, collected, 0
        while True:
            before = current
            matched, current, bound = self.children[0].match(current, bound)
            if not matched:
                break
            times += 1
            # zero-width repetition
            if current == before:
                break
        if times:
            return True, current, bound
        return False, left, collected


class Either(BranchPattern):

    def match(self, left, collected=None):
        collected = [] if collected is None else collected
        outcomes = [outcome for outcome in (child.match(left, collected) for child in self.children) if outcome[0]]
        if outcomes:
            # fewest leftovers wins; min() keeps the first declared on ties
            return min(outcomes, key=lambda outcome: len(outcome[1]))
        return False, left, collected


def dump_patterns(pattern, indent=0):
    """
    Render a pattern (or a list of patterns) as an indented, multi-line string.
    """
    space = " " * 4 * indent
    if isinstance(pattern, list):
        if not pattern:
            return space + "[]\n"
        return space + "[\n" + "".join(dump_patterns(item, indent + 1).rstrip() + "\n" for item in pattern) + space + "]\n"
    if isinstance(pattern, BranchPattern):
        return (
            space + type(pattern).__name__ + "(\n"
            + "".join(dump_patterns(child, indent + 1).rstrip() + "\n" for child in pattern.children)
            + space + ")\n"
        )
    return space + repr(pattern)


__all__ = (
    "Pattern",
    "LeafPattern",
    "BranchPattern",
    "Argument",
    "Command",
    "Option",
    "Required",
    "Optional",
    "OneOrMore",
    "Either",
    "dump_patterns",
)
