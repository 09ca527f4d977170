"""
Argv module behavioral tests (resolution of raw tokens against declared options).

Scope
- Validate long options (exact, prefix, inline and spaced values), short clusters,
  positionals, "--" and options_first.
- Validate input faults for unknown, ambiguous and mis-valued options.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from argusage import Argument, Option, parse_argv
from argusage.faults import (
    InputError,
    UnknownSwitchError,
    AmbiguousSwitchError,
    OptionValueRequiredError,
    FlagAssignmentError,
)


class TestParseArgv(TestCase):
    """Behavioral tests for parse_argv()."""

    def setUp(self):
        self.options = [
            Option("-h"),
            Option("-v", "--verbose"),
            Option("-f", "--file", 1),
        ]

    def assertResolved(self, source, expected, **kwargs):
        self.assertEqual(repr(parse_argv(source, self.options, **kwargs)), repr(expected))

    def testEmpty(self):
        self.assertEqual(parse_argv("", self.options), [])

    def testFlags(self):
        self.assertResolved("-h", [Option("-h", None, 0, True)])
        self.assertResolved("-h --verbose", [Option("-h", None, 0, True), Option("-v", "--verbose", 0, True)])

    def testValuedOption(self):
        self.assertResolved(
            "-h --file f.txt arg",
            [Option("-h", None, 0, True), Option("-f", "--file", 1, "f.txt"), Argument(None, "arg")],
        )

    def testInlineValue(self):
        self.assertResolved("--file=f.txt", [Option("-f", "--file", 1, "f.txt")])

    def testShortCluster(self):
        self.assertResolved(
            "-hv -ffile",
            [Option("-h", None, 0, True), Option("-v", "--verbose", 0, True), Option("-f", "--file", 1, "file")],
        )

    def testShortValueFromNextToken(self):
        self.assertResolved("-hf out", [Option("-h", None, 0, True), Option("-f", "--file", 1, "out")])

    def testUniquePrefix(self):
        self.assertResolved("--verb", [Option("-v", "--verbose", 0, True)])
        self.assertResolved("--fi=x", [Option("-f", "--file", 1, "x")])

    def testDoubleDashEndsOptions(self):
        self.assertResolved(
            "-h arg -- -v",
            [Option("-h", None, 0, True), Argument(None, "arg"), Argument(None, "--"), Argument(None, "-v")],
        )

    def testSingleDashIsPositional(self):
        self.assertResolved("-", [Argument(None, "-")])

    def testOptionsFirst(self):
        self.assertResolved(
            "-h arg -v",
            [Option("-h", None, 0, True), Argument(None, "arg"), Argument(None, "-v")],
            options_first=True,
        )

    def testOptionsAnywhereByDefault(self):
        self.assertResolved(
            "arg -v",
            [Argument(None, "arg"), Option("-v", "--verbose", 0, True)],
        )

    def testTokenList(self):
        self.assertResolved(["--file", "two words"], [Option("-f", "--file", 1, "two words")])

    def testDeclaredOptionsUntouched(self):
        parse_argv("-h --file x", self.options)
        self.assertIs(self.options[0].value, False)
        self.assertIsNone(self.options[2].value)

    def testUnknownLong(self):
        with self.assertRaises(UnknownSwitchError):
            parse_argv("--xyz", self.options)

    def testUnknownShort(self):
        with self.assertRaises(UnknownSwitchError):
            parse_argv("-hx", self.options)

    def testAmbiguousPrefix(self):
        options = [Option(None, "--version"), Option(None, "--verbose")]
        with self.assertRaises(AmbiguousSwitchError):
            parse_argv("--ver", options)

    def testExactMatchBeatsPrefix(self):
        options = [Option(None, "--aabb"), Option(None, "--aa")]
        self.assertEqual(repr(parse_argv("--aa", options)), repr([Option(None, "--aa", 0, True)]))

    def testAmbiguousShort(self):
        with self.assertRaises(AmbiguousSwitchError):
            parse_argv("-x", [Option("-x"), Option("-x", "--xx")])

    def testValueRequired(self):
        with self.assertRaises(OptionValueRequiredError):
            parse_argv("--file", self.options)
        with self.assertRaises(OptionValueRequiredError):
            parse_argv("-f", self.options)

    def testFlagAssignment(self):
        with self.assertRaises(FlagAssignmentError):
            parse_argv("--verbose=1", self.options)

    def testFaultsAreInputErrors(self):
        with self.assertRaises(InputError):
            parse_argv("--xyz", self.options)


if __name__ == "__main__":
    unittest.main()
