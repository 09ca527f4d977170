"""
Tests for the Unset sentinel and the coalesce() helper.

This module verifies semantic guarantees of the `UnsetType` sentinel:
- Singleton identity (single instance per interpreter process).
- Falsy semantics and representation behavior.
- PEP 604 unions usable with isinstance().
- Finality (type cannot be subclassed).
"""
import unittest
from unittest import TestCase

from rich.console import Console

from argusage.utils import *


class UnsetTest(TestCase):
    """
    Test suite for the `UnsetType` singleton and `coalesce`.
    """

    def testSingleton(self) -> None:
        """
        The constructor returns the same object reference on every call.
        """
        self.assertIs(UnsetType(), UnsetType())
        self.assertIs(Unset, UnsetType())

    def testFalsy(self) -> None:
        self.assertFalse(bool(Unset))

    def testNotEqualToNoneOrFalse(self) -> None:
        """
        Falsy does not imply equality with other falsy values (None/False).
        """
        self.assertNotEqual(Unset, None)
        self.assertNotEqual(Unset, False)  # noqa: E712

    def testRepr(self) -> None:
        self.assertEqual(repr(Unset), "Unset")
        self.assertEqual(str(Unset), "Unset")

    def testRichConsolePrint(self) -> None:
        """
        Console.print(...) renders 'Unset' without ANSI when color is disabled.
        """
        console = Console(color_system=None, force_terminal=False)
        with console.capture() as capture:
            console.print(Unset)
        self.assertEqual(capture.get().strip(), "Unset")

    def testUnion(self) -> None:
        """
        `str | Unset` works as an isinstance() target.
        """
        self.assertTrue(isinstance("x", str | Unset))
        self.assertTrue(isinstance(Unset, str | Unset))
        self.assertFalse(isinstance(1, str | Unset))

    def testFinal(self) -> None:
        with self.assertRaises(TypeError):
            type("Derived", (UnsetType,), {})

    def testPackageExports(self) -> None:
        """
        The sentinel used by docopt() defaults is importable from the package.
        """
        import argusage

        self.assertIs(argusage.Unset, Unset)
        self.assertIs(argusage.coalesce, coalesce)
        self.assertIn("Unset", argusage.__all__)
        self.assertIn("UnsetType", argusage.__all__)

    def testCoalesce(self) -> None:
        """
        Only Unset is replaced; legitimate falsy values are preserved.
        """
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")
        self.assertIsNone(coalesce(Unset))
        self.assertIsNone(coalesce(None, "fallback"))
        self.assertEqual(coalesce(0, 1), 0)
        self.assertEqual(coalesce([], [1]), [])


if __name__ == "__main__":
    unittest.main()
