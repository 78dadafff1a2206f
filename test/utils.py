# python
"""
Utils module behavioral tests (Unset sentinel, coalesce, rename, mirror).

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from argot.utils import Unset, UnsetType, coalesce, mirror, rename


class TestUnset(TestCase):
    """Behavioral tests for the Unset sentinel."""

    def testSingleton(self):
        self.assertIs(UnsetType(), Unset)

    def testFalsey(self):
        self.assertFalse(Unset)

    def testRepr(self):
        self.assertEqual(repr(Unset), "Unset")

    def testNotSubclassable(self):
        with self.assertRaises(TypeError):
            class Derived(UnsetType):
                pass

    def testUnionWithTypes(self):
        self.assertIsInstance(Unset, str | Unset)
        self.assertIsInstance("text", Unset | str)


class TestCoalesce(TestCase):
    """Behavioral tests for coalesce()."""

    def testReplacesUnset(self):
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")
        self.assertIsNone(coalesce(Unset))

    def testKeepsFalseyValues(self):
        self.assertEqual(coalesce("", "fallback"), "")
        self.assertEqual(coalesce(0, "fallback"), 0)
        self.assertIsNone(coalesce(None, "fallback"))


class TestRename(TestCase):
    """Behavioral tests for rename()."""

    def testDirectForm(self):
        def function():
            pass

        self.assertIs(rename(function, "renamed"), function)
        self.assertEqual(function.__name__, "renamed")
        self.assertEqual(function.__qualname__, "renamed")

    def testDecoratorForm(self):
        @rename("renamed")
        def function():
            pass

        self.assertEqual(function.__name__, "renamed")

    def testArgumentChecks(self):
        with self.assertRaises(TypeError):
            rename()
        with self.assertRaises(TypeError):
            rename("not callable", "name")
        with self.assertRaises(TypeError):
            rename(len, "name")
        with self.assertRaises(TypeError):
            rename(1)


class TestMirror(TestCase):
    """Behavioral tests for mirror() properties."""

    def setUp(self) -> None:
        class Holder:
            items = mirror("items")
            mapping = mirror("mapping")
            missing = mirror("missing")

            def __init__(self):
                self._items = ["a", ["b"]]
                self._mapping = {"key": ["value"]}
                self._missing = Unset

        self.holder = Holder()

    def testSequencesAreFrozen(self):
        self.assertEqual(self.holder.items, ("a", ("b",)))

    def testMappingsAreCopied(self):
        mapping = self.holder.mapping
        self.assertEqual(mapping, {"key": ("value",)})
        mapping["other"] = 1
        self.assertNotIn("other", self.holder.mapping)

    def testUnsetIsMaterialized(self):
        self.assertIsNone(self.holder.missing)

    def testReadOnly(self):
        with self.assertRaises(AttributeError):
            self.holder.items = ()

    def testNameMustBeString(self):
        with self.assertRaises(TypeError):
            mirror(1)


if __name__ == "__main__":
    unittest.main()
