"""
Utils module behavioral tests (sentinel, coalesce, rename, mirror).

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from types import MappingProxyType
from unittest import TestCase

from cmdarg.utils import Unset, UnsetType, coalesce, mirror, rename


class TestUnset(TestCase):
    """The Unset sentinel."""

    def testSingleton(self):
        self.assertIs(UnsetType(), Unset)

    def testFalsy(self):
        self.assertFalse(Unset)

    def testRepr(self):
        self.assertEqual(repr(Unset), "Unset")

    def testFinalClass(self):
        with self.assertRaises(TypeError):
            type("Derived", (UnsetType,), {})

    def testNoUnionOperators(self):
        with self.assertRaises(TypeError):
            str | Unset  # NOQA: B-018


class TestCoalesce(TestCase):
    """Resolving Unset to defaults."""

    def testUnsetReplaced(self):
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")

    def testFalseyValuesPreserved(self):
        for value in (None, 0, "", ()):
            with self.subTest(value=value):
                self.assertIs(coalesce(value, "fallback"), value)


class TestRename(TestCase):
    """Renaming callables."""

    def testFunctionForm(self):
        def f(): ...
        self.assertIs(rename(f, "g"), f)
        self.assertEqual((f.__name__, f.__qualname__), ("g", "g"))

    def testDecoratorForm(self):
        @rename("g")
        def f(): ...
        self.assertEqual(f.__name__, "g")

    def testWrongArity(self):
        with self.assertRaises(TypeError):
            rename()


class TestMirror(TestCase):
    """Read-only frozen properties."""

    def testSequencesAreFrozen(self):
        class Holder:
            items = mirror("items")

            def __init__(self):
                self._items = [1, 2]

        holder = Holder()
        self.assertEqual(holder.items, (1, 2))
        with self.assertRaises(AttributeError):
            holder.items = ()

    def testMappingsAndSetsAreFrozen(self):
        class Holder:
            table = mirror("table")
            names = mirror("names")

            def __init__(self):
                self._table = {"a": 1}
                self._names = {"x"}

        holder = Holder()
        self.assertIsInstance(holder.table, MappingProxyType)
        self.assertEqual(holder.names, frozenset({"x"}))

    def testStringsPassThrough(self):
        class Holder:
            name = mirror("name")
            _name = "prog"

        self.assertEqual(Holder().name, "prog")

    def testNameMustBeString(self):
        with self.assertRaises(TypeError):
            mirror(1)  # type: ignore[arg-type]


if __name__ == '__main__':
    unittest.main()
