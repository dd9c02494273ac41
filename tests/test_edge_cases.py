"""Unit tests for edge cases and error handling in FamilyStore.

Tests unusual graphs, error conditions and boundary cases that might occur
in real-world usage.
"""

import unittest
from types import SimpleNamespace

from familystore import (
    DictBackend,
    FamilyStore,
    FamilyStoreError,
    InconsistentComparisonError,
    InvalidArgumentError,
    Resolution,
)


class TestErrorHierarchy(unittest.TestCase):
    """All library errors share one base class."""

    def test_invalid_argument(self):
        self.assertTrue(issubclass(InvalidArgumentError, FamilyStoreError))
        self.assertTrue(issubclass(InvalidArgumentError, ValueError))

    def test_inconsistent_comparison(self):
        self.assertTrue(issubclass(InconsistentComparisonError, FamilyStoreError))
        self.assertTrue(issubclass(InconsistentComparisonError, RuntimeError))

    def test_type_error_is_chained(self):
        s1 = FamilyStore('s1', DictBackend({1: 'x', 'a': 'y'}))
        s2 = FamilyStore('s2', DictBackend({1: 'x', 'a': 'y'}))

        with self.assertRaises(InconsistentComparisonError) as ctx:
            s1.equals(s2)
        self.assertIsInstance(ctx.exception.__cause__, TypeError)
        self.assertIn('Unstable sort', str(ctx.exception))


class TestEmptyFamilies(unittest.TestCase):
    """Stores with no data and no parents."""

    def setUp(self):
        self.store = FamilyStore('empty', DictBackend())

    def test_reads(self):
        self.assertEqual(self.store.keys(), [])
        self.assertEqual(self.store.pairs(), [])
        self.assertEqual(self.store.to_dict(), {})
        self.assertIsNone(self.store.get('a'))
        self.assertEqual(self.store.get_owner('a'), Resolution())

    def test_clear_empty(self):
        self.assertIs(self.store.clear(), self.store)
        self.assertEqual(self.store.own_keys(), [])

    def test_delete_missing(self):
        self.store.delete('missing')
        self.assertEqual(self.store.own_keys(), [])


class TestUnusualGraphs(unittest.TestCase):
    """Cycles and shared ancestors never break reads."""

    def test_owner_in_cycle(self):
        f1 = FamilyStore('f1', DictBackend())
        f2 = FamilyStore('f2', DictBackend({'k': 'v'}))
        f1.inherit(f2)
        f2.inherit(f1)

        self.assertEqual(f1.get_owner('k'), Resolution('v', f2, 1))
        self.assertEqual(f2.get_owner('k'), Resolution('v', f2, 0))
        self.assertEqual(f1.keys(), ['k'])

    def test_parent_reaching_back_to_child_name(self):
        # A foreign node named like the child still counts as a duplicate
        child = FamilyStore('child', DictBackend())
        twin = SimpleNamespace(name='child', store=DictBackend(), parents=[])
        self.assertFalse(child.inherit(twin))

    def test_parent_added_after_reads(self):
        child = FamilyStore('child', DictBackend({'a': 1}))
        self.assertEqual(child.to_dict(), {'a': 1})

        child.inherit(FamilyStore('late', DictBackend({'b': 2})))
        self.assertEqual(child.to_dict(), {'a': 1, 'b': 2})

    def test_equals_with_different_lengths_skips_sorting(self):
        # Unorderable keys only matter once both sides have the same size
        s1 = FamilyStore('s1', DictBackend({1: 'x', 'a': 'y'}))
        s2 = FamilyStore('s2', DictBackend({1: 'x'}))
        self.assertFalse(s1.equals(s2))

    def test_equals_foreign_node(self):
        store = FamilyStore('s1', DictBackend({'a': 1}))
        foreign = SimpleNamespace(name='foreign', store=DictBackend({'a': 1}), parents=[])
        self.assertTrue(store.equals(foreign))

    def test_reads_do_not_mutate(self):
        parent = FamilyStore('parent', DictBackend({'a': 1}))
        child = FamilyStore('child', DictBackend({'b': 2}), inherit=[parent])

        child.keys()
        child.pairs()
        child.to_dict()
        child.get('zzz')

        self.assertEqual(child.parents, (parent,))
        self.assertEqual(child.own_pairs(), [('b', 2)])
        self.assertEqual(parent.own_pairs(), [('a', 1)])


if __name__ == '__main__':
    unittest.main()
