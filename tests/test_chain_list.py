import unittest
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from chain_list import NOT_FOUND, ChainList


class TestChainListConstruction(unittest.TestCase):
    def test_new_list_is_empty(self):
        chain = ChainList()
        self.assertEqual(chain.size(), 0)
        self.assertTrue(chain.is_empty())
        self.assertEqual(list(chain), [])


class TestChainListAppend(unittest.TestCase):
    def test_append_to_empty_returns_false(self):
        chain = ChainList()
        self.assertFalse(chain.append("a", 1))
        self.assertEqual(chain.size(), 1)

    def test_append_keeps_insertion_order(self):
        chain = ChainList()
        chain.append("a", 1)
        chain.append("b", 2)
        chain.append("c", 3)
        self.assertEqual(list(chain), [("a", 1), ("b", 2), ("c", 3)])

    def test_append_existing_head_updates_in_place(self):
        chain = ChainList()
        chain.append("a", 1)
        chain.append("b", 2)
        self.assertTrue(chain.append("a", 10))
        self.assertEqual(list(chain), [("a", 10), ("b", 2)])

    def test_append_existing_tail_updates_in_place(self):
        chain = ChainList()
        chain.append("a", 1)
        chain.append("b", 2)
        self.assertTrue(chain.append("b", 20))
        self.assertEqual(chain.size(), 2)
        self.assertEqual(chain.get_value("b"), 20)

    def test_append_existing_middle_updates_in_place(self):
        chain = ChainList()
        chain.append("a", 1)
        chain.append("b", 2)
        chain.append("c", 3)
        self.assertTrue(chain.append("b", 20))
        self.assertEqual(list(chain), [("a", 1), ("b", 20), ("c", 3)])


class TestChainListLookup(unittest.TestCase):
    def test_get_value_existing(self):
        chain = ChainList()
        chain.append("a", 1)
        chain.append("b", 2)
        self.assertEqual(chain.get_value("b"), 2)

    def test_get_value_missing_returns_sentinel(self):
        chain = ChainList()
        chain.append("a", 1)
        self.assertIs(chain.get_value("missing"), NOT_FOUND)

    def test_get_value_distinguishes_stored_none(self):
        chain = ChainList()
        chain.append("a", None)
        self.assertIsNone(chain.get_value("a"))
        self.assertIsNot(chain.get_value("a"), NOT_FOUND)

    def test_contains(self):
        chain = ChainList()
        chain.append("a", 1)
        self.assertTrue(chain.contains("a"))
        self.assertFalse(chain.contains("b"))

    def test_contains_on_empty(self):
        self.assertFalse(ChainList().contains("a"))


class TestChainListRemove(unittest.TestCase):
    def test_remove_from_empty(self):
        self.assertFalse(ChainList().remove("a"))

    def test_remove_head_keeps_rest(self):
        chain = ChainList()
        chain.append("a", 1)
        chain.append("b", 2)
        chain.append("c", 3)
        self.assertTrue(chain.remove("a"))
        self.assertEqual(list(chain), [("b", 2), ("c", 3)])

    def test_remove_middle(self):
        chain = ChainList()
        chain.append("a", 1)
        chain.append("b", 2)
        chain.append("c", 3)
        self.assertTrue(chain.remove("b"))
        self.assertEqual(list(chain), [("a", 1), ("c", 3)])

    def test_remove_tail_then_append(self):
        chain = ChainList()
        chain.append("a", 1)
        chain.append("b", 2)
        self.assertTrue(chain.remove("b"))
        chain.append("c", 3)
        self.assertEqual(list(chain), [("a", 1), ("c", 3)])

    def test_remove_missing(self):
        chain = ChainList()
        chain.append("a", 1)
        self.assertFalse(chain.remove("b"))
        self.assertEqual(chain.size(), 1)

    def test_remove_only_node(self):
        chain = ChainList()
        chain.append("a", 1)
        self.assertTrue(chain.remove("a"))
        self.assertTrue(chain.is_empty())


class TestChainListFind(unittest.TestCase):
    def test_find_returns_first_index(self):
        chain = ChainList()
        chain.append("a", "x")
        chain.append("b", "y")
        chain.append("c", "y")
        self.assertEqual(chain.find("x"), 0)
        self.assertEqual(chain.find("y"), 1)

    def test_find_uses_equality(self):
        chain = ChainList()
        chain.append("a", [1, 2])
        self.assertEqual(chain.find([1, 2]), 0)

    def test_find_missing(self):
        chain = ChainList()
        chain.append("a", 1)
        self.assertIsNone(chain.find(2))


class TestNotFound(unittest.TestCase):
    def test_sentinel_is_falsy(self):
        self.assertFalse(NOT_FOUND)

    def test_sentinel_repr(self):
        self.assertEqual(repr(NOT_FOUND), "NOT_FOUND")

    def test_sentinel_is_singleton(self):
        self.assertIs(type(NOT_FOUND)(), NOT_FOUND)


class TestChainListDunder(unittest.TestCase):
    def test_len(self):
        chain = ChainList()
        chain.append("a", 1)
        chain.append("b", 2)
        self.assertEqual(len(chain), 2)


if __name__ == "__main__":
    unittest.main()
