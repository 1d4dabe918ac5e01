import sys
import os
import unittest
from collections import Counter

import numpy as np

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from binary_heap import BinaryHeap, heapsort

SEED = 42


class TestHeapsort(unittest.TestCase):

    def test_small_unsorted(self):
        values = [3, 1, 2]
        BinaryHeap.sort(values)
        self.assertEqual(values, [1, 2, 3])

    def test_empty(self):
        values = []
        BinaryHeap.sort(values)
        self.assertEqual(values, [])

    def test_single_element(self):
        values = [7]
        BinaryHeap.sort(values)
        self.assertEqual(values, [7])

    def test_two_elements(self):
        values = [2, 1]
        heapsort(values)
        self.assertEqual(values, [1, 2])

    def test_sorts_in_place_and_returns_none(self):
        values = [9, 4, 6]
        self.assertIsNone(heapsort(values))
        self.assertEqual(values, [4, 6, 9])

    def test_already_sorted_is_unchanged(self):
        values = list(range(25))
        heapsort(values)
        self.assertEqual(values, list(range(25)))

    def test_reverse_sorted(self):
        values = list(range(40, 0, -1))
        heapsort(values)
        self.assertEqual(values, list(range(1, 41)))

    def test_duplicates(self):
        values = [4, 1, 4, 2, 1, 4, 3, 2]
        heapsort(values)
        self.assertEqual(values, [1, 1, 2, 2, 3, 4, 4, 4])

    def test_all_equal(self):
        values = [5] * 10
        heapsort(values)
        self.assertEqual(values, [5] * 10)

    def test_strings(self):
        values = ["pear", "apple", "fig", "banana"]
        heapsort(values)
        self.assertEqual(values, ["apple", "banana", "fig", "pear"])

    def test_random_lists_are_sorted_permutations(self):
        rng = np.random.default_rng(SEED)
        for n in [0, 1, 2, 3, 10, 31, 32, 33, 257]:
            values = rng.integers(-100, 100, size=n).tolist()
            original = list(values)
            heapsort(values)
            self.assertTrue(all(values[i] <= values[i + 1] for i in range(len(values) - 1)))
            self.assertEqual(Counter(values), Counter(original))
            self.assertEqual(values, sorted(original))

    def test_numpy_int_array(self):
        rng = np.random.default_rng(SEED)
        arr = rng.integers(0, 1000, size=200)
        expected = np.sort(arr)
        heapsort(arr)
        np.testing.assert_array_equal(arr, expected)

    def test_numpy_float_array(self):
        rng = np.random.default_rng(SEED)
        arr = rng.standard_normal(128)
        expected = np.sort(arr)
        BinaryHeap.sort(arr)
        np.testing.assert_array_equal(arr, expected)

    def test_sorted_result_is_idempotent(self):
        rng = np.random.default_rng(SEED)
        values = rng.integers(0, 50, size=100).tolist()
        heapsort(values)
        once = list(values)
        heapsort(values)
        self.assertEqual(values, once)


if __name__ == "__main__":
    unittest.main()
