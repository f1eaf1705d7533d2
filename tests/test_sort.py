import math
import random
import unittest

import numpy as np

from numfuncs.config import ValidationConfig
from numfuncs.functions import sort, sort_async
from numfuncs.validation import NonFiniteInputError, NumericInputError


class TestSort(unittest.TestCase):
    def test_sorts_numbers(self):
        self.assertEqual(sort(23, 32, 3, 54, 56, 5, 76, 76), [3, 5, 23, 32, 54, 56, 76, 76])
        self.assertEqual(sort(5, 10, 15, 20, 25), [5, 10, 15, 20, 25])

    def test_empty_input(self):
        self.assertEqual(sort(), [])

    def test_negative_numbers(self):
        self.assertEqual(sort(-5, -10, -1, -20), [-20, -10, -5, -1])

    def test_single_element(self):
        self.assertEqual(sort(42), [42])

    def test_mixed_ints_and_floats(self):
        self.assertEqual(sort(2, 1.5, -0.25, 1), [-0.25, 1, 1.5, 2])

    def test_result_is_ordered_permutation(self):
        rng = random.Random(7)
        values = [rng.uniform(-1000, 1000) for _ in range(200)] + [3, 3, 3]
        result = sort(*values)

        self.assertEqual(sorted(values), result)
        for a, b in zip(result, result[1:]):
            self.assertLessEqual(a, b)

    def test_idempotent(self):
        once = sort(9, -1, 4, 4, 0.5)
        self.assertEqual(sort(*once), once)

    def test_returns_new_list(self):
        values = [3, 1, 2]
        result = sort(*values)
        self.assertEqual(values, [3, 1, 2])
        self.assertIsNot(result, values)

    def test_stable_for_equal_values(self):
        result = sort(1.0, 1, 0)
        self.assertIs(type(result[1]), float)
        self.assertIs(type(result[2]), int)

    def test_infinities(self):
        self.assertEqual(sort(math.inf, 0, -math.inf), [-math.inf, 0, math.inf])

    def test_nan_goes_last(self):
        result = sort(3, math.nan, -1, math.nan, 2)
        self.assertEqual(result[:3], [-1, 2, 3])
        self.assertTrue(all(math.isnan(v) for v in result[3:]))

    def test_disallowed_nan(self):
        with self.assertRaises(NonFiniteInputError) as ctx:
            sort(1, math.nan, validation=ValidationConfig(allow_nan=False))
        self.assertEqual(ctx.exception.position, 1)

    def test_disallowed_infinity(self):
        with self.assertRaises(NonFiniteInputError):
            sort(-math.inf, validation=ValidationConfig(allow_infinity=False))

    def test_numpy_scalars(self):
        result = sort(np.float64(2.5), np.int32(-3))
        self.assertEqual(result, [-3, 2.5])
        self.assertIs(type(result[0]), int)

    def test_rejects_non_numbers(self):
        with self.assertRaises(NumericInputError):
            sort(1, "2")
        with self.assertRaises(TypeError):
            sort(None)


class TestSortAsync(unittest.IsolatedAsyncioTestCase):
    async def test_awaited_result_matches_sort(self):
        result = await sort_async(23, 32, 3, 54, 56, 5, 76, 76)
        self.assertEqual(result, [3, 5, 23, 32, 54, 56, 76, 76])

    async def test_empty_and_single(self):
        self.assertEqual(await sort_async(), [])
        self.assertEqual(await sort_async(42), [42])

    async def test_validation_errors_raise_on_await(self):
        with self.assertRaises(NumericInputError):
            await sort_async(1, object())


if __name__ == "__main__":
    unittest.main()
