"""
Test suite for address and amount helpers.
"""

import unittest

from feeledger.core.exceptions import ArithmeticOverflowError, InvalidParameterError
from feeledger.outils.address import (
    ZERO_ADDRESS,
    address_from_int,
    address_to_int,
    is_zero_address,
    normalize_address
)
from feeledger.outils.amounts import (
    MAX_UINT256,
    checked_add,
    checked_div,
    checked_mul,
    checked_sub,
    validate_amount
)


class TestAddress(unittest.TestCase):

    def test_address_from_int_pads_to_forty_digits(self):
        self.assertEqual(address_from_int(1), "0x" + "0" * 39 + "1")
        self.assertEqual(address_from_int(0), ZERO_ADDRESS)

    def test_normalize_lowercases_and_accepts_ints(self):
        mixed = "0x" + "AbCd" * 10
        self.assertEqual(normalize_address(mixed), "0x" + "abcd" * 10)
        self.assertEqual(normalize_address(255), "0x" + "0" * 38 + "ff")
        self.assertEqual(normalize_address("ab" * 20), "0x" + "ab" * 20)

    def test_address_to_int(self):
        self.assertEqual(address_to_int(address_from_int(12345)), 12345)

    def test_zero_address_detection(self):
        self.assertTrue(is_zero_address(0))
        self.assertTrue(is_zero_address(ZERO_ADDRESS))
        self.assertFalse(is_zero_address(1))

    def test_invalid_addresses_rejected(self):
        for bad in ("0x1234", "0x" + "zz" * 20, None, 1.5, True, -1, 2 ** 160):
            with self.assertRaises(InvalidParameterError):
                normalize_address(bad)


class TestAmounts(unittest.TestCase):

    def test_validate_amount_bounds(self):
        self.assertEqual(validate_amount(0), 0)
        self.assertEqual(validate_amount(MAX_UINT256), MAX_UINT256)
        with self.assertRaises(ArithmeticOverflowError):
            validate_amount(MAX_UINT256 + 1)
        with self.assertRaises(InvalidParameterError):
            validate_amount(-1)
        with self.assertRaises(InvalidParameterError):
            validate_amount(1.0)
        with self.assertRaises(InvalidParameterError):
            validate_amount(True)

    def test_checked_operations_reject_out_of_range_results(self):
        self.assertEqual(checked_add(MAX_UINT256 - 1, 1), MAX_UINT256)
        with self.assertRaises(ArithmeticOverflowError):
            checked_add(MAX_UINT256, 1)
        with self.assertRaises(ArithmeticOverflowError):
            checked_mul(MAX_UINT256, 2)
        with self.assertRaises(ArithmeticOverflowError):
            checked_sub(1, 2)
        with self.assertRaises(ArithmeticOverflowError):
            checked_div(1, 0)

    def test_checked_div_truncates(self):
        self.assertEqual(checked_div(999, 100), 9)
        self.assertEqual(checked_sub(10, 10), 0)


if __name__ == "__main__":
    unittest.main()
