"""
Test suite for InMemoryLedger.
Tests primitives, allowances, atomic scopes and the audit trail.
"""

import unittest

from feeledger.core.enums import LedgerOperationType
from feeledger.core.exceptions import (
    ArithmeticOverflowError,
    InsufficientBalanceError,
    InvalidDestinationError
)
from feeledger.ledger_handler.in_memory_ledger import InMemoryLedger
from feeledger.outils.address import ZERO_ADDRESS, address_from_int
from feeledger.outils.amounts import MAX_UINT256

ALICE = address_from_int(0xA1A1A10000)
BOB = address_from_int(0xB0B0B00000)
CAROL = address_from_int(0xCA401C0000)


class TestInMemoryLedger(unittest.TestCase):

    def setUp(self):
        self.ledger = InMemoryLedger({ALICE: 1000})

    def test_initial_balances_are_minted(self):
        self.assertEqual(self.ledger.balance_of(ALICE), 1000)
        self.assertEqual(self.ledger.total_supply, 1000)
        self.assertEqual(self.ledger.balance_of(BOB), 0)
        self.assertEqual(len(self.ledger.get_operations(operation_type=LedgerOperationType.MINT)), 1)

    def test_raw_transfer_moves_balance(self):
        self.assertTrue(self.ledger.raw_transfer(ALICE, BOB, 400))

        self.assertEqual(self.ledger.balance_of(ALICE), 600)
        self.assertEqual(self.ledger.balance_of(BOB), 400)
        self.assertEqual(self.ledger.total_supply, 1000)
        self.assertTrue(self.ledger.validate_supply_consistency())

    def test_raw_transfer_to_self_keeps_balance(self):
        self.ledger.raw_transfer(ALICE, ALICE, 1000)
        self.assertEqual(self.ledger.balance_of(ALICE), 1000)

    def test_raw_transfer_insufficient_balance(self):
        with self.assertRaises(InsufficientBalanceError) as context:
            self.ledger.raw_transfer(ALICE, BOB, 1001)

        self.assertEqual(context.exception.required, 1001)
        self.assertEqual(context.exception.available, 1000)
        self.assertEqual(context.exception.account, ALICE)
        self.assertEqual(self.ledger.balance_of(ALICE), 1000)

    def test_raw_transfer_to_zero_address_rejected(self):
        with self.assertRaises(InvalidDestinationError):
            self.ledger.raw_transfer(ALICE, ZERO_ADDRESS, 1)

    def test_burn_reduces_supply(self):
        self.ledger.burn(ALICE, 250)

        self.assertEqual(self.ledger.balance_of(ALICE), 750)
        self.assertEqual(self.ledger.total_supply, 750)

    def test_burn_insufficient_balance(self):
        with self.assertRaises(InsufficientBalanceError):
            self.ledger.burn(BOB, 1)

    def test_mint_overflow_rejected(self):
        with self.assertRaises(ArithmeticOverflowError):
            self.ledger.mint(BOB, MAX_UINT256)
        self.assertEqual(self.ledger.total_supply, 1000)
        self.assertEqual(self.ledger.balance_of(BOB), 0)

    def test_mint_to_zero_address_rejected(self):
        with self.assertRaises(InvalidDestinationError):
            self.ledger.mint(ZERO_ADDRESS, 1)

    def test_allowance_spend(self):
        self.ledger.approve(ALICE, CAROL, 300)
        self.ledger.spend_allowance(ALICE, CAROL, 200)

        self.assertEqual(self.ledger.allowance(ALICE, CAROL), 100)
        with self.assertRaises(InsufficientBalanceError):
            self.ledger.spend_allowance(ALICE, CAROL, 101)

    def test_atomic_scope_rolls_back_on_error(self):
        operations_before = len(self.ledger.get_operations())

        with self.assertRaises(InsufficientBalanceError):
            with self.ledger.atomic():
                self.ledger.raw_transfer(ALICE, BOB, 600)
                self.ledger.burn(BOB, 100)
                self.ledger.raw_transfer(ALICE, BOB, 600)

        self.assertEqual(self.ledger.balance_of(ALICE), 1000)
        self.assertEqual(self.ledger.balance_of(BOB), 0)
        self.assertEqual(self.ledger.total_supply, 1000)
        self.assertEqual(len(self.ledger.get_operations()), operations_before)

    def test_nested_atomic_scope_restores_from_outermost(self):
        with self.assertRaises(InsufficientBalanceError):
            with self.ledger.atomic():
                self.ledger.raw_transfer(ALICE, BOB, 100)
                with self.ledger.atomic():
                    self.ledger.raw_transfer(ALICE, BOB, 100)
                self.ledger.burn(CAROL, 1)

        self.assertEqual(self.ledger.balance_of(ALICE), 1000)
        self.assertEqual(self.ledger.balance_of(BOB), 0)

    def test_atomic_scope_commits_on_success(self):
        with self.ledger.atomic():
            self.ledger.raw_transfer(ALICE, BOB, 100)
            self.ledger.burn(BOB, 40)

        self.assertEqual(self.ledger.balance_of(BOB), 60)
        self.assertEqual(self.ledger.total_supply, 960)

    def test_operation_history_limit(self):
        self.ledger.raw_transfer(ALICE, BOB, 1)
        self.ledger.raw_transfer(ALICE, BOB, 2)

        last = self.ledger.get_operations(limit=1)
        self.assertEqual(len(last), 1)
        self.assertEqual(last[0].amount, 2)
        self.assertEqual(last[0].operation_type, LedgerOperationType.TRANSFER)


if __name__ == "__main__":
    unittest.main()
