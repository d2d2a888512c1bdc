from .transfer_router import TransferRouter, TransferReceipt
from .fee_ledger import FeeLedgerSystem, build_fee_ledger

__all__ = [
    "TransferRouter",
    "TransferReceipt",
    "FeeLedgerSystem",
    "build_fee_ledger"
]
