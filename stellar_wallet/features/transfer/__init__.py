"""Transfer feature for Stellar Quick Wallet."""

from stellar_wallet.features.transfer.batch import (
    BatchExecutor,
    BatchOutcome,
    BatchRecipient,
    BatchReport,
)
from stellar_wallet.features.transfer.fees import estimate_total_fee
from stellar_wallet.features.transfer.service import PaymentBuilder

__all__ = [
    "PaymentBuilder",
    "BatchExecutor",
    "BatchOutcome",
    "BatchRecipient",
    "BatchReport",
    "estimate_total_fee",
]
