"""Payment history feature for Stellar Quick Wallet."""

from stellar_wallet.features.history.service import HistoryEntry, PaymentHistory

__all__ = ["PaymentHistory", "HistoryEntry"]
