"""Balance monitoring feature for Stellar Quick Wallet."""

from stellar_wallet.features.monitoring.service import BalanceMonitor

__all__ = ["BalanceMonitor"]
