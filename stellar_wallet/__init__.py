"""Stellar Quick Wallet - an interactive testnet wallet for the terminal.

This package is organized into feature-based modules:
- features.account: Session identity and reserve calculation
- features.transfer: Payments, airdrops and fee estimates
- features.monitoring: Polling balance monitor
- features.history: Recent payment history
- shared: Shared utilities (network, validation, logging, errors)
"""

from stellar_wallet.config import WalletConfig
from stellar_wallet.shared import (
    AddressValidator,
    AmountValidator,
    NetworkClient,
    NetworkError,
    NetworkErrorType,
    RetryConfig,
    TimeoutConfig,
    ValidationResult,
    WalletError,
    WalletErrorKind,
)

__version__ = "0.1.0"
__all__ = [
    "WalletConfig",
    "NetworkClient",
    "NetworkError",
    "NetworkErrorType",
    "RetryConfig",
    "TimeoutConfig",
    "AddressValidator",
    "AmountValidator",
    "ValidationResult",
    "WalletError",
    "WalletErrorKind",
]
