"""Shared utilities for Stellar Quick Wallet."""

from stellar_wallet.shared.errors import WalletError, WalletErrorKind
from stellar_wallet.shared.logging import (
    LoggingConfig,
    LogLevel,
    format_error_for_user,
    get_user_friendly_error,
    sanitize_dict,
    sanitize_message,
    setup_logging,
)
from stellar_wallet.shared.network import (
    NetworkClient,
    NetworkError,
    NetworkErrorType,
    RetryConfig,
    TimeoutConfig,
)
from stellar_wallet.shared.validation import (
    AddressValidator,
    AmountValidator,
    SecretValidator,
    ValidationResult,
)

__all__ = [
    "WalletError",
    "WalletErrorKind",
    "NetworkClient",
    "NetworkError",
    "NetworkErrorType",
    "RetryConfig",
    "TimeoutConfig",
    "AddressValidator",
    "AmountValidator",
    "SecretValidator",
    "ValidationResult",
    "LoggingConfig",
    "LogLevel",
    "format_error_for_user",
    "get_user_friendly_error",
    "sanitize_dict",
    "sanitize_message",
    "setup_logging",
]
