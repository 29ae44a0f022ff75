"""Account session feature for Stellar Quick Wallet."""

from stellar_wallet.features.account.reserve import (
    ReserveSummary,
    calculate_reserve,
    locked_reserve,
)
from stellar_wallet.features.account.service import IdentityCreation, SessionManager

__all__ = [
    "SessionManager",
    "IdentityCreation",
    "ReserveSummary",
    "calculate_reserve",
    "locked_reserve",
]
