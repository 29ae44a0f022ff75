"""Feature modules for Stellar Quick Wallet.

- account: Session identity management and reserve calculation
- transfer: Single payments, airdrops and fee estimates
- monitoring: Polling balance monitor
- history: Recent payment history
"""

from stellar_wallet.features import account
from stellar_wallet.features import history
from stellar_wallet.features import monitoring
from stellar_wallet.features import transfer

__all__ = ["account", "history", "monitoring", "transfer"]
